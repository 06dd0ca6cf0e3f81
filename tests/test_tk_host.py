"""Tests for the Tk result pane host using stand-in widgets."""

from __future__ import annotations

import pytest

pytest.importorskip("tkinter")

from oidlookup.buffers import ResultBufferManager  # noqa: E402
from oidlookup.gui import TkBufferHost  # noqa: E402
from oidlookup.structures import BufferState  # noqa: E402


class FakeWidget:
    """Records configuration and text the way a Tk Text widget would."""

    def __init__(self) -> None:
        self.options: dict = {"state": "disabled"}
        self.content = ""

    def config(self, **options) -> None:
        self.options.update(options)

    def delete(self, start, end) -> None:
        self._require_normal()
        self.content = ""

    def insert(self, index, text) -> None:
        self._require_normal()
        self.content += text

    def see(self, index) -> None:
        pass

    def _require_normal(self) -> None:
        assert self.options["state"] == "normal", "edit while pane is disabled"


@pytest.fixture
def tk_host():
    return TkBufferHost(FakeWidget(), FakeWidget())


def test_present_renders_and_disables_pane(tk_host, settings):
    buffer = ResultBufferManager(tk_host, settings).present("cmd", ["a", "b"])

    assert tk_host.pane.content == "cmd\na\nb"
    assert tk_host.pane.options["state"] == "disabled"
    assert tk_host.pane.options["height"] == settings.buffer_size
    assert tk_host.frame.options["text"] == settings.buffer_name
    assert buffer.state is BufferState.LOCKED


def test_pane_is_disabled_when_population_fails(tk_host, settings, monkeypatch):
    manager = ResultBufferManager(tk_host, settings)

    def broken_compose(command_line, output_lines):
        raise RuntimeError("boom")

    monkeypatch.setattr(manager, "compose", broken_compose)
    with pytest.raises(RuntimeError):
        manager.present("cmd", ["a"])

    assert tk_host.current.state is BufferState.LOCKED
    assert tk_host.pane.options["state"] == "disabled"


def test_repeated_present_replaces_content(tk_host, settings):
    manager = ResultBufferManager(tk_host, settings)
    manager.present("cmd", ["first"])
    second = manager.present("cmd", ["second"])

    assert tk_host.current is second
    assert tk_host.pane.content == "cmd\nsecond"
    assert tk_host.pane.options["state"] == "disabled"


def test_delete_of_absent_buffer_is_a_no_op(tk_host):
    tk_host.delete_buffer("missing")
    assert tk_host.current is None
    assert tk_host.pane.content == ""
