"""Shared fixtures for the oidlookup tests."""

from __future__ import annotations

import os
from typing import Any, Callable, Iterator, List

import pytest

from oidlookup.configuration import OidLookupConfig, reset_settings_cache
from oidlookup.host import MemoryBufferHost
from oidlookup.invoker import TranslatorRunner
from oidlookup.structures import InvocationSpec, TranslationResult


class FakeRunner(TranslatorRunner):
    """Records invocations and answers with canned output."""

    def __init__(self, output: List[str] | None = None) -> None:
        self.output = list(output or [])
        self.calls: List[InvocationSpec] = []

    def run(self, spec: InvocationSpec) -> TranslationResult:
        self.calls.append(spec)
        return TranslationResult(
            command_line=spec.command_line,
            output_lines=list(self.output),
            returncode=0,
        )


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Keep real config files and OIDLOOKUP_* variables out of the tests."""

    for key in list(os.environ):
        if key.startswith("OIDLOOKUP_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setenv("USERPROFILE", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture
def make_settings() -> Callable[..., OidLookupConfig]:
    def factory(**overrides: Any) -> OidLookupConfig:
        return OidLookupConfig.model_validate(overrides)

    return factory


@pytest.fixture
def settings(make_settings) -> OidLookupConfig:
    return make_settings()


@pytest.fixture
def host() -> MemoryBufferHost:
    return MemoryBufferHost()


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner(
        [
            "SNMPv2-MIB::sysName",
            "sysName OBJECT-TYPE",
            "  -- FROM\tSNMPv2-MIB",
        ]
    )
