"""Lifecycle of the single named result buffer."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, List, Sequence

from .configuration import OidLookupConfig
from .host import BufferHost
from .structures import ResultBuffer

logger = logging.getLogger(__name__)


class ResultBufferManager:
    """Owns the scratch buffer named in the settings.

    Every request replaces the previous buffer: the old one is deleted, a
    new writable one is created and filled, and it is locked read-only
    before control returns to the caller.
    """

    def __init__(self, host: BufferHost, settings: OidLookupConfig) -> None:
        self.host = host
        self.settings = settings

    @contextmanager
    def scratch(self) -> Iterator[ResultBuffer]:
        """Yield a fresh writable buffer and lock it on the way out."""

        name = self.settings.buffer_name
        if self.host.has_buffer(name):
            logger.debug("Replacing existing buffer %r", name)
        self.host.delete_buffer(name)

        buffer = self.host.create_buffer(name, self.settings.buffer_size)
        try:
            yield buffer
        finally:
            self.host.lock_buffer(buffer)

    def present(self, command_line: str, output_lines: Sequence[str]) -> ResultBuffer:
        """Show translator output, optionally headed by its command line."""

        with self.scratch() as buffer:
            buffer.set_lines(self.compose(command_line, output_lines))
            buffer.syntax = self.settings.syntax
        self.host.show_buffer(buffer)
        return buffer

    def compose(self, command_line: str, output_lines: Sequence[str]) -> List[str]:
        if self.settings.echo_command:
            return [command_line, *output_lines]
        return list(output_lines)
