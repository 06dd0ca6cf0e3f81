"""Editor surfaces consumed by the lookup commands."""

from __future__ import annotations

import logging
from typing import Dict, Optional, Protocol

from .extraction import virtual_column_to_index, word_at
from .structures import ResultBuffer

logger = logging.getLogger(__name__)


class EditorContext(Protocol):
    """Read-only view of the text around the cursor."""

    def current_line(self) -> str: ...

    def cursor_index(self) -> int:
        """0-based character index of the cursor in ``current_line()``."""
        ...

    def current_word(self) -> str: ...


class BufferHost(Protocol):
    """Primitives for creating and showing named scratch buffers."""

    def has_buffer(self, name: str) -> bool: ...

    def delete_buffer(self, name: str) -> None:
        """Remove the named buffer; a missing buffer is not an error."""
        ...

    def create_buffer(self, name: str, height: int) -> ResultBuffer: ...

    def lock_buffer(self, buffer: ResultBuffer) -> None:
        """Make the buffer read-only on the host surface."""
        ...

    def show_buffer(self, buffer: ResultBuffer) -> None: ...


class TextContext:
    """Editor context over a single line and a 1-based display column."""

    def __init__(self, line: str = "", column: int = 1) -> None:
        self.line = line
        self.column = column

    def current_line(self) -> str:
        return self.line

    def cursor_index(self) -> int:
        return virtual_column_to_index(self.line, self.column)

    def current_word(self) -> str:
        return word_at(self.line, self.cursor_index())


class MemoryBufferHost:
    """Keeps scratch buffers in a dictionary keyed by name."""

    def __init__(self) -> None:
        self.buffers: Dict[str, ResultBuffer] = {}
        self.focused: Optional[str] = None

    def has_buffer(self, name: str) -> bool:
        return name in self.buffers

    def delete_buffer(self, name: str) -> None:
        if self.buffers.pop(name, None) is None:
            logger.debug("Buffer %r already absent", name)
        if self.focused == name:
            self.focused = None

    def create_buffer(self, name: str, height: int) -> ResultBuffer:
        buffer = ResultBuffer(name=name, height=height)
        self.buffers[name] = buffer
        return buffer

    def lock_buffer(self, buffer: ResultBuffer) -> None:
        buffer.lock()

    def show_buffer(self, buffer: ResultBuffer) -> None:
        self.focused = buffer.name
