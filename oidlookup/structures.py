"""Core data structures for the oidlookup translator front-end."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Tuple, Union

from .errors import BufferHostError


class LookupMode(Enum):
    """Parameter sets understood by the translator."""

    OID = auto()
    LABEL = auto()
    LIST_ALL = auto()


@dataclass(frozen=True)
class ByOid:
    """Numeric OID lookup. ``None`` means take the OID under the cursor."""

    oid: Optional[str] = None


@dataclass(frozen=True)
class ByLabel:
    """Symbolic label lookup. ``None`` means take the word under the cursor."""

    label: Optional[str] = None


TranslationRequest = Union[ByOid, ByLabel]


@dataclass(frozen=True)
class InvocationSpec:
    """A fully resolved translator invocation."""

    executable: str
    parameters: Tuple[str, ...]
    payload: Optional[str] = None

    @property
    def argv(self) -> List[str]:
        args = [self.executable, *self.parameters]
        if self.payload is not None:
            args.append(self.payload)
        return args

    @property
    def command_line(self) -> str:
        return " ".join(self.argv)


@dataclass
class TranslationResult:
    """Captured translator output.

    ``returncode`` is informational; it is ``None`` when the process could
    not be started or did not finish.
    """

    command_line: str
    output_lines: List[str] = field(default_factory=list)
    returncode: Optional[int] = None


class BufferState(Enum):
    """Lifecycle of an existing result buffer."""

    WRITABLE = auto()
    LOCKED = auto()


@dataclass
class ResultBuffer:
    """Named scratch surface that receives translator output."""

    name: str
    height: int
    lines: List[str] = field(default_factory=list)
    syntax: Optional[str] = None
    state: BufferState = BufferState.WRITABLE

    @property
    def writable(self) -> bool:
        return self.state is BufferState.WRITABLE

    def set_lines(self, lines: List[str]) -> None:
        if not self.writable:
            raise BufferHostError(f"Buffer {self.name!r} is read-only.")
        self.lines = list(lines)

    def lock(self) -> None:
        self.state = BufferState.LOCKED
