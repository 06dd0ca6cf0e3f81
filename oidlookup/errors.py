"""Error definitions for the oidlookup translator front-end."""

from __future__ import annotations


class OidLookupError(Exception):
    """Base exception for all custom errors."""


class EmptyInputError(OidLookupError):
    """Raised when no OID or label could be resolved for a lookup."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"No {kind} found under the cursor. Nothing to translate.")


class ConfigurationError(OidLookupError):
    """Raised when the settings cannot be read or validated."""


class BufferHostError(OidLookupError):
    """Raised when the host cannot create or update the result buffer."""
