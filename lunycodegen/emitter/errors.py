"""Exceptions raised by the script emitter."""

from __future__ import annotations


class EmitterError(Exception):
    """Base class for script emitter failures."""


class SymbolLookupError(EmitterError, ValueError):
    """Raised when a token value is not a member of its closed symbol set."""

    def __init__(self, kind: str, value: object) -> None:
        self.kind = kind
        self.value = value
        super().__init__(f"Unknown {kind}: {value!r}")


class IndentUnderflowError(EmitterError, RuntimeError):
    """Raised when the indent level is decremented below zero.

    The builder clamps its level back to 0 before raising, so output emitted
    after the error is not shifted further.
    """

    def __init__(self) -> None:
        super().__init__("indentation decremented too many times")
