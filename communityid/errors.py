"""
communityid/errors.py

Exceptions used inside the engine.

InputError never reaches callers of calc(): the engine converts it into a
single error-sink message and a None result. HashUnavailableError is raised
from the engine constructor and is meant to propagate.
"""

from __future__ import annotations

from .models import ErrorKind


class InputError(ValueError):
    """A flow tuple field failed validation."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind

    def __repr__(self) -> str:
        return f"InputError({self.kind.value}: {self})"


class HashUnavailableError(RuntimeError):
    """SHA-1 cannot be instantiated in this interpreter."""
