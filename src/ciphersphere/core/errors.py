"""Validation errors raised by cipher plugins and the dispatcher.

Every error carries an ErrorKind so the dispatcher can turn it into a
CipherFailure without inspecting the message text.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    UNKNOWN_METHOD = "unknown_method"
    INVALID_KEY = "invalid_key"


class CipherError(ValueError):
    """Base class for recoverable, caller-facing cipher errors."""

    kind: ErrorKind

    def __init__(self, message: str, kind: ErrorKind) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind


class UnknownMethodError(CipherError):
    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorKind.UNKNOWN_METHOD)


class InvalidKeyError(CipherError):
    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorKind.INVALID_KEY)
