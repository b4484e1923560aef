"""Error types raised by the note primitives.

Every error is deterministic for a given input and is never retried
internally. Each one carries a machine-readable code alongside its message.
"""

from __future__ import annotations

from enum import Enum


class SecretErrorCode(str, Enum):
    """Reasons a secret is rejected."""

    EMPTY = "EMPTY"
    TOO_SHORT = "TOO_SHORT"
    TOO_LONG = "TOO_LONG"
    INVALID_FORMAT = "INVALID_FORMAT"


class ValueErrorCode(str, Enum):
    """Reasons a note value is rejected."""

    ZERO = "ZERO"
    EXCEEDS_MAX = "EXCEEDS_MAX"
    INVALID = "INVALID"


class NullifierErrorCode(str, Enum):
    """Reasons a nullifier is rejected."""

    ALREADY_SPENT = "ALREADY_SPENT"
    INVALID_FORMAT = "INVALID_FORMAT"
    EMPTY = "EMPTY"
    WRONG_LENGTH = "WRONG_LENGTH"


class SparkError(ValueError):
    """Base exception for all note, nullifier and serialization failures."""

    label = "Operation failed"
    prefix = "OPERATION"

    def __init__(self, message: str, code: Enum | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code

    @property
    def error_code(self) -> str:
        """Return a stable identifier such as ``SECRET_EMPTY``."""
        if self.code is None:
            return self.prefix
        return f"{self.prefix}_{self.code.value}"

    @property
    def detailed_message(self) -> str:
        """Return the message together with its code."""
        if self.code is None:
            return f"{self.label}: {self.message}"
        return f"{self.label} (code: {self.code.value}): {self.message}"

    def __str__(self) -> str:
        return f"{self.label}: {self.message}"


class InvalidSecret(SparkError):
    """Raised when a secret is empty or violates the configured length policy."""

    label = "Invalid secret"
    prefix = "SECRET"

    def __init__(
        self,
        message: str,
        code: SecretErrorCode = SecretErrorCode.EMPTY,
    ) -> None:
        super().__init__(message, code)


class InvalidValue(SparkError):
    """Raised when a value is not an unsigned 64-bit integer or breaks policy."""

    label = "Invalid value"
    prefix = "VALUE"

    def __init__(
        self,
        message: str,
        code: ValueErrorCode = ValueErrorCode.INVALID,
    ) -> None:
        super().__init__(message, code)


class NullifierError(SparkError):
    """Raised for malformed nullifiers and double-spend attempts."""

    label = "Nullifier error"
    prefix = "NULLIFIER"

    def __init__(
        self,
        message: str,
        code: NullifierErrorCode = NullifierErrorCode.INVALID_FORMAT,
    ) -> None:
        super().__init__(message, code)


class MalformedInput(SparkError):
    """Raised when a payload is not a valid encoding of a note or nullifier set."""

    label = "Malformed input"
    prefix = "MALFORMED_INPUT"


class OperationError(SparkError):
    """Raised by the note manager for bookkeeping failures."""

    label = "Operation failed"
    prefix = "OPERATION_FAILED"
