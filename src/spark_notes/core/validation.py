"""Input validation for secrets, values and nullifiers."""

from __future__ import annotations

from typing import Any, Final

from spark_notes.core.errors import (
    InvalidSecret,
    InvalidValue,
    NullifierError,
    NullifierErrorCode,
    SecretErrorCode,
    ValueErrorCode,
)
from spark_notes.core.settings import settings
from spark_notes.utils.hash import DIGEST_SIZE

U64_MAX: Final[int] = 2**64 - 1
VALUE_WIDTH_BYTES: Final[int] = 8
COMMITMENT_LENGTH: Final[int] = DIGEST_SIZE
NULLIFIER_LENGTH: Final[int] = DIGEST_SIZE

_BYTES_LIKE = (bytes, bytearray, memoryview)


def validate_secret(secret: Any) -> bytes:
    """Validate a secret and return it as immutable bytes.

    Args:
        secret: Caller supplied secret, any bytes-like object.

    Returns:
        The secret as ``bytes``.

    Raises:
        InvalidSecret: If the secret is not bytes-like, empty, or outside the
            configured length bounds.
    """
    if not isinstance(secret, _BYTES_LIKE):
        raise InvalidSecret(
            f"Secret must be bytes, got {type(secret).__name__}",
            SecretErrorCode.INVALID_FORMAT,
        )
    data = bytes(secret)
    if not data:
        raise InvalidSecret("Secret cannot be empty", SecretErrorCode.EMPTY)

    min_len, max_len = settings.secret_length_bounds
    if len(data) < min_len:
        raise InvalidSecret(
            f"Secret must be at least {min_len} bytes, got {len(data)}",
            SecretErrorCode.TOO_SHORT,
        )
    if max_len is not None and len(data) > max_len:
        raise InvalidSecret(
            f"Secret must be at most {max_len} bytes, got {len(data)}",
            SecretErrorCode.TOO_LONG,
        )
    return data


def validate_value(value: Any) -> int:
    """Validate that ``value`` is an unsigned 64-bit integer allowed by policy."""
    # bool is an int subclass; True is not an amount
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidValue(
            f"Value must be an integer, got {type(value).__name__}",
            ValueErrorCode.INVALID,
        )
    if value < 0 or value > U64_MAX:
        raise InvalidValue(
            f"Value must be between 0 and {U64_MAX}, got {value}",
            ValueErrorCode.EXCEEDS_MAX,
        )
    if value == 0 and not settings.allow_zero_value:
        raise InvalidValue("Value must be greater than zero", ValueErrorCode.ZERO)
    return int(value)


def validate_nullifier(nullifier: Any) -> bytes:
    """Validate a nullifier and return it as bytes.

    Raises:
        NullifierError: If the nullifier is not bytes-like, empty, or not
            exactly 32 bytes long.
    """
    if not isinstance(nullifier, _BYTES_LIKE):
        raise NullifierError(
            f"Nullifier must be bytes, got {type(nullifier).__name__}",
            NullifierErrorCode.INVALID_FORMAT,
        )
    data = bytes(nullifier)
    if not data:
        raise NullifierError("Nullifier cannot be empty", NullifierErrorCode.EMPTY)
    if len(data) != NULLIFIER_LENGTH:
        raise NullifierError(
            f"Nullifier must be exactly {NULLIFIER_LENGTH} bytes, got {len(data)}",
            NullifierErrorCode.WRONG_LENGTH,
        )
    return data
