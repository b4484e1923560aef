"""Secret generation and comparison helpers."""

from __future__ import annotations

import secrets

from spark_notes.core.errors import InvalidSecret, SecretErrorCode
from spark_notes.core.settings import settings


def generate_secret(length: int | None = None) -> bytes:
    """Generate a random secret from the operating system CSPRNG.

    Args:
        length: Number of bytes; defaults to ``settings.generated_secret_length``.

    Returns:
        Fresh random bytes suitable as a note secret.
    """
    size = settings.generated_secret_length if length is None else length
    if size < 1:
        raise InvalidSecret(
            f"Secret length must be at least 1 byte, got {size}",
            SecretErrorCode.TOO_SHORT,
        )
    return secrets.token_bytes(size)


def constant_time_equal(left: bytes, right: bytes) -> bool:
    """Compare two byte strings without leaking the mismatch position."""
    return secrets.compare_digest(bytes(left), bytes(right))
