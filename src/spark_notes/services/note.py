"""Note creation and the commitment function.

A commitment is ``SHA-256(value_be64 || secret)``. The value is packed as a
fixed-width big-endian integer so every amount has exactly one preimage
encoding.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from spark_notes.core.validation import VALUE_WIDTH_BYTES, validate_secret, validate_value
from spark_notes.utils.hash import COMMITMENT_HASH

# Configure logger for this module
logger = logging.getLogger(__name__)


def commit(value: int, secret: bytes) -> bytes:
    """Compute the 32-byte commitment binding ``value`` to ``secret``.

    Args:
        value: Unsigned 64-bit amount.
        secret: Non-empty secret bytes.

    Returns:
        The commitment digest.

    Raises:
        InvalidSecret: If the secret is empty or violates the length policy.
        InvalidValue: If the value is not an unsigned 64-bit integer.
    """
    amount = validate_value(value)
    secret_bytes = validate_secret(secret)
    return COMMITMENT_HASH.digest(
        amount.to_bytes(VALUE_WIDTH_BYTES, "big", signed=False),
        secret_bytes,
    )


@dataclass(frozen=True)
class Note:
    """An immutable (value, secret, commitment) triple.

    ``commitment`` is not a constructor argument: it is always derived from
    ``value`` and ``secret``, so a note can never hold a mismatched
    commitment.
    """

    value: int
    secret: bytes = field(repr=False)
    commitment: bytes = field(init=False)

    def __post_init__(self) -> None:
        amount = validate_value(self.value)
        secret_bytes = validate_secret(self.secret)
        object.__setattr__(self, "value", amount)
        object.__setattr__(self, "secret", secret_bytes)
        object.__setattr__(self, "commitment", commit(amount, secret_bytes))

    @property
    def commitment_hex(self) -> str:
        return self.commitment.hex()

    def verify(self) -> bool:
        """Return True if the stored commitment matches a fresh computation."""
        return commit(self.value, self.secret) == self.commitment


def create_note(value: int, secret: bytes) -> Note:
    """Create a note for ``value`` hidden by ``secret``.

    Raises:
        InvalidSecret: If ``secret`` is empty.
        InvalidValue: If ``value`` is outside the unsigned 64-bit range.
    """
    note = Note(value=value, secret=secret)
    logger.debug("Created note with %d-byte secret", len(note.secret))
    return note


def note_commitment(note: Note) -> bytes:
    """Return the public commitment of ``note``."""
    return note.commitment
