"""Nullifier derivation and spent-set checks.

A nullifier is ``BLAKE3(commitment || secret)``. It uses a different hash
from the commitment so the two digest spaces stay independent. The spent set
is always owned by the caller; helpers here only read it or insert into it
on the caller's behalf.
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Iterable, Iterator, MutableSet
from typing import Final

from spark_notes.core.errors import NullifierError, NullifierErrorCode
from spark_notes.core.validation import NULLIFIER_LENGTH, validate_nullifier, validate_secret
from spark_notes.schemas.nullifier import NullifierSetStats
from spark_notes.services.note import Note
from spark_notes.utils.hash import NULLIFIER_HASH

# Configure logger for this module
logger = logging.getLogger(__name__)

# Rough per-entry overhead of a hash set slot on top of the 32-byte key
_SET_ENTRY_OVERHEAD_BYTES: Final[int] = 8


def generate_nullifier(note: Note, secret: bytes) -> bytes:
    """Derive the 32-byte nullifier that spends ``note``.

    The secret is not checked against ``note.secret``: a wrong secret yields
    a nullifier that an honest holder would never produce.

    Raises:
        InvalidSecret: If ``secret`` is empty or violates the length policy.
    """
    secret_bytes = validate_secret(secret)
    return NULLIFIER_HASH.digest(note.commitment, secret_bytes)


def is_nullifier_spent(nullifier: bytes, spent_set: Collection[bytes]) -> bool:
    """Return True iff ``nullifier`` is byte-for-byte equal to a member of ``spent_set``."""
    if isinstance(nullifier, (bytearray, memoryview)):
        nullifier = bytes(nullifier)
    return nullifier in spent_set


def check_multiple_nullifiers(
    nullifiers: Iterable[bytes],
    spent_set: Collection[bytes],
) -> list[bool]:
    """Check each nullifier against the spent set, preserving order."""
    return [is_nullifier_spent(nf, spent_set) for nf in nullifiers]


def mark_as_spent(nullifier: bytes, spent_set: MutableSet[bytes]) -> None:
    """Record ``nullifier`` in the caller's spent set.

    Raises:
        NullifierError: If the nullifier is malformed or already spent.
    """
    data = validate_nullifier(nullifier)
    if data in spent_set:
        logger.warning("Rejected double spend of nullifier %s", data[:8].hex())
        raise NullifierError("Nullifier is already spent", NullifierErrorCode.ALREADY_SPENT)
    spent_set.add(data)


def mark_multiple_as_spent(
    nullifiers: Iterable[bytes],
    spent_set: MutableSet[bytes],
) -> None:
    """Record a batch of nullifiers, all or nothing.

    Every entry is validated and checked before any insertion, so a failure
    leaves ``spent_set`` unchanged.

    Raises:
        NullifierError: If any entry is malformed, already spent, or repeated
            within the batch.
    """
    batch: list[bytes] = []
    seen: set[bytes] = set()
    for nullifier in nullifiers:
        data = validate_nullifier(nullifier)
        if data in spent_set or data in seen:
            logger.warning("Rejected batch containing spent nullifier %s", data[:8].hex())
            raise NullifierError(
                "One or more nullifiers are already spent",
                NullifierErrorCode.ALREADY_SPENT,
            )
        seen.add(data)
        batch.append(data)
    for data in batch:
        spent_set.add(data)
    logger.debug("Marked %d nullifiers as spent", len(batch))


def nullifier_set_stats(spent_set: Collection[bytes]) -> NullifierSetStats:
    """Return the size of a spent set and an estimate of its memory use."""
    count = len(spent_set)
    return NullifierSetStats(
        count=count,
        memory_usage_bytes=count * (NULLIFIER_LENGTH + _SET_ENTRY_OVERHEAD_BYTES),
    )


class NullifierSet(MutableSet[bytes]):
    """A set of 32-byte nullifiers.

    Usable anywhere a spent set is expected. Not synchronized: callers that
    share one instance across threads must lock around it.
    """

    def __init__(self, nullifiers: Iterable[bytes] = ()) -> None:
        self._spent: set[bytes] = set()
        for nullifier in nullifiers:
            self._spent.add(validate_nullifier(nullifier))

    def __contains__(self, nullifier: object) -> bool:
        if not isinstance(nullifier, (bytes, bytearray, memoryview)):
            return False
        return bytes(nullifier) in self._spent

    def __iter__(self) -> Iterator[bytes]:
        return iter(self._spent)

    def __len__(self) -> int:
        return len(self._spent)

    def add(self, nullifier: bytes) -> None:
        self._spent.add(validate_nullifier(nullifier))

    def discard(self, nullifier: bytes) -> None:
        self._spent.discard(bytes(nullifier))

    def insert(self, nullifier: bytes) -> bool:
        """Add ``nullifier``; return False if it was already present."""
        data = validate_nullifier(nullifier)
        if data in self._spent:
            return False
        self._spent.add(data)
        return True

    def export(self) -> list[bytes]:
        """Return the members in a stable (sorted) order."""
        return sorted(self._spent)

    def __repr__(self) -> str:
        return f"NullifierSet(count={len(self._spent)})"
