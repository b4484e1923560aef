"""In-memory bookkeeping of notes and the nullifiers that spend them.

``NoteManager`` is a caller-side store assembled from the pure primitives.
It owns one spent set and guards all state with a single lock.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from threading import Lock

from pydantic import BaseModel

from spark_notes.core.errors import NullifierError, NullifierErrorCode, OperationError
from spark_notes.schemas.note import PublicNote
from spark_notes.schemas.nullifier import NullifierSetStats
from spark_notes.services.note import Note
from spark_notes.services.nullifier import NullifierSet, generate_nullifier, nullifier_set_stats
from spark_notes.services.serialization import export_nullifier_set

# Configure logger for this module
logger = logging.getLogger(__name__)


class NoteState(str, Enum):
    """Lifecycle state of a managed note."""

    UNSPENT = "unspent"
    SPENT = "spent"


class NoteEntry(BaseModel):
    """Public snapshot of a managed note."""

    note: PublicNote
    state: NoteState
    nullifier: bytes | None = None


@dataclass
class _ManagedNote:
    note: Note
    state: NoteState = NoteState.UNSPENT
    nullifier: bytes | None = None

    def snapshot(self) -> NoteEntry:
        return NoteEntry(
            note=PublicNote(value=self.note.value, commitment=self.note.commitment),
            state=self.state,
            nullifier=self.nullifier,
        )


class NoteManager:
    """Track notes by id together with a global set of spent nullifiers."""

    def __init__(self) -> None:
        self._notes: dict[str, _ManagedNote] = {}
        self._spent = NullifierSet()
        self._lock = Lock()

    def add_note(self, note_id: str, note: Note) -> None:
        """Register ``note`` under ``note_id``.

        Raises:
            OperationError: If the id is already in use.
        """
        with self._lock:
            if note_id in self._notes:
                raise OperationError(f"Note with ID '{note_id}' already exists")
            self._notes[note_id] = _ManagedNote(note=note)
        logger.debug("Added note %s", note_id)

    def get_note(self, note_id: str) -> NoteEntry | None:
        with self._lock:
            entry = self._notes.get(note_id)
            return entry.snapshot() if entry is not None else None

    def list_note_ids(self) -> list[str]:
        with self._lock:
            return list(self._notes)

    def list_notes(self) -> list[tuple[str, NoteEntry]]:
        with self._lock:
            return [(note_id, entry.snapshot()) for note_id, entry in self._notes.items()]

    def remove_note(self, note_id: str) -> NoteEntry | None:
        """Forget a note; its nullifier stays in the spent set if recorded."""
        with self._lock:
            entry = self._notes.pop(note_id, None)
            return entry.snapshot() if entry is not None else None

    def generate_nullifier_for_note(self, note_id: str, secret: bytes) -> bytes:
        """Derive and remember the nullifier for a managed note.

        Raises:
            OperationError: If no note has ``note_id``.
            InvalidSecret: If ``secret`` is empty.
        """
        with self._lock:
            entry = self._require(note_id)
            nullifier = generate_nullifier(entry.note, secret)
            entry.nullifier = nullifier
        return nullifier

    def mark_note_as_spent(self, note_id: str) -> None:
        """Move a note to SPENT and record its nullifier.

        Raises:
            OperationError: If the note is unknown or has no nullifier yet.
            NullifierError: If its nullifier is already in the spent set.
        """
        with self._lock:
            entry = self._require(note_id)
            if entry.nullifier is None:
                raise OperationError(f"Nullifier not generated for note '{note_id}'")
            if not self._spent.insert(entry.nullifier):
                logger.warning("Double spend attempt for note %s", note_id)
                raise NullifierError(
                    f"Nullifier for note '{note_id}' is already spent",
                    NullifierErrorCode.ALREADY_SPENT,
                )
            entry.state = NoteState.SPENT
        logger.info("Note %s marked as spent", note_id)

    def add_spent_nullifier(self, nullifier: bytes) -> None:
        """Record a nullifier observed elsewhere.

        Raises:
            NullifierError: If it is malformed or already spent.
        """
        with self._lock:
            if not self._spent.insert(nullifier):
                raise NullifierError(
                    "Nullifier is already spent", NullifierErrorCode.ALREADY_SPENT
                )

    def is_nullifier_spent(self, nullifier: bytes) -> bool:
        with self._lock:
            return nullifier in self._spent

    def nullifier_stats(self) -> NullifierSetStats:
        with self._lock:
            return nullifier_set_stats(self._spent)

    def export_spent_nullifiers(self) -> str:
        """Return the spent set in the versioned JSON export format."""
        with self._lock:
            return export_nullifier_set(self._spent)

    @property
    def note_count(self) -> int:
        with self._lock:
            return len(self._notes)

    @property
    def spent_nullifier_count(self) -> int:
        with self._lock:
            return len(self._spent)

    def _require(self, note_id: str) -> _ManagedNote:
        entry = self._notes.get(note_id)
        if entry is None:
            raise OperationError(f"Note with ID '{note_id}' not found")
        return entry
