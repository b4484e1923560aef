# src/spark_notes/services/__init__.py
"""Note, nullifier and serialization services."""

from .manager import NoteEntry, NoteManager, NoteState
from .note import Note, commit, create_note, note_commitment
from .nullifier import (
    NullifierSet,
    check_multiple_nullifiers,
    generate_nullifier,
    is_nullifier_spent,
    mark_as_spent,
    mark_multiple_as_spent,
    nullifier_set_stats,
)
from .secret import constant_time_equal, generate_secret
from .serialization import (
    export_nullifier_set,
    from_json,
    import_nullifier_set,
    to_json,
    to_public_json,
)

__all__ = [
    "Note", "commit", "create_note", "note_commitment",
    "NullifierSet", "generate_nullifier", "is_nullifier_spent",
    "check_multiple_nullifiers", "mark_as_spent", "mark_multiple_as_spent",
    "nullifier_set_stats",
    "to_json", "from_json", "to_public_json",
    "export_nullifier_set", "import_nullifier_set",
    "NoteManager", "NoteEntry", "NoteState",
    "generate_secret", "constant_time_equal",
]
