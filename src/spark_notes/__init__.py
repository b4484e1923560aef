"""Notes, commitments and nullifiers for private value transfer.

Typical flow::

    from spark_notes import create_note, generate_nullifier, is_nullifier_spent

    note = create_note(1000, secret)
    nullifier = generate_nullifier(note, secret)
    if not is_nullifier_spent(nullifier, spent_set):
        spent_set.add(nullifier)
"""

from spark_notes.core.errors import (
    InvalidSecret,
    InvalidValue,
    MalformedInput,
    NullifierError,
    OperationError,
    SparkError,
)
from spark_notes.services import (
    Note,
    NoteManager,
    NullifierSet,
    commit,
    create_note,
    from_json,
    generate_nullifier,
    generate_secret,
    is_nullifier_spent,
    note_commitment,
    to_json,
)

__version__ = "0.1.0"

__all__ = [
    "Note", "commit", "create_note", "note_commitment",
    "generate_nullifier", "is_nullifier_spent", "NullifierSet",
    "to_json", "from_json",
    "NoteManager", "generate_secret",
    "SparkError", "InvalidSecret", "InvalidValue",
    "MalformedInput", "NullifierError", "OperationError",
]
