"""
Walk through the full note lifecycle from the command line.

Usage: python -m spark_notes.scripts.walkthrough [value]

Steps:
1. Generate a random secret and create a note
2. Derive the nullifier that spends it
3. Check it against the spent set, record it, and reject a second spend
"""

import logging
import sys

from spark_notes.core.errors import NullifierError
from spark_notes.core.settings import settings
from spark_notes.services import (
    NoteManager,
    create_note,
    from_json,
    generate_secret,
    to_json,
    to_public_json,
)

DEFAULT_VALUE = 1000
NOTE_ID = "demo"


def run(value: int) -> None:
    """Run every step of the lifecycle against a fresh manager.

    Args:
        value: Amount to place in the demo note
    """
    manager = NoteManager()

    secret = generate_secret()
    note = create_note(value, secret)
    print(f"Created note: {to_public_json(note)}")

    if from_json(to_json(note)) != note:
        raise RuntimeError("JSON round trip changed the note")
    print("JSON round trip verified")

    manager.add_note(NOTE_ID, note)
    nullifier = manager.generate_nullifier_for_note(NOTE_ID, secret)
    print(f"Nullifier: {nullifier.hex()}")
    print(f"Spent before marking: {manager.is_nullifier_spent(nullifier)}")

    manager.mark_note_as_spent(NOTE_ID)
    print(f"Spent after marking: {manager.is_nullifier_spent(nullifier)}")

    try:
        manager.mark_note_as_spent(NOTE_ID)
    except NullifierError as err:
        print(f"Second spend rejected: {err.error_code}")

    stats = manager.nullifier_stats()
    print(f"Spent set: {stats.count} nullifiers, ~{stats.memory_usage_bytes} bytes")


if __name__ == "__main__":
    logging.basicConfig(level=settings.log_level)
    run(int(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_VALUE)
