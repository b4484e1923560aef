"""
Pydantic schemas for note and nullifier payloads.

These schemas define the structure of data for serialization and validation.
"""

from .note import NoteWire, PublicNote
from .nullifier import NullifierSetExport, NullifierSetStats

__all__ = [
    "NoteWire", "PublicNote",
    "NullifierSetExport", "NullifierSetStats",
]
