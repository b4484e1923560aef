"""JSON transport for notes and spent nullifier sets.

Deserialization recomputes the commitment from the decoded value and secret
and rejects payloads whose embedded commitment disagrees.
"""

from __future__ import annotations

import logging
from collections.abc import Collection

from pydantic import ValidationError

from spark_notes.core.errors import InvalidSecret, InvalidValue, MalformedInput
from spark_notes.core.settings import settings
from spark_notes.core.validation import COMMITMENT_LENGTH, validate_nullifier
from spark_notes.schemas.note import NoteWire, PublicNote
from spark_notes.schemas.nullifier import NULLIFIER_SET_VERSION, NullifierSetExport
from spark_notes.services.note import Note
from spark_notes.services.secret import constant_time_equal
from spark_notes.utils.encoding import decode_bytes, decode_hex, encode_bytes, encode_hex

# Configure logger for this module
logger = logging.getLogger(__name__)


def to_json(note: Note) -> str:
    """Encode ``note`` (secret included) as a JSON object string."""
    encoding = settings.bytes_encoding
    wire = NoteWire(
        value=note.value,
        secret=encode_bytes(note.secret, encoding),
        commitment=encode_bytes(note.commitment, encoding),
    )
    return wire.model_dump_json()


def from_json(payload: str | bytes) -> Note:
    """Decode a note produced by :func:`to_json`.

    Args:
        payload: JSON text, as ``str`` or UTF-8 ``bytes``.

    Returns:
        A note equal to the one that was encoded.

    Raises:
        MalformedInput: If the payload is not JSON, is missing fields, has
            fields of the wrong type or encoding, or carries a commitment that
            does not match its value and secret.
    """
    try:
        wire = NoteWire.model_validate_json(payload)
    except ValidationError as err:
        logger.warning("Rejected note payload: %d validation errors", err.error_count())
        raise MalformedInput(f"Invalid note payload: {err}") from err

    encoding = settings.bytes_encoding
    try:
        secret = decode_bytes(wire.secret, encoding)
        commitment = decode_bytes(wire.commitment, encoding)
    except ValueError as err:
        raise MalformedInput(str(err)) from err

    if len(commitment) != COMMITMENT_LENGTH:
        raise MalformedInput(
            f"Commitment must be {COMMITMENT_LENGTH} bytes, got {len(commitment)}"
        )

    try:
        note = Note(value=wire.value, secret=secret)
    except (InvalidSecret, InvalidValue) as err:
        raise MalformedInput(err.detailed_message) from err

    if not constant_time_equal(note.commitment, commitment):
        logger.warning("Rejected note payload: commitment mismatch")
        raise MalformedInput("Commitment does not match value and secret")
    return note


def to_public_json(note: Note) -> str:
    """Encode only the public fields of ``note``; safe to persist durably."""
    return PublicNote(value=note.value, commitment=note.commitment).model_dump_json()


def export_nullifier_set(spent_set: Collection[bytes]) -> str:
    """Serialize a spent set as versioned JSON with sorted hex entries."""
    export = NullifierSetExport(
        version=NULLIFIER_SET_VERSION,
        nullifiers=sorted(encode_hex(bytes(nf)) for nf in spent_set),
    )
    return export.model_dump_json()


def import_nullifier_set(payload: str | bytes) -> set[bytes]:
    """Parse the output of :func:`export_nullifier_set`.

    Raises:
        MalformedInput: On invalid JSON, an unsupported version, bad hex, or
            entries that are not 32 bytes.
    """
    try:
        export = NullifierSetExport.model_validate_json(payload)
    except ValidationError as err:
        raise MalformedInput(f"Invalid nullifier set payload: {err}") from err

    if export.version > NULLIFIER_SET_VERSION:
        raise MalformedInput(
            f"Unsupported version: {export.version} (current: {NULLIFIER_SET_VERSION})"
        )

    spent: set[bytes] = set()
    for entry in export.nullifiers:
        try:
            spent.add(validate_nullifier(decode_hex(entry)))
        except ValueError as err:
            raise MalformedInput(f"Invalid nullifier entry: {err}") from err
    logger.debug("Imported %d nullifiers", len(spent))
    return spent
