"""Tests for JSON transport of notes and spent sets."""

from __future__ import annotations

import base64
import json

import pytest

from spark_notes.core.errors import MalformedInput
from spark_notes.core.validation import U64_MAX
from spark_notes.services.note import Note, create_note
from spark_notes.services.serialization import (
    export_nullifier_set,
    from_json,
    import_nullifier_set,
    to_json,
    to_public_json,
)


def _payload(note: Note, **changes: object) -> str:
    data = json.loads(to_json(note))
    data.update(changes)
    return json.dumps(data)


def test_to_json_shape(note: Note, secret: bytes) -> None:
    data = json.loads(to_json(note))
    assert data == {
        "value": 1000,
        "secret": secret.hex(),
        "commitment": note.commitment.hex(),
    }


def test_round_trip(note: Note) -> None:
    restored = from_json(to_json(note))
    assert restored == note
    assert restored.value == note.value
    assert restored.secret == note.secret
    assert restored.commitment == note.commitment


def test_round_trip_sample(rng, random_secret) -> None:
    for value in (0, 1, U64_MAX, *(rng.randint(0, U64_MAX) for _ in range(50))):
        note = create_note(value, random_secret())
        assert from_json(to_json(note)) == note


def test_round_trip_base64(override_settings, note: Note) -> None:
    override_settings(bytes_encoding="base64")
    encoded = to_json(note)
    assert note.commitment.hex() not in encoded
    assert from_json(encoded) == note


def test_from_json_accepts_bytes_and_string_value(note: Note) -> None:
    assert from_json(to_json(note).encode()) == note
    assert from_json(_payload(note, value="1000")) == note


def test_from_json_ignores_unknown_fields(note: Note) -> None:
    assert from_json(_payload(note, memo="hello")) == note


@pytest.mark.parametrize(
    "payload",
    [
        "",
        "not json",
        "{",
        "[]",
        "42",
        "null",
        '{"value": 1000}',
        '{"secret": "01", "commitment": "00"}',
    ],
)
def test_from_json_rejects_malformed(payload: str) -> None:
    with pytest.raises(MalformedInput) as exc_info:
        from_json(payload)
    assert exc_info.value.error_code == "MALFORMED_INPUT"


@pytest.mark.parametrize(
    "value",
    [-1, U64_MAX + 1, 1.5, True, "12a", "-5", " 7", None, [1]],
)
def test_from_json_rejects_bad_value(note: Note, value: object) -> None:
    with pytest.raises(MalformedInput):
        from_json(_payload(note, value=value))


@pytest.mark.parametrize("field", ["secret", "commitment"])
@pytest.mark.parametrize("bad", ["zz", "abc", 123, None, ["01"]])
def test_from_json_rejects_bad_byte_fields(note: Note, field: str, bad: object) -> None:
    with pytest.raises(MalformedInput):
        from_json(_payload(note, **{field: bad}))


def test_from_json_rejects_empty_secret(note: Note) -> None:
    with pytest.raises(MalformedInput):
        from_json(_payload(note, secret=""))


def test_from_json_rejects_short_commitment(note: Note) -> None:
    with pytest.raises(MalformedInput, match="32 bytes"):
        from_json(_payload(note, commitment=note.commitment[:31].hex()))


def test_from_json_rejects_tampered_commitment(note: Note) -> None:
    tampered = bytes([note.commitment[0] ^ 0x01]) + note.commitment[1:]
    with pytest.raises(MalformedInput, match="does not match"):
        from_json(_payload(note, commitment=tampered.hex()))


def test_from_json_rejects_tampered_value(note: Note) -> None:
    with pytest.raises(MalformedInput, match="does not match"):
        from_json(_payload(note, value=1001))


def test_from_json_applies_value_policy(override_settings, secret: bytes) -> None:
    payload = to_json(create_note(0, secret))
    override_settings(allow_zero_value=False)
    with pytest.raises(MalformedInput):
        from_json(payload)


def test_public_json_never_contains_secret(note: Note, secret: bytes) -> None:
    data = json.loads(to_public_json(note))
    assert data == {"value": 1000, "commitment": note.commitment.hex()}
    assert secret.hex() not in to_public_json(note)


def test_nullifier_set_export_import() -> None:
    spent = {b"\x01" * 32, b"\x02" * 32, b"\x03" * 32}
    exported = export_nullifier_set(spent)
    data = json.loads(exported)
    assert data["version"] == 1
    assert data["nullifiers"] == sorted(n.hex() for n in spent)
    assert import_nullifier_set(exported) == spent


def test_nullifier_set_export_empty() -> None:
    assert import_nullifier_set(export_nullifier_set(set())) == set()


@pytest.mark.parametrize(
    "payload",
    [
        "invalid json",
        '{"version": 2, "nullifiers": []}',
        '{"version": 1, "nullifiers": ["invalid hex"]}',
        '{"version": 1, "nullifiers": ["0101"]}',
        '{"version": 1, "nullifiers": "01"}',
    ],
)
def test_nullifier_set_import_rejects(payload: str) -> None:
    with pytest.raises(MalformedInput):
        import_nullifier_set(payload)


def test_public_json_uses_configured_encoding(override_settings, note: Note) -> None:
    override_settings(bytes_encoding="base64")
    data = json.loads(to_public_json(note))
    assert set(data) == {"value", "commitment"}
    assert data["commitment"] == base64.urlsafe_b64encode(note.commitment).decode().rstrip("=")
