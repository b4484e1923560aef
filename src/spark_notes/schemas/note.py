"""Schemas for notes crossing a process boundary."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from spark_notes.core.settings import settings
from spark_notes.core.validation import COMMITMENT_LENGTH, U64_MAX
from spark_notes.utils.encoding import encode_bytes


class NoteWire(BaseModel):
    """JSON shape of a full note, secret included.

    ``secret`` and ``commitment`` are text-encoded bytes; the alphabet is
    chosen by configuration and must match on both ends.
    """

    model_config = ConfigDict(extra="ignore")

    value: int = Field(..., ge=0, le=U64_MAX, description="Unsigned 64-bit amount.")
    secret: str = Field(..., description="Text-encoded secret bytes.")
    commitment: str = Field(..., description="Text-encoded 32-byte commitment.")

    @field_validator("value", mode="before")
    @classmethod
    def _parse_value(cls, raw: Any) -> int:
        """Accept a JSON integer or a plain decimal string."""
        if isinstance(raw, bool):
            raise ValueError("value must be an unsigned integer, not a boolean")
        if isinstance(raw, int):
            return raw
        if isinstance(raw, str) and raw.isascii() and raw.isdigit():
            return int(raw)
        raise ValueError("value must be an unsigned integer or a decimal string")

    @field_validator("secret", "commitment", mode="before")
    @classmethod
    def _require_text(cls, raw: Any) -> str:
        if not isinstance(raw, str):
            raise ValueError("byte fields must be encoded as strings")
        return raw


class PublicNote(BaseModel):
    """Public view of a note: value and commitment, never the secret."""

    model_config = ConfigDict(frozen=True)

    value: int = Field(..., ge=0, le=U64_MAX)
    commitment: bytes = Field(..., min_length=COMMITMENT_LENGTH, max_length=COMMITMENT_LENGTH)

    @field_serializer("commitment", when_used="json")
    def _encode_commitment(self, commitment: bytes) -> str:
        """Text-encode the commitment with the configured alphabet."""
        return encode_bytes(commitment, settings.bytes_encoding)
