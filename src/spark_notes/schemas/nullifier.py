"""Schemas describing spent nullifier sets."""
from __future__ import annotations

from pydantic import BaseModel, Field

NULLIFIER_SET_VERSION = 1


class NullifierSetStats(BaseModel):
    """Size of a spent set and its approximate memory footprint."""

    count: int = Field(..., ge=0)
    memory_usage_bytes: int = Field(..., ge=0)


class NullifierSetExport(BaseModel):
    """Versioned transport form of a spent set, nullifiers hex-encoded."""

    version: int = Field(default=NULLIFIER_SET_VERSION, ge=1)
    nullifiers: list[str] = Field(default_factory=list)
