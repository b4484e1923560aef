# src/spark_notes/utils/hash.py
"""Hashing helpers exposing the two digest domains used by notes."""

from __future__ import annotations

import hashlib
from collections.abc import Callable
from dataclasses import dataclass
from typing import Final, Protocol

from blake3 import blake3

DIGEST_SIZE: Final[int] = 32


class _DigestLike(Protocol):
    """Protocol capturing the subset of the hashlib-style API we rely on."""

    def digest(self) -> bytes: ...

    def hexdigest(self) -> str: ...


DigestFunction = Callable[[bytes], bytes]


def sha256_digest(data: bytes) -> bytes:
    """Return the SHA-256 digest of the supplied data."""
    return hashlib.sha256(data).digest()


def blake3_digest(data: bytes) -> bytes:
    """Return the byte digest of the supplied data."""
    hasher: _DigestLike = blake3(data)
    return hasher.digest()


def blake3_hexdigest(data: bytes) -> str:
    """Return the hexadecimal digest of the supplied data."""
    hasher: _DigestLike = blake3(data)
    return hasher.hexdigest()


@dataclass(frozen=True)
class DigestStrategy:
    """A named 32-byte digest function bound to one hashing domain."""

    name: str
    function: DigestFunction

    def digest(self, *parts: bytes) -> bytes:
        """Hash the concatenation of ``parts``.

        Raises:
            RuntimeError: If the wrapped function does not produce 32 bytes.
        """
        out = self.function(b"".join(parts))
        if len(out) != DIGEST_SIZE:
            raise RuntimeError(
                f"{self.name} produced a {len(out)}-byte digest, expected {DIGEST_SIZE}"
            )
        return out


COMMITMENT_HASH: Final[DigestStrategy] = DigestStrategy("sha256", sha256_digest)
NULLIFIER_HASH: Final[DigestStrategy] = DigestStrategy("blake3", blake3_digest)
