# src/spark_notes/utils/encoding.py
"""Text encodings for byte fields carried over JSON."""

from __future__ import annotations

import base64
import binascii
from typing import Literal

ByteEncoding = Literal["hex", "base64"]


def encode_hex(data: bytes) -> str:
    return data.hex()


def decode_hex(data: str) -> bytes:
    try:
        return bytes.fromhex(data)
    except ValueError as err:
        raise ValueError(f"Invalid hex encoding: {err}") from err


def encode_base64(data: bytes) -> str:
    """Encode as URL-safe base64 without padding."""
    return base64.urlsafe_b64encode(data).decode().rstrip("=")


def decode_base64(data: str) -> bytes:
    """Decode a URL-safe base64 string, accepting omitted padding."""
    padding = "=" * (-len(data) % 4)
    try:
        return base64.b64decode(data + padding, altchars=b"-_", validate=True)
    except (binascii.Error, ValueError) as err:
        raise ValueError(f"Invalid base64 encoding: {err}") from err


def encode_bytes(data: bytes, encoding: ByteEncoding) -> str:
    if encoding == "hex":
        return encode_hex(data)
    if encoding == "base64":
        return encode_base64(data)
    raise ValueError(f"Unsupported byte encoding: {encoding}")


def decode_bytes(data: str, encoding: ByteEncoding) -> bytes:
    """Decode ``data`` with the given alphabet.

    Raises:
        ValueError: If the text is not valid for the encoding.
    """
    if encoding == "hex":
        return decode_hex(data)
    if encoding == "base64":
        return decode_base64(data)
    raise ValueError(f"Unsupported byte encoding: {encoding}")
