"""Base64 and Base32 encoding of text."""

from __future__ import annotations

import base64
import binascii


def _strip_newlines(text: str) -> str:
    return text.replace("\r", "").replace("\n", "")


def _as_text(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def encode_base64(text: str) -> str:
    """Encode the UTF-8 bytes of ``text`` with the standard padded Base64 alphabet."""
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def decode_base64(text: str) -> str:
    """Decode standard padded Base64; line breaks are ignored.

    Raises ``ValueError`` for malformed input.
    """
    try:
        data = base64.b64decode(_strip_newlines(text), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ValueError(f"illegal base64 data: {exc}") from exc
    return _as_text(data)


def encode_base32(text: str) -> str:
    """Encode the UTF-8 bytes of ``text`` with the standard padded Base32 alphabet."""
    return base64.b32encode(text.encode("utf-8")).decode("ascii")


def decode_base32(text: str) -> str:
    """Decode standard padded, upper-case Base32; line breaks are ignored.

    Raises ``ValueError`` for malformed input.
    """
    try:
        data = base64.b32decode(_strip_newlines(text))
    except (binascii.Error, ValueError) as exc:
        raise ValueError(f"illegal base32 data: {exc}") from exc
    return _as_text(data)