"""Hexadecimal encoding of text."""

from __future__ import annotations

import binascii


def encode_hex(text: str) -> str:
    """Encode the UTF-8 bytes of ``text`` as lower-case hexadecimal."""
    return text.encode("utf-8").hex()


def decode_hex(text: str) -> str:
    """Decode hexadecimal digits, ignoring surrounding whitespace.

    Raises ``ValueError`` for odd length or non-hexadecimal characters.
    """
    try:
        data = binascii.unhexlify(text.strip())
    except (binascii.Error, ValueError) as exc:
        raise ValueError(f"invalid hex data: {exc}") from exc
    return data.decode("utf-8", errors="replace")