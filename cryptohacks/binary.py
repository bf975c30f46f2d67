"""Seven-bit binary encoding of printable ASCII text."""

from __future__ import annotations

_ALPHABET = "".join(chr(code) for code in range(0x20, 0x7F) if chr(code) != "+")

_ENCODE: dict[int, str] = {ord(char): format(ord(char), "07b") for char in _ALPHABET}
_DECODE: dict[str, str] = {bits: chr(code) for code, bits in _ENCODE.items()}

_GROUP_WIDTH = 7
_GROUP_STRIDE = 8


def text_to_binary(text: str) -> str:
    """Encode each byte of ``text`` as seven binary digits, separated by spaces.

    Bytes without a code in the table (``+``, control characters and every
    byte of a multi-byte character) become an empty group.
    """
    return " ".join(_ENCODE.get(byte, "") for byte in text.encode("utf-8"))


def binary_to_text(bits: str) -> str:
    """Decode groups of seven binary digits, each followed by one separator.

    A group that is not in the table decodes to a NUL character.  A trailing
    group shorter than seven digits is an error.
    """
    chars = []
    for start in range(0, len(bits), _GROUP_STRIDE):
        group = bits[start : start + _GROUP_WIDTH]
        if len(group) < _GROUP_WIDTH:
            raise ValueError(
                f"incomplete binary group {group!r} at offset {start}"
            )
        chars.append(_DECODE.get(group, "\x00"))
    return "".join(chars)