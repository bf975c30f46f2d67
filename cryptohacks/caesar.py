"""Running-shift letter cipher.

The shift is carried from one letter to the next: each letter's position in
the alphabet is folded into the shift, and the shifted value selects the
output letter.  Text is lower-cased first; non-letters pass through.
"""

from __future__ import annotations

_ALPHABET_SIZE = 26


def _position(char: str) -> int | None:
    if "a" <= char <= "z":
        return ord(char) - ord("a") + 1
    return None


def _letter(position: int) -> str:
    if 1 <= position <= _ALPHABET_SIZE:
        return chr(ord("a") + position - 1)
    return "\x00"


def encipher(text: str, rot: int) -> str:
    """Encipher ``text`` with starting shift ``rot``.

    A shift that falls outside 1..26 yields a NUL character for that letter.
    """
    output = []
    for char in text.lower():
        value = _position(char)
        if value is None:
            output.append(char)
            continue
        room = _ALPHABET_SIZE - value
        if rot < room:
            rot = value + rot
        elif room < rot < _ALPHABET_SIZE:
            rot = rot - room
        elif rot > _ALPHABET_SIZE:
            rot = (rot - 1) % _ALPHABET_SIZE + 1
        output.append(_letter(rot))
    return "".join(output)