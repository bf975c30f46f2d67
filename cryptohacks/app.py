"""Command-line front end for the text encoders."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Callable
from enum import Enum

from cryptohacks.basecodec import (
    decode_base32,
    decode_base64,
    encode_base32,
    encode_base64,
)
from cryptohacks.binary import binary_to_text, text_to_binary
from cryptohacks.caesar import encipher
from cryptohacks.hexcodec import decode_hex, encode_hex

OUTPUT_PREFIX = "Output Here:"

_HELP = "H for Hex, T for Text, B for BIN, B64 for Base64, B32 for Base32, C for Caesar"
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_QUIT_WORDS = frozenset({"close", "quit", "exit"})


class Operation(Enum):
    """A conversion, named by its button label."""

    TEXT_TO_HEX = "T 2 H"
    TEXT_TO_BIN = "T 2 B"
    TEXT_TO_BASE64 = "T 2 B64"
    TEXT_TO_BASE32 = "T 2 B32"
    TEXT_TO_CAESAR = "T 2 C"
    HEX_TO_TEXT = "H 2 T"
    BIN_TO_TEXT = "B 2 T"
    BASE64_TO_TEXT = "B64 2 T"
    BASE32_TO_TEXT = "B32 2 T"

    @property
    def code(self) -> str:
        """The label without spaces, as typed on the command line."""
        return self.value.replace(" ", "")


_CODECS: dict[Operation, Callable[[str], str]] = {
    Operation.TEXT_TO_HEX: encode_hex,
    Operation.TEXT_TO_BIN: text_to_binary,
    Operation.TEXT_TO_BASE64: encode_base64,
    Operation.TEXT_TO_BASE32: encode_base32,
    Operation.HEX_TO_TEXT: decode_hex,
    Operation.BIN_TO_TEXT: binary_to_text,
    Operation.BASE64_TO_TEXT: decode_base64,
    Operation.BASE32_TO_TEXT: decode_base32,
}


def _parse_operation(name: Operation | str) -> Operation:
    if isinstance(name, Operation):
        return name
    key = name.replace(" ", "").upper()
    for operation in Operation:
        if operation.code.upper() == key:
            return operation
    raise ValueError(f"unknown operation: {name!r}")


def _parse_rot(rot: int | str | None) -> int:
    """Read a shift the way a strict decimal parser would; anything else is 0."""
    if isinstance(rot, int):
        return rot
    if rot is None or not re.fullmatch(r"[+-]?[0-9]+", rot):
        return 0
    return max(_INT64_MIN, min(_INT64_MAX, int(rot)))


def help_text() -> str:
    """Explain the abbreviations used in operation names."""
    return _HELP


def convert(operation: Operation | str, text: str, rot: int | str = "") -> str:
    """Run ``operation`` on ``text``; ``rot`` is used only by the Caesar cipher.

    Decoders raise ``ValueError`` for malformed input.
    """
    op = _parse_operation(operation)
    if op is Operation.TEXT_TO_CAESAR:
        return encipher(text, _parse_rot(rot))
    return _CODECS[op](text)


def _confirm_quit() -> bool:
    answer = input("Really quit? [Yes/No] ")
    return answer.strip().lower() in {"yes", "y"}


def _interactive() -> int:
    print(help_text())
    print("Operations: " + ", ".join(op.value for op in Operation))
    print("Type 'close' to quit.")
    while True:
        try:
            command = input("Operation> ").strip()
            if not command:
                continue
            if command.lower() in _QUIT_WORDS:
                if _confirm_quit():
                    return 0
                continue
            if command.lower() == "help":
                print(help_text())
                continue
            try:
                operation = _parse_operation(command)
            except ValueError as exc:
                print(exc, file=sys.stderr)
                continue
            text = input("Enter Here> ")
            rot = (
                input("Enter ROT (Caesar)> ")
                if operation is Operation.TEXT_TO_CAESAR
                else ""
            )
        except EOFError:
            return 0
        try:
            print(OUTPUT_PREFIX + convert(operation, text, rot))
        except ValueError as exc:
            print(f"decode error: {exc}")


def main(argv: list[str] | None = None) -> int:
    """Run one conversion, or an interactive session when no operation is given."""
    parser = argparse.ArgumentParser(
        prog="cryptohacks",
        description="Convert text to and from hex, binary, Base64, Base32 and Caesar.",
        epilog=help_text(),
    )
    parser.add_argument(
        "operation",
        nargs="?",
        help="one of: " + ", ".join(op.code for op in Operation),
    )
    parser.add_argument("text", nargs="?", help="input text; read from stdin if omitted")
    parser.add_argument("-r", "--rot", default="", help="shift for the Caesar cipher")
    args = parser.parse_args(argv)

    if args.operation is None:
        return _interactive()

    try:
        operation = _parse_operation(args.operation)
    except ValueError as exc:
        parser.error(str(exc))

    text = args.text
    if text is None:
        text = sys.stdin.read().rstrip("\r\n")

    try:
        result = convert(operation, text, args.rot)
    except ValueError as exc:
        print(f"decode error: {exc}", file=sys.stderr)
        return 1
    print(OUTPUT_PREFIX + result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())