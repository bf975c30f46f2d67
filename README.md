# cryptohacks

A small toolbox for turning text into common encodings and back:

- hexadecimal
- 7-bit binary, one group of seven digits per byte, groups separated by spaces
- Base64 and Base32 (standard, padded alphabets)
- a running Caesar-style shift over the letters a–z (one direction only)

It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

## Command line

Run a single conversion:

```
cryptohacks T2H "Hi"
cryptohacks H2T 4869
cryptohacks T2C "hello" --rot 3
echo "SGk=" | cryptohacks B642T
```

The result is printed after the prefix `Output Here:`. If the text argument
is left out, it is read from standard input (a trailing line break is
dropped). `-r` / `--rot` gives the starting shift for the Caesar operation;
a value that is not a plain decimal integer counts as 0.

Operation names are case-insensitive and spaces in them are ignored, so
`"T 2 H"` and `t2h` both work:

| Operation | Meaning            |
|-----------|--------------------|
| `T2H`     | text to hex        |
| `T2B`     | text to binary     |
| `T2B64`   | text to Base64     |
| `T2B32`   | text to Base32     |
| `T2C`     | text to Caesar     |
| `H2T`     | hex to text        |
| `B2T`     | binary to text     |
| `B642T`   | Base64 to text     |
| `B322T`   | Base32 to text     |

A decoding failure prints `decode error: ...` to standard error and exits
with status 1. An unknown operation is reported as a usage error.

Run with no arguments to start an interactive prompt:

```
cryptohacks
```

It asks for an operation, then the input text (and the shift for `T 2 C`),
and prints the result. Type `help` for the abbreviations, and `close`,
`quit` or `exit` (confirmed with `Yes`) or end of input to leave.

## Library use

```python
from cryptohacks.hexcodec import encode_hex, decode_hex
from cryptohacks.binary import text_to_binary, binary_to_text
from cryptohacks.basecodec import encode_base64, decode_base64, encode_base32, decode_base32
from cryptohacks.caesar import encipher

encode_hex("Hi")                  # '4869'
decode_hex("4869")                # 'Hi'
text_to_binary("Hi")              # '1001000 1101001'
binary_to_text("1001000 1101001") # 'Hi'
encode_base64("Hi")               # 'SGk='
encode_base32("Hi")               # 'JBUQ===='
```

Decoders raise `ValueError` on malformed input. Decoded bytes that are not
valid UTF-8 are replaced rather than rejected.

`cryptohacks.app` provides the `Operation` enumeration (its values are the
labels such as `"T 2 H"`), `convert(operation, text, rot)`, which accepts an
`Operation` or its name, and `help_text()`, which explains the abbreviations.

### Details worth knowing

- `text_to_binary` works on the UTF-8 bytes of the text. Bytes outside the
  printable ASCII table, and `+`, become empty groups.
- `binary_to_text` reads seven digits, skips one separator, and repeats. An
  unknown group decodes to a NUL character; a short trailing group raises
  `ValueError`.
- `encipher` lower-cases the text and carries the shift from one letter to
  the next, so it is not a plain fixed-rotation Caesar cipher. Non-letters
  pass through unchanged; a shift that ends up outside 1..26 gives a NUL
  character for that letter. There is no matching decipher function.

## What it does not do

There is no full-screen or windowed interface; interactive use is a
line-by-line prompt.

## Running the tests

```
pip install .[test]
pytest
```