import pytest

from cryptohacks.basecodec import (
    decode_base32,
    decode_base64,
    encode_base32,
    encode_base64,
)

SAMPLES = ["", "f", "fo", "foo", "foob", "fooba", "foobar", "Crypto-Hacks1", "héllo wörld"]


def test_base64_known_vector():
    assert encode_base64("foobar") == "Zm9vYmFy"


def test_base32_known_vector():
    assert encode_base32("foo") == "MZXW6==="


@pytest.mark.parametrize("text", SAMPLES)
def test_base64_round_trip(text):
    assert decode_base64(encode_base64(text)) == text


@pytest.mark.parametrize("text", SAMPLES)
def test_base32_round_trip(text):
    assert decode_base32(encode_base32(text)) == text


@pytest.mark.parametrize("text", SAMPLES)
def test_encoded_lengths_are_padded(text):
    assert len(encode_base64(text)) % 4 == 0
    assert len(encode_base32(text)) % 8 == 0


def test_base64_ignores_line_breaks():
    encoded = encode_base64("foobar")
    assert decode_base64(encoded[:4] + "\r\n" + encoded[4:]) == "foobar"


def test_base64_missing_padding_raises():
    with pytest.raises(ValueError):
        decode_base64("Zm9vYg")


def test_base64_illegal_character_raises():
    with pytest.raises(ValueError):
        decode_base64("Zm9v*mFy")


def test_base32_lower_case_raises():
    with pytest.raises(ValueError):
        decode_base32("mzxw6===")


def test_base32_bad_length_raises():
    with pytest.raises(ValueError):
        decode_base32("MZXW6")


def test_base32_ignores_line_breaks():
    encoded = encode_base32("foobar")
    assert decode_base32(encoded[:8] + "\n" + encoded[8:]) == "foobar"