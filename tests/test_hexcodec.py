import pytest

from cryptohacks.hexcodec import decode_hex, encode_hex


def test_known_value():
    assert encode_hex("Hi") == "4869"


@pytest.mark.parametrize("text", ["", "Hello, World!", "Crypto-Hacks1", "ünïcødé"])
def test_round_trip(text):
    assert decode_hex(encode_hex(text)) == text


def test_encoding_is_lower_case_and_double_length():
    encoded = encode_hex("Z~{")
    assert encoded == encoded.lower()
    assert len(encoded) == 6


def test_surrounding_whitespace_is_ignored():
    assert decode_hex("  4869\n") == decode_hex("4869")


def test_upper_case_digits_accepted():
    assert decode_hex("4A4B") == decode_hex("4a4b")


def test_odd_length_raises():
    with pytest.raises(ValueError):
        decode_hex("486")


def test_non_hex_character_raises():
    with pytest.raises(ValueError):
        decode_hex("zz")


def test_inner_space_raises():
    with pytest.raises(ValueError):
        decode_hex("48 69")