import pytest

from utils.formatter_utils import (
    HexDecodingError,
    bytes_to_hex,
    bytes_to_int,
    hex_to_bytes,
    normalize_legacy_hex,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("0x1a", "1a"),        # even: strip 0x prefix
        ("0xa", "0a"),         # odd: bare 'x' delimiter removed
        ("0x0000a1", "0000a1"),
        ("0x00a", "000a"),
        ("1a", "1a"),          # even without prefix is left alone
        ("", ""),
        ("x", ""),
        ("a", "a"),
        ("0x", ""),
    ],
)
def test_normalize_legacy_hex(value, expected):
    assert normalize_legacy_hex(value) == expected


def test_normalize_legacy_hex_strips_prefix_only_once():
    # Leading zeros of the payload must survive (no character-set trimming)
    assert normalize_legacy_hex("0x0x") == "0x"
    assert normalize_legacy_hex("0x0012") == "0012"


def test_hex_to_bytes_even_length():
    assert hex_to_bytes("0x1a") == bytes.fromhex("1a")


def test_hex_to_bytes_odd_length_uses_x_delimiter_branch():
    assert hex_to_bytes("0xa") == bytes.fromhex("0a")


def test_hex_to_bytes_empty_payload():
    assert hex_to_bytes("0x") == b""
    assert hex_to_bytes("") == b""


def test_hex_to_bytes_single_character_fails():
    with pytest.raises(HexDecodingError, match="odd number of hex digits"):
        hex_to_bytes("a")


def test_hex_to_bytes_non_hex_characters_fail():
    with pytest.raises(HexDecodingError) as exc_info:
        hex_to_bytes("0xzz")
    assert exc_info.value.value == "0xzz"
    assert isinstance(exc_info.value, ValueError)


def test_hex_to_bytes_rejects_non_string():
    with pytest.raises(HexDecodingError, match="expected a string"):
        hex_to_bytes(None)


def test_strict_hex_requires_prefix():
    with pytest.raises(HexDecodingError, match="missing 0x prefix"):
        hex_to_bytes("1a", legacy=False)
    with pytest.raises(HexDecodingError, match="missing 0x prefix"):
        hex_to_bytes("x1a", legacy=False)


def test_strict_hex_pads_quantities():
    assert hex_to_bytes("0xa", legacy=False) == b"\x0a"
    assert hex_to_bytes("0x5208", legacy=False) == b"\x52\x08"
    assert hex_to_bytes("0x", legacy=False) == b""


def test_legacy_and_strict_differ_on_bare_x():
    # Legacy producer output "x1a" is only understood by the legacy heuristic
    assert hex_to_bytes("x1a") == b"\x1a"


def test_bytes_to_hex():
    assert bytes_to_hex(b"\x00\x1a") == "0x001a"
    assert bytes_to_hex(b"") == "0x"


def test_bytes_to_int_width_check():
    assert bytes_to_int(b"\x52\x08", 8, "gas_used") == 21000
    assert bytes_to_int(b"", 8, "status") == 0
    with pytest.raises(ValueError, match="status is 9 bytes wide"):
        bytes_to_int(b"\x01" * 9, 8, "status")
