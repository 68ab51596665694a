# MIT License
#
# Copyright (c) 2018 Evgeny Medvedev, evge.medvedev@gmail.com
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
#
# Modified by: Cuong CT, 6/12/2025
# Change Description: using eth_utils library for implement some formatter utilities

from typing import Optional

from eth_utils import decode_hex, encode_hex, is_0x_prefixed

from utils.logger_utils import get_logger

logger = get_logger("Formatter Utils")


class HexDecodingError(ValueError):
    """Raised when a hex encoded field cannot be turned into bytes."""

    def __init__(self, value: object, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"Cannot decode hex value {value!r}: {reason}")


def normalize_legacy_hex(value: str) -> str:
    """
    Normalizes a hex string written by the legacy block producer.

    Receipts in older block documents use two encodings for the same quantity:
    a regular ``0x`` prefix, or a bare ``x`` delimiter glued to a zero padded
    payload. The encoding is guessed from the length parity of the whole string:

    - even length: strip a leading ``0x`` prefix (once)
    - odd length: drop every literal ``x`` character

    ``"0x1a"`` becomes ``"1a"`` and ``"0xa"`` becomes ``"0a"``. The result may
    still be odd (``"a"``), in which case decoding fails.
    """
    if len(value) % 2 == 0:
        return value[2:] if value.startswith("0x") else value
    return value.replace("x", "")


def _normalize_strict_hex(value: str) -> str:
    """Accepts only 0x-prefixed data or JSON-RPC quantities (odd payloads are left padded)."""
    if not is_0x_prefixed(value):
        raise HexDecodingError(value, "missing 0x prefix")
    payload = value[2:]
    if len(payload) % 2:
        payload = "0" + payload
    return payload


def hex_to_bytes(value: Optional[str], legacy: bool = True) -> bytes:
    """
    Decodes a hex encoded receipt field into raw bytes.

    Args:
        value: Hex string as stored in the block document.
        legacy: Use the length parity heuristic of ``normalize_legacy_hex``.
            When False only explicit ``0x`` prefixed input is accepted.

    Raises:
        HexDecodingError: If the value is missing, has an odd number of digits
            after normalization or contains non-hex characters.
    """
    if not isinstance(value, str):
        raise HexDecodingError(value, "expected a string")

    payload = normalize_legacy_hex(value) if legacy else _normalize_strict_hex(value)
    if len(payload) % 2:
        raise HexDecodingError(value, "odd number of hex digits")
    try:
        return decode_hex(payload)
    except ValueError as e:
        logger.debug(f"Rejected hex value {value!r} (legacy={legacy})")
        raise HexDecodingError(value, str(e)) from e


def bytes_to_hex(raw: bytes) -> str:
    """Encodes raw bytes as a 0x-prefixed, even length hex string."""
    return encode_hex(raw)


def bytes_to_int(raw: bytes, max_size: int, field: str) -> int:
    """
    Converts big-endian bytes to an integer no wider than ``max_size`` bytes.

    Raises:
        ValueError: If the value does not fit the target width.
    """
    if len(raw) > max_size:
        raise ValueError(f"{field} is {len(raw)} bytes wide, expected at most {max_size}")
    return int.from_bytes(raw, byteorder="big")


