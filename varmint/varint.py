# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Varint encoding/decoding (LEB128-style, Protocol Buffers compatible).

Values are unsigned and bounded to 64 bits. Encoding is always minimal;
decoding accepts redundant trailing zero groups.
"""

import sys
from typing import Tuple

from .errors import TruncatedError, WidthExceededError
from .parser import Parser

U64_BITS = 64
U64_MAX = (1 << U64_BITS) - 1

# Width of the host's native word, from sys.maxsize
USIZE_BITS = sys.maxsize.bit_length() + 1


def encode_varint(value: int) -> bytes:
    """
    Encode an unsigned 64-bit integer as a varint.

    Args:
        value: Integer in range 0 to 2**64 - 1

    Returns:
        Varint-encoded bytes (1 to 10 bytes)
    """
    if value < 0:
        raise ValueError("Cannot encode negative value as varint")
    if value > U64_MAX:
        raise ValueError("Cannot encode value wider than 64 bits as varint")

    result = bytearray()
    while value > 0x7F:
        result.append((value & 0x7F) | 0x80)
        value >>= 7
    result.append(value)
    return bytes(result)


def encoded_length(value: int) -> int:
    """Return the number of bytes encode_varint(value) produces."""
    if value < 0 or value > U64_MAX:
        raise ValueError(f"Value out of u64 range: {value}")
    return max(1, (value.bit_length() + 6) // 7)


def decode_varint(data: bytes, offset: int = 0) -> Tuple[int, int]:
    """
    Decode a varint from bytes.

    Args:
        data: Bytes containing the varint
        offset: Starting offset in data

    Returns:
        Tuple of (decoded value, new offset after varint)

    Raises:
        TruncatedError: If data ends before the varint does
        LengthExceededError: If the varint needs more than 64 bits
    """
    parser = Parser()
    while not parser.done():
        if offset >= len(data):
            raise TruncatedError(parser.consumed)
        parser.push(data[offset])
        offset += 1
    return parser.result(), offset


def check_width(value: int, bits: int = USIZE_BITS) -> int:
    """
    Check that a decoded value fits an unsigned integer of the given width.

    Returns:
        value, unchanged

    Raises:
        WidthExceededError: If value >= 2**bits
    """
    if value >> bits:
        raise WidthExceededError(value, bits)
    return value
