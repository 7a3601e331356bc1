# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Blocking varint reads from file-like objects.

Any object with a read(n) method works: files, sockets via makefile(),
io.BytesIO, serial ports. Bytes are read one at a time so nothing past the
end of the varint is consumed.
"""

from typing import BinaryIO, Optional

from .source import EOF, Fetched, decode_from
from .varint import USIZE_BITS, check_width


class StreamSource:
    """Blocking byte source over a file-like object."""

    def __init__(self, stream: BinaryIO):
        self._stream = stream

    def __call__(self) -> Fetched:
        data = self._stream.read(1)
        if data is None:
            # Non-blocking stream with nothing buffered
            raise BlockingIOError("stream has no data available")
        if not data:
            return EOF
        return data[0]


def read_u64_varint(stream: BinaryIO) -> int:
    """
    Read one varint from a stream, blocking until it is complete.

    Raises:
        TruncatedError: If the stream ends before the varint is complete,
            including when it is empty
        LengthExceededError: If the varint needs more than 64 bits
    """
    return decode_from(StreamSource(stream))


def try_read_u64_varint(stream: BinaryIO) -> Optional[int]:
    """
    Read one varint, or return None if the stream is already at its end.

    Raises:
        TruncatedError: If the stream ends part way through the varint
        LengthExceededError: If the varint needs more than 64 bits
    """
    return decode_from(StreamSource(stream), optional=True)


def read_usize_varint(stream: BinaryIO, bits: int = USIZE_BITS) -> int:
    """Read one varint and check it fits in an unsigned int of `bits` bits."""
    return check_width(read_u64_varint(stream), bits)


def try_read_usize_varint(stream: BinaryIO, bits: int = USIZE_BITS) -> Optional[int]:
    """Like try_read_u64_varint, with the width check of read_usize_varint."""
    value = try_read_u64_varint(stream)
    if value is None:
        return None
    return check_width(value, bits)
