# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Varint reads from in-memory buffers.

A buffer exposes remaining() (a view of the unread bytes) and advance(n).
Reads look at the resident bytes first and only advance the buffer once a
whole varint has been decoded, so an incomplete or malformed value leaves
the position untouched.
"""

from typing import Optional

from .errors import TruncatedError
from .parser import Parser
from .source import PENDING, Fetched, drive
from .varint import USIZE_BITS, check_width


class ByteBuffer:
    """
    Growable read buffer with a consume position.

    Example:
        buf = ByteBuffer(b"\\xAC")
        assert try_get_u64_varint(buf) is None
        buf.extend(b"\\x02")
        assert try_get_u64_varint(buf) == 300
    """

    def __init__(self, data: bytes = b""):
        self._data = bytes(data)
        self._pos = 0

    def remaining(self) -> memoryview:
        """Return a view of the bytes not yet consumed."""
        return memoryview(self._data)[self._pos:]

    def advance(self, count: int) -> None:
        """Mark `count` bytes as consumed."""
        if count < 0 or self._pos + count > len(self._data):
            raise ValueError(f"Cannot advance by {count}, {len(self)} byte(s) remaining")
        self._pos += count

    def extend(self, data: bytes) -> None:
        """Append bytes, dropping the already consumed prefix."""
        self._data = self._data[self._pos:] + bytes(data)
        self._pos = 0

    @property
    def position(self) -> int:
        """Offset of the next unread byte since the last extend()."""
        return self._pos

    def __len__(self) -> int:
        return len(self._data) - self._pos


class _PeekSource:
    """Walks a view without consuming it; PENDING once it runs out."""

    def __init__(self, view):
        self._view = view
        self.offset = 0

    def __call__(self) -> Fetched:
        if self.offset >= len(self._view):
            return PENDING
        byte = self._view[self.offset]
        self.offset += 1
        return byte


def _peek_varint(buf, optional: bool, bits: Optional[int] = None) -> Optional[int]:
    parser = Parser()
    source = _PeekSource(buf.remaining())
    result = drive(parser, source, optional)
    if result is PENDING:
        if optional:
            return None
        raise TruncatedError(parser.consumed)
    if bits is not None:
        check_width(result, bits)
    buf.advance(source.offset)
    return result


def get_u64_varint(buf) -> int:
    """
    Read one varint from a buffer and advance past it.

    Raises:
        TruncatedError: If the buffer does not hold a whole varint
        LengthExceededError: If the varint needs more than 64 bits
    """
    return _peek_varint(buf, optional=False)


def try_get_u64_varint(buf) -> Optional[int]:
    """
    Read one varint if the buffer holds a whole one.

    Returns:
        The value, or None if the buffer is empty or holds only part of a
        varint. The position is unchanged when None is returned.

    Raises:
        LengthExceededError: If the varint needs more than 64 bits
    """
    return _peek_varint(buf, optional=True)


def get_usize_varint(buf, bits: int = USIZE_BITS) -> int:
    """get_u64_varint with a width check; the buffer is not advanced on error."""
    return _peek_varint(buf, optional=False, bits=bits)


def try_get_usize_varint(buf, bits: int = USIZE_BITS) -> Optional[int]:
    """try_get_u64_varint with a width check; the buffer is not advanced on error."""
    return _peek_varint(buf, optional=True, bits=bits)
