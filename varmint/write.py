# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Varint writes to file-like objects and asyncio stream writers.

The value is encoded up front and handed to the sink in one write. Errors
raised by the sink propagate unchanged.
"""

import errno
from typing import BinaryIO

from .varint import USIZE_BITS, check_width, encode_varint


class WriteZeroError(OSError):
    """The sink accepted no bytes while some were still left to write."""
    pass


def _write_all(sink: BinaryIO, data: bytes) -> None:
    """Write every byte of data, continuing after short writes."""
    view = memoryview(data)
    while view:
        written = sink.write(view)
        if written is None:
            # Non-blocking raw stream that could not take any bytes
            sent = len(data) - len(view)
            raise BlockingIOError(
                errno.EAGAIN, f"sink not ready, {len(view)} byte(s) unwritten", sent
            )
        if written == 0:
            raise WriteZeroError(f"sink accepted 0 of {len(view)} remaining byte(s)")
        view = view[written:]


def write_u64_varint(sink: BinaryIO, value: int) -> int:
    """
    Encode value and write it to sink.

    Either every byte is written or an error is raised. A non-blocking
    sink that is not ready raises BlockingIOError, whose
    characters_written tells how many bytes did go out.

    Args:
        sink: Object with a write(data) method
        value: Integer in range 0 to 2**64 - 1

    Returns:
        Number of bytes written
    """
    data = encode_varint(value)
    _write_all(sink, data)
    return len(data)


def write_usize_varint(sink: BinaryIO, value: int, bits: int = USIZE_BITS) -> int:
    """Like write_u64_varint, rejecting values wider than `bits` bits."""
    return write_u64_varint(sink, check_width(value, bits))


async def write_u64_varint_async(writer, value: int) -> int:
    """
    Encode value, write it to an asyncio.StreamWriter and drain.

    Returns:
        Number of bytes written
    """
    data = encode_varint(value)
    writer.write(data)
    await writer.drain()
    return len(data)


async def write_usize_varint_async(writer, value: int, bits: int = USIZE_BITS) -> int:
    """write_u64_varint_async with a width check."""
    return await write_u64_varint_async(writer, check_width(value, bits))
