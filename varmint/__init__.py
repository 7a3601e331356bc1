# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
varmint - Protocol Buffers style varints for Python.

Unsigned 64-bit values are encoded base-128 with a continuation bit per
byte. One decoding state machine is shared by three kinds of reader:
blocking streams, suspendable reads and in-memory buffers.

Example usage:
    import io
    from varmint import encode_varint, read_u64_varint, ByteBuffer, get_u64_varint

    assert encode_varint(300) == b"\\xAC\\x02"
    assert read_u64_varint(io.BytesIO(b"\\xAC\\x02")) == 300

    buf = ByteBuffer(b"\\xB5\\xFF\\xAC\\x02")
    assert get_u64_varint(buf) == 0x4B3FB5
"""

from .errors import (
    VarintError,
    LengthExceededError,
    TruncatedError,
    WidthExceededError,
    ParserStateError,
)
from .parser import Parser, MAX_VARINT_LEN
from .varint import (
    U64_MAX,
    USIZE_BITS,
    encode_varint,
    encoded_length,
    decode_varint,
    check_width,
)
from .source import PENDING, EOF, drive
from .read import (
    read_u64_varint,
    try_read_u64_varint,
    read_usize_varint,
    try_read_usize_varint,
)
from .task import (
    FeedSource,
    NonBlockingSource,
    ReadVarintTask,
    read_u64_varint_async,
    try_read_u64_varint_async,
    read_usize_varint_async,
    try_read_usize_varint_async,
)
from .buffer import (
    ByteBuffer,
    get_u64_varint,
    try_get_u64_varint,
    get_usize_varint,
    try_get_usize_varint,
)
from .write import (
    WriteZeroError,
    write_u64_varint,
    write_usize_varint,
    write_u64_varint_async,
    write_usize_varint_async,
)
from .transport import (
    Transport,
    TransportError,
    TimeoutError,
)

__version__ = "0.1.0"

__all__ = [
    # Errors
    "VarintError",
    "LengthExceededError",
    "TruncatedError",
    "WidthExceededError",
    "ParserStateError",
    "WriteZeroError",
    # Core
    "Parser",
    "MAX_VARINT_LEN",
    "U64_MAX",
    "USIZE_BITS",
    "encode_varint",
    "encoded_length",
    "decode_varint",
    "check_width",
    "PENDING",
    "EOF",
    "drive",
    # Blocking reads
    "read_u64_varint",
    "try_read_u64_varint",
    "read_usize_varint",
    "try_read_usize_varint",
    # Suspendable reads
    "FeedSource",
    "NonBlockingSource",
    "ReadVarintTask",
    "read_u64_varint_async",
    "try_read_u64_varint_async",
    "read_usize_varint_async",
    "try_read_usize_varint_async",
    # Buffered reads
    "ByteBuffer",
    "get_u64_varint",
    "try_get_u64_varint",
    "get_usize_varint",
    "try_get_usize_varint",
    # Writes
    "write_u64_varint",
    "write_usize_varint",
    "write_u64_varint_async",
    "write_usize_varint_async",
    # Transport
    "Transport",
    "TransportError",
    "TimeoutError",
]
