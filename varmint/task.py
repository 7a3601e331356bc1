# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Suspendable varint reads.

ReadVarintTask is an explicit poll-to-completion state machine: each call
to poll() pulls as many bytes as the source has ready and returns PENDING
when it runs dry. The partially decoded value stays in the task, so the
caller can poll again whenever more bytes arrive.

Example:
    source = FeedSource()
    task = ReadVarintTask(source)
    source.feed(b"\\xAC")
    assert task.poll() is PENDING
    source.feed(b"\\x02")
    assert task.poll() == 300

The async helpers drive a task from an asyncio.StreamReader. Cancelling
one of them mid-value drops the bytes already taken from the reader.
"""

import logging
from typing import BinaryIO, Optional, Union

from .errors import ParserStateError, VarintError
from .parser import Parser
from .source import EOF, PENDING, Fetched, NextByte, Signal, drive
from .varint import USIZE_BITS, check_width

logger = logging.getLogger(__name__)


class FeedSource:
    """
    Byte source filled by the caller.

    Bytes handed to feed() are given out one at a time; bytes left over
    after a varint completes stay queued for the next read.
    """

    def __init__(self, data: bytes = b""):
        self._buffer = bytearray(data)
        self._pos = 0
        self._eof = False

    def feed(self, data: bytes) -> None:
        """Queue more bytes."""
        if self._eof:
            raise ParserStateError("feed after feed_eof")
        # Drop the bytes already handed out
        del self._buffer[:self._pos]
        self._pos = 0
        self._buffer.extend(data)

    def feed_eof(self) -> None:
        """Mark the end of input; no more bytes will arrive."""
        self._eof = True

    @property
    def at_eof(self) -> bool:
        return self._eof and not len(self)

    def __len__(self) -> int:
        return len(self._buffer) - self._pos

    def __call__(self) -> Fetched:
        if self._pos < len(self._buffer):
            byte = self._buffer[self._pos]
            self._pos += 1
            return byte
        return EOF if self._eof else PENDING


class NonBlockingSource:
    """Byte source over a non-blocking raw stream (socket file, pipe)."""

    def __init__(self, stream: BinaryIO):
        self._stream = stream

    def __call__(self) -> Fetched:
        try:
            data = self._stream.read(1)
        except BlockingIOError:
            return PENDING
        if data is None:
            return PENDING
        if not data:
            return EOF
        return data[0]


class ReadVarintTask:
    """
    One varint read that can be suspended and resumed.

    Args:
        source: Callable returning a byte, PENDING or EOF
        optional: Complete with None if the source ends before any byte
    """

    def __init__(self, source: NextByte, optional: bool = False):
        self._source = source
        self._optional = optional
        self._parser: Optional[Parser] = Parser()
        self._done = False

    @property
    def done(self) -> bool:
        """True once poll() has returned a result."""
        return self._done

    @property
    def consumed(self) -> int:
        """Bytes taken from the source so far by the unfinished read."""
        return self._parser.consumed if self._parser is not None else 0

    def poll(self) -> Union[int, None, Signal]:
        """
        Advance the read as far as the source allows.

        Returns:
            PENDING if more bytes are needed, otherwise the decoded value
            (or None for an optional read of an empty source)

        Raises:
            TruncatedError: If the source ends part way through the varint
            LengthExceededError: If the varint needs more than 64 bits
            ParserStateError: If the task already finished or was cancelled
        """
        if self._parser is None:
            raise ParserStateError("poll a ReadVarintTask after it's done")

        try:
            result = drive(self._parser, self._source, self._optional)
        except VarintError:
            self._parser = None
            raise

        if result is PENDING:
            logger.debug("varint read suspended after %d byte(s)", self._parser.consumed)
            return PENDING

        self._parser = None
        self._done = True
        return result

    def cancel(self) -> int:
        """
        Abandon the read.

        Bytes already taken from the source are not given back.

        Returns:
            Number of bytes that were consumed and are now lost
        """
        lost = self.consumed
        if self._parser is not None and lost:
            logger.debug("varint read cancelled, %d byte(s) dropped", lost)
        self._parser = None
        return lost


async def _read_varint_async(reader, optional: bool) -> Optional[int]:
    """Drive a ReadVarintTask with bytes read one at a time from reader."""
    source = FeedSource()
    task = ReadVarintTask(source, optional)
    while True:
        result = task.poll()
        if result is not PENDING:
            return result
        data = await reader.read(1)
        if data:
            source.feed(data)
        else:
            source.feed_eof()


async def read_u64_varint_async(reader) -> int:
    """
    Read one varint from an asyncio.StreamReader.

    Raises:
        TruncatedError: If the reader hits EOF before the varint is complete
        LengthExceededError: If the varint needs more than 64 bits
    """
    return await _read_varint_async(reader, optional=False)


async def try_read_u64_varint_async(reader) -> Optional[int]:
    """Read one varint, or return None if the reader is already at EOF."""
    return await _read_varint_async(reader, optional=True)


async def read_usize_varint_async(reader, bits: int = USIZE_BITS) -> int:
    """Read one varint and check it fits in `bits` bits."""
    return check_width(await read_u64_varint_async(reader), bits)


async def try_read_usize_varint_async(reader, bits: int = USIZE_BITS) -> Optional[int]:
    """Optional read with the width check of read_usize_varint_async."""
    value = await try_read_u64_varint_async(reader)
    if value is None:
        return None
    return check_width(value, bits)
