# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Incremental varint decoder.

A Parser takes one byte at a time and knows nothing about where the bytes
come from. Every read adapter builds a fresh Parser per value.
"""

from .errors import LengthExceededError, ParserStateError

# Bit position of the 10th byte, which may only carry bit 63
LAST_GROUP_OFFSET = 63
MAX_VARINT_LEN = 10


class Parser:
    """
    State machine decoding a single unsigned 64-bit varint.

    Example:
        parser = Parser()
        for byte in b"\\xAC\\x02":
            parser.push(byte)
        assert parser.done() and parser.result() == 300
    """

    __slots__ = ("_done", "_failed", "_value", "_offset", "_consumed")

    def __init__(self):
        self._done = False
        self._failed = False
        self._value = 0
        self._offset = 0
        self._consumed = 0

    def push(self, byte: int) -> None:
        """
        Feed the next byte of the encoding.

        Args:
            byte: Byte value in range 0-255

        Raises:
            LengthExceededError: If the 10th byte carries more than bit 63
            ParserStateError: If the parser has already finished or failed
        """
        if self._done:
            raise ParserStateError("Parser already done")
        if self._failed:
            raise ParserStateError("Parser already failed")

        self._consumed += 1
        if self._offset == LAST_GROUP_OFFSET:
            # 0x00 is a redundant zero group, still accepted
            if byte > 0x01:
                self._failed = True
                raise LengthExceededError()
            self._value |= byte << LAST_GROUP_OFFSET
            self._done = True
        else:
            self._value |= (byte & 0x7F) << self._offset
            self._done = not (byte & 0x80)
            self._offset += 7

    def done(self) -> bool:
        """Return True once a complete value has been read."""
        return self._done

    def result(self) -> int:
        """
        Return the decoded value.

        Raises:
            ParserStateError: If the value is not complete
        """
        if not self._done:
            raise ParserStateError("Parser not done")
        return self._value

    @property
    def consumed(self) -> int:
        """Number of bytes pushed so far."""
        return self._consumed
