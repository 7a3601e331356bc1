# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Byte-source capability shared by every read adapter.

A source answers one question: what is the next byte? The answer is a
byte value, PENDING (nothing yet, ask again later) or EOF (never any more).
drive() is the one decode loop; the blocking, suspending and buffered
adapters only differ in the source they hand it.
"""

from enum import Enum
from typing import Callable, Optional, Union

from .errors import TruncatedError
from .parser import Parser


class Signal(Enum):
    """Non-byte answers a source can give."""
    PENDING = "pending"
    EOF = "eof"

    def __repr__(self) -> str:
        return f"<{self.name}>"


PENDING = Signal.PENDING
EOF = Signal.EOF

# A source's answer to "next byte?"
Fetched = Union[int, Signal]
NextByte = Callable[[], Fetched]


def drive(parser: Parser, next_byte: NextByte, optional: bool = False) -> Union[int, None, Signal]:
    """
    Feed bytes from next_byte into parser until it is done.

    Args:
        parser: Parser to resume; may already hold consumed bytes
        next_byte: Source callback returning a byte, PENDING or EOF
        optional: Report an empty source as None instead of a fault

    Returns:
        The decoded value, None for an empty optional read, or PENDING if
        the source has nothing yet. On PENDING the parser keeps its state
        and drive() can be called again with it.

    Raises:
        TruncatedError: If the source ends part way through a value
        LengthExceededError: If the value needs more than 64 bits
    """
    while not parser.done():
        fetched = next_byte()
        if fetched is PENDING:
            return PENDING
        if fetched is EOF:
            if optional and parser.consumed == 0:
                return None
            raise TruncatedError(parser.consumed)
        parser.push(fetched)
    return parser.result()


def decode_from(next_byte: NextByte, optional: bool = False) -> Optional[int]:
    """Run drive() to completion over a source that never answers PENDING."""
    result = drive(Parser(), next_byte, optional)
    if result is PENDING:
        raise BlockingIOError("varint source is not ready")
    return result
