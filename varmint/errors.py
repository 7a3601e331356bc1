# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Exceptions raised while encoding or decoding varints.

Data faults derive from VarintError (a ValueError). Misuse of a parser or
read task raises ParserStateError. Errors from the underlying stream or
serial port are never wrapped.
"""


class VarintError(ValueError):
    """Base exception for malformed or unrepresentable varints."""
    pass


class LengthExceededError(VarintError):
    """The encoded value needs more than 64 bits."""

    def __init__(self, message: str = "varint exceeded allowed length"):
        super().__init__(message)


class TruncatedError(VarintError, EOFError):
    """The source ran out after part of a varint was consumed."""

    def __init__(self, consumed: int = 0):
        self.consumed = consumed
        super().__init__(f"varint truncated after {consumed} byte(s)")


class WidthExceededError(VarintError):
    """The decoded value does not fit the requested integer width."""

    def __init__(self, value: int, bits: int):
        self.value = value
        self.bits = bits
        super().__init__(f"varint value {value:#x} exceeds {bits}-bit width")


class ParserStateError(RuntimeError):
    """A parser or read task was used out of order."""
    pass
