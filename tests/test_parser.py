# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Tests for the Parser state machine."""

import pytest
from varmint.errors import LengthExceededError, ParserStateError
from varmint.parser import Parser, MAX_VARINT_LEN


def feed(data: bytes) -> Parser:
    parser = Parser()
    for byte in data:
        parser.push(byte)
    return parser


class TestParserDecode:
    """Tests for decoding through push/done/result."""

    @pytest.mark.parametrize("data,expected", [
        (b"\x00", 0),
        (b"\x01", 1),
        (b"\xAC\x02", 0x12C),
        (b"\xB5\xFF\xAC\x02", 0x4B3FB5),
    ])
    def test_known_vectors(self, data, expected):
        """Literal vectors decode to their values."""
        parser = feed(data)
        assert parser.done()
        assert parser.result() == expected
        assert parser.consumed == len(data)

    def test_not_done_while_continuation_set(self):
        """Parser waits for a byte with the high bit clear."""
        parser = Parser()
        parser.push(0xAC)
        assert not parser.done()
        parser.push(0x02)
        assert parser.done()

    def test_max_63_bits(self):
        """Nine bytes carry 63 bits."""
        parser = feed(b"\xFF" * 8 + b"\x7F")
        assert parser.result() == 0x7FFFFFFFFFFFFFFF

    def test_max_64_bits(self):
        """Tenth byte 0x01 sets bit 63."""
        parser = feed(b"\xFF" * 9 + b"\x01")
        assert parser.result() == 0xFFFFFFFFFFFFFFFF
        assert parser.consumed == MAX_VARINT_LEN

    def test_tenth_byte_zero_accepted(self):
        """A redundant zero tenth group still decodes."""
        parser = feed(b"\x80" * 9 + b"\x00")
        assert parser.done()
        assert parser.result() == 0

    def test_non_minimal_accepted(self):
        """Trailing zero groups decode to the same value."""
        assert feed(b"\x81\x80\x00").result() == 1


class TestParserOverflow:
    """Tests for the 64-bit boundary."""

    @pytest.mark.parametrize("last", [0x02, 0x03, 0x7F, 0x80, 0x81, 0xFF])
    def test_invalid_tenth_byte(self, last):
        """Any tenth byte other than 0x00/0x01 is rejected."""
        parser = feed(b"\xFF" * 9)
        with pytest.raises(LengthExceededError, match="exceeded allowed length"):
            parser.push(last)

    @pytest.mark.parametrize("prefix", [b"\x80" * 9, b"\xFF" * 9, b"\xAA" * 9])
    def test_invalid_tenth_byte_any_prefix(self, prefix):
        """The rejection does not depend on the nine-byte prefix."""
        parser = feed(prefix)
        with pytest.raises(LengthExceededError):
            parser.push(0x02)

    def test_failed_parser_is_terminal(self):
        """A parser that overflowed rejects further input and has no result."""
        parser = feed(b"\xFF" * 9)
        with pytest.raises(LengthExceededError):
            parser.push(0x02)
        assert not parser.done()
        with pytest.raises(ParserStateError):
            parser.push(0x01)
        with pytest.raises(ParserStateError):
            parser.result()


class TestParserMisuse:
    """Tests for out-of-order use."""

    def test_push_after_done(self):
        """Pushing into a done parser is an error."""
        parser = feed(b"\x01")
        with pytest.raises(ParserStateError, match="already done"):
            parser.push(0x01)
        assert parser.result() == 1

    def test_result_before_done(self):
        """Reading the result early is an error."""
        parser = Parser()
        with pytest.raises(ParserStateError, match="not done"):
            parser.result()
        parser.push(0x80)
        with pytest.raises(ParserStateError):
            parser.result()
