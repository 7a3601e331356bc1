# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Tests for blocking stream reads."""

from io import BytesIO

import pytest
from varmint.errors import LengthExceededError, TruncatedError, WidthExceededError
from varmint.read import (
    read_u64_varint,
    try_read_u64_varint,
    read_usize_varint,
    try_read_usize_varint,
)


class TestReadU64Varint:
    """Tests for read_u64_varint function."""

    @pytest.mark.parametrize("data,expected", [
        (b"\x00", 0),
        (b"\x01", 1),
        (b"\xAC\x02", 0x12C),
        (b"\xB5\xFF\xAC\x02", 0x4B3FB5),
        (b"\xFF" * 8 + b"\x7F", 0x7FFFFFFFFFFFFFFF),
        (b"\xFF" * 9 + b"\x01", 0xFFFFFFFFFFFFFFFF),
    ])
    def test_known_vectors(self, data, expected):
        """Literal vectors decode from a stream."""
        assert read_u64_varint(BytesIO(data)) == expected

    def test_stops_after_varint(self):
        """Bytes after the varint are left in the stream."""
        stream = BytesIO(b"\xAC\x02\x07")
        assert read_u64_varint(stream) == 0x12C
        assert stream.tell() == 2
        assert read_u64_varint(stream) == 7

    def test_empty_raises(self):
        """An empty stream is a truncation for a mandatory read."""
        with pytest.raises(TruncatedError):
            read_u64_varint(BytesIO(b""))

    def test_truncated_raises(self):
        """A stream ending mid-value raises TruncatedError."""
        with pytest.raises(TruncatedError):
            read_u64_varint(BytesIO(b"\xFF"))

    def test_too_many_raises(self):
        """An invalid tenth byte raises LengthExceededError."""
        with pytest.raises(LengthExceededError):
            read_u64_varint(BytesIO(b"\xFF" * 9 + b"\x02"))

    def test_non_blocking_stream_without_data(self, trickle_stream):
        """A non-blocking stream with nothing ready raises BlockingIOError."""
        with pytest.raises(BlockingIOError):
            read_u64_varint(trickle_stream([None]))

    def test_stream_error_propagates(self):
        """Errors from the stream are not wrapped."""
        class Broken:
            def read(self, size):
                raise OSError("device gone")

        with pytest.raises(OSError, match="device gone"):
            read_u64_varint(Broken())


class TestTryReadU64Varint:
    """Tests for try_read_u64_varint function."""

    def test_some(self):
        """A complete varint is returned."""
        assert try_read_u64_varint(BytesIO(b"\xAC\x02")) == 0x12C

    def test_none_on_empty(self):
        """An empty stream gives None."""
        assert try_read_u64_varint(BytesIO(b"")) is None

    def test_truncated_is_not_none(self):
        """A partial varint is a fault, not an absent value."""
        with pytest.raises(TruncatedError):
            try_read_u64_varint(BytesIO(b"\xFF"))

    def test_drains_stream(self):
        """Reading until None returns every value."""
        stream = BytesIO(b"\x01\xAC\x02\x00")
        values = []
        while True:
            value = try_read_u64_varint(stream)
            if value is None:
                break
            values.append(value)
        assert values == [1, 0x12C, 0]


class TestReadUsizeVarint:
    """Tests for the width-checked reads."""

    def test_fits(self):
        """Values inside the width are returned."""
        assert read_usize_varint(BytesIO(b"\xFF\xFF\xFF\xFF\x0F"), bits=32) == 0xFFFFFFFF

    def test_too_wide(self):
        """Values outside the width raise WidthExceededError."""
        with pytest.raises(WidthExceededError):
            read_usize_varint(BytesIO(b"\x80\x80\x80\x80\x10"), bits=32)

    def test_width_error_is_not_length_error(self):
        """Width overflow is reported distinctly from LengthExceededError."""
        try:
            read_usize_varint(BytesIO(b"\x80\x02"), bits=8)
        except WidthExceededError as e:
            assert not isinstance(e, LengthExceededError)
        else:
            pytest.fail("expected WidthExceededError")

    def test_try_none(self):
        """Optional width-checked read of an empty stream gives None."""
        assert try_read_usize_varint(BytesIO(b""), bits=16) is None

    def test_try_too_wide(self):
        """Optional width-checked read still checks the width."""
        with pytest.raises(WidthExceededError):
            try_read_usize_varint(BytesIO(b"\x80\x80\x04"), bits=16)
