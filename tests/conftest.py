# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Pytest configuration and shared fixtures."""

import io

import pytest


def pytest_addoption(parser):
    """Add custom command-line options."""
    parser.addoption(
        "--device",
        action="store",
        default=None,
        help="Serial port wired as a loopback (e.g., /dev/ttyUSB0)",
    )


class TrickleStream(io.RawIOBase):
    """
    Non-blocking raw stream that hands out one byte per ready slot.

    `script` is a sequence of byte values and None; None means the stream
    has nothing ready on that read. After the script runs out the stream
    reports EOF.
    """

    def __init__(self, script, raise_blocking: bool = False):
        self._script = list(script)
        self._raise_blocking = raise_blocking
        self.reads = 0

    def readable(self) -> bool:
        return True

    def read(self, size: int = -1):
        self.reads += 1
        if not self._script:
            return b""
        item = self._script.pop(0)
        if item is None:
            if self._raise_blocking:
                raise BlockingIOError("would block")
            return None
        return bytes([item])


@pytest.fixture
def trickle_stream():
    """Factory for TrickleStream instances."""
    return TrickleStream


@pytest.fixture(scope="session")
def device_port(request):
    """Get the loopback serial port from the command line."""
    port = request.config.getoption("--device")
    if port is None:
        pytest.skip("No --device given")
    return port
