# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Serial transport exchanging varints.

Reads go through the blocking read adapter, one byte per serial read, so a
read never takes bytes belonging to the next value.
"""

import logging
import time
from typing import List, Optional

import serial

from .errors import TruncatedError
from .read import StreamSource
from .source import decode_from
from .write import write_u64_varint

logger = logging.getLogger(__name__)


class TransportError(Exception):
    """Base exception for transport errors."""
    pass


class TimeoutError(TransportError):
    """Timeout waiting for a varint."""
    pass


class Transport:
    """
    Serial port carrying a stream of varints.

    Can be used as a context manager:
        with Transport("/dev/ttyACM0") as t:
            t.write_varint(300)
            value = t.read_varint()
    """

    def __init__(
        self,
        port: str,
        baudrate: int = 115200,
        timeout: float = 5.0,
    ):
        """
        Open the serial port.

        Args:
            port: Serial port path (e.g., "/dev/ttyACM0")
            baudrate: Baud rate (default 115200)
            timeout: Per-byte read timeout in seconds (default 5.0)
        """
        self._ser = serial.Serial(port, baudrate, timeout=timeout)
        time.sleep(0.1)  # Let the device settle
        logger.debug("opened %s at %d baud", port, baudrate)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def close(self):
        """Close the serial connection."""
        if self._ser and self._ser.is_open:
            self._ser.close()

    @property
    def port(self) -> str:
        """Return the serial port name."""
        return self._ser.port

    def _receive(self, optional: bool) -> Optional[int]:
        # pyserial returns b"" when the read times out
        try:
            value = decode_from(StreamSource(self._ser), optional=optional)
        except TruncatedError as e:
            raise TimeoutError(
                f"Timeout waiting for varint ({e.consumed} byte(s) received)"
            ) from e
        logger.debug("received varint %r", value)
        return value

    def write_varint(self, value: int) -> int:
        """
        Send one varint.

        Returns:
            Number of bytes written
        """
        count = write_u64_varint(self._ser, value)
        self._ser.flush()
        logger.debug("sent varint %d (%d byte(s))", value, count)
        return count

    def read_varint(self) -> int:
        """
        Receive one varint.

        Raises:
            TimeoutError: If the port goes quiet before the varint is complete
            LengthExceededError: If the varint needs more than 64 bits
        """
        return self._receive(optional=False)

    def try_read_varint(self) -> Optional[int]:
        """
        Receive one varint, or None if nothing arrives within the timeout.

        Raises:
            TimeoutError: If the port goes quiet part way through a varint
        """
        return self._receive(optional=True)

    def read_varints(self, count: int) -> List[int]:
        """Receive `count` consecutive varints."""
        return [self.read_varint() for _ in range(count)]
