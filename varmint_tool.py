#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Command-line tool for encoding, decoding and exchanging varints.

Usage:
    python varmint_tool.py encode 300 1 0
    python varmint_tool.py decode ac02b5ffac02
    python varmint_tool.py send --port /dev/ttyACM0 300 42
    python varmint_tool.py recv --port /dev/ttyACM0 --count 2

Requirements:
    pip install pyserial
"""

import argparse
import logging
import sys

try:
    import serial
except ImportError:
    print("Error: pyserial not installed. Run: pip install pyserial")
    sys.exit(1)

from varmint import ByteBuffer, Transport, encode_varint, get_u64_varint
from varmint.transport import TransportError


def parse_int(text: str) -> int:
    """Parse a decimal or 0x-prefixed integer argument."""
    try:
        return int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}")


def cmd_encode(values):
    """Print the varint encoding of each value."""
    for value in values:
        print(f"{value}: {encode_varint(value).hex()}")


def cmd_decode(hex_data: str):
    """Decode every varint in a hex string."""
    buf = ByteBuffer(bytes.fromhex(hex_data))
    while len(buf):
        offset = buf.position
        value = get_u64_varint(buf)
        print(f"@{offset}: {value} (0x{value:x})")


def cmd_send(transport: Transport, values):
    """Send values over the serial port."""
    total = 0
    for value in values:
        total += transport.write_varint(value)
    print(f"Sent {len(values)} varint(s), {total} bytes")


def cmd_recv(transport: Transport, count: int):
    """Receive values from the serial port."""
    for value in transport.read_varints(count):
        print(value)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Encode, decode and exchange Protocol Buffers style varints"
    )
    parser.add_argument(
        "--verbose", "-V",
        action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # encode command
    encode_parser = subparsers.add_parser("encode", help="Encode integers as hex varints")
    encode_parser.add_argument("values", type=parse_int, nargs="+", help="Values to encode")

    # decode command
    decode_parser = subparsers.add_parser("decode", help="Decode hex varints")
    decode_parser.add_argument("hex", help="Hex string holding one or more varints")

    # serial commands
    for name, help_text in (("send", "Send varints over a serial port"),
                            ("recv", "Receive varints from a serial port")):
        serial_parser = subparsers.add_parser(name, help=help_text)
        serial_parser.add_argument("--port", "-p", required=True,
                                   help="Serial port (e.g., /dev/ttyACM0)")
        serial_parser.add_argument("--baudrate", "-b", type=int, default=115200,
                                   help="Baud rate")
        serial_parser.add_argument("--timeout", "-t", type=float, default=5.0,
                                   help="Read timeout in seconds")
        if name == "send":
            serial_parser.add_argument("values", type=parse_int, nargs="+",
                                       help="Values to send")
        else:
            serial_parser.add_argument("--count", "-n", type=int, default=1,
                                       help="Number of varints to receive")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)-8s :: %(name)-18s :: %(message)s",
    )

    try:
        if args.command == "encode":
            cmd_encode(args.values)
            return
        if args.command == "decode":
            cmd_decode(args.hex)
            return
    except ValueError as e:
        # VarintError is a ValueError, as are bad hex strings
        print(f"Error: {e}")
        sys.exit(1)

    try:
        transport = Transport(args.port, args.baudrate, args.timeout)
    except serial.SerialException as e:
        print(f"Error opening {args.port}: {e}")
        sys.exit(1)

    try:
        if args.command == "send":
            cmd_send(transport, args.values)
        elif args.command == "recv":
            cmd_recv(transport, args.count)
    except (TransportError, ValueError) as e:
        # VarintError and out-of-range values are both ValueErrors
        print(f"Error: {e}")
        sys.exit(1)
    finally:
        transport.close()


if __name__ == "__main__":
    main()
