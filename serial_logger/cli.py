"""
Command line front end: ``read`` a port or ``list`` the available ones.

Every complete line received on the port is printed to stdout behind a
colored local timestamp and, with --output, appended to a file as well.

Usage examples:
  serial-logger list
  serial-logger read --port /dev/ttyUSB0 --baud 115200
  serial-logger read -p COM4 -b 9600 -o capture.log
  python -m serial_logger read -p socket://192.168.1.50:4000 -b 115200 --timeout 0.05
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

from .const import DEFAULT_CHUNK_SIZE, DEFAULT_TIMEOUT
from .errors import SerialLoggerError
from .ports import list_ports
from .reader import PortConfig, stream
from .sink import DualSinkWriter


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {text}")
    return value


def _positive_float(text: str) -> float:
    value = float(text)
    if not value > 0:
        raise argparse.ArgumentTypeError(f"expected a positive number, got {text}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Reads data from a serial port and writes it, timestamped line by line, to stdout and a file.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging on stderr")

    sub = parser.add_subparsers(dest="command", required=True)

    read = sub.add_parser("read", help="Stream timestamped lines from a serial port")
    read.add_argument("-p", "--port", required=True, help="Device path (e.g. /dev/ttyUSB0, COM4) or pyserial URL")
    read.add_argument("-b", "--baud", type=_positive_int, required=True, help="Baud rate to connect at")
    read.add_argument("-o", "--output", type=Path, metavar="FILE", help="Also append every line to FILE")
    read.add_argument(
        "--timeout",
        type=_positive_float,
        default=DEFAULT_TIMEOUT,
        help=f"Read timeout in seconds (default: {DEFAULT_TIMEOUT})",
    )
    read.add_argument(
        "--chunk",
        type=_positive_int,
        default=DEFAULT_CHUNK_SIZE,
        help=f"Read buffer size per iteration (default: {DEFAULT_CHUNK_SIZE})",
    )

    sub.add_parser("list", help="List available serial ports")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command == "list":
        return list_ports()

    cfg = PortConfig(
        port=args.port,
        baudrate=args.baud,
        timeout=args.timeout,
        chunk_size=args.chunk,
    )
    try:
        stream(cfg, DualSinkWriter(output=args.output))
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return 130
    except (SerialLoggerError, OSError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
