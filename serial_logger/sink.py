"""Timestamp formatting and the console/file writer."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
import sys
from typing import BinaryIO

from .const import ANSI_GREEN, ANSI_RESET
from .errors import OutputOpenError


def format_timestamp(now: datetime | None = None) -> str:
    """Return the colored ``[YYYY-MM-DD HH:MM:SS.mmm] `` prefix for one line."""
    if now is None:
        now = datetime.now()
    return (
        f"{ANSI_RESET}[{ANSI_GREEN}"
        f"{now.year:04d}-{now.month:02d}-{now.day:02d} "
        f"{now.hour:02d}:{now.minute:02d}:{now.second:02d}.{now.microsecond // 1000:03d}"
        f"{ANSI_RESET}] "
    )


def build_record(line: bytes, now: datetime | None = None) -> bytes:
    return format_timestamp(now).encode("ascii") + line


class DualSinkWriter:
    """Writes each record to the console and, optionally, appends it to a file.

    The file is reopened for every record and closed straight after, so
    nothing sits in a user-space buffer if the process is killed and the
    file may be rotated or removed between lines.
    """

    def __init__(self, output: Path | None = None, console: BinaryIO | None = None) -> None:
        self.output = output
        self.console = console if console is not None else sys.stdout.buffer

    def write(self, record: bytes) -> None:
        self.console.write(record)
        self.console.flush()

        if self.output is None:
            return

        try:
            handle = self.output.open("ab")
        except OSError as exc:
            raise OutputOpenError(self.output, exc) from exc
        with handle:
            handle.write(record)
            handle.flush()
