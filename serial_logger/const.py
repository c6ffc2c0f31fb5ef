"""Constants for the serial line logger."""

from __future__ import annotations

LINE_DELIMITER = b"\n"

ANSI_RESET = "\x1b[0m"
ANSI_GREEN = "\x1b[32m"

DEFAULT_TIMEOUT = 0.01  # seconds
DEFAULT_CHUNK_SIZE = 1000
