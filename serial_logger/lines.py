"""Reassemble newline-terminated lines from fragmented reads."""

from __future__ import annotations

from typing import Iterator

from .const import LINE_DELIMITER


class LineReassembler:
    """Accumulates raw bytes and hands out complete lines in arrival order.

    Only delimiter-terminated data counts as a line. Bytes after the last
    newline stay in the buffer until a later chunk completes them; they are
    never flushed on their own.
    """

    def __init__(self) -> None:
        self._buffer = bytearray()
        # Leading bytes of the buffer already known to hold no delimiter.
        self._scanned = 0

    @property
    def pending(self) -> bytes:
        return bytes(self._buffer)

    def feed(self, chunk: bytes) -> Iterator[bytes]:
        # Append now so the buffer is current even if the caller never iterates.
        self._buffer.extend(chunk)
        return self._drain()

    def _drain(self) -> Iterator[bytes]:
        while True:
            pos = self._buffer.find(LINE_DELIMITER, self._scanned)
            if pos < 0:
                self._scanned = len(self._buffer)
                return
            line = bytes(self._buffer[: pos + 1])
            del self._buffer[: pos + 1]
            self._scanned = 0
            yield line
