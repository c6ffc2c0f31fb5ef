"""Port source and the read loop that feeds lines to the writer."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
import logging
from typing import Any, Callable

import serial

from .const import DEFAULT_CHUNK_SIZE, DEFAULT_TIMEOUT
from .errors import PortOpenError
from .lines import LineReassembler
from .sink import DualSinkWriter, build_record

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class PortConfig:
    port: str
    baudrate: int
    timeout: float = DEFAULT_TIMEOUT
    chunk_size: int = DEFAULT_CHUNK_SIZE


@dataclass(frozen=True, slots=True)
class ReadData:
    data: bytes


@dataclass(frozen=True, slots=True)
class ReadTimeout:
    pass


@dataclass(frozen=True, slots=True)
class ReadError:
    error: Exception


ReadOutcome = ReadData | ReadTimeout | ReadError


def open_port(cfg: PortConfig) -> Any:
    """Open a device path or pyserial URL (``loop://``, ``socket://...``)."""
    try:
        return serial.serial_for_url(cfg.port, baudrate=cfg.baudrate, timeout=cfg.timeout)
    except (serial.SerialException, OSError, ValueError) as exc:
        raise PortOpenError(cfg.port, exc) from exc


def read_chunk(port: Any, size: int) -> ReadOutcome:
    """Do one bounded read and classify the result.

    pyserial reports an expired read window as a short (here: empty) read
    rather than an exception, so an empty result counts as a timeout.
    """
    try:
        data = port.read(size)
    except serial.SerialTimeoutException:
        return ReadTimeout()
    except (serial.SerialException, OSError) as exc:
        return ReadError(exc)
    if not data:
        return ReadTimeout()
    return ReadData(bytes(data))


class LineLogger:
    """One streaming session: a port, its line buffer and the output writer."""

    def __init__(
        self,
        port: Any,
        writer: DualSinkWriter,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        clock: Callable[[], datetime] = datetime.now,
        name: str | None = None,
    ) -> None:
        self.port = port
        self.name = name if name is not None else getattr(port, "port", "?")
        self.writer = writer
        self.chunk_size = chunk_size
        self.reassembler = LineReassembler()
        self._clock = clock

    def step(self) -> int:
        """Run a single read cycle and return the number of lines written."""
        outcome = read_chunk(self.port, self.chunk_size)
        if isinstance(outcome, ReadTimeout):
            return 0
        if isinstance(outcome, ReadError):
            _LOGGER.warning("Read error on %s: %r", self.name, outcome.error)
            return 0

        written = 0
        for line in self.reassembler.feed(outcome.data):
            self.writer.write(build_record(line, self._clock()))
            written += 1
        return written

    def run_forever(self) -> None:
        while True:
            self.step()


def stream(cfg: PortConfig, writer: DualSinkWriter) -> None:
    """Connect to the port and log lines until the process is stopped."""
    port = open_port(cfg)
    try:
        print(f"Receiving data on {cfg.port} at {cfg.baudrate} baud:", flush=True)
        _LOGGER.debug("Reading up to %d bytes per cycle, timeout %.3fs", cfg.chunk_size, cfg.timeout)
        LineLogger(port, writer, chunk_size=cfg.chunk_size, name=cfg.port).run_forever()
    finally:
        port.close()
