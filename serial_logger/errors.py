"""Fatal errors reported by the command line front end."""

from __future__ import annotations

from pathlib import Path


class SerialLoggerError(RuntimeError):
    """Base class for errors that end a logging session."""

    def __init__(self, path: str | Path, cause: BaseException) -> None:
        self.path = str(path)
        self.cause = cause
        super().__init__(f'Failed to open "{self.path}". Error: {cause}')


class PortOpenError(SerialLoggerError):
    """The serial port could not be opened."""


class OutputOpenError(SerialLoggerError):
    """The output file could not be opened for append."""
