from __future__ import annotations

from datetime import datetime, timedelta
import io

import pytest


class FakePort:
    """Scripted stand-in for a pyserial port.

    Each read pops the next scripted item: bytes are returned, exceptions are
    raised. Once the script is exhausted the read raises KeyboardInterrupt so
    an endless read loop under test comes to a stop.
    """

    def __init__(self, script, port: str = "/dev/ttyFAKE0") -> None:
        self.script = list(script)
        self.port = port
        self.reads: list[int] = []
        self.closed = False

    def read(self, size: int) -> bytes:
        self.reads.append(size)
        if not self.script:
            raise KeyboardInterrupt
        item = self.script.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item[:size]

    def close(self) -> None:
        self.closed = True


class TickingClock:
    def __init__(self, start: datetime) -> None:
        self.now = start
        self.calls = 0

    def __call__(self) -> datetime:
        value = self.now
        self.calls += 1
        self.now += timedelta(milliseconds=1)
        return value


@pytest.fixture
def make_port():
    return FakePort


@pytest.fixture
def clock():
    return TickingClock(datetime(2024, 3, 7, 9, 5, 2, 45_000))


@pytest.fixture
def console():
    return io.BytesIO()
