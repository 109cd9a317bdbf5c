"""Pytest fixtures for all tests."""

import pytest

from generation.generator import Generator
from generation.layout import Layout
from internal.logging import LogLevel, StructuredLogger

EPOCH = 1_700_000_000_000


class FakeClock:
    """Clock returning `now` unless reads were scheduled with `script`."""

    def __init__(self, now):
        self.now = now
        self.reads = 0
        self._script = []

    def script(self, *values):
        """Queue values for the next reads; the last one sticks as `now`."""
        self._script.extend(values)

    def __call__(self):
        self.reads += 1
        if self._script:
            self.now = self._script.pop(0)
        return self.now


@pytest.fixture(autouse=True)
def quiet_logger():
    """Keep generator logs out of test output."""
    StructuredLogger.configure(min_level=LogLevel.ERROR)
    yield
    StructuredLogger.configure()


@pytest.fixture
def clock():
    return FakeClock(EPOCH + 1000)


@pytest.fixture
def layout():
    return Layout()


@pytest.fixture
def generator(clock):
    """Generator on worker 1 / data center 1 driven by the fake clock."""
    return Generator(epoch=EPOCH, worker_id=1, data_center_id=1, clock=clock)
