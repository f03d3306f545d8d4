from __future__ import annotations

from attendance_sync.core.exceptions import StoreReadError
from attendance_sync.sync.runner import run_forever, run_once


class FlakyService:
    def __init__(self, failures: int):
        self.failures = failures
        self.calls = 0

    def run_cycle(self, *, dry_run: bool = False):
        self.calls += 1
        if self.calls <= self.failures:
            raise StoreReadError("sheet unavailable")
        return "report"


def test_run_once_swallows_cycle_failure():
    assert run_once(FlakyService(failures=1)) is None


def test_run_forever_keeps_ticking_after_failures():
    service = FlakyService(failures=2)
    sleeps: list[float] = []

    cycles = run_forever(service, interval=60, max_cycles=3, sleep=sleeps.append)

    assert cycles == 3
    assert service.calls == 3
    assert sleeps == [60, 60]


class BrokenService:
    def __init__(self):
        self.calls = 0

    def run_cycle(self, *, dry_run: bool = False):
        self.calls += 1
        raise ValueError("unexpected payload")


def test_run_forever_survives_unwrapped_errors():
    service = BrokenService()
    sleeps: list[float] = []

    cycles = run_forever(service, interval=5, max_cycles=3, sleep=sleeps.append)

    assert cycles == 3
    assert service.calls == 3
    assert sleeps == [5, 5]
