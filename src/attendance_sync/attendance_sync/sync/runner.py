from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from ..core.exceptions import SyncError
from .service import AttendanceSyncService, CycleReport

log = logging.getLogger(__name__)


def run_once(service: AttendanceSyncService, *, dry_run: bool = False) -> Optional[CycleReport]:
    """Run a single cycle. A failed cycle is logged and reported as None."""
    try:
        return service.run_cycle(dry_run=dry_run)
    except SyncError:
        log.exception("Cycle aborted")
        return None


def run_forever(
    service: AttendanceSyncService,
    *,
    interval: float,
    max_cycles: Optional[int] = None,
    dry_run: bool = False,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Run cycles back to back, ``interval`` seconds apart. Returns cycles run."""
    cycles = 0
    while max_cycles is None or cycles < max_cycles:
        try:
            run_once(service, dry_run=dry_run)
        except Exception:
            # unwrapped adapter failure: end this cycle, keep the process alive
            log.exception("Cycle failed unexpectedly")
        cycles += 1
        if max_cycles is not None and cycles >= max_cycles:
            break
        sleep(interval)
    return cycles
