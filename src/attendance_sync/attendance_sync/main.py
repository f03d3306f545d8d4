from __future__ import annotations

import argparse
import importlib
import logging
from typing import Optional, Sequence

from dotenv import load_dotenv

from config import get_settings_module

from .container import build_container
from .core.settings import SyncSettings
from .logging_config import configure_logging
from .sync.runner import run_forever, run_once


def load_settings() -> tuple[SyncSettings, object]:
    load_dotenv(override=False)
    settings_module = importlib.import_module(get_settings_module())
    return SyncSettings.from_module(settings_module), settings_module


def non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"{value!r} is not an integer") from exc
    if number < 0:
        raise argparse.ArgumentTypeError(f"{value} must be >= 0")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Reconcile form attendance with guild roles")
    parser.add_argument("--once", action="store_true", help="Run a single cycle and exit")
    parser.add_argument("--dry-run", action="store_true", help="Compute and log changes without applying them")
    parser.add_argument("--interval", type=non_negative_int, default=None, help="Seconds between cycles (default from settings)")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose (DEBUG) logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings, settings_module = load_settings()

    level = "DEBUG" if args.verbose else getattr(settings_module, "LOG_LEVEL", None)
    configure_logging(level=level, log_dir=getattr(settings_module, "LOG_DIR", None))
    log = logging.getLogger("attendance_sync")
    log.info("settings=%s spreadsheet=%s guild=%s", settings_module.__name__, settings.spreadsheet_id, settings.guild_id)

    container = build_container(settings)
    if args.once:
        report = run_once(container.sync_service, dry_run=args.dry_run)
        return 0 if report is not None and report.ok else 1

    interval = args.interval if args.interval is not None else settings.interval_seconds
    run_forever(container.sync_service, interval=interval, dry_run=args.dry_run)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
