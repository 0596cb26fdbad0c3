"""Command-line front door for autonav.

Parses CLI options, resolves the vault directory and settings.
Then runs one synchronization pass or keeps the vault in sync until
interrupted.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
import threading
from pathlib import Path

from . import config
from .app import AutoNavigator
from .reconcile import ReconcileOutcome
from .scheduler import DEFAULT_QUIET_SECONDS
from .store import FilesystemStore
from .sync import SyncReport
from .watch import DEFAULT_POLL_INTERVAL_SECONDS, TreeWatcher


def _positive_float(value: str) -> float:
    """argparse type for positive float values."""
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be > 0")
    return parsed


def _configure_logging(verbose: bool, quiet: bool) -> None:
    level = logging.INFO
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def format_report(report: SyncReport) -> str:
    """One line per written document."""
    return "".join(
        f"{outcome.value:<9} {path}\n" for path, outcome in report.outcomes if outcome is not ReconcileOutcome.UNCHANGED
    )


def _print_report(report: SyncReport) -> None:
    sys.stdout.write(format_report(report))
    sys.stdout.flush()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="autonav",
        description="Generate and maintain navigation documents for a markdown vault.",
    )
    parser.add_argument("vault", nargs="?", default=None, help="Vault directory. Defaults to current directory.")
    parser.add_argument("--exclude", metavar="NAMES", default=None, help="Comma-separated folder names to skip.")
    parser.add_argument("--navigation-name", metavar="NAME", default=None, help="Root navigation file name.")
    parser.add_argument("--save-settings", action="store_true", help="Persist --exclude/--navigation-name.")
    parser.add_argument("--config", metavar="PATH", type=Path, default=None, help="Settings file path.")
    parser.add_argument("--watch", action="store_true", help="Keep running and resync on structural changes.")
    parser.add_argument(
        "--poll-interval",
        type=_positive_float,
        default=DEFAULT_POLL_INTERVAL_SECONDS,
        help=f"Seconds between tree polls in --watch mode (default: {DEFAULT_POLL_INTERVAL_SECONDS}).",
    )
    parser.add_argument(
        "--debounce",
        type=_positive_float,
        default=DEFAULT_QUIET_SECONDS,
        help=f"Quiet period before a resync in --watch mode (default: {DEFAULT_QUIET_SECONDS}).",
    )
    parser.add_argument("--show-hidden", action="store_true", help="Include dot-prefixed files and folders.")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log debug details.")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log warnings and errors.")
    return parser


def main(argv: list[str] | None = None, stop_event: threading.Event | None = None) -> None:
    """Parse CLI arguments and synchronize the vault.

    ``stop_event`` is primarily for tests; ``--watch`` mode otherwise runs
    until interrupted.
    """
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose, args.quiet)

    vault = Path(args.vault) if args.vault is not None else Path.cwd()
    if not vault.is_dir():
        raise SystemExit(f"Vault directory not found: {vault}")

    settings = config.load_settings(args.config)
    overrides: dict[str, str] = {}
    if args.exclude is not None:
        overrides["excluded_folders"] = args.exclude
    if args.navigation_name is not None:
        if not args.navigation_name.strip():
            raise SystemExit("--navigation-name must not be blank.")
        overrides["navigation_file_name"] = args.navigation_name.strip()
    if overrides:
        settings = dataclasses.replace(settings, **overrides)
    if args.save_settings:
        config.save_settings(settings, args.config)

    store = FilesystemStore(vault, show_hidden=args.show_hidden)
    navigator = AutoNavigator(
        store,
        settings,
        config_path=args.config,
        quiet_seconds=args.debounce,
        on_report=_print_report,
    )
    report = navigator.start()
    if report.writes == 0:
        sys.stdout.write(f"{len(report.outcomes)} navigation documents up to date\n")
    if not args.watch:
        return

    watcher = TreeWatcher(store.root_path, navigator.notify, poll_interval=args.poll_interval, show_hidden=args.show_hidden)
    watcher.start()
    stop = stop_event if stop_event is not None else threading.Event()
    try:
        while not stop.wait(0.5):
            pass
    except KeyboardInterrupt:
        pass
    finally:
        watcher.stop()
        navigator.close()


if __name__ == "__main__":
    main()
