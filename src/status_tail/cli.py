"""Demo CLI: drive the in-place display with a stream of log records."""

from __future__ import annotations

import argparse
import time
from typing import Any

from rich.console import Console

from .config import load_settings
from .exceptions import ConfigError
from .log_setup import setup_logger
from .ui.terminal_display import DisplayController


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(
        description="Show a live status header over a rolling tail of log messages.",
    )
    parser.add_argument("--messages", type=int, default=25, help="Number of log records to emit.")
    parser.add_argument(
        "--delay",
        type=float,
        default=0.2,
        help="Seconds to wait between log records.",
    )
    parser.add_argument(
        "--refresh-interval",
        type=float,
        default=None,
        help="Override repaint interval (seconds) from config.",
    )
    parser.add_argument(
        "--separator",
        type=str,
        default=None,
        help="Override separator line from config.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the demo session."""
    args = parse_args(argv)
    logger = setup_logger()
    console = Console()

    if args.messages <= 0:
        logger.error("--messages must be > 0.")
        return 2
    if args.delay < 0:
        logger.error("--delay must be >= 0.")
        return 2

    overrides: dict[str, Any] = {}
    if args.refresh_interval is not None:
        overrides["refresh_interval_seconds"] = args.refresh_interval
    if args.separator is not None:
        overrides["separator"] = args.separator
    try:
        settings = load_settings(**overrides)
    except ConfigError as exc:
        logger.error("Configuration failure: %s", exc)
        return 2
    logger.setLevel(settings.log_level)

    display = DisplayController.from_settings(
        settings,
        "status: running",
        f"messages: 0/{args.messages}",
        console=console,
    )
    display.attach_logger(logger)
    try:
        for index in range(1, args.messages + 1):
            logger.info("record %d of %d", index, args.messages)
            display.update_line(2, f"messages: {index}/{args.messages}")
            if args.delay:
                time.sleep(args.delay)
        display.update_line(1, "status: done")
        # Let one more tick paint the final header state.
        time.sleep(settings.refresh_interval_seconds)
    finally:
        display.stop()

    snapshot = display.snapshot()
    console.print(
        f"Emitted {args.messages} messages | showing last {len(snapshot.messages)}",
        highlight=False,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
