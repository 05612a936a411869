"""
Command-line interface for the application.

This module provides the main entry point for the CLI, a terminal host for
the exposure tracker and the suggestion panel.
"""

from __future__ import annotations

import argparse
import logging
import sys
import threading

from sunbathing_planner import __version__
from sunbathing_planner.config import get_settings
from sunbathing_planner.exceptions import InvalidInputError
from sunbathing_planner.panels import SuggestionPanel, TanTrackerWidget, validate_uv_index
from sunbathing_planner.planner import SunbathingPlanner
from sunbathing_planner.renderers.text import (
    build_alert_text,
    build_suggestions_text,
    build_today_text,
    build_tracker_line,
)
from sunbathing_planner.tracker import MAX_PROGRESS, ExposureSession, ExposureTracker


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="sunbathing-planner",
        description="Track sunbathing time and find good UV slots for a location",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    today_parser = subparsers.add_parser("today", help="Current UV and best time today")
    today_parser.add_argument("location", help="City name, e.g. 'Lisbon' or 'Austin,TX,US'")

    suggest_parser = subparsers.add_parser("suggest", help="Sunbathing slots for the next 3 days")
    suggest_parser.add_argument("location", help="City name")

    track_parser = subparsers.add_parser("track", help="Run the exposure timer")
    track_parser.add_argument(
        "location",
        nargs="?",
        default=None,
        help="City name used to look up the current UV index",
    )
    track_parser.add_argument(
        "--uv",
        type=float,
        default=None,
        help="Use this UV index instead of looking one up",
    )
    track_parser.add_argument(
        "--minutes",
        type=float,
        default=None,
        help="Stop after this many minutes (default: until 100%% or Ctrl+C)",
    )

    return parser


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Units: {settings.units}")
    print(f"Timezone: {settings.timezone or 'local'}")
    print(f"API key: {'set' if settings.has_api_key else 'missing'}")
    return 0


def cmd_today(args: argparse.Namespace) -> int:
    """Handle the 'today' command."""
    planner = SunbathingPlanner.from_settings(get_settings())
    widget = TanTrackerWidget(planner, ExposureTracker())
    state = widget.set_location(args.location)
    print(build_today_text(state))
    return 1 if state.alert else 0


def cmd_suggest(args: argparse.Namespace) -> int:
    """Handle the 'suggest' command."""
    panel = SuggestionPanel(SunbathingPlanner.from_settings(get_settings()))
    state = panel.load(args.location)
    text = build_suggestions_text(state)
    if text:
        print(text)
    return 1 if state.error else 0


def cmd_track(args: argparse.Namespace) -> int:
    """Handle the 'track' command: tick once per interval until done."""
    if args.location is None and args.uv is None:
        print(build_alert_text("Give a location or --uv"), file=sys.stderr)
        return 1

    settings = get_settings()
    done = threading.Event()
    limit = int(args.minutes * 60) if args.minutes is not None else None

    def on_tick(session: ExposureSession) -> None:
        print("\r" + build_tracker_line(session), end="", flush=True)
        if session.progress_percent >= MAX_PROGRESS:
            done.set()
        if limit is not None and session.elapsed_seconds >= limit:
            done.set()

    tracker = ExposureTracker(tick_interval=settings.tick_interval_seconds, on_tick=on_tick)

    if args.uv is not None:
        try:
            tracker.set_uv_index(validate_uv_index(args.uv))
        except InvalidInputError as e:
            print(build_alert_text(str(e)), file=sys.stderr)
            return 1
    else:
        widget = TanTrackerWidget(SunbathingPlanner.from_settings(settings), tracker)
        state = widget.set_location(args.location)
        print(build_today_text(state))
        if state.alert:
            return 1

    tracker.start()
    try:
        done.wait()
    except KeyboardInterrupt:
        pass
    finally:
        tracker.pause()

    print("\r" + build_tracker_line(tracker.snapshot()))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.debug or get_settings().debug)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "info": cmd_info,
        "today": cmd_today,
        "suggest": cmd_suggest,
        "track": cmd_track,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
