#!/usr/bin/env python3
"""
inouifi — information about the current train from its wifi portal

Talks to the on-board portal (https://wifi.sncf) of the train you are on.

Usage:
    inouifi connected            # Are we on the train's wifi?
    inouifi connected --quiet    # Same, exit code only
    inouifi speed                # 297 km/h
    inouifi speed --no-units     # 297
    inouifi stops                # Schedule of every stop of the trip
    inouifi waybar               # JSON for a Waybar custom module
"""

import argparse
import logging
import sys
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from rich.console import Console
from rich.logging import RichHandler

from .api import ApiError, fetch_speed, fetch_trip
from .config import (
    Config, HTTP_TIMEOUT,
    EXIT_OK, EXIT_NOT_CONNECTED, EXIT_SPEED_FAILED, EXIT_STOPS_FAILED, EXIT_WAYBAR_FAILED,
)
from .connection import check_connected
from .display import (
    build_waybar_payload, display_stop, print_error_hint, SPEED_HINT, TRIP_HINT,
)
from .models import mps_to_kmh

logger = logging.getLogger(__name__)


def display_connected(config: Config, console: Console, quiet: bool = False) -> int:
    if check_connected(config.wifi_marker):
        if not quiet:
            console.print("Connected to the train wifi", style="green")
        return EXIT_OK

    if not quiet:
        console.print("Not connected to train wifi", style="yellow")
    return EXIT_NOT_CONNECTED


def display_speed(config: Config, err_console: Console, no_units: bool = False) -> int:
    try:
        value = mps_to_kmh(fetch_speed(config))
    except ApiError as e:
        logger.debug("Speed fetch failed: %s", e)
        print_error_hint(err_console, SPEED_HINT)
        return EXIT_SPEED_FAILED

    # Bare value has no trailing newline, for embedding in other prompts
    if no_units:
        print(value, end="", flush=True)
    else:
        print(f"{value} km/h")
    return EXIT_OK


def display_stops(config: Config, console: Console, err_console: Console) -> int:
    try:
        trip = fetch_trip(config)
    except ApiError as e:
        logger.debug("Trip fetch failed: %s", e)
        print_error_hint(err_console, TRIP_HINT)
        return EXIT_STOPS_FAILED

    tz = config.tz
    for stop in trip.stops:
        console.print(display_stop(stop, tz), soft_wrap=True)
    return EXIT_OK


def display_waybar(config: Config) -> int:
    """Print the Waybar payload. Failures print nothing, Waybar only sees the exit code."""
    try:
        speed = mps_to_kmh(fetch_speed(config))
        trip = fetch_trip(config)
    except ApiError as e:
        logger.debug("Waybar payload aborted: %s", e)
        return EXIT_WAYBAR_FAILED

    print(build_waybar_payload(speed, trip, config.tz))
    return EXIT_OK


def _timezone(value: str) -> str:
    """argparse type for an IANA zone name."""
    try:
        ZoneInfo(value)
    except (ZoneInfoNotFoundError, ValueError):
        raise argparse.ArgumentTypeError(f"unknown time zone: {value!r}")
    return value


def setup_logging(verbose: bool, console: Console) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="inouifi",
        description="Get information about the current train.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    %(prog)s connected -q && %(prog)s stops
    %(prog)s speed --no-units
    %(prog)s --timezone Europe/Berlin stops

Waybar module:
    "custom/train": {
        "exec": "inouifi waybar",
        "return-type": "json",
        "interval": 10
    }
        """
    )
    parser.add_argument(
        "--timezone",
        type=_timezone,
        metavar="ZONE",
        help="Time zone for displayed times (default: $INOUIFI_TIMEZONE or Europe/Paris)"
    )
    parser.add_argument(
        "--api-base",
        metavar="URL",
        help="Base URL of the portal API (default: $INOUIFI_API_BASE or https://wifi.sncf/router/api)"
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=HTTP_TIMEOUT,
        help=f"HTTP timeout in seconds (default: {HTTP_TIMEOUT:g})"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log requests and failures to stderr"
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    connected = subparsers.add_parser("connected", help="Check that we are on the train's wifi")
    connected.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Print nothing, only set the exit code"
    )

    speed = subparsers.add_parser("speed", help="Current speed in km/h")
    speed.add_argument(
        "-n", "--no-units",
        action="store_true",
        help="Print the bare number"
    )

    subparsers.add_parser("stops", help="Every stop of the trip with its times")
    subparsers.add_parser("waybar", help="JSON payload for a Waybar custom module")

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = Config(timeout=args.timeout, verbose=args.verbose)
    if args.timezone:
        config.timezone = args.timezone
    if args.api_base:
        config.api_base = args.api_base.rstrip("/")

    # The zone may also come from the environment
    try:
        _timezone(config.timezone)
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))

    console = Console()
    err_console = Console(stderr=True)
    setup_logging(config.verbose, err_console)

    if args.command == "connected":
        exit_code = display_connected(config, console, quiet=args.quiet)
    elif args.command == "speed":
        exit_code = display_speed(config, err_console, no_units=args.no_units)
    elif args.command == "stops":
        exit_code = display_stops(config, console, err_console)
    else:
        exit_code = display_waybar(config)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
