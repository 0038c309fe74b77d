"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import http.server
import sys
from functools import partial
from pathlib import Path

from coffee_commits import __version__
from coffee_commits.config import get_settings
from coffee_commits.flows.build import (
    analyze,
    build_all,
    load_coffee_prices,
    load_developer_activity,
)
from coffee_commits.flows.fetch import DataUnavailableError, fetch_all


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="coffee-commits",
        description="Compare monthly coffee prices with developer activity",
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
        help="Enable debug mode",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    fetch_parser = subparsers.add_parser("fetch", help="Fetch both data sources")
    fetch_parser.add_argument(
        "--force",
        action="store_true",
        help="Fetch even if cached data is still fresh",
    )

    subparsers.add_parser("build", help="Build site from cached data")

    # 'refresh' command - fetch data and build site
    refresh_parser = subparsers.add_parser("refresh", help="Fetch data and build site")
    refresh_parser.add_argument(
        "--force",
        action="store_true",
        help="Fetch even if cached data is still fresh",
    )

    subparsers.add_parser("stats", help="Print statistics and correlation for cached data")

    # 'serve' command - serve built site locally
    serve_parser = subparsers.add_parser("serve", help="Serve site locally")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to serve on (default: api_port from settings)",
    )

    return parser


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Data directory: {settings.data_dir}")
    print(f"API Ninjas key: {'set' if settings.api_ninjas_key else 'not set (mock prices)'}")
    return 0


def _fetch(force: bool) -> int:
    settings = get_settings()
    try:
        fetch_all(
            api_key=settings.api_ninjas_key,
            cache_hours=settings.cache_hours,
            force=force,
        )
    except DataUnavailableError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


def cmd_fetch(args: argparse.Namespace) -> int:
    """Handle the 'fetch' command."""
    return _fetch(getattr(args, "force", False))


def cmd_build(_args: argparse.Namespace) -> int:
    """Handle the 'build' command."""
    result = build_all()
    if "error" in result:
        print("No usable data. Run 'coffee-commits fetch' first.", file=sys.stderr)
        return 1
    return 0


def cmd_refresh(args: argparse.Namespace) -> int:
    """Handle the 'refresh' command: fetch data then build site."""
    print("Fetching data...")
    exit_code = _fetch(getattr(args, "force", False))
    if exit_code != 0:
        return exit_code

    print("Building site...")
    build_all()

    print("Done.")
    return 0


def cmd_stats(_args: argparse.Namespace) -> int:
    """Handle the 'stats' command: print the derived numbers for cached data."""
    coffee_prices = load_coffee_prices.fn()
    developer_activity = load_developer_activity.fn()
    if coffee_prices is None or developer_activity is None:
        print("No usable data. Run 'coffee-commits fetch' first.", file=sys.stderr)
        return 1

    analysis = analyze.fn(coffee_prices, developer_activity)
    aligned = analysis.aligned
    if aligned.dates:
        print(f"Months: {len(aligned)} ({aligned.dates[0]} to {aligned.dates[-1]})")
    else:
        print("Months: 0")

    for name, summary in (
        ("Coffee price", analysis.summaries.series_a),
        ("Developer activity", analysis.summaries.series_b),
    ):
        if summary is None:
            print(f"{name}: no data")
        else:
            print(
                f"{name}: min={summary.min:.2f} max={summary.max:.2f} "
                f"avg={summary.avg:.2f} trend={summary.trend:+.2f}"
            )
    print(f"Correlation: {analysis.correlation:.3f}")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Handle the 'serve' command: serve the built site locally."""
    settings = get_settings()
    port = args.port if args.port is not None else settings.api_port
    site_dir = Path(settings.data_dir) / "derived" / "site"

    if not site_dir.exists():
        print("No site directory found. Run 'coffee-commits refresh' first.", file=sys.stderr)
        return 1

    handler = partial(http.server.SimpleHTTPRequestHandler, directory=str(site_dir))

    with http.server.HTTPServer(("", port), handler) as server:
        print(f"Serving site on http://localhost:{port}/ (Ctrl+C to stop)")
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            print("\nServer stopped.")

    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    if getattr(args, "debug", False):
        print(f"Debug mode enabled. Settings: {get_settings()}")

    commands = {
        "info": cmd_info,
        "fetch": cmd_fetch,
        "build": cmd_build,
        "refresh": cmd_refresh,
        "stats": cmd_stats,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
