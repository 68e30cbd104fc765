"""
Command-line interface for the application.

This module provides the main entry point for the ``bite-forecast`` CLI.
"""

from __future__ import annotations

import argparse
import functools
import http.server
import json
import logging
import sys
from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo

from bite_forecast import __version__
from bite_forecast.analysis import build_bite_forecast, forecast_to_dict
from bite_forecast.config import get_settings
from bite_forecast.datasources.openweather import fetch_forecast, parse_forecast
from bite_forecast.errors import BiteForecastError
from bite_forecast.flows.build import build_all
from bite_forecast.flows.fetch import fetch_all
from bite_forecast.reference.species import DEFAULT_CATALOG
from bite_forecast.renderers.date_utils import format_time_window
from bite_forecast.schemas import Location, RawForecastSample, normalize_timestamp


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="bite-forecast",
        description="Hourly bite forecasts for ice-fishing species",
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
    subparsers.add_parser("species", help="List the species catalogue")

    forecast_parser = subparsers.add_parser("forecast", help="Score a 24-hour forecast")
    forecast_parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="OpenWeather response or list of samples (JSON); fetched live if omitted",
    )
    forecast_parser.add_argument("--lat", type=float, default=None, help="Latitude")
    forecast_parser.add_argument("--lon", type=float, default=None, help="Longitude")
    forecast_parser.add_argument(
        "--start",
        type=str,
        default=None,
        help="Forecast start (ISO datetime, UTC if naive); defaults to now",
    )
    forecast_parser.add_argument(
        "--species",
        action="append",
        default=None,
        help="Species id to score (repeatable; default: all)",
    )
    forecast_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full forecast as JSON",
    )

    # 'refresh' command - fetch data and build site
    subparsers.add_parser("refresh", help="Fetch data and build site")

    # 'serve' command - serve built site locally
    serve_parser = subparsers.add_parser("serve", help="Serve site locally")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to serve on (default: api_port from settings)",
    )

    return parser


def configure_logging(debug: bool) -> None:
    """Configure the root logger once for the whole process."""
    level = logging.DEBUG if debug else get_settings().log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Location: ({settings.lat}, {settings.lon})")
    print(f"OpenWeather key: {'set' if settings.openweather_api_key else 'not set'}")
    print(f"Weather history: {settings.history_api_url or 'disabled'}")
    print(f"Debug: {settings.debug}")
    return 0


def cmd_species(_args: argparse.Namespace) -> int:
    """Handle the 'species' command."""
    for profile in DEFAULT_CATALOG.profiles():
        night = " (night feeder)" if profile.night_feeder else ""
        print(f"{profile.id:<20} {profile.icon} {profile.name}{night}")
    return 0


def load_samples(path: Path) -> list[RawForecastSample]:
    """Read samples from a saved OpenWeather response or a plain sample list."""
    with path.open() as f:
        payload: Any = json.load(f)
    # Store envelopes carry the response under "data"
    if isinstance(payload, dict) and "data" in payload and "meta" in payload:
        payload = payload["data"]
    if isinstance(payload, dict):
        return parse_forecast(payload)
    return [RawForecastSample.model_validate(item) for item in payload]


def cmd_forecast(args: argparse.Namespace) -> int:
    """Handle the 'forecast' command."""
    settings = get_settings()
    location = Location(
        lat=settings.lat if args.lat is None else args.lat,
        lon=settings.lon if args.lon is None else args.lon,
    )

    if args.input is not None:
        samples = load_samples(args.input)
    elif settings.openweather_api_key:
        samples = fetch_forecast(
            location.lat,
            location.lon,
            settings.openweather_api_key,
            url=settings.openweather_url,
        )
    else:
        print(
            "Error: no --input given and BITE_FORECAST_OPENWEATHER_API_KEY is not set",
            file=sys.stderr,
        )
        return 1

    unknown = [s for s in args.species or [] if s not in DEFAULT_CATALOG]
    if unknown:
        print(f"Error: unknown species: {', '.join(unknown)}", file=sys.stderr)
        return 1

    start = normalize_timestamp(args.start) if args.start else datetime.now(UTC)
    try:
        forecast = build_bite_forecast(
            samples,
            location,
            start,
            species_ids=args.species,
            max_workers=settings.max_workers,
        )
    except BiteForecastError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(forecast_to_dict(forecast), indent=2))
        return 0

    tz = ZoneInfo(settings.timezone)
    for species_id, scores in forecast.scores.items():
        profile = DEFAULT_CATALOG[species_id]
        current = scores[0]
        print(f"{profile.icon} {profile.name}: {current.score} ({current.quality})")
        for window in forecast.best_windows[species_id]:
            label = format_time_window(
                window.start, window.end + timedelta(hours=1), start, tz
            )
            print(f"    {label}  peak {window.peak_score}")
    return 0


def cmd_refresh(_args: argparse.Namespace) -> int:
    """Handle the 'refresh' command: fetch data then build site."""
    settings = get_settings()
    print(f"Fetching data for ({settings.lat}, {settings.lon})...")
    fetch_all(lat=settings.lat, lon=settings.lon)

    print("Building site...")
    result = build_all(lat=settings.lat, lon=settings.lon)
    if "error" in result:
        print(f"Build failed: {result['error']}", file=sys.stderr)
        return 1

    print("Done.")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Handle the 'serve' command: serve the built site locally."""
    settings = get_settings()
    port = args.port if args.port is not None else settings.api_port
    site_dir = settings.data_dir / "derived" / "site"

    if not site_dir.exists():
        print("No site directory found. Run 'bite-forecast refresh' first.", file=sys.stderr)
        return 1

    handler = functools.partial(
        http.server.SimpleHTTPRequestHandler, directory=str(site_dir)
    )

    with http.server.HTTPServer(("", port), handler) as server:
        print(f"Serving site on http://localhost:{port}/ (Ctrl+C to stop)")
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            print("\nServer stopped.")

    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(args.debug)

    commands = {
        "info": cmd_info,
        "species": cmd_species,
        "forecast": cmd_forecast,
        "refresh": cmd_refresh,
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
