"""Command-line interface for Sky Planner."""

import argparse
import asyncio
import json
import logging
import sys

from sky_planner.config import get_settings
from sky_planner.formatting import describe_conditions, reading_display
from sky_planner.providers.base import WeatherError
from sky_planner.providers.weatherstack import WeatherstackProvider
from sky_planner.recommendations.assessment import assess

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Sky Planner - Plan outdoor events around the weather"
    )
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 0.1.0",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Weather command
    weather_parser = subparsers.add_parser(
        "weather", help="Show current weather for a location"
    )
    weather_parser.add_argument(
        "location",
        help="Location name (e.g. 'Nairobi, Kenya')",
    )

    # Recommend command
    recommend_parser = subparsers.add_parser(
        "recommend", help="Show risk, packing list and time slots for a location"
    )
    recommend_parser.add_argument(
        "location",
        help="Location name (e.g. 'Nairobi, Kenya')",
    )
    recommend_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the assessment as JSON",
    )

    return parser


async def _fetch_reading(location: str):
    async with WeatherstackProvider.from_settings(get_settings()) as provider:
        return await provider.get_current(location)


def _print_weather(location: str) -> None:
    reading = asyncio.run(_fetch_reading(location))
    print(f"Weather for {location}:")
    for label, value in reading_display(reading).items():
        print(f"  {label.replace('_', ' ').capitalize()}: {value}")


def _print_recommendations(location: str, as_json: bool) -> None:
    assessment = assess(asyncio.run(_fetch_reading(location)))

    if as_json:
        print(json.dumps(assessment.model_dump(mode="json"), indent=2))
        return

    print(f"{location}: {describe_conditions(assessment.weather)}")
    print(f"Risk: {assessment.risk_level.value}")
    print("Packing list:")
    for item in assessment.packing_list:
        print(f"  - {item}")
    print("Recommended times:")
    for slot in assessment.time_slots:
        print(f"  {slot.label}  {slot.risk.value}")


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    try:
        if args.command == "weather":
            _print_weather(args.location)
        elif args.command == "recommend":
            _print_recommendations(args.location, args.json)
    except WeatherError as e:
        logger.debug(f"Weather lookup failed: {e!r}")
        print(e.user_message, file=sys.stderr)
        return 1
    except ValueError as e:
        print(str(e), file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
