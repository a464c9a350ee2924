"""Command-line entry point."""

import argparse
import sys
from typing import Sequence

from loguru import logger

from geocoords.city import City
from geocoords.coordinates import Coordinate, Latitude, Longitude
from geocoords.exceptions import GCBaseException
from geocoords.loggers import setup_logging
from geocoords.units import DistanceUnit

EXAMPLES = """
Examples:
  geocoords coordinate --latitude 51.1 --longitude 17.03
  geocoords shift --longitude 170 --delta 15
  geocoords city Wrocław --latitude 51.1 --longitude 17.03
  geocoords unit km --value 2.5
"""


def _describe(coordinate: Coordinate) -> str:
    return f"{coordinate} {coordinate.direction}".rstrip()


def run_coordinate(args: argparse.Namespace) -> str:
    parts = []
    if args.latitude is not None:
        parts.append(_describe(Latitude(args.latitude)))
    if args.longitude is not None:
        parts.append(_describe(Longitude(args.longitude)))
    return ", ".join(parts)


def run_shift(args: argparse.Namespace) -> str:
    if args.latitude is not None:
        coordinate: Coordinate = Latitude(args.latitude)
    else:
        coordinate = Longitude(args.longitude)
    if args.subtract:
        result = coordinate.try_subtract(args.delta)
    else:
        result = coordinate.try_add(args.delta)
    return _describe(result)


def run_city(args: argparse.Namespace) -> str:
    latitude = None if args.latitude is None else Latitude(args.latitude)
    longitude = None if args.longitude is None else Longitude(args.longitude)
    city = City(name=args.name, latitude=latitude, longitude=longitude)
    return city.render()


def run_unit(args: argparse.Namespace) -> str:
    unit = DistanceUnit.from_str(args.token)
    if args.value is None:
        return str(unit)
    distance = unit.quantity(args.value)
    return f"{distance.magnitude} {unit.symbol} = {distance.in_base_units().magnitude} m"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="geocoords",
        description="Validate latitude/longitude values and derive compass directions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=EXAMPLES,
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", type=str, default=None, help="Also write logs to this file")
    subparsers = parser.add_subparsers(dest="command", required=True)

    coordinate = subparsers.add_parser("coordinate", help="Show a latitude and/or longitude")
    coordinate.add_argument("--latitude", "-lat", type=float, help="Latitude in degrees")
    coordinate.add_argument("--longitude", "-lng", type=float, help="Longitude in degrees")
    coordinate.set_defaults(func=run_coordinate)

    shift = subparsers.add_parser("shift", help="Add or subtract a delta from a coordinate")
    target = shift.add_mutually_exclusive_group(required=True)
    target.add_argument("--latitude", "-lat", type=float, help="Latitude in degrees")
    target.add_argument("--longitude", "-lng", type=float, help="Longitude in degrees")
    shift.add_argument("--delta", "-d", type=float, required=True, help="Delta in degrees")
    shift.add_argument("--subtract", action="store_true", help="Subtract the delta instead")
    shift.set_defaults(func=run_shift)

    city = subparsers.add_parser("city", help="Show a city with its coordinates")
    city.add_argument("name", type=str, help="City name")
    city.add_argument("--latitude", "-lat", type=float, help="Latitude in degrees")
    city.add_argument("--longitude", "-lng", type=float, help="Longitude in degrees")
    city.set_defaults(func=run_city)

    unit = subparsers.add_parser("unit", help="Parse a distance unit")
    unit.add_argument("token", type=str, help="Unit such as cm, m, km or kilometers")
    unit.add_argument("--value", "-v", type=float, help="Distance to express in the unit")
    unit.set_defaults(func=run_unit)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "coordinate" and args.latitude is None and args.longitude is None:
        parser.error("coordinate: at least one of --latitude or --longitude is required")
    setup_logging(filename=args.log_file, level=args.log_level)
    logger.info("Running command {}", args.command)

    try:
        print(args.func(args))
    except GCBaseException as e:
        logger.debug("Command {} failed: {}", args.command, e)
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
