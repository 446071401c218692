"""Command line front end for path and fare lookups."""

import argparse
import json
import logging
import sys

from subway_routing.adapters.config import AppConfig, NetworkConfigurationLoader
from subway_routing.adapters.in_memory import InMemoryLineRepository, InMemoryStationRepository
from subway_routing.application.errors import PathCalculateException
from subway_routing.application.services import FareCalculator, PathService
from subway_routing.domain.models import (
    Anonymous,
    Authenticated,
    PathRequest,
    RiderContext,
    SubwayRoutingError,
)

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Subway shortest path and fare calculator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List stations of the network
  subway-routing stations --config config.example.toml

  # Shortest path and fare for an anonymous rider
  subway-routing path 1 3 --config config.example.toml

  # Same path for a 12 year old rider, as JSON
  subway-routing path 1 3 --age 12 --json
        """,
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # Stations command
    stations_parser = subparsers.add_parser("stations", help="List stations of the network")
    stations_parser.add_argument("--config", help="Network TOML file (default: NETWORK_FILE)")
    stations_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # Path command
    path_parser = subparsers.add_parser("path", help="Calculate shortest path and fare")
    path_parser.add_argument("source", type=int, help="Departure station id")
    path_parser.add_argument("target", type=int, help="Arrival station id")
    path_parser.add_argument("--config", help="Network TOML file (default: NETWORK_FILE)")
    path_parser.add_argument("--age", type=int, help="Rider age (anonymous if omitted)")
    path_parser.add_argument("--json", action="store_true", help="Output as JSON")

    return parser


def _load_config(config_file: str | None) -> AppConfig:
    if config_file is None:
        return AppConfig()
    return AppConfig(network_file=config_file)


def list_stations(config: AppConfig, format_json: bool = False) -> None:
    """Print the stations of the configured network."""
    network = NetworkConfigurationLoader.load(config)
    if format_json:
        payload = [{"id": s.id, "name": s.name} for s in network.stations]
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    print(f"\n{len(network.stations)} station(s):\n")
    for station in network.stations:
        print(f"  {station.id:>4}  {station.name}")


def show_path(
    config: AppConfig, request: PathRequest, rider: RiderContext, format_json: bool = False
) -> None:
    """Print the shortest path and fare for ``request``."""
    network = NetworkConfigurationLoader.load(config)
    calculator = FareCalculator(config.fare_policy())
    service = PathService(
        InMemoryStationRepository(network.stations),
        InMemoryLineRepository(network.lines),
        fare_calculator=calculator,
    )

    result = service.find_path(rider, request)
    breakdown = calculator.breakdown(result.distance, result.lines, rider)

    if format_json:
        payload = result.to_response().model_dump()
        payload["lines"] = [line.name for line in result.lines]
        payload["fare_breakdown"] = breakdown.model_dump()
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    print(" -> ".join(station.name for station in result.stations))
    print(f"Distance: {result.distance.value}km")
    print(f"Lines:    {', '.join(line.name for line in result.lines)}")
    print(
        f"Fare:     {result.fare.amount}원 "
        f"(distance {breakdown.distance_fare} + surcharge {breakdown.surcharge}"
        f" - discount {breakdown.discount})"
    )


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = _load_config(args.config)
        if args.command == "stations":
            list_stations(config, format_json=args.json)
        elif args.command == "path":
            rider: RiderContext = Anonymous() if args.age is None else Authenticated(args.age)
            show_path(config, PathRequest(args.source, args.target), rider, format_json=args.json)
    except PathCalculateException as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    except (FileNotFoundError, ValueError, SubwayRoutingError) as e:
        logger.debug("Configuration error", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def cli_main() -> None:
    """Entry point for the console script."""
    sys.exit(main())


if __name__ == "__main__":
    cli_main()
