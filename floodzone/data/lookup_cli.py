"""CLI for flood zone lookups.

Usage:
    python -m floodzone.data.lookup_cli "500 S State St, Ann Arbor MI 48109"
    python -m floodzone.data.lookup_cli --lat 38.9 --lng -77.0
    python -m floodzone.data.lookup_cli --colors
"""

import argparse
import asyncio
import logging
import sys

from floodzone.config import settings
from floodzone.data.lookup import LookupService
from floodzone.engine.map_session import MapSession, result_summary
from floodzone.models.errors import FloodLookupError, UpstreamError


def print_result(result, session: MapSession) -> None:
    print(f"\n{'=' * 60}")
    print(f"  Flood Zone Lookup ({result.source})")
    print(f"{'=' * 60}")
    print(f"  Zone:         {result.zone_code}")
    print(f"  Risk Tier:    {result.risk_tier.value}")
    print(f"  SFHA:         {'Yes' if result.sfha else 'No'}")
    print(f"  Color:        {result.color}")
    if session.marker:
        pos = session.marker.position
        print(f"  Location:     {pos.lat:.6f}, {pos.lng:.6f}")
    for key, value in result.details.items():
        if value:
            print(f"  {key.replace('_', ' ').title() + ':':<14}{value}")
    print()
    for line in result_summary(result).splitlines():
        print(f"  {line}")
    print()


def print_legend(session: MapSession) -> None:
    print(f"\n{'=' * 60}")
    print("  Flood Zones")
    print(f"{'=' * 60}")
    for code, name, color in session.legend():
        print(f"  {code:>5}  {color}  {name}")
    print()


async def main() -> int:
    parser = argparse.ArgumentParser(description="Flood zone lookup CLI")
    parser.add_argument("address", nargs="?", help="Street address")
    parser.add_argument("--lat", type=float, help="Latitude (coordinate lookup)")
    parser.add_argument("--lng", type=float, help="Longitude (coordinate lookup)")
    parser.add_argument("--colors", action="store_true", help="Show the zone legend")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else settings.log_level)

    session = MapSession()
    if args.colors:
        print_legend(session)
        return 0

    service = LookupService()
    if args.lat is not None or args.lng is not None:
        lookup = service.lookup_by_coordinates(args.lat, args.lng)
    elif args.address:
        lookup = service.lookup_by_address(args.address)
    else:
        parser.error("an address or --lat/--lng is required (unless using --colors)")

    try:
        result = await session.track(lookup)
    except UpstreamError as e:
        print(f"Error ({e.kind.value}, HTTP {e.status_code}): {e.message}", file=sys.stderr)
        return 1
    except FloodLookupError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print_result(result, session)
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
