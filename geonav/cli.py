"""Command line front end for geodetic and great-circle calculations.

Examples:
    geonav distance 55.9987 -2.71 56.001 -2.734
    geonav bearing 55.9987 -2.71 56.001 -2.734 --final
    geonav destination 55.9987 -2.71 279.735 1514
    geonav ecef 51.4769 0.0 45.0
    geonav enu 51.4769 0.0 45.0 51.4779 0.001 50.0
    geonav dms -2.71
    geonav dec 55 59 55.32
"""

import argparse
from typing import List, Optional

from geonav import __version__
from geonav.coords import lla_to_ecef, lla_to_enu
from geonav.navigation import destination, final_bearing, haversine_distance, initial_bearing
from geonav.utils import dec_to_dms, dms_to_dec


def _cmd_distance(args: argparse.Namespace) -> None:
    d = haversine_distance((args.lat1, args.lon1), (args.lat2, args.lon2))
    print(f"Distance: {d:.{args.precision}f} m")


def _cmd_bearing(args: argparse.Namespace) -> None:
    pt1 = (args.lat1, args.lon1)
    pt2 = (args.lat2, args.lon2)
    if args.final:
        print(f"Final bearing: {final_bearing(pt1, pt2):.{args.precision}f} deg")
    else:
        print(f"Initial bearing: {initial_bearing(pt1, pt2):.{args.precision}f} deg")


def _cmd_destination(args: argparse.Namespace) -> None:
    lat, lon = destination((args.lat, args.lon), args.bearing, args.distance)
    print(f"Latitude:  {lat:.{args.precision}f} deg")
    print(f"Longitude: {lon:.{args.precision}f} deg")


def _cmd_ecef(args: argparse.Namespace) -> None:
    x, y, z = lla_to_ecef(args.lat, args.lon, args.alt)
    print(f"X: {x:.{args.precision}f} m")
    print(f"Y: {y:.{args.precision}f} m")
    print(f"Z: {z:.{args.precision}f} m")


def _cmd_enu(args: argparse.Namespace) -> None:
    east, north, up = lla_to_enu(
        (args.ref_lat, args.ref_lon, args.ref_alt),
        (args.lat, args.lon, args.alt),
    )
    print(f"East:  {east:.{args.precision}f} m")
    print(f"North: {north:.{args.precision}f} m")
    print(f"Up:    {up:.{args.precision}f} m")


def _cmd_dms(args: argparse.Namespace) -> None:
    deg, minutes, seconds = dec_to_dms(args.decimal)
    print(f"{deg}° {minutes}' {seconds:.{args.precision}f}\"")


def _cmd_dec(args: argparse.Namespace) -> None:
    print(f"{dms_to_dec(args.degrees, args.minutes, args.seconds):.{args.precision}f}")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per calculation."""
    parser = argparse.ArgumentParser(
        prog="geonav",
        description="Geodetic coordinate conversions and great-circle navigation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Conventions:
  Angles are decimal degrees (north/east positive), distances are meters,
  altitude is height above the WGS84 ellipsoid.

Examples:
  # Great-circle distance and bearing between two points
  geonav distance 55.9987 -2.71 56.001 -2.734
  geonav bearing 55.9987 -2.71 56.001 -2.734

  # Where do we end up after 1514 m on bearing 279.735?
  geonav destination 55.9987 -2.71 279.735 1514

  # Geodetic to ECEF, and to ENU about a reference
  geonav ecef 51.4769 0.0 45.0
  geonav enu 51.4769 0.0 45.0 51.4779 0.001 50.0
        """,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--precision", type=int, default=6, help="Decimal places in output (default: 6)"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    p = subparsers.add_parser("distance", help="Haversine great-circle distance (m)")
    for name in ("lat1", "lon1", "lat2", "lon2"):
        p.add_argument(name, type=float)
    p.set_defaults(func=_cmd_distance)

    p = subparsers.add_parser("bearing", help="Great-circle bearing from point 1 to point 2")
    for name in ("lat1", "lon1", "lat2", "lon2"):
        p.add_argument(name, type=float)
    p.add_argument("--final", action="store_true", help="Report bearing on arrival instead")
    p.set_defaults(func=_cmd_bearing)

    p = subparsers.add_parser("destination", help="Destination from start, bearing and distance")
    p.add_argument("lat", type=float)
    p.add_argument("lon", type=float)
    p.add_argument("bearing", type=float, help="Initial bearing (deg)")
    p.add_argument("distance", type=float, help="Distance (m)")
    p.set_defaults(func=_cmd_destination)

    p = subparsers.add_parser("ecef", help="Geodetic (LLA) to ECEF")
    p.add_argument("lat", type=float)
    p.add_argument("lon", type=float)
    p.add_argument("alt", type=float)
    p.set_defaults(func=_cmd_ecef)

    p = subparsers.add_parser("enu", help="Geodetic point to ENU about a reference")
    ref_group = p.add_argument_group("Reference Point")
    ref_group.add_argument("ref_lat", type=float)
    ref_group.add_argument("ref_lon", type=float)
    ref_group.add_argument("ref_alt", type=float)
    target_group = p.add_argument_group("Target Point")
    target_group.add_argument("lat", type=float)
    target_group.add_argument("lon", type=float)
    target_group.add_argument("alt", type=float)
    p.set_defaults(func=_cmd_enu)

    p = subparsers.add_parser("dms", help="Decimal degrees to degrees-minutes-seconds")
    p.add_argument("decimal", type=float)
    p.set_defaults(func=_cmd_dms)

    p = subparsers.add_parser("dec", help="Degrees-minutes-seconds to decimal degrees")
    p.add_argument("degrees", type=int)
    p.add_argument("minutes", type=int)
    p.add_argument("seconds", type=float)
    p.set_defaults(func=_cmd_dec)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
