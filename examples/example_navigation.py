"""Example: Geodetic conversions and great-circle navigation.

This example walks through the package on a few named locations:
1. Convert geodetic coordinates (LLA) to ECEF and back
2. Express nearby points in a local ENU frame
3. Measure angles and straight-line distances in ECEF
4. Great-circle distance, bearing and destination (haversine)
5. Decimal degrees <-> degrees-minutes-seconds

Usage:
    python examples/example_navigation.py
    python examples/example_navigation.py --preset london --target tokyo
"""

import argparse
from pathlib import Path
from typing import Optional

import matplotlib.pyplot as plt
import numpy as np

from geonav.coords import (
    calc_angle,
    ecef_distance,
    ecef_to_enu,
    ecef_to_lla,
    lla_to_ecef,
    lla_to_enu,
)
from geonav.navigation import (
    destination,
    final_bearing,
    haversine_distance,
    initial_bearing,
    midpoint,
)
from geonav.utils import dec_to_dms, dms_to_dec


# ============================================================================
# PRESET LOCATIONS
# ============================================================================

PRESETS = {
    'north_berwick': {
        'description': 'North Berwick harbour, Scotland',
        'lla': (55.9987, -2.71, 10.0),
    },
    'north_berwick_law': {
        'description': 'North Berwick Law summit, Scotland',
        'lla': (56.001, -2.734, 187.0),
    },
    'london': {
        'description': 'London (51.51°N, 0.13°W)',
        'lla': (51.5074, -0.1278, 11.0),
    },
    'tokyo': {
        'description': 'Tokyo (35.68°N, 139.65°E)',
        'lla': (35.6762, 139.6503, 40.0),
    },
    'san_francisco': {
        'description': 'San Francisco (37.77°N, 122.42°W)',
        'lla': (37.7749, -122.4194, 16.0),
    },
}


def run_examples(origin_name: str, target_name: str, figs_dir: Optional[Path] = None) -> None:
    """Run the worked examples between two preset locations."""
    origin = PRESETS[origin_name]
    target = PRESETS[target_name]
    lat0, lon0, alt0 = origin['lla']
    lat1, lon1, alt1 = target['lla']

    print("=" * 70)
    print("Geodetic Conversion and Great-Circle Navigation Examples")
    print("=" * 70)
    print(f"Origin: {origin['description']}")
    print(f"Target: {target['description']}")

    # Example 1: LLA to ECEF transformation
    print("\n1. LLA to ECEF Transformation")
    print("-" * 70)

    xyz0 = lla_to_ecef(lat0, lon0, alt0)
    print(f"ECEF Coordinates (origin):")
    print(f"  X: {xyz0.x:,.2f} m")
    print(f"  Y: {xyz0.y:,.2f} m")
    print(f"  Z: {xyz0.z:,.2f} m")

    lla_back = ecef_to_lla(*xyz0)
    print(f"Recovered LLA:")
    print(f"  Latitude:  {lla_back.lat:.6f}°")
    print(f"  Longitude: {lla_back.lon:.6f}°")
    print(f"  Height:    {lla_back.alt:.3f} m")

    # Example 2: Local ENU frame
    print("\n2. Local ENU Frame")
    print("-" * 70)

    xyz1 = lla_to_ecef(lat1, lon1, alt1)
    enu = ecef_to_enu((lat0, lon0, alt0), xyz1)
    print(f"Target in ENU about origin:")
    print(f"  ENU: [{enu.east:,.2f}, {enu.north:,.2f}, {enu.up:,.2f}] m")

    # Example 3: Vector geometry in ECEF
    print("\n3. Angles and Straight-Line Distance")
    print("-" * 70)

    chord = ecef_distance(xyz0, xyz1)
    print(f"Straight-line (chord) distance: {chord:,.2f} m")

    # Angle at the earth's center between the two positions
    center_angle = calc_angle((0.0, 0.0, 0.0), xyz0, xyz1)
    print(f"Geocentric angle: {np.rad2deg(center_angle):.6f}°")

    # Example 4: Great-circle navigation
    print("\n4. Great-Circle Navigation (haversine)")
    print("-" * 70)

    start = (lat0, lon0)
    end = (lat1, lon1)
    dist = haversine_distance(start, end)
    brg = initial_bearing(start, end)
    print(f"Great-circle distance: {dist:,.2f} m")
    print(f"Initial bearing:       {brg:.4f}°")
    print(f"Final bearing:         {final_bearing(start, end):.4f}°")

    mid = midpoint(start, end)
    print(f"Midpoint:              ({mid.lat:.6f}°, {mid.lon:.6f}°)")

    dest = destination(start, brg, dist)
    print(f"Destination check:     ({dest.lat:.6f}°, {dest.lon:.6f}°)")
    print(f"  Error vs target:     {haversine_distance(dest, end):.3f} m")

    # Example 5: DMS conversions
    print("\n5. Decimal Degrees <-> DMS")
    print("-" * 70)

    for value in (lat0, lon0):
        dms = dec_to_dms(value)
        print(f"  {value:.6f}° = {dms.degrees}° {dms.minutes}' {dms.seconds:.3f}\""
              f" -> {dms_to_dec(dms):.6f}°")

    if figs_dir is not None:
        print("\n6. Route Plot")
        print("-" * 70)
        plot_route(origin['lla'], target['lla'], figs_dir)

    print("\n" + "=" * 70)
    print("Examples complete!")
    print("=" * 70)


def plot_route(origin_lla, target_lla, figs_dir: Path, n_points: int = 50) -> None:
    """Plot the great-circle route in the origin's local ENU frame."""
    start = origin_lla[:2]
    end = target_lla[:2]
    total = haversine_distance(start, end)
    bearing = initial_bearing(start, end)

    fractions = np.linspace(0.0, 1.0, n_points)
    route = [destination(start, bearing, f * total) for f in fractions]
    enu = np.array([lla_to_enu(origin_lla, (lat, lon, 0.0)) for lat, lon in route])

    fig, ax = plt.subplots(figsize=(10, 8))
    ax.plot(enu[:, 0] / 1000.0, enu[:, 1] / 1000.0, 'b-', linewidth=2, label='Great-circle route')
    ax.plot(0.0, 0.0, 'go', markersize=10, label='Origin')
    target_enu = lla_to_enu(origin_lla, target_lla)
    ax.plot(target_enu.east / 1000.0, target_enu.north / 1000.0, 'rs', markersize=10, label='Target')

    ax.set_xlabel('East [km]', fontsize=12)
    ax.set_ylabel('North [km]', fontsize=12)
    ax.set_title(f'Route in Local ENU Frame ({total / 1000.0:,.1f} km)', fontsize=14, fontweight='bold')
    ax.legend(fontsize=10, loc='best')
    ax.grid(True, alpha=0.3)
    ax.axis('equal')

    plt.tight_layout()
    figs_dir.mkdir(parents=True, exist_ok=True)
    fig.savefig(figs_dir / 'route_enu.svg', dpi=300, bbox_inches='tight')
    print(f"  [OK] Saved: {figs_dir / 'route_enu.svg'}")

    plt.close(fig)


def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Geodetic conversion and great-circle navigation examples",
    )
    parser.add_argument(
        "--preset",
        type=str,
        choices=sorted(PRESETS),
        default="north_berwick",
        help="Origin location (default: north_berwick)",
    )
    parser.add_argument(
        "--target",
        type=str,
        choices=sorted(PRESETS),
        default="north_berwick_law",
        help="Target location (default: north_berwick_law)",
    )
    parser.add_argument(
        "--figs-dir",
        type=Path,
        default=None,
        help="Save a route plot to this directory (default: no plot)",
    )
    args = parser.parse_args()

    run_examples(args.preset, args.target, args.figs_dir)


if __name__ == "__main__":
    main()
