import argparse
import csv
import logging
import os
import sys

import matplotlib.pyplot as plt

# Add project src to sys.path when running from a checkout
current_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.join(current_dir, "..")
sys.path.append(os.path.join(project_root, "src"))

from wktproj.core.errors import WktprojError
from wktproj.core.stream import WktStream
from wktproj.reprojection import AxisOrder, Cs2csReprojector, ReprojectionConfig, ReprojectionGateway
from wktproj.reprojection.pyproj_backend import PyprojReprojector
from wktproj.wkt.builder import NumberFormat, WktBuilder


def parse_args():
    parser = argparse.ArgumentParser(description="Reproject a table of WKT geometries.")
    parser.add_argument("input", help="CSV file with a 'wkt' column")
    parser.add_argument("--from-crs", default="EPSG:4326")
    parser.add_argument("--to-crs", default="EPSG:3857")
    parser.add_argument("--precision", type=int, default=12)
    parser.add_argument(
        "--axis-order",
        choices=[a.name.lower() for a in AxisOrder],
        default=AxisOrder.NORMAL.name.lower(),
    )
    parser.add_argument(
        "--engine",
        choices=["cs2cs", "pyproj"],
        default="cs2cs",
        help="cs2cs runs the PROJ binary, pyproj transforms in-process",
    )
    parser.add_argument("--no-plot", action="store_true")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args()


def main():
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    # 1. Configure
    config = ReprojectionConfig(
        from_crs=args.from_crs,
        to_crs=args.to_crs,
        axis_order=AxisOrder[args.axis_order.upper()],
        precision=args.precision,
    )
    reprojector = Cs2csReprojector() if args.engine == "cs2cs" else PyprojReprojector()
    gateway = ReprojectionGateway(reprojector, config)
    builder = WktBuilder(NumberFormat.VERBATIM)

    # 2. Load and reproject
    print(f"Loading geometries from {args.input}...")
    pairs = []
    try:
        for geometry in WktStream(args.input):
            pairs.append((geometry, gateway.reproject(geometry)))
    except (WktprojError, FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        return 1
    print(f"Reprojected {len(pairs)} geometries {config.from_crs} -> {config.to_crs}.")

    if not pairs:
        print("No geometries loaded. Exiting.")
        return 0

    # 3. Save to CSV
    output_dir = os.path.join(project_root, "data", "processed")
    os.makedirs(output_dir, exist_ok=True)

    input_filename = os.path.splitext(os.path.basename(args.input))[0]
    output_csv = os.path.join(output_dir, f"reprojected_{input_filename}.csv")
    print(f"Saving to {output_csv}...")
    with open(output_csv, 'w', newline='') as f:
        writer = csv.writer(f)
        writer.writerow(["type", "points", "wkt"])
        for _, reprojected in pairs:
            writer.writerow([
                reprojected.geometry_type.name, len(reprojected), builder.build(reprojected)
            ])

    if args.no_plot:
        return 0

    # 4. Visualize
    print("Generating visualization...")
    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(24, 12))

    for original, reprojected in pairs:
        xs = [p.x for p in original.points]
        ys = [p.y for p in original.points]
        ax1.plot(xs, ys, marker='o', markersize=3, linewidth=1, color='blue', alpha=0.7)

        xs = [p.x for p in reprojected.points]
        ys = [p.y for p in reprojected.points]
        ax2.plot(xs, ys, marker='o', markersize=3, linewidth=1, color='red', alpha=0.7)

    ax1.set_title(f"{config.from_crs} ({input_filename})")
    ax2.set_title(f"{config.to_crs} ({input_filename})")
    for ax in (ax1, ax2):
        ax.set_aspect('equal', adjustable='datalim')

    output_png = os.path.join(output_dir, f"reprojected_{input_filename}.png")
    plt.savefig(output_png, dpi=150, bbox_inches='tight')
    print(f"Saved plot to {output_png}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
