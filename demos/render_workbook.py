#!/usr/bin/env python3
"""
RENDER_WORKBOOK: Workbook -> Interactive 3D Scene
=================================================

Loads a three-sheet workbook from a path or URL and writes:
- an interactive HTML scene (always)
- a PNG snapshot, model JSON and member schedule CSV (optional)

Run with:
    python demos/render_workbook.py Sample.xlsx --png --json --csv
    python demos/render_workbook.py http://localhost:3000/Sample.xlsx --show
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from mount_stick import SceneSettings, SheetLayout, load_model, model_summary, plot_model_3d
from mount_stick.export import member_schedule_csv, model_to_json
from mount_stick.loader import WorkbookError
from mount_stick.logging_config import setup_logging
from mount_stick.snapshot import save_snapshot


def print_header(text: str):
    """Print a formatted section header."""
    print("\n" + "=" * 60)
    print(f"  {text}")
    print("=" * 60)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Render a stick model workbook in 3D")
    parser.add_argument("source", help="Workbook path or http(s) URL")
    parser.add_argument("--outdir", default="artifacts", help="Output directory")
    parser.add_argument("--members-sheet", default="A")
    parser.add_argument("--nodes-sheet", default="B")
    parser.add_argument("--supports-sheet", default="C")
    parser.add_argument("--radius", type=float, default=0.5, help="Member radius")
    parser.add_argument("--support-size", type=float, default=2.0, help="Support cube size")
    parser.add_argument("--show-nodes", action="store_true")
    parser.add_argument("--png", action="store_true", help="Also save a PNG snapshot")
    parser.add_argument("--json", action="store_true", help="Also save model JSON")
    parser.add_argument("--csv", action="store_true", help="Also save member schedule CSV")
    parser.add_argument("--show", action="store_true", help="Open the scene in a browser")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    layout = SheetLayout(
        members=args.members_sheet,
        nodes=args.nodes_sheet,
        supports=args.supports_sheet,
    )
    try:
        model = load_model(args.source, layout=layout)
    except WorkbookError as e:
        print(f"Error loading workbook: {e}", file=sys.stderr)
        return 1

    summary = model_summary(model)
    print_header("MODEL")
    print(f"  Nodes:     {summary['n_nodes']}")
    print(f"  Members:   {summary['n_members']} ({summary['n_skipped_members']} not drawn, "
          f"{summary['n_zero_length_members']} of them zero length)")
    print(f"  Supports:  {summary['n_supports']} ({summary['n_skipped_supports']} not drawn)")
    print(f"  Length:    {summary['total_length']:.2f} total")

    settings = SceneSettings(
        member_radius=args.radius,
        support_size=args.support_size,
        show_nodes=args.show_nodes,
    )
    outdir = Path(args.outdir)
    stem = Path(args.source).stem or "stick_model"

    print_header("OUTPUT")
    html_path = outdir / f"{stem}.html"
    plot_model_3d(model, settings=settings, title=model.source, outpath=str(html_path), show=args.show)
    print(f"3D visualization saved to: {html_path}")

    if args.png:
        png_path = save_snapshot(model, str(outdir / f"{stem}.png"), settings=settings)
        print(f"Snapshot saved to: {png_path}")

    if args.json:
        json_path = outdir / f"{stem}.json"
        json_path.write_text(model_to_json(model), encoding="utf-8")
        print(f"Model JSON saved to: {json_path}")

    if args.csv:
        csv_path = outdir / f"{stem}_members.csv"
        csv_path.write_text(member_schedule_csv(model), encoding="utf-8")
        print(f"Member schedule saved to: {csv_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
