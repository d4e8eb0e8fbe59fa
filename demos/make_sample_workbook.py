#!/usr/bin/env python3
"""
MAKE_SAMPLE_WORKBOOK: Write a Sample Stick Model Workbook
=========================================================

Writes a small two-bay mounting frame in the three-sheet layout:
    A = members (label, start node, end node)
    B = nodes   (id, x, y, z)
    C = supports (node id, type)

Run with:
    python demos/make_sample_workbook.py [--out Sample.xlsx]
"""

import argparse
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from mount_stick.export import write_sample_workbook


def sample_frame(bay: float = 20.0, depth: float = 15.0, height: float = 25.0):
    """
    Two bays along x, one along y, columns at every grid point.

    Returns:
    --------
    nodes, members, supports : lists of rows in sheet column order
    """
    xs = [0.0, bay, 2 * bay]
    ys = [0.0, depth]

    nodes = []
    base, top = {}, {}
    node_id = 1
    for z, table in ((0.0, base), (height, top)):
        for y in ys:
            for x in xs:
                nodes.append((node_id, x, y, z))
                table[(x, y)] = node_id
                node_id += 1

    members = []

    def add(start, end):
        members.append((f"M{len(members) + 1}", start, end))

    # Columns
    for key in base:
        add(base[key], top[key])
    # Top beams along x
    for y in ys:
        for x0, x1 in zip(xs, xs[1:]):
            add(top[(x0, y)], top[(x1, y)])
    # Top beams along y
    for x in xs:
        add(top[(x, ys[0])], top[(x, ys[1])])
    # Bracing in the two end frames
    add(base[(xs[0], ys[0])], top[(xs[0], ys[1])])
    add(base[(xs[-1], ys[0])], top[(xs[-1], ys[1])])

    supports = [
        (base[(x, y)], "Fixed" if y == ys[0] else "Pinned")
        for y in ys for x in xs
    ]
    return nodes, members, supports


def main(argv=None):
    parser = argparse.ArgumentParser(description="Write a sample stick model workbook")
    parser.add_argument("--out", default="Sample.xlsx", help="Output .xlsx path")
    args = parser.parse_args(argv)

    nodes, members, supports = sample_frame()
    path = write_sample_workbook(args.out, nodes, members, supports)

    print(f"Sample workbook saved to: {path}")
    print(f"  {len(nodes)} nodes, {len(members)} members, {len(supports)} supports")


if __name__ == "__main__":
    main()
