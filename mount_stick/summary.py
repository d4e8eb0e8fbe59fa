# mount_stick/summary.py
"""
Model summary: counts, member lengths and extents for display and export.
"""

from collections import Counter
from typing import Any, Dict, List, Tuple

from .geometry import member_pose
from .model import Member, StickModel


def member_lengths(model: StickModel) -> List[Tuple[int, Member, float]]:
    """(row index, member, length) for every member that can be drawn."""
    rows = []
    for index, member in enumerate(model.members):
        ends = model.resolve_member(member)
        if ends is None:
            continue
        try:
            _, L, _ = member_pose(ends[0].xyz, ends[1].xyz)
        except ValueError:
            continue
        rows.append((index, member, L))
    return rows


def model_summary(model: StickModel) -> Dict[str, Any]:
    """
    Key figures of a loaded model.

    Returns:
    --------
    dict with
        n_nodes, n_members, n_supports
        n_skipped_members : members not drawn (unresolved or zero length)
        n_zero_length_members : members whose two nodes coincide
        n_skipped_supports : supports on unresolved nodes
        total_length, min_member_length, max_member_length
        support_types : {type: count}
        extent : (dx, dy, dz) of the bounding box, or None with no nodes
    """
    lengths = [L for _, _, L in member_lengths(model)]
    n_unresolved = len(model.unresolved_members())
    n_not_drawn = len(model.members) - len(lengths)

    extent = None
    try:
        lo, hi = model.bounds()
        extent = tuple(float(v) for v in hi - lo)
    except ValueError:
        pass

    return {
        'n_nodes': len(model.nodes),
        'n_members': len(model.members),
        'n_supports': len(model.supports),
        'n_skipped_members': n_not_drawn,
        'n_zero_length_members': n_not_drawn - n_unresolved,
        'n_skipped_supports': len(model.unresolved_supports()),
        'total_length': float(sum(lengths)),
        'min_member_length': min(lengths) if lengths else 0.0,
        'max_member_length': max(lengths) if lengths else 0.0,
        'support_types': dict(Counter(s.type or 'n/a' for s in model.supports)),
        'extent': extent,
    }
