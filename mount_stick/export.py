# mount_stick/export.py
"""
Export: JSON interchange, CSV member schedule, and workbook writing.
"""

import csv
import io
import json
import logging
from pathlib import Path
from typing import Iterable, Sequence, Union

import pandas as pd

from .mapping import SheetLayout
from .model import StickModel
from .summary import member_lengths, model_summary

logger = logging.getLogger(__name__)


def model_to_json(model: StickModel) -> str:
    """
    Serialise the model as JSON.

    Members whose ends both resolve carry their length; unresolved ones
    are kept (they are part of what was loaded) without a length.
    """
    lengths = {index: L for index, _, L in member_lengths(model)}

    nodes_data = [
        {'id': n.id, 'x': n.x, 'y': n.y, 'z': n.z}
        for n in model.nodes.values()
    ]
    members_data = []
    for index, m in enumerate(model.members):
        entry = {'index': index, 'start': m.start_id, 'end': m.end_id}
        if index in lengths:
            entry['length'] = round(lengths[index], 4)
        members_data.append(entry)
    supports_data = [
        {'node': s.node_id, 'type': s.type}
        for s in model.supports
    ]

    data = {
        'version': '1.0',
        'type': 'stick_model',
        'source': model.source,
        'summary': model_summary(model),
        'geometry': {
            'nodes': nodes_data,
            'members': members_data,
            'supports': supports_data,
        },
    }
    # NaN coordinates are written as null so the output stays valid JSON
    return json.dumps(_nan_to_none(data), indent=2)


def _nan_to_none(obj):
    if isinstance(obj, float) and obj != obj:
        return None
    if isinstance(obj, dict):
        return {k: _nan_to_none(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_nan_to_none(v) for v in obj]
    return obj


def member_schedule_csv(model: StickModel) -> str:
    """
    CSV schedule of drawable members, shortest first.

    Columns: member, start, end, length_m, length_mm
    """
    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow(['member', 'start', 'end', 'length_m', 'length_mm'])

    rows = sorted(member_lengths(model), key=lambda r: r[2])
    for index, m, L in rows:
        writer.writerow([index, m.start_id, m.end_id, round(L, 4), round(L * 1000, 1)])

    return output.getvalue()


def write_sample_workbook(
    path: Union[str, Path],
    nodes: Iterable[Sequence],
    members: Iterable[Sequence],
    supports: Iterable[Sequence],
    layout: SheetLayout = SheetLayout(),
) -> Path:
    """
    Write a workbook in the three-sheet layout.

    Parameters:
    -----------
    path : str | Path
        Output .xlsx file
    nodes : rows of (id, x, y, z)
    members : rows of (label, start id, end id)
    supports : rows of (node id, type)
    layout : SheetLayout
        Sheet names to use

    Returns:
    --------
    Path of the written file
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        pd.DataFrame(list(members), columns=['Member', 'Start', 'End']).to_excel(
            writer, sheet_name=layout.members, index=False)
        pd.DataFrame(list(nodes), columns=['Node', 'X', 'Y', 'Z']).to_excel(
            writer, sheet_name=layout.nodes, index=False)
        pd.DataFrame(list(supports), columns=['Node', 'Type']).to_excel(
            writer, sheet_name=layout.supports, index=False)
    logger.info("Workbook written to %s", path)
    return path
