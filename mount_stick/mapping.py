# mount_stick/mapping.py
"""
Row mapping: raw sheet rows -> typed Node / Member / Support records.

Each sheet is read without header inference. The first occupied row is the
header and is skipped here. Cells are coerced leniently: coordinates that do
not parse become NaN (the node is kept but never drawn) and ids are
normalised so that 1, 1.0 and "1" all name the same node.
"""

import logging
import math
from dataclasses import dataclass
from numbers import Number
from typing import Any, Dict, List, Mapping, Optional, Sequence

import pandas as pd

from .model import Member, Node, NodeId, StickModel, Support

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SheetLayout:
    """Names of the three sheets in the workbook."""
    members: str = "A"
    nodes: str = "B"
    supports: str = "C"

    @property
    def names(self) -> List[str]:
        return [self.members, self.nodes, self.supports]


def parse_float(value: Any) -> float:
    """
    Lenient float parse: numbers pass through, numeric strings convert,
    anything else (blank, text, booleans) is NaN.
    """
    if value is None or isinstance(value, bool):
        return math.nan
    if isinstance(value, Number):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return math.nan
    return math.nan


def parse_id(value: Any) -> Optional[NodeId]:
    """
    Normalise a node id cell.

    Integral numbers (or numeric strings) become int. Other finite
    numbers, written as number or text, become their canonical float text
    so 1.5 and "1.50" match. Everything else becomes a trimmed string.
    Blank cells give None.

    >>> parse_id(3.0), parse_id(" 3 "), parse_id("1.50"), parse_id("N3"), parse_id(None)
    (3, 3, '1.5', 'N3', None)
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Number):
        if math.isnan(float(value)):
            return None
        return _canonical_number(float(value))
    text = str(value).strip()
    if not text:
        return None
    try:
        f = float(text)
    except ValueError:
        return text
    if not math.isfinite(f):
        return text
    return _canonical_number(f)


def _canonical_number(f: float) -> NodeId:
    return int(f) if f.is_integer() else repr(f)


def _used_range(df: pd.DataFrame) -> pd.DataFrame:
    """Drop blank rows above and blank columns left of the table."""
    occupied = df.notna()
    rows, cols = occupied.any(axis=1).to_numpy(), occupied.any(axis=0).to_numpy()
    if not rows.any():
        return df.iloc[0:0, 0:0]
    return df.iloc[rows.argmax():, cols.argmax():]


def _data_rows(df: pd.DataFrame) -> List[Sequence[Any]]:
    """
    Rows after the header, blank rows dropped, NaN cells as None.

    The header is the first occupied row of the sheet and column 0 is the
    first occupied column, so tables need not start at A1.
    """
    body = _used_range(df).iloc[1:].dropna(how="all")
    body = body.astype(object).where(body.notna(), None)
    return [list(row) for row in body.itertuples(index=False, name=None)]


def _cell(row: Sequence[Any], col: int) -> Any:
    return row[col] if col < len(row) else None


def rows_to_nodes(df: pd.DataFrame) -> Dict[NodeId, Node]:
    """
    Map the node sheet (columns: id, x, y, z) to nodes keyed by id.

    Rows without an id cannot be referenced and are dropped. For duplicate
    ids the first row wins.
    """
    nodes: Dict[NodeId, Node] = {}
    for row in _data_rows(df):
        node_id = parse_id(_cell(row, 0))
        if node_id is None:
            logger.warning("Skipping node row without an id: %r", row)
            continue
        if node_id in nodes:
            logger.warning("Duplicate node id %r, keeping the first definition", node_id)
            continue
        node = Node(
            id=node_id,
            x=parse_float(_cell(row, 1)),
            y=parse_float(_cell(row, 2)),
            z=parse_float(_cell(row, 3)),
        )
        if not node.is_finite:
            logger.warning("Node %r has non-numeric coordinates %s", node_id, node.xyz)
        nodes[node_id] = node
    return nodes


def rows_to_members(df: pd.DataFrame) -> List[Member]:
    """Map the member sheet (columns: label, start id, end id). Column 0 is ignored."""
    return [
        Member(start_id=parse_id(_cell(row, 1)), end_id=parse_id(_cell(row, 2)))
        for row in _data_rows(df)
    ]


def rows_to_supports(df: pd.DataFrame) -> List[Support]:
    """Map the support sheet (columns: node id, type)."""
    supports = []
    for row in _data_rows(df):
        kind = _cell(row, 1)
        supports.append(Support(
            node_id=parse_id(_cell(row, 0)),
            type="" if kind is None else str(kind).strip(),
        ))
    return supports


def build_model(
    tables: Mapping[str, pd.DataFrame],
    layout: SheetLayout = SheetLayout(),
    source: str = "",
) -> StickModel:
    """
    Build a StickModel from the decoded sheets.

    Parameters:
    -----------
    tables : Mapping[str, DataFrame]
        Sheet name -> raw sheet (read with header=None)
    layout : SheetLayout
        Which sheet holds which table
    source : str
        Label stored on the model
    """
    model = StickModel(
        nodes=rows_to_nodes(tables[layout.nodes]),
        members=rows_to_members(tables[layout.members]),
        supports=rows_to_supports(tables[layout.supports]),
        source=source,
    )
    logger.info(
        "Loaded %d nodes, %d members, %d supports from %s",
        len(model.nodes), len(model.members), len(model.supports), source or "<workbook>",
    )
    return model
