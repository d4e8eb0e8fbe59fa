# mount_stick/model.py
"""
STICK MODEL DEFINITIONS: Node, Member, Support
==============================================

PURPOSE:
--------
Typed records for a structural stick model read from a spreadsheet:
- Node: a point in 3D space, identified by an integer id
- Member: a straight stick between two nodes
- Support: a restraint of some named type at a node

StickModel groups one load's worth of records and answers the lookups the
renderer needs (resolve a member to its two end nodes, resolve a support to
its node, compute the bounding box).

LIFECYCLE:
----------
All three collections are filled once per load and never mutated. A reload
builds a new StickModel; the old one is simply dropped.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union

import numpy as np

logger = logging.getLogger(__name__)

# Ids are ints when the sheet holds integral values, otherwise trimmed strings
NodeId = Union[int, str]


@dataclass(frozen=True)
class Node:
    """
    A joint in 3D space.

    Parameters:
    -----------
    id : int
        Node number from the node sheet (unique per load)
    x, y, z : float
        Global coordinates. May be NaN when the sheet cell did not parse
        as a number; such nodes are never drawn.

    Examples:
    ---------
    >>> n = Node(1, 0.0, 0.0, 12.5)
    >>> n.xyz
    (0.0, 0.0, 12.5)
    """
    id: NodeId
    x: float
    y: float
    z: float

    @property
    def xyz(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    @property
    def is_finite(self) -> bool:
        return all(math.isfinite(c) for c in self.xyz)


@dataclass(frozen=True)
class Member:
    """
    A stick between two nodes.

    Members are not required to be unique: the same pair may appear twice
    in the sheet and is then drawn twice.
    """
    start_id: NodeId
    end_id: NodeId


@dataclass(frozen=True)
class Support:
    """A support of a given type (e.g. "Fixed", "Pinned") at a node."""
    node_id: NodeId
    type: str = ""


@dataclass
class StickModel:
    """
    Everything read from one workbook.

    Parameters:
    -----------
    nodes : Dict[id, Node]
        Nodes keyed by id
    members : List[Member]
        Members in row order (the row index is the member's key)
    supports : List[Support]
        Supports in row order
    source : str
        Human-readable label of where the model came from
    """
    nodes: Dict[NodeId, Node] = field(default_factory=dict)
    members: List[Member] = field(default_factory=list)
    supports: List[Support] = field(default_factory=list)
    source: str = ""

    def find_node(self, node_id: NodeId) -> Optional[Node]:
        """Return the node with this id, or None if missing or not drawable."""
        node = self.nodes.get(node_id)
        if node is None or not node.is_finite:
            return None
        return node

    def resolve_member(self, member: Member) -> Optional[Tuple[Node, Node]]:
        start = self.find_node(member.start_id)
        end = self.find_node(member.end_id)
        if start is None or end is None:
            logger.debug("Member %s-%s has an unresolved node", member.start_id, member.end_id)
            return None
        return start, end

    def resolve_support(self, support: Support) -> Optional[Node]:
        node = self.find_node(support.node_id)
        if node is None:
            logger.debug("Support at node %s has an unresolved node", support.node_id)
        return node

    def unresolved_members(self) -> List[Tuple[int, Member]]:
        """(row index, member) for every member that cannot be drawn."""
        return [
            (i, m) for i, m in enumerate(self.members)
            if self.find_node(m.start_id) is None or self.find_node(m.end_id) is None
        ]

    def unresolved_supports(self) -> List[Tuple[int, Support]]:
        return [
            (i, s) for i, s in enumerate(self.supports)
            if self.find_node(s.node_id) is None
        ]

    def bounds(self) -> Tuple[np.ndarray, np.ndarray]:
        """
        Axis-aligned bounding box of all drawable nodes.

        Returns:
        --------
        (lo, hi) : Tuple[np.ndarray, np.ndarray]
            Minimum and maximum corner, each shape (3,)

        Raises:
        -------
        ValueError
            If the model has no node with finite coordinates
        """
        pts = np.array([n.xyz for n in self.nodes.values() if n.is_finite], dtype=float)
        if pts.size == 0:
            raise ValueError("Model has no nodes with finite coordinates")
        return pts.min(axis=0), pts.max(axis=0)

    @property
    def is_empty(self) -> bool:
        return not (self.nodes or self.members or self.supports)
