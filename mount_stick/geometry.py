# mount_stick/geometry.py
"""
MEMBER GEOMETRY: Poses and Triangle Meshes
==========================================

PURPOSE:
--------
Turn resolved nodes into drawable primitives:
- member_pose: midpoint, length and unit axis of a member
- cylinder_mesh: a closed cylinder spanning two points
- box_mesh: an axis-aligned cube centered on a point

Meshes are returned as (vertices, faces) arrays, which is what both Plotly's
Mesh3d and matplotlib's Poly3DCollection consume.

ORIENTATION:
------------
A cylinder is built directly in world coordinates. We take the member axis
u = (end - start) / L and complete it to an orthonormal frame (u, v, w).
The rings of the cylinder are circles in the (v, w) plane around start and
end, so the cylinder always spans its two nodes exactly, whatever the
member's direction. No Euler angles are involved.
"""

import numpy as np
from typing import Sequence, Tuple

ArrayLike3 = Sequence[float]


def member_pose(start: ArrayLike3, end: ArrayLike3) -> Tuple[np.ndarray, float, np.ndarray]:
    """
    Compute midpoint, length and unit axis of a member.

    Parameters:
    -----------
    start, end : sequence of 3 floats
        End point coordinates

    Returns:
    --------
    (midpoint, length, axis)
        midpoint : np.ndarray shape (3,)
        length   : float
        axis     : np.ndarray shape (3,), unit vector from start to end

    Raises:
    -------
    ValueError
        If the two points coincide (zero-length member)

    Example:
    --------
    >>> mid, L, u = member_pose((0, 0, 0), (0, 0, 10))
    >>> L
    10.0
    """
    p0 = np.asarray(start, dtype=float)
    p1 = np.asarray(end, dtype=float)
    d = p1 - p0
    L = float(np.linalg.norm(d))
    if L <= 0.0:
        raise ValueError(f"Zero-length member: both ends at {tuple(p0)}")
    return (p0 + p1) / 2.0, L, d / L


def _perpendicular_frame(axis: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Two unit vectors that, with axis, form a right-handed orthonormal frame."""
    # Cross with the coordinate axis least aligned with `axis` for stability
    helper = np.zeros(3)
    helper[np.argmin(np.abs(axis))] = 1.0
    v = np.cross(axis, helper)
    v /= np.linalg.norm(v)
    w = np.cross(axis, v)
    return v, w


def cylinder_mesh(
    start: ArrayLike3,
    end: ArrayLike3,
    radius: float = 0.5,
    segments: int = 32,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Closed cylinder whose axis runs from start to end.

    Vertex layout:
        [0, segments)             ring around start
        [segments, 2*segments)    ring around end
        2*segments                start cap center
        2*segments + 1            end cap center

    Parameters:
    -----------
    start, end : sequence of 3 floats
        Axis end points
    radius : float
        Cylinder radius (same units as the coordinates)
    segments : int
        Radial subdivisions (>= 3)

    Returns:
    --------
    (vertices, faces)
        vertices : np.ndarray shape (2*segments + 2, 3)
        faces    : np.ndarray shape (4*segments, 3), vertex indices

    Raises:
    -------
    ValueError
        For a zero-length axis, non-positive radius or fewer than 3 segments
    """
    if radius <= 0:
        raise ValueError(f"Cylinder radius must be positive, got {radius}")
    if segments < 3:
        raise ValueError(f"Cylinder needs at least 3 segments, got {segments}")

    _, _, axis = member_pose(start, end)
    p0 = np.asarray(start, dtype=float)
    p1 = np.asarray(end, dtype=float)
    v, w = _perpendicular_frame(axis)

    theta = np.linspace(0.0, 2.0 * np.pi, segments, endpoint=False)
    ring = radius * (np.outer(np.cos(theta), v) + np.outer(np.sin(theta), w))

    vertices = np.vstack([p0 + ring, p1 + ring, p0, p1])

    k = np.arange(segments)
    k_next = (k + 1) % segments
    bottom_c = np.full(segments, 2 * segments)
    top_c = np.full(segments, 2 * segments + 1)

    faces = np.vstack([
        np.column_stack([k, k_next, k_next + segments]),      # side, lower triangle
        np.column_stack([k, k_next + segments, k + segments]),  # side, upper triangle
        np.column_stack([bottom_c, k_next, k]),                # start cap
        np.column_stack([top_c, k + segments, k_next + segments]),  # end cap
    ]).astype(int)

    return vertices, faces


# Unit cube corners and their triangulation, shared by every box
_CUBE_CORNERS = np.array([
    [-1, -1, -1], [1, -1, -1], [1, 1, -1], [-1, 1, -1],
    [-1, -1, 1], [1, -1, 1], [1, 1, 1], [-1, 1, 1],
], dtype=float)

_CUBE_FACES = np.array([
    [0, 2, 1], [0, 3, 2],  # z-
    [4, 5, 6], [4, 6, 7],  # z+
    [0, 1, 5], [0, 5, 4],  # y-
    [3, 6, 2], [3, 7, 6],  # y+
    [0, 4, 7], [0, 7, 3],  # x-
    [1, 2, 6], [1, 6, 5],  # x+
], dtype=int)


def box_mesh(center: ArrayLike3, size: float = 2.0) -> Tuple[np.ndarray, np.ndarray]:
    """
    Axis-aligned cube of edge length `size` centered on `center`.

    Returns:
    --------
    (vertices, faces)
        vertices : np.ndarray shape (8, 3)
        faces    : np.ndarray shape (12, 3)
    """
    if size <= 0:
        raise ValueError(f"Box size must be positive, got {size}")
    c = np.asarray(center, dtype=float)
    return c + _CUBE_CORNERS * (size / 2.0), _CUBE_FACES.copy()
