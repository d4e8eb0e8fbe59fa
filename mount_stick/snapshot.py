# mount_stick/snapshot.py
"""
Static snapshot of the 3D scene with matplotlib.

Draws the same cylinders and support cubes as the interactive scene into a
PNG, for reports and for environments without a browser.
"""

import logging
import math
import os
from typing import Optional

import matplotlib.pyplot as plt
import numpy as np
from mpl_toolkits.mplot3d.art3d import Poly3DCollection

from .geometry import box_mesh, cylinder_mesh, member_pose
from .model import StickModel
from .scene import SceneSettings

logger = logging.getLogger(__name__)


def _view_angles(settings: SceneSettings, center: np.ndarray):
    """Elevation and azimuth (degrees) looking from the camera position."""
    d = np.asarray(settings.camera_position, dtype=float) - center
    if not np.any(d):
        d = np.ones(3)
    elev = math.degrees(math.atan2(d[2], math.hypot(d[0], d[1])))
    azim = math.degrees(math.atan2(d[1], d[0]))
    return elev, azim


def save_snapshot(
    model: StickModel,
    outpath: str,
    settings: Optional[SceneSettings] = None,
    dpi: int = 150,
    title: Optional[str] = None,
) -> str:
    """
    Render the model to a PNG file.

    Parameters:
    -----------
    model : StickModel
    outpath : str
        Output image path
    settings : SceneSettings, optional
        Colours, sizes and camera direction
    dpi : int
        Output resolution
    title : str, optional

    Returns:
    --------
    str
        The path written
    """
    settings = settings or SceneSettings()
    # Fewer segments keep the static image light; it is not interactive
    segments = min(settings.member_segments, 16)

    fig = plt.figure(figsize=(8, 8), facecolor=settings.background)
    ax = fig.add_subplot(111, projection="3d")
    ax.set_facecolor(settings.background)

    triangles = []
    colors = []
    for member in model.members:
        ends = model.resolve_member(member)
        if ends is None:
            continue
        start, end = ends
        try:
            member_pose(start.xyz, end.xyz)
        except ValueError:
            continue
        verts, faces = cylinder_mesh(start.xyz, end.xyz, settings.member_radius, segments)
        triangles.extend(verts[faces])
        colors.extend([settings.member_color] * len(faces))

    for support in model.supports:
        node = model.resolve_support(support)
        if node is None:
            continue
        verts, faces = box_mesh(node.xyz, settings.support_size)
        triangles.extend(verts[faces])
        colors.extend([settings.support_color] * len(faces))

    center = np.zeros(3)
    if triangles:
        ax.add_collection3d(Poly3DCollection(triangles, facecolors=colors, edgecolors="none", shade=True))
        pts = np.concatenate(triangles)
        lo, hi = pts.min(axis=0), pts.max(axis=0)
        center = (lo + hi) / 2.0
        half = max(float((hi - lo).max()) / 2.0, 1.0)
        ax.set_xlim(center[0] - half, center[0] + half)
        ax.set_ylim(center[1] - half, center[1] + half)
        ax.set_zlim(center[2] - half, center[2] + half)
    else:
        ax.text2D(0.5, 0.5, "No renderable members", transform=ax.transAxes,
                  ha="center", color="white")

    elev, azim = _view_angles(settings, center)
    ax.view_init(elev=elev, azim=azim)
    if not settings.show_axes:
        ax.set_axis_off()
    if title:
        ax.set_title(title, color="white")

    os.makedirs(os.path.dirname(outpath) or ".", exist_ok=True)
    fig.savefig(outpath, dpi=dpi, facecolor=settings.background, bbox_inches="tight")
    plt.close(fig)
    logger.info("Snapshot saved to: %s", outpath)
    return outpath
