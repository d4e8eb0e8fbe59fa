# mount_stick/scene.py
"""
3D SCENE: Interactive Stick Model Viewer
========================================

PURPOSE:
--------
Declare the 3D scene for a StickModel as a Plotly figure:
- one solid cylinder per member, spanning its two nodes
- one solid cube per support, centered on its node
- perspective camera, ambient + point lighting
- orbit controls (drag to rotate about the model, scroll to zoom)

Members or supports that reference a node the sheet does not define are
skipped silently; the figure simply shows what can be drawn.

WHY PLOTLY?
-----------
- Retained-mode: we describe traces, the browser does the drawing
- Works in Streamlit, Jupyter and as standalone HTML
- Mesh3d carries its own lighting model, so members read as solids
"""

import logging
import math
import os
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
import plotly.graph_objects as go

from .geometry import box_mesh, cylinder_mesh, member_pose
from .model import StickModel

logger = logging.getLogger(__name__)

Vec3 = Tuple[float, float, float]


@dataclass
class SceneSettings:
    """
    Look of the scene. Defaults reproduce the classic viewer: yellow
    sticks, red support cubes on black, camera up the (1, 1, 1) diagonal.
    """
    # Camera
    camera_position: Vec3 = (100.0, 100.0, 100.0)
    fov: float = 60.0  # degrees

    # Lights
    ambient_intensity: float = 0.5
    point_light_position: Vec3 = (10.0, 10.0, 10.0)
    diffuse: float = 0.8
    specular: float = 0.2

    # Members
    member_radius: float = 0.5
    member_segments: int = 32
    member_color: str = "yellow"

    # Supports
    support_size: float = 2.0
    support_color: str = "red"

    # Extras
    show_nodes: bool = False
    node_color: str = "white"
    show_axes: bool = False
    background: str = "black"
    height: Optional[int] = None


def camera_eye(settings: SceneSettings, center: np.ndarray) -> dict:
    """
    Plotly camera eye for the configured camera position.

    The viewing direction is the camera position relative to the scene
    center. The distance follows the field of view: a narrower lens sits
    further back so the model fills a similar share of the frame.
    """
    direction = np.asarray(settings.camera_position, dtype=float) - center
    norm = np.linalg.norm(direction)
    if norm == 0.0:
        direction, norm = np.ones(3), math.sqrt(3.0)
    fov = min(max(settings.fov, 1.0), 179.0)
    distance = 1.25 / math.tan(math.radians(fov) / 2.0)
    eye = direction / norm * distance
    return dict(x=float(eye[0]), y=float(eye[1]), z=float(eye[2]))


def _mesh_trace(vertices: np.ndarray, faces: np.ndarray, settings: SceneSettings, **kwargs) -> go.Mesh3d:
    return go.Mesh3d(
        x=vertices[:, 0], y=vertices[:, 1], z=vertices[:, 2],
        i=faces[:, 0], j=faces[:, 1], k=faces[:, 2],
        flatshading=False,
        lighting=dict(
            ambient=settings.ambient_intensity,
            diffuse=settings.diffuse,
            specular=settings.specular,
        ),
        lightposition=dict(
            x=settings.point_light_position[0],
            y=settings.point_light_position[1],
            z=settings.point_light_position[2],
        ),
        hoverinfo="text",
        **kwargs,
    )


def build_scene(
    model: StickModel,
    settings: Optional[SceneSettings] = None,
    title: Optional[str] = None,
) -> go.Figure:
    """
    Create the Plotly figure for a stick model.

    Parameters:
    -----------
    model : StickModel
        Loaded model
    settings : SceneSettings, optional
        Camera, lights, colours and sizes (defaults if None)
    title : str, optional
        Figure title

    Returns:
    --------
    go.Figure
        One Mesh3d trace per drawn member (legend group "members"), one per
        drawn support (legend group "supports"), plus an optional node
        marker trace
    """
    settings = settings or SceneSettings()
    fig = go.Figure()

    # =========================================================================
    # MEMBERS
    # =========================================================================
    n_members = 0
    for index, member in enumerate(model.members):
        ends = model.resolve_member(member)
        if ends is None:
            continue
        start, end = ends
        try:
            _, length, _ = member_pose(start.xyz, end.xyz)
        except ValueError:
            logger.warning("Skipping zero-length member %d (%s-%s)", index, member.start_id, member.end_id)
            continue

        vertices, faces = cylinder_mesh(
            start.xyz, end.xyz,
            radius=settings.member_radius,
            segments=settings.member_segments,
        )
        fig.add_trace(_mesh_trace(
            vertices, faces, settings,
            color=settings.member_color,
            name="Members",
            legendgroup="members",
            showlegend=n_members == 0,
            hovertext=f"Member {index}<br>{start.id} → {end.id}<br>L: {length:.3f}",
        ))
        n_members += 1

    # =========================================================================
    # SUPPORTS
    # =========================================================================
    n_supports = 0
    for index, support in enumerate(model.supports):
        node = model.resolve_support(support)
        if node is None:
            continue
        vertices, faces = box_mesh(node.xyz, size=settings.support_size)
        fig.add_trace(_mesh_trace(
            vertices, faces, settings,
            color=settings.support_color,
            name="Supports",
            legendgroup="supports",
            showlegend=n_supports == 0,
            hovertext=f"Support {index}<br>Node {node.id}<br>Type: {support.type or 'n/a'}",
        ))
        n_supports += 1

    # =========================================================================
    # NODES (optional)
    # =========================================================================
    drawable = [n for n in model.nodes.values() if n.is_finite]
    if settings.show_nodes and drawable:
        fig.add_trace(go.Scatter3d(
            x=[n.x for n in drawable],
            y=[n.y for n in drawable],
            z=[n.z for n in drawable],
            mode="markers",
            marker=dict(size=3, color=settings.node_color),
            name="Nodes",
            text=[f"Node {n.id}<br>({n.x:.2f}, {n.y:.2f}, {n.z:.2f})" for n in drawable],
            hoverinfo="text",
        ))

    logger.debug("Scene has %d members and %d supports", n_members, n_supports)

    # =========================================================================
    # LAYOUT
    # =========================================================================
    center = np.zeros(3)
    if drawable:
        lo, hi = model.bounds()
        center = (lo + hi) / 2.0

    axis = dict(
        visible=settings.show_axes,
        showbackground=False,
        color="gray",
        gridcolor="rgba(128,128,128,0.3)",
    )
    fig.update_layout(
        paper_bgcolor=settings.background,
        plot_bgcolor=settings.background,
        scene=dict(
            xaxis=dict(axis, title="X"),
            yaxis=dict(axis, title="Y"),
            zaxis=dict(axis, title="Z"),
            bgcolor=settings.background,
            aspectmode="data",
            dragmode="orbit",
            camera=dict(
                eye=camera_eye(settings, center),
                projection=dict(type="perspective"),
            ),
        ),
        showlegend=True,
        legend=dict(x=0.02, y=0.98, font=dict(color="white")),
        margin=dict(l=0, r=0, t=40 if title else 0, b=0),
    )
    if title:
        fig.update_layout(title=dict(text=title, font=dict(color="white")))
    if settings.height:
        fig.update_layout(height=settings.height)

    if n_members == 0 and n_supports == 0:
        fig.add_annotation(
            text="No renderable members",
            xref="paper", yref="paper", x=0.5, y=0.5,
            showarrow=False,
            font=dict(color="white", size=16),
        )

    return fig


def plot_model_3d(
    model: StickModel,
    settings: Optional[SceneSettings] = None,
    title: Optional[str] = None,
    outpath: Optional[str] = None,
    show: bool = True,
) -> go.Figure:
    """
    Create and optionally save/display the 3D scene.

    Parameters:
    -----------
    model, settings, title:
        See build_scene()
    outpath : Optional[str]
        If provided, save as a standalone HTML file
    show : bool
        Whether to open the figure (default: True)

    Example:
    --------
    >>> fig = plot_model_3d(model, outpath="artifacts/model.html", show=False)
    """
    fig = build_scene(model, settings=settings, title=title)

    if outpath:
        os.makedirs(os.path.dirname(outpath) or ".", exist_ok=True)
        fig.write_html(outpath)
        logger.info("3D scene saved to: %s", outpath)

    if show:
        fig.show()

    return fig
