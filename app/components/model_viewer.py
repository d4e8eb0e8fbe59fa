# app/components/model_viewer.py
"""
3D model viewer component using Plotly.
"""

import plotly.graph_objects as go
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from mount_stick import SceneSettings, StickModel, build_scene


def scene_settings_from_display(display, height: int = 700) -> SceneSettings:
    """
    Build scene settings from the sidebar display options.
    
    Parameters:
    -----------
    display : DisplayOptions
        Current display options from session state
    height : int
        Figure height in pixels
    """
    return SceneSettings(
        member_radius=display.member_radius,
        member_color=display.member_color,
        support_size=display.support_size,
        support_color=display.support_color,
        show_nodes=display.show_nodes,
        show_axes=display.show_axes,
        height=height,
    )


def render_3d_model(model: StickModel, settings: SceneSettings) -> go.Figure:
    """
    Create the 3D scene for the viewer.
    
    Parameters:
    -----------
    model : StickModel
        Loaded model
    settings : SceneSettings
        Camera, lights, colours and sizes
    
    Returns:
    --------
    go.Figure
        Plotly figure
    """
    fig = build_scene(model, settings=settings)
    # Keep the camera where the user left it across Streamlit reruns
    fig.update_layout(uirevision=model.source or "model")
    return fig
