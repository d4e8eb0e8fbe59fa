# app/components - Reusable UI components
from .model_viewer import render_3d_model, scene_settings_from_display
from .metrics_panel import render_metrics_panel, render_skipped_info

__all__ = [
    'render_3d_model',
    'scene_settings_from_display',
    'render_metrics_panel',
    'render_skipped_info',
]
