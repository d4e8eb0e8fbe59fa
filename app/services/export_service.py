# app/services/export_service.py
"""
Export service: handles file exports (CSV, JSON, HTML).
"""

from typing import Optional
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from mount_stick import SceneSettings, StickModel, build_scene
from mount_stick.export import member_schedule_csv, model_to_json


class ExportService:
    """Service for exporting model data to various formats."""
    
    @staticmethod
    def generate_schedule_csv(model: StickModel) -> str:
        """CSV member schedule, shortest member first."""
        return member_schedule_csv(model)
    
    @staticmethod
    def generate_model_json(model: StickModel) -> str:
        """JSON model data for interchange."""
        return model_to_json(model)
    
    @staticmethod
    def generate_scene_html(model: StickModel, settings: Optional[SceneSettings] = None) -> str:
        """Standalone HTML page with the interactive 3D scene."""
        fig = build_scene(model, settings=settings, title=model.source or None)
        return fig.to_html(include_plotlyjs="cdn", full_html=True)
    
    @staticmethod
    def export_basename(model: StickModel) -> str:
        """File name stem derived from the model source."""
        stem = Path(model.source).stem if model.source else ""
        if not stem or stem.startswith("<"):
            return "stick_model"
        return stem
