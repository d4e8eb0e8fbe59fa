# app/services/model_service.py
"""
Model service: loads a workbook into a StickModel for the viewer.
"""

import hashlib
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from mount_stick import SheetLayout, StickModel, load_model, model_summary
from mount_stick.loader import WorkbookError, describe_source

logger = logging.getLogger("mount_stick.app")


class ModelService:
    """Service for loading and summarising stick models."""
    
    @staticmethod
    def source_key(source: Any, layout: SheetLayout) -> str:
        """
        Identify a (source, layout) pair so the app only reloads on change.
        
        Uploads are keyed by content hash, paths and URLs by their text.
        """
        if isinstance(source, (bytes, bytearray)):
            ident = hashlib.md5(source).hexdigest()
        elif hasattr(source, "getvalue"):
            ident = hashlib.md5(source.getvalue()).hexdigest()
        else:
            ident = str(source)
        return f"{ident}|{layout.members}|{layout.nodes}|{layout.supports}"
    
    @staticmethod
    def load(
        source: Any,
        layout: SheetLayout,
        timeout: float = 30.0,
    ) -> Tuple[bool, Optional[StickModel], str]:
        """
        Load a model from a path, URL or upload.
        
        Returns:
            success: bool
            model: StickModel (None on failure)
            error: str (empty if success)
        """
        if hasattr(source, "getvalue"):
            # Streamlit uploads: read without consuming the buffer
            data, label = source.getvalue(), describe_source(source)
        else:
            data, label = source, describe_source(source)
        
        try:
            model = load_model(data, layout=layout, timeout=timeout)
        except WorkbookError as e:
            logger.error("Error loading workbook %s: %s", label, e)
            return False, None, str(e)
        
        model.source = label
        return True, model, ""
    
    @staticmethod
    def summarize(model: StickModel) -> Dict[str, Any]:
        """Summary metrics for the panel."""
        return model_summary(model)
