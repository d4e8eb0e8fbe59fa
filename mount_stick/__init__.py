# mount_stick - Spreadsheet-driven 3D stick model viewer
"""
MOUNT-STICK: 3D Structural Stick Models from Spreadsheets
=========================================================

This package provides:
- Loading of a three-sheet .xlsx workbook (members, nodes, supports)
- Mapping of sheet rows to typed Node / Member / Support records
- An interactive Plotly 3D scene (cylinders for members, cubes for supports)
- Static PNG snapshots and JSON / CSV exports

ARCHITECTURE:
-------------
    model.py           Node, Member, Support, StickModel
    mapping.py         Sheet rows -> records, SheetLayout
    loader.py          Fetch (path / URL / bytes) and decode the workbook
    geometry.py        Member poses, cylinder and box meshes
    scene.py           Plotly scene, SceneSettings
    snapshot.py        matplotlib PNG rendering
    summary.py         Counts, lengths, extents
    export.py          JSON, CSV schedule, workbook writer
    logging_config.py  Package logger setup
"""

from .model import Node, Member, Support, StickModel
from .mapping import SheetLayout, build_model
from .loader import (
    load_model,
    fetch_workbook,
    read_sheets,
    WorkbookError,
    WorkbookFetchError,
    WorkbookFormatError,
    SheetMissingError,
)
from .scene import SceneSettings, build_scene, plot_model_3d
from .summary import model_summary

__version__ = "0.1.0"

__all__ = [
    'Node', 'Member', 'Support', 'StickModel',
    'SheetLayout', 'build_model',
    'load_model', 'fetch_workbook', 'read_sheets',
    'WorkbookError', 'WorkbookFetchError', 'WorkbookFormatError', 'SheetMissingError',
    'SceneSettings', 'build_scene', 'plot_model_3d',
    'model_summary',
]
