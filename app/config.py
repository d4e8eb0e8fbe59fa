# app/config.py
"""
Application configuration and defaults.
"""

from dataclasses import dataclass
from typing import List, Tuple


@dataclass
class AppConfig:
    """Global application configuration."""
    
    # App metadata
    app_name: str = "MountStick"
    app_subtitle: str = "3D Stick Model Viewer"
    
    # Where the workbook comes from when nothing is uploaded
    default_source: str = "Sample.xlsx"
    fetch_timeout: float = 30.0
    
    # Default sheet names
    members_sheet: str = "A"
    nodes_sheet: str = "B"
    supports_sheet: str = "C"
    
    # Viewer
    viewer_height: int = 700
    
    # Display ranges and defaults
    radius_range: Tuple[float, float] = (0.05, 5.0)
    default_radius: float = 0.5
    support_size_range: Tuple[float, float] = (0.1, 10.0)
    default_support_size: float = 2.0
    default_member_color: str = "yellow"
    default_support_color: str = "red"
    
    # Available options
    member_colors: List[str] = None
    support_colors: List[str] = None
    
    def __post_init__(self):
        if self.member_colors is None:
            self.member_colors = ['yellow', 'orange', 'white', 'lightblue', 'lime']
        if self.support_colors is None:
            self.support_colors = ['red', 'magenta', 'cyan', 'white']


# Global config instance
CONFIG = AppConfig()
