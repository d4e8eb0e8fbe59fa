# app/state/session.py
"""
Session state management for Streamlit.

Provides typed accessors for session state to avoid
scattered st.session_state['key'] calls throughout the app.
"""

import streamlit as st
from typing import Optional
from dataclasses import dataclass
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from mount_stick import StickModel

from config import CONFIG


@dataclass
class DisplayOptions:
    """User-chosen look of the 3D scene."""
    member_radius: float = CONFIG.default_radius
    member_color: str = CONFIG.default_member_color
    support_size: float = CONFIG.default_support_size
    support_color: str = CONFIG.default_support_color
    show_nodes: bool = False
    show_axes: bool = False

# ============================================================================
# Model State
# ============================================================================

def get_model() -> Optional[StickModel]:
    """Get the loaded model, if any."""
    return st.session_state.get('model', None)


def get_model_key() -> Optional[str]:
    """Key of the source the current model was loaded from."""
    return st.session_state.get('model_key', None)


def set_model(model: StickModel, key: str) -> None:
    """Store a freshly loaded model together with the key of its source."""
    st.session_state.model = model
    st.session_state.model_key = key


def clear_model() -> None:
    """Discard the loaded model (e.g. on reload)."""
    for name in ('model', 'model_key'):
        if name in st.session_state:
            del st.session_state[name]


# ============================================================================
# Display State
# ============================================================================

def get_display() -> DisplayOptions:
    """Get the current display options."""
    if 'display' not in st.session_state:
        st.session_state.display = DisplayOptions()
    return st.session_state.display


def update_display(**kwargs) -> DisplayOptions:
    """Update specific fields of the display options."""
    display = get_display()
    for key, value in kwargs.items():
        if hasattr(display, key):
            setattr(display, key, value)
    st.session_state.display = display
    return display
