# app/state - Session state management
from .session import (
    DisplayOptions,
    get_model,
    get_model_key,
    set_model,
    clear_model,
    get_display,
    update_display,
)

__all__ = [
    'DisplayOptions',
    'get_model',
    'get_model_key',
    'set_model',
    'clear_model',
    'get_display',
    'update_display',
]
