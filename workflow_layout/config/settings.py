"""
Sizing and Spacing Settings for the Layout Engine

This module holds the named constants the layout engine falls back on when
a workflow does not declare them. Every value can be overridden through an
environment variable, read once at import time.

Usage:
    from workflow_layout.config.settings import get_setting

    width = get_setting('default_state_width')

Environment Variables:
    WORKFLOW_LAYOUT_STATE_WIDTH=<float>      - Default state width
    WORKFLOW_LAYOUT_STATE_HEIGHT=<float>     - Default state height
    WORKFLOW_LAYOUT_STATE_SPACING=<float>    - Gap between neighbouring states
    WORKFLOW_LAYOUT_MARGIN=<float>           - Canvas margin around the drawing
    WORKFLOW_LAYOUT_ROUTING_CHANNEL=<float>  - Depth of the detour channels
"""

import os
from typing import Dict


def _env_float(name: str, default: float) -> float:
    """Read a float from the environment, falling back to ``default``."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(
            f"Environment variable {name} must be a number, got '{raw}'"
        )


DEFAULT_STATE_WIDTH: float = _env_float('WORKFLOW_LAYOUT_STATE_WIDTH', 120.0)
DEFAULT_STATE_HEIGHT: float = _env_float('WORKFLOW_LAYOUT_STATE_HEIGHT', 60.0)
STATE_SPACING: float = _env_float('WORKFLOW_LAYOUT_STATE_SPACING', 80.0)
CANVAS_MARGIN: float = _env_float('WORKFLOW_LAYOUT_MARGIN', 20.0)
ROUTING_CHANNEL: float = _env_float('WORKFLOW_LAYOUT_ROUTING_CHANNEL', 30.0)

# Settings with environment variable overrides
LAYOUT_SETTINGS: Dict[str, float] = {
    'default_state_width': DEFAULT_STATE_WIDTH,
    'default_state_height': DEFAULT_STATE_HEIGHT,
    'state_spacing': STATE_SPACING,
    'canvas_margin': CANVAS_MARGIN,
    'routing_channel': ROUTING_CHANNEL,
}


def get_setting(name: str) -> float:
    """
    Get the current value of a layout setting.

    Args:
        name: Setting name (e.g., 'default_state_width')

    Returns:
        Setting value

    Raises:
        KeyError: If setting name is not recognized

    Example:
        >>> get_setting('default_state_width')
        120.0
    """
    if name not in LAYOUT_SETTINGS:
        available = ', '.join(LAYOUT_SETTINGS.keys())
        raise KeyError(
            f"Unknown layout setting: '{name}'. "
            f"Available settings: {available}"
        )

    return LAYOUT_SETTINGS[name]


def get_all_settings() -> Dict[str, float]:
    """
    Get all layout settings and their current values.

    Returns:
        Dictionary of setting names to values
    """
    return LAYOUT_SETTINGS.copy()


def set_setting(name: str, value: float) -> None:
    """
    Programmatically set a layout setting (for testing only).

    Engines created afterwards pick up the new value; existing engines keep
    the values they were built with.

    Args:
        name: Setting name
        value: New value

    Warning:
        This is for testing only. In production, use environment variables.
    """
    if name not in LAYOUT_SETTINGS:
        available = ', '.join(LAYOUT_SETTINGS.keys())
        raise KeyError(
            f"Unknown layout setting: '{name}'. "
            f"Available settings: {available}"
        )

    LAYOUT_SETTINGS[name] = float(value)
