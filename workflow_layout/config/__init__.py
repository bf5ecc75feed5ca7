"""Configuration for the layout engine."""

from .settings import (
    CANVAS_MARGIN,
    DEFAULT_STATE_HEIGHT,
    DEFAULT_STATE_WIDTH,
    ROUTING_CHANNEL,
    STATE_SPACING,
    get_all_settings,
    get_setting,
    set_setting,
)

__all__ = [
    "DEFAULT_STATE_WIDTH",
    "DEFAULT_STATE_HEIGHT",
    "STATE_SPACING",
    "CANVAS_MARGIN",
    "ROUTING_CHANNEL",
    "get_setting",
    "get_all_settings",
    "set_setting",
]
