"""Layout module for workflow geometry.

This module provides:
- Layout facade (from_workflow / set_workflow)
- Layout engine abstraction (LayoutEngine) and registry
- Linear engine with orthogonal connector routing
"""

from workflow_layout.layout.engines import ENGINES, LayoutEngine, LinearLayoutEngine, get_engine
from workflow_layout.layout.errors import (
    DanglingTransitionError,
    InvalidWorkflowModelError,
    LayoutError,
)
from workflow_layout.layout.layout import Layout

__all__ = [
    "Layout",
    "LayoutEngine",
    "LinearLayoutEngine",
    "ENGINES",
    "get_engine",
    "LayoutError",
    "DanglingTransitionError",
    "InvalidWorkflowModelError",
]
