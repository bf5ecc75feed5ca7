"""Workflow layout engine.

Turns a workflow graph (states and directed transitions) into 2D geometry
for a view layer: state centers, transition paths with label anchors, and
the canvas size.
"""

from workflow_layout.layout import (
    DanglingTransitionError,
    InvalidWorkflowModelError,
    Layout,
    LayoutEngine,
    LayoutError,
    LinearLayoutEngine,
    get_engine,
)
from workflow_layout.models import (
    GeometrySnapshot,
    GeometryState,
    GeometryTransition,
    Orientation,
    Point,
    Size,
    StateDescriptor,
    TransitionDescriptor,
    TransitionLabel,
    Workflow,
    WorkflowModel,
)

__version__ = "0.1.0"

__all__ = [
    "Layout",
    "LayoutEngine",
    "LinearLayoutEngine",
    "get_engine",
    "LayoutError",
    "DanglingTransitionError",
    "InvalidWorkflowModelError",
    "Orientation",
    "Workflow",
    "WorkflowModel",
    "StateDescriptor",
    "TransitionDescriptor",
    "Point",
    "GeometryState",
    "TransitionLabel",
    "GeometryTransition",
    "Size",
    "GeometrySnapshot",
]
