"""Input and output models for the layout engine.

Workflow models describe what to lay out (states, transitions). Geometry
models describe the result (centers, paths, canvas size).
"""

from .geometry import (
    GeometrySnapshot,
    GeometryState,
    GeometryTransition,
    Point,
    Size,
    TransitionLabel,
)
from .orientation import Orientation
from .workflow import (
    StateDescriptor,
    TransitionDescriptor,
    Workflow,
    WorkflowModel,
)

__all__ = [
    # Workflow input
    "StateDescriptor",
    "TransitionDescriptor",
    "Workflow",
    "WorkflowModel",

    # Geometry output
    "Point",
    "GeometryState",
    "TransitionLabel",
    "GeometryTransition",
    "Size",
    "GeometrySnapshot",

    "Orientation",
]
