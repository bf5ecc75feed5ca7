"""Layout facade over a layout engine.

A ``Layout`` owns one geometry snapshot at a time. The snapshot is computed
in full on construction and again on every ``set_workflow`` call, then
swapped in with a single assignment, so readers never observe a
half-updated layout.

Usage:
    from workflow_layout import Layout, Workflow

    workflow = Workflow().with_states(["first", "second"])
    layout = Layout.from_workflow(workflow, "vertical")

    layout.states        # [GeometryState(...), ...]
    layout.transitions   # [GeometryTransition(...), ...]
    layout.size          # Size(width=..., height=...)

    layout.set_workflow(updated_workflow)  # orientation stays vertical

Thread safety:
    None. Treat ``set_workflow`` as a single-writer operation if a layout
    is shared between threads.
"""

import logging
from typing import Any, Dict, List, Optional, Union

from workflow_layout.layout.engines import DEFAULT_ENGINE, LayoutEngine, get_engine
from workflow_layout.models.geometry import (
    GeometrySnapshot,
    GeometryState,
    GeometryTransition,
    Size,
)
from workflow_layout.models.orientation import Orientation
from workflow_layout.models.workflow import WorkflowModel

logger = logging.getLogger(__name__)


class Layout:
    """Geometry of a workflow: state centers, transition paths, canvas size.

    Example:
        layout = Layout.from_workflow(workflow)
        for state in layout.states:
            draw_box(state.center, state.label)
    """

    def __init__(
        self,
        workflow: WorkflowModel,
        orientation: Any = Orientation.HORIZONTAL,
        engine: Union[str, LayoutEngine, None] = None,
    ):
        """Compute the initial snapshot.

        Args:
            workflow: Model exposing states_of() and transitions_of()
            orientation: 'horizontal' or 'vertical'; anything else means horizontal
            engine: Engine instance or registered engine name (default 'linear')

        Raises:
            InvalidWorkflowModelError: If workflow lacks the two accessors
            DanglingTransitionError: If a transition names a missing state
        """
        self._orientation = Orientation.normalize(orientation)
        self._engine = self._resolve_engine(engine)
        self._snapshot = self._engine.compute(workflow, self._orientation)

    @classmethod
    def from_workflow(
        cls,
        workflow: WorkflowModel,
        orientation: Any = Orientation.HORIZONTAL,
        engine: Union[str, LayoutEngine, None] = None,
    ) -> "Layout":
        """Create a layout for ``workflow``. Orientation is fixed from here on."""
        return cls(workflow, orientation, engine)

    @staticmethod
    def _resolve_engine(engine: Union[str, LayoutEngine, None]) -> LayoutEngine:
        if isinstance(engine, LayoutEngine):
            logger.info(f"Using layout engine instance: {engine.name}")
            return engine
        name = engine or DEFAULT_ENGINE
        if name != DEFAULT_ENGINE:
            logger.info(f"Using layout engine: {name}")
        return get_engine(name)()

    def set_workflow(self, workflow: WorkflowModel) -> None:
        """Recompute the snapshot from ``workflow``, keeping the orientation.

        The previous snapshot is kept if computation fails.
        """
        self._snapshot = self._engine.compute(workflow, self._orientation)

    @property
    def orientation(self) -> Orientation:
        return self._orientation

    @property
    def engine(self) -> LayoutEngine:
        return self._engine

    @property
    def snapshot(self) -> GeometrySnapshot:
        """Current immutable geometry snapshot."""
        return self._snapshot

    @property
    def states(self) -> List[GeometryState]:
        return list(self._snapshot.states)

    @property
    def transitions(self) -> List[GeometryTransition]:
        return list(self._snapshot.transitions)

    @property
    def size(self) -> Size:
        return self._snapshot.size

    def to_dict(self) -> Dict[str, Any]:
        """Export the current snapshot as plain, JSON-serializable data."""
        return self._snapshot.to_dict()

    def __repr__(self) -> str:
        return (
            f"Layout(orientation={self._orientation.value!r}, "
            f"states={len(self._snapshot.states)}, "
            f"transitions={len(self._snapshot.transitions)})"
        )
