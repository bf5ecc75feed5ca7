"""Base layout engine protocol.

Defines the interface that all layout engines must implement, and the
boundary check applied to every workflow model handed to one.
"""

from abc import ABC, abstractmethod
from typing import Any

from workflow_layout.layout.errors import InvalidWorkflowModelError
from workflow_layout.models.geometry import GeometrySnapshot
from workflow_layout.models.orientation import Orientation
from workflow_layout.models.workflow import WorkflowModel


def ensure_workflow_model(model: Any) -> WorkflowModel:
    """Check that ``model`` exposes states_of() and transitions_of().

    Raises:
        InvalidWorkflowModelError: If either accessor is missing
    """
    if not isinstance(model, WorkflowModel):
        raise InvalidWorkflowModelError(model)
    return model


class LayoutEngine(ABC):
    """Abstract base class for layout engines.

    Layout engines convert workflow topology into a geometry snapshot
    with state centers, transition paths and canvas size. Engines are
    synchronous and side-effect free.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Engine name (e.g., 'linear')."""
        ...

    @property
    @abstractmethod
    def supports_orthogonal_routing(self) -> bool:
        """Whether engine routes transitions with axis-aligned segments only."""
        ...

    @abstractmethod
    def compute(
        self,
        workflow: WorkflowModel,
        orientation: Orientation = Orientation.HORIZONTAL,
    ) -> GeometrySnapshot:
        """Compute a full geometry snapshot for a workflow.

        Args:
            workflow: Model exposing states_of() and transitions_of()
            orientation: Primary layout axis

        Returns:
            GeometrySnapshot with states, transitions and size
        """
        ...
