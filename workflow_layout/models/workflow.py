"""Workflow input models consumed by the layout engine.

The layout engine never owns the workflow. It reads two ordered sequences
from whatever object it is handed:

    states_of()       -> state descriptors (id, label, optional width/height)
    transitions_of()  -> transition descriptors (source, target, optional label)

Descriptors may arrive as the pydantic models below, as plain mappings, or
as arbitrary objects with matching attributes. ``coerce`` normalizes all
three so the engine only ever sees validated models.

Upstream Integration:
    - NetworkX: ``Workflow.from_networkx_graph`` reads node/edge attributes
      (label, width, height) from a DiGraph.
"""

import logging
from collections.abc import Mapping
from typing import Any, Iterable, List, Optional, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

logger = logging.getLogger(__name__)


class StateDescriptor(BaseModel):
    """A workflow state as declared by the workflow model.

    Attributes:
        id: Unique state identifier
        label: Display text (defaults to the id)
        width: Declared width, or None for the engine default
        height: Declared height, or None for the engine default
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    id: str = Field(..., description="Unique state identifier")
    label: Optional[str] = Field(default=None, description="Display text")
    width: Optional[float] = Field(default=None, gt=0, allow_inf_nan=False, description="Declared width")
    height: Optional[float] = Field(default=None, gt=0, allow_inf_nan=False, description="Declared height")

    @model_validator(mode="after")
    def default_label_to_id(self) -> "StateDescriptor":
        if self.label is None:
            object.__setattr__(self, "label", self.id)
        return self

    @classmethod
    def coerce(cls, value: Any) -> "StateDescriptor":
        """Build a descriptor from a model, mapping, or attribute object."""
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls.model_validate(dict(value))
        return cls.model_validate(value, from_attributes=True)


class TransitionDescriptor(BaseModel):
    """A directed transition between two states.

    Attributes:
        source: Source state id
        target: Target state id
        label: Display text (empty string when not declared)
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    source: str = Field(..., description="Source state id")
    target: str = Field(..., description="Target state id")
    label: str = Field(default="", description="Display text")

    @field_validator("label", mode="before")
    @classmethod
    def empty_label_when_missing(cls, v: Any) -> Any:
        return "" if v is None else v

    @classmethod
    def coerce(cls, value: Any) -> "TransitionDescriptor":
        """Build a descriptor from a model, mapping, or attribute object."""
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls.model_validate(dict(value))
        return cls.model_validate(value, from_attributes=True)


@runtime_checkable
class WorkflowModel(Protocol):
    """Anything exposing an ordered state sequence and an ordered transition sequence."""

    def states_of(self) -> Iterable[Any]:
        ...

    def transitions_of(self) -> Iterable[Any]:
        ...


class Workflow(BaseModel):
    """Concrete, immutable workflow model.

    Builder helpers return new instances, so a workflow can be shared
    between layouts without one caller's edits leaking into another's.

    Example:
        workflow = (
            Workflow()
            .with_states(["first", "second"])
            .and_transitions([{"source": "state_id1", "target": "state_id2"}])
        )
    """

    model_config = ConfigDict(frozen=True)

    states: List[StateDescriptor] = Field(default_factory=list)
    transitions: List[TransitionDescriptor] = Field(default_factory=list)

    def states_of(self) -> List[StateDescriptor]:
        return list(self.states)

    def transitions_of(self) -> List[TransitionDescriptor]:
        return list(self.transitions)

    def with_states(self, states: Iterable[Any]) -> "Workflow":
        """Return a copy with the given states.

        Plain strings are taken as labels and get ids ``state_id<N>``
        (1-based, by position). Anything else is coerced as a descriptor.
        """
        descriptors = []
        for index, state in enumerate(states, start=1):
            if isinstance(state, str):
                descriptors.append(StateDescriptor(id=f"state_id{index}", label=state))
            else:
                descriptors.append(StateDescriptor.coerce(state))
        return self.model_copy(update={"states": descriptors})

    def and_transitions(self, transitions: Iterable[Any]) -> "Workflow":
        """Return a copy with the given transitions."""
        descriptors = [TransitionDescriptor.coerce(t) for t in transitions]
        return self.model_copy(update={"transitions": descriptors})

    @classmethod
    def from_networkx_graph(cls, graph) -> "Workflow":
        """Build a workflow from a NetworkX directed graph.

        Node ids become state ids (as strings). The node attributes
        ``label``, ``width`` and ``height`` are used when present; the edge
        attribute ``label`` becomes the transition label.

        Args:
            graph: NetworkX DiGraph (or MultiDiGraph)

        Returns:
            Workflow instance preserving node and edge insertion order
        """
        if not graph.is_directed():
            raise ValueError("Workflow graphs must be directed")

        states = []
        for node_id, attrs in graph.nodes(data=True):
            states.append(
                StateDescriptor(
                    id=str(node_id),
                    label=attrs.get("label"),
                    width=attrs.get("width"),
                    height=attrs.get("height"),
                )
            )

        transitions = []
        for source, target, attrs in graph.edges(data=True):
            transitions.append(
                TransitionDescriptor(
                    source=str(source),
                    target=str(target),
                    label=attrs.get("label"),
                )
            )

        logger.debug(
            f"Built workflow from graph: {len(states)} states, {len(transitions)} transitions"
        )
        return cls(states=states, transitions=transitions)


__all__ = [
    "StateDescriptor",
    "TransitionDescriptor",
    "WorkflowModel",
    "Workflow",
]
