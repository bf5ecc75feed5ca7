"""Geometry snapshot produced by the layout engine.

This module provides the read-only shapes handed to a view layer:
- State centers (x, y coordinates)
- Transition paths (axis-aligned polylines with label anchors)
- Canvas size (top-left origin)

All models are frozen. A snapshot is computed in one pass and replaced
wholesale, never patched.
"""

import hashlib
import json
import logging
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .orientation import Orientation

logger = logging.getLogger(__name__)


class Point(BaseModel):
    """A point in 2D layout space.

    Attributes:
        x: Horizontal coordinate
        y: Vertical coordinate
    """

    model_config = ConfigDict(frozen=True)

    x: float = Field(..., description="Horizontal coordinate")
    y: float = Field(..., description="Vertical coordinate")


class GeometryState(BaseModel):
    """Computed placement of one workflow state."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="State id from the workflow")
    label: str = Field(..., description="Display text")
    center: Point = Field(..., description="Center of the state box")


class TransitionLabel(BaseModel):
    """Anchor and text for a transition label."""

    model_config = ConfigDict(frozen=True)

    point: Point = Field(..., description="Label anchor, at the path midpoint")
    text: str = Field(default="", description="Label text")


class GeometryTransition(BaseModel):
    """Computed connector for one workflow transition.

    The path runs from the source state's boundary to the target state's
    boundary: start point, bend points, end point.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Synthesized id (transition_id<N>)")
    path: List[Point] = Field(..., description="Ordered connector points")
    label: TransitionLabel = Field(..., description="Label anchor and text")


class Size(BaseModel):
    """Drawable canvas size, measured from a top-left origin at (0, 0).

    This is the canvas a view layer should allocate, not the tight bounding
    box of the state boxes: it always includes the margins and both routing
    channels beside the state lane, whether or not any connector uses them.
    Zero states give a 0 x 0 canvas.
    """

    model_config = ConfigDict(frozen=True)

    width: float = Field(default=0.0, ge=0, description="Canvas width")
    height: float = Field(default=0.0, ge=0, description="Canvas height")


class GeometrySnapshot(BaseModel):
    """Complete, immutable result of one layout computation.

    Attributes:
        orientation: Primary axis the states were laid out along
        states: One GeometryState per input state, in input order
        transitions: One GeometryTransition per input transition, in input order
        size: Canvas size enclosing states and routing channels
    """

    model_config = ConfigDict(frozen=True)

    orientation: Orientation = Field(default=Orientation.HORIZONTAL)
    states: Tuple[GeometryState, ...] = Field(default=())
    transitions: Tuple[GeometryTransition, ...] = Field(default=())
    size: Size = Field(default_factory=Size)

    def state(self, state_id: str) -> Optional[GeometryState]:
        """Look up a state by id."""
        for state in self.states:
            if state.id == state_id:
                return state
        return None

    def transition(self, transition_id: str) -> Optional[GeometryTransition]:
        """Look up a transition by its synthesized id."""
        for transition in self.transitions:
            if transition.id == transition_id:
                return transition
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Export to plain dicts/lists with deterministic key ordering.

        Returns:
            Dictionary with sorted top-level keys, JSON-serializable
        """
        data = self.model_dump(mode="json")
        return dict(sorted(data.items()))

    def compute_etag(self) -> str:
        """Compute SHA-256 etag from canonical content.

        Two snapshots computed from equal workflows produce the same etag.

        Returns:
            64-character hex string (SHA-256 hash)
        """
        canonical_json = json.dumps(self.to_dict(), sort_keys=True, separators=(",", ":"))
        return hashlib.sha256(canonical_json.encode()).hexdigest()

    def apply_to_networkx_graph(self, graph) -> None:
        """Apply state centers to a NetworkX graph as 'pos' attributes.

        Args:
            graph: NetworkX graph to update

        Note:
            Graph node ids are matched by their string form. Logs a warning
            for any state with no matching node.
        """
        nodes_by_id = {str(node_id): node_id for node_id in graph.nodes}
        for state in self.states:
            node_id = nodes_by_id.get(state.id)
            if node_id is None:
                logger.warning(f"Snapshot has position for {state.id} but node not in graph")
                continue

            graph.nodes[node_id]['pos'] = [state.center.x, state.center.y]


__all__ = [
    "Point",
    "GeometryState",
    "TransitionLabel",
    "GeometryTransition",
    "Size",
    "GeometrySnapshot",
]
