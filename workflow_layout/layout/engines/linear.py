"""Linear layout engine.

Places states one after another along the primary axis, in workflow order,
on a single lane. Transitions are routed with axis-aligned connectors; any
connector that would cross another state detours through a channel beside
the lane.

Canvas geometry (top-left origin), shown for horizontal orientation:

    margin
    before channel      <- forward connectors that skip states
    state lane          <- all state centers share this lane's center line
    after channel       <- backward connectors and self loops
    margin
"""

import logging
from typing import Dict, Optional, Sequence, Tuple

from workflow_layout.config.settings import get_setting
from workflow_layout.layout.engines.base import LayoutEngine, ensure_workflow_model
from workflow_layout.layout.errors import DanglingTransitionError
from workflow_layout.layout.routing import Channels, StateBox, path_midpoint, route, to_point
from workflow_layout.models.geometry import (
    GeometrySnapshot,
    GeometryState,
    GeometryTransition,
    Size,
    TransitionLabel,
)
from workflow_layout.models.orientation import Orientation
from workflow_layout.models.workflow import StateDescriptor, TransitionDescriptor, WorkflowModel

logger = logging.getLogger(__name__)


class LinearLayoutEngine(LayoutEngine):
    """Single-lane layout engine with orthogonal connector routing.

    Spacing values default to the layout settings; pass keyword overrides
    to vary them per engine.
    """

    def __init__(
        self,
        default_state_width: Optional[float] = None,
        default_state_height: Optional[float] = None,
        state_spacing: Optional[float] = None,
        canvas_margin: Optional[float] = None,
        routing_channel: Optional[float] = None,
    ):
        """Initialize linear layout engine.

        Args:
            default_state_width: Width for states that declare none
            default_state_height: Height for states that declare none
            state_spacing: Gap between neighbouring state boxes
            canvas_margin: Empty border around the drawing
            routing_channel: Depth of each detour channel beside the lane
        """
        self._default_width = self._pick(default_state_width, 'default_state_width')
        self._default_height = self._pick(default_state_height, 'default_state_height')
        self._spacing = self._pick(state_spacing, 'state_spacing')
        self._margin = self._pick(canvas_margin, 'canvas_margin')
        self._channel = self._pick(routing_channel, 'routing_channel')

        if self._default_width <= 0 or self._default_height <= 0:
            raise ValueError("Default state width and height must be positive")
        if min(self._spacing, self._margin, self._channel) < 0:
            raise ValueError("Spacing, margin and routing channel must not be negative")

    @staticmethod
    def _pick(value: Optional[float], setting: str) -> float:
        return float(get_setting(setting) if value is None else value)

    @property
    def name(self) -> str:
        return "linear"

    @property
    def supports_orthogonal_routing(self) -> bool:
        return True

    def compute(
        self,
        workflow: WorkflowModel,
        orientation: Orientation = Orientation.HORIZONTAL,
    ) -> GeometrySnapshot:
        """Compute layout for a workflow.

        Args:
            workflow: Model exposing states_of() and transitions_of()
            orientation: Primary layout axis (normalized, bad values mean horizontal)

        Returns:
            GeometrySnapshot with states, transitions and size

        Raises:
            InvalidWorkflowModelError: If workflow lacks the two accessors
            DanglingTransitionError: If a transition names a missing state
        """
        orientation = Orientation.normalize(orientation)
        workflow = ensure_workflow_model(workflow)

        states = [StateDescriptor.coerce(s) for s in workflow.states_of()]
        transitions = [TransitionDescriptor.coerce(t) for t in workflow.transitions_of()]

        boxes, lane_end, primary_end = self._place_states(states, orientation)
        channels = Channels(
            before=self._margin + self._channel / 2,
            after=lane_end + self._channel / 2,
        )

        geometry_states = tuple(
            GeometryState(
                id=state.id,
                label=state.label,
                center=to_point(boxes[state.id].primary, boxes[state.id].secondary, orientation),
            )
            for state in states
        )

        geometry_transitions = tuple(
            self._route_transition(index, transition, boxes, channels, orientation)
            for index, transition in enumerate(transitions)
        )

        size = self._canvas_size(bool(states), primary_end, lane_end, orientation)

        logger.debug(
            f"Linear layout ({orientation.value}): {len(geometry_states)} states, "
            f"{len(geometry_transitions)} transitions, size {size.width}x{size.height}"
        )

        return GeometrySnapshot(
            orientation=orientation,
            states=geometry_states,
            transitions=geometry_transitions,
            size=size,
        )

    def _extents(self, state: StateDescriptor, orientation: Orientation) -> Tuple[float, float]:
        """Return (primary, secondary) extents for a state."""
        width = state.width if state.width is not None else self._default_width
        height = state.height if state.height is not None else self._default_height
        if orientation.is_horizontal:
            return width, height
        return height, width

    def _place_states(
        self, states: Sequence[StateDescriptor], orientation: Orientation
    ) -> Tuple[Dict[str, StateBox], float, float]:
        """Place state boxes along the lane.

        Returns:
            (boxes keyed by state id, secondary end of the lane,
             primary end of the last box)
        """
        extents = [self._extents(state, orientation) for state in states]
        lane_start = self._margin + self._channel
        lane_thickness = max((secondary for _, secondary in extents), default=0.0)
        lane_center = lane_start + lane_thickness / 2

        boxes: Dict[str, StateBox] = {}
        cursor = self._margin
        primary_end = self._margin
        for index, (state, (primary, secondary)) in enumerate(zip(states, extents)):
            boxes[state.id] = StateBox(
                index=index,
                primary=cursor + primary / 2,
                secondary=lane_center,
                primary_extent=primary,
                secondary_extent=secondary,
            )
            primary_end = cursor + primary
            cursor = primary_end + self._spacing

        return boxes, lane_start + lane_thickness, primary_end

    def _route_transition(
        self,
        index: int,
        transition: TransitionDescriptor,
        boxes: Dict[str, StateBox],
        channels: Channels,
        orientation: Orientation,
    ) -> GeometryTransition:
        transition_id = f"transition_id{index + 1}"

        source = boxes.get(transition.source)
        if source is None:
            raise DanglingTransitionError(transition_id, "source", transition.source)
        target = boxes.get(transition.target)
        if target is None:
            raise DanglingTransitionError(transition_id, "target", transition.target)

        path = route(source, target, channels, orientation)
        return GeometryTransition(
            id=transition_id,
            path=path,
            label=TransitionLabel(point=path_midpoint(path), text=transition.label),
        )

    def _canvas_size(
        self,
        has_states: bool,
        primary_end: float,
        lane_end: float,
        orientation: Orientation,
    ) -> Size:
        if not has_states:
            return Size(width=0.0, height=0.0)

        primary = primary_end + self._margin
        secondary = lane_end + self._channel + self._margin
        if orientation.is_horizontal:
            return Size(width=primary, height=secondary)
        return Size(width=secondary, height=primary)
