"""Connector routing between placed states.

Geometry here is worked out in lane coordinates: ``primary`` runs along the
orientation axis, ``secondary`` across it. Points are mapped back to (x, y)
only when they leave this module.

Connector kinds:
    adjacent   forward to the next state: straight segment along the lane
    skip       forward past other states: detour through the "before" channel
    backward   to an earlier state: detour through the "after" channel
    loop       back to the same state: half-depth loop into the "after" channel
"""

import math
from dataclasses import dataclass
from typing import List, Sequence

from workflow_layout.models.geometry import Point
from workflow_layout.models.orientation import Orientation


@dataclass(frozen=True)
class StateBox:
    """A placed state box in lane coordinates."""
    index: int
    primary: float
    secondary: float
    primary_extent: float
    secondary_extent: float

    @property
    def near(self) -> float:
        return self.primary - self.primary_extent / 2

    @property
    def far(self) -> float:
        return self.primary + self.primary_extent / 2

    @property
    def before(self) -> float:
        return self.secondary - self.secondary_extent / 2

    @property
    def after(self) -> float:
        return self.secondary + self.secondary_extent / 2


@dataclass(frozen=True)
class Channels:
    """Secondary coordinates of the two detour channels beside the lane."""
    before: float
    after: float


def to_point(primary: float, secondary: float, orientation: Orientation) -> Point:
    """Map lane coordinates to an (x, y) point."""
    if orientation.is_horizontal:
        return Point(x=primary, y=secondary)
    return Point(x=secondary, y=primary)


def connector_kind(source: StateBox, target: StateBox) -> str:
    """Classify a connector as 'loop', 'adjacent', 'skip' or 'backward'."""
    step = target.index - source.index
    if step == 0:
        return "loop"
    if step == 1:
        return "adjacent"
    if step > 1:
        return "skip"
    return "backward"


def route(
    source: StateBox,
    target: StateBox,
    channels: Channels,
    orientation: Orientation,
) -> List[Point]:
    """Route a connector from the source box boundary to the target box boundary.

    Args:
        source: Placed source state
        target: Placed target state
        channels: Detour channel positions
        orientation: Layout orientation

    Returns:
        Ordered path points (start, bends, end)
    """
    kind = connector_kind(source, target)

    if kind == "adjacent":
        lane_points = [
            (source.far, source.secondary),
            (target.near, target.secondary),
        ]
    elif kind == "skip":
        lane_points = [
            (source.primary, source.before),
            (source.primary, channels.before),
            (target.primary, channels.before),
            (target.primary, target.before),
        ]
    elif kind == "backward":
        lane_points = [
            (source.primary, source.after),
            (source.primary, channels.after),
            (target.primary, channels.after),
            (target.primary, target.after),
        ]
    else:
        # Loops reach halfway to the channel line; backward connectors run on it.
        quarter = source.primary_extent / 4
        depth = source.after + (channels.after - source.after) / 2
        lane_points = [
            (source.primary - quarter, source.after),
            (source.primary - quarter, depth),
            (source.primary + quarter, depth),
            (source.primary + quarter, source.after),
        ]

    return [to_point(p, s, orientation) for p, s in lane_points]


def path_length(points: Sequence[Point]) -> float:
    return sum(
        math.hypot(b.x - a.x, b.y - a.y) for a, b in zip(points, points[1:])
    )


def path_midpoint(points: Sequence[Point]) -> Point:
    """Point halfway along the path, measured by arc length.

    Raises:
        ValueError: If points is empty
    """
    if not points:
        raise ValueError("Cannot compute midpoint of an empty path")

    remaining = path_length(points) / 2
    if remaining == 0:
        return points[0]

    for a, b in zip(points, points[1:]):
        segment = math.hypot(b.x - a.x, b.y - a.y)
        if segment >= remaining:
            ratio = remaining / segment
            return Point(x=a.x + (b.x - a.x) * ratio, y=a.y + (b.y - a.y) * ratio)
        remaining -= segment

    return points[-1]
