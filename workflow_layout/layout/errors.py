"""Errors raised while computing a layout.

A bad orientation is never an error (it falls back to horizontal). A
transition pointing at a missing state fails immediately, because a view
layer cannot draw a connector without both endpoints.
"""


class LayoutError(Exception):
    """Base class for layout computation failures."""


class DanglingTransitionError(LayoutError, ValueError):
    """Raised when a transition references a state id that is not in the workflow."""

    def __init__(self, transition_id: str, role: str, state_id: str):
        self.transition_id = transition_id
        self.role = role
        self.state_id = state_id
        super().__init__(
            f"Transition {transition_id} references unknown {role} state '{state_id}'"
        )


class InvalidWorkflowModelError(LayoutError, TypeError):
    """Raised when the workflow object does not expose states_of()/transitions_of()."""

    def __init__(self, model: object):
        self.model = model
        super().__init__(
            f"Expected a workflow model exposing states_of() and transitions_of(), "
            f"got {type(model).__name__}"
        )
