"""
Duck-typed Workflow Model for Layout Tests

A minimal stand-in for a real workflow model. It is deliberately NOT a
``workflow_layout.Workflow``: it only exposes states_of()/transitions_of()
and hands out plain dicts, so tests exercise the engine's boundary
coercion the way an external model would.

Usage:
    from tests.fixtures.workflow_tester import WorkflowTester

    workflow = (
        WorkflowTester()
        .with_states(['first', 'second'])
        .and_transitions([{'source': 'state_id1', 'target': 'state_id2'}])
    )
"""


class WorkflowTester:
    """Immutable builder exposing the workflow model accessors."""

    def __init__(self, states=None, transitions=None):
        self._states = list(states or [])
        self._transitions = list(transitions or [])

    def with_states(self, states):
        """Return a copy with the given states.

        Strings become ``{'id': 'state_id<N>', 'label': <string>}``.
        Dicts are passed through unchanged.
        """
        descriptors = []
        for index, state in enumerate(states, start=1):
            if isinstance(state, str):
                descriptors.append({'id': f'state_id{index}', 'label': state})
            else:
                descriptors.append(dict(state))
        return WorkflowTester(descriptors, self._transitions)

    def and_transitions(self, transitions):
        """Return a copy with the given transitions."""
        return WorkflowTester(self._states, [dict(t) for t in transitions])

    def states_of(self):
        return list(self._states)

    def transitions_of(self):
        return list(self._transitions)


def simple_workflow():
    """Two states joined by one unlabeled transition."""
    return (
        WorkflowTester()
        .with_states(['first', 'second'])
        .and_transitions([{'source': 'state_id1', 'target': 'state_id2'}])
    )


def workflow_with_transition_label(label):
    """Two states joined by one labeled transition."""
    return simple_workflow().and_transitions(
        [{'source': 'state_id1', 'target': 'state_id2', 'label': label}]
    )
