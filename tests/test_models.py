"""Tests for workflow and geometry models.

These tests verify descriptor coercion at the workflow boundary and the
serialization helpers on the geometry snapshot.
"""

import json
from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from tests.fixtures.workflow_tester import simple_workflow
from workflow_layout import (
    GeometrySnapshot,
    Layout,
    Orientation,
    StateDescriptor,
    TransitionDescriptor,
    Workflow,
    WorkflowModel,
)


class TestStateDescriptor:
    """Test StateDescriptor model."""

    def test_coerce_from_mapping(self):
        state = StateDescriptor.coerce({'id': 's1', 'label': 'Start', 'width': 100})
        assert state.id == 's1'
        assert state.label == 'Start'
        assert state.width == 100.0
        assert state.height is None

    def test_coerce_from_attributes(self):
        """Test any object with matching attributes is accepted."""
        state = StateDescriptor.coerce(SimpleNamespace(id='s1', label='Start', width=None, height=40))
        assert state.id == 's1'
        assert state.height == 40.0

    def test_coerce_returns_same_instance(self):
        state = StateDescriptor(id='s1')
        assert StateDescriptor.coerce(state) is state

    def test_missing_id_raises(self):
        """Test a state without an id fails validation."""
        with pytest.raises(ValidationError):
            StateDescriptor.coerce({'label': 'orphan'})

    def test_non_positive_extent_raises(self):
        with pytest.raises(ValidationError):
            StateDescriptor(id='s1', width=0)

    @pytest.mark.parametrize("extents", [
        {'width': float('inf')},
        {'height': float('nan')},
        {'width': float('-inf')},
    ])
    def test_non_finite_extent_raises(self, extents):
        """Test infinite or NaN extents are rejected at the boundary."""
        with pytest.raises(ValidationError):
            StateDescriptor(id='s1', **extents)

    def test_extra_fields_allowed(self):
        """Test upstream-specific fields are preserved."""
        state = StateDescriptor.coerce({'id': 's1', 'color': 'red'})
        assert state.model_extra == {'color': 'red'}


class TestTransitionDescriptor:
    """Test TransitionDescriptor model."""

    def test_label_defaults_to_empty(self):
        assert TransitionDescriptor(source='a', target='b').label == ''

    def test_none_label_becomes_empty(self):
        assert TransitionDescriptor.coerce({'source': 'a', 'target': 'b', 'label': None}).label == ''

    def test_missing_target_raises(self):
        with pytest.raises(ValidationError):
            TransitionDescriptor.coerce({'source': 'a'})


class TestWorkflow:
    """Test the concrete Workflow model."""

    def test_satisfies_protocol(self):
        assert isinstance(Workflow(), WorkflowModel)

    def test_duck_typed_model_satisfies_protocol(self):
        assert isinstance(simple_workflow(), WorkflowModel)

    def test_with_states_synthesizes_ids(self):
        workflow = Workflow().with_states(['first', 'second'])
        assert [s.id for s in workflow.states_of()] == ['state_id1', 'state_id2']
        assert [s.label for s in workflow.states_of()] == ['first', 'second']

    def test_builders_return_new_instances(self):
        """Test builder helpers leave the original workflow untouched."""
        base = Workflow().with_states(['first'])
        extended = base.and_transitions([{'source': 'state_id1', 'target': 'state_id1'}])
        assert base.transitions_of() == []
        assert len(extended.transitions_of()) == 1

    def test_accessors_return_copies(self):
        workflow = Workflow().with_states(['first'])
        workflow.states_of().clear()
        assert len(workflow.states_of()) == 1


class TestGeometrySnapshot:
    """Test GeometrySnapshot helpers."""

    def test_empty_snapshot(self):
        snapshot = GeometrySnapshot()
        assert snapshot.states == ()
        assert snapshot.transitions == ()
        assert snapshot.size.width == 0
        assert snapshot.orientation is Orientation.HORIZONTAL

    def test_to_dict_is_json_serializable(self):
        """Test to_dict produces plain JSON data with sorted keys."""
        data = Layout.from_workflow(simple_workflow(), 'vertical').to_dict()

        assert list(data) == sorted(data)
        assert data['orientation'] == 'vertical'
        assert data['transitions'][0]['id'] == 'transition_id1'
        assert data['transitions'][0]['label']['text'] == ''
        json.dumps(data)

    def test_to_dict_deterministic(self):
        snapshot = Layout.from_workflow(simple_workflow()).snapshot
        assert json.dumps(snapshot.to_dict()) == json.dumps(snapshot.to_dict())

    def test_etag_changes_with_content(self):
        horizontal = Layout.from_workflow(simple_workflow()).snapshot
        vertical = Layout.from_workflow(simple_workflow(), 'vertical').snapshot
        assert len(horizontal.compute_etag()) == 64
        assert horizontal.compute_etag() != vertical.compute_etag()

    def test_lookup_by_id(self):
        snapshot = Layout.from_workflow(simple_workflow()).snapshot
        assert snapshot.state('state_id2').label == 'second'
        assert snapshot.state('missing') is None
        assert snapshot.transition('transition_id1') is not None
        assert snapshot.transition('transition_id2') is None

    def test_snapshot_is_frozen(self):
        snapshot = Layout.from_workflow(simple_workflow()).snapshot
        with pytest.raises(ValidationError):
            snapshot.size = None


class TestOrientation:
    """Test orientation normalization."""

    @pytest.mark.parametrize("value, expected", [
        ('horizontal', Orientation.HORIZONTAL),
        ('vertical', Orientation.VERTICAL),
        (Orientation.VERTICAL, Orientation.VERTICAL),
        (None, Orientation.HORIZONTAL),
        ('WrongOrientation', Orientation.HORIZONTAL),
        ('VERTICAL', Orientation.HORIZONTAL),
        (42, Orientation.HORIZONTAL),
    ])
    def test_normalize(self, value, expected):
        assert Orientation.normalize(value) is expected
