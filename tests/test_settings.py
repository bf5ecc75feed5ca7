"""Tests for layout settings and engine configuration."""

import pytest

from tests.fixtures.workflow_tester import WorkflowTester
from workflow_layout import Layout, LinearLayoutEngine
from workflow_layout.config import settings
from workflow_layout.config.settings import (
    CANVAS_MARGIN,
    DEFAULT_STATE_HEIGHT,
    DEFAULT_STATE_WIDTH,
    ROUTING_CHANNEL,
    STATE_SPACING,
    get_all_settings,
    get_setting,
    set_setting,
)


class TestSettings:
    """Test settings lookup."""

    def test_defaults_are_positive(self):
        assert DEFAULT_STATE_WIDTH > 0
        assert DEFAULT_STATE_HEIGHT > 0
        assert STATE_SPACING >= 0
        assert CANVAS_MARGIN >= 0
        assert ROUTING_CHANNEL >= 0

    def test_get_setting(self):
        assert get_setting('default_state_width') == DEFAULT_STATE_WIDTH

    def test_unknown_setting_raises(self):
        with pytest.raises(KeyError) as exc_info:
            get_setting('state_colour')

        assert "state_colour" in str(exc_info.value)
        assert "Available settings:" in str(exc_info.value)

    def test_get_all_settings_returns_copy(self):
        all_settings = get_all_settings()
        all_settings['state_spacing'] = -1
        assert get_setting('state_spacing') == STATE_SPACING

    def test_set_setting_affects_new_engines(self, monkeypatch):
        """Test set_setting changes defaults for engines created afterwards."""
        monkeypatch.setattr(settings, 'LAYOUT_SETTINGS', dict(settings.LAYOUT_SETTINGS))
        workflow = WorkflowTester().with_states(['first'])
        before = Layout.from_workflow(workflow)

        set_setting('default_state_width', DEFAULT_STATE_WIDTH * 2)

        after = Layout.from_workflow(workflow)
        assert after.states[0].center != before.states[0].center
        # Existing layout keeps its engine and its values
        before.set_workflow(workflow)
        assert before.states[0].center.x == CANVAS_MARGIN + DEFAULT_STATE_WIDTH / 2

    def test_set_unknown_setting_raises(self):
        with pytest.raises(KeyError):
            set_setting('nope', 1.0)

    def test_env_float_parses(self, monkeypatch):
        monkeypatch.setenv('WORKFLOW_LAYOUT_TEST_VALUE', '42.5')
        assert settings._env_float('WORKFLOW_LAYOUT_TEST_VALUE', 1.0) == 42.5

    def test_env_float_default_when_unset(self, monkeypatch):
        monkeypatch.delenv('WORKFLOW_LAYOUT_TEST_VALUE', raising=False)
        assert settings._env_float('WORKFLOW_LAYOUT_TEST_VALUE', 1.0) == 1.0

    def test_env_float_rejects_garbage(self, monkeypatch):
        monkeypatch.setenv('WORKFLOW_LAYOUT_TEST_VALUE', 'wide')
        with pytest.raises(ValueError, match="must be a number"):
            settings._env_float('WORKFLOW_LAYOUT_TEST_VALUE', 1.0)


class TestEngineOverrides:
    """Test per-engine spacing overrides."""

    def test_spacing_override(self):
        """Test state spacing sets the gap between neighbouring boxes."""
        workflow = WorkflowTester().with_states(['a', 'b'])
        engine = LinearLayoutEngine(state_spacing=10)
        layout = Layout.from_workflow(workflow, engine=engine)

        first, second = layout.states
        assert second.center.x - first.center.x == DEFAULT_STATE_WIDTH + 10

    def test_default_extent_override(self):
        engine = LinearLayoutEngine(default_state_width=10, default_state_height=10,
                                    canvas_margin=0, routing_channel=0)
        layout = Layout.from_workflow(WorkflowTester().with_states(['a']), engine=engine)
        assert layout.states[0].center.x == 5
        assert layout.size.width == 10

    def test_declared_extent_wins_over_default(self):
        engine = LinearLayoutEngine(canvas_margin=0, routing_channel=0)
        workflow = WorkflowTester().with_states([{'id': 'a', 'width': 30, 'height': 20}])
        layout = Layout.from_workflow(workflow, engine=engine)
        assert layout.states[0].center.x == 15
        assert layout.states[0].center.y == 10

    @pytest.mark.parametrize("kwargs", [
        {'default_state_width': 0},
        {'default_state_height': -5},
        {'state_spacing': -1},
        {'canvas_margin': -1},
        {'routing_channel': -1},
    ])
    def test_invalid_overrides_raise(self, kwargs):
        with pytest.raises(ValueError):
            LinearLayoutEngine(**kwargs)
