"""
Regression tests for package wiring and the Streamlit controller flow.
"""

import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

import ubi_model
from ubi_model import PRESET_SCENARIOS, UBIEstimator, estimate
from ubi_model.ui import (
    PARAMETER_GROUPS,
    apply_app_styles,
    build_app_dependencies,
    build_estimator,
    calculate_ubi_result,
    render_parameter_sliders,
    render_scenario_selector,
    run_main_app,
)
from ubi_model.ui.calculation_controller import execute_calculation, render_sidebar_inputs
from ubi_model.ui.controller_utils import compute_run_id, run_with_spinner_feedback
from ubi_model.ui.parameter_input import (
    CUSTOM_SCENARIO,
    PARAMS_STATE_KEY,
    SCENARIO_STATE_KEY,
    ensure_parameter_state,
    load_scenario,
)
from ubi_model.ui.settings_controller import render_settings_tab
from ubi_model.ui.tabs_controller import TAB_LABELS, build_main_tabs, render_footer, render_result_tabs
from ubi_model.ui.tabs import (
    render_methodology_tab,
    render_results_summary_tab,
    render_scenario_comparison_tab,
    render_sensitivity_tab,
)


# =============================================================================
# FAKE STREAMLIT
# =============================================================================

class SessionState(dict):
    """Dict with attribute access, like st.session_state."""

    def __getattr__(self, name):
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name) from None

    def __setattr__(self, name, value):
        self[name] = value


class _Block:
    """Context manager standing in for columns, tabs, expanders, and the sidebar."""

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


class FakeStreamlit:
    """
    Records calls; widgets return their default value unless overridden.

    slider_overrides maps a parameter name to the displayed slider value.
    pressed_buttons holds the keys of buttons that report a click.
    """

    def __init__(self, slider_overrides=None, pressed_buttons=()):
        self.session_state = SessionState()
        self.sidebar = _Block()
        self.slider_overrides = slider_overrides or {}
        self.pressed_buttons = set(pressed_buttons)
        self.calls = []

    def __getattr__(self, name):
        def _record(*args, **kwargs):
            self.calls.append((name, args, kwargs))
            return None

        return _record

    def called(self, name):
        return [call for call in self.calls if call[0] == name]

    def columns(self, spec):
        count = spec if isinstance(spec, int) else len(spec)
        return [_Block() for _ in range(count)]

    def tabs(self, labels):
        return [_Block() for _ in labels]

    def expander(self, *args, **kwargs):
        return _Block()

    def spinner(self, *args, **kwargs):
        return _Block()

    def button(self, *args, **kwargs):
        return kwargs.get("key") in self.pressed_buttons

    def slider(self, label, *args, **kwargs):
        key = kwargs.get("key", "")
        for name, value in self.slider_overrides.items():
            if key.endswith("_" + name):
                return value
        if "value" in kwargs:
            return kwargs["value"]
        return args[2]

    def radio(self, label, options, **kwargs):
        return options[0]

    def selectbox(self, label, options, **kwargs):
        return options[0]

    def number_input(self, label, **kwargs):
        return kwargs["value"]


@pytest.fixture
def deps():
    return build_app_dependencies()


@pytest.fixture
def fake_st():
    return FakeStreamlit()


# =============================================================================
# PACKAGE WIRING
# =============================================================================

def test_package_exports():
    for name in ubi_model.__all__:
        assert hasattr(ubi_model, name), name
    assert ubi_model.__version__


def test_build_app_dependencies_wiring(deps):
    assert deps.PRESET_SCENARIOS is PRESET_SCENARIOS
    assert deps.DEFAULT_SCENARIO == "current"
    assert deps.run_main_app is run_main_app
    assert deps.apply_app_styles is apply_app_styles
    assert callable(deps.compare_scenarios)


def test_parameter_groups_cover_every_field():
    grouped = [name for _, names in PARAMETER_GROUPS for name in names]
    assert sorted(grouped) == sorted(ubi_model.parameters.FIELD_NAMES)


def test_tab_renderers_importable():
    assert callable(render_results_summary_tab)
    assert callable(render_scenario_comparison_tab)
    assert callable(render_sensitivity_tab)
    assert callable(render_methodology_tab)
    assert callable(render_footer)
    assert callable(render_scenario_selector)


# =============================================================================
# CONTROLLER HELPERS
# =============================================================================

def test_compute_run_id_is_stable():
    params = PRESET_SCENARIOS["current"].params.to_dict()
    settings = {"iterations": 5, "tolerance": None, "n_sims": 500}

    assert compute_run_id(params, settings) == compute_run_id(dict(params), dict(settings))
    assert compute_run_id(params, settings) != compute_run_id(params, dict(settings, iterations=4))
    assert len(compute_run_id(params, settings)) == 12


def test_run_with_spinner_feedback_success(fake_st):
    ran = []
    ok = run_with_spinner_feedback(
        st_module=fake_st,
        spinner_message="Working",
        error_prefix="Failed",
        action_fn=lambda: ran.append(True),
        success_message="Done",
    )
    assert ok is True
    assert ran == [True]
    assert fake_st.called("success")


def test_run_with_spinner_feedback_failure(fake_st):
    def _boom():
        raise RuntimeError("forced failure")

    ok = run_with_spinner_feedback(
        st_module=fake_st,
        spinner_message="Working",
        error_prefix="Failed",
        action_fn=_boom,
    )
    assert ok is False
    error_calls = fake_st.called("error")
    assert "forced failure" in error_calls[0][1][0]


def test_build_estimator_from_settings(deps):
    fixed = build_estimator(deps, {"iterations": 3, "tolerance": None})
    assert fixed.iterations == 3
    assert fixed.tolerance is None

    converging = build_estimator(deps, {"iterations": 5, "tolerance": 1e-6})
    assert converging.tolerance == 1e-6


def test_calculate_ubi_result_mapping(proposed_params):
    data = calculate_ubi_result(proposed_params, UBIEstimator())

    assert data["params"] is proposed_params
    assert data["trace"].iterations == 5
    assert data["result"] == estimate(proposed_params)


def test_calculate_ubi_result_with_dummy_estimator():
    trace = ubi_model.solve(PRESET_SCENARIOS["moderate"].params)
    dummy = SimpleNamespace(solve=lambda params: trace)

    data = calculate_ubi_result("placeholder", dummy)
    assert data["trace"] is trace
    assert data["result"].monthly_ubi == estimate(PRESET_SCENARIOS["moderate"].params).monthly_ubi


# =============================================================================
# SIDEBAR STATE
# =============================================================================

def test_ensure_parameter_state_seeds_default(fake_st, deps):
    ensure_parameter_state(fake_st, deps)

    assert fake_st.session_state[SCENARIO_STATE_KEY] == "current"
    assert fake_st.session_state[PARAMS_STATE_KEY] == PRESET_SCENARIOS["current"].params.to_dict()


def test_ensure_parameter_state_keeps_existing(fake_st, deps):
    load_scenario(fake_st, deps, "advanced")
    ensure_parameter_state(fake_st, deps)
    assert fake_st.session_state[SCENARIO_STATE_KEY] == "advanced"


def test_scenario_button_loads_preset(deps):
    fake_st = FakeStreamlit(pressed_buttons={"scenario_proposed"})
    ensure_parameter_state(fake_st, deps)

    selected = render_scenario_selector(fake_st, deps)
    assert selected == "proposed"
    assert fake_st.session_state[PARAMS_STATE_KEY]["alpha"] == 0.8


@pytest.mark.parametrize("key", list(PRESET_SCENARIOS))
def test_unchanged_sliders_keep_preset(deps, key):
    fake_st = FakeStreamlit()
    load_scenario(fake_st, deps, key)

    params = render_parameter_sliders(fake_st, deps)
    assert params == PRESET_SCENARIOS[key].params
    assert fake_st.session_state[SCENARIO_STATE_KEY] == key


def test_moved_slider_marks_custom(deps):
    fake_st = FakeStreamlit(slider_overrides={"alpha": 40.0})
    ensure_parameter_state(fake_st, deps)

    params = render_parameter_sliders(fake_st, deps)
    assert params.alpha == pytest.approx(0.4)
    assert fake_st.session_state[SCENARIO_STATE_KEY] == CUSTOM_SCENARIO
    assert fake_st.session_state[PARAMS_STATE_KEY]["alpha"] == pytest.approx(0.4)


def test_stored_value_outside_slider_range_is_kept(deps):
    fake_st = FakeStreamlit()
    stored = PRESET_SCENARIOS["current"].params.with_changes(social_cost_ratio=0.05)
    fake_st.session_state[PARAMS_STATE_KEY] = stored.to_dict()
    fake_st.session_state[SCENARIO_STATE_KEY] = "current"

    params = render_parameter_sliders(fake_st, deps)
    assert params == stored
    assert fake_st.session_state[SCENARIO_STATE_KEY] == "current"


def test_render_sidebar_inputs_context(fake_st, deps):
    context = render_sidebar_inputs(fake_st, deps)
    assert context["params"] == PRESET_SCENARIOS["current"].params
    assert context["scenario"] == "current"


def test_render_settings_defaults(fake_st):
    settings = render_settings_tab(fake_st, settings_tab=fake_st.expander("Settings"))
    assert settings == {"iterations": 5, "tolerance": None, "n_sims": 500}


# =============================================================================
# FULL FLOW
# =============================================================================

def test_execute_calculation_stores_results(fake_st, deps):
    calc_context = {"params": PRESET_SCENARIOS["proposed"].params, "run_id": "abc"}
    execute_calculation(fake_st, deps, calc_context, {"iterations": 5, "tolerance": None})

    assert fake_st.session_state.results["result"].monthly_ubi > 700_000
    assert fake_st.session_state.results_run_id == "abc"


def test_execute_calculation_failure_clears_results(fake_st, deps):
    calc_context = {"params": PRESET_SCENARIOS["proposed"].params}
    execute_calculation(fake_st, deps, calc_context, {"iterations": 0, "tolerance": None})

    assert fake_st.session_state.results is None
    assert fake_st.called("error")


def test_build_main_tabs(fake_st):
    tabs = build_main_tabs(fake_st)
    assert set(tabs) == {"tab_summary", "tab_scenarios", "tab_sensitivity", "tab_methodology"}
    assert len(TAB_LABELS) == 4


def test_render_result_tabs_without_results(fake_st, deps):
    fake_st.session_state.results = None
    settings = {"iterations": 5, "tolerance": None, "n_sims": 100}
    render_result_tabs(fake_st, deps, build_main_tabs(fake_st), settings)

    assert len(fake_st.called("info")) == 2
    assert fake_st.called("dataframe")


def test_run_main_app_smoke(fake_st, deps):
    run_main_app(st_module=fake_st, deps=deps)

    results = fake_st.session_state.results
    assert results["result"] == estimate(PRESET_SCENARIOS["current"].params)
    assert fake_st.session_state.current_run_id == fake_st.session_state.results_run_id
    assert fake_st.called("title")
    assert fake_st.called("plotly_chart")


def test_run_main_app_feasible_scenario(deps):
    fake_st = FakeStreamlit(pressed_buttons={"scenario_proposed"})
    run_main_app(st_module=fake_st, deps=deps)

    result = fake_st.session_state.results["result"]
    assert result.is_feasible
    metric_labels = [call[1][0] for call in fake_st.called("metric")]
    assert "Real Monthly UBI" in metric_labels


def test_scenario_comparison_tab_draws_bar_widths(fake_st):
    import pandas as pd

    frame = pd.DataFrame({
        "name": ["None", "Small", "Large"],
        "alpha": [0.1, 0.5, 0.9],
        "monthly_ubi": [0, 1, 1000],
        "real_monthly_ubi": [0, 1, 900],
        "net_surplus": [-1.0, 0.1, 125.0],
        "inflation_rate": [0.0, 0.0, 2.0],
        "bar_width_pct": [0.0, 5.0, 100.0],
    })

    render_scenario_comparison_tab(fake_st, compare_scenarios_fn=lambda estimator: frame, estimator=None)

    fig = fake_st.called("plotly_chart")[0][1][0]
    assert [trace.x[0] for trace in fig.data] == [0.0, 5.0, 100.0]
    assert [trace.text[0] for trace in fig.data] == ["¥0", "¥1", "¥1,000"]
    assert tuple(fig.layout.xaxis.range) == (0, 100)
