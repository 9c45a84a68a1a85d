"""
Calculation workflow helpers.
"""

from __future__ import annotations

from typing import Any

from ubi_model.results import shape_result

from .controller_utils import run_with_spinner_feedback
from .parameter_input import ensure_parameter_state, render_parameter_sliders, render_scenario_selector


def render_sidebar_inputs(st_module: Any, deps: Any) -> dict[str, Any]:
    """
    Render scenario and parameter controls in the sidebar and return interaction context.
    """
    ensure_parameter_state(st_module=st_module, deps=deps)
    render_scenario_selector(st_module=st_module, deps=deps)

    st_module.markdown("---")
    params = render_parameter_sliders(st_module=st_module, deps=deps)

    return {
        "params": params,
        "scenario": st_module.session_state.get("selected_scenario"),
    }


def build_estimator(deps: Any, settings: dict[str, Any]) -> Any:
    return deps.UBIEstimator(
        iterations=settings.get("iterations", 5),
        tolerance=settings.get("tolerance"),
    )


def calculate_ubi_result(params: Any, estimator: Any) -> dict[str, Any]:
    """
    Run the estimator once and package the outputs for the tabs.
    """
    trace = estimator.solve(params)
    return {
        "params": params,
        "trace": trace,
        "result": shape_result(trace),
    }


def execute_calculation(
    st_module: Any,
    deps: Any,
    calc_context: dict[str, Any],
    settings: dict[str, Any],
) -> None:
    """
    Recompute the estimate for the current parameters and store it in session state.
    """

    def _run() -> None:
        estimator = build_estimator(deps=deps, settings=settings)
        st_module.session_state.results = calculate_ubi_result(calc_context["params"], estimator)
        st_module.session_state.results_run_id = calc_context.get("run_id")

    ok = run_with_spinner_feedback(
        st_module=st_module,
        spinner_message="Estimating feasible UBI...",
        error_prefix="❌ Error estimating UBI",
        action_fn=_run,
    )
    if not ok:
        st_module.session_state.results = None
