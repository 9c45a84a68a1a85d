"""
Tab wiring and render orchestration helpers.
"""

from __future__ import annotations

from typing import Any

from .calculation_controller import build_estimator

TAB_LABELS = ["📊 Summary", "🔀 Scenarios", "📈 Sensitivity", "ℹ️ Methodology"]


def build_main_tabs(st_module: Any) -> dict[str, Any]:
    """
    Create main result tabs layout and return named tab references.
    """
    tabs = st_module.tabs(TAB_LABELS)
    tab_map = dict(zip(TAB_LABELS, tabs, strict=False))

    return {
        "tab_summary": tab_map["📊 Summary"],
        "tab_scenarios": tab_map["🔀 Scenarios"],
        "tab_sensitivity": tab_map["📈 Sensitivity"],
        "tab_methodology": tab_map["ℹ️ Methodology"],
    }


def render_result_tabs(
    st_module: Any,
    deps: Any,
    tabs: dict[str, Any],
    settings: dict[str, Any],
) -> None:
    """
    Render summary, comparison, sensitivity, and reference tabs.
    """
    result_data = st_module.session_state.results
    estimator = build_estimator(deps=deps, settings=settings)

    with tabs["tab_summary"]:
        if not result_data:
            st_module.info("👈 Adjust the parameters in the sidebar to see an estimate.")
        else:
            deps.render_results_summary_tab(st_module=st_module, result_data=result_data)

    with tabs["tab_scenarios"]:
        deps.render_scenario_comparison_tab(
            st_module=st_module,
            compare_scenarios_fn=deps.compare_scenarios,
            estimator=estimator,
        )

    with tabs["tab_sensitivity"]:
        if not result_data:
            st_module.info("👈 Run an estimate to unlock sensitivity analysis.")
        else:
            deps.render_sensitivity_tab(
                st_module=st_module,
                params=result_data["params"],
                parameter_specs=deps.PARAMETER_SPECS,
                uncertainty_analysis=deps.UncertaintyAnalysis(estimator=estimator),
                n_sims=settings["n_sims"],
                run_id=getattr(st_module.session_state, "results_run_id", None),
            )

    with tabs["tab_methodology"]:
        deps.render_methodology_tab(st_module=st_module, parameter_specs=deps.PARAMETER_SPECS)


def render_footer(st_module: Any) -> None:
    """
    Render app footer.
    """
    st_module.markdown("---")
    st_module.caption(
        """
**UBI Feasibility Calculator** | Built with Streamlit |
Reference economy: Japan FY2025 (GDP 600T yen, population 125M) |
Single-period estimate, not a forecast
"""
    )
