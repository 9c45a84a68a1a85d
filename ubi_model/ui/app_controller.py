"""
Top-level Streamlit app orchestration.
"""

from __future__ import annotations

from typing import Any

from .calculation_controller import execute_calculation, render_sidebar_inputs
from .controller_utils import compute_run_id
from .settings_controller import render_settings_tab
from .tabs_controller import build_main_tabs, render_footer, render_result_tabs


def run_main_app(st_module: Any, deps: Any) -> None:
    """
    Render and orchestrate the full Streamlit app flow.
    """
    deps.apply_app_styles(st_module)
    st_module.title("UBI Feasibility Calculator")
    st_module.caption(
        "Adjust the parameters to estimate the universal basic income an AI-era economy could fund."
    )

    with st_module.sidebar:
        st_module.header("⚙️ Parameters")
        calc_context = render_sidebar_inputs(st_module=st_module, deps=deps)

        st_module.markdown("---")
        settings = render_settings_tab(
            st_module=st_module,
            settings_tab=st_module.expander("⚙️ Solver Settings"),
        )

    calc_context["run_id"] = compute_run_id(params=calc_context["params"].to_dict(), settings=settings)
    st_module.session_state.current_run_id = calc_context["run_id"]

    # Estimates are sub-millisecond, so recompute on every rerun
    execute_calculation(st_module=st_module, deps=deps, calc_context=calc_context, settings=settings)

    tabs = build_main_tabs(st_module=st_module)
    render_result_tabs(st_module=st_module, deps=deps, tabs=tabs, settings=settings)
    render_footer(st_module=st_module)
