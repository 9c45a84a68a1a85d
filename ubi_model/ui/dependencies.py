"""
Dependency assembly for Streamlit app bootstrap.
"""

from __future__ import annotations

from types import SimpleNamespace

from ubi_model import (
    DEFAULT_SCENARIO,
    PARAMETER_SPECS,
    PRESET_SCENARIOS,
    SCENARIO_ORDER,
    UBIEstimator,
    UBIParameters,
    UncertaintyAnalysis,
    compare_scenarios,
    get_scenario,
)

from .app_controller import run_main_app
from .styles import apply_app_styles
from .tabs import (
    render_methodology_tab,
    render_results_summary_tab,
    render_scenario_comparison_tab,
    render_sensitivity_tab,
)


def build_app_dependencies() -> SimpleNamespace:
    """
    Build all runtime dependencies needed by the app controller.
    """
    return SimpleNamespace(
        PRESET_SCENARIOS=PRESET_SCENARIOS,
        SCENARIO_ORDER=SCENARIO_ORDER,
        DEFAULT_SCENARIO=DEFAULT_SCENARIO,
        PARAMETER_SPECS=PARAMETER_SPECS,
        UBIParameters=UBIParameters,
        UBIEstimator=UBIEstimator,
        UncertaintyAnalysis=UncertaintyAnalysis,
        get_scenario=get_scenario,
        compare_scenarios=compare_scenarios,
        render_results_summary_tab=render_results_summary_tab,
        render_scenario_comparison_tab=render_scenario_comparison_tab,
        render_sensitivity_tab=render_sensitivity_tab,
        render_methodology_tab=render_methodology_tab,
        apply_app_styles=apply_app_styles,
        run_main_app=run_main_app,
    )
