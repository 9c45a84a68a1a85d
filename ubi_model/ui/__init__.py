"""
UI helper utilities for Streamlit app composition.
"""

from .styles import APP_STYLES, apply_app_styles
from .parameter_input import PARAMETER_GROUPS, render_parameter_sliders, render_scenario_selector
from .calculation_controller import build_estimator, calculate_ubi_result
from .app_controller import run_main_app
from .dependencies import build_app_dependencies

__all__ = [
    "APP_STYLES",
    "apply_app_styles",
    "PARAMETER_GROUPS",
    "render_parameter_sliders",
    "render_scenario_selector",
    "build_estimator",
    "calculate_ubi_result",
    "run_main_app",
    "build_app_dependencies",
]
