"""
Tab renderer modules for Streamlit app.
"""

from .methodology import render_methodology_tab
from .results_summary import render_results_summary_tab
from .scenario_comparison import render_scenario_comparison_tab
from .sensitivity import render_sensitivity_tab

__all__ = [
    "render_methodology_tab",
    "render_results_summary_tab",
    "render_scenario_comparison_tab",
    "render_sensitivity_tab",
]
