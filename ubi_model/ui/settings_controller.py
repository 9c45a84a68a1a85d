"""
Settings panel rendering helpers.
"""

from __future__ import annotations

from typing import Any

FIXED_PASSES = "Fixed passes"
UNTIL_CONVERGED = "Until converged"


def render_settings_tab(st_module: Any, settings_tab: Any) -> dict[str, Any]:
    """
    Render settings panel and return selected configuration values.
    """
    tolerance = None
    iterations = 5

    with settings_tab:
        st_module.subheader("Fixed-Point Solver")
        mode = st_module.radio(
            "Social security feedback",
            [FIXED_PASSES, UNTIL_CONVERGED],
            help="Fixed passes reproduces the published figures; the converged mode iterates until the social-security cost stops moving.",
        )
        if mode == FIXED_PASSES:
            iterations = int(
                st_module.number_input("Passes", min_value=1, max_value=50, value=5, step=1)
            )
        else:
            tolerance = float(
                st_module.number_input(
                    "Tolerance (trillion yen)",
                    min_value=1e-9,
                    max_value=1.0,
                    value=1e-6,
                    format="%.9f",
                )
            )

        st_module.subheader("Uncertainty")
        n_sims = int(
            st_module.number_input("Monte Carlo draws", min_value=100, max_value=10_000, value=500, step=100)
        )

        st_module.markdown("---")
        if st_module.button("🗑️ Reset All", type="primary", help="Clear parameters and settings to defaults"):
            st_module.session_state.clear()
            st_module.rerun()

    return {
        "iterations": iterations,
        "tolerance": tolerance,
        "n_sims": n_sims,
    }
