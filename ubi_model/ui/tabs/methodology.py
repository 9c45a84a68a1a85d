"""
Methodology tab renderer.
"""

from __future__ import annotations

from typing import Any


def render_methodology_tab(st_module: Any, parameter_specs: dict[str, Any]) -> None:
    """
    Render methodology/reference tab content.
    """
    st_module.header("ℹ️ Methodology")
    st_module.markdown(
        """
        ## How This Calculator Works

        1. **Productivity**: γ_eff = γ × (1 − λ × corporate rate)
        2. **GDP**: 600T yen × GDP multiplier × γ_eff
        3. **Income split**: labor = GDP × (1 − α)(1 − β); capital = GDP × (α + (1 − α)β)
        4. **Revenue**: personal and corporate taxes on the income slices,
           consumption tax on 60% of GDP, property tax on assets of 2 × GDP,
           all scaled by the tax yield adjustment
        5. **Funding**: tax revenue plus bond-financed deficit
        6. **Costs**: fixed costs + reducible social security + social insurance financed from taxes
        7. **UBI feedback**: five passes in which the UBI displaces social security
           (fully once it reaches the ~1M yen average benefit, up to the reduction rate)
        8. **Inflation**: π = η × total UBI / GDP; real UBI = nominal / (1 + π)

        This is a single-period what-if estimator, not a dynamic macro simulation.
        """
    )

    st_module.subheader("Parameters")
    for name, spec in parameter_specs.items():
        with st_module.expander(spec.label, expanded=False):
            st_module.markdown(spec.explanation or spec.description or "No further notes.")
            st_module.caption(
                f"Range {spec.minimum * spec.multiplier:g} to {spec.maximum * spec.multiplier:g} {spec.unit}"
            )
