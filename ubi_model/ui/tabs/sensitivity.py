"""
Sensitivity and uncertainty tab renderer.
"""

from __future__ import annotations

from typing import Any

import plotly.graph_objects as go


def render_sensitivity_tab(
    st_module: Any,
    params: Any,
    parameter_specs: dict[str, Any],
    uncertainty_analysis: Any,
    n_sims: int,
    run_id: str | None = None,
) -> None:
    """
    Render a one-parameter sweep and an optional Monte Carlo run.
    """
    st_module.header("📈 Sensitivity")

    names = list(parameter_specs.keys())
    parameter = st_module.selectbox(
        "Parameter to vary",
        options=names,
        format_func=lambda name: parameter_specs[name].label,
    )
    range_pct = st_module.slider("Range (± % of current value)", 10, 100, 50, 10) / 100

    sweep = uncertainty_analysis.sensitivity_analysis(params, parameter, range_pct=range_pct)
    spec = parameter_specs[parameter]

    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=sweep.parameter_values * spec.multiplier,
            y=sweep.monthly_ubi,
            mode="lines+markers",
            name="Monthly UBI",
            line=dict(width=3),
        )
    )
    fig.add_vline(x=sweep.central_value * spec.multiplier, line_dash="dash", line_color="gray")
    fig.update_layout(
        xaxis_title=f"{spec.label} ({spec.unit})" if spec.unit else spec.label,
        yaxis_title="Monthly UBI (yen)",
        hovermode="x unified",
        height=450,
    )
    st_module.plotly_chart(fig, use_container_width=True)
    st_module.metric("Elasticity", f"{sweep.elasticity:.2f}", help="% change in monthly UBI per 1% change in the parameter")

    st_module.markdown("---")
    st_module.subheader("🎲 Monte Carlo")
    if st_module.button("Run Monte Carlo", key=f"mc_{run_id}"):
        summary = uncertainty_analysis.monte_carlo(params, n_sims=n_sims, seed=0)
        hist = go.Figure(go.Histogram(x=summary["simulations"], nbinsx=40, marker_color="#1f77b4"))
        hist.update_layout(xaxis_title="Monthly UBI (yen)", yaxis_title="Draws", height=400)
        st_module.plotly_chart(hist, use_container_width=True)
        st_module.code(uncertainty_analysis.format_uncertainty_summary(summary))
