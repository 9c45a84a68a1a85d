"""
Scenario comparison tab renderer.
"""

from __future__ import annotations

from typing import Any

import plotly.graph_objects as go

from ubi_model.reporting import format_currency


def render_scenario_comparison_tab(
    st_module: Any,
    compare_scenarios_fn: Any,
    estimator: Any,
) -> None:
    """
    Render monthly UBI for every preset scenario side by side.
    """
    st_module.header("🔀 Scenario Comparison")

    comparison = compare_scenarios_fn(estimator=estimator)

    fig = go.Figure()
    for _, row in comparison.iterrows():
        is_zero = row["monthly_ubi"] == 0
        fig.add_trace(
            go.Bar(
                name=row["name"],
                x=[row["bar_width_pct"]],
                y=[row["name"]],
                orientation="h",
                marker_color="#dc3545" if is_zero else "#28a745",
                text=["¥0" if is_zero else f"¥{format_currency(row['monthly_ubi'])}"],
                textposition="auto",
            )
        )
    fig.update_layout(
        xaxis=dict(title="Share of largest monthly UBI (%)", range=[0, 100]),
        yaxis=dict(autorange="reversed"),
        showlegend=False,
        height=120 + 70 * len(comparison),
    )
    st_module.plotly_chart(fig, use_container_width=True)

    table = comparison[["name", "alpha", "monthly_ubi", "real_monthly_ubi", "net_surplus", "inflation_rate"]].rename(
        columns={
            "name": "Scenario",
            "alpha": "AI Substitution",
            "monthly_ubi": "Monthly UBI (¥)",
            "real_monthly_ubi": "Real Monthly UBI (¥)",
            "net_surplus": "Net Surplus (T¥)",
            "inflation_rate": "Inflation (%)",
        }
    )
    st_module.dataframe(table, use_container_width=True, hide_index=True)
    st_module.caption("Monthly UBI each preset scenario can fund, computed independently per scenario.")
