"""
Results summary tab renderer.
"""

from __future__ import annotations

from typing import Any

import plotly.graph_objects as go

from ubi_model.reporting import format_currency, format_number


def render_results_summary_tab(st_module: Any, result_data: dict[str, Any]) -> None:
    """
    Render the headline payment, fiscal position, and revenue breakdown.
    """
    result = result_data["result"]
    trace = result_data.get("trace")

    if result.is_feasible:
        amount_html = f'<p class="ubi-amount positive-impact">¥{format_currency(result.monthly_ubi)}</p>'
        subline = f"Annual ¥{format_currency(result.annual_ubi)}"
    else:
        amount_html = '<p class="ubi-amount negative-impact">¥0</p>'
        subline = "Government cost exceeds revenue under these settings; no UBI can be paid."

    st_module.markdown(
        f"""
        <div class="ubi-card">
            <h3 style="margin:0; color: #555;">Monthly UBI (nominal)</h3>
            {amount_html}
            <p style="margin:0; color: #666;">{subline}</p>
        </div>
        """,
        unsafe_allow_html=True,
    )

    if result.is_feasible and result.inflation_rate > 0:
        c1, c2, c3 = st_module.columns(3)
        with c1:
            st_module.metric("Induced Inflation", f"{format_number(result.inflation_rate)}%")
        with c2:
            st_module.metric("Real Monthly UBI", f"¥{format_currency(result.real_monthly_ubi)}")
        with c3:
            st_module.metric("Real Annual UBI", f"¥{format_currency(result.real_annual_ubi)}")

    col_metrics, col_chart = st_module.columns([1, 1])

    with col_metrics:
        st_module.subheader("📊 Fiscal Position (trillion yen)")
        rows = [
            ("Productivity coefficient (γ)", format_number(result.productivity_coefficient, 3)),
            ("Adjusted GDP", format_number(result.adjusted_gdp)),
            ("Adjusted tax revenue", format_number(result.adjusted_tax_revenue)),
            ("Fiscal deficit (bonds)", format_number(result.fiscal_deficit)),
            ("Total revenue (tax + deficit)", format_number(result.total_revenue)),
            ("Net surplus", format_number(result.net_surplus)),
        ]
        if result.is_feasible:
            rows.append(("Total UBI payment", format_number(result.total_ubi_payment)))
            rows.append(("Social security savings", format_number(result.social_security_reduction)))
        rows.append(("Social insurance left on citizens", format_number(result.social_insurance_burden)))
        rows.append(("Total revenue (% of GDP)", f"{format_number(result.gdp_ratios.total_revenue)}%"))

        st_module.table({"Item": [r[0] for r in rows], "Value": [r[1] for r in rows]})

        if trace is not None:
            converged = "" if trace.converged is None else (" (converged)" if trace.converged else " (not converged)")
            st_module.caption(f"Fixed-point passes: {trace.iterations}{converged}")

    with col_chart:
        st_module.subheader("🧾 Revenue Breakdown")
        b = result.revenue_breakdown
        fig = go.Figure(
            go.Bar(
                x=["Personal", "Corporate", "Consumption", "Property"],
                y=[b.personal, b.corporate, b.consumption, b.property],
                marker_color=["#1f77b4", "#ff7f0e", "#2ca02c", "#9467bd"],
                text=[f"{v:.1f}T" for v in (b.personal, b.corporate, b.consumption, b.property)],
                textposition="outside",
            )
        )
        fig.update_layout(yaxis_title="Trillion yen", showlegend=False, height=400)
        st_module.plotly_chart(fig, use_container_width=True)
