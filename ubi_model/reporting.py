"""
Reporting and Visualization Module

Formats estimates for people: NaN/inf-safe number formatting, a plain-text
report, and matplotlib figures for the revenue mix and scenario comparison.
"""

import math
from typing import Optional

import matplotlib.pyplot as plt
import matplotlib.ticker as mticker
import pandas as pd

from .parameters import PARAMETER_SPECS, UBIParameters
from .results import UBIResult


def format_currency(value: float) -> str:
    """Whole yen with thousands separators; "0" for NaN or infinity."""
    if value is None or not math.isfinite(value):
        return "0"
    return f"{value:,.0f}"


def format_number(value: float, decimals: int = 1) -> str:
    """Fixed decimals; zero at the same precision for NaN or infinity."""
    if value is None or not math.isfinite(value):
        return f"{0:.{decimals}f}"
    return f"{value:.{decimals}f}"


class UBIReport:
    """
    Generate text and chart reports for one estimate.
    """

    def __init__(self,
                 result: UBIResult,
                 params: Optional[UBIParameters] = None,
                 scenario_name: Optional[str] = None):
        self.result = result
        self.params = params
        self.scenario_name = scenario_name or "Custom"

    def generate_text_report(self) -> str:
        """Generate a detailed text report."""
        r = self.result
        lines = []

        lines.append("=" * 60)
        lines.append("UBI FEASIBILITY REPORT")
        lines.append("=" * 60)
        lines.append(f"Scenario: {self.scenario_name}")
        lines.append("")

        lines.append("PAYMENT (yen per person)")
        lines.append("-" * 40)
        if r.is_feasible:
            lines.append(f"Monthly UBI (nominal):   {format_currency(r.monthly_ubi):>16}")
            lines.append(f"Annual UBI (nominal):    {format_currency(r.annual_ubi):>16}")
            lines.append(f"Monthly UBI (real):      {format_currency(r.real_monthly_ubi):>16}")
            lines.append(f"Annual UBI (real):       {format_currency(r.real_annual_ubi):>16}")
            lines.append(f"Induced inflation:       {format_number(r.inflation_rate):>15}%")
        else:
            lines.append("No UBI can be paid: government cost exceeds revenue.")
        lines.append("")

        lines.append("FISCAL POSITION (trillion yen)")
        lines.append("-" * 40)
        lines.append(f"Productivity coefficient:{format_number(r.productivity_coefficient, 3):>16}")
        lines.append(f"Adjusted GDP:            {format_number(r.adjusted_gdp):>16}")
        lines.append(f"Adjusted tax revenue:    {format_number(r.adjusted_tax_revenue):>16}")
        lines.append(f"Fiscal deficit:          {format_number(r.fiscal_deficit):>16}")
        lines.append(f"Total revenue:           {format_number(r.total_revenue):>16}")
        lines.append(f"Net surplus:             {format_number(r.net_surplus):>16}")
        if r.is_feasible:
            lines.append(f"Total UBI payment:       {format_number(r.total_ubi_payment):>16}")
            lines.append(f"Social security savings: {format_number(r.social_security_reduction):>16}")
        lines.append(f"Revenue / GDP:           {format_number(r.gdp_ratios.total_revenue):>15}%")
        lines.append(f"Surplus / GDP:           {format_number(r.gdp_ratios.net_surplus):>15}%")
        lines.append("")

        lines.append("REVENUE BREAKDOWN (trillion yen)")
        lines.append("-" * 40)
        b = r.revenue_breakdown
        lines.append(f"Personal income tax:     {format_number(b.personal):>16}")
        lines.append(f"Corporate tax:           {format_number(b.corporate):>16}")
        lines.append(f"Consumption tax:         {format_number(b.consumption):>16}")
        lines.append(f"Property tax:            {format_number(b.property):>16}")
        lines.append("")

        if self.params is not None:
            lines.append("PARAMETERS")
            lines.append("-" * 40)
            for name, value in self.params.to_snake_dict().items():
                spec = PARAMETER_SPECS[name]
                shown = spec.display_value(value)
                lines.append(f"{spec.label:<36}{shown:>10.2f}{spec.unit}")
            lines.append("")

        return "\n".join(lines)

    def breakdown_frame(self) -> pd.DataFrame:
        b = self.result.revenue_breakdown
        return pd.DataFrame({
            "source": ["Personal", "Corporate", "Consumption", "Property"],
            "revenue": [b.personal, b.corporate, b.consumption, b.property],
        })

    def plot_revenue_breakdown(self,
                               save_path: Optional[str] = None,
                               show: bool = True) -> plt.Figure:
        """
        Bar chart of revenue by base next to the funding/cost balance.
        """
        r = self.result
        fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(12, 5))
        fig.suptitle(f"UBI Feasibility: {self.scenario_name}", fontsize=14, fontweight='bold')

        frame = self.breakdown_frame()
        ax1.bar(frame["source"], frame["revenue"], color=['#1f77b4', '#ff7f0e', '#2ca02c', '#9467bd'])
        ax1.set_ylabel('Trillion yen')
        ax1.set_title('Tax Revenue by Base')
        ax1.grid(True, alpha=0.3, axis='y')

        labels = ['Tax revenue', 'Deficit', 'Net surplus']
        values = [r.adjusted_tax_revenue, r.fiscal_deficit, r.net_surplus]
        colors = ['#1f77b4', '#d62728', '#28a745' if r.net_surplus > 0 else '#dc3545']
        ax2.bar(labels, values, color=colors, alpha=0.8)
        ax2.axhline(y=0, color='black', linestyle='-', linewidth=0.5)
        ax2.set_ylabel('Trillion yen')
        ax2.set_title('Funding and Surplus')
        ax2.grid(True, alpha=0.3, axis='y')

        plt.tight_layout()
        if save_path:
            fig.savefig(save_path, dpi=150, bbox_inches='tight')
        if show:
            plt.show()
        return fig


def plot_scenario_comparison(frame: pd.DataFrame,
                             save_path: Optional[str] = None,
                             show: bool = True) -> plt.Figure:
    """
    Horizontal bars of monthly UBI per scenario (output of compare_scenarios).

    Bar lengths follow bar_width_pct so small payments stay visible; labels
    carry the yen amount.
    """
    fig, ax = plt.subplots(figsize=(10, 1.2 + 0.8 * len(frame)))
    colors = ['#28a745' if v > 0 else '#dc3545' for v in frame["monthly_ubi"]]
    bars = ax.barh(frame["name"], frame["bar_width_pct"], color=colors)
    ax.bar_label(bars, labels=[f"¥{format_currency(v)}" for v in frame["monthly_ubi"]], padding=3)
    ax.invert_yaxis()
    ax.set_xlim(0, 100)
    ax.set_xlabel('Share of largest monthly UBI')
    ax.set_title('Scenario Comparison')
    ax.xaxis.set_major_formatter(mticker.PercentFormatter(xmax=100))
    ax.grid(True, alpha=0.3, axis='x')

    plt.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches='tight')
    if show:
        plt.show()
    return fig
