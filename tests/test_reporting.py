"""
Tests for number formatting, text reports, and charts.
"""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pandas as pd
import pytest

from ubi_model import UBIReport, compare_scenarios, estimate, format_currency, format_number
from ubi_model.comparison import MIN_BAR_WIDTH_PCT, bar_widths
from ubi_model.reporting import plot_scenario_comparison


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


class TestFormatting:

    @pytest.mark.parametrize("value,expected", [
        (1234567, "1,234,567"),
        (0, "0"),
        (707056.6, "707,057"),
        (float("nan"), "0"),
        (float("inf"), "0"),
        (float("-inf"), "0"),
    ])
    def test_format_currency(self, value, expected):
        assert format_currency(value) == expected

    def test_format_number(self):
        assert format_number(383.2) == "383.2"
        assert format_number(0.91, 3) == "0.910"
        assert format_number(float("nan")) == "0.0"
        assert format_number(float("inf"), 3) == "0.000"


class TestTextReport:

    def test_feasible_report(self, proposed_params):
        result = estimate(proposed_params)
        report = UBIReport(result, params=proposed_params, scenario_name="Proposed Case").generate_text_report()

        assert "UBI FEASIBILITY REPORT" in report
        assert "Scenario: Proposed Case" in report
        assert format_currency(result.monthly_ubi) in report
        assert "AI Labor Substitution" in report
        assert "No UBI can be paid" not in report

    def test_infeasible_report(self, current_params):
        report = UBIReport(estimate(current_params)).generate_text_report()

        assert "Scenario: Custom" in report
        assert "No UBI can be paid: government cost exceeds revenue." in report
        assert "PARAMETERS" not in report

    def test_breakdown_frame(self, moderate_params):
        result = estimate(moderate_params)
        frame = UBIReport(result).breakdown_frame()
        assert list(frame["source"]) == ["Personal", "Corporate", "Consumption", "Property"]
        assert frame["revenue"].sum() == pytest.approx(result.revenue_breakdown.total)


class TestCharts:

    def test_revenue_breakdown_chart(self, moderate_params, tmp_path):
        path = tmp_path / "breakdown.png"
        fig = UBIReport(estimate(moderate_params), scenario_name="Moderate").plot_revenue_breakdown(
            save_path=str(path), show=False
        )
        assert len(fig.axes) == 2
        assert path.exists()

    def test_scenario_comparison_chart(self):
        frame = compare_scenarios()
        fig = plot_scenario_comparison(frame, show=False)
        ax = fig.axes[0]
        assert len(ax.patches) == len(frame)

    def test_scenario_comparison_uses_bar_widths(self):
        frame = pd.DataFrame({
            "name": ["None", "Small", "Large"],
            "monthly_ubi": [0, 1, 1000],
        })
        frame["bar_width_pct"] = bar_widths(frame["monthly_ubi"].astype(float))

        fig = plot_scenario_comparison(frame, show=False)
        ax = fig.axes[0]
        widths = [patch.get_width() for patch in ax.patches]

        assert widths == pytest.approx([0.0, MIN_BAR_WIDTH_PCT, 100.0])
        assert ax.get_xlim() == (0, 100)
        assert [text.get_text() for text in ax.texts] == ["¥0", "¥1", "¥1,000"]
