"""
Tests for result shaping: rounding policy, sanitization, and export formats.
"""

import math

import pandas as pd
import pytest

from ubi_model import estimate, solve
from ubi_model.results import (
    GDPRatios,
    RevenueBreakdown,
    finite_or_zero,
    round_half_up,
    shape_result,
    to_percent,
    to_tenth,
    to_whole_yen,
)


class TestRounding:

    @pytest.mark.parametrize("value,decimals,expected", [
        (2.5, 0, 3),
        (3.5, 0, 4),
        (-2.5, 0, -2),
        (2.4, 0, 2),
        (12.25, 1, 12.3),
        (0.1234, 3, 0.123),
    ])
    def test_round_half_up(self, value, decimals, expected):
        assert round_half_up(value, decimals) == pytest.approx(expected)

    def test_whole_yen_is_int(self):
        assert to_whole_yen(707056.6) == 707057
        assert isinstance(to_whole_yen(1.2), int)

    def test_tenth(self):
        assert to_tenth(383.20074) == pytest.approx(383.2)

    def test_percent(self):
        assert to_percent(0.14357) == pytest.approx(14.4)
        assert to_percent(0.0) == 0

    @pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf"), None])
    def test_non_finite_becomes_zero(self, bad):
        assert finite_or_zero(bad) == 0.0
        assert round_half_up(bad, 1) == 0.0
        assert to_percent(bad) == 0.0


class TestShapeResult:

    def test_monthly_from_unrounded_annual(self, proposed_params):
        trace = solve(proposed_params)
        result = shape_result(trace)
        assert result.monthly_ubi == math.floor(trace.annual_ubi_per_person / 12 + 0.5)
        assert result.annual_ubi == math.floor(trace.annual_ubi_per_person + 0.5)

    def test_breakdown_is_calibrated(self, current_params):
        trace = solve(current_params)
        result = shape_result(trace)
        assert result.revenue_breakdown.personal == pytest.approx(
            to_tenth(trace.revenue_personal * current_params.tax_adjustment_factor)
        )

    def test_ratios_are_percent(self, proposed_params):
        result = estimate(proposed_params)
        assert result.gdp_ratios.total_revenue == pytest.approx(
            100 * result.total_revenue / result.adjusted_gdp, abs=0.1
        )

    def test_productivity_three_decimals(self, current_params):
        assert estimate(current_params).productivity_coefficient == pytest.approx(0.91)


class TestExport:

    def test_to_dict_keys(self, moderate_params):
        data = estimate(moderate_params).to_dict()
        assert set(data) == {
            "monthlyUBI", "annualUBI", "totalRevenue", "netSurplus",
            "adjustedTaxRevenue", "fiscalDeficit", "revenueBreakdown", "gdpRatios",
            "inflationRate", "realMonthlyUBI", "realAnnualUBI",
            "productivityCoefficient", "adjustedGDP", "socialSecurityReduction",
            "totalUBIPayment", "socialInsuranceBurden",
        }
        assert set(data["revenueBreakdown"]) == {"personal", "corporate", "consumption", "property"}
        assert set(data["gdpRatios"]) == {"totalRevenue", "netSurplus"}

    def test_to_series_flattens(self, moderate_params):
        result = estimate(moderate_params)
        series = result.to_series()
        assert isinstance(series, pd.Series)
        assert series["revenueBreakdown.corporate"] == result.revenue_breakdown.corporate
        assert series["gdpRatios.netSurplus"] == result.gdp_ratios.net_surplus
        assert series["monthlyUBI"] == result.monthly_ubi

    def test_records_are_frozen(self, moderate_params):
        result = estimate(moderate_params)
        with pytest.raises(AttributeError):
            result.monthly_ubi = 1

    def test_breakdown_total(self):
        breakdown = RevenueBreakdown(personal=1.0, corporate=2.0, consumption=3.0, property=4.0)
        assert breakdown.total == pytest.approx(10.0)
        assert GDPRatios(total_revenue=50.0, net_surplus=10.0).net_surplus == 10.0
