"""
Result records and result shaping.

The estimator works in unrounded floats; shape_result() turns an
EstimateTrace into the display-ready UBIResult. Rounding differs per field:

- per-capita yen figures: whole yen
- trillion-yen aggregates: one decimal
- ratios and the inflation rate: percent, one decimal
- productivity coefficient: three decimals

Non-finite values (e.g. from a zero GDP) are normalised to zero first.
Nothing here feeds back into the computation.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Any, Dict

import pandas as pd

if TYPE_CHECKING:
    from .estimator import EstimateTrace


def finite_or_zero(value: float) -> float:
    """Replace NaN and +/-inf with 0.0."""
    if value is None or not math.isfinite(value):
        return 0.0
    return float(value)


def round_half_up(value: float, decimals: int = 0) -> float:
    """
    Round with halves going towards +inf (2.5 -> 3, -2.5 -> -2).

    Python's round() uses banker's rounding, which would make the
    published figures depend on parity.
    """
    value = finite_or_zero(value)
    scale = 10 ** decimals
    return math.floor(value * scale + 0.5) / scale


def to_whole_yen(value: float) -> int:
    return int(round_half_up(value, 0))


def to_tenth(value: float) -> float:
    return round_half_up(value, 1)


def to_percent(ratio: float) -> float:
    """Fraction to percent with one decimal (0.1234 -> 12.3)."""
    return round_half_up(finite_or_zero(ratio) * 100, 1)


@dataclass(frozen=True)
class RevenueBreakdown:
    """Calibrated tax revenue per base (trillion yen). Sums to adjusted tax revenue."""
    personal: float
    corporate: float
    consumption: float
    property: float

    @property
    def total(self) -> float:
        return self.personal + self.corporate + self.consumption + self.property


@dataclass(frozen=True)
class GDPRatios:
    """Aggregates as a percent of adjusted GDP."""
    total_revenue: float
    net_surplus: float


@dataclass(frozen=True)
class UBIResult:
    """
    Display-ready estimate.

    Per-capita fields are yen, aggregates are trillion yen,
    inflation_rate and gdp_ratios are percent.
    """
    monthly_ubi: int
    annual_ubi: int
    real_monthly_ubi: int
    real_annual_ubi: int

    adjusted_gdp: float
    adjusted_tax_revenue: float
    fiscal_deficit: float
    total_revenue: float
    net_surplus: float
    revenue_breakdown: RevenueBreakdown
    gdp_ratios: GDPRatios

    social_security_reduction: float
    total_ubi_payment: float
    social_insurance_burden: float

    productivity_coefficient: float
    inflation_rate: float

    @property
    def is_feasible(self) -> bool:
        """True when the surplus supports a positive payment."""
        return self.monthly_ubi > 0

    def to_dict(self) -> Dict[str, Any]:
        """Nested camelCase mapping for export to the presentation layer."""
        return {
            "monthlyUBI": self.monthly_ubi,
            "annualUBI": self.annual_ubi,
            "totalRevenue": self.total_revenue,
            "netSurplus": self.net_surplus,
            "adjustedTaxRevenue": self.adjusted_tax_revenue,
            "fiscalDeficit": self.fiscal_deficit,
            "revenueBreakdown": asdict(self.revenue_breakdown),
            "gdpRatios": {
                "totalRevenue": self.gdp_ratios.total_revenue,
                "netSurplus": self.gdp_ratios.net_surplus,
            },
            "inflationRate": self.inflation_rate,
            "realMonthlyUBI": self.real_monthly_ubi,
            "realAnnualUBI": self.real_annual_ubi,
            "productivityCoefficient": self.productivity_coefficient,
            "adjustedGDP": self.adjusted_gdp,
            "socialSecurityReduction": self.social_security_reduction,
            "totalUBIPayment": self.total_ubi_payment,
            "socialInsuranceBurden": self.social_insurance_burden,
        }

    def to_series(self) -> pd.Series:
        """Flat series for tabular display (nested keys joined with '.')."""
        flat: Dict[str, Any] = {}
        for key, value in self.to_dict().items():
            if isinstance(value, dict):
                for sub_key, sub_value in value.items():
                    flat[f"{key}.{sub_key}"] = sub_value
            else:
                flat[key] = value
        return pd.Series(flat)


def shape_result(trace: "EstimateTrace") -> UBIResult:
    """Apply the per-field rounding policy to an unrounded trace."""
    # Monthly is derived from the unrounded annual figure, then rounded on its own
    annual = finite_or_zero(trace.annual_ubi_per_person)
    real_annual = finite_or_zero(trace.real_annual_ubi)

    return UBIResult(
        monthly_ubi=to_whole_yen(annual / 12),
        annual_ubi=to_whole_yen(annual),
        real_monthly_ubi=to_whole_yen(real_annual / 12),
        real_annual_ubi=to_whole_yen(real_annual),
        adjusted_gdp=to_tenth(trace.gdp),
        adjusted_tax_revenue=to_tenth(trace.adjusted_tax_revenue),
        fiscal_deficit=to_tenth(trace.fiscal_deficit),
        total_revenue=to_tenth(trace.total_revenue),
        net_surplus=to_tenth(trace.net_surplus),
        revenue_breakdown=RevenueBreakdown(
            personal=to_tenth(trace.revenue_personal * trace.tax_adjustment_factor),
            corporate=to_tenth(trace.revenue_corporate * trace.tax_adjustment_factor),
            consumption=to_tenth(trace.revenue_consumption * trace.tax_adjustment_factor),
            property=to_tenth(trace.revenue_property * trace.tax_adjustment_factor),
        ),
        gdp_ratios=GDPRatios(
            total_revenue=to_percent(trace.total_revenue_to_gdp),
            net_surplus=to_percent(trace.net_surplus_to_gdp),
        ),
        social_security_reduction=to_tenth(trace.social_security_reduction),
        total_ubi_payment=to_tenth(trace.total_ubi_payment),
        social_insurance_burden=to_tenth(trace.social_insurance_burden),
        productivity_coefficient=round_half_up(trace.productivity_coefficient, 3),
        inflation_rate=to_percent(trace.inflation_rate),
    )
