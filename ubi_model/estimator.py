"""
UBI Feasibility Estimator

Derives GDP, tax revenue and government cost from a UBIParameters record
and distributes the remaining fiscal surplus as a flat per-capita payment.

Pipeline:
    UBIParameters -> productivity & GDP -> revenue by base -> costs
                  -> fixed-point (UBI <-> social-security savings)
                  -> inflation & real purchasing power -> UBIResult

The UBI/social-security interaction is circular: a larger payment displaces
more legacy social-security spending, which enlarges the surplus, which
enlarges the payment. It is resolved with a fixed number of substitution
passes (five by default). An optional tolerance mode iterates the same
update rule until the step falls below a threshold.

Estimates are pure: no I/O, no shared state, safe to call concurrently.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .constants import BASE_ECONOMY, DEFAULT_FIXED_POINT_ITERATIONS, BaseEconomy
from .parameters import UBIParameters
from .results import UBIResult, shape_result

logger = logging.getLogger(__name__)


def _divide(numerator: float, denominator: float) -> float:
    """IEEE division: x/0 gives +/-inf and 0/0 gives nan instead of raising."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))


@dataclass(frozen=True)
class EstimateTrace:
    """
    Unrounded intermediate figures of one estimate.

    Aggregates are trillion yen, per-capita figures yen, rates fractions.
    """
    productivity_coefficient: float
    gdp: float
    labor_income: float
    capital_income: float

    # Gross (uncalibrated) revenue per base
    revenue_personal: float
    revenue_corporate: float
    revenue_consumption: float
    revenue_property: float
    theoretical_revenue: float
    tax_adjustment_factor: float
    adjusted_tax_revenue: float

    fiscal_deficit: float
    total_revenue: float

    fixed_cost: float
    social_insurance_burden: float
    social_insurance_from_tax: float
    base_social_security_cost: float
    social_security_cost: float
    social_security_path: Tuple[float, ...]
    iterations: int
    converged: Optional[bool]

    net_surplus: float
    annual_ubi_per_person: float
    total_ubi_payment: float
    inflation_rate: float
    real_annual_ubi: float

    @property
    def total_cost(self) -> float:
        """Government cost of the final pass (fixed + social security + insurance)."""
        return self.total_revenue - self.net_surplus

    @property
    def social_security_reduction(self) -> float:
        return self.base_social_security_cost - self.social_security_cost

    @property
    def monthly_ubi_per_person(self) -> float:
        return self.annual_ubi_per_person / 12

    @property
    def real_monthly_ubi(self) -> float:
        return self.real_annual_ubi / 12

    @property
    def total_revenue_to_gdp(self) -> float:
        return _divide(self.total_revenue, self.gdp)

    @property
    def net_surplus_to_gdp(self) -> float:
        return _divide(self.net_surplus, self.gdp)

    @property
    def final_step(self) -> float:
        """Change in social-security cost made by the last pass."""
        if len(self.social_security_path) < 2:
            return 0.0
        return abs(self.social_security_path[-1] - self.social_security_path[-2])


class UBIEstimator:
    """
    Single-period UBI feasibility estimator.

    Args:
        economy: Reference-economy calibration constants
        iterations: Fixed number of fixed-point passes (used when tolerance is None)
        tolerance: If set, iterate until the social-security step is below this
                   value (trillion yen) or max_iterations is reached
        max_iterations: Cap for tolerance mode
    """

    def __init__(self,
                 economy: BaseEconomy = BASE_ECONOMY,
                 iterations: int = DEFAULT_FIXED_POINT_ITERATIONS,
                 tolerance: Optional[float] = None,
                 max_iterations: int = 100):
        if iterations < 1:
            raise ValueError("iterations must be at least 1")
        if tolerance is not None and tolerance <= 0:
            raise ValueError("tolerance must be positive")
        if max_iterations < 1:
            raise ValueError("max_iterations must be at least 1")
        self.economy = economy
        self.iterations = iterations
        self.tolerance = tolerance
        self.max_iterations = max_iterations

    def estimate(self, params: UBIParameters) -> UBIResult:
        """Compute the display-ready result for one parameter record."""
        return shape_result(self.solve(params))

    def solve(self, params: UBIParameters) -> EstimateTrace:
        """Compute all unrounded figures for one parameter record."""
        economy = self.economy

        # 1-2. Productivity net of the corporate-tax penalty, and scaled GDP
        productivity = params.gamma * (1 - params.tax_sensitivity * params.tax_corporate)
        gdp = economy.base_gdp * params.gdp_per_capita_multiplier * productivity

        # 3. Complementary income slices of GDP
        labor_income = gdp * (1 - params.alpha) * (1 - params.beta)
        capital_income = gdp * (params.alpha + (1 - params.alpha) * params.beta)

        # 4. Gross revenue per base
        revenue_personal = labor_income * params.tax_personal
        revenue_corporate = capital_income * params.tax_corporate
        revenue_consumption = gdp * economy.consumption_propensity * params.tax_consumption
        revenue_property = gdp * economy.asset_to_gdp_ratio * params.tax_property
        theoretical_revenue = (revenue_personal + revenue_corporate
                               + revenue_consumption + revenue_property)

        # 5-6. Calibration and deficit financing
        adjusted_tax_revenue = theoretical_revenue * params.tax_adjustment_factor
        fiscal_deficit = gdp * params.fiscal_deficit_ratio
        total_revenue = adjusted_tax_revenue + fiscal_deficit

        # 7-9. Cost components
        fixed_cost = gdp * params.fixed_cost_ratio
        social_insurance_base = economy.social_insurance_amount * params.gdp_per_capita_multiplier
        social_insurance_burden = social_insurance_base * params.social_insurance_ratio
        social_insurance_from_tax = social_insurance_base * (1 - params.social_insurance_ratio)
        base_social_security_cost = gdp * (params.social_cost_ratio - params.fixed_cost_ratio)

        # 10. Fixed-point resolution
        (social_security_cost, path, iterations, converged,
         net_surplus, annual_ubi) = self._resolve_social_security(
            params=params,
            total_revenue=total_revenue,
            fixed_cost=fixed_cost,
            social_insurance_from_tax=social_insurance_from_tax,
            base_social_security_cost=base_social_security_cost,
        )

        # 11-12. Inflation and real purchasing power
        total_ubi_payment = economy.to_large_unit(annual_ubi * economy.population)
        inflation_rate = params.inflation_sensitivity * _divide(total_ubi_payment, gdp)
        real_annual_ubi = _divide(annual_ubi, 1 + inflation_rate)

        return EstimateTrace(
            productivity_coefficient=productivity,
            gdp=gdp,
            labor_income=labor_income,
            capital_income=capital_income,
            revenue_personal=revenue_personal,
            revenue_corporate=revenue_corporate,
            revenue_consumption=revenue_consumption,
            revenue_property=revenue_property,
            theoretical_revenue=theoretical_revenue,
            tax_adjustment_factor=params.tax_adjustment_factor,
            adjusted_tax_revenue=adjusted_tax_revenue,
            fiscal_deficit=fiscal_deficit,
            total_revenue=total_revenue,
            fixed_cost=fixed_cost,
            social_insurance_burden=social_insurance_burden,
            social_insurance_from_tax=social_insurance_from_tax,
            base_social_security_cost=base_social_security_cost,
            social_security_cost=social_security_cost,
            social_security_path=path,
            iterations=iterations,
            converged=converged,
            net_surplus=net_surplus,
            annual_ubi_per_person=annual_ubi,
            total_ubi_payment=total_ubi_payment,
            inflation_rate=inflation_rate,
            real_annual_ubi=real_annual_ubi,
        )

    def _resolve_social_security(self,
                                 params: UBIParameters,
                                 total_revenue: float,
                                 fixed_cost: float,
                                 social_insurance_from_tax: float,
                                 base_social_security_cost: float):
        """
        Substitute UBI size and social-security cost into each other.

        Each pass prices the current social-security cost, derives the UBI the
        surplus allows (floored at zero), and shrinks the reducible base in
        proportion to how close that UBI comes to the average benefit.

        Returns:
            (social_security_cost, path, passes, converged, net_surplus, annual_ubi)
            where net_surplus and annual_ubi come from the last pass and
            social_security_cost is the value after its update.
        """
        economy = self.economy
        tolerance_mode = self.tolerance is not None
        limit = self.max_iterations if tolerance_mode else self.iterations

        social_security_cost = base_social_security_cost
        path = [social_security_cost]
        net_surplus = 0.0
        annual_ubi = 0.0
        converged: Optional[bool] = False if tolerance_mode else None

        for i in range(limit):
            total_cost = fixed_cost + social_security_cost + social_insurance_from_tax
            net_surplus = total_revenue - total_cost

            # A deficit never yields a negative payment
            annual_ubi = economy.per_capita(net_surplus) if net_surplus > 0 else 0.0

            reduction_factor = min(
                _divide(annual_ubi, economy.average_social_security_benefit), 1.0
            )
            actual_reduction_rate = reduction_factor * params.social_security_reduction_rate
            next_cost = base_social_security_cost * (1 - actual_reduction_rate)

            step = abs(next_cost - social_security_cost)
            social_security_cost = next_cost
            path.append(social_security_cost)

            logger.debug(
                f"Pass {i + 1}: surplus={net_surplus:.3f}T, ubi={annual_ubi:,.0f}/yr, "
                f"social security={social_security_cost:.3f}T"
            )

            if tolerance_mode and step < self.tolerance:
                converged = True
                break

        if tolerance_mode and not converged:
            logger.warning(
                f"Social-security fixed point did not settle within {limit} passes "
                f"(last step {path[-1] - path[-2]:+.6f}T)"
            )

        return social_security_cost, tuple(path), len(path) - 1, converged, net_surplus, annual_ubi


_DEFAULT_ESTIMATOR = UBIEstimator()


def estimate(params: UBIParameters) -> UBIResult:
    """Estimate the feasible UBI with the default calibration and five passes."""
    return _DEFAULT_ESTIMATOR.estimate(params)


def calculate_ubi(params: UBIParameters) -> UBIResult:
    """Alias of estimate()."""
    return estimate(params)


def solve(params: UBIParameters) -> EstimateTrace:
    """Unrounded trace with the default estimator."""
    return _DEFAULT_ESTIMATOR.solve(params)
