"""
Calibration constants for the UBI feasibility model.

All figures describe the reference economy (Japan, FY2025 assumptions).
Aggregate money is in trillion yen; per-capita money is in yen.
"""

from dataclasses import dataclass


# One trillion yen, the unit used for GDP-scale figures
TRILLION_YEN = 1_000_000_000_000


@dataclass(frozen=True)
class BaseEconomy:
    """
    Reference-economy calibration.

    Provenance:
    - base_gdp: nominal GDP of roughly 600 trillion yen (Cabinet Office, FY2025 outlook)
    - population: 125 million residents
    - social_insurance_amount: current social insurance contributions, 82.2 trillion yen
    - consumption_propensity: share of GDP reaching the consumption tax base
    - asset_to_gdp_ratio: taxable property stock as a multiple of GDP
    - average_social_security_benefit: typical existing annual benefit per recipient (~1M yen)
    """
    base_gdp: float = 600.0
    population: int = 125_000_000
    social_insurance_amount: float = 82.2
    consumption_propensity: float = 0.6
    asset_to_gdp_ratio: float = 2.0
    average_social_security_benefit: float = 1_000_000.0
    large_unit: float = TRILLION_YEN

    def to_large_unit(self, yen: float) -> float:
        """Convert yen to trillion yen."""
        return yen / self.large_unit

    def per_capita(self, trillion_yen: float) -> float:
        """Spread an aggregate (trillion yen) across the population, in yen."""
        return trillion_yen * self.large_unit / self.population


BASE_ECONOMY = BaseEconomy()

# Fixed-point passes used to settle UBI against social-security savings
DEFAULT_FIXED_POINT_ITERATIONS = 5
