"""
Preset scenarios for the UBI estimator.

Four named parameter sets, ordered by increasing AI substitution:
current -> moderate -> advanced -> proposed.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

from .parameters import UBIParameters


@dataclass(frozen=True)
class ScenarioPreset:
    """A named starting point for exploration."""
    key: str
    name: str
    description: str
    params: UBIParameters


# =============================================================================
# PRESET CATALOG
# =============================================================================

PRESET_SCENARIOS: Dict[str, ScenarioPreset] = {
    "current": ScenarioPreset(
        key="current",
        name="Current (2025)",
        description="Calibrated to FY2025 revenue and spending",
        params=UBIParameters(
            alpha=0.05,
            beta=0.20,
            gamma=1.0,
            tax_personal=0.08,
            tax_corporate=0.30,
            tax_consumption=0.10,
            tax_property=0.017,
            social_cost_ratio=0.327,         # 196T expenditure / 600T GDP
            gdp_per_capita_multiplier=1.0,
            social_insurance_ratio=1.0,      # Status quo
            tax_adjustment_factor=0.905,     # 136.1T modeled -> 123.2T observed
            fiscal_deficit_ratio=0.048,      # 28.7T / 600T GDP
            fixed_cost_ratio=0.129,          # 77.1T / 600T GDP
            social_security_reduction_rate=0.5,
            inflation_sensitivity=0.2,
            tax_sensitivity=0.3,
        ),
    ),
    "moderate": ScenarioPreset(
        key="moderate",
        name="Moderate AI Progress",
        description="Partial automation, half of social insurance moved onto taxes",
        params=UBIParameters(
            alpha=0.30,
            beta=0.50,
            gamma=1.3,
            tax_personal=0.20,
            tax_corporate=0.50,
            tax_consumption=0.12,
            tax_property=0.02,
            social_cost_ratio=0.30,
            gdp_per_capita_multiplier=1.2,
            social_insurance_ratio=0.5,
            tax_adjustment_factor=0.95,      # Better collection after reform
            fiscal_deficit_ratio=0.02,
            fixed_cost_ratio=0.12,
            social_security_reduction_rate=0.6,
            inflation_sensitivity=0.2,
            tax_sensitivity=0.3,
        ),
    ),
    "advanced": ScenarioPreset(
        key="advanced",
        name="Advanced AI Progress",
        description="Majority automation, primary balance restored",
        params=UBIParameters(
            alpha=0.60,
            beta=0.70,
            gamma=1.6,
            tax_personal=0.15,
            tax_corporate=0.70,
            tax_consumption=0.15,
            tax_property=0.025,
            social_cost_ratio=0.25,
            gdp_per_capita_multiplier=1.5,
            social_insurance_ratio=0.2,
            tax_adjustment_factor=1.0,
            fiscal_deficit_ratio=0.0,
            fixed_cost_ratio=0.10,
            social_security_reduction_rate=0.7,
            inflation_sensitivity=0.2,
            tax_sensitivity=0.3,
        ),
    ),
    "proposed": ScenarioPreset(
        key="proposed",
        name="Proposed Case",
        description="Near-full automation with social insurance fully tax-financed",
        params=UBIParameters(
            alpha=0.80,
            beta=0.80,
            gamma=1.8,
            tax_personal=0.10,
            tax_corporate=0.80,
            tax_consumption=0.15,
            tax_property=0.03,
            social_cost_ratio=0.20,
            gdp_per_capita_multiplier=1.8,
            social_insurance_ratio=0.0,
            tax_adjustment_factor=1.0,
            fiscal_deficit_ratio=0.0,
            fixed_cost_ratio=0.08,
            social_security_reduction_rate=0.8,
            inflation_sensitivity=0.2,
            tax_sensitivity=0.3,
        ),
    ),
}

SCENARIO_ORDER: Tuple[str, ...] = ("current", "moderate", "advanced", "proposed")

DEFAULT_SCENARIO = "current"


def get_scenario(key: str) -> ScenarioPreset:
    if key not in PRESET_SCENARIOS:
        raise KeyError(f"Unknown scenario '{key}'. Available: {', '.join(SCENARIO_ORDER)}")
    return PRESET_SCENARIOS[key]


def get_scenario_params(key: str) -> UBIParameters:
    return get_scenario(key).params
