"""
UBI Feasibility Model

Estimates the universal basic income a government could pay under a
parameterized single-period model of an AI-transformed economy.
"""

from .constants import BASE_ECONOMY, BaseEconomy, TRILLION_YEN
from .parameters import (
    UBIParameters,
    PARAMETER_RANGES,
    PARAMETER_SPECS,
    ParameterSpec,
    InvalidParameter,
    ParameterValidationError,
    find_invalid_parameters,
    validate_parameters,
)
from .results import UBIResult, RevenueBreakdown, GDPRatios
from .estimator import UBIEstimator, EstimateTrace, estimate, calculate_ubi, solve
from .scenarios import (
    PRESET_SCENARIOS,
    SCENARIO_ORDER,
    DEFAULT_SCENARIO,
    ScenarioPreset,
    get_scenario,
    get_scenario_params,
)
from .comparison import compare_scenarios
from .sensitivity import UncertaintyAnalysis, UncertaintyFactors, SensitivityResult
from .reporting import UBIReport, format_currency, format_number, plot_scenario_comparison

__version__ = "1.0.0"
__all__ = [
    "BASE_ECONOMY",
    "BaseEconomy",
    "TRILLION_YEN",
    "UBIParameters",
    "PARAMETER_RANGES",
    "PARAMETER_SPECS",
    "ParameterSpec",
    "InvalidParameter",
    "ParameterValidationError",
    "find_invalid_parameters",
    "validate_parameters",
    "UBIResult",
    "RevenueBreakdown",
    "GDPRatios",
    "UBIEstimator",
    "EstimateTrace",
    "estimate",
    "calculate_ubi",
    "solve",
    "PRESET_SCENARIOS",
    "SCENARIO_ORDER",
    "DEFAULT_SCENARIO",
    "ScenarioPreset",
    "get_scenario",
    "get_scenario_params",
    "compare_scenarios",
    "UncertaintyAnalysis",
    "UncertaintyFactors",
    "SensitivityResult",
    "UBIReport",
    "format_currency",
    "format_number",
    "plot_scenario_comparison",
]
