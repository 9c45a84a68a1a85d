"""
Parameter record for the UBI estimator.

Contains:
- UBIParameters: the immutable input record
- PARAMETER_RANGES: documented semantic range of each field
- PARAMETER_SPECS: slider/label metadata used by the presentation layer
- find_invalid_parameters / validate_parameters: opt-in range pre-check
"""

import logging
import math
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, List, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UBIParameters:
    """
    Economic and policy levers for one estimate.

    All values are real numbers; ratios and rates are fractions (0.3 = 30%).
    Out-of-range values are accepted as-is by the estimator.
    """
    # AI and productivity
    alpha: float                    # Fraction of labor output displaced by AI
    beta: float                     # Fraction of productivity gains captured by capital
    gamma: float                    # Baseline productivity multiplier

    # Statutory tax rates
    tax_personal: float
    tax_corporate: float
    tax_consumption: float
    tax_property: float

    # Government spending
    social_cost_ratio: float        # Non-UBI government spending, share of GDP
    fixed_cost_ratio: float         # Irreducible part of social_cost_ratio

    # Economy scale and financing
    gdp_per_capita_multiplier: float
    social_insurance_ratio: float   # 0 = fully tax-financed, 1 = status quo
    tax_adjustment_factor: float    # Theoretical-to-observed tax yield
    fiscal_deficit_ratio: float     # New borrowing, share of GDP

    # Feedback elasticities
    social_security_reduction_rate: float
    inflation_sensitivity: float
    tax_sensitivity: float

    def to_dict(self) -> Dict[str, float]:
        """Flat camelCase field-to-number mapping."""
        return {SNAKE_TO_CAMEL[name]: float(value) for name, value in asdict(self).items()}

    def to_snake_dict(self) -> Dict[str, float]:
        return {name: float(value) for name, value in asdict(self).items()}

    def with_changes(self, **changes: float) -> "UBIParameters":
        """Copy with some fields replaced (snake_case or camelCase names)."""
        unknown = [key for key in changes if _normalize_key(key) is None]
        if unknown:
            raise TypeError(f"Unknown parameter(s): {', '.join(unknown)}")
        return replace(self, **{_normalize_key(key): value for key, value in changes.items()})

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Any],
        defaults: Optional["UBIParameters"] = None,
    ) -> "UBIParameters":
        """
        Build a record from a flat mapping.

        Accepts camelCase or snake_case keys. Unknown keys are dropped.
        Missing keys are taken from ``defaults``; without defaults every
        field must be present.
        """
        values: Dict[str, float] = defaults.to_snake_dict() if defaults is not None else {}
        dropped = []
        for key, value in data.items():
            name = _normalize_key(key)
            if name is None:
                dropped.append(key)
                continue
            values[name] = float(value)

        if dropped:
            logger.warning(f"Ignoring unknown parameter keys: {', '.join(sorted(dropped))}")

        missing = [name for name in FIELD_NAMES if name not in values]
        if missing:
            raise KeyError(f"Missing parameter(s): {', '.join(missing)}")

        return cls(**values)


FIELD_NAMES: Tuple[str, ...] = tuple(f.name for f in fields(UBIParameters))


def _to_camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


SNAKE_TO_CAMEL: Dict[str, str] = {name: _to_camel(name) for name in FIELD_NAMES}
CAMEL_TO_SNAKE: Dict[str, str] = {camel: snake for snake, camel in SNAKE_TO_CAMEL.items()}


def _normalize_key(key: str) -> Optional[str]:
    if key in SNAKE_TO_CAMEL:
        return key
    return CAMEL_TO_SNAKE.get(key)


# =============================================================================
# DOCUMENTED RANGES
# =============================================================================

PARAMETER_RANGES: Dict[str, Tuple[float, float]] = {
    "alpha": (0.0, 1.0),
    "beta": (0.0, 1.0),
    "gamma": (1.0, 2.0),
    "tax_personal": (0.0, 1.0),
    "tax_corporate": (0.0, 1.0),
    "tax_consumption": (0.0, 1.0),
    "tax_property": (0.0, 1.0),
    "social_cost_ratio": (0.0, 1.0),
    # Upper bound is social_cost_ratio; checked separately
    "fixed_cost_ratio": (0.0, 1.0),
    "gdp_per_capita_multiplier": (0.5, 3.0),
    "social_insurance_ratio": (0.0, 1.0),
    "tax_adjustment_factor": (0.5, 1.5),
    "fiscal_deficit_ratio": (0.0, 0.1),
    "social_security_reduction_rate": (0.0, 1.0),
    "inflation_sensitivity": (0.0, 1.0),
    "tax_sensitivity": (0.0, 1.0),
}


@dataclass(frozen=True)
class ParameterSpec:
    """Display metadata for one parameter."""
    label: str
    minimum: float
    maximum: float
    step: float
    unit: str = "%"
    multiplier: float = 100.0
    description: str = ""
    explanation: str = ""

    def display_value(self, value: float) -> float:
        return value * self.multiplier


PARAMETER_SPECS: Dict[str, ParameterSpec] = {
    "alpha": ParameterSpec(
        "AI Labor Substitution", 0.0, 1.0, 0.01,
        description="Share of human work taken over by AI",
        explanation=(
            "Fraction of labor output displaced by AI. Displaced output is earned "
            "as capital income, so a higher value shifts the tax base from personal "
            "income tax to corporate tax."
        ),
    ),
    "beta": ParameterSpec(
        "Capital Concentration", 0.0, 1.0, 0.01,
        description="How much of the productivity gain accrues to capital",
        explanation=(
            "Of the output still produced by human labor, the share captured by "
            "capital owners rather than paid out as wages."
        ),
    ),
    "gamma": ParameterSpec(
        "Productivity Gain", 1.0, 2.0, 0.1, unit="x", multiplier=1.0,
        description="AI-driven productivity multiplier",
        explanation=(
            "Baseline productivity multiplier before the corporate-tax penalty. "
            "The effective coefficient is gamma x (1 - tax sensitivity x corporate rate)."
        ),
    ),
    "gdp_per_capita_multiplier": ParameterSpec(
        "GDP per Capita Multiplier", 0.5, 3.0, 0.1, unit="x", multiplier=1.0,
        description="Scale relative to today's GDP per capita",
        explanation="Scales the reference GDP and the social insurance base.",
    ),
    "social_cost_ratio": ParameterSpec(
        "Social Maintenance Cost (% of GDP)", 0.1, 0.5, 0.01,
        description="Healthcare, pensions, defense and other non-UBI spending",
        explanation=(
            "Total non-UBI government spending as a share of GDP. FY2025 total "
            "expenditure of about 196 trillion yen is 32.7% of a 600 trillion yen GDP."
        ),
    ),
    "fixed_cost_ratio": ParameterSpec(
        "Fixed Cost Ratio (% of GDP)", 0.05, 0.3, 0.01,
        description="Spending UBI cannot replace (debt service, defense, public works)",
        explanation=(
            "Portion of the social maintenance cost that is immune to UBI. "
            "The remainder is the reducible social-security base."
        ),
    ),
    "social_security_reduction_rate": ParameterSpec(
        "Social Security Reduction Rate", 0.0, 1.0, 0.05,
        description="Share of reducible social security that UBI can displace",
        explanation=(
            "Maximum fraction of reducible social-security spending displaced once "
            "the UBI matches the average existing benefit (about 1M yen a year)."
        ),
    ),
    "social_insurance_ratio": ParameterSpec(
        "Social Insurance Retention", 0.0, 1.0, 0.1,
        description="0% = fully tax-financed, 100% = status quo",
        explanation=(
            "Share of current social insurance contributions left on citizens. "
            "The remainder must be financed from tax revenue."
        ),
    ),
    "tax_personal": ParameterSpec("Personal Income Tax", 0.0, 0.5, 0.01),
    "tax_corporate": ParameterSpec(
        "Corporate Tax", 0.0, 1.0, 0.01,
        explanation="Applied to capital income. Also dampens productivity through tax sensitivity.",
    ),
    "tax_consumption": ParameterSpec(
        "Consumption Tax", 0.0, 0.3, 0.01,
        explanation="Applied to 60% of GDP, the assumed propensity to consume.",
    ),
    "tax_property": ParameterSpec(
        "Property Tax", 0.0, 0.05, 0.001,
        explanation="Applied to an asset base of twice GDP.",
    ),
    "tax_adjustment_factor": ParameterSpec(
        "Tax Yield Adjustment", 0.5, 1.5, 0.01, unit="x", multiplier=1.0,
        description="Gap between modeled and observed revenue (collection rate, reduced rates)",
    ),
    "fiscal_deficit_ratio": ParameterSpec(
        "Fiscal Deficit (% of GDP)", 0.0, 0.1, 0.005,
        description="Bond-financed spending (0% = balanced budget)",
    ),
    "inflation_sensitivity": ParameterSpec(
        "Inflation Sensitivity", 0.0, 1.0, 0.05, unit="", multiplier=1.0,
        description="Inflation per unit of UBI outlay / GDP",
    ),
    "tax_sensitivity": ParameterSpec(
        "Tax Sensitivity", 0.0, 1.0, 0.05, unit="", multiplier=1.0,
        description="Productivity loss per unit of corporate tax rate",
    ),
}


# =============================================================================
# OPTIONAL VALIDATION
# =============================================================================

@dataclass(frozen=True)
class InvalidParameter:
    """One out-of-domain field."""
    field: str
    value: float
    reason: str


class ParameterValidationError(ValueError):
    """Raised by validate_parameters when any field is out of its documented range."""

    def __init__(self, problems: List[InvalidParameter]):
        self.problems = problems
        detail = "; ".join(f"{p.field}={p.value!r}: {p.reason}" for p in problems)
        super().__init__(f"Invalid UBI parameters: {detail}")


def find_invalid_parameters(params: UBIParameters) -> List[InvalidParameter]:
    """
    Check every field against PARAMETER_RANGES.

    Returns an empty list for a valid record. The estimator does not call
    this; it is a separate pre-check for callers that want one.
    """
    problems: List[InvalidParameter] = []
    for name in FIELD_NAMES:
        value = getattr(params, name)
        low, high = PARAMETER_RANGES[name]
        if not math.isfinite(value):
            problems.append(InvalidParameter(name, value, "not a finite number"))
        elif value < low or value > high:
            problems.append(InvalidParameter(name, value, f"outside [{low}, {high}]"))

    if params.fixed_cost_ratio > params.social_cost_ratio:
        problems.append(
            InvalidParameter(
                "fixed_cost_ratio",
                params.fixed_cost_ratio,
                f"exceeds social_cost_ratio ({params.social_cost_ratio})",
            )
        )
    return problems


def validate_parameters(params: UBIParameters) -> UBIParameters:
    problems = find_invalid_parameters(params)
    if problems:
        raise ParameterValidationError(problems)
    return params
