"""
Scenario comparison.

Runs one independent estimate per preset and tabulates the headline
figures. Used by the comparison chart and the text report.
"""

from typing import Dict, Iterable, Optional

import pandas as pd

from .estimator import UBIEstimator
from .scenarios import PRESET_SCENARIOS, SCENARIO_ORDER, ScenarioPreset

# Smallest bar drawn for a non-zero payment, percent of the widest bar
MIN_BAR_WIDTH_PCT = 5.0

COMPARISON_COLUMNS = [
    "key",
    "name",
    "alpha",
    "monthly_ubi",
    "real_monthly_ubi",
    "annual_ubi",
    "net_surplus",
    "total_revenue",
    "inflation_rate",
    "bar_width_pct",
]


def bar_widths(monthly_ubi: pd.Series) -> pd.Series:
    """
    Scale payments to the largest one (percent).

    Zero stays zero; any positive payment gets at least MIN_BAR_WIDTH_PCT so
    it remains visible.
    """
    max_ubi = monthly_ubi.max() if len(monthly_ubi) else 0
    scale = 1 / max_ubi if max_ubi > 0 else 1
    widths = (monthly_ubi * scale * 100).clip(lower=MIN_BAR_WIDTH_PCT)
    return widths.where(monthly_ubi > 0, 0.0)


def compare_scenarios(
    scenarios: Optional[Dict[str, ScenarioPreset]] = None,
    estimator: Optional[UBIEstimator] = None,
    order: Optional[Iterable[str]] = None,
) -> pd.DataFrame:
    """
    Estimate every scenario and return one row per scenario.

    Args:
        scenarios: Mapping of key -> preset (defaults to PRESET_SCENARIOS)
        estimator: Estimator to use (defaults to a five-pass estimator)
        order: Row order; defaults to the canonical order for known keys,
               then the mapping's own order for the rest
    """
    scenarios = PRESET_SCENARIOS if scenarios is None else scenarios
    estimator = estimator or UBIEstimator()

    if order is None:
        known = [key for key in SCENARIO_ORDER if key in scenarios]
        order = known + [key for key in scenarios if key not in known]

    rows = []
    for key in order:
        preset = scenarios[key]
        result = estimator.estimate(preset.params)
        rows.append({
            "key": key,
            "name": preset.name,
            "alpha": preset.params.alpha,
            "monthly_ubi": result.monthly_ubi,
            "real_monthly_ubi": result.real_monthly_ubi,
            "annual_ubi": result.annual_ubi,
            "net_surplus": result.net_surplus,
            "total_revenue": result.total_revenue,
            "inflation_rate": result.inflation_rate,
        })

    frame = pd.DataFrame(rows, columns=COMPARISON_COLUMNS[:-1])
    frame["bar_width_pct"] = bar_widths(frame["monthly_ubi"].astype(float))
    return frame
