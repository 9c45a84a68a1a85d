"""
Sensitivity and Uncertainty Analysis

Quantifies how strongly the feasible UBI depends on individual parameters
and how much it moves when several uncertain parameters are perturbed at
once. Every point is an independent call to the estimator.
"""

from dataclasses import dataclass, fields
from typing import Dict, Optional, Sequence

import numpy as np
import pandas as pd
from scipy import stats

from .estimator import UBIEstimator
from .parameters import FIELD_NAMES, PARAMETER_RANGES, PARAMETER_SPECS, UBIParameters


@dataclass
class UncertaintyFactors:
    """
    Standard deviations of the uncertain model parameters.

    Policy levers (tax rates, deficit ratio) are choices, not estimates,
    so they carry no uncertainty here.
    """
    alpha: float = 0.05
    beta: float = 0.05
    gamma: float = 0.10
    gdp_per_capita_multiplier: float = 0.10
    tax_adjustment_factor: float = 0.05
    social_cost_ratio: float = 0.02
    fixed_cost_ratio: float = 0.01
    social_security_reduction_rate: float = 0.05
    inflation_sensitivity: float = 0.05
    tax_sensitivity: float = 0.05

    def as_dict(self) -> Dict[str, float]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass
class SensitivityResult:
    """
    Results from a one-parameter sweep.
    """
    parameter_name: str
    parameter_values: np.ndarray
    monthly_ubi: np.ndarray
    net_surplus: np.ndarray
    elasticity: float  # Percent change in monthly UBI per 1% change in parameter
    central_value: float = 0.0
    central_monthly_ubi: float = 0.0

    @property
    def range(self) -> tuple[float, float]:
        return (float(np.min(self.monthly_ubi)), float(np.max(self.monthly_ubi)))

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame({
            self.parameter_name: self.parameter_values,
            "monthly_ubi": self.monthly_ubi,
            "net_surplus": self.net_surplus,
        })


def _clip_to_range(name: str, values: np.ndarray) -> np.ndarray:
    low, high = PARAMETER_RANGES[name]
    return np.clip(values, low, high)


class UncertaintyAnalysis:
    """
    Sensitivity sweeps and Monte Carlo analysis around a parameter record.
    """

    def __init__(self,
                 factors: Optional[UncertaintyFactors] = None,
                 estimator: Optional[UBIEstimator] = None):
        self.factors = factors or UncertaintyFactors()
        self.estimator = estimator or UBIEstimator()

    def sensitivity_analysis(self,
                             params: UBIParameters,
                             parameter: str,
                             values: Optional[Sequence[float]] = None,
                             range_pct: float = 0.5,
                             n_points: int = 11) -> SensitivityResult:
        """
        Sweep one parameter with all others held fixed.

        Args:
            params: Central parameter record
            parameter: snake_case field name to vary
            values: Explicit grid; if omitted, central value +/- range_pct,
                    clipped to the documented range
            range_pct: Relative half-width of the default grid (0.5 = +/-50%)
            n_points: Points in the default grid
        """
        if parameter not in FIELD_NAMES:
            raise ValueError(f"Unknown parameter '{parameter}'")

        central_value = float(getattr(params, parameter))
        if values is None:
            grid = np.linspace(central_value * (1 - range_pct),
                               central_value * (1 + range_pct), n_points)
            grid = np.unique(_clip_to_range(parameter, grid))
        else:
            grid = np.asarray(values, dtype=float)

        monthly = np.zeros(len(grid))
        surplus = np.zeros(len(grid))
        for i, value in enumerate(grid):
            result = self.estimator.estimate(params.with_changes(**{parameter: float(value)}))
            monthly[i] = result.monthly_ubi
            surplus[i] = result.net_surplus

        central_ubi = float(self.estimator.estimate(params).monthly_ubi)

        # Arc elasticity across the grid endpoints
        elasticity = 0.0
        if len(grid) >= 2 and central_ubi != 0 and central_value != 0 and grid[-1] != grid[0]:
            pct_ubi = (monthly[-1] - monthly[0]) / central_ubi
            pct_param = (grid[-1] - grid[0]) / central_value
            elasticity = float(pct_ubi / pct_param)

        return SensitivityResult(
            parameter_name=parameter,
            parameter_values=grid,
            monthly_ubi=monthly,
            net_surplus=surplus,
            elasticity=elasticity,
            central_value=central_value,
            central_monthly_ubi=central_ubi,
        )

    def rank_parameters(self,
                        params: UBIParameters,
                        parameters: Optional[Sequence[str]] = None,
                        range_pct: float = 0.2) -> pd.DataFrame:
        """
        Tornado-style ranking: monthly UBI swing for each parameter, widest first.
        """
        parameters = list(parameters or FIELD_NAMES)
        rows = []
        for name in parameters:
            sweep = self.sensitivity_analysis(params, name, range_pct=range_pct, n_points=3)
            low, high = sweep.range
            rows.append({
                "parameter": name,
                "label": PARAMETER_SPECS[name].label,
                "low": low,
                "high": high,
                "swing": high - low,
                "elasticity": sweep.elasticity,
            })
        frame = pd.DataFrame(rows)
        return frame.sort_values("swing", ascending=False, kind="stable").reset_index(drop=True)

    def monte_carlo(self,
                    params: UBIParameters,
                    n_sims: int = 1000,
                    seed: Optional[int] = None) -> dict:
        """
        Perturb the uncertain parameters jointly and summarise monthly UBI.

        Shocks are independent normals with the standard deviations in
        self.factors, clipped to the documented ranges; the fixed cost ratio
        is capped at the social cost ratio.
        """
        rng = np.random.default_rng(seed)
        base = params.to_snake_dict()
        stds = self.factors.as_dict()

        simulations = np.zeros(n_sims)
        for sim in range(n_sims):
            drawn = dict(base)
            for name, std in stds.items():
                shocked = drawn[name] + rng.normal(0.0, std)
                drawn[name] = float(_clip_to_range(name, np.array(shocked)))
            drawn["fixed_cost_ratio"] = min(drawn["fixed_cost_ratio"], drawn["social_cost_ratio"])
            simulations[sim] = self.estimator.estimate(UBIParameters(**drawn)).monthly_ubi

        return {
            'mean': float(np.mean(simulations)),
            'median': float(np.median(simulations)),
            'std': float(np.std(simulations)),
            'p10': float(np.percentile(simulations, 10)),
            'p25': float(np.percentile(simulations, 25)),
            'p75': float(np.percentile(simulations, 75)),
            'p90': float(np.percentile(simulations, 90)),
            'probability_positive': float(np.mean(simulations > 0)),
            'simulations': simulations,
        }

    def normal_interval(self,
                        params: UBIParameters,
                        percentile: float = 0.9,
                        n_sims: int = 1000,
                        seed: Optional[int] = None) -> dict:
        """
        Central estimate with a normal-approximation interval of monthly UBI.

        The lower bound is floored at zero, like the payment itself.
        """
        z_score = stats.norm.ppf((1 + percentile) / 2)
        draws = self.monte_carlo(params, n_sims=n_sims, seed=seed)
        central = float(self.estimator.estimate(params).monthly_ubi)

        return {
            'central': central,
            'low': max(0.0, central - z_score * draws['std']),
            'high': central + z_score * draws['std'],
            'z_score': float(z_score),
            'percentile': percentile,
        }

    def format_uncertainty_summary(self, summary: dict) -> str:
        """Format Monte Carlo output for display."""
        lines = []
        lines.append("MONTHLY UBI UNCERTAINTY (yen)")
        lines.append("-" * 40)
        lines.append(f"Mean:                {summary['mean']:>14,.0f}")
        lines.append(f"Median:              {summary['median']:>14,.0f}")
        lines.append(f"10th-90th pct:       {summary['p10']:>14,.0f} to {summary['p90']:,.0f}")
        lines.append(f"P(payment > 0):      {summary['probability_positive']:>14.1%}")
        return "\n".join(lines)
