"""
Sidebar controls for scenario selection and parameter sliders.

The working parameter set lives in session state as a flat camelCase
mapping, so it survives reruns and can be exported as-is.
"""

from __future__ import annotations

from typing import Any

PARAMS_STATE_KEY = "ubi_parameters"
SCENARIO_STATE_KEY = "selected_scenario"
CUSTOM_SCENARIO = "custom"

# Slider groups in display order
PARAMETER_GROUPS: list[tuple[str, list[str]]] = [
    (
        "Economy",
        [
            "alpha",
            "beta",
            "gamma",
            "gdp_per_capita_multiplier",
            "social_cost_ratio",
            "fixed_cost_ratio",
            "social_security_reduction_rate",
            "social_insurance_ratio",
        ],
    ),
    (
        "Tax Rates",
        [
            "tax_personal",
            "tax_corporate",
            "tax_consumption",
            "tax_property",
            "tax_adjustment_factor",
            "fiscal_deficit_ratio",
        ],
    ),
    (
        "Feedback Effects",
        ["inflation_sensitivity", "tax_sensitivity"],
    ),
]


def ensure_parameter_state(st_module: Any, deps: Any) -> None:
    """
    Seed session state with the default scenario on first run.
    """
    if PARAMS_STATE_KEY not in st_module.session_state:
        preset = deps.get_scenario(deps.DEFAULT_SCENARIO)
        st_module.session_state[PARAMS_STATE_KEY] = preset.params.to_dict()
        st_module.session_state[SCENARIO_STATE_KEY] = preset.key


def load_scenario(st_module: Any, deps: Any, scenario_key: str) -> None:
    preset = deps.get_scenario(scenario_key)
    st_module.session_state[PARAMS_STATE_KEY] = preset.params.to_dict()
    st_module.session_state[SCENARIO_STATE_KEY] = scenario_key


def render_scenario_selector(st_module: Any, deps: Any) -> str:
    """
    Render preset buttons; return the selected scenario key (or "custom").
    """
    st_module.subheader("🎯 Scenario")
    columns = st_module.columns(2)
    for i, key in enumerate(deps.SCENARIO_ORDER):
        preset = deps.PRESET_SCENARIOS[key]
        selected = st_module.session_state.get(SCENARIO_STATE_KEY) == key
        with columns[i % 2]:
            if st_module.button(
                preset.name,
                key=f"scenario_{key}",
                type="primary" if selected else "secondary",
                help=preset.description,
                use_container_width=True,
            ):
                load_scenario(st_module, deps, key)

    return st_module.session_state.get(SCENARIO_STATE_KEY, CUSTOM_SCENARIO)


def _slider_value(spec: Any, value: float) -> float:
    return round(spec.display_value(value), 6)


def render_parameter_sliders(st_module: Any, deps: Any) -> Any:
    """
    Render one slider per parameter and return the resulting UBIParameters.

    Any change away from the loaded preset marks the scenario as custom.
    """
    current = deps.UBIParameters.from_dict(st_module.session_state[PARAMS_STATE_KEY])
    values = current.to_snake_dict()
    scenario_key = st_module.session_state.get(SCENARIO_STATE_KEY, CUSTOM_SCENARIO)

    for group_name, names in PARAMETER_GROUPS:
        st_module.subheader(group_name)
        for name in names:
            spec = deps.PARAMETER_SPECS[name]
            # Bounds stretch to hold a stored value outside the usual slider range
            shown = st_module.slider(
                f"{spec.label} ({spec.unit})" if spec.unit else spec.label,
                min_value=_slider_value(spec, min(spec.minimum, values[name])),
                max_value=_slider_value(spec, max(spec.maximum, values[name])),
                value=_slider_value(spec, values[name]),
                step=round(spec.step * spec.multiplier, 6),
                help=spec.description or None,
                key=f"slider_{scenario_key}_{name}",
            )
            new_value = shown / spec.multiplier
            if abs(new_value - values[name]) > 1e-9:
                values[name] = new_value

    updated = deps.UBIParameters(**values)
    if updated != current:
        st_module.session_state[PARAMS_STATE_KEY] = updated.to_dict()
        st_module.session_state[SCENARIO_STATE_KEY] = CUSTOM_SCENARIO
    return updated
