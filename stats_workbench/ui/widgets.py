"""Reusable Streamlit widget patterns."""

from __future__ import annotations

import streamlit as st

from core.data.variables import Variable
from core.nonparametric.runs_test import RunsTestOptions
from core.timeseries.dates import DATE_TYPES
from core.timeseries.registry import (
    PERIOD_OPTIONS,
    PeriodOption,
    default_parameters,
    get_method_spec,
    get_period_option,
    get_smoothing_methods,
)


def variable_selector(variables: list[Variable], label: str, numeric_only: bool = True, key: str | None = None) -> Variable | None:
    """Single variable picker showing labels where defined."""
    choices = [v for v in variables if v.is_numeric_type] if numeric_only else list(variables)
    if not choices:
        st.warning("No suitable variables in the dataset.")
        return None
    return st.selectbox(label, choices, format_func=lambda v: v.display_name, key=key)


def period_selector(key: str = "period_option") -> PeriodOption:
    """Periodicity selection from the fixed period options."""
    ids = [o.id for o in PERIOD_OPTIONS]
    current = st.session_state.get(key, "q")
    option_id = st.selectbox(
        "Periodicity",
        ids,
        index=ids.index(current) if current in ids else 0,
        format_func=lambda i: f"{get_period_option(i).label} ({get_period_option(i).periodicity})",
        key=f"{key}_select",
    )
    st.session_state[key] = option_id
    return get_period_option(option_id)


def smoothing_method_selector() -> str:
    return st.selectbox(
        "Smoothing Method",
        get_smoothing_methods(),
        format_func=lambda m: get_method_spec(m).label,
        key="smoothing_method",
    )


def parameter_inputs(method: str, periodicity: int | None = None) -> list[float]:
    """One number input per method parameter, seeded from the registry defaults."""
    spec = get_method_spec(method)
    defaults = default_parameters(method, periodicity)
    values = []
    cols = st.columns(len(spec.parameters))
    for col, p, default in zip(cols, spec.parameters, defaults):
        if p.integer:
            value = col.number_input(
                p.name.title(),
                min_value=int(p.min_value),
                max_value=max(int(p.max_value), int(default)),
                value=int(default),
                step=int(p.step),
                key=f"param_{method}_{p.name}_{periodicity}",
                disabled=spec.seasonal and p.name == "periodicity" and periodicity is not None,
            )
        else:
            value = col.number_input(
                p.name.title(),
                min_value=float(p.min_value),
                max_value=float(p.max_value),
                value=float(default),
                step=float(p.step),
                format="%.2f",
                key=f"param_{method}_{p.name}",
            )
        values.append(value)
    return values


def date_settings(default_type: str = "index") -> tuple[str, int]:
    """Date type and start year for generated time labels."""
    types = ["index", *DATE_TYPES]
    col1, col2 = st.columns(2)
    date_type = col1.selectbox(
        "Time Labels",
        types,
        index=types.index(default_type) if default_type in types else 0,
        help="Used when no time variable is selected.",
    )
    start_year = col2.number_input("Start Year", min_value=1900, max_value=2100, value=st.session_state.get("start_year", 2000))
    st.session_state["start_year"] = int(start_year)
    return date_type, int(start_year)


def runs_test_options_panel() -> RunsTestOptions | None:
    """Cut point and statistics options for the runs test."""
    st.write("**Cut Point**")
    cols = st.columns(4)
    median = cols[0].checkbox("Median", value=True)
    mean = cols[1].checkbox("Mean")
    mode = cols[2].checkbox("Mode")
    custom = cols[3].checkbox("Custom")
    custom_value = None
    if custom:
        custom_value = st.number_input("Custom cut point", value=0.0)

    with st.expander("Statistics", expanded=False):
        descriptive = st.checkbox("Descriptive")
        quartiles = st.checkbox("Quartiles")

    if not any([median, mean, mode, custom]):
        st.warning("Select at least one cut point.")
        return None

    return RunsTestOptions(
        median=median,
        mean=mean,
        mode=mode,
        custom=custom,
        custom_value=custom_value,
        descriptive=descriptive,
        quartiles=quartiles,
    )
