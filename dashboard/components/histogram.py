"""
Histogram module component.

One instance per id: a variable picker, a bins slider and a histogram plot,
with a nested summary module under the id ``stats``. The data source is
passed to the behavior binder as a reactive, so the picker's options follow
whatever dataset the user selects upstream.
"""

from typing import Any, Callable, Optional

import matplotlib.pyplot as plt
import pandas as pd
import streamlit as st

from config.config import BINS_DEFAULT, BINS_MIN, BINS_MAX
from config.schemas import PanelResult
from scoping import module_server, module_ui, render_plot, render_ui
from scoping.host import output_slot

from dashboard.components.dataset import _numeric_columns
from dashboard.components.layout import render_module_header
from dashboard.components.summary import summary_server, summary_ui


def _select_values(df: Optional[pd.DataFrame], variable: Optional[str]) -> Optional[pd.Series]:
    """Non-null values of ``variable``; None if it is not a numeric column of ``df``."""
    if df is None or variable not in _numeric_columns(df):
        return None
    return df[variable].dropna()


def _render_histogram(values: Optional[pd.Series], bins: int, title: str) -> plt.Figure:
    """
    Create a histogram of ``values``.

    Args:
        values: Numeric series to plot (None or empty draws a placeholder)
        bins: Number of bins
        title: Chart title

    Returns:
        Matplotlib figure
    """
    fig, ax = plt.subplots(figsize=(6, 3.5))

    if values is None or len(values) == 0:
        ax.text(0.5, 0.5, "No data available",
                ha="center", va="center", transform=ax.transAxes)
        ax.set_title(title)
        return fig

    ax.hist(values, bins=bins, color='#1f77b4', edgecolor='white', alpha=0.85)
    ax.axvline(values.mean(), color='#ff7f0e', linestyle='--', linewidth=1.5,
               label=f'Mean ({values.mean():.2f})')

    ax.set_title(title)
    ax.set_xlabel(values.name or "value")
    ax.set_ylabel("Count")
    ax.grid(True, alpha=0.3)
    ax.legend()

    fig.tight_layout()
    return fig


def _panel_status(module_id: str, values: Optional[pd.Series], variable: Optional[str], bins: int) -> PanelResult:
    """Status dict for the sidebar."""
    if variable is None:
        status = "no_variable"
    elif values is None or len(values) == 0:
        status = "no_data"
    else:
        status = "success"
    return PanelResult(
        status=status,
        module_id=module_id,
        variable=variable,
        bins=bins,
        rows=0 if values is None else int(len(values)),
    )


@module_ui
def histogram_ui(ns, *, title: str = "Histogram", bins: int = BINS_DEFAULT) -> None:
    render_module_header(title, ns.path.qualified, icon="📊")

    col1, col2 = st.columns([3, 2])
    with col1:
        output_slot(ns("variable"))
    with col2:
        st.slider("Bins:", min_value=BINS_MIN, max_value=BINS_MAX, value=bins, key=ns("bins"))

    output_slot(ns("plot"))
    summary_ui("stats")


@module_server
def histogram_server(
    input,
    output,
    session,
    *,
    data: Callable[[], Optional[pd.DataFrame]],
    bins: int = BINS_DEFAULT
) -> Callable[[], PanelResult]:
    """Bind a histogram instance to the reactive ``data``; returns its status callable."""

    def variable_picker() -> Any:
        columns = _numeric_columns(data())
        if not columns:
            st.warning("⚠️ The selected dataset has no numeric columns.")
            return None
        current = input.get("var")
        index = columns.index(current) if current in columns else 0
        return st.selectbox("Variable:", options=columns, index=index, key=session.ns("var"))

    @session.reactive("selection")
    def selection() -> Optional[pd.Series]:
        return _select_values(data(), input.get("var"))

    def plot() -> plt.Figure:
        variable = input.get("var")
        return _render_histogram(selection(), int(input.get("bins", bins)), title=variable or "No variable")

    output["variable"] = render_ui(variable_picker)
    output["plot"] = render_plot(plot)
    summary_server("stats", values=selection)

    def status() -> PanelResult:
        return _panel_status(session.path.qualified, selection(), input.get("var"), int(input.get("bins", bins)))

    return status
