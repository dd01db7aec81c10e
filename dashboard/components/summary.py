"""
Summary statistics module, nested inside each histogram.

Its ids compose under the parent's scope (``hist1-stats-mean`` etc.), so any
number of histograms can each carry their own summary without collisions.
"""

import functools
from typing import Callable, Optional, Tuple

import pandas as pd
import streamlit as st

from config.schemas import ColumnSummary
from scoping import module_server, module_ui, render_metric, render_table
from scoping.host import output_slot

from dashboard.components.layout import format_number

SUMMARY_STATS: Tuple[str, ...] = ("count", "mean", "std", "min", "max")


def _summarise(values: Optional[pd.Series]) -> Optional[ColumnSummary]:
    """Compute the summary for a numeric series; None when there is nothing to summarise."""
    if values is None:
        return None
    values = pd.to_numeric(values, errors="coerce").dropna()
    if values.empty:
        return None
    return ColumnSummary(
        count=int(values.count()),
        mean=float(values.mean()),
        std=float(values.std(ddof=1)) if len(values) > 1 else 0.0,
        min=float(values.min()),
        max=float(values.max()),
    )


def _metric(summary: Callable[[], Optional[ColumnSummary]], stat: str) -> Tuple[str, str]:
    result = summary()
    label = stat.capitalize()
    if result is None:
        return label, "N/A"
    return label, format_number(result[stat])


def _describe(values: Optional[pd.Series]) -> pd.DataFrame:
    if values is None or len(values) == 0:
        return pd.DataFrame({"statistic": [], "value": []})
    described = values.describe()
    return pd.DataFrame({"statistic": described.index, "value": described.values})


@module_ui
def summary_ui(ns) -> None:
    columns = st.columns(len(SUMMARY_STATS))
    for column, stat in zip(columns, SUMMARY_STATS):
        with column:
            output_slot(ns(stat))
    with st.expander("📋 Describe"):
        output_slot(ns("table"))


@module_server
def summary_server(input, output, session, *, values: Callable[[], Optional[pd.Series]]):
    """Register one metric per statistic plus a describe table for ``values``."""

    @session.reactive("summary")
    def summary() -> Optional[ColumnSummary]:
        return _summarise(values())

    for stat in SUMMARY_STATS:
        output[stat] = render_metric(functools.partial(_metric, summary, stat))
    output["table"] = render_table(lambda: _describe(values()))
    return summary
