"""
Dataset selector module: the shared, dynamic data source.

The view builder lays out a dataset picker and a row-count slider; the
behavior binder returns a reactive ``pandas.DataFrame`` that other modules
take as an argument, so every consumer follows the user's choice.
"""

from typing import List

import numpy as np
import pandas as pd
import streamlit as st

from config.config import (
    DATASET_NAMES,
    DATASET_DEFAULT,
    SAMPLE_SIZE_DEFAULT,
    SAMPLE_SIZE_MIN,
    SAMPLE_SIZE_MAX,
    RANDOM_SEED,
)
from config.schemas import DatasetInfo
from scoping import Reactive, module_server, module_ui, render_markdown
from scoping.host import output_slot


def _generate_dataset(name: str, rows: int, seed: int = RANDOM_SEED) -> pd.DataFrame:
    """Generate one of the built-in demo datasets deterministically."""
    rng = np.random.default_rng(seed)

    if name == "weather":
        return pd.DataFrame({
            "temperature_c": rng.normal(15.0, 8.0, rows).round(1),
            "humidity_pct": (rng.beta(5, 3, rows) * 100).round(1),
            "wind_kmh": rng.gamma(2.0, 6.0, rows).round(1),
            "rainfall_mm": rng.exponential(2.5, rows).round(2),
        })
    if name == "traffic":
        return pd.DataFrame({
            "vehicles_per_hour": rng.poisson(850, rows),
            "avg_speed_kmh": np.clip(rng.normal(55.0, 12.0, rows), 5.0, None).round(1),
            "incidents": rng.poisson(0.4, rows),
        })
    if name == "sales":
        return pd.DataFrame({
            "units_sold": rng.poisson(30, rows),
            "unit_price": rng.lognormal(3.0, 0.4, rows).round(2),
            "discount_pct": rng.uniform(0.0, 30.0, rows).round(1),
        })
    raise ValueError(f"Unknown dataset {name!r}; expected one of {DATASET_NAMES}")


def _numeric_columns(df: pd.DataFrame) -> List[str]:
    """Columns a histogram can be drawn for."""
    if df is None:
        return []
    return df.select_dtypes(include="number").columns.tolist()


def _dataset_info(name: str, df: pd.DataFrame) -> DatasetInfo:
    return DatasetInfo(name=name, rows=len(df), columns=list(df.columns))


@module_ui
def dataset_ui(ns, *, default: str = DATASET_DEFAULT, rows: int = SAMPLE_SIZE_DEFAULT) -> None:
    """Dataset picker and row-count slider."""
    st.subheader("🗂️ Data Source")
    options = list(DATASET_NAMES)
    default_index = options.index(default) if default in options else 0

    col1, col2 = st.columns([2, 1])
    with col1:
        st.selectbox("Dataset:", options=options, index=default_index, key=ns("name"))
    with col2:
        st.slider(
            "Rows:",
            min_value=SAMPLE_SIZE_MIN,
            max_value=SAMPLE_SIZE_MAX,
            value=rows,
            step=50,
            key=ns("rows"),
        )
    output_slot(ns("info"))


@module_server
def dataset_server(
    input,
    output,
    session,
    *,
    default: str = DATASET_DEFAULT,
    rows: int = SAMPLE_SIZE_DEFAULT,
    seed: int = RANDOM_SEED
) -> Reactive:
    """Bind the data source; returns the reactive frame for other modules."""

    @session.reactive("frame")
    def frame() -> pd.DataFrame:
        name = input.get("name", default)
        n_rows = int(input.get("rows", rows))
        return _generate_dataset(name, n_rows, seed)

    def info_markdown() -> str:
        info = _dataset_info(input.get("name", default), frame())
        return f"📄 **{info['name']}**: {info['rows']:,} rows · columns: " + ", ".join(
            f"`{col}`" for col in info["columns"]
        )

    output["info"] = render_markdown(info_markdown)
    return frame
