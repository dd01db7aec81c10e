"""
Shared layout helpers for dashboard modules.

Provides common UI utilities for number formatting, module headers, and layout consistency.
"""

import math
from typing import Optional

import streamlit as st


def format_number(value: Optional[float], digits: int = 2) -> str:
    """
    Format a summary statistic for display.

    Args:
        value: Number to format (None or NaN renders as N/A)
        digits: Decimal places for non-integral values

    Returns:
        Formatted string with thousands separators
    """
    if value is None:
        return "N/A"
    try:
        if math.isnan(value):
            return "N/A"
    except TypeError:
        return str(value)

    if float(value).is_integer() and abs(value) < 1e15:
        return f"{int(value):,}"
    return f"{value:,.{digits}f}"


def render_module_header(title: str, qualified_id: str, icon: str = "🧩") -> None:
    """
    Render a module title with its qualified id underneath.

    Args:
        title: Human-readable module title
        qualified_id: Scope of the module instance, shown for debugging
        icon: Emoji prefix for the title
    """
    st.subheader(f"{icon} {title}")
    st.caption(f"Module id: `{qualified_id}`")


def apply_custom_css() -> None:
    """Apply custom CSS styling for compact module cards."""
    st.markdown("""
    <style>
    .stMetric {
        background-color: #f0f2f6;
        border: 1px solid #e6e9ef;
        padding: 0.5rem;
        border-radius: 0.25rem;
    }

    div[data-testid="stVerticalBlock"] > div:has(> .stPlot) {
        margin-bottom: 0.5rem;
    }
    </style>
    """, unsafe_allow_html=True)
