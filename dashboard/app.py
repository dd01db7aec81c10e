"""
Scoped Modules Dashboard - Streamlit Application

Composes one data-source module and several histogram modules, each with a
nested summary module, under distinct ids.
"""

import streamlit as st
import sys
from pathlib import Path
import matplotlib
matplotlib.use('Agg')  # Use non-interactive backend for Streamlit

# Add src to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))
# Add repository root to path so `dashboard.*` imports work
sys.path.insert(0, str(Path(__file__).parent.parent))

from config.config import PAGE_ICON
from config.models import AppConfig
from config.schemas import PanelResult
from scoping import SEPARATOR, render_markdown
from scoping.host import App, output_slot
from utils.logging import dashboard_logger, setup_logging

from dashboard.components.dataset import dataset_server, dataset_ui
from dashboard.components.histogram import histogram_server, histogram_ui
from dashboard.components.layout import apply_custom_css

DATA_MODULE_ID = "data"


def _status_markdown(results: dict) -> str:
    """Sidebar summary of every histogram instance."""
    lines = []
    for module_id, result in results.items():
        status = result.get("status", "unknown")
        if status == "success":
            lines.append(f"- ✅ `{module_id}`: **{result['variable']}** ({result['rows']:,} rows, {result['bins']} bins)")
        elif status == "no_variable":
            lines.append(f"- ⚠️ `{module_id}`: no variable selected")
        elif status == "no_data":
            lines.append(f"- ⚠️ `{module_id}`: no data for **{result.get('variable')}**")
        else:
            lines.append(f"- ℹ️ `{module_id}`: {status}")
    return "\n".join(lines) if lines else "No modules bound."


def build_app(config: AppConfig) -> App:
    """Root view builder and behavior binder for the histogram dashboard."""

    def server(input, output, session):
        data = dataset_server(
            DATA_MODULE_ID,
            default=config.dataset_default,
            rows=config.sample_size_default,
            seed=config.random_seed,
        )
        statuses = {
            hist_id: histogram_server(hist_id, data=data, bins=config.bins_default)
            for hist_id in config.histogram_ids
        }

        def status_markdown() -> str:
            results: dict[str, PanelResult] = {hist_id: status() for hist_id, status in statuses.items()}
            return _status_markdown(results)

        output["status"] = render_markdown(status_markdown)

    def ui(ns):
        apply_custom_css()
        dataset_ui(DATA_MODULE_ID, default=config.dataset_default, rows=config.sample_size_default)
        st.divider()

        columns = st.columns(len(config.histogram_ids))
        for column, hist_id in zip(columns, config.histogram_ids):
            with column:
                histogram_ui(hist_id, title=f"Histogram {hist_id}", bins=config.bins_default)

        with st.sidebar:
            st.subheader("📊 Module Status")
            output_slot(ns("status"))

    return App(ui=ui, server=server)


def main():
    """Main dashboard application."""
    config = AppConfig.from_yaml()
    setup_logging(config.log_level)

    # Page configuration
    st.set_page_config(
        page_title=config.page_title,
        page_icon=PAGE_ICON,
        layout="wide",
        initial_sidebar_state="expanded"
    )

    # Main title
    st.title(f"{PAGE_ICON} {config.page_title}")
    st.markdown("Independent histogram modules sharing one dynamic data source.")

    # Sidebar navigation
    st.sidebar.title("🧭 Navigation")

    panel_option = st.sidebar.selectbox(
        "Select Panel:",
        options=[
            "📊 Histograms",
            "📋 About"
        ],
        index=0,
        key="nav"
    )

    if st.sidebar.button("🔄 Refresh Now", key="refresh"):
        st.rerun()

    if panel_option == "📊 Histograms":
        render_histograms_panel(config)
    elif panel_option == "📋 About":
        render_about_panel(config)


def render_histograms_panel(config: AppConfig):
    """Render the composed histogram modules."""
    try:
        build_app(config).run()
    except Exception as e:
        dashboard_logger.exception("Histogram panel failed")
        st.error(f"❌ Error rendering histogram modules: {e}")
        st.sidebar.error("❌ Panel Error")


def render_about_panel(config: AppConfig):
    """Render the about/information panel."""
    st.header("📋 About Scoped Modules")

    st.markdown(f"""
    ### 🎯 Purpose
    Each dashboard module is a pair of functions called with the same id:
    a **view builder** that lays out widgets and output slots, and a
    **behavior binder** that reads inputs and registers outputs.

    ### 🔑 Identifiers
    - Qualified ids join the enclosing module ids and a local id with `{SEPARATOR}`
    - `hist1` + `var` → `hist1{SEPARATOR}var`; nested `stats` + `mean` → `hist1{SEPARATOR}stats{SEPARATOR}mean`
    - `{SEPARATOR}` is reserved and rejected inside any single id

    ### 🛡️ Isolation
    A module only sees inputs and outputs under its own prefix, so two
    instances of the same module never read or overwrite each other's state.
    """)

    # Configuration display
    st.subheader("⚙️ Current Configuration")

    col1, col2 = st.columns(2)

    with col1:
        st.code(f"""
Dataset Default: {config.dataset_default}
Rows Default: {config.sample_size_default}
Random Seed: {config.random_seed}
        """)

    with col2:
        st.code(f"""
Histogram Ids: {list(config.histogram_ids)}
Bins Default: {config.bins_default}
Log Level: {config.log_level}
        """)


if __name__ == "__main__":
    main()
