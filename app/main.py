# app/main.py
"""
MountStick Viewer - Interactive 3D Stick Model

Loads a three-sheet workbook (A = members, B = nodes, C = supports) and
shows it as an orbitable 3D scene.

Run with:
    streamlit run app/main.py
"""

import logging
import streamlit as st
import sys
from pathlib import Path

# Add app directory to path
sys.path.insert(0, str(Path(__file__).parent))
sys.path.insert(0, str(Path(__file__).parent.parent))

from mount_stick import SheetLayout
from mount_stick.logging_config import setup_logging

from config import CONFIG
from state import get_model, get_model_key, set_model, clear_model, get_display, update_display
from services import ModelService, ExportService
from components import render_3d_model, scene_settings_from_display, render_metrics_panel, render_skipped_info

# Page configuration - must be first Streamlit command
st.set_page_config(
    page_title=CONFIG.app_name,
    page_icon="🏗️",
    layout="wide",
    initial_sidebar_state="expanded",
)

setup_logging(logging.INFO)


# =============================================================================
# SIDEBAR - Source and Display Controls
# =============================================================================

with st.sidebar:
    st.title(f"🏗️ {CONFIG.app_name}")
    st.caption(CONFIG.app_subtitle)

    st.divider()

    # -------------------------------------------------------------------------
    # SOURCE
    # -------------------------------------------------------------------------
    st.subheader("📄 Workbook")

    uploaded = st.file_uploader("Upload .xlsx", type=["xlsx"])
    path_or_url = st.text_input(
        "...or path / URL",
        value=CONFIG.default_source,
        disabled=uploaded is not None,
        help="Local file path or http(s) URL of the workbook",
    )

    with st.expander("Sheet names", expanded=False):
        members_sheet = st.text_input("Members", value=CONFIG.members_sheet)
        nodes_sheet = st.text_input("Nodes", value=CONFIG.nodes_sheet)
        supports_sheet = st.text_input("Supports", value=CONFIG.supports_sheet)

    reload_clicked = st.button("🔄 Reload", use_container_width=True)

    st.divider()

    # -------------------------------------------------------------------------
    # DISPLAY
    # -------------------------------------------------------------------------
    st.subheader("🎨 Display")
    display = get_display()

    member_radius = st.slider(
        "Member radius",
        CONFIG.radius_range[0], CONFIG.radius_range[1],
        display.member_radius, 0.05,
    )
    member_color = st.selectbox(
        "Member colour",
        options=CONFIG.member_colors,
        index=CONFIG.member_colors.index(display.member_color),
    )
    support_size = st.slider(
        "Support size",
        CONFIG.support_size_range[0], CONFIG.support_size_range[1],
        display.support_size, 0.1,
    )
    support_color = st.selectbox(
        "Support colour",
        options=CONFIG.support_colors,
        index=CONFIG.support_colors.index(display.support_color),
    )

    col1, col2 = st.columns(2)
    with col1:
        show_nodes = st.checkbox("Nodes", value=display.show_nodes)
    with col2:
        show_axes = st.checkbox("Axes", value=display.show_axes)

    display = update_display(
        member_radius=member_radius,
        member_color=member_color,
        support_size=support_size,
        support_color=support_color,
        show_nodes=show_nodes,
        show_axes=show_axes,
    )


# =============================================================================
# LOAD MODEL (only when the source changes or on reload)
# =============================================================================

layout = SheetLayout(
    members=members_sheet.strip() or CONFIG.members_sheet,
    nodes=nodes_sheet.strip() or CONFIG.nodes_sheet,
    supports=supports_sheet.strip() or CONFIG.supports_sheet,
)
source = uploaded if uploaded is not None else path_or_url.strip()

st.title("3D Stick Model")

if not source:
    st.info("Upload a workbook or enter a path / URL in the sidebar.")
    st.stop()

if reload_clicked:
    clear_model()

key = ModelService.source_key(source, layout)
if get_model() is None or get_model_key() != key:
    with st.spinner("Loading workbook..."):
        success, model, error = ModelService.load(source, layout, timeout=CONFIG.fetch_timeout)
    if not success:
        clear_model()
        st.error(f"Error loading workbook: {error}")
        st.stop()
    set_model(model, key)

model = get_model()
metrics = ModelService.summarize(model)
settings = scene_settings_from_display(display, height=CONFIG.viewer_height)


# =============================================================================
# MAIN AREA - 3D Scene + Metrics
# =============================================================================

col_3d, col_metrics = st.columns([3, 1])

with col_3d:
    fig = render_3d_model(model, settings)
    st.plotly_chart(fig, use_container_width=True)
    st.caption(f"Source: {model.source} • Drag to orbit, scroll to zoom.")

with col_metrics:
    render_metrics_panel(metrics)
    render_skipped_info(metrics)


# =============================================================================
# EXPORT
# =============================================================================

st.divider()
st.subheader("Export")

stem = ExportService.export_basename(model)
col1, col2, col3 = st.columns(3)

with col1:
    st.download_button(
        "📥 Model JSON",
        data=ExportService.generate_model_json(model),
        file_name=f"{stem}.json",
        mime="application/json",
        use_container_width=True,
    )

with col2:
    st.download_button(
        "📥 Member Schedule CSV",
        data=ExportService.generate_schedule_csv(model),
        file_name=f"{stem}_members.csv",
        mime="text/csv",
        use_container_width=True,
    )

with col3:
    st.download_button(
        "📥 Interactive HTML",
        data=ExportService.generate_scene_html(model, settings),
        file_name=f"{stem}.html",
        mime="text/html",
        use_container_width=True,
    )
