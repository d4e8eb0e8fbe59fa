# app/components/metrics_panel.py
"""
Metrics display panel component.
"""

import streamlit as st
from typing import Dict, Any


def render_metrics_panel(metrics: Dict[str, Any]) -> None:
    """
    Render a panel with the model's key figures.
    
    Parameters:
    -----------
    metrics : Dict
        Output of model_summary()
    """
    st.subheader("Model")
    cols = st.columns(3)
    with cols[0]:
        st.metric("Nodes", metrics.get('n_nodes', 0))
    with cols[1]:
        st.metric("Members", metrics.get('n_members', 0))
    with cols[2]:
        st.metric("Supports", metrics.get('n_supports', 0))
    
    st.subheader("Geometry")
    cols = st.columns(3)
    with cols[0]:
        st.metric("Total Length", f"{metrics.get('total_length', 0):.2f}")
    with cols[1]:
        st.metric("Longest", f"{metrics.get('max_member_length', 0):.2f}")
    with cols[2]:
        st.metric("Shortest", f"{metrics.get('min_member_length', 0):.2f}")
    
    extent = metrics.get('extent')
    if extent:
        st.caption(f"Extent: {extent[0]:.2f} x {extent[1]:.2f} x {extent[2]:.2f}")
    
    support_types = metrics.get('support_types') or {}
    if support_types:
        st.subheader("Support Types")
        for kind, count in sorted(support_types.items()):
            st.write(f"**{kind}:** {count}")


def render_skipped_info(metrics: Dict[str, Any]) -> None:
    """Note members and supports that are loaded but not drawn."""
    n_members = metrics.get('n_skipped_members', 0)
    n_zero = metrics.get('n_zero_length_members', 0)
    n_supports = metrics.get('n_skipped_supports', 0)
    if n_members or n_supports:
        st.info(
            f"{n_members} member(s) and {n_supports} support(s) are not drawn "
            f"({n_zero} zero-length member(s), the rest reference missing nodes)."
        )
