"""
Helpers de pantalla reutilizados por la página principal.
"""
import streamlit as st

from utils.formatters import format_number


def stat_tiles(stats: dict) -> None:
    """Tres tarjetas con el total de registros, unidades y cajas."""
    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("📋 Total Registros", format_number(stats.get("count")))
    with col2:
        st.metric("📦 Total Unidades", format_number(stats.get("total_units")))
    with col3:
        st.metric("🗃️ Total Cajas", format_number(stats.get("total_boxes")))
