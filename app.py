import sys
from datetime import tzinfo
from pathlib import Path
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

# Garantiza que la raíz del proyecto esté en el path (para ejecutar desde cualquier cwd)
_ROOT = Path(__file__).resolve().parents[0]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import streamlit as st

from components.entry_form import show_delete_dialog, show_entry_dialog
from components.entry_table import render_entry_table
from config.database import SessionLocal, init_db
from config.logging_config import setup_logging
from services.auth_service import AuthService, ensure_default_admin
from services.dashboard import InventoryDashboard
from services.entry_store import EntryStore
from utils.navigation import show_header
from utils.ui_helpers import stat_tiles


st.set_page_config(
    page_title="Sistema de Inventario",
    page_icon="📦",
    layout="wide",
    menu_items={
        "Get Help": None,
        "Report a bug": None,
        "About": None,
    },
)


@st.cache_resource
def initialize_app():
    """
    Configura el logging, crea las tablas y garantiza el usuario admin.
    """
    setup_logging()
    init_db()
    ensure_default_admin(SessionLocal)


def get_dashboard() -> InventoryDashboard:
    """Un panel por sesión del navegador."""
    if "dashboard" not in st.session_state:
        st.session_state.dashboard = InventoryDashboard(EntryStore(SessionLocal))
    return st.session_state.dashboard


def login_page():
    st.markdown("# 🔐 Sistema de Inventario")
    st.caption("Registro de existencias del almacén")
    st.markdown("---")

    col1, col2, col3 = st.columns([1, 2, 1])
    with col2:
        st.subheader("Iniciar sesión")
        with st.form("login_form"):
            email = st.text_input("Correo electrónico", placeholder="usuario@empresa.com")
            password = st.text_input("Contraseña", type="password", placeholder="••••••••")
            submit = st.form_submit_button("Entrar", use_container_width=True, type="primary")

        if submit:
            if not email or not password:
                st.error("Ingresa tu correo y contraseña.")
            else:
                db = SessionLocal()
                try:
                    user = AuthService.authenticate(db, email, password)
                    if user:
                        AuthService.login(user)
                        st.rerun()
                    else:
                        st.error("Correo o contraseña inválidos.")
                finally:
                    db.close()


def viewer_timezone() -> Optional[tzinfo]:
    """Zona horaria del navegador; None usa la zona local del servidor."""
    name = getattr(st.context, "timezone", None)
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        return None


def dashboard_page():
    dashboard = get_dashboard()
    tz = viewer_timezone()

    show_header()

    if not dashboard.loaded:
        loading_slot = st.empty()
        with loading_slot.container():
            render_entry_table([], True, dashboard.open_edit, dashboard.request_delete)
        dashboard.activate()
        loading_slot.empty()

    if dashboard.last_error:
        st.error(dashboard.last_error)
        dashboard.last_error = None

    stat_tiles(dashboard.stats)
    st.markdown("")

    col_search, col_refresh, col_csv, col_new = st.columns([4, 1, 1, 1], vertical_alignment="bottom")
    with col_search:
        term = st.text_input(
            "Buscar",
            key="search_term",
            placeholder="Buscar...",
            label_visibility="collapsed",
        )
        if term != dashboard.search_term:
            dashboard.set_search(term)
    with col_refresh:
        st.button(
            "🔄 Actualizar",
            key="refresh_entries",
            on_click=dashboard.refresh,
            use_container_width=True,
        )
    with col_csv:
        if dashboard.can_export:
            file_name, data = dashboard.export_csv(tz=tz)
        else:
            file_name, data = "inventario.csv", b""
        st.download_button(
            "⬇️ CSV",
            data=data,
            file_name=file_name,
            mime="text/csv",
            key="export_csv",
            disabled=not dashboard.can_export,
            use_container_width=True,
        )
    with col_new:
        st.button(
            "➕ Nuevo",
            key="new_entry",
            type="primary",
            on_click=dashboard.open_create,
            args=(AuthService.current_email(),),
            use_container_width=True,
        )

    st.markdown("")
    render_entry_table(
        dashboard.filtered,
        dashboard.loading,
        dashboard.open_edit,
        dashboard.request_delete,
        tz=tz,
    )

    show_entry_dialog(dashboard)
    show_delete_dialog(dashboard)


def main():
    initialize_app()
    AuthService.init_session_state()

    if not AuthService.is_authenticated():
        login_page()
    else:
        dashboard_page()


if __name__ == "__main__":
    main()
