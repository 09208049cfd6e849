import streamlit as st

from services.auth_service import AuthService


def show_header(title: str = "Sistema de Inventario") -> None:
    """
    Encabezado con el título, el usuario actual y el botón de cerrar sesión.
    """
    user = AuthService.get_current_user()

    col_title, col_logout = st.columns([4, 1], vertical_alignment="center")
    with col_title:
        st.markdown(f"## 📦 {title}")
        if user:
            st.caption(user.get("email") or "")
    with col_logout:
        if st.button("Cerrar sesión", use_container_width=True):
            AuthService.logout()
            st.rerun()
    st.markdown("---")
