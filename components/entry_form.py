"""
Diálogos del formulario de registro y de la confirmación de eliminación.

Los diálogos se abren según el estado del panel (editor activo o registro
pendiente de eliminar). Los botones cambian ese estado en su callback y el
diálogo se cierra con una ejecución completa cuando el estado ya no existe.
"""
import streamlit as st

from models.entry import UNIT_OPTIONS
from services.dashboard import InventoryDashboard
from services.entry_editor import EntryEditor


def _key(version: int, field: str) -> str:
    return f"entry_form_{version}_{field}"


def _on_change(editor: EntryEditor, field: str, key: str) -> None:
    editor.set_field(field, st.session_state[key])


def _field_error(editor: EntryEditor, field: str) -> None:
    if editor.errors.get(field):
        st.caption(f":red[{editor.errors[field]}]")


def _render_form(dashboard: InventoryDashboard) -> None:
    editor = dashboard.editor
    if editor is None:
        # Guardado o cancelado desde este diálogo
        st.rerun()
    version = dashboard.editor_version
    draft = editor.draft

    if editor.save_error:
        st.error(editor.save_error)

    key = _key(version, "part_number")
    st.text_input(
        "Part Number *",
        value=draft.get("part_number") or "",
        key=key,
        on_change=_on_change,
        args=(editor, "part_number", key),
    )
    _field_error(editor, "part_number")

    key = _key(version, "description")
    st.text_area(
        "Descripción *",
        value=draft.get("description") or "",
        height=80,
        key=key,
        on_change=_on_change,
        args=(editor, "description", key),
    )
    _field_error(editor, "description")

    col_units, col_boxes = st.columns(2)
    with col_units:
        key = _key(version, "total_units")
        st.number_input(
            "Cantidad",
            value=int(draft.get("total_units") or 0),
            step=1,
            help="Unidades totales",
            key=key,
            on_change=_on_change,
            args=(editor, "total_units", key),
        )
        _field_error(editor, "total_units")
    with col_boxes:
        key = _key(version, "total_boxes")
        st.number_input(
            "Pallets",
            value=int(draft.get("total_boxes") or 0),
            step=1,
            help="Cajas totales",
            key=key,
            on_change=_on_change,
            args=(editor, "total_boxes", key),
        )
        _field_error(editor, "total_boxes")

    # Valores fuera de la lista (registros antiguos) se mantienen como opción
    current_unit = draft.get("unit_of_measure") or ""
    options = [""] + UNIT_OPTIONS
    if current_unit and current_unit not in options:
        options.append(current_unit)
    key = _key(version, "unit_of_measure")
    st.selectbox(
        "Unidad de Medida *",
        options=options,
        index=options.index(current_unit),
        format_func=lambda v: v or "Seleccionar...",
        key=key,
        on_change=_on_change,
        args=(editor, "unit_of_measure", key),
    )
    _field_error(editor, "unit_of_measure")

    st.text_input("Registrado Por", value=draft.get("registered_by") or "", disabled=True)

    st.markdown("---")
    col_cancel, col_save = st.columns(2)
    with col_cancel:
        st.button(
            "Cancelar",
            key="entry_form_cancel",
            on_click=dashboard.close_editor,
            use_container_width=True,
        )
    with col_save:
        st.button(
            editor.submit_label,
            key="entry_form_save",
            type="primary",
            on_click=dashboard.submit_editor,
            use_container_width=True,
        )


def _current_dashboard():
    return st.session_state.get("dashboard")


def _dismiss_editor() -> None:
    dashboard = _current_dashboard()
    if dashboard is not None:
        dashboard.close_editor()


def _dismiss_delete() -> None:
    dashboard = _current_dashboard()
    if dashboard is not None:
        dashboard.cancel_delete()


@st.dialog("Nuevo Registro", on_dismiss=_dismiss_editor)
def _create_dialog(dashboard: InventoryDashboard) -> None:
    _render_form(dashboard)


@st.dialog("Editar Registro", on_dismiss=_dismiss_editor)
def _edit_dialog(dashboard: InventoryDashboard) -> None:
    _render_form(dashboard)


def show_entry_dialog(dashboard: InventoryDashboard) -> None:
    """Abre el formulario según el modo del editor activo."""
    if dashboard.editor is None:
        return
    if dashboard.editing_id is not None:
        _edit_dialog(dashboard)
    else:
        _create_dialog(dashboard)


@st.dialog("Eliminar registro", on_dismiss=_dismiss_delete)
def _delete_dialog(dashboard: InventoryDashboard) -> None:
    if dashboard.pending_delete_id is None:
        st.rerun()
    st.markdown("¿Estás seguro de eliminar este registro?")
    col_cancel, col_ok = st.columns(2)
    with col_cancel:
        st.button(
            "Cancelar",
            key="delete_cancel",
            on_click=dashboard.cancel_delete,
            use_container_width=True,
        )
    with col_ok:
        st.button(
            "Eliminar",
            key="delete_confirm",
            type="primary",
            on_click=dashboard.confirm_delete,
            use_container_width=True,
        )


def show_delete_dialog(dashboard: InventoryDashboard) -> None:
    """Pide confirmación si hay un registro pendiente de eliminar."""
    if dashboard.pending_delete_id is not None:
        _delete_dialog(dashboard)
