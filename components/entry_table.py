"""
Tabla de registros de inventario.

Solo lee los registros; las acciones de editar y eliminar se delegan a los
callbacks que recibe.
"""
import html
from datetime import tzinfo
from typing import Callable, List, Optional, Sequence

import streamlit as st

from utils.formatters import format_datetime, format_number, truncate

DESCRIPTION_LIMIT = 40

COLUMNS = [
    ("Part Number", 1.2),
    ("Descripción", 2.2),
    ("Unidades", 0.8),
    ("Cajas", 0.7),
    ("Unidad de Medida", 1.0),
    ("Registrado Por", 1.5),
    ("Fecha de Registro", 1.4),
    ("Acciones", 1.0),
]


def build_table_rows(records: Sequence[dict], tz: Optional[tzinfo] = None) -> List[dict]:
    """Filas listas para mostrar, una por registro y en el mismo orden."""
    return [
        {
            "id": r.get("id"),
            "part_number": r.get("part_number") or "",
            "description": truncate(r.get("description"), DESCRIPTION_LIMIT),
            "description_full": r.get("description") or "",
            "total_units": format_number(r.get("total_units")),
            "total_boxes": str(r.get("total_boxes") or 0),
            "unit_of_measure": r.get("unit_of_measure") or "",
            "registered_by": r.get("registered_by") or "",
            "registered_at": format_datetime(r.get("registered_at"), tz),
        }
        for r in records
    ]


def render_entry_table(
    records: Sequence[dict],
    loading: bool,
    on_edit: Callable[[dict], None],
    on_delete: Callable[[object], None],
    tz: Optional[tzinfo] = None,
) -> None:
    """
    Dibuja uno de tres estados: cargando (sin filas), vacío o la tabla.
    Los botones de cada fila llaman on_edit(registro) u on_delete(id) como
    callbacks, antes de la siguiente ejecución de la página.
    """
    if loading:
        st.info("⏳ Cargando registros...")
        return

    if not records:
        st.markdown("#### 📦 No hay registros")
        st.caption("Crea tu primer registro de inventario")
        return

    widths = [w for _, w in COLUMNS]
    header = st.columns(widths)
    for col, (label, _) in zip(header, COLUMNS):
        col.markdown(f"**{label}**")

    by_id = {r.get("id"): r for r in records}
    for row in build_table_rows(records, tz):
        cols = st.columns(widths, vertical_alignment="center")
        cols[0].code(row["part_number"], language=None)
        # El title muestra la descripción completa al pasar el mouse
        cols[1].markdown(
            f"<span title='{html.escape(row['description_full'], quote=True)}'>"
            f"{html.escape(row['description'])}</span>",
            unsafe_allow_html=True,
        )
        cols[2].markdown(row["total_units"])
        cols[3].markdown(row["total_boxes"])
        cols[4].markdown(html.escape(row["unit_of_measure"]))
        cols[5].caption(row["registered_by"])
        cols[6].caption(row["registered_at"])
        with cols[7]:
            c_edit, c_del = st.columns(2)
            c_edit.button(
                "✏️",
                key=f"edit_entry_{row['id']}",
                help="Editar",
                on_click=on_edit,
                args=(by_id[row["id"]],),
            )
            c_del.button(
                "🗑️",
                key=f"delete_entry_{row['id']}",
                help="Eliminar",
                on_click=on_delete,
                args=(row["id"],),
            )
