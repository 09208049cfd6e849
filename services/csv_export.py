"""
Exportación a CSV de la vista filtrada del inventario.
"""
from datetime import date, tzinfo
from typing import List, Optional, Sequence

import pandas as pd

from utils.formatters import format_datetime

EXPORT_COLUMNS = [
    "Part Number",
    "Descripción",
    "Unidades Totales",
    "Cajas Totales",
    "Unidad de Medida",
    "Registrado Por",
    "Fecha de Registro",
]


def build_export_rows(records: Sequence[dict], tz: Optional[tzinfo] = None) -> List[dict]:
    return [
        {
            "Part Number": r.get("part_number") or "",
            "Descripción": r.get("description") or "",
            "Unidades Totales": r.get("total_units") or 0,
            "Cajas Totales": r.get("total_boxes") or 0,
            "Unidad de Medida": r.get("unit_of_measure") or "",
            "Registrado Por": r.get("registered_by") or "",
            "Fecha de Registro": format_datetime(r.get("registered_at"), tz),
        }
        for r in records
    ]


def entries_to_csv(records: Sequence[dict], tz: Optional[tzinfo] = None) -> str:
    df = pd.DataFrame(build_export_rows(records, tz), columns=EXPORT_COLUMNS)
    return df.to_csv(index=False)


def export_filename(today: Optional[date] = None) -> str:
    """Nombre del archivo con la fecha de exportación: inventario_YYYY-MM-DD.csv"""
    today = today or date.today()
    return f"inventario_{today.isoformat()}.csv"
