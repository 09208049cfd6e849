"""
Vista filtrada y totales del inventario en memoria.
"""
from typing import Dict, List, Sequence

SEARCH_FIELDS = ("part_number", "description", "unit_of_measure", "registered_by")


def filter_entries(records: Sequence[dict], term: str) -> List[dict]:
    """
    Filtra por substring (sin distinguir mayúsculas) en número de parte,
    descripción, unidad de medida o usuario. Mantiene el orden original.
    """
    if not (term or "").strip():
        return list(records)

    needle = term.lower()
    return [
        r
        for r in records
        if any(needle in (r.get(field) or "").lower() for field in SEARCH_FIELDS)
    ]


def aggregate_entries(records: Sequence[dict]) -> Dict[str, int]:
    return {
        "count": len(records),
        "total_units": sum(r.get("total_units") or 0 for r in records),
        "total_boxes": sum(r.get("total_boxes") or 0 for r in records),
    }
