"""
Reglas de validación del borrador de un registro antes de guardarlo.
"""
from typing import Dict

from services.exceptions import ValidationError

REQUIRED_TEXT_FIELDS = {
    "part_number": "El Part Number es requerido",
    "description": "La descripción es requerida",
    "unit_of_measure": "La unidad de medida es requerida",
}

NON_NEGATIVE_FIELDS = {
    "total_units": "Las unidades no pueden ser negativas",
    "total_boxes": "Las cajas no pueden ser negativas",
}

NOT_AN_INTEGER = "Debe ser un número entero"


def validate_entry(draft: dict) -> Dict[str, str]:
    """
    Devuelve un dict campo -> mensaje de error. Vacío significa válido.
    """
    errors: Dict[str, str] = {}

    for field, message in REQUIRED_TEXT_FIELDS.items():
        if not str(draft.get(field) or "").strip():
            errors[field] = message

    for field, message in NON_NEGATIVE_FIELDS.items():
        value = draft.get(field)
        if isinstance(value, bool) or not isinstance(value, int):
            errors[field] = NOT_AN_INTEGER
        elif value < 0:
            errors[field] = message

    return errors


def ensure_valid(draft: dict) -> None:
    """Lanza ValidationError si el borrador no pasa las reglas."""
    errors = validate_entry(draft)
    if errors:
        raise ValidationError(errors)
