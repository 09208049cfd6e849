"""
Estado del formulario de registro (nuevo o edición).

El editor solo valida y entrega el borrador; quien lo abrió decide si se
inserta o se actualiza.
"""
from typing import Dict, Optional

from models.entry import DRAFT_FIELDS
from services.validation import validate_entry

CREATE = "create"
EDIT = "edit"

READ_ONLY_FIELDS = ("registered_by",)
_TEXT_FIELDS = ("part_number", "description", "unit_of_measure", "registered_by")


class EntryEditor:
    def __init__(self, mode: str, draft: dict):
        self.mode = mode
        self.draft = draft
        self.errors: Dict[str, str] = {}
        self.save_error: Optional[str] = None

    @classmethod
    def for_create(cls, user_email: str) -> "EntryEditor":
        return cls(
            CREATE,
            {
                "part_number": "",
                "description": "",
                "total_units": 0,
                "total_boxes": 0,
                "unit_of_measure": "",
                "registered_by": user_email or "",
            },
        )

    @classmethod
    def for_edit(cls, entry: dict) -> "EntryEditor":
        return cls(EDIT, {field: entry.get(field) for field in DRAFT_FIELDS})

    @property
    def title(self) -> str:
        return "Editar Registro" if self.mode == EDIT else "Nuevo Registro"

    @property
    def submit_label(self) -> str:
        return "Actualizar" if self.mode == EDIT else "Guardar"

    def set_field(self, name: str, value) -> None:
        """
        Actualiza un campo y limpia solo el error de ese campo.
        """
        if name not in DRAFT_FIELDS:
            raise KeyError(name)
        if name in READ_ONLY_FIELDS:
            raise ValueError(f"El campo {name} es de solo lectura")
        self.draft[name] = value
        self.errors.pop(name, None)

    def submit(self) -> Optional[dict]:
        """
        Valida el borrador. Devuelve una copia lista para guardar o None si
        hay errores (quedan en self.errors).
        """
        self.errors = validate_entry(self.draft)
        if self.errors:
            return None
        out = dict(self.draft)
        for field in _TEXT_FIELDS:
            if isinstance(out.get(field), str):
                out[field] = out[field].strip()
        return out
