"""
Registro de inventario: número de parte, descripción, unidades y cajas.
"""
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, String, Text

from config.database import Base

# Campos editables de un registro (el "borrador" del formulario)
DRAFT_FIELDS = (
    "part_number",
    "description",
    "total_units",
    "total_boxes",
    "unit_of_measure",
    "registered_by",
)

# Opciones sugeridas en el formulario; no es una restricción de la tabla
UNIT_OPTIONS = [
    "Unidad",
    "Pieza",
    "Caja",
    "Paquete",
    "Kilogramo",
    "Gramo",
    "Litro",
    "Metro",
    "Otro",
]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Entry(Base):
    """
    Registro de inventario. El id y la fecha de registro los asigna la base.
    """

    __tablename__ = "entries"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    part_number = Column(String(100), nullable=False, index=True)
    description = Column(Text, nullable=True)
    total_units = Column(Integer, nullable=False, default=0)
    total_boxes = Column(Integer, nullable=False, default=0)
    unit_of_measure = Column(String(50), nullable=True)
    registered_by = Column(String(255), nullable=True)
    registered_at = Column(DateTime, nullable=False, default=_utcnow, index=True)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "part_number": self.part_number,
            "description": self.description,
            "total_units": self.total_units,
            "total_boxes": self.total_boxes,
            "unit_of_measure": self.unit_of_measure,
            "registered_by": self.registered_by,
            "registered_at": self.registered_at,
        }
