"""
Carga registros de inventario de ejemplo para pruebas.
Puede ejecutarse en local o en producción (cuidado en producción).
"""
import logging
import sys
from pathlib import Path

_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from config.database import SessionLocal, init_db
from config.logging_config import setup_logging
from services.entry_store import EntryStore
from services.exceptions import StoreError
from services.validation import ensure_valid

logger = logging.getLogger(__name__)

SAMPLE_ENTRIES = [
    dict(
        part_number="PN-1001",
        description="Tornillo hexagonal M8 x 40 acero galvanizado",
        total_units=1200,
        total_boxes=12,
        unit_of_measure="Pieza",
    ),
    dict(
        part_number="PN-1002",
        description="Tuerca M8 acero inoxidable",
        total_units=800,
        total_boxes=4,
        unit_of_measure="Pieza",
    ),
    dict(
        part_number="PN-2001",
        description="Cinta de embalaje transparente 48 mm",
        total_units=96,
        total_boxes=2,
        unit_of_measure="Caja",
    ),
    dict(
        part_number="PN-3001",
        description="Lubricante multiuso",
        total_units=40,
        total_boxes=5,
        unit_of_measure="Litro",
    ),
    dict(
        part_number="PN-4001",
        description="Cable eléctrico calibre 12",
        total_units=300,
        total_boxes=3,
        unit_of_measure="Metro",
    ),
]


def main(registered_by: str = "seed@inventario.local") -> None:
    setup_logging()
    init_db()
    store = EntryStore(SessionLocal)

    existing = {e["part_number"] for e in store.fetch_all()}
    created = 0
    for sample in SAMPLE_ENTRIES:
        if sample["part_number"] in existing:
            continue
        draft = dict(sample, registered_by=registered_by)
        ensure_valid(draft)
        try:
            store.insert(draft)
            created += 1
        except StoreError as exc:
            logger.error("No se pudo crear %s: %s", sample["part_number"], exc.message)

    logger.info("%s registros creados, %s ya existían", created, len(SAMPLE_ENTRIES) - created)


if __name__ == "__main__":
    main()
