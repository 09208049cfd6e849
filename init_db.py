"""
Script para inicializar la base de datos del inventario.
- Crea todas las tablas
- Garantiza la existencia de un usuario admin por defecto
"""
import logging

from config.database import init_db
from config.logging_config import setup_logging
from services.auth_service import ensure_default_admin

logger = logging.getLogger(__name__)


def main() -> None:
    setup_logging()
    logger.info("Inicializando base de datos del inventario...")
    init_db()
    logger.info("Tablas creadas (si no existían).")
    ensure_default_admin()


if __name__ == "__main__":
    main()
