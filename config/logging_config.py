"""
Configuración centralizada de logging.

Aplica el nivel raíz desde LOG_LEVEL y un nivel aparte para los loggers de
SQLAlchemy (LOG_LEVEL_SQL), para poder silenciar las sentencias SQL sin
afectar al resto de la aplicación.
"""
import logging
import os
import sys

_SQL_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool")


def setup_logging() -> None:
    """
    Configura el logging de la aplicación. Llamar una sola vez al iniciar.
    """
    root_level = _parse_level(os.getenv("LOG_LEVEL", "INFO"))
    sql_level = _parse_level(os.getenv("LOG_LEVEL_SQL", "WARNING"))

    root = logging.getLogger()
    root.setLevel(root_level)

    # Streamlit no siempre agrega un handler al logger raíz
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s")
        )
        root.addHandler(handler)

    for name in _SQL_LOGGERS:
        logging.getLogger(name).setLevel(sql_level)

    logging.getLogger(__name__).debug(
        "Logging configurado: root=%s, sql=%s",
        logging.getLevelName(root_level),
        logging.getLevelName(sql_level),
    )


def _parse_level(raw: str) -> int:
    """Convierte el nombre de un nivel a la constante de logging (INFO por defecto)."""
    numeric = getattr(logging, (raw or "").upper(), None)
    if isinstance(numeric, int):
        return numeric
    return logging.INFO
