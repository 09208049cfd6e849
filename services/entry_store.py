"""
Cliente de la tabla de registros (entries).

Cada operación abre su propia sesión y la cierra al terminar. Los errores de
SQLAlchemy se registran en el log y se devuelven como StoreError con un
mensaje para el usuario; no hay reintentos.
"""
import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from models.entry import DRAFT_FIELDS, Entry
from services.exceptions import EntryNotFoundError, FetchError, MutationError

logger = logging.getLogger(__name__)


class EntryStore:
    """
    Acceso a los registros de inventario a través de un session factory.
    """

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def _session(self) -> Session:
        return self._session_factory()

    def fetch_all(self) -> List[dict]:
        """Todos los registros, los más recientes primero."""
        db = self._session()
        try:
            rows = (
                db.execute(
                    select(Entry).order_by(Entry.registered_at.desc(), Entry.id.desc())
                )
                .scalars()
                .all()
            )
            return [r.to_dict() for r in rows]
        except SQLAlchemyError as exc:
            logger.error("Error al consultar registros: %s", exc)
            raise FetchError("Error al cargar los registros") from exc
        finally:
            db.close()

    def insert(self, draft: dict) -> dict:
        db = self._session()
        try:
            entry = Entry(**_draft_values(draft))
            db.add(entry)
            db.commit()
            db.refresh(entry)
            logger.info("Registro %s creado (%s)", entry.id, entry.part_number)
            return entry.to_dict()
        except SQLAlchemyError as exc:
            db.rollback()
            logger.error("Error al insertar registro: %s", exc)
            raise MutationError("Error al crear el registro") from exc
        finally:
            db.close()

    def update(self, entry_id, draft: dict) -> None:
        """Reemplaza los campos editables del registro; id y fecha no cambian."""
        db = self._session()
        try:
            entry: Optional[Entry] = db.get(Entry, entry_id)
            if entry is None:
                raise EntryNotFoundError(entry_id)
            for field, value in _draft_values(draft).items():
                setattr(entry, field, value)
            db.commit()
            logger.info("Registro %s actualizado", entry_id)
        except SQLAlchemyError as exc:
            db.rollback()
            logger.error("Error al actualizar registro %s: %s", entry_id, exc)
            raise MutationError("Error al actualizar el registro") from exc
        finally:
            db.close()

    def delete(self, entry_id) -> None:
        db = self._session()
        try:
            entry: Optional[Entry] = db.get(Entry, entry_id)
            if entry is None:
                raise EntryNotFoundError(entry_id)
            db.delete(entry)
            db.commit()
            logger.info("Registro %s eliminado", entry_id)
        except SQLAlchemyError as exc:
            db.rollback()
            logger.error("Error al eliminar registro %s: %s", entry_id, exc)
            raise MutationError("Error al eliminar el registro") from exc
        finally:
            db.close()


def _draft_values(draft: dict) -> dict:
    return {field: draft.get(field) for field in DRAFT_FIELDS}
