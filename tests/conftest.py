import os
import sys
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

os.environ.setdefault("DATABASE_URL", "sqlite://")

from config.database import init_db  # noqa: E402
from services.entry_store import EntryStore  # noqa: E402
from services.exceptions import FetchError, MutationError  # noqa: E402


class FlakyStore:
    """Envuelve un EntryStore real y permite forzar fallas."""

    def __init__(self, inner: EntryStore):
        self.inner = inner
        self.fail_fetch = False
        self.fail_mutations = False
        self.calls = []

    def fetch_all(self):
        self.calls.append("fetch_all")
        if self.fail_fetch:
            raise FetchError("Error al cargar los registros")
        return self.inner.fetch_all()

    def insert(self, draft):
        self.calls.append("insert")
        if self.fail_mutations:
            raise MutationError("Error al crear el registro")
        return self.inner.insert(draft)

    def update(self, entry_id, draft):
        self.calls.append("update")
        if self.fail_mutations:
            raise MutationError("Error al actualizar el registro")
        return self.inner.update(entry_id, draft)

    def delete(self, entry_id):
        self.calls.append("delete")
        if self.fail_mutations:
            raise MutationError("Error al eliminar el registro")
        return self.inner.delete(entry_id)


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def store(session_factory):
    return EntryStore(session_factory)


@pytest.fixture()
def flaky_store(store):
    return FlakyStore(store)


@pytest.fixture()
def widget_draft():
    return {
        "part_number": "PN-1",
        "description": "Widget",
        "total_units": 10,
        "total_boxes": 2,
        "unit_of_measure": "Unidad",
        "registered_by": "a@x.com",
    }
