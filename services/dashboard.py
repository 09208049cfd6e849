"""
Orquestador del panel de inventario.

Guarda la lista canónica de registros (siempre recargada desde la base
después de cada cambio), el término de búsqueda, la vista filtrada con sus
totales y el estado del formulario. No depende de Streamlit: la página lo
guarda en st.session_state y llama sus métodos desde los botones.
"""
import logging
from datetime import date, tzinfo
from typing import List, Optional, Tuple

from services.csv_export import entries_to_csv, export_filename
from services.entry_editor import EntryEditor
from services.entry_store import EntryStore
from services.exceptions import FetchError, MutationError
from services.inventory_view import aggregate_entries, filter_entries

logger = logging.getLogger(__name__)


class InventoryDashboard:
    def __init__(self, store: EntryStore):
        self.store = store
        self.records: List[dict] = []
        self.filtered: List[dict] = []
        self.stats = aggregate_entries([])
        self.search_term = ""
        self.loading = False
        self.loaded = False
        self.editor: Optional[EntryEditor] = None
        self.editor_version = 0
        self.editing_id = None
        self.pending_delete_id = None
        self.last_error: Optional[str] = None

    # ----- Lista -----

    def activate(self) -> None:
        """Carga inicial; solo la primera vez."""
        if not self.loaded:
            self.refresh()

    def refresh(self) -> None:
        self.loading = True
        try:
            records = self.store.fetch_all()
        except FetchError as exc:
            # Se mantiene la última lista conocida
            logger.warning("No se pudo recargar el inventario: %s", exc.message)
        else:
            self._set_records(records)
        finally:
            self.loading = False
            self.loaded = True

    def set_search(self, term: str) -> None:
        self.search_term = term or ""
        self._recompute()

    def _set_records(self, records: List[dict]) -> None:
        self.records = list(records)
        self._recompute()

    def _recompute(self) -> None:
        self.filtered = filter_entries(self.records, self.search_term)
        # Los totales son sobre la lista completa, no sobre la vista filtrada
        self.stats = aggregate_entries(self.records)

    # ----- Formulario -----

    def open_create(self, user_email: str) -> EntryEditor:
        self.editor_version += 1
        self.editing_id = None
        self.editor = EntryEditor.for_create(user_email)
        return self.editor

    def open_edit(self, entry: dict) -> EntryEditor:
        self.editor_version += 1
        self.editing_id = entry["id"]
        self.editor = EntryEditor.for_edit(entry)
        return self.editor

    def close_editor(self) -> None:
        self.editor = None
        self.editing_id = None
        self.last_error = None

    def save(self, draft: dict) -> bool:
        """
        Actualiza si hay un registro en edición; si no, inserta.
        En caso de error el formulario queda abierto con el borrador intacto.
        """
        try:
            if self.editing_id is not None:
                self.store.update(self.editing_id, draft)
            else:
                self.store.insert(draft)
        except MutationError as exc:
            logger.error("No se pudo guardar el registro: %s", exc.message)
            message = (
                "Error al actualizar el registro"
                if self.editing_id is not None
                else "Error al crear el registro"
            )
            self.last_error = message
            if self.editor is not None:
                self.editor.save_error = message
            return False

        self.last_error = None
        self.close_editor()
        self.refresh()
        return True

    def submit_editor(self) -> bool:
        """Valida el formulario abierto y lo guarda si es válido."""
        if self.editor is None:
            return False
        draft = self.editor.submit()
        if draft is None:
            return False
        return self.save(draft)

    # ----- Eliminación -----

    def request_delete(self, entry_id) -> None:
        self.pending_delete_id = entry_id

    def cancel_delete(self) -> None:
        self.pending_delete_id = None

    def confirm_delete(self) -> bool:
        entry_id = self.pending_delete_id
        if entry_id is None:
            return False
        self.pending_delete_id = None
        try:
            self.store.delete(entry_id)
        except MutationError as exc:
            logger.error("No se pudo eliminar el registro %s: %s", entry_id, exc.message)
            self.last_error = "Error al eliminar el registro"
            return False

        self.last_error = None
        self.refresh()
        return True

    # ----- Exportación -----

    @property
    def can_export(self) -> bool:
        return bool(self.filtered)

    def export_csv(
        self, today: Optional[date] = None, tz: Optional[tzinfo] = None
    ) -> Tuple[str, bytes]:
        """CSV de la vista filtrada (no de la lista completa)."""
        csv_text = entries_to_csv(self.filtered, tz)
        return export_filename(today), csv_text.encode("utf-8")
