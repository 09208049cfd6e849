from datetime import date

import pytest

from services.dashboard import InventoryDashboard


@pytest.fixture()
def dashboard(flaky_store):
    return InventoryDashboard(flaky_store)


def _fill(editor, draft):
    for field, value in draft.items():
        if field != "registered_by":
            editor.set_field(field, value)


def test_activate_fetches_once(dashboard, flaky_store):
    dashboard.activate()
    dashboard.activate()
    assert flaky_store.calls == ["fetch_all"]
    assert dashboard.loaded
    assert not dashboard.loading


def test_create_flow_refetches_list(dashboard, flaky_store, widget_draft):
    dashboard.activate()
    editor = dashboard.open_create("a@x.com")
    _fill(editor, widget_draft)

    assert dashboard.submit_editor() is True

    assert flaky_store.calls == ["fetch_all", "insert", "fetch_all"]
    assert dashboard.editor is None
    assert dashboard.editing_id is None
    assert len(dashboard.records) == 1
    entry = dashboard.records[0]
    assert entry["id"] is not None
    assert entry["registered_at"] is not None
    assert entry["registered_by"] == "a@x.com"
    assert dashboard.stats == {"count": 1, "total_units": 10, "total_boxes": 2}


def test_search_is_case_insensitive_and_export_has_one_row(dashboard, flaky_store, widget_draft):
    flaky_store.inner.insert(widget_draft)
    dashboard.activate()

    dashboard.set_search("widget")

    assert [r["part_number"] for r in dashboard.filtered] == ["PN-1"]
    file_name, data = dashboard.export_csv(today=date(2026, 10, 19))
    assert file_name == "inventario_2026-10-19.csv"
    lines = data.decode("utf-8").splitlines()
    assert lines[0] == (
        "Part Number,Descripción,Unidades Totales,Cajas Totales,"
        "Unidad de Medida,Registrado Por,Fecha de Registro"
    )
    assert len(lines) == 2
    assert lines[1].startswith("PN-1,Widget,10,2,Unidad,a@x.com,")


def test_no_match_keeps_stats_and_disables_export(dashboard, flaky_store, widget_draft):
    flaky_store.inner.insert(widget_draft)
    flaky_store.inner.insert(dict(widget_draft, part_number="PN-2", total_units=5))
    dashboard.activate()

    dashboard.set_search("nonexistent-xyz")

    assert dashboard.filtered == []
    assert dashboard.stats == {"count": 2, "total_units": 15, "total_boxes": 4}
    assert dashboard.can_export is False


def test_export_uses_filtered_view(dashboard, flaky_store, widget_draft):
    flaky_store.inner.insert(widget_draft)
    flaky_store.inner.insert(dict(widget_draft, part_number="XY-9", description="Tuerca"))
    dashboard.activate()

    dashboard.set_search("tuerca")
    _, data = dashboard.export_csv()

    lines = data.decode("utf-8").splitlines()
    assert len(lines) == 2
    assert lines[1].startswith("XY-9,")


def test_edit_flow_updates_existing_entry(dashboard, flaky_store, widget_draft):
    created = flaky_store.inner.insert(widget_draft)
    dashboard.activate()

    editor = dashboard.open_edit(dashboard.records[0])
    editor.set_field("total_units", 99)
    assert dashboard.submit_editor() is True

    assert "update" in flaky_store.calls
    assert "insert" not in flaky_store.calls
    assert dashboard.records[0]["id"] == created["id"]
    assert dashboard.records[0]["total_units"] == 99
    assert dashboard.records[0]["registered_at"] == created["registered_at"]


def test_invalid_draft_never_reaches_store(dashboard, flaky_store):
    dashboard.activate()
    dashboard.open_create("a@x.com")

    assert dashboard.submit_editor() is False

    assert flaky_store.calls == ["fetch_all"]
    assert dashboard.editor is not None
    assert dashboard.editor.errors


def test_save_failure_keeps_editor_open(dashboard, flaky_store, widget_draft):
    dashboard.activate()
    editor = dashboard.open_create("a@x.com")
    _fill(editor, widget_draft)
    flaky_store.fail_mutations = True

    assert dashboard.submit_editor() is False

    assert dashboard.editor is editor
    assert editor.save_error == "Error al crear el registro"
    assert dashboard.last_error == "Error al crear el registro"
    assert editor.draft["part_number"] == "PN-1"

    # Reintento sin volver a escribir los datos
    flaky_store.fail_mutations = False
    assert dashboard.submit_editor() is True
    assert len(dashboard.records) == 1


def test_update_failure_message(dashboard, flaky_store, widget_draft):
    flaky_store.inner.insert(widget_draft)
    dashboard.activate()
    dashboard.open_edit(dashboard.records[0])
    flaky_store.fail_mutations = True

    assert dashboard.submit_editor() is False
    assert dashboard.last_error == "Error al actualizar el registro"


def test_close_editor_discards_draft(dashboard):
    editor = dashboard.open_create("a@x.com")
    editor.set_field("part_number", "PN-X")
    dashboard.close_editor()
    assert dashboard.editor is None

    assert dashboard.open_create("a@x.com").draft["part_number"] == ""


def test_delete_requires_confirmation(dashboard, flaky_store, widget_draft):
    created = flaky_store.inner.insert(widget_draft)
    dashboard.activate()

    dashboard.request_delete(created["id"])
    dashboard.cancel_delete()
    assert dashboard.confirm_delete() is False
    assert "delete" not in flaky_store.calls

    dashboard.request_delete(created["id"])
    assert dashboard.confirm_delete() is True
    assert dashboard.records == []
    assert dashboard.pending_delete_id is None


def test_delete_failure_leaves_list(dashboard, flaky_store, widget_draft):
    flaky_store.inner.insert(widget_draft)
    dashboard.activate()
    before = list(dashboard.records)

    dashboard.request_delete(12345)
    assert dashboard.confirm_delete() is False

    assert dashboard.last_error == "Error al eliminar el registro"
    assert dashboard.records == before


def test_fetch_failure_keeps_last_known_list(dashboard, flaky_store, widget_draft):
    flaky_store.inner.insert(widget_draft)
    dashboard.activate()
    flaky_store.fail_fetch = True

    dashboard.refresh()

    assert len(dashboard.records) == 1
    assert dashboard.loading is False
    assert dashboard.last_error is None


def test_initial_fetch_failure_leaves_empty_list(dashboard, flaky_store):
    flaky_store.fail_fetch = True
    dashboard.activate()
    assert dashboard.records == []
    assert dashboard.filtered == []
    assert dashboard.loaded
