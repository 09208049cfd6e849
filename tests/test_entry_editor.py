from datetime import datetime

import pytest

from services.entry_editor import CREATE, EDIT, EntryEditor


def test_create_mode_defaults():
    editor = EntryEditor.for_create("a@x.com")
    assert editor.mode == CREATE
    assert editor.title == "Nuevo Registro"
    assert editor.submit_label == "Guardar"
    assert editor.draft == {
        "part_number": "",
        "description": "",
        "total_units": 0,
        "total_boxes": 0,
        "unit_of_measure": "",
        "registered_by": "a@x.com",
    }


def test_edit_mode_copies_entry_without_id():
    entry = {
        "id": 7,
        "part_number": "PN-7",
        "description": "Caja de cartón",
        "total_units": 3,
        "total_boxes": 1,
        "unit_of_measure": "Caja",
        "registered_by": "b@x.com",
        "registered_at": datetime(2026, 1, 2, 3, 4, 5),
    }
    editor = EntryEditor.for_edit(entry)
    assert editor.mode == EDIT
    assert editor.title == "Editar Registro"
    assert editor.submit_label == "Actualizar"
    assert "id" not in editor.draft
    assert "registered_at" not in editor.draft
    assert editor.draft["part_number"] == "PN-7"


def test_submit_with_errors_returns_none():
    editor = EntryEditor.for_create("a@x.com")
    assert editor.submit() is None
    assert set(editor.errors) == {"part_number", "description", "unit_of_measure"}


def test_editing_a_field_clears_only_its_error():
    editor = EntryEditor.for_create("a@x.com")
    editor.submit()

    editor.set_field("part_number", "PN-1")

    assert "part_number" not in editor.errors
    assert "description" in editor.errors
    assert "unit_of_measure" in editor.errors


def test_submit_returns_trimmed_copy():
    editor = EntryEditor.for_create("a@x.com")
    editor.set_field("part_number", "  PN-1 ")
    editor.set_field("description", "Widget  ")
    editor.set_field("unit_of_measure", "Unidad")
    editor.set_field("total_units", 10)

    draft = editor.submit()

    assert draft["part_number"] == "PN-1"
    assert draft["description"] == "Widget"
    assert draft["total_units"] == 10
    assert editor.errors == {}
    # El borrador del editor no se modifica
    assert editor.draft["part_number"] == "  PN-1 "


def test_registered_by_is_read_only():
    editor = EntryEditor.for_create("a@x.com")
    with pytest.raises(ValueError):
        editor.set_field("registered_by", "otro@x.com")
    assert editor.draft["registered_by"] == "a@x.com"


def test_unknown_field():
    editor = EntryEditor.for_create("a@x.com")
    with pytest.raises(KeyError):
        editor.set_field("id", 1)
