import pytest

from services.exceptions import ValidationError
from services.validation import NOT_AN_INTEGER, ensure_valid, validate_entry


def test_valid_draft_has_no_errors(widget_draft):
    assert validate_entry(widget_draft) == {}


@pytest.mark.parametrize("field", ["part_number", "description", "unit_of_measure"])
@pytest.mark.parametrize("value", ["", "   ", None])
def test_required_text_fields(widget_draft, field, value):
    widget_draft[field] = value
    errors = validate_entry(widget_draft)
    assert list(errors) == [field]


def test_negative_quantities_are_rejected(widget_draft):
    widget_draft["total_units"] = -1
    widget_draft["total_boxes"] = -5
    errors = validate_entry(widget_draft)
    assert errors == {
        "total_units": "Las unidades no pueden ser negativas",
        "total_boxes": "Las cajas no pueden ser negativas",
    }


def test_zero_quantities_are_allowed(widget_draft):
    widget_draft["total_units"] = 0
    widget_draft["total_boxes"] = 0
    assert validate_entry(widget_draft) == {}


def test_non_integer_quantity(widget_draft):
    widget_draft["total_units"] = "10"
    assert validate_entry(widget_draft) == {"total_units": NOT_AN_INTEGER}


def test_all_rules_reported_together():
    errors = validate_entry(
        {
            "part_number": "",
            "description": "",
            "total_units": -1,
            "total_boxes": -1,
            "unit_of_measure": "",
        }
    )
    assert set(errors) == {
        "part_number",
        "description",
        "total_units",
        "total_boxes",
        "unit_of_measure",
    }


def test_ensure_valid_raises_with_errors(widget_draft):
    widget_draft["part_number"] = " "
    with pytest.raises(ValidationError) as exc:
        ensure_valid(widget_draft)
    assert exc.value.errors == {"part_number": "El Part Number es requerido"}
