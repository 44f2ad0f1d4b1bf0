# tests/test_fields.py

import pytest

from core.exceptions import ConstraintViolation
from models.fields import Level, Name, Phone, Remark


@pytest.mark.parametrize("value", ["Alex Yeoh", "alex", "12345", "Alex 2nd", "A"])
def test_name_accepts_alphanumeric_words(value):
    assert Name(value).value == value


@pytest.mark.parametrize("value", ["", " ", " Alex", "Alex*", "Alex-Yeoh", "Zoë", "李明", "Alex²"])
def test_name_rejects_invalid_input(value):
    with pytest.raises(ConstraintViolation) as exc_info:
        Name(value)

    assert str(exc_info.value) == Name.MESSAGE_CONSTRAINTS


@pytest.mark.parametrize("value", ["911", "93121534", "124293842033123"])
def test_phone_accepts_three_or_more_digits(value):
    assert Phone(value).value == value


@pytest.mark.parametrize(
    "value", ["", "91", "phone", "9011p041", "9312 1534", "+6591234567", "٩١٢٣", "9¹²"]
)
def test_phone_rejects_invalid_input(value):
    with pytest.raises(ConstraintViolation):
        Phone(value)


@pytest.mark.parametrize("value", ["Sec 3", "JC1", "P6", "Year 10"])
def test_level_accepts_alphanumeric_words(value):
    assert Level(value).value == value


@pytest.mark.parametrize("value", ["", "   ", " Sec 3", "Sec-3", "Sec.3", "Sec ³", "Sec ３", "中三"])
def test_level_rejects_invalid_input(value):
    with pytest.raises(ConstraintViolation) as exc_info:
        Level(value)

    assert str(exc_info.value) == Level.MESSAGE_CONSTRAINTS


@pytest.mark.parametrize("value", ["-", "Needs help w/ algebra", "a", "Very chatty!"])
def test_remark_accepts_any_text_not_starting_with_whitespace(value):
    assert Remark(value).value == value


@pytest.mark.parametrize("value", ["", " ", " leading space", "\ttab"])
def test_remark_rejects_blank_or_whitespace_leading_input(value):
    with pytest.raises(ConstraintViolation):
        Remark(value)


def test_fields_compare_by_value_and_type():
    assert Name("Sec 3") == Name("Sec 3")
    assert hash(Name("Sec 3")) == hash(Name("Sec 3"))
    assert Name("Sec 3") != Name("Sec 4")
    assert Name("Sec 3") != Level("Sec 3")


def test_constraint_violation_is_a_value_error():
    with pytest.raises(ValueError):
        Phone("12")
