"""Проверки валидаторов настроек."""

from __future__ import annotations

from dockdash.settings.validators import (
    CompositeValidator,
    EnumValidator,
    ItemsValidator,
    RangeValidator,
    RegexValidator,
    TypeValidator,
)


def test_type_validator_success() -> None:
    assert TypeValidator(int).validate(5) == (True, "")


def test_type_validator_rejects_bool_for_int() -> None:
    is_valid, error = TypeValidator(int).validate(True)
    assert not is_valid
    assert "bool" in error


def test_type_validator_accepts_bool_when_expected() -> None:
    assert TypeValidator(bool).validate(False) == (True, "")


def test_range_validator_out_of_bounds() -> None:
    is_valid, error = RangeValidator(1, 10).validate(11)
    assert not is_valid
    assert "out of range" in error


def test_enum_validator() -> None:
    validator = EnumValidator(["en", "ru"])
    assert validator.validate("ru") == (True, "")
    assert not validator.validate("de")[0]


def test_regex_validator_non_string() -> None:
    is_valid, error = RegexValidator(r"^\d+$").validate(10)
    assert not is_valid
    assert "string" in error


def test_items_validator_reports_index() -> None:
    validator = ItemsValidator(TypeValidator(str))
    assert validator.validate(["a", "b"]) == (True, "")
    is_valid, error = validator.validate(["a", 2])
    assert not is_valid
    assert error.startswith("Item 1")
    assert not validator.validate("a")[0]


def test_composite_stops_at_type_error() -> None:
    validator = CompositeValidator([TypeValidator(int), RangeValidator(1, 10)])
    is_valid, error = validator.validate("5")
    assert not is_valid
    assert "int" in error
