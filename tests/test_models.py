"""Tests for the ValidationResult convenience constructors and wire aliases."""
import pytest
from pydantic import ValidationError

from orchestrator.domain.models import Lecture, ValidationResult, Violation


def test_ok_is_valid_without_violations() -> None:
    result = ValidationResult.ok()
    assert result.valid is True
    assert result.violations == []


@pytest.mark.parametrize("violations", [None, []])
def test_from_violations_without_entries_is_valid(violations) -> None:
    result = ValidationResult.from_violations(violations)
    assert result.valid is True
    assert result.violations == []


def test_from_violations_with_entries_is_invalid() -> None:
    clash = Violation(code="room_clash", message="R1 double-booked", room_id="R1")
    result = ValidationResult.from_violations([clash])
    assert result.valid is False
    assert result.violations == [clash]


def test_models_are_frozen() -> None:
    result = ValidationResult.ok()
    with pytest.raises(ValidationError):
        result.valid = False


def test_camel_case_on_the_wire() -> None:
    lecture = Lecture.model_validate({"id": "L1", "courseId": "C1", "enrollment": 12, "extra": 1})
    assert lecture.course_id == "C1"
    assert lecture.model_dump(by_alias=True) == {
        "id": "L1",
        "courseId": "C1",
        "title": None,
        "enrollment": 12,
    }
