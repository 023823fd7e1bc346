import pytest

from student_records.models import StudentForm
from student_records.validation import (
    ValidationError,
    ValidationResult,
    address_has_error,
    name_has_error,
    phone_has_error,
    subject_has_error,
    validate,
)


def test_valid_candidate_passes():
    result = validate({"name": "John Doe", "phone": "1234567890", "subject": ["Math"], "address": "x" * 10})
    assert result.is_valid
    assert result.errors() == []
    assert result.as_dict() == {
        "nameError": False,
        "phoneError": False,
        "subjectError": False,
        "addressError": False,
        "isValid": True,
    }


def test_every_field_invalid():
    result = validate({"name": "John3", "phone": "123", "subject": [], "address": "x" * 60})
    assert not result.is_valid
    assert result.errors() == ["name", "phone", "subject", "address"]
    assert result.as_dict()["isValid"] is False


def test_accepts_student_form():
    form = StudentForm(name="Ana Lee", subject="Math, Science", phone="0123456789", address="")
    assert validate(form).is_valid


@pytest.mark.parametrize("name, bad", [
    ("John Doe", False),
    ("Mary\tAnn", False),
    ("", True),
    ("John3", True),
    ("O'Brien", True),
    ("José", True),
])
def test_name_rule(name, bad):
    assert name_has_error(name) is bad


@pytest.mark.parametrize("phone, bad", [
    ("1234567890", False),
    ("123456789", True),
    ("12345678901", True),
    ("123-456-7890", True),
    ("1234567890\n", True),
    ("١٢٣٤٥٦٧٨٩٠", True),  # non-ASCII digits
    ("", True),
])
def test_phone_rule(phone, bad):
    assert phone_has_error(phone) is bad


@pytest.mark.parametrize("subject, bad", [
    (["Math"], False),
    ("Math", False),
    ("Math, Science", False),
    ([], True),
    ("", True),
    (" , ", True),
    (["", "  "], True),
    (None, True),
])
def test_subject_rule(subject, bad):
    assert subject_has_error(subject) is bad


def test_address_limit_is_inclusive():
    assert not address_has_error("")
    assert not address_has_error("a" * 55)
    assert address_has_error("a" * 56)


def test_validation_error_names_failing_fields():
    err = ValidationError(ValidationResult(name_error=True, phone_error=True))
    assert isinstance(err, ValueError)
    assert "name" in str(err) and "phone" in str(err)
    assert not err.result.is_valid
