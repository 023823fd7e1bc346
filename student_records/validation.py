"""
Design (validation.py)
- Purpose: Gate record creation with fixed per-field rules, independent of storage.
- Inputs: A candidate (StudentForm or plain mapping).
- Outputs: ValidationResult with one "has error" flag per checked field plus is_valid.
- Side effects: None (rendering of error text is the view's job).
- Thread-safety: Stateless; safe to call from any thread.

Rules:
    name     letters and whitespace only, at least one character
    phone    exactly 10 ASCII digits, no separators
    subject  at least one subject selected/provided
    address  at most ADDRESS_MAX_LENGTH characters (no minimum)
"""

import re
from dataclasses import dataclass
from typing import List, Sequence, Union

from .config import ADDRESS_MAX_LENGTH, NAME_PATTERN, PHONE_PATTERN
from .models import StudentForm
from .utils import split_subjects

_NAME_RE = re.compile(NAME_PATTERN)
_PHONE_RE = re.compile(PHONE_PATTERN, re.ASCII)

FIELDS = ("name", "phone", "subject", "address")


@dataclass(frozen=True)
class ValidationResult:
    """Per-field error flags; a field flag is True when that field failed."""
    name_error: bool = False
    phone_error: bool = False
    subject_error: bool = False
    address_error: bool = False

    @property
    def is_valid(self) -> bool:
        return not (self.name_error or self.phone_error or self.subject_error or self.address_error)

    def errors(self) -> List[str]:
        """Names of the failing fields, in form order."""
        return [f for f in FIELDS if getattr(self, f"{f}_error")]

    def as_dict(self) -> dict:
        return {
            "nameError": self.name_error,
            "phoneError": self.phone_error,
            "subjectError": self.subject_error,
            "addressError": self.address_error,
            "isValid": self.is_valid,
        }


class ValidationError(ValueError):
    """Raised when a candidate that fails validation reaches StudentStore.add."""

    def __init__(self, result: ValidationResult):
        self.result = result
        super().__init__(f"invalid student fields: {', '.join(result.errors())}")


def name_has_error(name: str) -> bool:
    return not name or _NAME_RE.fullmatch(name) is None


def phone_has_error(phone: str) -> bool:
    return not phone or _PHONE_RE.fullmatch(phone) is None


def subject_has_error(subject: Union[Sequence[str], str, None]) -> bool:
    if subject is None:
        return True
    if isinstance(subject, str):
        return not split_subjects(subject)
    return not any(str(s).strip() for s in subject)


def address_has_error(address: str) -> bool:
    return len(address or "") > ADDRESS_MAX_LENGTH


def validate(candidate: Union[StudentForm, dict]) -> ValidationResult:
    """
    Purpose: Check every rule and report all failures at once (no short-circuit).
    Inputs: candidate (StudentForm, or a mapping with name/phone/subject/address keys).
    Outputs: ValidationResult.
    Side effects: None. Does not consult stored records (no duplicate checks).
    """
    if not isinstance(candidate, StudentForm):
        candidate = StudentForm.from_mapping(candidate)
    return ValidationResult(
        name_error=name_has_error(candidate.name),
        phone_error=phone_has_error(candidate.phone),
        subject_error=subject_has_error(candidate.subject),
        address_error=address_has_error(candidate.address),
    )
