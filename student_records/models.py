"""
Design (models.py)
- Purpose: Define simple, typed data structures for domain entities (Student, StudentForm).
- Inputs: Field values.
- Outputs: Dataclass instances.
- Side effects: None.
- Thread-safety: Student is frozen; StudentForm is a plain container owned by the view.
"""

from dataclasses import dataclass, field
from typing import List, Sequence, Union

from .utils import split_subjects


@dataclass(frozen=True)
class Student:
    """
    Design (Student)
    - Purpose: One persisted student record.
    - Fields:
        id: unique integer, assigned by StudentStore and never reused.
        name: letters and spaces only.
        grade: free-form class label (e.g. "10th").
        subject: subjects joined with ", ".
        phone: exactly 10 digits.
        address: at most 55 characters.
    """
    id: int
    name: str
    grade: str = ""
    subject: str = ""
    phone: str = ""
    address: str = ""

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "grade": self.grade,
            "subject": self.subject,
            "phone": self.phone,
            "address": self.address,
        }


@dataclass
class StudentForm:
    """
    Design (StudentForm)
    - Purpose: A candidate record as entered in the form, before validation and id assignment.
    - subject: either the list of selected subjects or already-joined text.
    """
    name: str = ""
    grade: str = ""
    subject: Union[Sequence[str], str] = field(default_factory=list)
    phone: str = ""
    address: str = ""

    @classmethod
    def from_mapping(cls, data: dict) -> "StudentForm":
        """Build a form from a plain mapping; accepts 'class' as an alias of 'grade'."""
        grade = data.get("grade", data.get("class", ""))
        subject = data.get("subject", [])
        if subject is None:
            subject = []
        return cls(
            name=str(data.get("name") or ""),
            grade=str(grade or ""),
            subject=subject if isinstance(subject, str) else list(subject),
            phone=str(data.get("phone") or ""),
            address=str(data.get("address") or ""),
        )

    def subjects(self) -> List[str]:
        """Selected subjects as a list of non-blank names."""
        if isinstance(self.subject, str):
            return split_subjects(self.subject)
        return [str(s).strip() for s in self.subject if str(s).strip()]
