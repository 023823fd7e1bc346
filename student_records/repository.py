"""
Design (repository.py)
- Purpose: Encapsulate the authoritative student list behind a tiny API (list/get/add/remove),
           so the UI never touches the list directly, and flush every mutation to the slot.
- Inputs: A key-value slot (JsonSlot or MemorySlot) and candidate field sets.
- Outputs: Copies of the current list; created Student records; removal flags.
- Side effects: Writes the full list plus the id counter to the slot after every mutation;
                notifies "list changed" subscribers.
- Thread-safety: None needed; single writer on the UI thread.
"""

import logging
from typing import Callable, Iterator, List, Optional, Union

from .config import SEED_STUDENTS
from .models import Student, StudentForm
from .storage import load_next_id, load_students, save_students
from .utils import join_subjects
from .validation import ValidationError, validate

logger = logging.getLogger(__name__)


def seed_students() -> List[Student]:
    """Fresh copy of the three default records (ids 1-3)."""
    return [Student(**item) for item in SEED_STUDENTS]


class StudentStore:
    """
    Design (StudentStore)
    - State:
        _students: [Student] in insertion order
        _next_id: id for the next add; persisted, only ever grows, so ids are never reissued
        _listeners: callbacks fired (no args) after add/remove
    """

    def __init__(self, slot) -> None:
        self._slot = slot
        self._students: List[Student] = []
        self._next_id = 1
        self._listeners: List[Callable[[], None]] = []
        self.load()

    # -------- Persistence --------

    def load(self) -> List[Student]:
        """
        Purpose: Read the slot into memory; fall back to the seed set when nothing usable is stored.
        Outputs: The loaded list (copy).
        Side effects: Replaces _students and _next_id. Never raises.
        """
        students = load_students(self._slot)
        if students is None:
            logger.warning("No usable stored students; starting from the seed set")
            students = seed_students()
        self._students = students
        highest = max((s.id for s in students), default=0)
        self._next_id = max(load_next_id(self._slot) or 1, highest + 1)
        logger.debug("Loaded %d students (next id %d)", len(students), self._next_id)
        return list(self._students)

    def persist(self) -> None:
        """Write the complete current list and id counter to the slot."""
        save_students(self._students, self._next_id, self._slot)
        logger.debug("Persisted %d students", len(self._students))

    # -------- Reads --------

    def list(self) -> List[Student]:
        """Current records in insertion order. Returns a copy; no side effects."""
        return list(self._students)

    def get(self, student_id: int) -> Optional[Student]:
        for student in self._students:
            if student.id == student_id:
                return student
        return None

    def __len__(self) -> int:
        return len(self._students)

    def __iter__(self) -> Iterator[Student]:
        return iter(list(self._students))

    def __contains__(self, student_id: object) -> bool:
        return any(s.id == student_id for s in self._students)

    @property
    def next_id(self) -> int:
        return self._next_id

    # -------- Mutations --------

    def add(self, candidate: Union[StudentForm, dict]) -> Student:
        """
        Purpose: Create a record from a validated candidate and append it.
        Inputs: candidate (StudentForm or mapping with name/grade/subject/phone/address).
        Outputs: The new Student.
        Side effects: Persists, then notifies listeners.
        Raises: ValidationError if the candidate fails the form rules.
        """
        if not isinstance(candidate, StudentForm):
            candidate = StudentForm.from_mapping(candidate)
        result = validate(candidate)
        if not result.is_valid:
            raise ValidationError(result)

        student = Student(
            id=self._next_id,
            name=candidate.name,
            grade=candidate.grade,
            subject=join_subjects(candidate.subjects()),
            phone=candidate.phone,
            address=candidate.address,
        )
        self._students.append(student)
        self._next_id += 1
        self.persist()
        logger.info("Created student %s (%s)", student.id, student.name)
        self._notify()
        return student

    def remove(self, student_id: int) -> bool:
        """
        Purpose: Delete the record with this id, keeping the order of the rest.
        Outputs: True if a record was removed; False (and no state change) otherwise.
        Side effects: Persists and notifies listeners only when something was removed.
        """
        remaining = [s for s in self._students if s.id != student_id]
        if len(remaining) == len(self._students):
            logger.debug("Remove of unknown student id %s ignored", student_id)
            return False
        self._students = remaining
        self.persist()
        logger.info("Deleted student %s", student_id)
        self._notify()
        return True

    # -------- Change notification --------

    def subscribe(self, callback: Callable[[], None]) -> Callable[[], None]:
        """Register a "list changed" callback; returns a function that unregisters it."""
        self._listeners.append(callback)

        def unsubscribe() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def _notify(self) -> None:
        for callback in list(self._listeners):
            callback()
