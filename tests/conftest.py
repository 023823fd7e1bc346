import pytest

from student_records.repository import StudentStore
from student_records.storage import JsonSlot, MemorySlot


@pytest.fixture
def slot():
    return MemorySlot()


@pytest.fixture
def store(slot):
    return StudentStore(slot)


@pytest.fixture
def json_slot(tmp_path):
    return JsonSlot(tmp_path / "students.json")


@pytest.fixture
def valid_form():
    return {
        "name": "John Doe",
        "grade": "10th",
        "subject": ["Math", "Physics"],
        "phone": "1234567890",
        "address": "221B Baker Street",
    }
