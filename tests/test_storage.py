import json
from pathlib import Path

from student_records import storage
from student_records.config import NEXT_ID_KEY, STUDENTS_KEY
from student_records.models import Student
from student_records.storage import JsonSlot, MemorySlot, get_students_path, load_next_id, load_students, save_students


def test_absent_key_loads_as_none(slot):
    assert load_students(slot) is None
    assert load_next_id(slot) is None


def test_round_trip(slot):
    students = [
        Student(id=1, name="A", grade="9th", subject="Math", phone="1234567890", address="x"),
        Student(id=5, name="B", grade="", subject="Math, Science", phone="0987654321", address=""),
    ]
    save_students(students, 6, slot)
    assert load_students(slot) == students
    assert load_next_id(slot) == 6


def test_empty_list_is_valid_state(slot):
    slot.set_item(STUDENTS_KEY, "[]")
    assert load_students(slot) == []


def test_unparsable_values_load_as_none():
    for raw in ["{not json", "null", '{"id": 1}', '[{"name": "no id"}]', '[{"id": "1"}]', '[{"id": true}]', "[1, 2]"]:
        assert load_students(MemorySlot({STUDENTS_KEY: raw})) is None, raw


def test_repeated_ids_load_as_none():
    raw = json.dumps([
        {"id": 1, "name": "A", "subject": "Math", "phone": "1234567890"},
        {"id": 1, "name": "B", "subject": "Math", "phone": "0987654321"},
    ])
    assert load_students(MemorySlot({STUDENTS_KEY: raw})) is None


def test_non_id_fields_coerced_to_text():
    (bare,) = load_students(MemorySlot({STUDENTS_KEY: '[{"id": 7}]'}))
    assert bare == Student(id=7, name="", grade="", subject="", phone="", address="")

    raw = json.dumps([{"id": 1, "name": None, "phone": 9876543210}])
    (numeric,) = load_students(MemorySlot({STUDENTS_KEY: raw}))
    assert numeric.phone == "9876543210"
    assert numeric.name == ""


def test_legacy_class_field_maps_to_grade():
    raw = json.dumps([{"id": 1, "name": "Rahul Sharma", "class": "10th", "subject": "Math",
                       "phone": "9876543210", "address": "Mumbai"}])
    (student,) = load_students(MemorySlot({STUDENTS_KEY: raw}))
    assert student.grade == "10th"


def test_malformed_counter_is_ignored():
    assert load_next_id(MemorySlot({NEXT_ID_KEY: "abc"})) is None
    assert load_next_id(MemorySlot({NEXT_ID_KEY: "0"})) is None
    assert load_next_id(MemorySlot({NEXT_ID_KEY: "7"})) == 7


def test_json_slot_persists_across_instances(json_slot):
    json_slot.set_item("a", "1")
    json_slot.set_items({"b": "2", "c": "3"})
    reopened = JsonSlot(json_slot.path)
    assert reopened.get_item("a") == "1"
    assert reopened.get_item("c") == "3"
    reopened.remove_item("a")
    assert JsonSlot(json_slot.path).get_item("a") is None


def test_json_slot_corrupt_file_reads_empty(json_slot):
    json_slot.path.write_text("][", encoding="utf-8")
    assert json_slot.get_item(STUDENTS_KEY) is None
    json_slot.path.write_text("[1, 2]", encoding="utf-8")
    assert json_slot.get_item(STUDENTS_KEY) is None


def test_json_slot_write_failure_is_not_raised(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    slot = JsonSlot(blocker / "students.json")  # parent is a file
    slot.set_item("a", "1")
    assert slot.get_item("a") is None


def test_students_path_env_override(monkeypatch, tmp_path):
    monkeypatch.setattr(storage, "DATA_PATH_ENV", str(tmp_path / "mine.json"))
    assert get_students_path() == tmp_path / "mine.json"


def test_students_path_defaults_to_project_root(monkeypatch):
    monkeypatch.setattr(storage, "DATA_PATH_ENV", "")
    monkeypatch.setattr(storage.sys, "platform", "linux")
    expected = Path(storage.__file__).resolve().parent.parent / "students.json"
    assert get_students_path() == expected
