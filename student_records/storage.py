"""
Design (storage.py)
- Purpose: The persistent key-value slot and the (de)serialization of the student list into it.
- Inputs: Path (from get_students_path()) for JsonSlot; list of Student / next id for save.
- Outputs: list[Student] (or None when nothing usable is stored) on load; None on save.
- Side effects: JsonSlot reads/writes one JSON file. Read failures read as "absent";
                write failures are logged and ignored (in-memory state stays authoritative).
- Thread-safety: Call from main thread only (e.g. after store mutations).
"""

import json
import logging
import os
import sys
from pathlib import Path
from typing import Dict, List, Optional

from .config import DATA_PATH_ENV, NEXT_ID_KEY, STUDENTS_FILENAME, STUDENTS_KEY
from .models import Student

logger = logging.getLogger(__name__)


def get_students_path() -> Path:
    """
    Resolve path for students.json. STUDENT_RECORDS_DATA wins when set; otherwise prefer
    the app data dir on Windows so it survives reinstalls. Otherwise the dir next to the
    frozen executable, or the project root when running from source.
    """
    if DATA_PATH_ENV:
        return Path(DATA_PATH_ENV).expanduser()
    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        if appdata:
            base = Path(appdata) / "Student Management"
            try:
                base.mkdir(parents=True, exist_ok=True)
                return base / STUDENTS_FILENAME
            except OSError:
                logger.warning("Cannot create %s; falling back to program directory", base)
    # Fallback: next to frozen executable, else the directory above this package
    if getattr(sys, "frozen", False) and hasattr(sys, "_MEIPASS"):
        base = Path(sys.executable).parent
    else:
        base = Path(__file__).resolve().parent.parent
    return base / STUDENTS_FILENAME


class MemorySlot:
    """Key-value slot kept in process memory; nothing survives the process."""

    def __init__(self, items: Optional[Dict[str, str]] = None) -> None:
        self._items: Dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def set_items(self, items: Dict[str, str]) -> None:
        self._items.update(items)

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class JsonSlot:
    """
    Design (JsonSlot)
    - Purpose: Durable key-value slot backed by one JSON object file ({key: text}).
    - Every write rewrites the whole file; there are no partial writes.
    - A missing, unreadable or non-object file reads as an empty slot.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Ignoring unreadable slot file %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring slot file %s: top level is not an object", self.path)
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write_all(self, items: Dict[str, str]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(items, f, indent=2)
        except OSError as exc:
            logger.warning("Could not write slot file %s: %s", self.path, exc)

    def get_item(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._read_all()
        items[key] = value
        self._write_all(items)

    def set_items(self, new_items: Dict[str, str]) -> None:
        items = self._read_all()
        items.update(new_items)
        self._write_all(items)

    def remove_item(self, key: str) -> None:
        items = self._read_all()
        if items.pop(key, None) is not None:
            self._write_all(items)


def _text(value: object) -> str:
    return "" if value is None else str(value)


def _student_from_item(item: object) -> Student:
    if not isinstance(item, dict):
        raise ValueError(f"record is not an object: {item!r}")
    raw_id = item.get("id")
    # bool is an int subclass; true/false is not an id
    if not isinstance(raw_id, int) or isinstance(raw_id, bool):
        raise ValueError(f"record id is not an integer: {raw_id!r}")
    grade = item.get("grade", item.get("class"))
    return Student(
        id=raw_id,
        name=_text(item.get("name")),
        grade=_text(grade),
        subject=_text(item.get("subject")),
        phone=_text(item.get("phone")),
        address=_text(item.get("address")),
    )


def load_students(slot) -> Optional[List[Student]]:
    """
    Read the student list from the slot. Returns None when the key is absent or the
    stored value cannot be turned into records, including two records sharing an id
    (caller falls back to the seed set).
    An empty stored list is valid and returns [].
    """
    raw = slot.get_item(STUDENTS_KEY)
    if raw is None:
        return None
    try:
        data = json.loads(raw)
    except (TypeError, json.JSONDecodeError) as exc:
        logger.warning("Stored students are not valid JSON: %s", exc)
        return None
    if not isinstance(data, list):
        logger.warning("Stored students are not a list (got %s)", type(data).__name__)
        return None
    try:
        students = [_student_from_item(item) for item in data]
    except (TypeError, ValueError) as exc:
        logger.warning("Stored students are malformed: %s", exc)
        return None
    seen = set()
    for student in students:
        if student.id in seen:
            logger.warning("Stored students repeat id %s", student.id)
            return None
        seen.add(student.id)
    return students


def save_students(students: List[Student], next_id: int, slot) -> None:
    """Serialize the complete student list and the id counter into the slot in one write."""
    slot.set_items({
        STUDENTS_KEY: json.dumps([s.to_dict() for s in students]),
        NEXT_ID_KEY: str(next_id),
    })


def load_next_id(slot) -> Optional[int]:
    """Read the persisted id counter; None when absent or not a positive integer."""
    raw = slot.get_item(NEXT_ID_KEY)
    if raw is None:
        return None
    try:
        value = int(raw)
    except (TypeError, ValueError):
        logger.warning("Ignoring malformed id counter %r", raw)
        return None
    return value if value > 0 else None
