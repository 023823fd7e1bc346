"""
Design (utils.py)
- Purpose: Reusable view-side helpers: phone input sanitization, subject join/split,
           and the address character counter text.
- Inputs: Raw text from form widgets.
- Outputs: Cleaned/formatted strings and lists.
- Side effects: None.
- Thread-safety: Stateless; safe to call from any thread.
"""

import re
from typing import Iterable, List

from .config import ADDRESS_MAX_LENGTH, SUBJECT_SEPARATOR

_NON_DIGITS = re.compile(r"[^0-9]")


def sanitize_phone(raw: str) -> str:
    """
    Purpose: Strip every non-digit character from phone input as the user types.
    Inputs: raw (any text, may be empty).
    Outputs: Digits only ('' if none).
    Side Effects: None.
    """
    if not raw:
        return ""
    return _NON_DIGITS.sub("", raw)


def join_subjects(subjects: Iterable[str]) -> str:
    """Join selected subjects into the stored comma form, skipping blanks."""
    return SUBJECT_SEPARATOR.join(s.strip() for s in subjects if s and s.strip())


def split_subjects(text: str) -> List[str]:
    """Inverse of join_subjects: comma-separated text to a list of non-blank names."""
    if not text:
        return []
    return [part.strip() for part in text.split(",") if part.strip()]


def address_counter(text: str) -> str:
    """
    Purpose: Character counter label for the address field, e.g. '12/55'.
    Inputs: text (current address value).
    Outputs: Counter string.
    """
    return f"{len(text or '')}/{ADDRESS_MAX_LENGTH}"
