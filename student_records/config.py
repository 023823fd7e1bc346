"""
Design (config.py)
- Purpose: Centralize constants and configuration.
- Inputs: Optional environment overrides (data path, log level, log file).
- Outputs: Constants (storage keys, validation limits, form options, seed records, timings).
- Side effects: Reads environment variables once at import.
- Thread-safety: N/A (read-only constants).
"""

import os

# Persistence: one slot file holding the keys below (path resolved in storage module)
STUDENTS_FILENAME = "students.json"
STUDENTS_KEY = "students"
NEXT_ID_KEY = "students.next_id"

# Overrides the resolved slot file path when set
DATA_PATH_ENV = os.getenv("STUDENT_RECORDS_DATA", "")

LOG_LEVEL = os.getenv("STUDENT_RECORDS_LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("STUDENT_RECORDS_LOG_FILE", "")

# Validation
NAME_PATTERN = r"[A-Za-z\s]+"
PHONE_PATTERN = r"\d{10}"
ADDRESS_MAX_LENGTH = 55

FIELD_ERROR_MESSAGES = {
    "name": "Name must contain only letters and spaces.",
    "phone": "Phone number must be exactly 10 digits.",
    "subject": "Select at least one subject.",
    "address": f"Address cannot exceed {ADDRESS_MAX_LENGTH} characters.",
}

# Form options
CLASS_OPTIONS = ["", "6th", "7th", "8th", "9th", "10th", "11th", "12th"]
SUBJECT_OPTIONS = ["Math", "Science", "English", "Physics", "Chemistry", "Biology"]
SUBJECT_SEPARATOR = ", "

# Default records used when nothing usable is persisted (ids 1-3)
SEED_STUDENTS = [
    {"id": 1, "name": "Rahul Sharma", "grade": "10th", "subject": "Math", "phone": "9876543210", "address": "Mumbai"},
    {"id": 2, "name": "Priya Patel", "grade": "9th", "subject": "Science", "phone": "9876543211", "address": "Delhi"},
    {"id": 3, "name": "Amit Kumar", "grade": "11th", "subject": "Physics", "phone": "9876543212", "address": "Bangalore"},
]

# UI
SUCCESS_MESSAGE_MS = 3000  # success banner auto-hides after 3 seconds
NOTIFICATION_TIMEOUT_SEC = 3
APP_TITLE = "Student Management"
