"""
Design (main.py)
- Purpose: Launch the Student Management window.
- Side effects: Configures logging, opens the slot file, creates the Tk root and runs the main loop.
"""

import logging
import tkinter as tk

from student_records.config import LOG_FILE, LOG_LEVEL
from student_records.logging_config import setup_logging
from student_records.repository import StudentStore
from student_records.storage import JsonSlot, get_students_path
from student_records.ui import AppUI


def run() -> None:
    setup_logging(LOG_LEVEL, LOG_FILE or None)
    path = get_students_path()
    logging.getLogger(__name__).info("Using student data file %s", path)

    store = StudentStore(JsonSlot(path))
    root = tk.Tk()
    AppUI(root, store)
    root.mainloop()


if __name__ == "__main__":
    run()
