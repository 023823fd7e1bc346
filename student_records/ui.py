"""
Design (ui.py)
- Purpose: Build and manage the Tkinter view (student list, add form, delete confirmation,
           success banner, optional desktop notifications).
- Inputs: StudentStore (shared state).
- Outputs: None (renders UI, calls into the store).
- Side effects: Creates windows; may show desktop notifications via plyer.
- Thread-safety: UI code runs on main thread only; the store notifies synchronously.
"""

import logging
import tkinter as tk
from tkinter import ttk, messagebox

from plyer import notification

from .config import (
    APP_TITLE,
    CLASS_OPTIONS,
    FIELD_ERROR_MESSAGES,
    NOTIFICATION_TIMEOUT_SEC,
    SUBJECT_OPTIONS,
    SUCCESS_MESSAGE_MS,
)
from .models import StudentForm
from .repository import StudentStore
from .utils import address_counter, sanitize_phone
from .validation import address_has_error, validate

logger = logging.getLogger(__name__)

BG = "#1e1e1e"
FG = "white"
ERROR_FG = "#FF6A6A"
SUCCESS_BG = "#2e7d32"


class AppUI:
    """
    Design (AppUI)
    - Purpose: Encapsulate all UI creation and behavior.
    - Public attributes:
        enable_notifications (tk.BooleanVar): toggles desktop notifications for success messages
    - Public methods:
        refresh_ui(): repaint the list from the store (subscribed to store changes)
        show_tab(name): switch between "students" and "add"
    """

    def __init__(self, root: tk.Tk, store: StudentStore):
        self.root = root
        self.store = store
        self.enable_notifications = tk.BooleanVar(value=True)
        self._hide_job = None

        # Window
        self.root.title(APP_TITLE)
        self.root.rowconfigure(0, weight=1)
        self.root.columnconfigure(0, weight=1)
        self.root.configure(bg=BG)

        style = ttk.Style(self.root)
        style.theme_use("default")
        style.configure(
            "Treeview",
            background="#2b2b2b",
            foreground="#f0f0f0",
            fieldbackground="#2b2b2b",
            rowheight=24,
            font=("Segoe UI", 10),
        )
        style.configure(
            "Treeview.Heading",
            background=BG,
            foreground="#ffffff",
            font=("Segoe UI", 10, "bold"),
        )
        style.map("Treeview", background=[("selected", "#444")], foreground=[])

        # Menu (navigation between the two tabs)
        menubar = tk.Menu(self.root)
        nav = tk.Menu(menubar, tearoff=0)
        nav.add_command(label="View Students", command=lambda: self.show_tab("students"))
        nav.add_command(label="Add Student", command=lambda: self.show_tab("add"))
        menubar.add_cascade(label="Menu", menu=nav)
        self.root.config(menu=menubar)

        self.notebook = ttk.Notebook(self.root)
        self.notebook.grid(row=0, column=0, sticky="nsew")
        self.students_tab = tk.Frame(self.notebook, bg=BG)
        self.add_tab = tk.Frame(self.notebook, bg=BG)
        self.notebook.add(self.students_tab, text="Students")
        self.notebook.add(self.add_tab, text="Add Student")

        self._build_students_tab()
        self._build_add_tab()

        self.store.subscribe(self.refresh_ui)
        self.refresh_ui()

    # ---------- Layout ----------

    def _build_students_tab(self) -> None:
        frame = self.students_tab
        frame.rowconfigure(1, weight=1)
        frame.columnconfigure(0, weight=1)

        # Success banner (hidden until a success message is shown)
        self.success_label = tk.Label(frame, text="", fg=FG, bg=SUCCESS_BG, font=("Segoe UI", 10, "bold"))
        self.success_label.grid(row=0, column=0, sticky="ew", padx=10, pady=(10, 0))
        self.success_label.grid_remove()

        self.columns = ("name", "grade", "subject", "phone", "address")
        headers = {
            "name": "Name",
            "grade": "Class",
            "subject": "Subject",
            "phone": "Phone",
            "address": "Address",
        }
        self.tree = ttk.Treeview(frame, columns=self.columns, show="headings", selectmode="browse")
        for col in self.columns:
            self.tree.heading(col, text=headers[col])
        self.tree.grid(row=1, column=0, sticky="nsew", padx=10, pady=(10, 5))

        button_frame = tk.Frame(frame, bg=BG)
        button_frame.grid(row=2, column=0, sticky="ew", padx=10, pady=(0, 10))
        ttk.Button(button_frame, text="Add Student", command=lambda: self.show_tab("add")).pack(side=tk.LEFT, padx=5)
        ttk.Button(button_frame, text="Delete Student", command=self.delete_student).pack(side=tk.LEFT, padx=5)
        tk.Checkbutton(
            button_frame,
            text="Enable Notifications",
            variable=self.enable_notifications,
            fg=FG,
            bg=BG,
            selectcolor="#2b2b2b",
            activebackground=BG,
            activeforeground=FG,
        ).pack(side=tk.LEFT, padx=5)

    def _build_add_tab(self) -> None:
        frame = self.add_tab
        self.v_name = tk.StringVar()
        self.v_grade = tk.StringVar()
        self.v_phone = tk.StringVar()
        self.v_address = tk.StringVar()
        self.v_subjects = {name: tk.BooleanVar(value=False) for name in SUBJECT_OPTIONS}
        self.error_labels = {}

        def label(row: int, text: str) -> None:
            tk.Label(frame, text=text, fg=FG, bg=BG).grid(row=row, column=0, sticky="ne", padx=5, pady=5)

        def error_label(row: int, field: str) -> None:
            lbl = tk.Label(frame, text=FIELD_ERROR_MESSAGES[field], fg=ERROR_FG, bg=BG, font=("Segoe UI", 8))
            lbl.grid(row=row, column=1, sticky="w", padx=5)
            lbl.grid_remove()
            self.error_labels[field] = lbl

        label(0, "Name")
        tk.Entry(frame, textvariable=self.v_name, width=40).grid(row=0, column=1, sticky="w", padx=5, pady=5)
        error_label(1, "name")

        label(2, "Class")
        ttk.Combobox(frame, textvariable=self.v_grade, values=CLASS_OPTIONS, state="readonly").grid(
            row=2, column=1, sticky="w", padx=5, pady=5
        )

        label(3, "Subject")
        subjects_frame = tk.Frame(frame, bg=BG)
        subjects_frame.grid(row=3, column=1, sticky="w", padx=5, pady=5)
        for i, name in enumerate(SUBJECT_OPTIONS):
            tk.Checkbutton(
                subjects_frame,
                text=name,
                variable=self.v_subjects[name],
                fg=FG,
                bg=BG,
                selectcolor="#2b2b2b",
                activebackground=BG,
                activeforeground=FG,
            ).grid(row=i // 3, column=i % 3, sticky="w")
        error_label(4, "subject")

        label(5, "Phone")
        tk.Entry(frame, textvariable=self.v_phone, width=20).grid(row=5, column=1, sticky="w", padx=5, pady=5)
        self.v_phone.trace_add("write", self._on_phone_input)
        error_label(6, "phone")

        label(7, "Address")
        tk.Entry(frame, textvariable=self.v_address, width=55).grid(row=7, column=1, sticky="w", padx=5, pady=5)
        self.char_count = tk.Label(frame, text=address_counter(""), fg="gray", bg=BG, font=("Segoe UI", 8))
        self.char_count.grid(row=7, column=2, sticky="w", padx=(0, 5))
        self.v_address.trace_add("write", self._on_address_input)
        error_label(8, "address")

        button_frame = tk.Frame(frame, bg=BG)
        button_frame.grid(row=9, column=0, columnspan=3, pady=10)
        ttk.Button(button_frame, text="Save", command=self.submit).pack(side=tk.LEFT, padx=5)
        ttk.Button(button_frame, text="Cancel", command=self.cancel).pack(side=tk.LEFT, padx=5)

    # ---------- Navigation & rendering ----------

    def show_tab(self, name: str) -> None:
        """Switch tabs; the list is repainted whenever it is shown."""
        if name == "students":
            self.notebook.select(self.students_tab)
            self.refresh_ui()
        else:
            self.notebook.select(self.add_tab)

    def refresh_ui(self) -> None:
        """
        Purpose: Rebuild the Tree rows from the store in insertion order.
        Side effects: Mutates Treeview items (UI only).
        """
        self.tree.delete(*self.tree.get_children())
        for student in self.store.list():
            self.tree.insert(
                "",
                "end",
                iid=str(student.id),
                values=(student.name, student.grade, student.subject, student.phone, student.address),
            )

    def show_success(self, message: str) -> None:
        """Show the banner, auto-hide it after SUCCESS_MESSAGE_MS, and optionally notify the desktop."""
        self.success_label.config(text=message)
        self.success_label.grid()
        if self._hide_job is not None:
            self.root.after_cancel(self._hide_job)
        self._hide_job = self.root.after(SUCCESS_MESSAGE_MS, self._hide_success)

        if self.enable_notifications.get():
            try:
                notification.notify(title=APP_TITLE, message=message, timeout=NOTIFICATION_TIMEOUT_SEC)
            except Exception as exc:
                logger.warning("Desktop notification failed: %s", exc)

    def _hide_success(self) -> None:
        self._hide_job = None
        self.success_label.grid_remove()

    # ---------- Form callbacks ----------

    def _on_phone_input(self, *_args) -> None:
        value = self.v_phone.get()
        cleaned = sanitize_phone(value)
        if cleaned != value:
            self.v_phone.set(cleaned)

    def _on_address_input(self, *_args) -> None:
        value = self.v_address.get()
        self.char_count.config(text=address_counter(value))
        self._show_error("address", address_has_error(value))

    def _show_error(self, field: str, visible: bool) -> None:
        if visible:
            self.error_labels[field].grid()
        else:
            self.error_labels[field].grid_remove()

    def _form(self) -> StudentForm:
        return StudentForm(
            name=self.v_name.get(),
            grade=self.v_grade.get(),
            subject=[name for name, var in self.v_subjects.items() if var.get()],
            phone=self.v_phone.get(),
            address=self.v_address.get(),
        )

    def submit(self) -> None:
        """
        Purpose: Validate the form, render per-field errors, and add the student if valid.
        Side effects: Mutates the store on success (which repaints the list).
        """
        form = self._form()
        result = validate(form)
        for field in self.error_labels:
            self._show_error(field, getattr(result, f"{field}_error"))
        if not result.is_valid:
            return
        self.store.add(form)
        self.reset_form()
        self.show_tab("students")
        self.show_success("Student added successfully!")

    def cancel(self) -> None:
        self.show_tab("students")

    def reset_form(self) -> None:
        self.v_name.set("")
        self.v_grade.set("")
        self.v_phone.set("")
        self.v_address.set("")
        for var in self.v_subjects.values():
            var.set(False)
        for field in self.error_labels:
            self._show_error(field, False)

    # ---------- Delete ----------

    def delete_student(self) -> None:
        """
        Purpose: Remove the selected student after user confirmation.
        Side effects: Mutates the store (persisted and repainted via subscription).
        """
        selected = self.tree.selection()
        if not selected:
            messagebox.showinfo("Delete Student", "Select a student to delete.")
            return
        if not messagebox.askyesno("Delete Student", "Are you sure you want to delete this student?"):
            return
        if self.store.remove(int(selected[0])):
            self.show_success("Student deleted successfully!")
