"""Student records keyed by roll number, with letter grades."""
from typing import Optional

from ..core.exceptions import DuplicateKeyError, InvalidInputError
from ..core.record import Record, RecordId
from ..store import RecordStore
from .console import ProgramContext, make_table, print_info, print_success, run_menu

MARK_FIELDS = ("mark1", "mark2", "mark3")
GRADE_THRESHOLDS = ((90, "A"), (80, "B"), (70, "C"), (60, "D"))


def calculate_grade(marks: tuple[int, int, int] | list[int]) -> str:
    """Letter grade from the average of the three marks."""
    average = sum(marks) / 3.0
    for threshold, grade in GRADE_THRESHOLDS:
        if average >= threshold:
            return grade
    return "F"


def marks_of(student: Record) -> tuple[int, int, int]:
    return tuple(student[name] for name in MARK_FIELDS)


def _check_marks(marks) -> None:
    for mark in marks:
        if mark is not None and mark < 0:
            raise InvalidInputError(f"Marks must not be negative, got {mark}")


class StudentRecords:
    def __init__(self, store: RecordStore):
        self.store = store

    def add(self, roll_no: int, name: str, marks: tuple[int, int, int]) -> RecordId:
        if not name.strip():
            raise InvalidInputError("Student name must not be empty")
        if len(marks) != len(MARK_FIELDS):
            raise InvalidInputError(f"Expected {len(MARK_FIELDS)} marks, got {len(marks)}")
        _check_marks(marks)
        values = {"roll_no": roll_no, "name": name}
        values.update(zip(MARK_FIELDS, marks))
        return self.store.insert(values)

    def search(self, roll_no: int) -> Record:
        return self.store.get(roll_no)

    def update(self, roll_no: int, name: Optional[str] = None,
               marks: tuple[Optional[int], ...] = (None, None, None)) -> None:
        """Replace the supplied values; None keeps the current one."""
        if name is not None and not name.strip():
            raise InvalidInputError("Student name must not be empty")
        _check_marks(marks)
        changes = {"name": name}
        changes.update(zip(MARK_FIELDS, marks))
        self.store.update(roll_no, changes)

    def delete(self, roll_no: int) -> Record:
        return self.store.delete(roll_no)

    def students(self) -> list[Record]:
        return self.store.list()


def students_table(students: list[Record], title: str = "All Student Records"):
    rows = []
    for s in students:
        marks = marks_of(s)
        rows.append([s["roll_no"], s["name"], *marks, calculate_grade(marks)])
    return make_table(title, ["Roll No", "Name", "Sub1", "Sub2", "Sub3", "Grade"], rows)


def run(ctx: ProgramContext) -> None:
    store = ctx.open_store("students")
    if len(store):
        print_info(ctx.console, f"Loaded {len(store)} student record(s).")
    records = StudentRecords(store)
    reader, console = ctx.reader, ctx.console

    def add():
        roll_no = reader.read_int("Enter Roll Number: ")
        if store.find(roll_no) is not None:
            raise DuplicateKeyError("A student with this roll number already exists.")
        name = reader.read_line("Enter Name: ")
        marks = tuple(reader.read_int(f"Enter Marks for Subject {i}: ") for i in (1, 2, 3))
        records.add(roll_no, name, marks)
        print_success(console, "Student record added successfully!")

    def show_all():
        if not len(store):
            print_info(console, "No student records found.")
            return
        console.print(students_table(records.students()))

    def search():
        student = records.search(reader.read_int("Enter Roll Number to search: "))
        console.print(students_table([student], title="Student Record Found"))

    def update():
        student = records.search(reader.read_int("Enter Roll Number of the student to update: "))
        name = reader.read_optional(f"Enter new Name (or press Enter to keep '{student['name']}'): ")
        marks = tuple(
            reader.read_optional_int(f"Enter new Marks for Subject {i} (current: {student[field]}): ")
            for i, field in enumerate(MARK_FIELDS, 1))
        records.update(student["roll_no"], name=name, marks=marks)
        print_success(console, "Record updated successfully!")

    def delete():
        records.delete(reader.read_int("Enter Roll Number of the student to delete: "))
        print_success(console, "Student record deleted successfully.")

    run_menu(ctx, "Student Record Management System", [
        ("Add Student Record", add),
        ("Display All Student Records", show_all),
        ("Search for a Student", search),
        ("Update a Student Record", update),
        ("Delete a Student Record", delete),
    ], "Save and Exit", on_exit=store.save, farewell="Records saved. Exiting...")
