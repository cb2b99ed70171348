import io

import pytest
from rich.console import Console

from recordkit.catalog import Catalog
from recordkit.core.exceptions import DuplicateKeyError, InvalidInputError, NotFoundError
from recordkit.programs import students
from recordkit.programs.console import ProgramContext
from recordkit.programs.students import StudentRecords, calculate_grade, marks_of


@pytest.fixture
def records(tmp_path):
    return StudentRecords(Catalog.builtin().open_store("students", tmp_path))


class TestGrades:
    """Tests for grade calculation."""

    @pytest.mark.parametrize("marks, grade", [
        ((90, 90, 90), "A"),
        ((89, 90, 90), "B"),
        ((80, 80, 80), "B"),
        ((70, 70, 71), "C"),
        ((60, 60, 60), "D"),
        ((59, 60, 60), "F"),
        ((0, 0, 0), "F"),
        ((100, 100, 100), "A"),
    ])
    def test_calculate_grade(self, marks, grade):
        """Test thresholds on the average."""
        assert calculate_grade(marks) == grade


class TestStudentRecords:
    """Tests for student records."""

    def test_add_and_search(self, records):
        """Test storing marks."""
        records.add(7, "Ann", (90, 85, 80))
        student = records.search(7)
        assert student["name"] == "Ann"
        assert marks_of(student) == (90, 85, 80)

    def test_duplicate_roll_number(self, records):
        """Test that roll numbers are unique."""
        records.add(7, "Ann", (1, 2, 3))
        with pytest.raises(DuplicateKeyError):
            records.add(7, "Ben", (1, 2, 3))

    def test_update_partial(self, records):
        """Test that None keeps the current values."""
        records.add(7, "Ann", (50, 60, 70))
        records.update(7, marks=(None, 99, None))
        student = records.search(7)
        assert student["name"] == "Ann"
        assert marks_of(student) == (50, 99, 70)

        records.update(7, name="Anne")
        assert records.search(7)["name"] == "Anne"

    def test_update_blank_name(self, records):
        """Test that a new name cannot be blank."""
        records.add(7, "Ann", (1, 2, 3))
        with pytest.raises(InvalidInputError, match="must not be empty"):
            records.update(7, name="   ")
        assert records.search(7)["name"] == "Ann"

    def test_invalid_marks(self, records):
        """Test mark validation."""
        with pytest.raises(InvalidInputError):
            records.add(1, "Ann", (-1, 2, 3))
        with pytest.raises(InvalidInputError):
            records.add(1, "Ann", (1, 2))
        with pytest.raises(InvalidInputError):
            records.add(1, "", (1, 2, 3))

    def test_delete(self, records):
        """Test removing a student."""
        records.add(1, "Ann", (1, 2, 3))
        records.add(2, "Ben", (1, 2, 3))
        records.delete(1)
        assert [s["roll_no"] for s in records.students()] == [2]
        with pytest.raises(NotFoundError):
            records.search(1)

    def test_students_table(self, records):
        """Test the listing table with grades."""
        records.add(1, "Ann", (95, 95, 95))
        assert students.students_table(records.students()).row_count == 1


class TestStudentsProgram:
    """Tests for the interactive program."""

    def test_session(self, tmp_path):
        """Test adding, updating and saving."""
        output = io.StringIO()
        script = ("1\n101\nAnn\n90\n80\n70\n"
                  "1\n101\n"
                  "4\n101\n\n\n95\n\n"
                  "6\n")
        ctx = ProgramContext.from_streams(
            io.StringIO(script), Console(file=output, width=120, color_system=None),
            data_dir=tmp_path)
        students.run(ctx)

        text = output.getvalue()
        assert "Student record added successfully!" in text
        assert "A student with this roll number already exists." in text
        assert "Record updated successfully!" in text

        store = Catalog.builtin().open_store("students", tmp_path)
        assert marks_of(store.get(101)) == (90, 95, 70)
        assert (tmp_path / "students.dat").stat().st_size == 66
