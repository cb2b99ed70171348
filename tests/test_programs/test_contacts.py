import io

import pytest
from rich.console import Console

from recordkit.catalog import Catalog
from recordkit.core.exceptions import DuplicateKeyError, InvalidInputError, NotFoundError
from recordkit.programs import contacts
from recordkit.programs.console import ProgramContext
from recordkit.programs.contacts import ContactBook


@pytest.fixture
def book(tmp_path):
    return ContactBook(Catalog.builtin().open_store("contacts", tmp_path))


class TestContactBook:
    """Tests for the contact book."""

    def test_add_and_search_ignores_case(self, book):
        """Test that names match case-insensitively."""
        book.add("Alice Smith", "555-1234", "alice@example.com")
        assert book.search("alice smith")["phone"] == "555-1234"

    def test_duplicate_name(self, book):
        """Test that a name may only be used once."""
        book.add("Alice", "1", "a@x")
        with pytest.raises(DuplicateKeyError):
            book.add("ALICE", "2", "b@x")

    def test_update_keeps_empty_values(self, book):
        """Test that None keeps the current phone or email."""
        book.add("Alice", "1", "a@x")
        book.update("alice", email="new@x")
        contact = book.search("Alice")
        assert contact["phone"] == "1"
        assert contact["email"] == "new@x"

    def test_delete_keeps_order(self, book):
        """Test deleting from the middle."""
        for name in ("A", "B", "C"):
            book.add(name, "1", "x")
        assert book.delete("b")["name"] == "B"
        assert [c["name"] for c in book.all()] == ["A", "C"]

    def test_missing_contact(self, book):
        """Test search and delete of an unknown name."""
        with pytest.raises(NotFoundError):
            book.search("nobody")
        with pytest.raises(NotFoundError):
            book.delete("nobody")

    def test_phone_too_long(self, book):
        """Test that values wider than the column are rejected."""
        with pytest.raises(InvalidInputError, match="String too long"):
            book.add("Alice", "1" * 20, "a@x")

    def test_contacts_table(self, book):
        """Test the listing table."""
        book.add("Alice", "1", "a@x")
        table = contacts.contacts_table(book.all())
        assert table.row_count == 1


class TestContactsProgram:
    """Tests for the interactive program."""

    def run_session(self, tmp_path, script):
        output = io.StringIO()
        ctx = ProgramContext.from_streams(
            io.StringIO(script), Console(file=output, width=120, color_system=None),
            data_dir=tmp_path)
        contacts.run(ctx)
        return output.getvalue()

    def test_add_update_save(self, tmp_path):
        """Test adding, updating and saving contacts."""
        text = self.run_session(
            tmp_path,
            "1\nBob\n555\nbob@x\n"
            "1\nbob\n"
            "4\nBOB\n\nbob@new\n"
            "6\n")

        assert "Contact added successfully!" in text
        assert "A contact with this name already exists." in text
        assert "Contact updated successfully!" in text

        store = Catalog.builtin().open_store("contacts", tmp_path)
        assert len(store) == 1
        assert store.get("bob")["email"] == "bob@new"
        assert store.get("bob")["phone"] == "555"

    def test_eof_does_not_save(self, tmp_path):
        """Test that running out of input leaves the file alone."""
        self.run_session(tmp_path, "1\nBob\n555\nbob@x\n")
        assert not (tmp_path / "contacts.dat").exists()
