"""Address book keyed by contact name (case-insensitive)."""
from typing import Optional

from ..core.exceptions import DuplicateKeyError
from ..core.record import Record, RecordId
from ..store import RecordStore
from .console import ProgramContext, make_table, print_info, print_success, run_menu


class ContactBook:
    def __init__(self, store: RecordStore):
        self.store = store

    def add(self, name: str, phone: str, email: str) -> RecordId:
        return self.store.insert({"name": name, "phone": phone, "email": email})

    def search(self, name: str) -> Record:
        return self.store.get(name)

    def update(self, name: str, phone: Optional[str] = None, email: Optional[str] = None) -> None:
        """Change phone and/or email; None keeps the current value."""
        self.store.update(name, {"phone": phone, "email": email})

    def delete(self, name: str) -> Record:
        return self.store.delete(name)

    def all(self) -> list[Record]:
        return self.store.list()


def contacts_table(contacts: list[Record], title: str = "All Contacts"):
    return make_table(title, ["Name", "Phone Number", "Email Address"],
                      [[c["name"], c["phone"], c["email"]] for c in contacts])


def run(ctx: ProgramContext) -> None:
    store = ctx.open_store("contacts")
    if len(store):
        print_info(ctx.console, f"Loaded {len(store)} contact(s) from file.")
    book = ContactBook(store)
    reader, console = ctx.reader, ctx.console

    def add():
        name = reader.read_line("Enter Name: ")
        if store.find(name) is not None:
            raise DuplicateKeyError("A contact with this name already exists.")
        phone = reader.read_line("Enter Phone Number: ")
        email = reader.read_line("Enter Email Address: ")
        book.add(name, phone, email)
        print_success(console, "Contact added successfully!")

    def show_all():
        if not len(store):
            print_info(console, "Your contact book is empty.")
            return
        console.print(contacts_table(book.all()))

    def search():
        contact = book.search(reader.read_line("Enter the name to search for: "))
        console.print(contacts_table([contact], title="Contact Found"))

    def update():
        contact = book.search(reader.read_line("Enter the name of the contact to update: "))
        phone = reader.read_optional(
            f"Enter new Phone Number (or press Enter to keep '{contact['phone']}'): ")
        email = reader.read_optional(
            f"Enter new Email Address (or press Enter to keep '{contact['email']}'): ")
        book.update(contact["name"], phone=phone, email=email)
        print_success(console, "Contact updated successfully!")

    def delete():
        removed = book.delete(reader.read_line("Enter the name of the contact to delete: "))
        print_success(console, f"Contact '{removed['name']}' deleted successfully.")

    run_menu(ctx, "Contact Management System", [
        ("Add New Contact", add),
        ("Display All Contacts", show_all),
        ("Search for a Contact", search),
        ("Update a Contact", update),
        ("Delete a Contact", delete),
    ], "Save and Exit", on_exit=store.save, farewell="Contact data saved. Exiting...")
