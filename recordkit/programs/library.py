"""Library catalog of books with store-assigned ids."""
from ..core.exceptions import InvalidInputError
from ..core.record import Record, RecordId
from ..store import RecordStore
from .console import ProgramContext, make_table, print_info, print_success, run_menu


class Library:
    def __init__(self, store: RecordStore):
        self.store = store

    def add_book(self, title: str, author: str) -> RecordId:
        if not title.strip():
            raise InvalidInputError("Book title must not be empty")
        return self.store.insert({"title": title, "author": author})

    def find_book(self, book_id: int) -> Record:
        return self.store.get(book_id)

    def remove_book(self, book_id: int) -> Record:
        return self.store.delete(book_id)

    def books(self) -> list[Record]:
        return self.store.list()


def books_table(books: list[Record], title: str = "List of All Books"):
    return make_table(title, ["ID", "Title", "Author"],
                      [[b["id"], b["title"], b["author"]] for b in books])


def run(ctx: ProgramContext) -> None:
    store = ctx.open_store("books")
    if len(store):
        print_info(ctx.console, f"Loaded {len(store)} book(s) from {store.file_path.name}.")
    library = Library(store)
    reader, console = ctx.reader, ctx.console

    def add():
        title = reader.read_line("Enter book title: ")
        author = reader.read_line("Enter book author: ")
        record_id = library.add_book(title, author)
        print_success(console, f"Book added successfully! (ID: {record_id.identity})")

    def show_all():
        if not len(store):
            print_info(console, "The library is empty.")
            return
        console.print(books_table(library.books()))

    def search():
        book = library.find_book(reader.read_int("Enter the Book ID to search for: "))
        console.print(books_table([book], title="Book Found"))

    def remove():
        book = library.remove_book(reader.read_int("Enter the Book ID to remove: "))
        print_success(console, f"Book '{book['title']}' removed.")

    run_menu(ctx, "Library Management System", [
        ("Add a New Book", add),
        ("Display All Books", show_all),
        ("Search for a Book (by ID)", search),
        ("Remove a Book (by ID)", remove),
    ], "Save and Exit", on_exit=store.save, farewell="Library data saved. Exiting program.")
