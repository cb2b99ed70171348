"""Personal diary of timestamped free-text entries."""
import time
from datetime import datetime
from typing import Callable

from ..catalog.schemas import MAX_DIARY_TEXT
from ..core.exceptions import InvalidInputError, StoreFullError
from ..core.record import Record, RecordId
from ..store import RecordStore
from .console import ProgramContext, print_info, print_success, run_menu

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
DATE_FORMAT = "%Y-%m-%d"


def format_timestamp(timestamp: int, fmt: str = TIMESTAMP_FORMAT) -> str:
    """Local-time rendering of a Unix timestamp."""
    return datetime.fromtimestamp(timestamp).strftime(fmt)


class Diary:
    def __init__(self, store: RecordStore, clock: Callable[[], float] = time.time):
        self.store = store
        self.clock = clock

    def add_entry(self, content: str) -> RecordId:
        """Store content stamped with the current time."""
        return self.store.insert({"timestamp": int(self.clock()), "content": content})

    def entries(self) -> list[Record]:
        return self.store.list()

    def entries_on(self, date: str) -> list[Record]:
        """Entries whose local date is date (YYYY-MM-DD), in diary order."""
        try:
            datetime.strptime(date, DATE_FORMAT)
        except ValueError:
            raise InvalidInputError(f"Invalid date {date!r}, expected YYYY-MM-DD")
        return [entry for entry in self.store.list()
                if format_timestamp(entry["timestamp"], DATE_FORMAT) == date]


def print_entry(ctx: ProgramContext, entry: Record) -> None:
    console = ctx.console
    console.print("\n" + "=" * 40)
    console.print(f"Entry Date: {format_timestamp(entry['timestamp'])}")
    console.print("-" * 40)
    console.print(entry["content"], end="", markup=False, highlight=False)
    console.print("=" * 40)


def run(ctx: ProgramContext) -> None:
    store = ctx.open_store("diary")
    if len(store):
        print_info(ctx.console, f"Loaded {len(store)} diary entries.")
    diary = Diary(store)
    reader, console = ctx.reader, ctx.console

    def add():
        if store.is_full():
            raise StoreFullError("Diary is full. Cannot add more entries.")
        console.print("Enter your thoughts for today. Type 'END' on a new line to finish.")
        console.print("-" * 66)
        content, truncated = reader.read_multiline(MAX_DIARY_TEXT - 1)
        if truncated:
            print_info(console, "Entry is too long, cannot add more text.")
        diary.add_entry(content)
        console.print("-" * 66)
        print_success(console, "Diary entry saved successfully!")

    def show_all():
        if not len(store):
            print_info(console, "Your diary is empty.")
            return
        for entry in diary.entries():
            print_entry(ctx, entry)

    def search():
        date = reader.read_line("Enter date to search for (YYYY-MM-DD): ").strip()
        found = diary.entries_on(date)
        if not found:
            print_info(console, f"No entries found for the date {date}.")
        for entry in found:
            print_entry(ctx, entry)

    run_menu(ctx, "Personal Diary System", [
        ("Add New Diary Entry", add),
        ("View All Entries", show_all),
        ("Search Entries by Date", search),
    ], "Save and Exit", on_exit=store.save, farewell="Diary saved. Goodbye!")
