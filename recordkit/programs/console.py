"""
Console collaborators shared by every program: a line-oriented input
source, rich output helpers and the numbered menu loop.
"""
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional, TextIO

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich import box

from ..catalog import Catalog
from ..config import settings
from ..core.exceptions import InvalidInputError, StoreException

logger = logging.getLogger(__name__)


class LineReader:
    """
    Reads user input one line at a time from a text stream.

    Prompts are written to the console without a trailing newline. End of
    input raises EOFError from every read.
    """

    def __init__(self, stream: Optional[TextIO] = None, console: Optional[Console] = None):
        self.stream = stream if stream is not None else sys.stdin
        self.console = console if console is not None else Console()

    def _prompt(self, prompt: str) -> None:
        if prompt:
            self.console.print(prompt, end="", markup=False, highlight=False)

    def read_line(self, prompt: str = "") -> str:
        """Whole line with the trailing newline stripped."""
        self._prompt(prompt)
        line = self.stream.readline()
        if line == "":
            raise EOFError("Input stream ended")
        return line.rstrip("\r\n")

    def read_optional(self, prompt: str = "") -> Optional[str]:
        """Like read_line, but an empty line means "keep" and returns None."""
        text = self.read_line(prompt)
        return text if text != "" else None

    def read_int(self, prompt: str = "") -> int:
        text = self.read_line(prompt).strip()
        try:
            return int(text)
        except ValueError:
            raise InvalidInputError(f"Expected a whole number, got {text!r}")

    def read_optional_int(self, prompt: str = "") -> Optional[int]:
        text = self.read_line(prompt).strip()
        if not text:
            return None
        try:
            return int(text)
        except ValueError:
            raise InvalidInputError(f"Expected a whole number, got {text!r}")

    def read_float(self, prompt: str = "") -> float:
        text = self.read_line(prompt).strip()
        try:
            return float(text)
        except ValueError:
            raise InvalidInputError(f"Expected a number, got {text!r}")

    def read_multiline(self, max_bytes: int, sentinel: str = "END",
                       prefix: bool = False) -> tuple[str, bool]:
        """
        Concatenate lines until the sentinel line or the byte budget.

        Each kept line keeps its newline. With prefix=False the sentinel
        must be the whole line; with prefix=True any line starting with it
        ends the text. A line that would push the UTF-8 size past
        max_bytes is dropped and reading stops.

        Returns:
            (text, truncated) where truncated tells whether the budget ran out
        """
        parts = []
        size = 0
        while True:
            raw = self.stream.readline()
            if raw == "":
                return "".join(parts), False

            line = raw.rstrip("\r\n")
            if line == sentinel or (prefix and line.startswith(sentinel)):
                return "".join(parts), False

            line += "\n"
            encoded_size = len(line.encode("utf-8"))
            if size + encoded_size > max_bytes:
                return "".join(parts), True

            parts.append(line)
            size += encoded_size


def print_success(console: Console, message: str) -> None:
    console.print(f"[bold green]✓[/bold green] {escape(message)}")


def print_info(console: Console, message: str) -> None:
    console.print(f"[bold cyan]ℹ[/bold cyan] {escape(message)}")


def print_error(console: Console, message: str) -> None:
    console.print(f"[bold red]✗[/bold red] {escape(message)}")


def make_table(title: str, headers: list[str], rows: list[list[object]]) -> Table:
    """Tabular listing; every cell is shown as plain text."""
    table = Table(title=title, box=box.SIMPLE_HEAVY, title_style="bold blue")
    for header in headers:
        table.add_column(header, overflow="fold")
    for row in rows:
        table.add_row(*(escape(str(cell)) for cell in row))
    return table


@dataclass
class ProgramContext:
    """What a program needs from its surroundings."""
    reader: LineReader
    console: Console
    data_dir: Path = field(default_factory=lambda: Path(settings.DATA_DIR))
    catalog: Catalog = field(default_factory=Catalog.builtin)
    atomic_save: bool = settings.ATOMIC_SAVE

    @classmethod
    def from_streams(cls, stream: TextIO, console: Console, **kwargs) -> 'ProgramContext':
        return cls(reader=LineReader(stream, console), console=console, **kwargs)

    def open_store(self, name: str):
        return self.catalog.open_store(name, self.data_dir, atomic_save=self.atomic_save)


MenuAction = tuple[str, Callable[[], None]]


def run_menu(ctx: ProgramContext, title: str, actions: list[MenuAction],
             exit_label: str, on_exit: Optional[Callable[[], None]] = None,
             farewell: str = "Goodbye!") -> None:
    """
    Numbered menu loop.

    The exit entry comes last. Store errors raised by an action (or by
    on_exit) are reported once and the loop continues. End of input
    leaves the loop without running on_exit.
    """
    console = ctx.console
    exit_choice = len(actions) + 1

    while True:
        console.print(f"\n[bold]--- {escape(title)} ---[/bold]")
        for number, (label, _) in enumerate(actions, 1):
            console.print(f"{number}. {escape(label)}")
        console.print(f"{exit_choice}. {escape(exit_label)}")

        try:
            choice = ctx.reader.read_int("Enter your choice: ")
            if choice == exit_choice:
                if on_exit is not None:
                    on_exit()
                console.print(escape(farewell))
                return
            if 1 <= choice <= len(actions):
                actions[choice - 1][1]()
            else:
                print_error(console, "Invalid choice. Please try again.")
        except InvalidInputError as e:
            print_error(console, str(e))
        except StoreException as e:
            logger.info("%s: %s", title, e)
            print_error(console, str(e))
        except EOFError:
            console.print()
            print_info(console, "Input ended, leaving without saving.")
            return
