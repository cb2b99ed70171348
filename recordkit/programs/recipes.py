"""Recipe book with multi-line ingredients and instructions."""
from ..catalog.schemas import MAX_RECIPE_TEXT
from ..core.exceptions import InvalidInputError, StoreFullError
from ..core.record import Record, RecordId
from ..core.types import Predicate
from ..store import RecordStore
from .console import ProgramContext, print_info, print_success, run_menu


class RecipeBook:
    def __init__(self, store: RecordStore):
        self.store = store

    def add(self, title: str, ingredients: str, instructions: str) -> RecordId:
        if not title.strip():
            raise InvalidInputError("Recipe title must not be empty")
        return self.store.insert(
            {"title": title, "ingredients": ingredients, "instructions": instructions})

    def recipes(self) -> list[Record]:
        return self.store.list()

    def search(self, keyword: str) -> list[Record]:
        """Recipes whose title contains keyword (case-sensitive)."""
        return self.store.select("title", Predicate.LIKE, keyword)


def print_recipe(ctx: ProgramContext, recipe: Record) -> None:
    console = ctx.console
    console.print("\n" + "=" * 50)
    console.print(f"  {recipe['title']}", markup=False)
    console.print("=" * 50 + "\n")
    console.print(f"--- Ingredients ---\n{recipe['ingredients']}", markup=False, highlight=False)
    console.print(f"--- Instructions ---\n{recipe['instructions']}", markup=False, highlight=False)
    console.print("=" * 50)


def run(ctx: ProgramContext) -> None:
    store = ctx.open_store("recipes")
    if len(store):
        print_info(ctx.console, f"Loaded {len(store)} recipe(s).")
    book = RecipeBook(store)
    reader, console = ctx.reader, ctx.console

    def read_text(label: str) -> str:
        console.print(f"\nEnter {label} (type 'END' on a new line to finish):")
        text, truncated = reader.read_multiline(MAX_RECIPE_TEXT - 1, prefix=True)
        if truncated:
            print_info(console, "Input is too long, cannot add more text.")
        return text

    def add():
        if store.is_full():
            raise StoreFullError("Recipe book is full.")
        title = reader.read_line("Enter Recipe Title: ")
        ingredients = read_text("Ingredients")
        instructions = read_text("Instructions")
        book.add(title, ingredients, instructions)
        print_success(console, f"Recipe for '{title}' added successfully!")

    def show_all():
        if not len(store):
            print_info(console, "Your recipe book is empty.")
            return
        for recipe in book.recipes():
            print_recipe(ctx, recipe)

    def search():
        keyword = reader.read_line("Enter a keyword to search for in recipe titles: ")
        found = book.search(keyword)
        if not found:
            print_info(console, "No recipes found with that keyword.")
        for recipe in found:
            print_recipe(ctx, recipe)

    run_menu(ctx, "Digital Recipe Book", [
        ("Add New Recipe", add),
        ("Display All Recipes", show_all),
        ("Search for a Recipe (by Title)", search),
    ], "Save and Exit", on_exit=store.save, farewell="Recipe book saved. Bon appétit!")
