"""Currency conversion through US dollar rates."""
from dataclasses import dataclass

from ..core.exceptions import InvalidInputError, NotFoundError
from ..core.record import Record
from ..store import RecordStore
from .console import ProgramContext, make_table, run_menu

DEFAULT_RATES = [
    ("USD", "US Dollar", 1.0),
    ("EUR", "Euro", 0.92),
    ("GBP", "British Pound", 0.79),
    ("JPY", "Japanese Yen", 157.45),
    ("INR", "Indian Rupee", 83.54),
    ("CAD", "Canadian Dollar", 1.37),
]


@dataclass(frozen=True)
class Conversion:
    amount: float
    from_code: str
    converted: float
    to_code: str

    def __str__(self) -> str:
        return f"{self.amount:.2f} {self.from_code} = {self.converted:.2f} {self.to_code}"


class CurrencyConverter:
    """Converts amounts between currencies held in a store of rates vs. USD."""

    def __init__(self, store: RecordStore, seed: bool = True):
        self.store = store
        if seed and not len(store):
            for code, name, rate in DEFAULT_RATES:
                self.add_currency(code, name, rate)

    def add_currency(self, code: str, name: str, rate_vs_usd: float) -> None:
        if rate_vs_usd <= 0:
            raise InvalidInputError(f"Rate for {code} must be positive, got {rate_vs_usd}")
        self.store.insert({"code": code.upper(), "name": name, "rate_vs_usd": rate_vs_usd})

    def lookup(self, code: str) -> Record:
        position = self.store.find(code.strip().upper())
        if position is None:
            raise NotFoundError(f"Unknown currency code {code!r}")
        return self.store.get_at(position)

    def convert(self, amount: float, from_code: str, to_code: str) -> Conversion:
        """
        Convert amount via USD: amount / from.rate * to.rate.

        Raises:
            InvalidInputError: If amount is negative
            NotFoundError: If either code is unknown
        """
        if amount < 0:
            raise InvalidInputError(f"Amount must not be negative, got {amount}")
        source = self.lookup(from_code)
        target = self.lookup(to_code)
        amount_in_usd = amount / source["rate_vs_usd"]
        return Conversion(amount, source["code"], amount_in_usd * target["rate_vs_usd"],
                          target["code"])

    def currencies(self) -> list[Record]:
        return self.store.list()


def run(ctx: ProgramContext) -> None:
    converter = CurrencyConverter(ctx.open_store("currencies"))
    reader, console = ctx.reader, ctx.console

    def convert():
        console.print(make_table("Available Currencies", ["Code", "Currency Name"],
                                 [[c["code"], c["name"]] for c in converter.currencies()]))
        amount = reader.read_float("Enter the amount to convert: ")
        from_code = reader.read_line("Enter the 3-letter code of the currency to convert FROM: ")
        to_code = reader.read_line("Enter the 3-letter code of the currency to convert TO: ")
        result = converter.convert(amount, from_code, to_code)
        console.print("\n--- Conversion Result ---")
        console.print(str(result), markup=False)

    run_menu(ctx, "Currency Converter", [("Perform a Conversion", convert)], "Exit",
             farewell="Thank you for using the Currency Converter!")
