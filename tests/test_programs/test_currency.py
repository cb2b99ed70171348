import io

import pytest
from rich.console import Console

from recordkit.catalog import Catalog
from recordkit.core.exceptions import InvalidInputError, NotFoundError, StoreFullError
from recordkit.programs import currency
from recordkit.programs.console import ProgramContext
from recordkit.programs.currency import CurrencyConverter, DEFAULT_RATES


@pytest.fixture
def converter():
    return CurrencyConverter(Catalog.builtin().open_store("currencies"))


class TestCurrencyConverter:
    """Tests for conversions through USD."""

    def test_seeded_rates(self, converter):
        """Test that the default table is loaded."""
        codes = [c["code"] for c in converter.currencies()]
        assert codes == [code for code, _, _ in DEFAULT_RATES]

    def test_convert(self, converter):
        """Test amount / from.rate * to.rate."""
        result = converter.convert(100, "USD", "EUR")
        assert result.converted == pytest.approx(92.0)
        assert str(result) == "100.00 USD = 92.00 EUR"

    def test_convert_between_non_usd(self, converter):
        """Test a cross rate."""
        result = converter.convert(10, "gbp", "jpy")
        assert result.converted == pytest.approx(10 / 0.79 * 157.45)
        assert result.from_code == "GBP"
        assert result.to_code == "JPY"

    def test_same_currency(self, converter):
        """Test converting to the same code."""
        assert converter.convert(5.5, "INR", "INR").converted == pytest.approx(5.5)

    def test_unknown_code(self, converter):
        """Test an unknown currency."""
        with pytest.raises(NotFoundError, match="Unknown currency code"):
            converter.convert(1, "XYZ", "USD")

    def test_negative_amount(self, converter):
        """Test that amounts must not be negative."""
        with pytest.raises(InvalidInputError):
            converter.convert(-1, "USD", "EUR")

    def test_add_currency(self, converter):
        """Test adding a rate."""
        converter.add_currency("chf", "Swiss Franc", 0.9)
        assert converter.lookup("CHF")["name"] == "Swiss Franc"

    def test_add_invalid_rate(self, converter):
        """Test that rates must be positive."""
        with pytest.raises(InvalidInputError):
            converter.add_currency("ZZZ", "Zed", 0)

    def test_capacity(self):
        """Test that the rate table is bounded."""
        store = Catalog.builtin().open_store("currencies")
        converter = CurrencyConverter(store, seed=False)
        for i in range(store.capacity):
            converter.add_currency(f"C{i:02d}", "Test", 1.0)
        with pytest.raises(StoreFullError):
            converter.add_currency("ONE", "More", 1.0)


class TestCurrencyProgram:
    """Tests for the interactive program."""

    def test_session(self, tmp_path):
        """Test a conversion followed by exit."""
        output = io.StringIO()
        ctx = ProgramContext.from_streams(
            io.StringIO("1\n50\nusd\ncad\n2\n"),
            Console(file=output, width=120, color_system=None),
            data_dir=tmp_path)
        currency.run(ctx)

        text = output.getvalue()
        assert "50.00 USD = 68.50 CAD" in text
        assert "Thank you for using the Currency Converter!" in text
