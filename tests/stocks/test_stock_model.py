"""Tests for the Stock model and its price helpers."""

import pytest

from stocks import NegativePriceError, Stock


@pytest.fixture
def stock() -> Stock:
    """A stock priced at 10."""
    return Stock.build(symbol="PETR4", company_name="Petrobras", price=10.0)


class TestStockBuild:
    """Test building new stocks."""

    def test_build_assigns_fresh_id(self):
        """Each built stock gets its own non-empty ID."""
        first = Stock.build("SANB4", "Test Stock", 45.2)
        second = Stock.build("SANB4", "Test Stock", 45.2)

        assert first.id
        assert second.id
        assert first.id != second.id

    def test_build_keeps_fields(self):
        """Built stock carries the given fields unchanged."""
        stock = Stock.build("SANB4", "Test Stock", 45.2)

        assert stock.symbol == "SANB4"
        assert stock.company_name == "Test Stock"
        assert stock.price == 45.2

    def test_serializes_company_name_alias(self):
        """The wire name of company_name is companyName."""
        stock = Stock.build("SANB4", "Test Stock", 45.2)
        data = stock.model_dump(by_alias=True)

        assert data["companyName"] == "Test Stock"
        assert set(data) == {"id", "symbol", "companyName", "price"}


class TestPriceHelpers:
    """Test increase, decrease and change price."""

    def test_increase_price(self, stock):
        """Increase adds the amount."""
        assert stock.increase_price(5.5) == 15.5

    def test_increase_price_does_not_mutate(self, stock):
        """Helpers return the new price without touching the stock."""
        stock.increase_price(5.0)
        assert stock.price == 10.0

    def test_decrease_price(self, stock):
        """Decrease subtracts the amount."""
        assert stock.decrease_price(4.0) == 6.0

    def test_decrease_price_to_exactly_zero(self, stock):
        """Decreasing by the full price returns zero."""
        assert stock.decrease_price(10.0) == 0

    def test_decrease_price_below_zero_raises(self, stock):
        """Decreasing past zero is a contract violation."""
        with pytest.raises(NegativePriceError):
            stock.decrease_price(10.01)

        assert stock.price == 10.0

    def test_negative_price_error_is_not_a_value_error(self):
        """The floor violation is a programming error, not input validation."""
        assert issubclass(NegativePriceError, RuntimeError)
        assert not issubclass(NegativePriceError, ValueError)

    def test_change_price_dispatches_on_flag(self, stock):
        """change_price increases or decreases depending on the flag."""
        assert stock.change_price(2.0, increase=True) == 12.0
        assert stock.change_price(2.0, increase=False) == 8.0

    def test_change_price_decrease_keeps_floor(self, stock):
        """change_price keeps the non-negative floor of decrease_price."""
        with pytest.raises(NegativePriceError):
            stock.change_price(20.0, increase=False)
