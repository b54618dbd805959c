"""Stock pydantic models."""

import uuid
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..exceptions import NegativePriceError


class StockBase(BaseModel):
    """Base stock model."""

    symbol: str
    company_name: str = Field(alias="companyName")
    price: float = Field(allow_inf_nan=False)

    model_config = ConfigDict(populate_by_name=True)


class StockCreate(BaseModel):
    """Model for creating a stock.

    Every field is optional here so that missing values are reported by the
    field rules instead of the request parser.
    """

    symbol: Optional[str] = None
    company_name: Optional[str] = Field(default=None, alias="companyName")
    price: Optional[float] = None

    model_config = ConfigDict(populate_by_name=True)


class StockUpdate(StockBase):
    """Model for fully replacing a stock's fields."""

    pass


class Stock(StockBase):
    """Complete stock model with ID."""

    id: str

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    @classmethod
    def build(cls, symbol: str, company_name: str, price: float) -> "Stock":
        """Create a new stock with a fresh ID. No validation is performed."""
        return cls(
            id=str(uuid.uuid4()),
            symbol=symbol,
            company_name=company_name,
            price=price,
        )

    def increase_price(self, amount: float) -> float:
        """Return the price raised by amount."""
        return self.price + amount

    def decrease_price(self, amount: float) -> float:
        """Return the price lowered by amount.

        Raises:
            NegativePriceError: if the result would be below zero. Callers
                must check the amount beforehand.
        """
        new_price = self.price - amount
        if new_price < 0:
            raise NegativePriceError(
                f"Price cannot be negative: {self.symbol} {self.price} - {amount}"
            )
        return new_price

    def change_price(self, amount: float, increase: bool) -> float:
        """Return the new price, increasing or decreasing by amount."""
        if increase:
            return self.increase_price(amount)
        return self.decrease_price(amount)
