"""Stock records package."""

from .db import StocksDatabase
from .exceptions import (
    NegativePriceError,
    StocksTableMissingError,
    StockValidationError,
)
from .models import Stock, StockBase, StockCreate, StockUpdate
from .service import StockService

__all__ = [
    "StocksDatabase",
    "StockService",
    "StockBase",
    "StockCreate",
    "StockUpdate",
    "Stock",
    "StockValidationError",
    "NegativePriceError",
    "StocksTableMissingError",
]
