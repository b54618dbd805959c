"""Stock models package."""

from .stock import Stock, StockBase, StockCreate, StockUpdate

__all__ = [
    "StockBase",
    "StockCreate",
    "StockUpdate",
    "Stock",
]
