"""Database operations package."""

from .base import DatabaseManager
from .repository import StockRepository
from .stocks import StockOperations

__all__ = [
    "DatabaseManager",
    "StockRepository",
    "StockOperations",
    "StocksDatabase",
]


class StocksDatabase:
    """Unified database interface for the stocks store."""

    def __init__(self, database_url: str):
        """Initialize database with its operation classes."""
        self.manager = DatabaseManager(database_url)
        self.stocks = StockOperations(self.manager.engine)

    def close(self) -> None:
        """Close database connection."""
        self.manager.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
