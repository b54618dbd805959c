"""Entity store interface for stocks."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models import Stock


class StockRepository(ABC):
    """Narrow persistence interface the record logic programs against.

    One concrete adapter exists per supported backing store.
    """

    @abstractmethod
    def find_all(self) -> List[Stock]:
        """Return every stored stock in store order."""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, stock_id: str) -> Optional[Stock]:
        """Return the stock with the given ID, or None."""
        raise NotImplementedError

    @abstractmethod
    def exists_by_id(self, stock_id: str) -> bool:
        """Return whether a stock with the given ID is stored."""
        raise NotImplementedError

    @abstractmethod
    def save(self, stock: Stock) -> Stock:
        """Insert the stock, or replace the stored row with the same ID."""
        raise NotImplementedError

    @abstractmethod
    def delete_by_id(self, stock_id: str) -> bool:
        """Delete the stock with the given ID. Returns False if it was absent."""
        raise NotImplementedError
