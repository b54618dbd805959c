"""Stock record logic: validation, construction and persistence."""

import logging
from typing import List, Optional

from .db.repository import StockRepository
from .exceptions import StockValidationError
from .models import Stock, StockCreate, StockUpdate
from .validation import validate_stock_create


class StockService:
    """Operations on stocks, backed by a StockRepository."""

    def __init__(
        self, repository: StockRepository, logger: Optional[logging.Logger] = None
    ):
        """Initialize with a repository and an optional logger."""
        self.repository = repository
        self.logger = logger or logging.getLogger(__name__)

    def get_all_stocks(self) -> List[Stock]:
        """Retrieve all stocks."""
        self.logger.info("Retrieving all stocks")
        return self.repository.find_all()

    def get_stock_by_id(self, stock_id: str) -> Optional[Stock]:
        """Retrieve a stock by ID, or None if it does not exist."""
        self.logger.info("Retrieving stock by ID: %s", stock_id)
        return self.repository.find_by_id(stock_id)

    def stock_exists(self, stock_id: str) -> bool:
        """Check whether a stock with the ID exists."""
        return self.repository.exists_by_id(stock_id)

    def validate_request(self, data: StockCreate) -> None:
        """Check a creation payload against the field rules.

        Raises:
            StockValidationError: listing every violated rule.
        """
        self.logger.info("Validating stock creation payload")
        try:
            validate_stock_create(data)
        except StockValidationError as e:
            self.logger.error(str(e))
            raise

    def create_stock(self, data: StockCreate) -> Stock:
        """Validate the payload, then build and persist a new stock."""
        self.logger.info("Creating new stock")
        self.validate_request(data)
        stock = Stock.build(
            symbol=data.symbol,
            company_name=data.company_name,
            price=data.price,
        )
        return self.repository.save(stock)

    def update_stock(self, stock_id: str, data: StockUpdate) -> Optional[Stock]:
        """Overwrite symbol, company name and price of an existing stock.

        Returns the persisted stock, or None if no stock has the ID.
        """
        self.logger.info("Updating stock with ID: %s", stock_id)
        existing = self.repository.find_by_id(stock_id)
        if existing is None:
            self.logger.warning("Stock with ID %s not found for update", stock_id)
            return None

        updated = existing.model_copy(
            update={
                "symbol": data.symbol,
                "company_name": data.company_name,
                "price": data.price,
            }
        )
        return self.repository.save(updated)

    def delete_stock(self, stock_id: str) -> bool:
        """Delete a stock by ID. Returns False if it did not exist."""
        self.logger.info("Deleting stock with ID: %s", stock_id)
        return self.repository.delete_by_id(stock_id)
