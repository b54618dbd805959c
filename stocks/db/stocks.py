"""Stock database operations."""

import logging
from typing import List, Optional

from sqlalchemy import MetaData, Table, delete, insert, select, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from ..models import Stock
from .base import STOCKS_TABLE
from .repository import StockRepository

logger = logging.getLogger(__name__)


class StockOperations(StockRepository):
    """Relational adapter for the stock entity store."""

    def __init__(self, engine: Engine):
        """Initialize with database engine."""
        self.engine = engine
        # Create table metadata
        metadata = MetaData()
        self.stocks_table = Table(STOCKS_TABLE, metadata, autoload_with=engine)

    @staticmethod
    def _to_stock(row) -> Stock:
        return Stock(
            id=row.id,
            symbol=row.symbol,
            company_name=row.company_name,
            price=row.price,
        )

    def find_all(self) -> List[Stock]:
        """Get all stocks."""
        try:
            with self.engine.connect() as conn:
                stmt = select(self.stocks_table)
                result = conn.execute(stmt)

                stocks = [self._to_stock(row) for row in result]
                logger.info(f"Retrieved {len(stocks)} stocks")
                return stocks

        except SQLAlchemyError as e:
            logger.error(f"Error getting all stocks: {e}")
            raise

    def find_by_id(self, stock_id: str) -> Optional[Stock]:
        """Get stock by ID."""
        try:
            with self.engine.connect() as conn:
                stmt = select(self.stocks_table).where(
                    self.stocks_table.c.id == stock_id
                )

                row = conn.execute(stmt).fetchone()
                if row:
                    return self._to_stock(row)
                return None

        except SQLAlchemyError as e:
            logger.error(f"Error getting stock by ID {stock_id}: {e}")
            raise

    def exists_by_id(self, stock_id: str) -> bool:
        """Check whether a stock with the ID is stored."""
        try:
            with self.engine.connect() as conn:
                stmt = select(self.stocks_table.c.id).where(
                    self.stocks_table.c.id == stock_id
                )
                return conn.execute(stmt).first() is not None

        except SQLAlchemyError as e:
            logger.error(f"Error checking stock existence for ID {stock_id}: {e}")
            raise

    def save(self, stock: Stock) -> Stock:
        """Insert a stock, or replace the row that has the same ID."""
        values = {
            "symbol": stock.symbol,
            "company_name": stock.company_name,
            "price": stock.price,
        }
        try:
            with self.engine.connect() as conn:
                stmt = (
                    update(self.stocks_table)
                    .where(self.stocks_table.c.id == stock.id)
                    .values(**values)
                )
                result = conn.execute(stmt)

                if result.rowcount == 0:
                    conn.execute(
                        insert(self.stocks_table).values(id=stock.id, **values)
                    )
                    logger.info(f"Inserted stock: {stock.symbol} with ID: {stock.id}")
                else:
                    logger.info(f"Replaced stock: {stock.symbol} with ID: {stock.id}")

                conn.commit()
                return stock.model_copy()

        except SQLAlchemyError as e:
            logger.error(f"Error saving stock {stock.id}: {e}")
            raise

    def delete_by_id(self, stock_id: str) -> bool:
        """Delete a stock by ID."""
        try:
            with self.engine.connect() as conn:
                stmt = delete(self.stocks_table).where(
                    self.stocks_table.c.id == stock_id
                )
                result = conn.execute(stmt)
                conn.commit()

                deleted = result.rowcount > 0
                if deleted:
                    logger.info(f"Deleted stock: {stock_id}")
                else:
                    logger.warning(f"Stock not found for deletion: {stock_id}")

                return deleted

        except SQLAlchemyError as e:
            logger.error(f"Error deleting stock {stock_id}: {e}")
            raise
