"""Engine ownership and schema check for the stocks store."""

import logging

from sqlalchemy import create_engine, inspect
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from ..exceptions import StocksTableMissingError

logger = logging.getLogger(__name__)

STOCKS_TABLE = "stocks"


class DatabaseManager:
    """Owns the SQLAlchemy engine and refuses stores that were never migrated."""

    def __init__(self, database_url: str):
        self.engine: Engine = create_engine(database_url)
        self._check_schema()

    def _check_schema(self) -> None:
        """Make sure the store is reachable and holds the stocks table."""
        try:
            tables = inspect(self.engine).get_table_names()
        except SQLAlchemyError as e:
            logger.error(f"Database connection failed: {e}")
            self.engine.dispose()
            raise

        if STOCKS_TABLE not in tables:
            self.engine.dispose()
            logger.error(f"Table '{STOCKS_TABLE}' not found in {self.engine.url!r}")
            raise StocksTableMissingError(
                f"Table '{STOCKS_TABLE}' does not exist; run 'alembic upgrade head' first"
            )

        logger.info(f"Stocks store ready at {self.engine.url!r}")

    def close(self) -> None:
        """Dispose of pooled connections."""
        self.engine.dispose()
        logger.info("Database connection closed")
