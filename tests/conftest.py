"""Pytest configuration for the stocks tests."""

from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine

from stocks import StockCreate, StocksDatabase

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture(scope="session")
def test_db_url(tmp_path_factory) -> str:
    """Test database URL, a throwaway SQLite file."""
    db_path = tmp_path_factory.mktemp("db") / "stocks_test.db"
    return f"sqlite:///{db_path}"


@pytest.fixture(scope="session")
def test_engine(test_db_url: str) -> Engine:
    """Test database engine with migrations applied."""
    engine = create_engine(test_db_url)

    # Run migrations to create tables
    alembic_cfg = Config(str(PROJECT_ROOT / "alembic.ini"))
    alembic_cfg.set_main_option("script_location", str(PROJECT_ROOT / "migrations"))
    alembic_cfg.set_main_option("sqlalchemy.url", test_db_url)
    command.upgrade(alembic_cfg, "head")

    yield engine

    engine.dispose()


@pytest.fixture(scope="function")
def db(test_engine: Engine, test_db_url: str) -> StocksDatabase:
    """Test database instance over an emptied stocks table."""
    with test_engine.connect() as conn:
        conn.execute(text("DELETE FROM stocks"))
        conn.commit()

    database = StocksDatabase(test_db_url)
    yield database
    database.close()


@pytest.fixture(scope="function")
def sample_stock_create() -> StockCreate:
    """Sample creation payload."""
    return StockCreate(symbol="SANB4", company_name="Test Stock", price=45.2)


@pytest.fixture(scope="function")
def sample_stock_json() -> dict:
    """Sample creation payload as sent over the wire."""
    return {"companyName": "Test Stock", "symbol": "SANB4", "price": 45.2}
