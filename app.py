"""FastAPI application for the stocks service."""

import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.stocks import router as stocks_router
from api.stocks import set_stock_service
from stocks import StocksDatabase, StockService

# Configure logging
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)

# Initialize systems
stocks_db: Optional[StocksDatabase] = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app."""
    global stocks_db
    try:
        database_url = os.getenv("DATABASE_URL")
        if not database_url:
            raise ValueError("DATABASE_URL environment variable is required")

        stocks_db = StocksDatabase(database_url)

        # Set the service instance in the stocks module
        set_stock_service(
            StockService(stocks_db.stocks, logger=logging.getLogger("stocks.service"))
        )

        logger.info("StocksDatabase initialized successfully")
    except Exception as e:
        logger.error(f"Failed to initialize systems: {e}")
        stocks_db = None
        set_stock_service(None)

    yield

    # Cleanup on shutdown
    if stocks_db:
        stocks_db.close()
        set_stock_service(None)
        logger.info("StocksDatabase connection closed")


# Initialize FastAPI app
app = FastAPI(
    title="Stocks API",
    description="Record management for B3 stock entries",
    version="1.0.0",
    lifespan=lifespan,
    redirect_slashes=False,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=os.getenv("ALLOWED_ORIGINS", "http://localhost:3000").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def health_check() -> dict:
    """Health check endpoint."""
    return {"message": "Stocks API is running!"}


# Include stock endpoints router
app.include_router(stocks_router)
