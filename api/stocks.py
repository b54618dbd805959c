"""Stock endpoints."""

import logging
import math
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Path, Response

from stocks import Stock, StockCreate, StockService, StockUpdate

logger = logging.getLogger(__name__)

# Create router for stock endpoints
router = APIRouter(prefix="/stocks", tags=["stocks"])

# Global service instance (will be set during app initialization)
stock_service: Optional[StockService] = None


def set_stock_service(service: Optional[StockService]) -> None:
    """Set the global stock service instance."""
    global stock_service
    stock_service = service


def _is_valid_id(stock_id: Optional[str]) -> bool:
    return stock_id is not None and stock_id.strip() != ""


@router.get("", response_model=List[Stock])
async def get_all_stocks() -> List[Stock]:
    """List every stock."""
    if not stock_service:
        raise HTTPException(status_code=500, detail="StockService not initialized")

    try:
        logger.info("Retrieving all stocks")
        return stock_service.get_all_stocks()
    except Exception as e:
        logger.error(f"Error listing stocks: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/{stock_id}", response_model=Stock)
async def get_stock_by_id(
    stock_id: str = Path(..., description="Stock identifier"),
) -> Stock:
    """Retrieve a stock by its ID."""
    if not stock_service:
        raise HTTPException(status_code=500, detail="StockService not initialized")

    try:
        logger.info("Retrieving stock with ID: %s", stock_id)
        stock = stock_service.get_stock_by_id(stock_id)
        if stock is None:
            raise HTTPException(status_code=404, detail=f"Stock not found: {stock_id}")
        return stock
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error getting stock {stock_id}: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("", response_model=Stock, status_code=201)
async def create_stock(data: StockCreate) -> Stock:
    """Create a new stock."""
    if not stock_service:
        raise HTTPException(status_code=500, detail="StockService not initialized")

    # Checked before the field rules run; NaN and Infinity are not positive prices
    if data.price is not None and (
        not math.isfinite(data.price) or data.price <= 0
    ):
        logger.error("Invalid price provided for new stock creation")
        raise HTTPException(status_code=400, detail="Price must be greater than zero")

    try:
        logger.info("Creating new stock")
        return stock_service.create_stock(data)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error creating stock: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.put("/{stock_id}", response_model=Stock, status_code=201)
async def update_stock(
    data: StockUpdate,
    stock_id: str = Path(..., description="Stock identifier"),
) -> Stock:
    """Replace symbol, company name and price of an existing stock.

    Responds with 201 on success, matching the status existing clients expect.
    """
    if not stock_service:
        raise HTTPException(status_code=500, detail="StockService not initialized")

    logger.info("Updating stock with ID: %s", stock_id)
    if not _is_valid_id(stock_id):
        logger.error("Invalid ID provided for update operation")
        raise HTTPException(status_code=400, detail="Stock ID cannot be blank")

    try:
        if not stock_service.stock_exists(stock_id):
            logger.error("Stock with ID %s not found for update", stock_id)
            raise HTTPException(status_code=404, detail=f"Stock not found: {stock_id}")

        updated = stock_service.update_stock(stock_id, data)
        # Only reachable when the stock is deleted between the two lookups
        if updated is None:
            raise HTTPException(status_code=404, detail=f"Stock not found: {stock_id}")
        return updated
    except HTTPException:
        raise
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error updating stock {stock_id}: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.delete("/{stock_id}", status_code=200, response_class=Response)
async def delete_stock_by_id(
    stock_id: str = Path(..., description="Stock identifier"),
) -> Response:
    """Delete a stock by its ID."""
    if not stock_service:
        raise HTTPException(status_code=500, detail="StockService not initialized")

    logger.info("Deleting stock with ID: %s", stock_id)
    if not _is_valid_id(stock_id):
        logger.error("Invalid ID provided for delete operation")
        raise HTTPException(status_code=400, detail="Stock ID cannot be blank")

    try:
        if not stock_service.stock_exists(stock_id):
            logger.error("Stock with ID %s not found for deletion", stock_id)
            raise HTTPException(status_code=404, detail=f"Stock not found: {stock_id}")

        stock_service.delete_stock(stock_id)
        return Response(status_code=200)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error deleting stock {stock_id}: {e}")
        raise HTTPException(status_code=500, detail=str(e))
