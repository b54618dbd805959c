"""Stock exceptions."""

from typing import List, Tuple


class StockValidationError(ValueError):
    """Raised when a creation payload breaks one or more field rules."""

    def __init__(self, violations: List[Tuple[str, str]]):
        self.violations = violations
        details = ", ".join(f"[{field}: {message}]" for field, message in violations)
        super().__init__(f"Validation failed. Details: {details}")


class NegativePriceError(RuntimeError):
    """Raised when a price decrease would drop the price below zero."""


class StocksTableMissingError(RuntimeError):
    """Raised when the database has not been migrated to hold the stocks table."""
