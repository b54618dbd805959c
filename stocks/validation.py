"""Field rules for stock creation payloads."""

import re
from typing import Callable, List, NamedTuple, Tuple

from .exceptions import StockValidationError
from .models import StockCreate

# B3 ticker: four letters, one or two digits and an optional class suffix
SYMBOL_PATTERN = re.compile(r"[A-Z]{4}\d{1,2}([A-Z]?|[A-Z]\d|F|B|N[1-3])?")


class FieldRule(NamedTuple):
    """A single constraint on one payload field."""

    field: str
    check: Callable[[StockCreate], bool]
    message: str


def _symbol_matches(payload: StockCreate) -> bool:
    return payload.symbol is not None and bool(SYMBOL_PATTERN.fullmatch(payload.symbol))


def _company_name_not_blank(payload: StockCreate) -> bool:
    return payload.company_name is not None and payload.company_name.strip() != ""


def _price_present(payload: StockCreate) -> bool:
    return payload.price is not None


FIELD_RULES: List[FieldRule] = [
    FieldRule("symbol", _symbol_matches, "Symbol does not match the B3 pattern"),
    FieldRule("companyName", _company_name_not_blank, "Company name cannot be blank"),
    FieldRule("price", _price_present, "Price cannot be null"),
]


def find_violations(payload: StockCreate) -> List[Tuple[str, str]]:
    """Evaluate every rule and return the (field, message) pairs that failed."""
    return [
        (rule.field, rule.message) for rule in FIELD_RULES if not rule.check(payload)
    ]


def validate_stock_create(payload: StockCreate) -> None:
    """Raise StockValidationError listing every broken rule, if any."""
    violations = find_violations(payload)
    if violations:
        raise StockValidationError(violations)
