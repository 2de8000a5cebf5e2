"""
Spending Input Validation

DESIGN DECISION: Input is validated completely BEFORE any state changes.
A rejected spending never leaves a partial write behind.

Checks:
- Amount is numeric, finite and strictly positive (InvalidAmount)
- Amount survives the JSON number it is stored as (InvalidAmount)
- Description and category are non-empty after trimming (InvalidInput)

IMPORTANT: Validation never silently fixes the amount. Text fields are
trimmed, nothing else is rewritten.
"""

import math
from decimal import Decimal, InvalidOperation
from typing import Union

from pydantic import BaseModel, Field


AmountInput = Union[Decimal, int, float, str]


class SpendingValidationError(ValueError):
    """Base class for rejected spending input."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(message)


class InvalidAmount(SpendingValidationError):
    """Amount is non-numeric, non-finite or not strictly positive."""

    def __init__(self, value: object, message: str = "Please enter a valid amount"):
        self.value = value
        super().__init__("amount", f"{message}: {value!r}")


class InvalidInput(SpendingValidationError):
    """A required text field is empty after trimming."""

    def __init__(self, field: str):
        super().__init__(field, f"{field.capitalize()} must not be empty")


class ValidatedSpending(BaseModel):
    """Spending input that passed validation, normalized."""

    amount: Decimal = Field(..., gt=0)
    description: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)


def is_storable(amount: Decimal) -> bool:
    """Whether amount fits a finite JSON number."""
    return math.isfinite(float(amount))


def parse_amount(value: AmountInput) -> Decimal:
    """
    Convert user input to a positive, finite Decimal.

    Raises:
        InvalidAmount: For booleans, unparseable strings, NaN/infinity, <= 0,
            or values a stored number would not reproduce exactly
    """
    if isinstance(value, bool) or value is None:
        raise InvalidAmount(value)

    try:
        if isinstance(value, Decimal):
            amount = value
        elif isinstance(value, str):
            amount = Decimal(value.strip())
        elif isinstance(value, (int, float)):
            amount = Decimal(str(value))
        else:
            raise InvalidAmount(value)
    except InvalidOperation:
        raise InvalidAmount(value)

    if not amount.is_finite():
        raise InvalidAmount(value)
    if amount <= 0:
        raise InvalidAmount(value, "Amount must be greater than zero")
    if not is_storable(amount):
        raise InvalidAmount(value, "Amount is too large")
    if Decimal(repr(float(amount))) != amount:
        raise InvalidAmount(value, "Amount has more digits than can be stored")

    return amount


def require_text(value: object, field: str) -> str:
    """Trimmed text, or InvalidInput if nothing is left."""
    if not isinstance(value, str) or not value.strip():
        raise InvalidInput(field)
    return value.strip()


class SpendingValidator:
    """Validates the three user-supplied fields of a new spending."""

    def validate(
        self,
        amount: AmountInput,
        description: str,
        category: str,
    ) -> ValidatedSpending:
        """
        Run all checks, amount first.

        Returns:
            ValidatedSpending with a Decimal amount and trimmed text

        Raises:
            InvalidAmount: If the amount is rejected
            InvalidInput: If description or category is empty
        """
        parsed = parse_amount(amount)
        clean_description = require_text(description, "description")
        clean_category = require_text(category, "category")

        return ValidatedSpending(
            amount=parsed,
            description=clean_description,
            category=clean_category,
        )
