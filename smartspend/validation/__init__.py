"""Spending input validation."""

from smartspend.validation.validator import (
    InvalidAmount,
    InvalidInput,
    SpendingValidationError,
    SpendingValidator,
    ValidatedSpending,
    is_storable,
    parse_amount,
)

__all__ = [
    "InvalidAmount",
    "InvalidInput",
    "SpendingValidationError",
    "SpendingValidator",
    "ValidatedSpending",
    "is_storable",
    "parse_amount",
]
