"""Utility functions for financial calculations."""

from timevalue.utils.financial_utils import (
    When,
    calculate_discount_factors,
    validate_nper,
    validate_period,
    validate_rate,
)

__all__ = [
    "When",
    "calculate_discount_factors",
    "validate_nper",
    "validate_period",
    "validate_rate",
]
