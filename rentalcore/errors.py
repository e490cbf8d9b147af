"""Domain errors raised by the pricing and fulfillment core."""

from typing import Any, Dict, Optional


class RentalError(Exception):
    """Base class for rental core validation failures."""

    code = "RENTAL_ERROR"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidDateRange(RentalError):
    """End date before start date, or a date that cannot be parsed."""

    code = "INVALID_DATE_RANGE"


class InvalidInput(RentalError):
    """Negative quantity, delivery cost or rate parameter."""

    code = "INVALID_INPUT"
