"""Enum definitions for request validation."""

from enum import Enum


class ValidationRule(str, Enum):
    """Constraint a request field can violate."""

    MISSING_OR_EMPTY = "MissingOrEmpty"  # Absent, null, empty or whitespace-only
    OUT_OF_RANGE = "OutOfRange"  # Numeric value outside [0, MAX_PRICE]
    INVALID_TYPE = "InvalidType"  # Wrong JSON type or unparseable number
