"""Validation of raw create-property payloads."""

from collections.abc import Callable, Mapping
from decimal import Decimal, InvalidOperation
from typing import Any

from realestate.models.enums import ValidationRule
from realestate.schemas.property import (
    MAX_PRICE,
    CreatePropertyRequest,
    FieldError,
    ValidationResult,
)

FieldCheck = Callable[[Any], ValidationRule | None]


def parse_price(value: Any) -> Decimal | None:
    """
    Convert a raw price to Decimal.

    Args:
        value: JSON number, Decimal or numeric string

    Returns:
        Parsed Decimal, or None if the value is not a number

    """
    # bool is an int subclass
    if isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, str):
        try:
            return Decimal(value.strip())
        except InvalidOperation:
            return None
    return None


def check_required_text(value: Any) -> ValidationRule | None:
    """Check a required, non-blank string field."""
    if value is None:
        return ValidationRule.MISSING_OR_EMPTY
    if not isinstance(value, str):
        return ValidationRule.INVALID_TYPE
    if not value.strip():
        return ValidationRule.MISSING_OR_EMPTY
    return None


def check_price(value: Any) -> ValidationRule | None:
    """Check the price is a number within [0, MAX_PRICE]."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return ValidationRule.MISSING_OR_EMPTY
    price = parse_price(value)
    if price is None:
        return ValidationRule.INVALID_TYPE
    if not price.is_finite() or price < 0 or price > MAX_PRICE:
        return ValidationRule.OUT_OF_RANGE
    return None


# Evaluated in field-declaration order
CREATE_PROPERTY_RULES: tuple[tuple[str, FieldCheck], ...] = (
    ("idOwner", check_required_text),
    ("name", check_required_text),
    ("addressProperty", check_required_text),
    ("priceProperty", check_price),
    ("image", check_required_text),
)


class RequestValidator:
    """Stateless validator for create-property payloads.

    Every rule is evaluated and all violations are reported together.
    """

    rules = CREATE_PROPERTY_RULES

    def validate(self, raw: Mapping[str, Any] | None) -> ValidationResult:
        """
        Validate a raw payload keyed by wire field names.

        Args:
            raw: Untrusted payload, e.g. a decoded JSON body; None counts as empty

        Returns:
            Result holding the accepted request or one FieldError per violated field

        Raises:
            TypeError: If raw is not a mapping

        """
        if raw is None:
            raw = {}
        if not isinstance(raw, Mapping):
            raise TypeError(f"Expected a mapping payload, got {type(raw).__name__}")

        errors = [
            FieldError(field=field, rule=rule)
            for field, check in self.rules
            if (rule := check(raw.get(field))) is not None
        ]
        if errors:
            return ValidationResult(errors=tuple(errors))

        request = CreatePropertyRequest(
            idOwner=raw["idOwner"],
            name=raw["name"],
            addressProperty=raw["addressProperty"],
            priceProperty=parse_price(raw["priceProperty"]),
            image=raw["image"],
        )
        return ValidationResult(value=request)


request_validator = RequestValidator()


def validate(raw: Mapping[str, Any] | None) -> ValidationResult:
    """Validate a payload with the default create-property rules."""
    return request_validator.validate(raw)
