"""Tests for property schemas."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from realestate.models.enums import ValidationRule
from realestate.schemas.property import (
    MAX_PRICE,
    CreatePropertyRequest,
    FieldError,
    PropertyResponse,
    ValidationProblem,
    ValidationResult,
)


def _request(**overrides) -> CreatePropertyRequest:
    fields = {
        "id_owner": "own-002",
        "name": "Casa Norte",
        "address_property": "Cl 150 #20-50, Bogotá",
        "price_property": Decimal("890000000"),
        "image": "https://picsum.photos/seed/2/600/400",
    }
    fields.update(overrides)
    return CreatePropertyRequest(**fields)


class TestCreatePropertyRequest:
    """Tests for direct construction of the request model."""

    def test_construct_by_attribute_name(self) -> None:
        """Test construction with Python attribute names."""
        request = _request()
        assert request.id_owner == "own-002"
        assert request.price_property == Decimal("890000000")

    def test_construct_by_wire_name(self) -> None:
        """Test construction with wire field names."""
        request = CreatePropertyRequest(
            idOwner="own-003",
            name="Loft Chicó",
            addressProperty="Cra 11 #86-15, Bogotá",
            priceProperty=620_000_000,
            image="https://picsum.photos/seed/3/600/400",
        )
        assert request.address_property == "Cra 11 #86-15, Bogotá"

    @pytest.mark.parametrize("field", ["id_owner", "name", "address_property", "image"])
    @pytest.mark.parametrize("value", ["", "   "])
    def test_rejects_blank_text(self, field: str, value: str) -> None:
        """Test blank text cannot reach an instance."""
        with pytest.raises(ValidationError):
            _request(**{field: value})

    @pytest.mark.parametrize("price", [Decimal("-1"), MAX_PRICE + 1, Decimal("NaN")])
    def test_rejects_invalid_price(self, price: Decimal) -> None:
        """Test out-of-range prices cannot reach an instance."""
        with pytest.raises(ValidationError):
            _request(price_property=price)

    def test_serialises_by_wire_name(self) -> None:
        """Test JSON output uses the wire field names."""
        data = _request().model_dump(mode="json", by_alias=True)
        assert set(data) == {"idOwner", "name", "addressProperty", "priceProperty", "image"}


class TestPropertyResponse:
    """Tests for the created property schema."""

    def test_from_request(self) -> None:
        """Test a response can be built from a request dump."""
        response = PropertyResponse(id="abc123", **_request().model_dump())
        assert response.id == "abc123"
        assert response.name == "Casa Norte"

    @pytest.mark.parametrize(
        ("price", "expected"),
        [
            (Decimal("890000000"), 890_000_000),
            (Decimal("890000000.00"), 890_000_000),
            (Decimal("1000.55"), 1000.55),
            (MAX_PRICE, 79228162514264337593543950335),
        ],
    )
    def test_json_price_is_a_number(self, price: Decimal, expected: int | float) -> None:
        """Test the JSON dump carries the price as a number."""
        response = PropertyResponse(id="abc123", **_request(price_property=price).model_dump())
        data = response.model_dump(mode="json", by_alias=True)
        assert data["priceProperty"] == expected
        assert type(data["priceProperty"]) is type(expected)

    def test_python_dump_keeps_decimal(self) -> None:
        """Test the Python dump keeps the exact Decimal."""
        response = PropertyResponse(id="abc123", **_request().model_dump())
        assert response.model_dump()["price_property"] == Decimal("890000000")


class TestValidationResult:
    """Tests for the validation outcome container."""

    def test_accepted(self) -> None:
        """Test an accepted result."""
        result = ValidationResult(value=_request())
        assert result.is_valid
        assert result.errors == ()

    def test_rejected(self) -> None:
        """Test a rejected result."""
        error = FieldError(field="name", rule=ValidationRule.MISSING_OR_EMPTY)
        result = ValidationResult(errors=(error,))
        assert not result.is_valid
        assert result.value is None

    def test_requires_value_or_errors(self) -> None:
        """Test an empty result is refused."""
        with pytest.raises(ValidationError):
            ValidationResult()

    def test_rejects_value_with_errors(self) -> None:
        """Test a result cannot be both accepted and rejected."""
        error = FieldError(field="name", rule=ValidationRule.MISSING_OR_EMPTY)
        with pytest.raises(ValidationError):
            ValidationResult(value=_request(), errors=(error,))


def test_validation_problem_json() -> None:
    """Test the 422 body renders rules by value."""
    problem = ValidationProblem(
        errors=[FieldError(field="priceProperty", rule=ValidationRule.OUT_OF_RANGE)]
    )
    assert problem.model_dump(mode="json") == {
        "detail": "Validation failed",
        "errors": [{"field": "priceProperty", "rule": "OutOfRange"}],
    }
