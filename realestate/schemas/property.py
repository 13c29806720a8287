"""Property Pydantic schemas for request/response validation."""

from decimal import Decimal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_serializer,
    field_validator,
    model_validator,
)

from realestate.models.enums import ValidationRule

# Largest value of a 96-bit decimal
MAX_PRICE = Decimal("79228162514264337593543950335")


class PropertyBase(BaseModel):
    """Base property schema, serialised by wire name."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id_owner: str = Field(alias="idOwner", min_length=1)
    name: str = Field(min_length=1)
    address_property: str = Field(alias="addressProperty", min_length=1)
    price_property: Decimal = Field(alias="priceProperty", ge=0, le=MAX_PRICE)
    image: str = Field(min_length=1)

    @field_validator("id_owner", "name", "address_property", "image")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject whitespace-only text."""
        if not v.strip():
            raise ValueError("Value cannot be blank")
        return v


class CreatePropertyRequest(PropertyBase):
    """Schema for a validated create-property request."""


class PropertyResponse(PropertyBase):
    """Schema for property response."""

    id: str

    @field_serializer("price_property", when_used="json")
    def serialize_price(self, v: Decimal) -> int | float:
        """Emit the price as a JSON number; whole amounts stay exact."""
        if v == v.to_integral_value():
            return int(v)
        return float(v)


class FieldError(BaseModel):
    """A single violated field constraint."""

    model_config = ConfigDict(frozen=True)

    field: str
    rule: ValidationRule


class ValidationResult(BaseModel):
    """Outcome of validating a create-property payload.

    Exactly one of ``value`` and ``errors`` is populated.
    """

    model_config = ConfigDict(frozen=True)

    value: CreatePropertyRequest | None = None
    errors: tuple[FieldError, ...] = ()

    @model_validator(mode="after")
    def check_exclusive(self) -> "ValidationResult":
        """Ensure a result is either accepted or rejected, never both."""
        if (self.value is None) == (not self.errors):
            raise ValueError("ValidationResult needs either a value or errors")
        return self

    @property
    def is_valid(self) -> bool:
        """Whether the payload was accepted."""
        return not self.errors


class ValidationProblem(BaseModel):
    """Schema for a 422 validation error response."""

    detail: str = "Validation failed"
    errors: list[FieldError]
