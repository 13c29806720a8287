"""API dependencies for validation and property creation."""

from realestate.services.property_service import InMemoryPropertyService, PropertyService
from realestate.services.validation import RequestValidator, request_validator

_property_service = InMemoryPropertyService()


def get_request_validator() -> RequestValidator:
    """Dependency for getting the create-property validator."""
    return request_validator


def get_property_service() -> PropertyService:
    """Dependency for getting the property creation service."""
    return _property_service
