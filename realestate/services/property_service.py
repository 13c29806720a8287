"""Property creation service."""

from typing import Protocol
from uuid import uuid4

from realestate.schemas.property import CreatePropertyRequest, PropertyResponse


class PropertyService(Protocol):
    """Collaborator that turns a validated request into a stored property."""

    async def create_property(self, request: CreatePropertyRequest) -> PropertyResponse:
        """Create a property from a validated request."""
        ...

    async def get_property(self, property_id: str) -> PropertyResponse | None:
        """Get a created property by ID."""
        ...


class InMemoryPropertyService:
    """Property service keeping created properties in process memory."""

    def __init__(self) -> None:
        self._properties: dict[str, PropertyResponse] = {}

    async def create_property(self, request: CreatePropertyRequest) -> PropertyResponse:
        """
        Create a new property.

        Args:
            request: Validated property creation data

        Returns:
            Created property with its assigned ID

        """
        property_obj = PropertyResponse(id=uuid4().hex, **request.model_dump())
        self._properties[property_obj.id] = property_obj
        return property_obj

    async def get_property(self, property_id: str) -> PropertyResponse | None:
        """
        Get a property by ID.

        Args:
            property_id: Property ID

        Returns:
            Property or None if not found

        """
        return self._properties.get(property_id)
