"""Pytest configuration and fixtures."""

from typing import Any

import pytest


@pytest.fixture
def valid_payload() -> dict[str, Any]:
    """A create-property payload satisfying every rule."""
    return {
        "idOwner": "own-001",
        "name": "Apto Centro",
        "addressProperty": "Cra 7 #12-34, Bogotá",
        "priceProperty": 350_000_000,
        "image": "https://picsum.photos/seed/1/600/400",
    }
