"""Property API routes."""

from typing import Any

import structlog
from fastapi import APIRouter, Body, Depends, Form, HTTPException, Request, Response
from fastapi.responses import JSONResponse

from realestate.api.dependencies import get_property_service, get_request_validator
from realestate.schemas.property import PropertyResponse, ValidationProblem, ValidationResult
from realestate.services.property_service import PropertyService
from realestate.services.validation import RequestValidator

logger = structlog.get_logger()

router = APIRouter(prefix="/properties", tags=["properties"])


def _validation_problem(result: ValidationResult) -> JSONResponse:
    """Build the 422 response for a rejected payload."""
    problem = ValidationProblem(errors=list(result.errors))
    return JSONResponse(
        status_code=422,
        content=problem.model_dump(mode="json"),
    )


async def _create_from_payload(
    payload: dict[str, Any] | None,
    validator: RequestValidator,
    service: PropertyService,
    request: Request,
    response: Response,
    source: str,
) -> PropertyResponse | JSONResponse:
    result = validator.validate(payload)
    if not result.is_valid:
        logger.info(
            "Rejected create-property request",
            source=source,
            errors=[f"{e.field}:{e.rule.value}" for e in result.errors],
        )
        return _validation_problem(result)

    property_obj = await service.create_property(result.value)
    logger.info(
        "Created property",
        source=source,
        property_id=property_obj.id,
        owner_id=property_obj.id_owner,
    )
    response.headers["Location"] = request.url_for(
        "get_property", property_id=property_obj.id
    ).path
    return property_obj


@router.post(
    "",
    response_model=PropertyResponse,
    status_code=201,
    responses={422: {"model": ValidationProblem}},
)
async def create_property(
    request: Request,
    response: Response,
    payload: dict[str, Any] | None = Body(default=None),
    validator: RequestValidator = Depends(get_request_validator),
    service: PropertyService = Depends(get_property_service),
) -> PropertyResponse | JSONResponse:
    """Create a property from a JSON body."""
    return await _create_from_payload(
        payload, validator, service, request, response, source="json"
    )


@router.post(
    "/form",
    response_model=PropertyResponse,
    status_code=201,
    responses={422: {"model": ValidationProblem}},
)
async def create_property_from_form(
    request: Request,
    response: Response,
    id_owner: str | None = Form(default=None, alias="IdOwner"),
    name: str | None = Form(default=None, alias="Name"),
    address_property: str | None = Form(default=None, alias="AddressProperty"),
    price_property: str | None = Form(default=None, alias="PriceProperty"),
    image: str | None = Form(default=None, alias="Image"),
    validator: RequestValidator = Depends(get_request_validator),
    service: PropertyService = Depends(get_property_service),
) -> PropertyResponse | JSONResponse:
    """Create a property from url-encoded or multipart form fields."""
    payload = {
        "idOwner": id_owner,
        "name": name,
        "addressProperty": address_property,
        "priceProperty": price_property,
        "image": image,
    }
    return await _create_from_payload(
        payload, validator, service, request, response, source="form"
    )


@router.get("/{property_id}", response_model=PropertyResponse)
async def get_property(
    property_id: str,
    service: PropertyService = Depends(get_property_service),
) -> PropertyResponse:
    """Get a property by ID."""
    property_obj = await service.get_property(property_id)
    if not property_obj:
        raise HTTPException(status_code=404, detail="Property not found")
    return property_obj
