"""REST endpoints for food records."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from food_catalog.api.food_models import FoodCreate, FoodUpdate
from food_catalog.services.foods import (
    CONFIGURE_HINT,
    NOT_CONFIGURED_ERROR,
    FoodOperationError,
)

if TYPE_CHECKING:
    from food_catalog.containers import AppContainer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/foods", tags=["foods"])

_FAILURE_MESSAGES = {
    "list": "Failed to fetch foods",
    "create": "Failed to create food",
    "update": "Failed to update food",
    "delete": "Failed to delete food",
}


def _failure_response(exc: FoodOperationError) -> JSONResponse:
    """Translate a failed store call into a 500 JSON response."""
    if exc.not_configured:
        body: dict[str, object] = {
            "error": NOT_CONFIGURED_ERROR,
            "message": CONFIGURE_HINT,
        }
    else:
        body = {"error": _FAILURE_MESSAGES[exc.operation]}
        if exc.details is not None:
            body["details"] = exc.details
    return JSONResponse(body, status_code=500)


@router.get("", response_model=None)
async def list_foods(
    request: Request,
) -> JSONResponse | list[dict[str, object]]:
    """Return every food record."""
    container: AppContainer = request.app.state.container
    try:
        foods = container.food_service.list_foods()
    except FoodOperationError as exc:
        logger.exception("GET /foods failed")
        return _failure_response(exc)
    logger.info("GET /foods returned %d foods", len(foods))
    return [food.to_json() for food in foods]


@router.post("", response_model=None)
async def create_food(
    body: FoodCreate, request: Request
) -> JSONResponse | dict[str, object]:
    """Create a food record and echo it with its id."""
    container: AppContainer = request.app.state.container
    try:
        created = container.food_service.create_food(body.model_dump())
    except FoodOperationError as exc:
        logger.exception("POST /foods failed")
        return _failure_response(exc)
    logger.info("POST /foods created %s", created["_id"])
    return created


@router.put("/{food_id}", response_model=None)
async def update_food(
    food_id: str, body: FoodUpdate, request: Request
) -> JSONResponse | dict[str, object]:
    """Set the submitted fields on a food record."""
    container: AppContainer = request.app.state.container
    try:
        updated = container.food_service.update_food(
            food_id, body.submitted_fields()
        )
    except FoodOperationError as exc:
        logger.exception("PUT /foods/%s failed", food_id)
        return _failure_response(exc)
    logger.info("PUT /foods/%s", food_id)
    return updated


@router.delete("/{food_id}", response_model=None)
async def delete_food(
    food_id: str, request: Request
) -> JSONResponse | dict[str, object]:
    """Delete a food record."""
    container: AppContainer = request.app.state.container
    try:
        container.food_service.delete_food(food_id)
    except FoodOperationError as exc:
        logger.exception("DELETE /foods/%s failed", food_id)
        return _failure_response(exc)
    logger.info("DELETE /foods/%s", food_id)
    return {"message": "Food deleted"}
