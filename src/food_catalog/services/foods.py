"""Record service for the food catalog."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from food_catalog.domain.foods import FoodRecord

NOT_CONFIGURED_ERROR = "Database not configured"
CONFIGURE_HINT = "Please configure SUPABASE_URL and SUPABASE_SERVICE_KEY"

# Substrings of store client errors raised when the connection settings are
# missing or rejected.
_CONFIGURATION_MARKERS = (
    "supabase_url",
    "supabase_key",
    "supabase_service_key",
    "invalid api key",
)


class FoodRepository(Protocol):
    """Persistence interface for food records."""

    def list_foods(self) -> list[FoodRecord]:
        """Return every food record in store order."""

    def create_food(self, payload: dict[str, object]) -> FoodRecord:
        """Insert a food record and return it with its assigned id."""

    def update_food(self, food_id: UUID, payload: dict[str, object]) -> None:
        """Set the given fields on a food record."""

    def delete_food(self, food_id: UUID) -> None:
        """Delete a food record if it exists."""


class FoodOperationError(Exception):
    """Raised when a store call for a food operation fails."""

    def __init__(
        self,
        operation: str,
        details: str | None = None,
        not_configured: bool = False,
    ) -> None:
        super().__init__(f"Food operation '{operation}' failed")
        self.operation = operation
        self.details = details
        self.not_configured = not_configured


def is_configuration_error(exc: BaseException) -> bool:
    """Return true when the error text points at missing store settings."""
    message = str(exc).lower()
    return any(marker in message for marker in _CONFIGURATION_MARKERS)


@dataclass
class FoodService:
    """Application service translating requests into single store calls."""

    repository: FoodRepository

    def list_foods(self) -> list[FoodRecord]:
        """Return all food records."""
        try:
            return self.repository.list_foods()
        except Exception as exc:
            raise FoodOperationError(
                "list", details=str(exc), not_configured=is_configuration_error(exc)
            ) from exc

    def create_food(self, payload: dict[str, object]) -> dict[str, object]:
        """Insert the payload and echo it back with the assigned id."""
        try:
            created = self.repository.create_food(payload)
        except Exception as exc:
            raise FoodOperationError(
                "create",
                details=str(exc),
                not_configured=is_configuration_error(exc),
            ) from exc
        return {"_id": str(created.id), **payload}

    def update_food(self, raw_id: str, payload: dict[str, object]) -> dict[str, object]:
        """Merge the payload into a record and echo the submitted fields.

        The response carries only the submitted fields, not the stored
        record, so unchanged fields are omitted.
        """
        try:
            food_id = UUID(raw_id)
            if payload:
                self.repository.update_food(food_id, payload)
        except Exception as exc:
            raise FoodOperationError("update") from exc
        return {"_id": raw_id, **payload}

    def delete_food(self, raw_id: str) -> None:
        """Delete a record; succeeds whether or not it existed."""
        try:
            self.repository.delete_food(UUID(raw_id))
        except Exception as exc:
            raise FoodOperationError("delete") from exc
