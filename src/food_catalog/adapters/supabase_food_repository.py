"""Supabase implementation for food records."""

from dataclasses import dataclass
from uuid import UUID

from food_catalog.adapters.supabase_gateway import SupabaseGateway
from food_catalog.domain.foods import FoodRecord
from food_catalog.services.foods import FoodRepository

FOODS_TABLE = "foods"
_COLUMNS = "id, name, price, category, description"


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase-backed repository for the foods table."""

    gateway: SupabaseGateway

    def list_foods(self) -> list[FoodRecord]:
        """Return every food row in store order."""
        response = self.gateway.table(FOODS_TABLE).select(_COLUMNS).execute()
        return [_parse_food(row) for row in response.data or []]

    def create_food(self, payload: dict[str, object]) -> FoodRecord:
        """Insert a food row and return it."""
        response = self.gateway.table(FOODS_TABLE).insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create food entry")
        return _parse_food(response.data[0])

    def update_food(self, food_id: UUID, payload: dict[str, object]) -> None:
        """Set the given columns on a food row."""
        self.gateway.table(FOODS_TABLE).update(payload).eq(
            "id", str(food_id)
        ).execute()

    def delete_food(self, food_id: UUID) -> None:
        """Delete a food row if present."""
        self.gateway.table(FOODS_TABLE).delete().eq("id", str(food_id)).execute()


def _parse_food(row: dict[str, object]) -> FoodRecord:
    """Parse a foods row into a domain model."""
    return FoodRecord(
        id=UUID(str(row["id"])),
        name=str(row.get("name") or ""),
        price=float(row.get("price") or 0.0),
        category=str(row.get("category") or ""),
        description=str(row.get("description") or ""),
    )
