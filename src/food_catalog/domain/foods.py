"""Domain models for the food catalog."""

from dataclasses import dataclass
from uuid import UUID

FOOD_FIELDS = ("name", "price", "category", "description")


@dataclass(frozen=True)
class FoodRecord:
    """Represents a food entry stored in the catalog."""

    id: UUID
    name: str
    price: float
    category: str
    description: str

    @classmethod
    def from_json(cls, data: dict[str, object]) -> "FoodRecord":
        """Build a record from its wire representation."""
        return cls(
            id=UUID(str(data["_id"])),
            name=str(data.get("name", "")),
            price=float(data.get("price", 0.0)),
            category=str(data.get("category", "")),
            description=str(data.get("description", "")),
        )

    def to_json(self) -> dict[str, object]:
        """Return the wire representation, keyed by ``_id``."""
        return {
            "_id": str(self.id),
            "name": self.name,
            "price": self.price,
            "category": self.category,
            "description": self.description,
        }

    def matches(self, term: str) -> bool:
        """Return true when name, category or description contains the term."""
        needle = term.lower()
        return (
            needle in self.name.lower()
            or needle in self.category.lower()
            or needle in self.description.lower()
        )
