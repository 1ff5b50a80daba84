"""Client-side catalog state: list, search, form and deletes."""

import logging
import math
from dataclasses import dataclass, field
from enum import Enum

import httpx

from food_catalog.adapters.foods_api_client import FoodsApiClient, FoodsApiError
from food_catalog.domain.foods import FOOD_FIELDS, FoodRecord
from food_catalog.services.foods import CONFIGURE_HINT, NOT_CONFIGURED_ERROR

logger = logging.getLogger(__name__)

CONNECTION_ERROR = "Connection error. Please check your database configuration."


class FormState(Enum):
    """States of the create/edit form."""

    IDLE = "idle"
    COMPOSING = "composing"
    EDITING = "editing"
    SUBMITTING = "submitting"


class ViewMode(Enum):
    """How the food list is rendered."""

    LIST = "list"
    GRID = "grid"


class NotificationKind(Enum):
    """Kinds of transient notifications."""

    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Notification:
    """A transient message shown to the user."""

    kind: NotificationKind
    message: str
    duration_seconds: float = 5.0


@dataclass
class FoodForm:
    """Text values bound to the form inputs."""

    name: str = ""
    price: str = ""
    category: str = ""
    description: str = ""

    @classmethod
    def from_record(cls, food: FoodRecord) -> "FoodForm":
        """Load a record into the form."""
        return cls(
            name=food.name,
            price=f"{food.price:g}",
            category=food.category,
            description=food.description,
        )

    def is_empty(self) -> bool:
        return not any((self.name, self.price, self.category, self.description))

    def is_complete(self) -> bool:
        return all(
            value.strip()
            for value in (self.name, self.price, self.category, self.description)
        )

    def to_payload(self) -> dict[str, object]:
        """Return the request body; raises ValueError for a non-numeric price."""
        price = float(self.price)
        if not math.isfinite(price):
            raise ValueError(f"Price is not finite: {self.price}")
        return {
            "name": self.name,
            "price": price,
            "category": self.category,
            "description": self.description,
        }


@dataclass
class CatalogView:
    """State machine behind the catalog page.

    The list is always re-fetched after a successful mutation. Search and
    view mode only touch the in-memory list.
    """

    api: FoodsApiClient
    foods: list[FoodRecord] = field(default_factory=list)
    form: FoodForm = field(default_factory=FoodForm)
    form_state: FormState = FormState.IDLE
    editing: FoodRecord | None = None
    search_term: str = ""
    view_mode: ViewMode = ViewMode.LIST
    loading: bool = False
    deleting_ids: set[str] = field(default_factory=set)
    notifications: list[Notification] = field(default_factory=list)

    @property
    def filtered_foods(self) -> list[FoodRecord]:
        """Foods matching the search term, in fetch order."""
        if not self.search_term:
            return list(self.foods)
        return [food for food in self.foods if food.matches(self.search_term)]

    @property
    def item_count_label(self) -> str:
        count = len(self.filtered_foods)
        return f"{count} {'item' if count == 1 else 'items'}"

    @property
    def submitting(self) -> bool:
        return self.form_state is FormState.SUBMITTING

    def set_search(self, term: str) -> None:
        self.search_term = term

    def set_view_mode(self, mode: ViewMode) -> None:
        self.view_mode = mode

    def is_busy(self, food_id: str) -> bool:
        """Return true when row controls for the food should be disabled."""
        return self.submitting or food_id in self.deleting_ids

    def update_field(self, name: str, value: str) -> None:
        """Set a form field; ignored while a submission is in flight."""
        if self.submitting:
            return
        if name not in FOOD_FIELDS:
            raise ValueError(f"Unknown form field: {name}")
        setattr(self.form, name, value)
        if self.editing is not None:
            self.form_state = FormState.EDITING
        elif self.form.is_empty():
            self.form_state = FormState.IDLE
        else:
            self.form_state = FormState.COMPOSING

    def select(self, food: FoodRecord) -> None:
        """Load a record into the form for editing."""
        if self.is_busy(str(food.id)):
            return
        self.editing = food
        self.form = FoodForm.from_record(food)
        self.form_state = FormState.EDITING

    def cancel_edit(self) -> None:
        if self.submitting:
            return
        self._reset_form()

    def dismiss(self, notification: Notification) -> None:
        if notification in self.notifications:
            self.notifications.remove(notification)

    async def load_foods(self) -> None:
        """Replace the in-memory list with a fresh fetch."""
        self.loading = True
        try:
            rows = await self.api.list_foods()
            self.foods = [FoodRecord.from_json(row) for row in rows]
        except FoodsApiError as exc:
            logger.warning("Failed to load foods: %s", exc)
            self.foods = []
            if exc.error == NOT_CONFIGURED_ERROR:
                self._notify(NotificationKind.ERROR, CONFIGURE_HINT)
            else:
                self._notify(NotificationKind.ERROR, "Failed to load foods")
        except httpx.HTTPError as exc:
            logger.warning("Error loading foods: %s", exc)
            self.foods = []
            self._notify(NotificationKind.ERROR, CONNECTION_ERROR)
        finally:
            self.loading = False

    async def submit(self) -> bool:
        """Create or update from the form; returns true on success."""
        if self.submitting:
            return False
        if not self.form.is_complete():
            self._notify(NotificationKind.WARNING, "Please fill in all fields")
            return False
        try:
            payload = self.form.to_payload()
        except ValueError:
            self._notify(NotificationKind.WARNING, "Price must be a number")
            return False

        previous_state = self.form_state
        editing = self.editing
        self.form_state = FormState.SUBMITTING
        try:
            if editing is not None:
                await self.api.update_food(str(editing.id), payload)
            else:
                await self.api.create_food(payload)
        except FoodsApiError as exc:
            logger.warning("Failed to save food: %s", exc)
            self.form_state = previous_state
            if exc.error == NOT_CONFIGURED_ERROR:
                self._notify(NotificationKind.ERROR, CONFIGURE_HINT)
            else:
                self._notify(NotificationKind.ERROR, "Failed to save food")
            return False
        except httpx.HTTPError as exc:
            logger.warning("Error saving food: %s", exc)
            self.form_state = previous_state
            self._notify(NotificationKind.ERROR, CONNECTION_ERROR)
            return False

        self._notify(
            NotificationKind.SUCCESS,
            "Food updated successfully!"
            if editing is not None
            else "Food added successfully!",
        )
        self._reset_form()
        await self.load_foods()
        return True

    async def delete(self, food_id: str) -> bool:
        """Delete a record, marking only that row busy while in flight."""
        if food_id in self.deleting_ids:
            return False
        self.deleting_ids.add(food_id)
        try:
            await self.api.delete_food(food_id)
        except FoodsApiError as exc:
            logger.warning("Failed to delete food: %s", exc)
            self._notify(NotificationKind.ERROR, "Failed to delete food")
            return False
        except httpx.HTTPError as exc:
            logger.warning("Error deleting food: %s", exc)
            self._notify(NotificationKind.ERROR, CONNECTION_ERROR)
            return False
        finally:
            self.deleting_ids.discard(food_id)

        self._notify(NotificationKind.SUCCESS, "Food deleted successfully!")
        await self.load_foods()
        return True

    def _reset_form(self) -> None:
        self.form = FoodForm()
        self.editing = None
        self.form_state = FormState.IDLE

    def _notify(self, kind: NotificationKind, message: str) -> None:
        self.notifications.append(Notification(kind=kind, message=message))
