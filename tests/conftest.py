"""Shared test fixtures."""

from dataclasses import dataclass, field
from uuid import UUID, uuid4

import pytest

from food_catalog.adapters.foods_api_client import FoodsApiClient
from food_catalog.adapters.supabase_gateway import SupabaseGateway
from food_catalog.config import Settings
from food_catalog.containers import AppContainer
from food_catalog.domain.foods import FoodRecord
from food_catalog.services.foods import FoodRepository, FoodService


@dataclass
class InMemoryFoodRepository(FoodRepository):
    """In-memory food repository for tests."""

    rows: dict[UUID, dict[str, object]] = field(default_factory=dict)

    def list_foods(self) -> list[FoodRecord]:
        return [_record(food_id, row) for food_id, row in self.rows.items()]

    def create_food(self, payload: dict[str, object]) -> FoodRecord:
        food_id = uuid4()
        self.rows[food_id] = dict(payload)
        return _record(food_id, self.rows[food_id])

    def update_food(self, food_id: UUID, payload: dict[str, object]) -> None:
        if food_id in self.rows:
            self.rows[food_id].update(payload)

    def delete_food(self, food_id: UUID) -> None:
        self.rows.pop(food_id, None)


@dataclass
class FailingFoodRepository(FoodRepository):
    """Repository whose every store call raises."""

    message: str = "connection refused"

    def list_foods(self) -> list[FoodRecord]:
        raise RuntimeError(self.message)

    def create_food(self, payload: dict[str, object]) -> FoodRecord:
        raise RuntimeError(self.message)

    def update_food(self, food_id: UUID, payload: dict[str, object]) -> None:
        raise RuntimeError(self.message)

    def delete_food(self, food_id: UUID) -> None:
        raise RuntimeError(self.message)


@dataclass
class FakeFoodsApiClient(FoodsApiClient):
    """Fake foods API that keeps records in memory and records calls."""

    foods: dict[str, dict[str, object]] = field(default_factory=dict)
    calls: list[str] = field(default_factory=list)
    error: Exception | None = None

    def add(self, **fields: object) -> dict[str, object]:
        food = {"_id": str(uuid4()), **fields}
        self.foods[food["_id"]] = food
        return food

    async def list_foods(self) -> list[dict[str, object]]:
        self._record("list")
        return [dict(food) for food in self.foods.values()]

    async def create_food(self, payload: dict[str, object]) -> dict[str, object]:
        self._record("create")
        food = {"_id": str(uuid4()), **payload}
        self.foods[food["_id"]] = food
        return dict(food)

    async def update_food(
        self, food_id: str, payload: dict[str, object]
    ) -> dict[str, object]:
        self._record(f"update:{food_id}")
        if food_id in self.foods:
            self.foods[food_id].update(payload)
        return {"_id": food_id, **payload}

    async def delete_food(self, food_id: str) -> dict[str, object]:
        self._record(f"delete:{food_id}")
        self.foods.pop(food_id, None)
        return {"message": "Food deleted"}

    def _record(self, call: str) -> None:
        self.calls.append(call)
        if self.error is not None:
            raise self.error


def _record(food_id: UUID, row: dict[str, object]) -> FoodRecord:
    return FoodRecord(
        id=food_id,
        name=str(row["name"]),
        price=float(row["price"]),
        category=str(row["category"]),
        description=str(row["description"]),
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="service-key",
    )


@pytest.fixture
def food_repository() -> InMemoryFoodRepository:
    return InMemoryFoodRepository()


@pytest.fixture
def failing_repository() -> FailingFoodRepository:
    return FailingFoodRepository()


@pytest.fixture
def foods_api() -> FakeFoodsApiClient:
    return FakeFoodsApiClient()


def _offline_client_factory(  # type: ignore[no-untyped-def]
    url: str, key: str, options=None
):
    raise AssertionError("tests use in-memory repositories, not Supabase")


def _make_container(settings: Settings, repository: FoodRepository) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        gateway=SupabaseGateway(
            url=settings.supabase_url,
            service_key=settings.supabase_service_key,
            client_factory=_offline_client_factory,
        ),
        food_service=FoodService(repository),
        close_resources=close_resources,
    )


@pytest.fixture
def container(
    settings: Settings, food_repository: InMemoryFoodRepository
) -> AppContainer:
    return _make_container(settings, food_repository)


@pytest.fixture
def make_container(settings: Settings):  # type: ignore[no-untyped-def]
    """Build a container around an arbitrary repository."""

    def factory(repository: FoodRepository) -> AppContainer:
        return _make_container(settings, repository)

    return factory
