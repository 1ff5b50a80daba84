"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from food_catalog.adapters.supabase_food_repository import SupabaseFoodRepository
from food_catalog.adapters.supabase_gateway import SupabaseGateway
from food_catalog.config import Settings
from food_catalog.services.foods import FoodService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    gateway: SupabaseGateway
    food_service: FoodService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container.

    Settings validation fails here when the store URL or key is missing, so
    the process never starts without them. The store client itself is only
    created on the first request.
    """
    resolved_settings = settings or Settings()
    gateway = SupabaseGateway(
        url=resolved_settings.supabase_url,
        service_key=resolved_settings.supabase_service_key,
        schema=resolved_settings.supabase_schema,
    )
    food_service = FoodService(SupabaseFoodRepository(gateway))

    async def close_resources() -> None:
        gateway.close()

    return AppContainer(
        settings=resolved_settings,
        gateway=gateway,
        food_service=food_service,
        close_resources=close_resources,
    )
