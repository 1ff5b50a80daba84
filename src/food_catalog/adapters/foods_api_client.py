"""HTTP client for the food catalog REST API."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class FoodsApiError(Exception):
    """Raised when the foods API answers with a non-success response."""

    def __init__(self, status_code: int, payload: object) -> None:
        self.status_code = status_code
        self.payload = payload if isinstance(payload, dict) else {}
        self.error = self.payload.get("error")
        super().__init__(f"Foods API error {status_code}: {self.error or payload}")


class FoodsApiClient(Protocol):
    """Interface for foods API interactions."""

    async def list_foods(self) -> list[dict[str, object]]:
        """Return every food record."""

    async def create_food(self, payload: dict[str, object]) -> dict[str, object]:
        """Create a food record and return the created record."""

    async def update_food(
        self, food_id: str, payload: dict[str, object]
    ) -> dict[str, object]:
        """Update a food record and return the echoed fields."""

    async def delete_food(self, food_id: str) -> dict[str, object]:
        """Delete a food record."""


@dataclass
class HttpxFoodsApiClient(FoodsApiClient):
    """Foods API client implemented with httpx."""

    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, base_url: str) -> "HttpxFoodsApiClient":
        """Create a foods API client with a managed httpx session."""
        return cls(base_url=base_url.rstrip("/"), http_client=httpx.AsyncClient())

    async def list_foods(self) -> list[dict[str, object]]:
        """Fetch the full food list."""
        response = await self.http_client.get(f"{self.base_url}/foods", timeout=10)
        data = _json_or_raise(response)
        if not isinstance(data, list):
            raise FoodsApiError(response.status_code, data)
        return data

    async def create_food(self, payload: dict[str, object]) -> dict[str, object]:
        """Create a food record."""
        response = await self.http_client.post(
            f"{self.base_url}/foods", json=payload, timeout=10
        )
        return _json_or_raise(response)

    async def update_food(
        self, food_id: str, payload: dict[str, object]
    ) -> dict[str, object]:
        """Update a food record."""
        response = await self.http_client.put(
            f"{self.base_url}/foods/{food_id}", json=payload, timeout=10
        )
        return _json_or_raise(response)

    async def delete_food(self, food_id: str) -> dict[str, object]:
        """Delete a food record."""
        response = await self.http_client.delete(
            f"{self.base_url}/foods/{food_id}", timeout=10
        )
        return _json_or_raise(response)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def _json_or_raise(response: httpx.Response):  # type: ignore[no-untyped-def]
    """Return the decoded body, raising FoodsApiError on failure statuses."""
    try:
        data = response.json()
    except ValueError:
        data = {}
    if not response.is_success:
        raise FoodsApiError(response.status_code, data)
    return data
