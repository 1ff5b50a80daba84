"""Shared Supabase connection handle."""

from collections.abc import Callable
from dataclasses import dataclass, field

from supabase import Client, ClientOptions, create_client


@dataclass
class SupabaseGateway:
    """Lazily created Supabase client reused for the process lifetime."""

    url: str
    service_key: str
    schema: str = "public"
    client_factory: Callable[..., Client] = create_client
    _client: Client | None = field(default=None, init=False, repr=False)

    def client(self) -> Client:
        """Return the shared client, creating it on first use."""
        if self._client is None:
            self._client = self.client_factory(
                self.url,
                self.service_key,
                options=ClientOptions(schema=self.schema),
            )
        return self._client

    def table(self, name: str):  # type: ignore[no-untyped-def]
        """Return a query builder for a table in the configured schema."""
        return self.client().table(name)

    @property
    def connected(self) -> bool:
        """Return true once the client has been created."""
        return self._client is not None

    def close(self) -> None:
        """Drop the cached client so the next call reconnects."""
        self._client = None
