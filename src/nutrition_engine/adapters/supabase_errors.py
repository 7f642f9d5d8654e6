"""Translation of Supabase client failures into store errors."""

from typing import Any, Protocol

import httpx
from postgrest.exceptions import APIError


class StoreError(RuntimeError):
    """Raised when the backing store cannot serve a request."""


class Executable(Protocol):
    def execute(self) -> Any: ...


def execute_query(query: Executable, action: str) -> Any:
    """Run a built query, wrapping API and transport failures."""
    try:
        return query.execute()
    except (APIError, httpx.HTTPError) as exc:
        raise StoreError(f"Failed to {action}: {exc}") from exc
