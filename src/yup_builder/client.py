"""
HTTP client for the schema builder API.

Talks to the ``/api/generate`` endpoint served by the SSE app, so scripts
and other services can generate schemas without running the browser UI.
"""

from typing import Any, Sequence

import httpx

from yup_builder.config import get_config
from yup_builder.models.field_definitions import SchemaField


def _serialize(fields: Sequence[SchemaField | dict[str, Any]]) -> list[dict[str, Any]]:
    return [
        f.model_dump(by_alias=True, mode="json") if isinstance(f, SchemaField) else f
        for f in fields
    ]


async def fetch_schema(
    fields: Sequence[SchemaField | dict[str, Any]],
    base_url: str | None = None,
    client: httpx.AsyncClient | None = None,
    timeout: float = 10.0,
) -> dict[str, Any]:
    """
    Request schema generation from a running server.

    Args:
        fields: Field records or JSON-style dicts.
        base_url: Server URL. Defaults to ``config.api_url``.
        client: Optional client to reuse (its own base URL is then used when
            ``base_url`` is not given).
        timeout: Request timeout in seconds for a client created here.

    Returns:
        ``{"schema": ..., "warnings": [...]}`` as returned by the server.

    Raises:
        httpx.HTTPStatusError: If the server rejects the request.
    """
    payload = {"fields": _serialize(fields)}

    if client is not None:
        url = f"{base_url}/api/generate" if base_url else "/api/generate"
        response = await client.post(url, json=payload)
        response.raise_for_status()
        return response.json()

    base_url = base_url or get_config().api_url
    async with httpx.AsyncClient(base_url=base_url, timeout=timeout) as owned:
        response = await owned.post("/api/generate", json=payload)
        response.raise_for_status()
        return response.json()
