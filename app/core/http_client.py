"""Shared HTTP client helper for calling the inference provider."""
from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from app.core.errors import CredentialError, ProviderError


async def post_json(
    url: str,
    payload: Dict[str, Any],
    token: str,
    timeout: float,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Any:
    """POST a JSON payload with bearer auth and return the decoded JSON body.

    Transport failures, non-success statuses and undecodable bodies raise
    ``ProviderError``; rejected credentials raise ``CredentialError``.
    """

    headers = {
        # Authorization header uses the token passed in by the adapter.
        "Authorization": f"Bearer {token}",
        "Content-Type": "application/json",
    }

    try:
        async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
            response = await client.post(url, headers=headers, json=payload)
    except httpx.HTTPError as exc:
        raise ProviderError(f"Inference request failed: {exc!r}") from exc

    if response.status_code in (401, 403):
        raise CredentialError(f"Inference API rejected the access token ({response.status_code})")
    if not response.is_success:
        raise ProviderError(
            f"Inference API error {response.status_code}: {response.text}",
            status_code=response.status_code,
        )

    try:
        return response.json()
    except ValueError as exc:
        raise ProviderError("Invalid JSON response from inference API", status_code=response.status_code) from exc
