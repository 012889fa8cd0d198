"""Single-shot JSON transport for Compute API calls."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

import httpx

from computeengine.errors import APIError, AuthError, TransportError

logger = logging.getLogger(__name__)

TokenProvider = Callable[[], Awaitable[str]]


def _decode(response: httpx.Response) -> dict[str, Any]:
    body = response.text.strip()
    if response.status_code == 401:
        raise AuthError(f"HTTP 401: credentials were rejected ({body or 'no body'})")
    if response.status_code >= 400:
        raise APIError(status_code=response.status_code, message=response.reason_phrase, body=body or None)
    if not body:
        return {}

    try:
        decoded = response.json()
    except ValueError as exc:
        raise TransportError(f"response from {response.request.url} was not valid JSON") from exc
    if not isinstance(decoded, dict):
        raise TransportError(f"response from {response.request.url} must be a JSON object")
    return decoded


class ComputeTransport:
    """Sends exactly one request per call and never retries.

    Retry and backoff policy belongs to whoever drives the client; every failure is surfaced
    as a ``TransportError`` subclass.
    """

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float,
        verify_tls: bool,
        token_provider: TokenProvider | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._token_provider = token_provider
        self._owns_http_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=httpx.Timeout(timeout), verify=verify_tls)

    async def aclose(self) -> None:
        if self._owns_http_client:
            await self._client.aclose()

    def url_for(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    async def get_json(self, path: str) -> dict[str, Any]:
        if self._token_provider is None:
            raise AuthError("authenticated request requires a token provider")
        token = await self._token_provider()
        return await self._send("GET", self.url_for(path), headers={"Authorization": f"Bearer {token}"})

    async def post_form(self, url: str, form: Mapping[str, str]) -> dict[str, Any]:
        return await self._send("POST", url, data=dict(form))

    async def _send(self, method: str, url: str, **kwargs: Any) -> dict[str, Any]:
        headers = {"Accept": "application/json", **kwargs.pop("headers", {})}
        try:
            response = await self._client.request(method, url, headers=headers, **kwargs)
        except httpx.HTTPError as exc:
            raise TransportError(f"{method} {url} failed: {exc}") from exc

        logger.debug("%s %s -> %d", method, url, response.status_code)
        return _decode(response)
