from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import datetime
from pathlib import Path
from typing import Any

import httpx
from pydantic import SecretStr, ValidationError

from computeengine.auth import is_token_expired, token_expiry
from computeengine.config import ConfigInput, ProfileConfig, SDKConfig, load_config
from computeengine.constants import DEFAULT_PROFILE
from computeengine.errors import AuthError, ConfigurationError, TransportError
from computeengine.http import ComputeTransport
from computeengine.services import RegionsService, ZonesService
from computeengine.settings import RuntimeSettings

logger = logging.getLogger(__name__)


def _reveal(secret: SecretStr | None) -> str | None:
    return secret.get_secret_value() if secret else None


class AsyncComputeClient:
    """Async Compute API client scoped to one project.

    Settings are layered: the selected config profile, then ``COMPUTEENGINE_*`` environment
    variables, then keyword arguments. The project id is fixed at construction.
    """

    def __init__(
        self,
        config: ConfigInput | None = None,
        *,
        config_path: str | Path | None = None,
        profile: str | None = None,
        project_id: str | None = None,
        access_token: str | None = None,
        refresh_token: str | None = None,
        client_id: str | None = None,
        client_secret: str | None = None,
        base_url: str | None = None,
        token_url: str | None = None,
        request_timeout_seconds: float | None = None,
        verify_ssl: bool | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        runtime = RuntimeSettings()
        self.config: SDKConfig = load_config(config, config_path=config_path).data
        self._profile_name = profile or runtime.profile or self.config.default_profile or DEFAULT_PROFILE

        base = self.config.profiles.get(self._profile_name)
        if base is None:
            if self._profile_name != DEFAULT_PROFILE:
                raise ConfigurationError(f"profile '{self._profile_name}' not found")
            base = ProfileConfig()

        explicit = {
            "project_id": project_id,
            "access_token": access_token,
            "refresh_token": refresh_token,
            "client_id": client_id,
            "client_secret": client_secret,
            "base_url": base_url,
            "token_url": token_url,
            "request_timeout_seconds": request_timeout_seconds,
            "verify_ssl": verify_ssl,
        }
        layers = (
            base.model_dump(exclude_none=True),
            runtime.model_dump(exclude_none=True, exclude={"profile"}),
            {key: value for key, value in explicit.items() if value is not None},
        )
        try:
            self.settings = ProfileConfig.model_validate({key: v for layer in layers for key, v in layer.items()})
        except ValidationError as exc:
            raise ConfigurationError(f"invalid client settings: {exc}") from exc

        self._access_token = _reveal(self.settings.access_token)
        self._access_token_expiry: datetime | None = None
        self._token_lock = asyncio.Lock()
        self._transport = ComputeTransport(
            base_url=self.settings.base_url,
            timeout=self.settings.request_timeout_seconds,
            verify_tls=self.settings.verify_ssl,
            token_provider=self.authenticate,
            http_client=http_client,
        )

        self.regions = RegionsService(self)
        self.zones = ZonesService(self)

    @property
    def profile_name(self) -> str:
        return self._profile_name

    @property
    def project_id(self) -> str | None:
        return self.settings.project_id

    @property
    def access_token(self) -> str | None:
        return self._access_token

    async def __aenter__(self) -> AsyncComputeClient:
        return self

    async def __aexit__(self, exc_type: object, exc: object, tb: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def authenticate(self, force_refresh: bool = False) -> str:
        """Return a bearer token, exchanging the refresh token when none is usable.

        A token passed in without a refresh token is used until it expires; if the API
        rejects it, the request fails with ``AuthError``.
        """

        async with self._token_lock:
            usable = self._access_token and not is_token_expired(self._access_token_expiry)
            if usable and not force_refresh:
                return self._access_token

            refresh_token = _reveal(self.settings.refresh_token)
            if not refresh_token:
                raise AuthError("refresh_token is required to authenticate")

            form = {"grant_type": "refresh_token", "refresh_token": refresh_token}
            if self.settings.client_id:
                form["client_id"] = self.settings.client_id
            client_secret = _reveal(self.settings.client_secret)
            if client_secret:
                form["client_secret"] = client_secret

            logger.debug("exchanging refresh token at %s", self.settings.token_url)
            try:
                grant = await self._transport.post_form(self.settings.token_url, form)
            except TransportError as exc:
                raise AuthError(f"authentication request failed: {exc}") from exc

            token = grant.get("access_token")
            if not isinstance(token, str) or not token:
                raise AuthError("authentication response missing access_token")

            self._access_token = token
            self._access_token_expiry = token_expiry(grant.get("expires_in"))
            return token

    async def _get_json(self, path: str) -> dict[str, Any]:
        return await self._transport.get_json(path)


@asynccontextmanager
async def connect(*args: Any, **kwargs: Any) -> AsyncIterator[AsyncComputeClient]:
    client = AsyncComputeClient(*args, **kwargs)
    try:
        yield client
    finally:
        await client.aclose()
