from __future__ import annotations

import asyncio
from collections.abc import Coroutine
from typing import Any, TypeVar

from computeengine.client.async_client import AsyncComputeClient
from computeengine.models import Region, Zone

T = TypeVar("T")


class ComputeClient:
    """Blocking facade over ``AsyncComputeClient``.

    Every call runs on one private event loop, so it cannot be used from inside a running
    loop; use ``aregions``/``azones`` there instead.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        self._loop = asyncio.Runner()
        self._closed = False
        self._async = AsyncComputeClient(*args, **kwargs)
        self.aregions = self._async.regions
        self.azones = self._async.zones

    @property
    def project_id(self) -> str | None:
        return self._async.project_id

    @property
    def profile_name(self) -> str:
        return self._async.profile_name

    def _run(self, call: Coroutine[Any, Any, T]) -> T:
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            if self._closed:
                call.close()
                raise RuntimeError("client is closed") from None
            return self._loop.run(call)

        call.close()
        raise RuntimeError("sync client methods cannot run inside an active event loop")

    def list_available_regions(self, project_id: str | None = None) -> list[Region]:
        return self._run(self._async.regions.list_available(project_id))

    def list_available_zones(self, project_id: str | None = None, *, region: str | None = None) -> list[Zone]:
        return self._run(self._async.zones.list_available(project_id, region=region))

    def authenticate(self, force_refresh: bool = False) -> str:
        return self._run(self._async.authenticate(force_refresh))

    def close(self) -> None:
        if self._closed:
            return
        try:
            self._run(self._async.aclose())
        finally:
            self._loop.close()
            self._closed = True

    def __enter__(self) -> ComputeClient:
        return self

    def __exit__(self, exc_type: object, exc: object, tb: object) -> None:
        self.close()
