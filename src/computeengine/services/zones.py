from __future__ import annotations

import logging

from computeengine.models.common import deprecation_state
from computeengine.models.zones import Zone, ZoneItem, ZoneList
from computeengine.selflink import region_from_self_link
from computeengine.services.base import ServiceBase, available

logger = logging.getLogger(__name__)


def _summary(item: ZoneItem) -> Zone:
    return Zone(
        name=item.name,
        deprecation=deprecation_state(item.deprecated),
        status=item.status,
        region=region_from_self_link(item.region) if item.region else None,
    )


class ZonesService(ServiceBase):
    """Zone API operations."""

    async def list(self, project_id: str | None = None, *, region: str | None = None) -> list[Zone]:
        project = self._project(project_id)
        response = await self._fetch(ZoneList, project, "zones")
        if response.nextPageToken:
            logger.debug("zone listing for %s returned a nextPageToken; only the first page is used", project)

        zones = [_summary(item) for item in response.items]
        if region:
            wanted = region_from_self_link(region)
            zones = [zone for zone in zones if zone.region == wanted]
        return zones

    async def list_available(self, project_id: str | None = None, *, region: str | None = None) -> list[Zone]:
        """Return non-deprecated zones sorted by name, optionally restricted to one region."""

        return available(await self.list(project_id, region=region))

    async def get(self, name: str, *, project_id: str | None = None) -> Zone:
        project = self._project(project_id)
        return _summary(await self._fetch(ZoneItem, project, "zones", name))
