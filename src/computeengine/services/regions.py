from __future__ import annotations

import logging

from computeengine.models.common import deprecation_state
from computeengine.models.regions import Region, RegionItem, RegionList
from computeengine.selflink import zone_from_self_link
from computeengine.services.base import ServiceBase, available

logger = logging.getLogger(__name__)


def _summary(item: RegionItem) -> Region:
    return Region(
        name=item.name,
        deprecation=deprecation_state(item.deprecated),
        status=item.status,
        description=item.description,
        zones=tuple(zone_from_self_link(zone) for zone in item.zones),
    )


class RegionsService(ServiceBase):
    """Region API operations."""

    async def list(self, project_id: str | None = None) -> list[Region]:
        """Return every region in provider order, deprecated ones included."""

        project = self._project(project_id)
        response = await self._fetch(RegionList, project, "regions")
        if response.nextPageToken:
            logger.debug("region listing for %s returned a nextPageToken; only the first page is used", project)
        return [_summary(item) for item in response.items]

    async def list_available(self, project_id: str | None = None) -> list[Region]:
        """Return non-deprecated regions sorted by name.

        One request per call. Raises ``ConfigurationError`` for an empty project before any
        request is sent; transport failures propagate unchanged.
        """

        return available(await self.list(project_id))

    async def get(self, name: str, *, project_id: str | None = None) -> Region:
        project = self._project(project_id)
        return _summary(await self._fetch(RegionItem, project, "regions", name))
