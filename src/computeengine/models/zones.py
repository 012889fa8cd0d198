from __future__ import annotations

from pydantic import Field

from computeengine.models.common import ComputeModel, DeprecationStatus, ResourceSummary


class ZoneItem(ComputeModel):
    name: str = Field(min_length=1)
    description: str | None = None
    status: str | None = None
    region: str | None = None
    deprecated: DeprecationStatus | None = None
    selfLink: str | None = None


class ZoneList(ComputeModel):
    items: list[ZoneItem] = Field(default_factory=list)
    nextPageToken: str | None = None


class Zone(ResourceSummary):
    region: str | None = None
