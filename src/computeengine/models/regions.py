from __future__ import annotations

from pydantic import Field

from computeengine.models.common import ComputeModel, DeprecationStatus, ResourceSummary


class RegionItem(ComputeModel):
    name: str = Field(min_length=1)
    description: str | None = None
    status: str | None = None
    zones: list[str] = Field(default_factory=list)
    deprecated: DeprecationStatus | None = None
    selfLink: str | None = None


class RegionList(ComputeModel):
    items: list[RegionItem] = Field(default_factory=list)
    nextPageToken: str | None = None


class Region(ResourceSummary):
    description: str | None = None
    zones: tuple[str, ...] = ()
