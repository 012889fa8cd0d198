from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ComputeModel(BaseModel):
    """Base model with permissive extra handling for upstream compatibility."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class DeprecationStatus(ComputeModel):
    state: str | None = None
    replacement: str | None = None
    deprecated: str | None = None
    obsolete: str | None = None
    deleted: str | None = None


class ResourceSummary(BaseModel):
    """Immutable short-name view of a provider resource."""

    model_config = ConfigDict(frozen=True)

    name: str
    deprecation: str | None = None
    status: str | None = None

    @property
    def deprecated(self) -> bool:
        return bool(self.deprecation)


def deprecation_state(status: DeprecationStatus | None) -> str | None:
    """First non-empty marker on the status, or None when every marker is blank."""

    if status is None:
        return None
    for marker in (status.state, status.deprecated, status.obsolete, status.deleted):
        if marker:
            return marker
    return None
