from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, TypeVar
from urllib.parse import quote

from pydantic import ValidationError

from computeengine.errors import ConfigurationError, TransportError
from computeengine.models.common import ComputeModel, ResourceSummary

logger = logging.getLogger(__name__)

SummaryT = TypeVar("SummaryT", bound=ResourceSummary)
PayloadT = TypeVar("PayloadT", bound=ComputeModel)


class ServiceBase:
    """Base type for service classes bound to a ComputeClient instance."""

    def __init__(self, client: Any) -> None:
        self._client = client

    def _project(self, project_id: str | None) -> str:
        """Resolve the project for a call, failing before any request is made."""

        project = self._client.project_id if project_id is None else project_id
        if not project or not project.strip():
            raise ConfigurationError("project_id is required")
        return project.strip()

    async def _fetch(self, payload: type[PayloadT], project: str, *segments: str) -> PayloadT:
        """GET ``projects/{project}/{segments...}`` and validate the body as ``payload``."""

        path = "/".join(quote(part, safe="") for part in ("projects", project, *segments))
        data = await self._client._get_json(path)
        try:
            return payload.model_validate(data)
        except ValidationError as exc:
            raise TransportError(f"malformed {payload.__name__} response for {path}: {exc}") from exc


def available(summaries: Iterable[SummaryT]) -> list[SummaryT]:
    """Drop deprecated entries and order the rest by name."""

    kept: list[SummaryT] = []
    for summary in summaries:
        if summary.deprecated:
            logger.debug("skipping %s: deprecation state %s", summary.name, summary.deprecation)
            continue
        kept.append(summary)
    return sorted(kept, key=lambda summary: summary.name)
