from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, SecretStr, field_serializer

from computeengine.constants import DEFAULT_BASE_URL, DEFAULT_TOKEN_URL


class ProfileConfig(BaseModel):
    """Resolved profile configuration used for API requests."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    project_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("project_id", "projectId", "project"),
    )
    access_token: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("access_token", "accessToken"),
    )
    refresh_token: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("refresh_token", "refreshToken"),
    )
    client_id: str | None = Field(default=None, validation_alias=AliasChoices("client_id", "clientId"))
    client_secret: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("client_secret", "clientSecret"),
    )
    base_url: str = Field(default=DEFAULT_BASE_URL, validation_alias=AliasChoices("base_url", "baseUrl"))
    token_url: str = Field(default=DEFAULT_TOKEN_URL, validation_alias=AliasChoices("token_url", "tokenUrl"))
    request_timeout_seconds: float = Field(
        default=30.0,
        validation_alias=AliasChoices("request_timeout_seconds", "requestTimeoutSeconds"),
    )
    verify_ssl: bool = Field(default=True, validation_alias=AliasChoices("verify_ssl", "verifySsl"))

    @field_serializer("access_token", "refresh_token", "client_secret", when_used="json-unless-none")
    def _reveal_secret(self, value: SecretStr) -> str:
        # Persisted config files must round-trip real secret values.
        return value.get_secret_value()


class SDKConfig(BaseModel):
    """Root configuration model holding named profiles."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    version: str = "1"
    default_profile: str | None = Field(
        default=None,
        validation_alias=AliasChoices("default_profile", "defaultProfile"),
    )
    profiles: dict[str, ProfileConfig] = Field(default_factory=dict)


class ResolvedConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    source: str
    path: Path | None = None
    data: SDKConfig


ConfigInput = SDKConfig | dict[str, Any]
