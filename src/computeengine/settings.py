from __future__ import annotations

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from computeengine.constants import DEFAULT_BASE_URL, DEFAULT_TOKEN_URL


class RuntimeSettings(BaseSettings):
    """Environment-driven runtime overrides for client/profile resolution."""

    model_config = SettingsConfigDict(
        env_prefix="COMPUTEENGINE_",
        extra="ignore",
        populate_by_name=True,
        case_sensitive=False,
    )

    profile: str | None = Field(default=None, validation_alias=AliasChoices("COMPUTEENGINE_PROFILE"))

    project_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "COMPUTEENGINE_PROJECT_ID",
            "COMPUTEENGINE_PROJECT",
            "GOOGLE_CLOUD_PROJECT",
            "CLOUDSDK_CORE_PROJECT",
        ),
    )

    client_id: str | None = Field(default=None, validation_alias=AliasChoices("COMPUTEENGINE_CLIENT_ID"))
    client_secret: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("COMPUTEENGINE_CLIENT_SECRET"),
    )
    refresh_token: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("COMPUTEENGINE_REFRESH_TOKEN"),
    )
    access_token: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("COMPUTEENGINE_ACCESS_TOKEN", "CLOUDSDK_AUTH_ACCESS_TOKEN"),
    )

    base_url: str | None = Field(default=None, validation_alias=AliasChoices("COMPUTEENGINE_BASE_URL"))
    token_url: str | None = Field(default=None, validation_alias=AliasChoices("COMPUTEENGINE_TOKEN_URL"))

    request_timeout_seconds: float | None = Field(
        default=None,
        validation_alias=AliasChoices("COMPUTEENGINE_REQUEST_TIMEOUT_SECONDS"),
    )
    verify_ssl: bool | None = Field(default=None, validation_alias=AliasChoices("COMPUTEENGINE_VERIFY_SSL"))

    @property
    def fallback_base_url(self) -> str:
        return self.base_url or DEFAULT_BASE_URL

    @property
    def fallback_token_url(self) -> str:
        return self.token_url or DEFAULT_TOKEN_URL
