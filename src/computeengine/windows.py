"""Access configuration for Windows build agents.

A ``WindowsConfiguration`` only stores credential ids. The secrets themselves are looked up
through a ``CredentialProvider`` supplied by the caller.
"""

from __future__ import annotations

import logging
from typing import Protocol

from pydantic import BaseModel, ConfigDict, SecretStr

from computeengine.errors import ConfigurationError

logger = logging.getLogger(__name__)

MISSING_CREDENTIAL_MESSAGE = "A password or private key credential is required"


class UsernamePasswordCredential(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    username: str
    password: SecretStr


class SSHPrivateKeyCredential(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    username: str
    private_key: SecretStr
    passphrase: SecretStr | None = None


Credential = UsernamePasswordCredential | SSHPrivateKeyCredential


class CredentialProvider(Protocol):
    def resolve(self, credential_id: str) -> Credential | None: ...


class InMemoryCredentialProvider:
    """Credential provider backed by a dict keyed on credential id."""

    def __init__(self, credentials: list[Credential] | None = None) -> None:
        self._credentials: dict[str, Credential] = {}
        for credential in credentials or []:
            self.add(credential)

    def add(self, credential: Credential) -> None:
        self._credentials[credential.id] = credential

    def resolve(self, credential_id: str) -> Credential | None:
        return self._credentials.get(credential_id)


class ValidationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    ok: bool
    message: str | None = None

    @classmethod
    def success(cls) -> ValidationResult:
        return cls(ok=True)

    @classmethod
    def error(cls, message: str) -> ValidationResult:
        return cls(ok=False, message=message)


def _blank(value: str | None) -> bool:
    return value is None or not value.strip()


def validate_windows_credentials(
    password_credentials_id: str | None,
    private_key_credentials_id: str | None,
) -> ValidationResult:
    if _blank(password_credentials_id) and _blank(private_key_credentials_id):
        return ValidationResult.error(MISSING_CREDENTIAL_MESSAGE)
    return ValidationResult.success()


class WindowsConfiguration(BaseModel):
    model_config = ConfigDict(frozen=True)

    password_credentials_id: str | None = None
    private_key_credentials_id: str | None = None

    def password(self, provider: CredentialProvider) -> str | None:
        """Plain-text password of the configured username/password credential, if any."""

        if _blank(self.password_credentials_id):
            return None
        credential = provider.resolve(self.password_credentials_id)
        if not isinstance(credential, UsernamePasswordCredential):
            logger.debug("no username/password credential with id %s", self.password_credentials_id)
            return None
        return credential.password.get_secret_value()

    def private_key_credentials(self, provider: CredentialProvider) -> SSHPrivateKeyCredential | None:
        if _blank(self.private_key_credentials_id):
            return None
        credential = provider.resolve(self.private_key_credentials_id)
        if not isinstance(credential, SSHPrivateKeyCredential):
            logger.debug("no SSH private key credential with id %s", self.private_key_credentials_id)
            return None
        return credential


def windows_configuration(
    password_credentials_id: str | None = None,
    private_key_credentials_id: str | None = None,
) -> WindowsConfiguration:
    """Build a validated ``WindowsConfiguration``; blank ids are stored as ``None``."""

    result = validate_windows_credentials(password_credentials_id, private_key_credentials_id)
    if not result.ok:
        raise ConfigurationError(result.message)
    return WindowsConfiguration(
        password_credentials_id=None if _blank(password_credentials_id) else password_credentials_id,
        private_key_credentials_id=None if _blank(private_key_credentials_id) else private_key_credentials_id,
    )
