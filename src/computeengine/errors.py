from __future__ import annotations

from dataclasses import dataclass


class ComputeError(Exception):
    """Base error type for the computeengine SDK."""


class ConfigurationError(ComputeError):
    """Raised when configuration is missing, cannot be loaded, or fails validation."""


class TransportError(ComputeError):
    """Raised when a remote call to the provider fails."""


class AuthError(TransportError):
    """Raised when an access token cannot be obtained."""


class ParseError(ComputeError):
    """Reserved for malformed resource references.

    Self-link parsing is permissive and returns a best-effort string instead of raising this.
    """


@dataclass(slots=True)
class APIError(TransportError):
    """Represents a non-success Compute API response."""

    status_code: int
    message: str
    body: str | None = None

    def __str__(self) -> str:
        if self.body:
            return f"HTTP {self.status_code}: {self.message} ({self.body})"
        return f"HTTP {self.status_code}: {self.message}"
