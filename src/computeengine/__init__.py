from computeengine.client import AsyncComputeClient, ComputeClient, connect
from computeengine.config import ProfileConfig, SDKConfig
from computeengine.errors import (
    APIError,
    AuthError,
    ComputeError,
    ConfigurationError,
    ParseError,
    TransportError,
)
from computeengine.models import Region, Zone
from computeengine.selflink import region_from_self_link, short_name_from_reference, zone_from_self_link
from computeengine.windows import (
    CredentialProvider,
    InMemoryCredentialProvider,
    SSHPrivateKeyCredential,
    UsernamePasswordCredential,
    ValidationResult,
    WindowsConfiguration,
    validate_windows_credentials,
    windows_configuration,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "APIError",
    "AsyncComputeClient",
    "AuthError",
    "ComputeClient",
    "ComputeError",
    "ConfigurationError",
    "CredentialProvider",
    "InMemoryCredentialProvider",
    "ParseError",
    "ProfileConfig",
    "Region",
    "SDKConfig",
    "SSHPrivateKeyCredential",
    "TransportError",
    "UsernamePasswordCredential",
    "ValidationResult",
    "WindowsConfiguration",
    "Zone",
    "connect",
    "region_from_self_link",
    "short_name_from_reference",
    "validate_windows_credentials",
    "windows_configuration",
    "zone_from_self_link",
]
