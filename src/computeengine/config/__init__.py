"""Profile-based configuration: file discovery, validation and persistence."""

from computeengine.config.loader import default_config_candidates, load_config, save_config
from computeengine.config.models import ConfigInput, ProfileConfig, ResolvedConfig, SDKConfig

__all__ = [
    "ConfigInput",
    "ProfileConfig",
    "ResolvedConfig",
    "SDKConfig",
    "default_config_candidates",
    "load_config",
    "save_config",
]
