"""Locate, decode and persist SDK configuration files."""

from __future__ import annotations

import json
import logging
import os
import tomllib
from collections.abc import Callable
from pathlib import Path
from typing import Any

import tomli_w
import yaml
from pydantic import ValidationError

from computeengine.config.models import ConfigInput, ResolvedConfig, SDKConfig
from computeengine.constants import DEFAULT_CONFIG_DIR
from computeengine.errors import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_PATH_ENVS = ("COMPUTEENGINE_CONFIG", "COMPUTEENGINE_CONFIG_FILE")

# Extension-less files are treated as YAML.
_DECODERS: dict[str, Callable[[str], Any]] = {
    "": yaml.safe_load,
    ".yml": yaml.safe_load,
    ".yaml": yaml.safe_load,
    ".json": json.loads,
    ".toml": tomllib.loads,
}
_ENCODERS: dict[str, Callable[[dict[str, Any]], str]] = {
    "": lambda payload: yaml.safe_dump(payload, sort_keys=False),
    ".yml": lambda payload: yaml.safe_dump(payload, sort_keys=False),
    ".yaml": lambda payload: yaml.safe_dump(payload, sort_keys=False),
    ".json": lambda payload: json.dumps(payload, indent=2) + "\n",
    ".toml": tomli_w.dumps,
}


def default_config_candidates() -> list[Path]:
    base = Path(DEFAULT_CONFIG_DIR).expanduser()
    return [base / f"config{suffix}" for suffix in (".yml", ".yaml", ".toml", ".json")]


def _codec(table: dict[str, Callable[..., Any]], path: Path) -> Callable[..., Any]:
    suffix = path.suffix.lower()
    if suffix not in table:
        raise ConfigurationError(f"unsupported config extension: {suffix}")
    return table[suffix]


def _read(path: Path) -> SDKConfig:
    decode = _codec(_DECODERS, path)
    try:
        payload = decode(path.read_text(encoding="utf-8")) or {}
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"failed to parse config file '{path}': {exc}") from exc

    if not isinstance(payload, dict):
        raise ConfigurationError(f"config file '{path}' must contain a mapping")

    try:
        return SDKConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigurationError(f"invalid config structure for '{path}': {exc}") from exc


def _locate(config_path: str | Path | None) -> tuple[str, Path] | None:
    if config_path is not None:
        return "explicit-path", Path(config_path)

    for env_name in CONFIG_PATH_ENVS:
        value = os.getenv(env_name)
        if value:
            return f"env:{env_name}", Path(value)

    for candidate in default_config_candidates():
        if candidate.exists():
            return "default-path", candidate
    return None


def load_config(config: ConfigInput | None = None, *, config_path: str | Path | None = None) -> ResolvedConfig:
    """Resolve configuration for a client.

    An in-memory ``config`` wins; otherwise the first of ``config_path``, the
    ``COMPUTEENGINE_CONFIG`` variable and the default config directory is read. A named file
    that does not exist yields an empty configuration.
    """

    if isinstance(config, SDKConfig):
        return ResolvedConfig(source="runtime-model", data=config)
    if config is not None:
        try:
            return ResolvedConfig(source="runtime-dict", data=SDKConfig.model_validate(config))
        except ValidationError as exc:
            raise ConfigurationError(f"invalid runtime config: {exc}") from exc

    located = _locate(config_path)
    if located is None:
        return ResolvedConfig(source="default-empty", data=SDKConfig())

    source, path = located
    path = path.expanduser().resolve()
    if not path.exists():
        return ResolvedConfig(source=f"{source}:missing", path=path, data=SDKConfig())

    logger.debug("reading config from %s (%s)", path, source)
    return ResolvedConfig(source=source, path=path, data=_read(path))


def save_config(config: SDKConfig, *, path: Path | None = None) -> Path:
    """Write ``config`` in the format implied by the file extension, readable by the owner only."""

    target = (path or default_config_candidates()[0]).expanduser()
    encode = _codec(_ENCODERS, target)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(encode(config.model_dump(mode="json", exclude_none=True)), encoding="utf-8")
    target.chmod(0o600)
    return target.resolve()
