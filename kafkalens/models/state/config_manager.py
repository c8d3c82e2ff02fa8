"""Load connection settings from an optional YAML file plus overrides."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from kafkalens.constants.defaults import CONFIG_PATH_DEFAULT
from kafkalens.models.state.app_settings import (
    ConfigError,
    ConfigLoadError,
    ConnectionSettings,
)

logger = logging.getLogger(__name__)


class ConfigManager:
    """Reads connection defaults from YAML and merges command line values.

    The file is optional. When no path is given the default location is
    tried and silently skipped if absent; an explicit path must exist.
    """

    _KNOWN_KEYS = frozenset(ConnectionSettings.model_fields)

    @classmethod
    def load(cls, path: Path | None = None) -> dict[str, Any]:
        """Return the raw settings mapping stored in ``path``."""
        explicit = path is not None
        config_path = (path or CONFIG_PATH_DEFAULT).expanduser()
        if not config_path.exists():
            if explicit:
                raise ConfigLoadError(f"Config file not found: {config_path}")
            return {}

        try:
            with config_path.open(encoding="utf-8") as handle:
                raw = yaml.safe_load(handle) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigLoadError(f"Failed to read {config_path}: {exc}") from exc

        if not isinstance(raw, dict):
            raise ConfigLoadError(f"Config file {config_path} must contain a mapping")

        unknown = sorted(set(raw) - cls._KNOWN_KEYS)
        if unknown:
            logger.warning("Ignoring unknown config keys in %s: %s", config_path, unknown)
        logger.debug("Loaded config from %s", config_path)
        return {key: value for key, value in raw.items() if key in cls._KNOWN_KEYS}

    @classmethod
    def build_settings(
        cls, path: Path | None = None, **overrides: Any
    ) -> ConnectionSettings:
        """Build validated settings; non-None overrides win over file values."""
        values = cls.load(path)
        values.update({key: value for key, value in overrides.items() if value is not None})
        try:
            return ConnectionSettings(**values)
        except ValidationError as exc:
            raise ConfigError(f"Invalid connection settings: {exc}") from exc
