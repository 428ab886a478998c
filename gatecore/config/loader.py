# gatecore/config/loader.py
"""
Configuration Loader

Loads configuration from YAML files with code defaults as fallback.

Design principle:
- Code = truth (has all defaults)
- YAML = input parameters (optional)
- System works without YAML
"""

from __future__ import annotations

import logging
import os
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from ..core.errors import ConfigError
from .modules import ErrorsConfig, TransactionConfig, LoggingConfig
from .validator import validate_config, ConfigIssue


CONFIG_ENV_VAR = "GATECORE_CONFIG"

logger = logging.getLogger(__name__)


class GateCoreConfig:
    """
    Unified GateCore configuration.

    All fields have code defaults - YAML is optional.
    """

    def __init__(
        self,
        errors: Optional[ErrorsConfig] = None,
        transaction: Optional[TransactionConfig] = None,
        logging: Optional[LoggingConfig] = None,
    ):
        self.errors = errors or ErrorsConfig.default()
        self.transaction = transaction or TransactionConfig.default()
        self.logging = logging or LoggingConfig.default()

    @classmethod
    def default(cls) -> "GateCoreConfig":
        """Create default configuration (no YAML needed)"""
        return cls()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GateCoreConfig":
        """
        Build configuration from a plain mapping (parsed YAML).

        Unknown sections and keys are ignored.
        """
        if not isinstance(data, dict):
            raise ConfigError(
                message=f"configuration root must be a mapping, got {type(data).__name__}",
            )

        config = cls.default()
        if "errors" in data:
            config.errors = _merge_config(config.errors, data["errors"], ErrorsConfig, "errors")
        if "transaction" in data:
            config.transaction = _merge_config(
                config.transaction, data["transaction"], TransactionConfig, "transaction"
            )
        if "logging" in data:
            config.logging = _merge_config(config.logging, data["logging"], LoggingConfig, "logging")

        errors = [issue for issue in config.validate() if issue.level == "error"]
        if errors:
            raise ConfigError(
                message="; ".join(f"[{issue.path}] {issue.message}" for issue in errors),
                details={"issues": [str(issue) for issue in errors]},
            )
        for issue in config.validate():
            if issue.level == "warn":
                logger.warning("config: %s", issue)
        return config

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "GateCoreConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML file. If None, tries:
                1. $GATECORE_CONFIG
                2. ~/.gatecore/config.yml

        Returns:
            GateCoreConfig instance (code defaults when no file is found)

        Raises:
            ConfigError: the file exists but is not valid YAML or holds invalid values
        """
        yaml_data = _load_yaml(config_path)
        if not yaml_data:
            return cls.default()
        return cls.from_dict(yaml_data)

    def validate(self) -> List[ConfigIssue]:
        return validate_config(self.errors, self.transaction, self.logging)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "errors": self.errors.to_dict(),
            "transaction": self.transaction.to_dict(),
            "logging": self.logging.to_dict(),
        }


def _candidate_paths(config_path: Optional[Path]) -> List[Path]:
    if config_path:
        return [Path(config_path)]
    paths = []
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        paths.append(Path(env_path))
    paths.append(Path.home() / ".gatecore" / "config.yml")
    return paths


def _load_yaml(config_path: Optional[Path] = None) -> Optional[Dict[str, Any]]:
    """Load YAML file, return None if not found (not an error)"""
    for path in _candidate_paths(config_path):
        if not path.exists():
            continue
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(
                message=f"cannot load configuration from {path}: {e}",
                details={"path": str(path)},
                cause=e,
            ) from e
        logger.debug("Loaded configuration from %s", path)
        return data
    return None


def _merge_config(default_instance, yaml_data: Any, config_class, section: str):
    """Merge YAML data into default config instance"""
    if not isinstance(yaml_data, dict):
        raise ConfigError(
            message=f"section '{section}' must be a mapping",
            details={"section": section},
        )
    known = {f.name for f in fields(config_class)}
    merged = {**default_instance.to_dict(), **yaml_data}
    return config_class(**{k: v for k, v in merged.items() if k in known})


def load_config(config_path: Optional[Path] = None) -> GateCoreConfig:
    """
    Load GateCore configuration.

    Note:
        - If YAML is not found, returns code defaults
        - System works without YAML (code is truth)
    """
    return GateCoreConfig.from_yaml(config_path)


_active_config: Optional[GateCoreConfig] = None


def get_config() -> GateCoreConfig:
    """
    Process-wide configuration, loaded lazily on first access.

    The first ErrorCollector (i.e. the first Runnable constructed) calls
    this, so $GATECORE_CONFIG or ~/.gatecore/config.yml is read at that
    point; a malformed file raises ConfigError from there. Call
    set_config() beforehand to skip reading files.
    """
    global _active_config
    if _active_config is None:
        _active_config = load_config()
    return _active_config


def set_config(config: GateCoreConfig) -> None:
    global _active_config
    _active_config = config


def reset_config() -> None:
    """Forget the active configuration; the next get_config() reloads it."""
    global _active_config
    _active_config = None


def configure_logging(config: Optional[GateCoreConfig] = None) -> None:
    """Apply the configured level to the ``gatecore`` logger."""
    config = config or get_config()
    logging.getLogger("gatecore").setLevel(config.logging.level.upper())


__all__ = [
    "CONFIG_ENV_VAR",
    "GateCoreConfig",
    "load_config",
    "get_config",
    "set_config",
    "reset_config",
    "configure_logging",
]
