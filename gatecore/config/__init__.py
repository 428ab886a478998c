# gatecore/config/__init__.py
"""
GateCore Configuration

Design principles:
1. Code has every default; YAML only overrides
2. Configuration sections are frozen dataclasses
"""

from .modules import ErrorsConfig, TransactionConfig, LoggingConfig
from .loader import (
    CONFIG_ENV_VAR,
    GateCoreConfig,
    load_config,
    get_config,
    set_config,
    reset_config,
    configure_logging,
)
from .validator import validate_config, ConfigIssue

__all__ = [
    "ErrorsConfig",
    "TransactionConfig",
    "LoggingConfig",
    "CONFIG_ENV_VAR",
    "GateCoreConfig",
    "load_config",
    "get_config",
    "set_config",
    "reset_config",
    "configure_logging",
    "validate_config",
    "ConfigIssue",
]
