# gatecore/config/modules.py
"""
Per-concern configuration sections.

Every section is a frozen dataclass with code defaults, so the
system works without any YAML file.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ErrorsConfig:
    """Error collector defaults"""
    default_message: str = "is invalid"
    base_key: str = "base"

    @classmethod
    def default(cls) -> "ErrorsConfig":
        return cls()

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class TransactionConfig:
    """Defaults applied when a Runnable opts into a transactional scope"""
    requires_new: bool = False

    @classmethod
    def default(cls) -> "TransactionConfig":
        return cls()

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class LoggingConfig:
    """Level applied to the ``gatecore`` logger by configure_logging()"""
    level: str = "WARNING"

    @classmethod
    def default(cls) -> "LoggingConfig":
        return cls()

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
