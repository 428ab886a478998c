# gatecore/core/errors/__init__.py
"""
Core error types for GateCore.

This package defines the components responsible for:
- Representing errors
- Categorizing errors (stable error codes)

No side effects on import.
"""

from . import codes
from .exceptions import (
    GateCoreError,
    UnimplementedError,
    InvalidInteractionError,
    ArgumentRequiredError,
    InvalidStateError,
    ConfigError,
)

__all__ = [
    "codes",
    "GateCoreError",
    "UnimplementedError",
    "InvalidInteractionError",
    "ArgumentRequiredError",
    "InvalidStateError",
    "ConfigError",
]
