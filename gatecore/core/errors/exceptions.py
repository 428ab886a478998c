# gatecore/core/errors/exceptions.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from . import codes


def _safe_str(x: Any) -> str:
    try:
        return str(x)
    except Exception:
        return "<unstringifiable>"


def _normalize_error_code(code: Any) -> str:
    """
    Keep error_code stable and finite.
    Unknown codes are downgraded to UNKNOWN.
    """
    c = _safe_str(code or codes.UNKNOWN).strip() or codes.UNKNOWN
    if c in codes.KNOWN_CODES:
        return c
    return codes.UNKNOWN


@dataclass
class GateCoreError(Exception):
    """
    Base exception for every error GateCore raises.
    """
    message: str
    error_code: str = codes.UNKNOWN
    error_type: str = "GATECORE_ERROR"
    phase: str = "unknown"              # validate / execute / transaction / config / runtime
    details: Dict[str, Any] = field(default_factory=dict)
    cause: Optional[BaseException] = None

    def __post_init__(self) -> None:
        self.error_code = _normalize_error_code(self.error_code)
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    @property
    def is_contract_violation(self) -> bool:
        return self.error_code in codes.CONTRACT_CODES

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.error_type,
            "error_code": self.error_code,
            "message": self.message,
            "phase": self.phase,
            "details": self.details,
        }


@dataclass
class UnimplementedError(GateCoreError, NotImplementedError):
    """Raised when execute() is called on a Runnable that does not override it."""
    error_code: str = codes.NOT_IMPLEMENTED
    error_type: str = "UNIMPLEMENTED"
    phase: str = "execute"

    @classmethod
    def for_method(cls, owner: Any, method: str) -> "UnimplementedError":
        name = owner.__name__ if isinstance(owner, type) else type(owner).__name__
        return cls(
            message=f"{name}.{method}() is not implemented",
            details={"class": name, "method": method},
        )


@dataclass
class InvalidInteractionError(GateCoreError):
    """
    Raised by the strict invocation form when the instance ended invalid.

    The failed instance is kept on ``interaction`` so callers can read
    ``error.interaction.errors``.
    """
    error_code: str = codes.INVALID_INTERACTION
    error_type: str = "VALIDATION_ERROR"
    phase: str = "validate"
    interaction: Any = None

    @classmethod
    def from_interaction(cls, interaction: Any) -> "InvalidInteractionError":
        messages: List[str] = interaction.errors.full_messages()
        name = type(interaction).__name__
        summary = ", ".join(messages) if messages else "validation failed"
        return cls(
            message=f"{name} is invalid: {summary}",
            details={
                "class": name,
                "errors": interaction.errors.to_dict(),
                "full_messages": messages,
            },
            interaction=interaction,
        )


@dataclass
class ArgumentRequiredError(GateCoreError, TypeError):
    """Raised by a transactional scope invoked without a block."""
    error_code: str = codes.ARGUMENT_REQUIRED
    error_type: str = "ARGUMENT_REQUIRED"
    phase: str = "transaction"


@dataclass
class InvalidStateError(GateCoreError, RuntimeError):
    """Raised when a Runnable is driven outside its lifecycle."""
    error_code: str = codes.INVALID_STATE
    error_type: str = "INVALID_STATE"
    phase: str = "runtime"


@dataclass
class ConfigError(GateCoreError, ValueError):
    """Raised when a configuration file exists but cannot be used."""
    error_code: str = codes.INVALID_CONFIG
    error_type: str = "CONFIG_ERROR"
    phase: str = "config"
