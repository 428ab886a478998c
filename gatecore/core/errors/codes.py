# gatecore/core/errors/codes.py
from __future__ import annotations

from typing import Final


# ---- canonical error codes (stable public contract) ----
# generic
UNKNOWN: Final[str] = "UNKNOWN"
INTERNAL_ERROR: Final[str] = "INTERNAL_ERROR"
INVALID_ARGUMENT: Final[str] = "INVALID_ARGUMENT"
NOT_IMPLEMENTED: Final[str] = "NOT_IMPLEMENTED"

# runnable lifecycle
INVALID_INTERACTION: Final[str] = "INVALID_INTERACTION"
INVALID_STATE: Final[str] = "INVALID_STATE"

# transaction
ARGUMENT_REQUIRED: Final[str] = "ARGUMENT_REQUIRED"

# config
INVALID_CONFIG: Final[str] = "INVALID_CONFIG"


# ---- semantic groups (internal helpers) ----

# Programmer-contract violations. These are always raised, never
# downgraded to accumulated validation errors.
CONTRACT_CODES: Final[set[str]] = {
    NOT_IMPLEMENTED,
    ARGUMENT_REQUIRED,
    INVALID_STATE,
}

KNOWN_CODES: Final[set[str]] = {
    UNKNOWN,
    INTERNAL_ERROR,
    INVALID_ARGUMENT,
    NOT_IMPLEMENTED,
    INVALID_INTERACTION,
    INVALID_STATE,
    ARGUMENT_REQUIRED,
    INVALID_CONFIG,
}
