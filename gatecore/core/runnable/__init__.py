# gatecore/core/runnable/__init__.py
"""
Core runnable types for GateCore.

This package defines the components responsible for:
- The validate -> execute state machine (Runnable)
- The probe and strict entry points (run / run_strict)

No side effects on import.
"""

from .invoker import run, run_strict
from .runnable import Runnable, RunState, Validity, Interrupt, validation_rule

__all__ = [
    "Runnable",
    "RunState",
    "Validity",
    "Interrupt",
    "validation_rule",
    "run",
    "run_strict",
]
