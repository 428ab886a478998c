# gatecore/core/validate/__init__.py
"""
Validation system.

Provides the pre-execution gate:
- ErrorCollector: accumulates failures per key
- Rule / Validator: pluggable, ordered checks that report into the collector
"""

from .errors import ErrorCollector
from .validator import (
    Rule,
    CallableRule,
    MethodRule,
    PredicateRule,
    Validator,
    as_rule,
)

__all__ = [
    "ErrorCollector",
    "Rule",
    "CallableRule",
    "MethodRule",
    "PredicateRule",
    "Validator",
    "as_rule",
]
