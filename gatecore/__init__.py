# gatecore/__init__.py
"""
GateCore - validation-gated execution

A Runnable performs its unit of work only after every registered rule
passes. Failed work never produces a result.

Basic usage:

    >>> from gatecore import Runnable, validation_rule
    >>> class Divide(Runnable):
    ...     def __init__(self, a, b):
    ...         super().__init__()
    ...         self.a, self.b = a, b
    ...
    ...     @validation_rule
    ...     def _nonzero_divisor(self):
    ...         if self.b == 0:
    ...             self.errors.add("b", "must not be zero")
    ...
    ...     def execute(self):
    ...         return self.a / self.b

Probe form (never raises for validation failures):
    >>> outcome = Divide.run(6, 0)
    >>> outcome.result is None, outcome.errors.full_messages()
    (True, ['B must not be zero'])

Strict form (returns the value or raises InvalidInteractionError):
    >>> Divide.run_strict(6, 2)
    3.0

Transactions (opt-in, injected):
    >>> from gatecore import SqliteTransactionalScope
    >>> class Transfer(Runnable):
    ...     transactional = True
    ...     def __init__(self, scope):
    ...         super().__init__(transaction_scope=scope)

Configuration:
    The first Runnable constructed loads configuration lazily from
    $GATECORE_CONFIG or ~/.gatecore/config.yml (code defaults when
    absent). A malformed file raises ConfigError from that first run.
    Pin configuration explicitly to avoid reading files:

    >>> from gatecore import GateCoreConfig, set_config
    >>> set_config(GateCoreConfig.default())
"""

__version__ = "0.1.0"

from .core.errors import (
    GateCoreError,
    UnimplementedError,
    InvalidInteractionError,
    ArgumentRequiredError,
    InvalidStateError,
    ConfigError,
)
from .core.validate import ErrorCollector, Rule, CallableRule, PredicateRule, Validator
from .core.transaction import TransactionalScope, TransactionOptions, NullTransactionalScope
from .core.runnable import (
    Runnable,
    RunState,
    Validity,
    validation_rule,
    run,
    run_strict,
)
from .infra.storage import SqliteTransactionalScope
from .config import GateCoreConfig, load_config, get_config, set_config, configure_logging

__all__ = [
    "__version__",

    # Entry points
    "Runnable",
    "run",
    "run_strict",
    "validation_rule",

    # State
    "RunState",
    "Validity",

    # Validation
    "ErrorCollector",
    "Rule",
    "CallableRule",
    "PredicateRule",
    "Validator",

    # Transactions
    "TransactionalScope",
    "TransactionOptions",
    "NullTransactionalScope",
    "SqliteTransactionalScope",

    # Errors
    "GateCoreError",
    "UnimplementedError",
    "InvalidInteractionError",
    "ArgumentRequiredError",
    "InvalidStateError",
    "ConfigError",

    # Config
    "GateCoreConfig",
    "load_config",
    "get_config",
    "set_config",
    "configure_logging",
]
