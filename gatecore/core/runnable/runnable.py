# gatecore/core/runnable/runnable.py
"""
Runnable: validation-gated execution.

Lifecycle of one invocation:

    UNVALIDATED -> VALIDATING -> VALID   -> EXECUTED
                              -> INVALID

A result is only ever stored while the error collector is empty, and a
failed validity check wipes any previously stored result.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, ClassVar, Optional, Type, TypeVar

from ...config import get_config
from ..errors import UnimplementedError, InvalidStateError
from ..transaction import TransactionalScope, TransactionOptions, coerce_options
from ..transaction.scope import OptionsLike
from ..validate import ErrorCollector, Validator, MethodRule
from . import invoker


R = TypeVar("R", bound="Runnable")

RULE_MARKER = "__gatecore_rule__"

logger = logging.getLogger(__name__)


class RunState(str, Enum):
    """Lifecycle state of a Runnable instance"""
    UNVALIDATED = "unvalidated"
    VALIDATING = "validating"
    VALID = "valid"
    INVALID = "invalid"
    EXECUTED = "executed"


class Validity(str, Enum):
    """
    Outcome of a validity check.

    Only VALID is truthy, so ``if instance.validity_check():`` reads
    naturally while the value stays distinguishable from a plain bool.
    """
    VALID = "valid"
    INVALID = "invalid"

    def __bool__(self) -> bool:
        return self is Validity.VALID


class Interrupt(Exception):
    """
    Aborts execute() once errors have been recorded.

    Raised inside the transactional block so the scope rolls back, then
    caught by the state machine. Never escapes run().
    """

    def __init__(self, errors: ErrorCollector):
        super().__init__("execution interrupted by errors")
        self.errors = errors


def validation_rule(fn: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """
    Mark a method as a validation rule of its class.

    Marked methods are registered in definition order when the class is
    created, and are called with the instance::

        class Divide(Runnable):
            @validation_rule
            def _nonzero_divisor(self):
                if self.b == 0:
                    self.errors.add("b", "must not be zero")
    """
    setattr(fn, RULE_MARKER, True)
    return fn


class Runnable:
    """
    Base class for a unit of work gated by validation.

    Subclasses override execute() and register rules either with
    @validation_rule methods or with ``Cls.validate(fn)``. Each subclass
    owns a Validator seeded with its parent's rules.

    Transactions are opt-in: set ``transactional = True`` and pass a
    TransactionalScope as ``transaction_scope``.
    """

    transactional: ClassVar[bool] = False
    transaction_options: ClassVar[OptionsLike] = None
    _validator: ClassVar[Validator] = Validator()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._validator = cls._validator.copy()
        # Overriding an inherited rule method replaces it; never registered twice.
        inherited = {rule.name for rule in cls._validator if isinstance(rule, MethodRule)}
        for name, attr in vars(cls).items():
            if callable(attr) and getattr(attr, RULE_MARKER, False) and name not in inherited:
                cls._validator.register(MethodRule(name))

    def __init__(self, transaction_scope: Optional[TransactionalScope] = None) -> None:
        self._errors = ErrorCollector()
        self._result: Any = None
        self._state = RunState.UNVALIDATED
        self.transaction_scope = transaction_scope

    # ---- rule registration ----

    @classmethod
    def validate(cls, rule: Any) -> Any:
        """
        Register a rule for this class (and classes derived from it later).

        Accepts a Rule object or a callable taking the instance; returns
        it unchanged so it can be used as a decorator.
        """
        cls._validator.register(rule)
        return rule

    @classmethod
    def validator(cls) -> Validator:
        return cls._validator

    # ---- entry points ----

    @classmethod
    def run(cls: Type[R], *args: Any, **kwargs: Any) -> R:
        return invoker.run(cls, *args, **kwargs)

    @classmethod
    def run_strict(cls, *args: Any, **kwargs: Any) -> Any:
        return invoker.run_strict(cls, *args, **kwargs)

    # ---- public state ----

    @property
    def errors(self) -> ErrorCollector:
        return self._errors

    @property
    def state(self) -> RunState:
        return self._state

    @property
    def result(self) -> Any:
        return self._result

    @result.setter
    def result(self, value: Any) -> None:
        # Consults the current errors only; never runs the rules.
        if self._errors.is_empty():
            self._result = value
        else:
            logger.debug(
                "%s: result assignment rejected (%d error(s))",
                type(self).__name__, len(self._errors),
            )

    def validity_check(self) -> Validity:
        """
        Re-run every rule from a clean collector.

        An invalid outcome also resets ``result`` to None.
        """
        executed = self._state is RunState.EXECUTED
        self._state = RunState.VALIDATING
        self._errors.clear()
        type(self)._validator.run(self)

        if self._errors.is_empty():
            self._state = RunState.EXECUTED if executed else RunState.VALID
            return Validity.VALID

        self._result = None
        self._state = RunState.INVALID
        logger.debug("%s invalid: %s", type(self).__name__, self._errors.to_dict())
        return Validity.INVALID

    def is_valid(self) -> bool:
        return bool(self.validity_check())

    def execute(self) -> Any:
        raise UnimplementedError.for_method(self, "execute")

    def compose(self, other: Type["Runnable"], *args: Any, **kwargs: Any) -> Any:
        """
        Run another Runnable from inside execute().

        Returns its result when valid. Otherwise its errors are merged
        into this instance and the current execute() is aborted.

        Raises:
            InvalidStateError: called outside execute() of a valid instance
        """
        if self._state is not RunState.VALID:
            raise InvalidStateError(
                message=f"{type(self).__name__}.compose() is only valid inside execute()",
                details={"state": self._state.value},
            )
        outcome = invoker.run(other, *args, **kwargs)
        if outcome.errors.is_empty():
            return outcome.result
        self._errors.merge(outcome.errors)
        raise Interrupt(outcome.errors)

    # ---- state machine ----

    def _perform(self) -> None:
        if self._state is not RunState.UNVALIDATED:
            raise InvalidStateError(
                message=f"{type(self).__name__} has already been run (state={self._state.value})",
                details={"state": self._state.value},
            )

        if not self.validity_check():
            return

        try:
            value = self._execute_in_scope()
        except Interrupt:
            self._result = None
            self._state = RunState.INVALID
            logger.debug("%s interrupted: %s", type(self).__name__, self._errors.to_dict())
            return

        self.result = value
        self._state = RunState.EXECUTED

    def _execute_in_scope(self) -> Any:
        if not self.transactional:
            return self._execute_guarded()

        if self.transaction_scope is None:
            raise InvalidStateError(
                message=f"{type(self).__name__} is transactional but no transaction_scope was given",
            )
        return self.transaction_scope.with_transaction(
            self._transaction_options(), self._execute_guarded
        )

    def _execute_guarded(self) -> Any:
        value = self.execute()
        if self._errors.any():
            raise Interrupt(self._errors)
        return value

    def _transaction_options(self) -> TransactionOptions:
        if self.transaction_options is None:
            return TransactionOptions(
                requires_new=get_config().transaction.requires_new,
                label=type(self).__name__,
            )
        return coerce_options(self.transaction_options)
