# gatecore/core/validate/validator.py
"""
Validator core implementation.

A validator is an ordered list of rules. Running it asks every rule to
check the runnable; failing rules append to ``runnable.errors``.
Rules never short-circuit each other: all failures of a pass are kept.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterator, List, Optional, Protocol, runtime_checkable


logger = logging.getLogger(__name__)


@runtime_checkable
class Rule(Protocol):
    """Validation rule protocol"""

    def check(self, runnable: Any) -> None:
        """
        Check the runnable's current state.

        Failures are reported with ``runnable.errors.add(...)``; ordinary
        failures are never raised.
        """
        ...


@dataclass
class CallableRule:
    """
    Wraps a plain function ``fn(runnable)`` as a rule.

    The function reports failures itself, e.g.::

        def check_total(interaction):
            if interaction.total < 0:
                interaction.errors.add("total", "must not be negative")
    """
    fn: Callable[[Any], Any]
    name: str = ""

    def __post_init__(self) -> None:
        if not self.name:
            self.name = getattr(self.fn, "__name__", repr(self.fn))

    def check(self, runnable: Any) -> None:
        self.fn(runnable)


@dataclass
class MethodRule:
    """
    Calls the runnable's method ``name`` with no arguments.

    The method is looked up on the instance at check time, so a subclass
    overriding it replaces the rule.
    """
    name: str

    def check(self, runnable: Any) -> None:
        getattr(runnable, self.name)()


@dataclass
class PredicateRule:
    """
    Rule that holds when ``condition(runnable)`` is truthy.

    On failure, ``message`` is added under ``key`` (the collector's base
    key when ``key`` is None).
    """
    name: str
    condition: Callable[[Any], bool]
    message: Optional[str] = None
    key: Optional[str] = None

    def check(self, runnable: Any) -> None:
        if self.condition(runnable):
            return
        errors = runnable.errors
        errors.add(self.key if self.key is not None else errors.base_key, self.message)


def as_rule(rule: Any) -> Rule:
    """Accept a Rule object or a plain callable."""
    if isinstance(rule, Rule):
        return rule
    if callable(rule):
        return CallableRule(rule)
    raise TypeError(f"expected a rule or a callable, got {type(rule).__name__}")


class Validator:
    """
    Ordered rule list.

    Composition order is insertion order. ``run`` is the single step the
    runnable invokes during its validity check.
    """

    def __init__(self, rules: Optional[List[Rule]] = None) -> None:
        self._rules: List[Rule] = list(rules or [])

    def register(self, rule: Any) -> Rule:
        """Register a rule (or callable) at the end of the list."""
        rule = as_rule(rule)
        self._rules.append(rule)
        return rule

    def copy(self) -> "Validator":
        return Validator(self._rules)

    def run(self, runnable: Any) -> None:
        """Run every rule against ``runnable``."""
        logger.debug("Running %d rule(s) for %s", len(self._rules), type(runnable).__name__)
        for rule in self._rules:
            rule.check(runnable)

    @property
    def rules(self) -> List[Rule]:
        return list(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(list(self._rules))
