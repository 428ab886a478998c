# gatecore/core/runnable/invoker.py
"""
Invoker: the two entry points that drive a Runnable.

- run(): probe form, returns the instance whatever happened
- run_strict(): strict form, returns the result or raises
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Type, TypeVar

from ..errors import InvalidInteractionError

if TYPE_CHECKING:
    from .runnable import Runnable


R = TypeVar("R", bound="Runnable")

logger = logging.getLogger(__name__)


def run(runnable_cls: Type[R], *args: Any, **kwargs: Any) -> R:
    """
    Construct ``runnable_cls(*args, **kwargs)``, validate it, execute it
    when valid, and return the instance.

    Validation failures are reported through ``instance.errors``, never
    raised. Programmer errors (e.g. a missing execute()) propagate.
    """
    instance = runnable_cls(*args, **kwargs)
    instance._perform()
    logger.debug("%s finished in state %s", runnable_cls.__name__, instance.state.value)
    return instance


def run_strict(runnable_cls: Type["Runnable"], *args: Any, **kwargs: Any) -> Any:
    """
    Same as run(), but returns the unwrapped result.

    Raises:
        InvalidInteractionError: the instance ended with errors; the
            instance is available as ``error.interaction``
    """
    outcome = run(runnable_cls, *args, **kwargs)
    if outcome.errors.is_empty():
        return outcome.result
    raise InvalidInteractionError.from_interaction(outcome)
