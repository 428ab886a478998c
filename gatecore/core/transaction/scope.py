# gatecore/core/transaction/scope.py
"""
Transactional scope: the atomic boundary a Runnable may execute inside.

The core only consumes this interface. Atomicity and isolation are the
provider's responsibility.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from ..errors import ArgumentRequiredError


logger = logging.getLogger(__name__)


class TransactionOptions(BaseModel):
    """
    Transaction configuration.

    - requires_new: open a nested boundary (savepoint) even when a
      transaction is already active
    - label: free-form name, used in logs
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    requires_new: bool = Field(default=False, description="Open a nested boundary")
    label: Optional[str] = Field(default=None, description="Name used in logs")


OptionsLike = Union[None, TransactionOptions, Mapping[str, Any]]


def coerce_options(options: OptionsLike) -> TransactionOptions:
    if options is None:
        return TransactionOptions()
    if isinstance(options, TransactionOptions):
        return options
    if isinstance(options, Mapping):
        return TransactionOptions(**options)
    raise TypeError(
        f"transaction options must be None, a mapping or TransactionOptions, "
        f"got {type(options).__name__}"
    )


class TransactionalScope(ABC):
    """
    Runs a block inside an atomic boundary.

    Call forms::

        scope.with_transaction(block)
        scope.with_transaction(options, block)
        scope.with_transaction(options, block=block)

    The block is called with no arguments; its return value is returned.
    Calling without a block raises ArgumentRequiredError.
    """

    def with_transaction(self, *args: Any, block: Optional[Callable[[], Any]] = None) -> Any:
        options, block = self._split_args(args, block)
        return self._run_atomic(block, coerce_options(options))

    @abstractmethod
    def _run_atomic(self, block: Callable[[], Any], options: TransactionOptions) -> Any:
        """Run ``block`` inside the boundary described by ``options``."""

    @staticmethod
    def _split_args(
        args: Tuple[Any, ...],
        block: Optional[Callable[[], Any]],
    ) -> Tuple[OptionsLike, Callable[[], Any]]:
        if len(args) > 2 or (block is not None and len(args) > 1):
            raise TypeError(
                "with_transaction() accepts at most one options argument and one block"
            )

        if block is None:
            if args and callable(args[-1]):
                block = args[-1]
                args = args[:-1]
            else:
                raise ArgumentRequiredError(
                    message="with_transaction() requires a block",
                    details={"arguments": len(args)},
                )

        if not callable(block):
            raise ArgumentRequiredError(
                message=f"with_transaction() block must be callable, got {type(block).__name__}",
            )

        options = args[0] if args else None
        return options, block


class NullTransactionalScope(TransactionalScope):
    """
    Scope with no boundary: the block simply runs.

    Useful as a default and in tests; keeps the argument contract of
    every other scope.
    """

    def _run_atomic(self, block: Callable[[], Any], options: TransactionOptions) -> Any:
        logger.debug("Running block without transaction (label=%s)", options.label)
        return block()
