# gatecore/core/transaction/__init__.py
"""
Transactional scope interface.

Concrete providers that touch storage live in ``gatecore.infra``.

No side effects on import.
"""

from .scope import (
    TransactionOptions,
    TransactionalScope,
    NullTransactionalScope,
    coerce_options,
)

__all__ = [
    "TransactionOptions",
    "TransactionalScope",
    "NullTransactionalScope",
    "coerce_options",
]
