# gatecore/infra/storage/__init__.py
from .sqlite_scope import SqliteTransactionalScope

__all__ = ["SqliteTransactionalScope"]
