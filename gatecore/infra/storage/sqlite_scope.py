# gatecore/infra/storage/sqlite_scope.py
"""
SQLite transactional scope
"""

import logging
import sqlite3
from typing import Any, Callable, Optional

from ...core.transaction import TransactionalScope, TransactionOptions


logger = logging.getLogger(__name__)


class SqliteTransactionalScope(TransactionalScope):
    """
    Transactional scope over a sqlite3 connection.

    - outermost block: BEGIN / COMMIT, ROLLBACK when the block raises
    - nested block: joins the enclosing transaction
    - nested block with requires_new: SAVEPOINT / RELEASE, and
      ROLLBACK TO on error so only the nested work is undone

    The block's exception is always re-raised after rolling back.
    The scope drives transactions explicitly, so the connection is put
    into autocommit mode (isolation_level=None).
    """

    def __init__(self, conn: Optional[sqlite3.Connection] = None, db_path: Optional[str] = None):
        self.db_path = db_path
        self.conn: Optional[sqlite3.Connection] = conn
        self._depth = 0
        self._savepoints = 0
        if self.conn is not None:
            self.conn.isolation_level = None

    def connect(self):
        """Open ``db_path`` if no connection was supplied"""
        if self.conn is None:
            if not self.db_path:
                raise ValueError("db_path is required when no connection is supplied")
            self.conn = sqlite3.connect(self.db_path, isolation_level=None)
            self.conn.row_factory = sqlite3.Row
        return self

    def close(self):
        """Close database connection"""
        if self.conn:
            self.conn.close()
            self.conn = None

    def __enter__(self):
        return self.connect()

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    @property
    def depth(self) -> int:
        """Number of with_transaction blocks currently open"""
        return self._depth

    def _run_atomic(self, block: Callable[[], Any], options: TransactionOptions) -> Any:
        if self.conn is None:
            self.connect()

        if self._depth == 0 and not self.conn.in_transaction:
            return self._run_outermost(block, options)
        if options.requires_new:
            return self._run_savepoint(block, options)

        logger.debug("Joining enclosing transaction (label=%s)", options.label)
        self._depth += 1
        try:
            return block()
        finally:
            self._depth -= 1

    def _run_outermost(self, block: Callable[[], Any], options: TransactionOptions) -> Any:
        logger.debug("BEGIN (label=%s)", options.label)
        self.conn.execute("BEGIN")
        self._depth += 1
        try:
            value = block()
        except BaseException:
            logger.warning("ROLLBACK (label=%s)", options.label)
            self.conn.execute("ROLLBACK")
            raise
        finally:
            self._depth -= 1
        try:
            self.conn.execute("COMMIT")
        except sqlite3.Error:
            # A failed COMMIT (e.g. deferred constraint) leaves the transaction open.
            logger.warning("COMMIT failed, ROLLBACK (label=%s)", options.label)
            if self.conn.in_transaction:
                self.conn.execute("ROLLBACK")
            raise
        logger.debug("COMMIT (label=%s)", options.label)
        return value

    def _run_savepoint(self, block: Callable[[], Any], options: TransactionOptions) -> Any:
        self._savepoints += 1
        name = f"gatecore_sp_{self._savepoints}"
        logger.debug("SAVEPOINT %s (label=%s)", name, options.label)
        self.conn.execute(f"SAVEPOINT {name}")
        self._depth += 1
        try:
            value = block()
        except BaseException:
            logger.warning("ROLLBACK TO %s (label=%s)", name, options.label)
            self.conn.execute(f"ROLLBACK TO {name}")
            self.conn.execute(f"RELEASE {name}")
            raise
        finally:
            self._depth -= 1
        self.conn.execute(f"RELEASE {name}")
        return value
