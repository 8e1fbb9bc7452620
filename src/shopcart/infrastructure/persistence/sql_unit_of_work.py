"""SQL-backed implementation of UnitOfWork.

Each ``with`` block checks out one connection and runs one transaction on
it. The instance can be entered again after the block ends, but must not be
shared between threads.
"""

from __future__ import annotations

import structlog
from sqlalchemy.engine import Connection, Engine, Transaction
from sqlalchemy.exc import SQLAlchemyError

from shopcart.domain.exceptions import StorageFault
from shopcart.domain.repository.unit_of_work import UnitOfWork
from shopcart.infrastructure.persistence.sql_order_repository import (
    SqlOrderRepository,
)
from shopcart.infrastructure.persistence.sql_product_repository import (
    SqlProductRepository,
)

logger = structlog.get_logger(__name__)

# pysqlite raises OverflowError unwrapped for integers outside SQLite's range.
_STORAGE_ERRORS = (SQLAlchemyError, OverflowError)


class SqlUnitOfWork(UnitOfWork):

    def __init__(self, engine: Engine) -> None:
        self._engine = engine
        self._connection: Connection | None = None
        self._transaction: Transaction | None = None

    def __enter__(self) -> SqlUnitOfWork:
        try:
            self._connection = self._engine.connect()
            self._transaction = self._connection.begin()
        except SQLAlchemyError as exc:
            self._close()
            raise self._fault(exc) from exc

        self.products = SqlProductRepository(self._connection)
        self.orders = SqlOrderRepository(self._connection)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            self._rollback_if_open()
        except SQLAlchemyError as rollback_exc:
            if exc is None:
                raise self._fault(rollback_exc) from rollback_exc
            logger.warning("rollback_failed", error=str(rollback_exc))
        finally:
            self._close()

        if isinstance(exc, _STORAGE_ERRORS):
            raise self._fault(exc) from exc

    def commit(self) -> None:
        if self._transaction is None:
            raise RuntimeError("commit() called outside of a unit of work")
        self._transaction.commit()

    # --- Internal helpers -----------------------------------------------------

    def _rollback_if_open(self) -> None:
        if self._transaction is not None and self._transaction.is_active:
            self._transaction.rollback()

    def _close(self) -> None:
        if self._connection is not None:
            self._connection.close()
        self._connection = None
        self._transaction = None

    @staticmethod
    def _fault(exc: Exception) -> StorageFault:
        logger.error("storage_fault", error_type=type(exc).__name__, error=str(exc))
        return StorageFault("Storage operation failed")
