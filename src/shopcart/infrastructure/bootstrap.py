"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

It also owns the two pieces of process-wide state: one engine per database
URL, and the single shared cart. The cart lives only as long as the
process; nothing about it is ever written to the database.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

import structlog
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError

from shopcart.domain.exceptions import StorageFault
from shopcart.domain.model.cart import CartState
from shopcart.domain.model.product import Product
from shopcart.domain.repository.unit_of_work import UnitOfWork
from shopcart.infrastructure.persistence.engine import create_engine_for, create_schema
from shopcart.infrastructure.persistence.sql_unit_of_work import SqlUnitOfWork

logger = structlog.get_logger(__name__)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

DEFAULT_DATABASE_URL = f"sqlite:///{_DATA_DIR / 'shop.db'}"

SEED_PRODUCTS = [("Green tea 100g", "19.90")]

_CART = CartState()


@lru_cache(maxsize=None)
def engine(database_url: str) -> Engine:
    """Return the engine for *database_url*, creating schema and seed once."""
    _ensure_sqlite_directory(database_url)
    new_engine = create_engine_for(database_url)
    try:
        create_schema(new_engine)
    except SQLAlchemyError as exc:
        new_engine.dispose()
        logger.error("schema_setup_failed", error=str(exc))
        raise StorageFault("Storage operation failed") from exc
    seed_catalog(SqlUnitOfWork(new_engine))
    return new_engine


def unit_of_work(database_url: str = DEFAULT_DATABASE_URL) -> SqlUnitOfWork:
    return SqlUnitOfWork(engine(database_url))


def cart() -> CartState:
    return _CART


def seed_catalog(uow: UnitOfWork) -> None:
    """Give an empty catalog something to sell."""
    with uow:
        if uow.products.count() > 0:
            return
        for name, price in SEED_PRODUCTS:
            uow.products.add(Product.create(name, price))
        uow.commit()
    logger.info("catalog_seeded", products=len(SEED_PRODUCTS))


def _ensure_sqlite_directory(database_url: str) -> None:
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite" and url.database not in (None, "", ":memory:"):
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)
