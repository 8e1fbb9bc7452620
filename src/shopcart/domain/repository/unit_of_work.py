"""Abstract transaction boundary over the durable store.

A unit of work is used as a context manager. Repositories reached through
it share one transaction; nothing is durable until ``commit()`` is called,
and leaving the block without committing rolls everything back.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopcart.domain.repository.order_repository import OrderRepository
from shopcart.domain.repository.product_repository import ProductRepository


class UnitOfWork(ABC):

    products: ProductRepository
    orders: OrderRepository

    @abstractmethod
    def __enter__(self) -> UnitOfWork:
        """Begin a transaction and bind the repositories to it."""

    @abstractmethod
    def __exit__(self, exc_type, exc, tb) -> None:
        """Roll back anything not committed and release the transaction."""

    @abstractmethod
    def commit(self) -> None:
        """Make every change in this unit of work durable."""
