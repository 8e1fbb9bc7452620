"""Abstract repository for Order aggregate.

Orders are append-only: there is no update or delete.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopcart.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def add(self, order: Order) -> None:
        """Insert the order and all of its lines, assigning their IDs."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order, most recent first, lines in insertion order."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored orders."""
