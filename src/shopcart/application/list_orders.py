"""Application service: List Orders use case (query)."""

from __future__ import annotations

from shopcart.application.dto import OrderDTO
from shopcart.domain.repository.unit_of_work import UnitOfWork


class ListOrdersHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> list[OrderDTO]:
        """Return every order, most recent first.

        Totals are recomputed from the frozen line prices with the same
        per-line rounding as the cart.
        """
        with self._uow:
            orders = self._uow.orders.list_all()
        return [OrderDTO.from_domain(order) for order in orders]
