"""Application service: Remove From Cart use case."""

from __future__ import annotations

import structlog

from shopcart.application.dto import CartDTO
from shopcart.domain.model.cart import CartState
from shopcart.domain.repository.unit_of_work import UnitOfWork
from shopcart.domain.service.cart_pricing_service import CartPricingService

logger = structlog.get_logger(__name__)


class RemoveFromCartHandler:

    def __init__(self, uow: UnitOfWork, cart: CartState) -> None:
        self._uow = uow
        self._cart = cart

    def handle(self, product_id: int) -> CartDTO:
        """Drop a line from the cart, orphaned or not."""
        with self._cart.lock:
            self._cart.remove(product_id)
            with self._uow:
                snapshot = CartPricingService(self._uow.products).price(self._cart)

        logger.debug("cart_line_removed", product_id=product_id)
        return CartDTO.from_snapshot(snapshot)
