"""Application service: Set Cart Quantity use case.

Only updates a line that is already in the cart. New lines must go through
``AddToCartHandler``; this handler never creates one.
"""

from __future__ import annotations

import structlog

from shopcart.application.dto import CartDTO
from shopcart.domain.model.cart import CartState
from shopcart.domain.repository.unit_of_work import UnitOfWork
from shopcart.domain.service.cart_pricing_service import CartPricingService

logger = structlog.get_logger(__name__)


class SetCartQuantityHandler:

    def __init__(self, uow: UnitOfWork, cart: CartState) -> None:
        self._uow = uow
        self._cart = cart

    def handle(self, product_id: int, qty: int) -> CartDTO:
        with self._cart.lock:
            self._cart.set_quantity(product_id, qty)
            with self._uow:
                snapshot = CartPricingService(self._uow.products).price(self._cart)

        logger.debug("cart_line_updated", product_id=product_id, qty=qty)
        return CartDTO.from_snapshot(snapshot)
