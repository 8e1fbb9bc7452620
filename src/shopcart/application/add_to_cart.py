"""Application service: Add To Cart use case.

Adding is additive: adding 2 and then 3 of the same product leaves 5 in
the cart. The product must exist in the catalog at call time.
"""

from __future__ import annotations

import structlog

from shopcart.application.dto import CartDTO
from shopcart.domain.exceptions import EntityNotFoundError
from shopcart.domain.model.cart import CartState
from shopcart.domain.model.value_objects import Quantity, require_id
from shopcart.domain.repository.unit_of_work import UnitOfWork
from shopcart.domain.service.cart_pricing_service import CartPricingService

logger = structlog.get_logger(__name__)


class AddToCartHandler:

    def __init__(self, uow: UnitOfWork, cart: CartState) -> None:
        self._uow = uow
        self._cart = cart

    def handle(self, product_id: int, qty: int) -> CartDTO:
        """Add *qty* of a product to the cart and return the fresh cart."""
        require_id(product_id, "product_id")
        Quantity(qty)

        with self._cart.lock, self._uow:
            if self._uow.products.get_by_id(product_id) is None:
                raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

            new_qty = self._cart.add(product_id, qty)
            snapshot = CartPricingService(self._uow.products).price(self._cart)

        logger.debug("cart_line_added", product_id=product_id, qty=qty, cart_qty=new_qty)
        return CartDTO.from_snapshot(snapshot)
