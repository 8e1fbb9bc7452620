"""Application service: Checkout use case.

Converts the current cart into an immutable order, all or nothing:

1. Hold the cart lock for the whole critical section, so no cart mutation
   can interleave.
2. Open one unit of work and price the cart *inside* it, so no catalog
   price change can land between the snapshot and the order write.
3. Place the order from the snapshot (empty snapshot -> EmptyCartError)
   and insert it with all of its lines.
4. Commit, and only then clear the cart.

If anything before the commit fails, the unit of work rolls back and the
cart is never cleared. Nothing is retried.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone

import structlog

from shopcart.application.dto import CheckoutResultDTO
from shopcart.domain.exceptions import EmptyCartError
from shopcart.domain.model.cart import CartState
from shopcart.domain.model.order import Order
from shopcart.domain.repository.unit_of_work import UnitOfWork
from shopcart.domain.service.cart_pricing_service import CartPricingService

logger = structlog.get_logger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CheckoutHandler:

    def __init__(
        self,
        uow: UnitOfWork,
        cart: CartState,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._uow = uow
        self._cart = cart
        self._clock = clock

    def handle(self) -> CheckoutResultDTO:
        with self._cart.lock:
            try:
                with self._uow:
                    snapshot = CartPricingService(self._uow.products).price(self._cart)
                    order = Order.place(snapshot, created_at=self._clock())
                    self._uow.orders.add(order)
                    self._uow.commit()
            except EmptyCartError:
                logger.info("checkout_rejected", reason="empty_cart")
                raise

            self._cart.clear()

        assert order.id is not None
        logger.info(
            "checkout_completed",
            order_id=order.id,
            lines=len(order.lines),
            total=str(snapshot.total),
        )
        return CheckoutResultDTO(
            order_id=order.id,
            total=snapshot.total.amount,
        )
