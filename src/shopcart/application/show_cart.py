"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from shopcart.application.dto import CartDTO
from shopcart.domain.model.cart import CartState
from shopcart.domain.repository.unit_of_work import UnitOfWork
from shopcart.domain.service.cart_pricing_service import CartPricingService


class ShowCartHandler:

    def __init__(self, uow: UnitOfWork, cart: CartState) -> None:
        self._uow = uow
        self._cart = cart

    def handle(self) -> CartDTO:
        with self._cart.lock, self._uow:
            snapshot = CartPricingService(self._uow.products).price(self._cart)
        return CartDTO.from_snapshot(snapshot)
