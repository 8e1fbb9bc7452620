"""Domain service: Cart Pricing.

Joins the cart's bare quantities against the catalog. It lives in the
domain layer because the join rules are core business rules:

- entries whose product no longer exists are skipped, not reported, and
  stay in the cart until removed or overwritten;
- each line subtotal is rounded on its own before the lines are summed.
"""

from __future__ import annotations

from shopcart.domain.model.cart import CartLine, CartSnapshot, CartState
from shopcart.domain.repository.product_repository import ProductRepository


class CartPricingService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def price(self, cart: CartState) -> CartSnapshot:
        """Return a snapshot of the cart priced at current catalog prices."""
        lines: list[CartLine] = []
        for product_id, qty in cart.entries():
            product = self._product_repo.get_by_id(product_id)
            if product is None:
                continue  # orphan
            lines.append(
                CartLine(
                    product_id=product_id,
                    name=product.name,
                    unit_price=product.price,
                    qty=qty,
                )
            )
        return CartSnapshot(lines=tuple(lines))
