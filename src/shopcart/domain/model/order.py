"""Order aggregate: the immutable record of a checkout.

An Order is written exactly once, by checkout, and never mutated or
deleted afterwards. Each line freezes the unit price and the product name
at the moment of sale, so history survives later catalog edits and
deletions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from shopcart.domain.exceptions import EmptyCartError, ValidationError
from shopcart.domain.model.cart import CartSnapshot
from shopcart.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class OrderLine:
    """A sold quantity of one product at its frozen unit price."""

    product_id: int
    product_name: str
    quantity: Quantity
    price: Money  # locked at checkout time
    id: int | None = None

    @property
    def subtotal(self) -> Money:
        return (self.price * self.quantity.value).rounded()


@dataclass
class Order:
    """Aggregate root for placed orders.

    Use ``Order.place()`` for new orders. The ``__init__`` is intentionally
    simple so the repository can reconstitute persisted orders without
    re-validating.
    """

    id: int | None
    lines: list[OrderLine]
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def place(snapshot: CartSnapshot, created_at: datetime | None = None) -> Order:
        """Turn a priced cart snapshot into a new order.

        Prices are copied from the snapshot itself, never re-read from the
        catalog.
        """
        if snapshot.is_empty:
            raise EmptyCartError("Cart is empty")

        lines = [
            OrderLine(
                product_id=line.product_id,
                product_name=line.name,
                quantity=Quantity(line.qty),
                price=line.unit_price,  # <-- price snapshot
            )
            for line in snapshot.lines
        ]
        if created_at is not None and created_at.tzinfo is None:
            raise ValidationError("Order timestamp must be timezone-aware")
        return Order(
            id=None,
            lines=lines,
            created_at=created_at or datetime.now(timezone.utc),
        )

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        result = Money.zero()
        for line in self.lines:
            result = result + line.subtotal
        return result.rounded()
