"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without exposing
domain internals. Amounts are ``Decimal`` rounded to cents; callers choose
how to render them.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from shopcart.domain.model.cart import CartSnapshot
from shopcart.domain.model.order import Order
from shopcart.domain.model.product import Product


def _stored_id(value: int | None) -> int:
    """Ids are assigned by the store; DTOs are only built from stored entities."""
    assert value is not None, "entity has not been stored yet"
    return value


@dataclass(frozen=True)
class ProductDTO:

    id: int
    name: str
    price: Decimal

    @staticmethod
    def from_domain(product: Product) -> ProductDTO:
        return ProductDTO(
            id=_stored_id(product.id),
            name=product.name,
            price=product.price.amount,
        )


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single cart line as displayed to the user."""

    product_id: int
    name: str
    unit_price: Decimal
    qty: int
    subtotal: Decimal


@dataclass(frozen=True)
class CartDTO:
    """Output: the whole cart priced against the current catalog."""

    lines: list[CartLineDTO]
    total: Decimal

    @staticmethod
    def from_snapshot(snapshot: CartSnapshot) -> CartDTO:
        return CartDTO(
            lines=[
                CartLineDTO(
                    product_id=line.product_id,
                    name=line.name,
                    unit_price=line.unit_price.amount,
                    qty=line.qty,
                    subtotal=line.subtotal.amount,
                )
                for line in snapshot.lines
            ],
            total=snapshot.total.amount,
        )


@dataclass(frozen=True)
class CheckoutResultDTO:

    order_id: int
    total: Decimal


@dataclass(frozen=True)
class OrderLineDTO:
    """Output: a sold line with its frozen price."""

    id: int
    order_id: int
    product_id: int
    name: str
    qty: int
    price: Decimal
    subtotal: Decimal


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    created_at: datetime
    lines: list[OrderLineDTO]
    total: Decimal

    @staticmethod
    def from_domain(order: Order) -> OrderDTO:
        return OrderDTO(
            id=_stored_id(order.id),
            created_at=order.created_at,
            lines=[
                OrderLineDTO(
                    id=_stored_id(line.id),
                    order_id=_stored_id(order.id),
                    product_id=line.product_id,
                    name=line.product_name,
                    qty=line.quantity.value,
                    price=line.price.amount,
                    subtotal=line.subtotal.amount,
                )
                for line in order.lines
            ],
            total=order.total.amount,
        )
