"""Cart State: the single, process-wide working cart.

The cart only remembers ``product_id -> qty``. Names and prices are never
stored here; they are joined in from the catalog on every read (see
``CartPricingService``), so a cart always shows current catalog prices.

The cart is deliberately not scoped to a session. Adding per-user carts
means keying one ``CartState`` per session id; the operations below keep
their contracts unchanged.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from shopcart.domain.exceptions import EntityNotFoundError
from shopcart.domain.model.value_objects import Money, Quantity, require_id


@dataclass(frozen=True)
class CartLine:
    """A display-ready join of a cart entry with live catalog pricing."""

    product_id: int
    name: str
    unit_price: Money
    qty: int

    @property
    def subtotal(self) -> Money:
        return (self.unit_price * self.qty).rounded()


@dataclass(frozen=True)
class CartSnapshot:
    """Consistent view of the cart at one instant.

    ``total`` is the sum of the already-rounded line subtotals, so it
    always equals what the displayed lines add up to.
    """

    lines: tuple[CartLine, ...] = ()

    @property
    def total(self) -> Money:
        result = Money.zero()
        for line in self.lines:
            result = result + line.subtotal
        return result.rounded()

    @property
    def is_empty(self) -> bool:
        return not self.lines


@dataclass
class CartState:
    """Mutable ``product_id -> qty`` map guarded by a re-entrant lock.

    Invariant: every stored quantity is >= 1. Entries are removed, never
    zeroed.

    ``lock`` is held by callers that need a multi-step critical section
    (checkout holds it across the snapshot, the order write and the
    clear). The individual mutators take it themselves.
    """

    _quantities: dict[int, int] = field(default_factory=dict)
    lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def add(self, product_id: int, qty: int) -> int:
        """Add *qty* on top of any existing quantity; return the new total.

        The accumulated total is held to the same bounds as *qty*; a rejected
        add leaves the line untouched.
        """
        require_id(product_id, "product_id")
        quantity = Quantity(qty)
        with self.lock:
            new_qty = Quantity(
                self._quantities.get(product_id, 0) + quantity.value
            ).value
            self._quantities[product_id] = new_qty
            return new_qty

    def set_quantity(self, product_id: int, qty: int) -> None:
        """Replace the quantity of a line that is already in the cart."""
        require_id(product_id, "product_id")
        quantity = Quantity(qty)
        with self.lock:
            if product_id not in self._quantities:
                raise EntityNotFoundError(f"Product #{product_id} is not in the cart")
            self._quantities[product_id] = quantity.value

    def remove(self, product_id: int) -> None:
        require_id(product_id, "product_id")
        with self.lock:
            if product_id not in self._quantities:
                raise EntityNotFoundError(f"Product #{product_id} is not in the cart")
            del self._quantities[product_id]

    def clear(self) -> None:
        with self.lock:
            self._quantities.clear()

    def contains(self, product_id: int) -> bool:
        with self.lock:
            return product_id in self._quantities

    def entries(self) -> list[tuple[int, int]]:
        """Copy of the entries in insertion order, orphans included."""
        with self.lock:
            return list(self._quantities.items())
