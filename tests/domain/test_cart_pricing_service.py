"""Unit tests for the CartPricingService domain service."""

from shopcart.domain.model.cart import CartState
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money
from shopcart.domain.service.cart_pricing_service import CartPricingService
from tests.fakes import FakeProductRepository


def _setup() -> tuple[CartPricingService, FakeProductRepository, CartState]:
    repo = FakeProductRepository(
        [
            Product(id=1, name="Tea", price=Money.of("19.90")),
            Product(id=2, name="Mug", price=Money.of("7.25")),
        ]
    )
    return CartPricingService(repo), repo, CartState()


class TestCartPricing:

    def test_tea_scenario(self):
        svc, _, cart = _setup()
        cart.add(1, 2)
        snapshot = svc.price(cart)
        assert len(snapshot.lines) == 1
        line = snapshot.lines[0]
        assert (line.product_id, line.name, line.qty) == (1, "Tea", 2)
        assert line.unit_price == Money.of("19.90")
        assert line.subtotal == Money.of("39.80")
        assert snapshot.total == Money.of("39.80")

    def test_uses_current_catalog_price(self):
        svc, repo, cart = _setup()
        cart.add(2, 1)
        repo.get_by_id(2).update(price="8.00")
        assert svc.price(cart).total == Money.of("8.00")

    def test_orphan_line_dropped_without_error(self):
        svc, repo, cart = _setup()
        cart.add(1, 1)
        cart.add(2, 3)
        repo.delete(1)

        snapshot = svc.price(cart)

        assert [line.product_id for line in snapshot.lines] == [2]
        assert snapshot.total == Money.of("21.75")
        # the quantity entry itself is left alone
        assert cart.contains(1)

    def test_empty_cart(self):
        svc, _, cart = _setup()
        assert svc.price(cart).is_empty
