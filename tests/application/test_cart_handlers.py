"""Integration tests for the cart use cases."""

from decimal import Decimal

import pytest

from shopcart.application.add_to_cart import AddToCartHandler
from shopcart.application.delete_product import DeleteProductHandler
from shopcart.application.remove_from_cart import RemoveFromCartHandler
from shopcart.application.set_cart_quantity import SetCartQuantityHandler
from shopcart.application.show_cart import ShowCartHandler
from shopcart.application.update_product import UpdateProductHandler
from shopcart.domain.exceptions import EntityNotFoundError, ValidationError
from shopcart.domain.model.cart import CartState
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import MAX_QUANTITY, Money
from tests.fakes import FakeProductRepository, FakeUnitOfWork


def _setup() -> tuple[FakeUnitOfWork, CartState]:
    products = FakeProductRepository(
        [
            Product(id=1, name="Tea", price=Money.of("19.90")),
            Product(id=2, name="Mug", price=Money.of("7.25")),
        ]
    )
    return FakeUnitOfWork(products=products), CartState()


class TestAddToCart:

    def test_tea_scenario(self):
        uow, cart = _setup()
        dto = AddToCartHandler(uow, cart).handle(1, 2)
        assert len(dto.lines) == 1
        line = dto.lines[0]
        assert (line.product_id, line.name, line.qty) == (1, "Tea", 2)
        assert line.unit_price == Decimal("19.90")
        assert line.subtotal == Decimal("39.80")
        assert dto.total == Decimal("39.80")

    def test_additive(self):
        uow, cart = _setup()
        handler = AddToCartHandler(uow, cart)
        handler.handle(1, 2)
        dto = handler.handle(1, 3)
        assert dto.lines[0].qty == 5

    def test_unknown_product(self):
        uow, cart = _setup()
        with pytest.raises(EntityNotFoundError, match="not found"):
            AddToCartHandler(uow, cart).handle(99, 1)
        assert cart.entries() == []

    def test_quantity_validated_before_lookup(self):
        uow, cart = _setup()
        with pytest.raises(ValidationError):
            AddToCartHandler(uow, cart).handle(99, 0)

    def test_oversized_quantity_rejected(self):
        uow, cart = _setup()
        with pytest.raises(ValidationError, match="cannot exceed"):
            AddToCartHandler(uow, cart).handle(1, 10**20)
        assert cart.entries() == []

    def test_additive_overflow_keeps_existing_line(self):
        uow, cart = _setup()
        handler = AddToCartHandler(uow, cart)
        handler.handle(1, MAX_QUANTITY)
        with pytest.raises(ValidationError):
            handler.handle(1, 1)
        assert cart.entries() == [(1, MAX_QUANTITY)]


class TestSetCartQuantity:

    def test_updates_existing_line(self):
        uow, cart = _setup()
        AddToCartHandler(uow, cart).handle(2, 1)
        dto = SetCartQuantityHandler(uow, cart).handle(2, 4)
        assert dto.lines[0].qty == 4
        assert dto.total == Decimal("29.00")

    def test_absent_line_never_created(self):
        uow, cart = _setup()
        with pytest.raises(EntityNotFoundError):
            SetCartQuantityHandler(uow, cart).handle(1, 3)
        assert ShowCartHandler(uow, cart).handle().lines == []


class TestRemoveFromCart:

    def test_remove(self):
        uow, cart = _setup()
        AddToCartHandler(uow, cart).handle(1, 1)
        AddToCartHandler(uow, cart).handle(2, 1)
        dto = RemoveFromCartHandler(uow, cart).handle(1)
        assert [line.product_id for line in dto.lines] == [2]

    def test_absent(self):
        uow, cart = _setup()
        with pytest.raises(EntityNotFoundError):
            RemoveFromCartHandler(uow, cart).handle(1)

    def test_orphan_can_be_removed(self):
        uow, cart = _setup()
        AddToCartHandler(uow, cart).handle(1, 1)
        DeleteProductHandler(uow).handle(1)
        RemoveFromCartHandler(uow, cart).handle(1)
        assert cart.entries() == []


class TestShowCart:

    def test_empty(self):
        uow, cart = _setup()
        dto = ShowCartHandler(uow, cart).handle()
        assert dto.lines == []
        assert dto.total == Decimal("0.00")

    def test_deleted_product_silently_dropped(self):
        uow, cart = _setup()
        AddToCartHandler(uow, cart).handle(1, 2)
        AddToCartHandler(uow, cart).handle(2, 1)
        DeleteProductHandler(uow).handle(1)

        dto = ShowCartHandler(uow, cart).handle()

        assert [line.product_id for line in dto.lines] == [2]
        assert dto.total == Decimal("7.25")

    def test_reprices_on_every_read(self):
        uow, cart = _setup()
        AddToCartHandler(uow, cart).handle(1, 2)
        UpdateProductHandler(uow).handle(1, price="10")
        assert ShowCartHandler(uow, cart).handle().total == Decimal("20.00")
