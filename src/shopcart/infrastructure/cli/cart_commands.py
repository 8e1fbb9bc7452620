"""CLI commands for the shared cart and checkout."""

from __future__ import annotations

import click

from shopcart.application.add_to_cart import AddToCartHandler
from shopcart.application.checkout import CheckoutHandler
from shopcart.application.dto import CartDTO
from shopcart.application.remove_from_cart import RemoveFromCartHandler
from shopcart.application.set_cart_quantity import SetCartQuantityHandler
from shopcart.application.show_cart import ShowCartHandler
from shopcart.infrastructure.cli.config import ShopConfig
from shopcart.infrastructure.cli.errors import reported_errors


def _display_cart(cart: CartDTO) -> None:
    """Shared formatting for displaying the cart."""
    if not cart.lines:
        click.echo("Cart is empty.")
        click.echo(f"  {'Cart Total':<36} {cart.total:>20.2f}")
        return

    click.echo(f"  {'ID':<5} {'Product':<24} {'Qty':>5} {'Price':>10} {'Subtotal':>10}")
    click.echo(f"  {'-'*57}")
    for line in cart.lines:
        click.echo(
            f"  {line.product_id:<5} {line.name:<24} {line.qty:>5} "
            f"{line.unit_price:>10.2f} {line.subtotal:>10.2f}"
        )
    click.echo(f"  {'-'*57}")
    click.echo(f"  {'Cart Total':<36} {cart.total:>20.2f}")


@click.command("show")
@click.pass_obj
def cart_show(config: ShopConfig) -> None:
    """Show the cart priced at current catalog prices."""
    with reported_errors():
        handler = ShowCartHandler(uow=config.unit_of_work(), cart=config.cart())
        cart = handler.handle()

    _display_cart(cart)


@click.command("add")
@click.option("--product", "product_id", required=True, type=int, help="Product ID.")
@click.option("--qty", default=1, show_default=True, type=int, help="Quantity to add.")
@click.pass_obj
def cart_add(config: ShopConfig, product_id: int, qty: int) -> None:
    """Add a product to the cart (adds to any quantity already there)."""
    with reported_errors():
        handler = AddToCartHandler(uow=config.unit_of_work(), cart=config.cart())
        cart = handler.handle(product_id=product_id, qty=qty)

    _display_cart(cart)


@click.command("update")
@click.option("--product", "product_id", required=True, type=int, help="Product ID.")
@click.option("--qty", required=True, type=int, help="New quantity.")
@click.pass_obj
def cart_update(config: ShopConfig, product_id: int, qty: int) -> None:
    """Change the quantity of a line already in the cart."""
    with reported_errors():
        handler = SetCartQuantityHandler(uow=config.unit_of_work(), cart=config.cart())
        cart = handler.handle(product_id=product_id, qty=qty)

    _display_cart(cart)


@click.command("remove")
@click.option("--product", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def cart_remove(config: ShopConfig, product_id: int) -> None:
    """Remove a line from the cart."""
    with reported_errors():
        handler = RemoveFromCartHandler(uow=config.unit_of_work(), cart=config.cart())
        cart = handler.handle(product_id=product_id)

    _display_cart(cart)


@click.command("checkout")
@click.pass_obj
def checkout(config: ShopConfig) -> None:
    """Turn the cart into an order and empty the cart."""
    with reported_errors():
        handler = CheckoutHandler(uow=config.unit_of_work(), cart=config.cart())
        result = handler.handle()

    click.echo(f"Order #{result.order_id} placed  (total={result.total:.2f})")
