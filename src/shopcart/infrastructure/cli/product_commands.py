"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from shopcart.application.add_product import AddProductHandler
from shopcart.application.delete_product import DeleteProductHandler
from shopcart.application.dto import ProductDTO
from shopcart.application.list_products import ListProductsHandler
from shopcart.application.show_product import ShowProductHandler
from shopcart.application.update_product import UpdateProductHandler
from shopcart.infrastructure.cli.config import ShopConfig
from shopcart.infrastructure.cli.errors import reported_errors


def _display_product(product: ProductDTO) -> None:
    click.echo(f"Product #{product.id} '{product.name}' at {product.price:.2f}")


@click.command("list")
@click.pass_obj
def product_list(config: ShopConfig) -> None:
    """List all products in the catalog."""
    with reported_errors():
        handler = ListProductsHandler(uow=config.unit_of_work())
        products = handler.handle()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<30} {'Price':>10}")
    click.echo("-" * 48)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<30} {p.price:>10.2f}")


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.pass_obj
def product_add(config: ShopConfig, name: str, price: str) -> None:
    """Add a new product to the catalog."""
    with reported_errors():
        handler = AddProductHandler(uow=config.unit_of_work())
        product = handler.handle(name=name, price=price)

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price:.2f}")


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def product_show(config: ShopConfig, product_id: int) -> None:
    """Show a single product."""
    with reported_errors():
        handler = ShowProductHandler(uow=config.unit_of_work())
        product = handler.handle(product_id)

    _display_product(product)


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.pass_obj
def product_update(
    config: ShopConfig, product_id: int, name: str | None, price: str | None
) -> None:
    """Update a product's name and/or price."""
    with reported_errors():
        handler = UpdateProductHandler(uow=config.unit_of_work())
        product = handler.handle(product_id=product_id, name=name, price=price)

    click.echo(f"Product #{product.id} updated")
    _display_product(product)


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def product_delete(config: ShopConfig, product_id: int) -> None:
    """Remove a product from the catalog."""
    with reported_errors():
        handler = DeleteProductHandler(uow=config.unit_of_work())
        handler.handle(product_id)

    click.echo(f"Product #{product_id} deleted")
