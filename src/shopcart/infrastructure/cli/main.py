from __future__ import annotations

import shlex

import click

from shopcart.infrastructure.bootstrap import DEFAULT_DATABASE_URL
from shopcart.infrastructure.cli.cart_commands import (
    cart_add,
    cart_remove,
    cart_show,
    cart_update,
    checkout,
)
from shopcart.infrastructure.cli.config import ShopConfig
from shopcart.infrastructure.cli.order_commands import order_list
from shopcart.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_show,
    product_update,
)
from shopcart.infrastructure.logging import configure_logging

EXIT_WORDS = ("exit", "quit")


@click.group()
@click.option(
    "--database-url",
    envvar="SHOP_DATABASE_URL",
    default=DEFAULT_DATABASE_URL,
    show_default=True,
    help="SQLAlchemy URL of the catalog and order store.",
)
@click.option(
    "-v", "--verbose", is_flag=True, envvar="SHOP_VERBOSE", help="Log debug events to stderr."
)
@click.pass_context
def cli(ctx: click.Context, database_url: str, verbose: bool) -> None:
    """Shop: catalog, cart and checkout."""
    configure_logging(verbose)
    ctx.obj = ShopConfig(database_url=database_url, verbose=verbose)


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def cart() -> None:
    """Manage the shared cart."""


@cli.group()
def order() -> None:
    """Inspect placed orders."""


@cli.command("shell")
@click.pass_obj
def shell(config: ShopConfig) -> None:
    """Run commands interactively.

    The cart only lives as long as the process, so this is the way to
    fill a cart and check it out from the command line.
    """
    click.echo(f"Type commands as you would after 'shop'; '{EXIT_WORDS[1]}' to leave.")
    prefix = ["--database-url", config.database_url]
    if config.verbose:
        prefix.append("--verbose")

    while True:
        try:
            line = click.prompt("shop", prompt_suffix="> ", default="", show_default=False)
        except click.Abort:
            click.echo()
            return

        try:
            args = shlex.split(line)
        except ValueError as exc:
            click.echo(f"Error: {exc}", err=True)
            continue

        if not args:
            continue
        if args[0] in EXIT_WORDS:
            return
        if args[0] == "shell":
            click.echo("Already in the shell.")
            continue

        try:
            cli.main(args=[*prefix, *args], prog_name="shop", standalone_mode=False)
        except click.ClickException as exc:
            exc.show()


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
cart.add_command(cart_add)
cart.add_command(cart_remove)
cart.add_command(cart_show)
cart.add_command(cart_update)
order.add_command(order_list)
cli.add_command(checkout)
