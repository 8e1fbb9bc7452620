"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from shopcart.application.dto import OrderDTO
from shopcart.application.list_orders import ListOrdersHandler
from shopcart.infrastructure.cli.config import ShopConfig
from shopcart.infrastructure.cli.errors import reported_errors


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}")
    click.echo(f"Created:  {dto.created_at.strftime('%Y-%m-%d %H:%M UTC')}")
    click.echo()
    click.echo(f"  {'Product':<24} {'Qty':>5} {'Price':>10} {'Subtotal':>10}")
    click.echo(f"  {'-'*51}")
    for item in dto.lines:
        click.echo(
            f"  {item.name:<24} {item.qty:>5} {item.price:>10.2f} {item.subtotal:>10.2f}"
        )
    click.echo(f"  {'-'*51}")
    click.echo(f"  {'Order Total':<30} {dto.total:>20.2f}")


@click.command("list")
@click.pass_obj
def order_list(config: ShopConfig) -> None:
    """List placed orders, most recent first."""
    with reported_errors():
        handler = ListOrdersHandler(uow=config.unit_of_work())
        orders = handler.handle()

    if not orders:
        click.echo("No orders found.")
        return

    for index, dto in enumerate(orders):
        if index:
            click.echo()
        _display_order(dto)
