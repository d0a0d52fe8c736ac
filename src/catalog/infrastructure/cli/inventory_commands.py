"""CLI commands for inventory tracking."""

from __future__ import annotations

import click

from catalog.application.show_inventory import ShowInventoryHandler
from catalog.infrastructure.bootstrap import product_repository, variant_repository
from catalog.infrastructure.cli.common import owner_option


@click.command("show")
@owner_option
def inventory_show(owner: str) -> None:
    """Show stock levels across your products' variants."""
    handler = ShowInventoryHandler(
        product_repo=product_repository(),
        variant_repo=variant_repository(),
    )
    inventory = handler.handle(owner)

    if not inventory.variants:
        click.echo("No inventory records found.")
        return

    click.echo(f"{'Product':<20} {'Size':<6} {'Color':<10} {'Stock':>8} {'Low':>5}")
    click.echo("-" * 53)
    for line in inventory.variants:
        flag = "yes" if line.low_stock else ""
        click.echo(
            f"{line.product_name:<20} {line.size:<6} {line.color:<10} "
            f"{line.stock:>8} {flag:>5}"
        )
    click.echo("-" * 53)
    click.echo(f"{'Total items':<38} {inventory.total_items:>8}")
