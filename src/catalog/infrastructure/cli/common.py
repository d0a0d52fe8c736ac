"""Helpers shared by the CLI command modules."""

from __future__ import annotations

import click

from catalog.application.dto import ProductDTO
from catalog.domain.exceptions import DomainException

# The caller identity is resolved by the authentication layer before the
# catalog is invoked; on the command line it is passed in directly.
owner_option = click.option(
    "--owner",
    envvar="CATALOG_USER",
    required=True,
    help="ID of the calling user (or set CATALOG_USER).",
)


def fail(exc: DomainException) -> click.ClickException:
    """Turn a domain error into a CLI error showing its kind and messages."""
    return click.ClickException(f"{exc.kind}: " + "; ".join(exc.messages))


def parse_variant(raw: str) -> dict:
    """Parse 'SIZE:COLOR:PRICE[:STOCK[:DISCOUNT]]' into a variant payload."""
    parts = [p.strip() for p in raw.split(":")]
    if not 3 <= len(parts) <= 5:
        raise click.BadParameter(
            f"Invalid variant format '{raw}'. "
            "Expected 'Size:Color:Price[:Stock[:Discount]]'."
        )
    fields: dict = {"size": parts[0], "color": parts[1], "price": parts[2]}
    if len(parts) >= 4 and parts[3]:
        try:
            fields["stock"] = int(parts[3])
        except ValueError:
            raise click.BadParameter(f"Invalid stock '{parts[3]}' in variant '{raw}'.")
    if len(parts) == 5 and parts[4]:
        fields["is_discounted"] = True
        fields["discount"] = parts[4]
    return fields


def display_product(dto: ProductDTO) -> None:
    click.echo(f"Product {dto.id}  '{dto.name}'  (status={dto.status})")
    if dto.brand:
        click.echo(f"Brand:    {dto.brand}")
    if dto.description:
        click.echo(f"About:    {dto.description}")
    if dto.category_id:
        click.echo(f"Category: {dto.category_id}")
    click.echo(f"Created:  {dto.created_at}")

    if not dto.variants:
        click.echo("  (no variants)")
        return

    click.echo(
        f"  {'Variant':<34} {'Size':<6} {'Color':<10} {'Stock':>6} "
        f"{'Status':<13} {'Price':>10} {'Final':>10}"
    )
    click.echo(f"  {'-'*95}")
    for v in dto.variants:
        click.echo(
            f"  {v.id:<34} {v.size:<6} {v.color:<10} {v.stock:>6} "
            f"{v.status:<13} {v.price:>10} {v.final_price:>10}"
        )
