"""CLI commands for variants, always addressed under their product."""

from __future__ import annotations

import click

from catalog.application.add_variant import AddVariantHandler
from catalog.application.delete_variant import DeleteVariantHandler
from catalog.application.dto import VariantDTO
from catalog.application.update_variant import UpdateVariantHandler
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import product_repository, variant_repository
from catalog.infrastructure.cli.common import fail, owner_option


def _display_variant(dto: VariantDTO) -> None:
    click.echo(f"Variant {dto.id}  {dto.size}/{dto.color}  (status={dto.status})")
    click.echo(f"  Stock:  {dto.stock}")
    click.echo(f"  Price:  {dto.price}")
    if dto.is_discounted:
        click.echo(
            f"  Sale:   {dto.discount_price}  ({dto.discount} off, save {dto.savings})"
        )


@click.command("add")
@owner_option
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--size", required=True)
@click.option("--color", required=True)
@click.option("--price", required=True, help="Price (e.g. 49.99).")
@click.option("--stock", type=int, default=0, show_default=True)
@click.option(
    "--discount", default=None,
    help="Discount percentage; marks the variant discounted.",
)
def variant_add(
    owner: str,
    product_id: str,
    size: str,
    color: str,
    price: str,
    stock: int,
    discount: str | None,
) -> None:
    """Add a variant to one of your products."""
    fields: dict = {"size": size, "color": color, "price": price, "stock": stock}
    if discount is not None:
        fields["is_discounted"] = True
        fields["discount"] = discount

    handler = AddVariantHandler(
        product_repo=product_repository(),
        variant_repo=variant_repository(),
    )

    try:
        dto = handler.handle(product_id, owner, fields)
    except DomainException as exc:
        raise fail(exc)

    click.echo("Variant added successfully")
    _display_variant(dto)


@click.command("update")
@owner_option
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--id", "variant_id", required=True, help="Variant ID.")
@click.option("--size", default=None)
@click.option("--color", default=None)
@click.option("--price", default=None)
@click.option("--stock", type=int, default=None)
@click.option("--discount", default=None, help="Discount percentage.")
@click.option("--discounted/--not-discounted", "is_discounted", default=None)
def variant_update(
    owner: str,
    product_id: str,
    variant_id: str,
    size: str | None,
    color: str | None,
    price: str | None,
    stock: int | None,
    discount: str | None,
    is_discounted: bool | None,
) -> None:
    """Update some fields of a variant; the rest keep their values."""
    options = {
        "size": size, "color": color, "price": price, "stock": stock,
        "discount": discount, "is_discounted": is_discounted,
    }
    fields = {key: value for key, value in options.items() if value is not None}
    if not fields:
        raise click.ClickException("Nothing to update")

    handler = UpdateVariantHandler(
        product_repo=product_repository(),
        variant_repo=variant_repository(),
    )

    try:
        dto = handler.handle(product_id, variant_id, owner, fields)
    except DomainException as exc:
        raise fail(exc)

    click.echo("Variant updated successfully")
    _display_variant(dto)


@click.command("delete")
@owner_option
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--id", "variant_id", required=True, help="Variant ID.")
def variant_delete(owner: str, product_id: str, variant_id: str) -> None:
    """Delete a variant of one of your products."""
    handler = DeleteVariantHandler(
        product_repo=product_repository(),
        variant_repo=variant_repository(),
    )

    try:
        dto = handler.handle(product_id, variant_id, owner)
    except DomainException as exc:
        raise fail(exc)

    click.echo(f"Variant {dto.id} ({dto.size}/{dto.color}) deleted successfully")
