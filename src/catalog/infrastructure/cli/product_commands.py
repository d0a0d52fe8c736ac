"""CLI commands for the Product aggregate."""

from __future__ import annotations

import json

import click

from catalog.application.create_product import CreateProductHandler
from catalog.application.delete_product import DeleteProductHandler
from catalog.application.list_my_products import ListMyProductsHandler
from catalog.application.update_product import UpdateProductHandler
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import (
    document_store,
    product_repository,
    variant_repository,
)
from catalog.infrastructure.cli.common import (
    display_product,
    fail,
    owner_option,
    parse_variant,
)


def _product_fields(**options: str | None) -> dict:
    """Keep only the options the user actually passed."""
    return {key: value for key, value in options.items() if value is not None}


@click.command("create")
@owner_option
@click.option("--name", required=True, help="Product name.")
@click.option("--description", default=None)
@click.option("--brand", default=None)
@click.option("--category", "category_id", default=None, help="Category ID.")
@click.option("--status", default=None, help="in-stock, out-of-stock or low-stock.")
@click.option(
    "--variant", "variants", multiple=True,
    help="Variant as 'Size:Color:Price[:Stock[:Discount]]'. Repeatable.",
)
def product_create(
    owner: str,
    name: str,
    description: str | None,
    brand: str | None,
    category_id: str | None,
    status: str | None,
    variants: tuple[str, ...],
) -> None:
    """Create a product together with its variants."""
    fields = _product_fields(
        name=name, description=description, brand=brand,
        category_id=category_id, status=status,
    )
    specs = [parse_variant(raw) for raw in variants]

    handler = CreateProductHandler(
        product_repo=product_repository(),
        variant_repo=variant_repository(),
        transactions=document_store(),
    )

    try:
        dto = handler.handle(owner, fields, specs)
    except DomainException as exc:
        raise fail(exc)

    click.echo(f"Product {dto.id} created with {len(dto.variants)} variant(s)")
    click.echo()
    display_product(dto)


@click.command("update")
@owner_option
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None)
@click.option("--description", default=None)
@click.option("--brand", default=None)
@click.option("--category", "category_id", default=None, help="Category ID.")
@click.option("--status", default=None, help="in-stock, out-of-stock or low-stock.")
@click.option(
    "--variant", "variants", multiple=True,
    help="Replacement variant as 'Size:Color:Price[:Stock[:Discount]]'. "
    "Giving any replaces ALL existing variants.",
)
def product_update(
    owner: str,
    product_id: str,
    name: str | None,
    description: str | None,
    brand: str | None,
    category_id: str | None,
    status: str | None,
    variants: tuple[str, ...],
) -> None:
    """Update a product; optionally replace its variants."""
    fields = _product_fields(
        name=name, description=description, brand=brand,
        category_id=category_id, status=status,
    )
    specs = [parse_variant(raw) for raw in variants] if variants else None

    handler = UpdateProductHandler(
        product_repo=product_repository(),
        variant_repo=variant_repository(),
        transactions=document_store(),
    )

    try:
        dto = handler.handle(product_id, owner, fields, specs)
    except DomainException as exc:
        raise fail(exc)

    click.echo("Product updated successfully")
    click.echo()
    display_product(dto)


@click.command("delete")
@owner_option
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_delete(owner: str, product_id: str) -> None:
    """Delete a product and all of its variants."""
    handler = DeleteProductHandler(
        product_repo=product_repository(),
        variant_repo=variant_repository(),
        transactions=document_store(),
    )

    try:
        removed = handler.handle(product_id, owner)
    except DomainException as exc:
        raise fail(exc)

    click.echo(f"Product {product_id} and its {removed} variant(s) deleted")


@click.command("mine")
@owner_option
@click.option("--json", "as_json", is_flag=True, default=False, help="Print JSON.")
def product_mine(owner: str, as_json: bool) -> None:
    """List your products and their variants."""
    handler = ListMyProductsHandler(
        product_repo=product_repository(),
        variant_repo=variant_repository(),
    )

    try:
        products = handler.handle(owner)
    except DomainException as exc:
        raise fail(exc)

    if as_json:
        click.echo(json.dumps([p.to_dict() for p in products], indent=2))
        return

    if not products:
        click.echo("No products found.")
        return

    for dto in products:
        display_product(dto)
        click.echo()
