"""CLI commands for catalog search."""

from __future__ import annotations

import click

from catalog.application.dto import ProductDTO
from catalog.application.search_products import DATE_ORDERS, SearchProductsHandler
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import (
    category_repository,
    product_repository,
    variant_repository,
)
from catalog.infrastructure.cli.common import display_product, fail


def _handler() -> SearchProductsHandler:
    return SearchProductsHandler(
        product_repo=product_repository(),
        variant_repo=variant_repository(),
        category_repo=category_repository(),
    )


def _display_results(results: list[ProductDTO]) -> None:
    if not results:
        click.echo("No products found.")
        return
    for dto in results:
        display_product(dto)
        click.echo()


@click.command("name")
@click.argument("term")
def search_name(term: str) -> None:
    """Products whose name contains TERM."""
    _display_results(_handler().by_name(term))


@click.command("category")
@click.argument("term")
def search_category(term: str) -> None:
    """Products in categories whose name contains TERM."""
    _display_results(_handler().by_category(term))


@click.command("size")
@click.argument("term")
def search_size(term: str) -> None:
    """Products with a variant whose size contains TERM."""
    _display_results(_handler().by_size(term))


@click.command("color")
@click.argument("term")
def search_color(term: str) -> None:
    """Products with a variant whose color contains TERM."""
    _display_results(_handler().by_color(term))


@click.command("date")
@click.option(
    "--order", default="newest", show_default=True, help=" or ".join(DATE_ORDERS)
)
def search_date(order: str) -> None:
    """All products ordered by creation date."""
    try:
        results = _handler().by_created(order)
    except DomainException as exc:
        raise fail(exc)
    _display_results(results)
