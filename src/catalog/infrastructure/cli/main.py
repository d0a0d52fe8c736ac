import logging

import click

from catalog.infrastructure.bootstrap import settings
from catalog.infrastructure.cli.category_commands import (
    category_create,
    category_delete,
    category_list,
    category_show,
    category_update,
)
from catalog.infrastructure.cli.inventory_commands import inventory_show
from catalog.infrastructure.cli.product_commands import (
    product_create,
    product_delete,
    product_mine,
    product_update,
)
from catalog.infrastructure.cli.search_commands import (
    search_category,
    search_color,
    search_date,
    search_name,
    search_size,
)
from catalog.infrastructure.cli.variant_commands import (
    variant_add,
    variant_delete,
    variant_update,
)


@click.group()
def cli() -> None:
    """Catalog — products, variants and categories"""
    logging.basicConfig(
        level=settings().log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def product() -> None:
    """Manage your products."""


@cli.group()
def variant() -> None:
    """Manage the variants of your products."""


@cli.group()
def category() -> None:
    """Manage categories."""


@cli.group()
def search() -> None:
    """Search the catalog."""


@cli.group()
def inventory() -> None:
    """Track stock levels."""


# Register subcommands
product.add_command(product_create)
product.add_command(product_delete)
product.add_command(product_mine)
product.add_command(product_update)
variant.add_command(variant_add)
variant.add_command(variant_delete)
variant.add_command(variant_update)
category.add_command(category_create)
category.add_command(category_delete)
category.add_command(category_list)
category.add_command(category_show)
category.add_command(category_update)
search.add_command(search_category)
search.add_command(search_color)
search.add_command(search_date)
search.add_command(search_name)
search.add_command(search_size)
inventory.add_command(inventory_show)
