"""CLI commands for categories."""

from __future__ import annotations

import click

from catalog.application.manage_categories import (
    CreateCategoryHandler,
    DeleteCategoryHandler,
    GetCategoryHandler,
    ListCategoriesHandler,
    UpdateCategoryHandler,
)
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import category_repository
from catalog.infrastructure.cli.common import fail


@click.command("create")
@click.option("--name", required=True, help="Category name.")
def category_create(name: str) -> None:
    """Create a category."""
    try:
        dto = CreateCategoryHandler(category_repository()).handle(name)
    except DomainException as exc:
        raise fail(exc)

    click.echo(f"Category {dto.id} '{dto.name}' created")


@click.command("list")
def category_list() -> None:
    """List all categories."""
    categories = ListCategoriesHandler(category_repository()).handle()

    if not categories:
        click.echo("No categories found.")
        return

    click.echo(f"{'ID':<34} {'Name':<20}")
    click.echo("-" * 55)
    for c in categories:
        click.echo(f"{c.id:<34} {c.name:<20}")


@click.command("show")
@click.option("--id", "category_id", required=True, help="Category ID.")
def category_show(category_id: str) -> None:
    """Show one category."""
    try:
        dto = GetCategoryHandler(category_repository()).handle(category_id)
    except DomainException as exc:
        raise fail(exc)

    click.echo(f"Category {dto.id} '{dto.name}'  (created {dto.created_at})")


@click.command("update")
@click.option("--id", "category_id", required=True, help="Category ID.")
@click.option("--name", default=None, help="New name.")
def category_update(category_id: str, name: str | None) -> None:
    """Rename a category."""
    try:
        dto = UpdateCategoryHandler(category_repository()).handle(category_id, name)
    except DomainException as exc:
        raise fail(exc)

    click.echo(f"Category {dto.id} is now '{dto.name}'")


@click.command("delete")
@click.option("--id", "category_id", required=True, help="Category ID.")
def category_delete(category_id: str) -> None:
    """Delete a category."""
    try:
        DeleteCategoryHandler(category_repository()).handle(category_id)
    except DomainException as exc:
        raise fail(exc)

    click.echo(f"Category {category_id} deleted")
