"""CLI commands for user records and the read-only catalog."""

from __future__ import annotations

import click

from storefront.application.register_user import RegisterUserHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import product_repository, user_repository


@click.command("add")
@click.option("--id", "user_id", required=True, help="User ID issued by the identity provider.")
@click.option("--name", default="", help="Display name.")
def user_add(user_id: str, name: str) -> None:
    """Create an empty cart/favorites record for a user."""
    try:
        user = RegisterUserHandler(user_repository()).handle(user_id, name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"User '{user.id}' added.")


@click.command("list")
def catalog_list() -> None:
    """List all products in the catalog."""
    try:
        products = product_repository().list_all()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<10} {'Name':<24} {'Price':>10}")
    click.echo("-" * 46)
    for p in products:
        click.echo(f"{p.id:<10} {p.name:<24} {str(p.price):>10}")
