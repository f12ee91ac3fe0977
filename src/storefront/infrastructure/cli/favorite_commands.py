"""CLI commands for the favorites list."""

from __future__ import annotations

import click

from storefront.application.add_favorite import AddFavoriteHandler
from storefront.application.remove_favorite import RemoveFavoriteHandler
from storefront.application.show_favorites import ShowFavoritesHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import product_repository, user_repository


@click.command("add")
@click.option("--user", "user_id", required=True, help="User ID.")
@click.option("--product", "product_id", required=True, help="Product ID.")
def favorite_add(user_id: str, product_id: str) -> None:
    """Add a product to a user's favorites."""
    try:
        AddFavoriteHandler(user_repository()).handle(user_id, product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product '{product_id}' added to favorites.")


@click.command("remove")
@click.option("--user", "user_id", required=True, help="User ID.")
@click.option("--product", "product_id", required=True, help="Product ID.")
def favorite_remove(user_id: str, product_id: str) -> None:
    """Remove a product from a user's favorites."""
    try:
        RemoveFavoriteHandler(user_repository()).handle(user_id, product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product '{product_id}' removed from favorites.")


@click.command("list")
@click.option("--user", "user_id", required=True, help="User ID.")
def favorite_list(user_id: str) -> None:
    """List a user's favorite products."""
    handler = ShowFavoritesHandler(user_repository(), product_repository())

    try:
        favorites = handler.handle(user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not favorites:
        click.echo("No favorites yet.")
        return

    for favorite in favorites:
        if favorite.product is None:
            click.echo(f"  {favorite.product_id:<10} (no longer in the catalog)")
        else:
            click.echo(f"  {favorite.product_id:<10} {favorite.product.name:<24} ${favorite.product.price:.2f}")
