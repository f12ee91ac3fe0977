"""CLI commands for the cart."""

from __future__ import annotations

import click

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.clear_cart import ClearCartHandler
from storefront.application.dto import CartLineDTO
from storefront.application.remove_from_cart import RemoveFromCartHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import product_repository, user_repository


def _display_cart(lines: list[CartLineDTO]) -> None:
    if not lines:
        click.echo("Cart is empty.")
        return

    click.echo(f"  {'Product':<24} {'Qty':>5} {'Price':>10} {'Subtotal':>10}")
    click.echo(f"  {'-'*52}")
    for line in lines:
        if line.product is None:
            click.echo(f"  {line.product_id + ' (unavailable)':<24} {line.quantity:>5} {'-':>10} {'-':>10}")
            continue
        click.echo(
            f"  {line.product.name:<24} {line.quantity:>5} "
            f"{'$' + format(line.product.price, '.2f'):>10} {'$' + format(line.subtotal, '.2f'):>10}"
        )


@click.command("add")
@click.option("--user", "user_id", required=True, help="User ID.")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", default=1, show_default=True, type=int, help="Units to add.")
def cart_add(user_id: str, product_id: str, quantity: int) -> None:
    """Add a product to a user's cart."""
    handler = AddToCartHandler(user_repository(), product_repository())

    try:
        lines = handler.handle(user_id, product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(lines)


@click.command("remove")
@click.option("--user", "user_id", required=True, help="User ID.")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", default=None, type=int, help="Units to remove (default: the whole line).")
def cart_remove(user_id: str, product_id: str, quantity: int | None) -> None:
    """Remove a product (or some units of it) from a user's cart."""
    handler = RemoveFromCartHandler(user_repository(), product_repository())

    try:
        lines = handler.handle(user_id, product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(lines)


@click.command("show")
@click.option("--user", "user_id", required=True, help="User ID.")
def cart_show(user_id: str) -> None:
    """Show a user's cart with current catalog prices."""
    handler = ShowCartHandler(user_repository(), product_repository())

    try:
        lines = handler.handle(user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(lines)


@click.command("clear")
@click.option("--user", "user_id", required=True, help="User ID.")
def cart_clear(user_id: str) -> None:
    """Empty a user's cart."""
    try:
        ClearCartHandler(user_repository()).handle(user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Cart cleared.")
