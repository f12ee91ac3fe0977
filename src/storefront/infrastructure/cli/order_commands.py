"""CLI commands for placing and reading orders."""

from __future__ import annotations

import click

from storefront.application.dto import OrderDTO, OrderLineSpec
from storefront.application.list_orders import ListOrdersHandler
from storefront.application.place_order import PlaceOrderHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import (
    order_repository,
    product_repository,
    user_repository,
)


def _parse_items(raw: str) -> list[OrderLineSpec]:
    """Parse 'p1:3,p2:5' into OrderLineSpec list."""
    specs: list[OrderLineSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        product_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        specs.append(OrderLineSpec(product_id=product_id.strip(), quantity=qty))
    return specs


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Created:  {dto.created_at.strftime('%Y-%m-%d %H:%M UTC')}")
    click.echo(f"Address:  {dto.address}")
    click.echo()
    click.echo(f"  {'Product':<24} {'Qty':>5}")
    click.echo(f"  {'-'*30}")
    for line in dto.products:
        name = line.product.name if line.product else f"{line.product_id} (unavailable)"
        click.echo(f"  {name:<24} {line.quantity:>5}")
    click.echo(f"  {'-'*30}")
    click.echo(f"  {'Total Amount':<20} ${dto.total_amount:.2f}")


@click.command("place")
@click.option("--user", "user_id", required=True, help="User ID.")
@click.option("--address", required=True, help="Delivery address.")
@click.option("--total", "total_amount", required=True, help="Total amount paid (e.g. 19.98).")
@click.option("--items", default=None, help="Items as 'ProductId:Qty,...' (default: the user's cart).")
def order_place(user_id: str, address: str, total_amount: str, items: str | None) -> None:
    """Place an order and empty the user's cart."""
    try:
        if items:
            specs = _parse_items(items)
        else:
            cart = ShowCartHandler(user_repository(), product_repository()).handle(user_id)
            specs = [OrderLineSpec(line.product_id, line.quantity) for line in cart]

        handler = PlaceOrderHandler(user_repository(), product_repository(), order_repository())
        result = handler.handle(user_id, specs, address, total_amount)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(result.order)
    if not result.cart_cleared:
        click.echo(f"Warning: {result.cleanup_error}", err=True)


@click.command("list")
@click.option("--user", "user_id", required=True, help="User ID.")
def order_list(user_id: str) -> None:
    """List a user's orders, newest first."""
    try:
        orders = ListOrdersHandler(order_repository(), product_repository()).handle(user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'Order':<34} {'Created':<18} {'Status':<14} {'Total':>10}")
    click.echo("-" * 79)
    for dto in orders:
        click.echo(
            f"{dto.id:<34} {dto.created_at.strftime('%Y-%m-%d %H:%M'):<18} "
            f"{dto.status:<14} {'$' + format(dto.total_amount, '.2f'):>10}"
        )


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
def order_show(order_id: str) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repository(), product_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)
