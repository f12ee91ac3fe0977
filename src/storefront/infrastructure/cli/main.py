import click
import uvicorn

from storefront.infrastructure import bootstrap
from storefront.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_remove,
    cart_show,
)
from storefront.infrastructure.cli.favorite_commands import (
    favorite_add,
    favorite_list,
    favorite_remove,
)
from storefront.infrastructure.cli.order_commands import (
    order_list,
    order_place,
    order_show,
)
from storefront.infrastructure.cli.user_commands import catalog_list, user_add
from storefront.infrastructure.logging import configure_logging


@click.group()
def cli() -> None:
    """Storefront — carts, favorites and orders"""
    configure_logging()


@cli.group()
def user() -> None:
    """Manage user records."""


@cli.group()
def catalog() -> None:
    """Inspect the product catalog."""


@cli.group()
def cart() -> None:
    """Manage carts."""


@cli.group()
def favorite() -> None:
    """Manage favorites."""


@cli.group()
def order() -> None:
    """Place and read orders."""


@cli.command("serve")
@click.option("--host", default=None, help="Bind address (default: STOREFRONT_HOST).")
@click.option("--port", default=None, type=int, help="Port (default: STOREFRONT_PORT).")
def serve(host: str | None, port: int | None) -> None:
    """Run the HTTP API."""
    from storefront.infrastructure.api.app import create_app

    settings = bootstrap.settings()
    uvicorn.run(create_app(), host=host or settings.host, port=port or settings.port)


# Register subcommands
user.add_command(user_add)
catalog.add_command(catalog_list)
cart.add_command(cart_add)
cart.add_command(cart_clear)
cart.add_command(cart_remove)
cart.add_command(cart_show)
favorite.add_command(favorite_add)
favorite.add_command(favorite_list)
favorite.add_command(favorite_remove)
order.add_command(order_list)
order.add_command(order_place)
order.add_command(order_show)
