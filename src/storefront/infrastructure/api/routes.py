"""FastAPI routes for carts, favorites and orders.

Every route needs a verified user (see ``identity``).  Routes are plain
``def`` functions: FastAPI runs them in its worker threadpool, so a
request waiting on storage never holds up another one.
"""

from dataclasses import asdict

from fastapi import APIRouter, Depends, Request

from storefront.application.add_favorite import AddFavoriteHandler
from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.clear_cart import ClearCartHandler
from storefront.application.dto import OrderLineSpec
from storefront.application.list_orders import ListOrdersHandler
from storefront.application.place_order import PlaceOrderHandler
from storefront.application.remove_favorite import RemoveFavoriteHandler
from storefront.application.remove_from_cart import RemoveFromCartHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.application.show_favorites import ShowFavoritesHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.infrastructure.api.identity import current_user_id
from storefront.infrastructure.api.schemas import (
    CartItemRequest,
    FavoriteRequest,
    PlaceOrderRequest,
    RemoveCartItemRequest,
)
from storefront.infrastructure.bootstrap import Repositories

router = APIRouter(prefix="/api/user", tags=["user"])


def _repos(request: Request) -> Repositories:
    return request.app.state.repositories


# ---------------------------------------------------------------------------
# Cart
# ---------------------------------------------------------------------------
@router.post("/cart")
def add_to_cart(
    body: CartItemRequest,
    user_id: str = Depends(current_user_id),
    repos: Repositories = Depends(_repos),
):
    handler = AddToCartHandler(repos.users, repos.products)
    cart = handler.handle(user_id, body.product_id, body.quantity)
    return {
        "message": "Product added to cart successfully",
        "cart": [asdict(line) for line in cart],
    }


@router.patch("/cart")
def remove_from_cart(
    body: RemoveCartItemRequest,
    user_id: str = Depends(current_user_id),
    repos: Repositories = Depends(_repos),
):
    handler = RemoveFromCartHandler(repos.users, repos.products)
    cart = handler.handle(user_id, body.product_id, body.quantity)
    return {
        "message": "Product quantity updated in cart",
        "cart": [asdict(line) for line in cart],
    }


@router.get("/cart")
def get_cart(
    user_id: str = Depends(current_user_id),
    repos: Repositories = Depends(_repos),
):
    lines = ShowCartHandler(repos.users, repos.products).handle(user_id)
    return [asdict(line) for line in lines]


@router.delete("/cart")
def clear_cart(
    user_id: str = Depends(current_user_id),
    repos: Repositories = Depends(_repos),
):
    ClearCartHandler(repos.users).handle(user_id)
    return {"message": "Cart cleared"}


# ---------------------------------------------------------------------------
# Favorites
# ---------------------------------------------------------------------------
@router.post("/favorite")
def add_to_favorites(
    body: FavoriteRequest,
    user_id: str = Depends(current_user_id),
    repos: Repositories = Depends(_repos),
):
    AddFavoriteHandler(repos.users).handle(user_id, body.product_id)
    return {"message": "Product added to favorites successfully"}


@router.patch("/favorite")
def remove_from_favorites(
    body: FavoriteRequest,
    user_id: str = Depends(current_user_id),
    repos: Repositories = Depends(_repos),
):
    RemoveFavoriteHandler(repos.users).handle(user_id, body.product_id)
    return {"message": "Product removed from favorites successfully"}


@router.get("/favorite")
def get_favorites(
    user_id: str = Depends(current_user_id),
    repos: Repositories = Depends(_repos),
):
    favorites = ShowFavoritesHandler(repos.users, repos.products).handle(user_id)
    return [asdict(favorite) for favorite in favorites]


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
@router.post("/order")
def place_order(
    body: PlaceOrderRequest,
    user_id: str = Depends(current_user_id),
    repos: Repositories = Depends(_repos),
):
    handler = PlaceOrderHandler(repos.users, repos.products, repos.orders)
    result = handler.handle(
        user_id=user_id,
        item_specs=[OrderLineSpec(p.product, p.quantity) for p in body.products],
        address=body.address,
        total_amount=body.total_amount,
    )
    return {
        "message": "Order placed successfully",
        "order": asdict(result.order),
        "cart_cleared": result.cart_cleared,
        "cleanup_error": result.cleanup_error,
    }


@router.get("/order")
def get_all_orders(
    user_id: str = Depends(current_user_id),
    repos: Repositories = Depends(_repos),
):
    orders = ListOrdersHandler(repos.orders, repos.products).handle(user_id)
    return {
        "orders": [asdict(order) for order in orders],
        "count": len(orders),
        "success": True,
    }


@router.get("/order/{order_id}")
def get_order(
    order_id: str,
    user_id: str = Depends(current_user_id),
    repos: Repositories = Depends(_repos),
):
    order = ShowOrderHandler(repos.orders, repos.products).handle(order_id, user_id=user_id)
    return asdict(order)
