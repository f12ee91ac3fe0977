"""Integration tests for the favorites use cases."""

import pytest

from storefront.application.add_favorite import AddFavoriteHandler
from storefront.application.remove_favorite import RemoveFavoriteHandler
from storefront.application.show_favorites import ShowFavoritesHandler
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import Product
from storefront.domain.model.user import User
from storefront.domain.model.value_objects import Money
from tests.fakes import FakeProductRepository, FakeUserRepository


def _setup():
    products = FakeProductRepository([
        Product(id="pizza", name="Margherita", price=Money.of("9.99")),
        Product(id="salad", name="Greek Salad", price=Money.of("6.50")),
    ])
    return FakeUserRepository([User(id="u-1")]), products


class TestFavorites:

    def test_add_twice_lists_once(self):
        users, products = _setup()
        add = AddFavoriteHandler(users)
        add.handle("u-1", "pizza")
        add.handle("u-1", "pizza")

        favorites = ShowFavoritesHandler(users, products).handle("u-1")
        assert [f.product_id for f in favorites] == ["pizza"]
        assert favorites[0].product.name == "Margherita"

    def test_remove_absent_is_noop(self):
        users, products = _setup()
        AddFavoriteHandler(users).handle("u-1", "salad")
        RemoveFavoriteHandler(users).handle("u-1", "pizza")

        favorites = ShowFavoritesHandler(users, products).handle("u-1")
        assert [f.product_id for f in favorites] == ["salad"]

    def test_remove(self):
        users, products = _setup()
        AddFavoriteHandler(users).handle("u-1", "salad")
        RemoveFavoriteHandler(users).handle("u-1", "salad")
        assert ShowFavoritesHandler(users, products).handle("u-1") == []

    def test_missing_catalog_product_is_a_placeholder(self):
        users, products = _setup()
        AddFavoriteHandler(users).handle("u-1", "pizza")
        AddFavoriteHandler(users).handle("u-1", "salad")
        products.remove("salad")

        favorites = ShowFavoritesHandler(users, products).handle("u-1")
        assert favorites[0].product is not None
        assert favorites[1].product is None

    def test_favorites_do_not_touch_the_cart(self):
        users, _ = _setup()
        AddFavoriteHandler(users).handle("u-1", "pizza")
        assert users.get_by_id("u-1").cart.is_empty

    def test_unknown_user_rejected(self):
        users, products = _setup()
        with pytest.raises(EntityNotFoundError):
            ShowFavoritesHandler(users, products).handle("ghost")
        with pytest.raises(EntityNotFoundError):
            AddFavoriteHandler(users).handle("ghost", "pizza")
