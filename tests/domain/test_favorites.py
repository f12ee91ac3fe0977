"""Unit tests for the favorites set."""

from storefront.domain.model.favorites import FavoriteSet


class TestFavoriteSet:

    def test_add(self):
        favorites = FavoriteSet()
        favorites.add("pizza")
        assert "pizza" in favorites

    def test_add_twice_same_as_once(self):
        once = FavoriteSet()
        once.add("pizza")

        twice = FavoriteSet()
        twice.add("pizza")
        twice.add("pizza")

        assert list(twice) == list(once) == ["pizza"]

    def test_keeps_insertion_order(self):
        favorites = FavoriteSet()
        for product_id in ["c", "a", "b"]:
            favorites.add(product_id)
        assert list(favorites) == ["c", "a", "b"]

    def test_remove(self):
        favorites = FavoriteSet(product_ids=["pizza", "salad"])
        favorites.remove("pizza")
        assert list(favorites) == ["salad"]

    def test_remove_absent_is_noop(self):
        favorites = FavoriteSet(product_ids=["salad"])
        favorites.remove("pizza")
        assert list(favorites) == ["salad"]
        assert len(favorites) == 1
