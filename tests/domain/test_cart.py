"""Unit tests for the Cart aggregate."""

import pytest

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.cart import Cart


def _quantities(cart: Cart) -> dict[str, int]:
    return {line.product_id: line.quantity.value for line in cart.lines}


class TestAddItem:

    def test_first_add_appends_line(self):
        cart = Cart()
        cart.add_item("pizza", 2)
        assert _quantities(cart) == {"pizza": 2}

    def test_repeat_add_accumulates(self):
        cart = Cart()
        cart.add_item("pizza", 2)
        cart.add_item("pizza", 3)
        assert _quantities(cart) == {"pizza": 5}
        assert len(cart.lines) == 1

    def test_different_products_get_separate_lines_in_order(self):
        cart = Cart()
        cart.add_item("pizza", 1)
        cart.add_item("salad", 4)
        assert [line.product_id for line in cart.lines] == ["pizza", "salad"]

    @pytest.mark.parametrize("qty", [0, -2])
    def test_non_positive_quantity_rejected(self, qty):
        cart = Cart()
        with pytest.raises(ValidationError, match="must be positive"):
            cart.add_item("pizza", qty)
        assert cart.is_empty

    def test_blank_product_id_rejected(self):
        with pytest.raises(ValidationError, match="Product id is required"):
            Cart().add_item("  ", 1)


class TestRemoveItem:

    def _cart(self, qty: int = 5) -> Cart:
        cart = Cart()
        cart.add_item("pizza", qty)
        return cart

    def test_partial_remove_updates_in_place(self):
        cart = self._cart(5)
        cart.remove_item("pizza", 2)
        assert _quantities(cart) == {"pizza": 3}

    def test_remove_exact_quantity_deletes_line(self):
        cart = self._cart(3)
        cart.remove_item("pizza", 3)
        assert cart.is_empty

    def test_remove_more_than_present_deletes_line(self):
        cart = self._cart(3)
        cart.remove_item("pizza", 10)
        assert cart.is_empty

    @pytest.mark.parametrize("qty", [None, 0, -4])
    def test_missing_or_non_positive_quantity_deletes_whole_line(self, qty):
        cart = self._cart(7)
        cart.remove_item("pizza", qty)
        assert cart.is_empty

    def test_remove_leaves_other_lines_alone(self):
        cart = self._cart(2)
        cart.add_item("salad", 1)
        cart.remove_item("pizza")
        assert _quantities(cart) == {"salad": 1}

    def test_unknown_line_rejected(self):
        cart = self._cart(2)
        with pytest.raises(EntityNotFoundError, match="not found in the user's cart"):
            cart.remove_item("sushi", 1)
        assert _quantities(cart) == {"pizza": 2}


class TestClear:

    def test_clear_empties_cart(self):
        cart = Cart()
        cart.add_item("pizza", 2)
        cart.clear()
        assert cart.is_empty

    def test_clear_twice_is_noop(self):
        cart = Cart()
        cart.clear()
        cart.clear()
        assert cart.is_empty
