"""Unit tests for the Order aggregate and its business rules."""

import dataclasses
from decimal import Decimal

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.order import Order, OrderLine, OrderStatus
from storefront.domain.model.value_objects import Money, Quantity


def _create(lines=None, address="123 Main St", total="19.98") -> Order:
    if lines is None:
        lines = [OrderLine.of("pizza", 2)]
    return Order.create(
        order_id="o-1",
        user_id="u-1",
        products=lines,
        address=address,
        total_amount=Money.of(total),
    )


class TestOrderCreation:

    def test_happy_path(self):
        order = _create()
        assert order.id == "o-1"
        assert order.user_id == "u-1"
        assert order.products == (OrderLine("pizza", Quantity(2)),)
        assert order.address == "123 Main St"
        assert order.total_amount.amount == Decimal("19.98")
        assert order.status == OrderStatus.PAYMENT_DONE
        assert order.created_at.tzinfo is not None

    def test_address_is_trimmed(self):
        assert _create(address="  9 Elm Rd ").address == "9 Elm Rd"

    def test_status_values_match_stored_strings(self):
        assert OrderStatus.PAYMENT_DONE.value == "Payment Done"
        assert OrderStatus.PAYMENT_FAILED.value == "Payment Failed"


class TestOrderValidation:

    def test_no_products_rejected(self):
        with pytest.raises(ValidationError, match="cannot be empty"):
            _create(lines=[])

    @pytest.mark.parametrize("address", ["", "   "])
    def test_blank_address_rejected(self, address):
        with pytest.raises(ValidationError, match="Address is required"):
            _create(address=address)

    def test_zero_total_rejected(self):
        with pytest.raises(ValidationError, match="Valid total amount"):
            _create(total="0")

    def test_zero_quantity_line_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            OrderLine.of("pizza", 0)

    def test_blank_product_line_rejected(self):
        with pytest.raises(ValidationError, match="product id"):
            OrderLine.of("", 1)


class TestOrderImmutability:

    def test_fields_cannot_be_reassigned(self):
        order = _create()
        with pytest.raises(dataclasses.FrozenInstanceError):
            order.address = "elsewhere"

    def test_products_is_a_tuple(self):
        lines = [OrderLine.of("pizza", 1)]
        order = _create(lines)
        lines.append(OrderLine.of("salad", 1))
        assert len(order.products) == 1
