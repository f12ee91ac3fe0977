"""Application service: Place Order (checkout) use case.

Turns a submitted order payload into a stored order and empties the
cart, in this order:

    VALIDATING -> SNAPSHOTTING -> PERSISTING -> CLEARING_CART -> DONE

Any failure before PERSISTING completes moves to FAILED with nothing
written.  Persisting the order is the commit point.  Clearing the cart
afterwards is best effort: if it fails the order still stands, and the
failure is returned in the result rather than raised.

Items added to the cart while a checkout is between SNAPSHOTTING and
CLEARING_CART are removed by the clear but are not part of the order.

The submitted total is recorded as given; it is not recomputed from
catalog prices.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from uuid import uuid4

import structlog

from storefront.application.catalog_join import CatalogJoin
from storefront.application.dto import CheckoutResult, OrderLineSpec
from storefront.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    StorageUnavailableError,
    ValidationError,
)
from storefront.domain.model.order import Order, OrderLine
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository
from storefront.domain.service.order_ledger import OrderLedger

logger = structlog.get_logger(__name__)


class CheckoutStage(Enum):
    VALIDATING = "validating"
    SNAPSHOTTING = "snapshotting"
    PERSISTING = "persisting"
    CLEARING_CART = "clearing_cart"
    DONE = "done"
    FAILED = "failed"


_FAILURE_EVENTS = {
    CheckoutStage.VALIDATING: "checkout.validation_failed",
    CheckoutStage.SNAPSHOTTING: "checkout.snapshot_failed",
    CheckoutStage.PERSISTING: "checkout.commit_failed",
}


class PlaceOrderHandler:

    def __init__(
        self,
        user_repo: UserRepository,
        product_repo: ProductRepository,
        order_repo: OrderRepository,
    ) -> None:
        self._user_repo = user_repo
        self._product_repo = product_repo
        self._ledger = OrderLedger(order_repo)

    def handle(
        self,
        user_id: str,
        item_specs: list[OrderLineSpec] | None,
        address: str | None,
        total_amount: str | float | int | Decimal | None,
    ) -> CheckoutResult:
        """Place an order for *user_id* and empty their cart.

        Raises:
            ValidationError: the payload is invalid; nothing was written.
            EntityNotFoundError: the user or a product does not exist;
                nothing was written.
            StorageUnavailableError: the order could not be stored;
                nothing was written.
        """
        log = logger.bind(user_id=user_id, checkout_id=uuid4().hex)
        stage = CheckoutStage.VALIDATING
        log.info("checkout.started", stage=stage.value)

        try:
            lines, total = self._validate(user_id, item_specs, address, total_amount)

            stage = CheckoutStage.SNAPSHOTTING
            snapshot = self._snapshot(lines)

            stage = CheckoutStage.PERSISTING
            order = self._ledger.create_order(user_id, lines, address or "", total)
        except DomainException as exc:
            log.warning(
                _FAILURE_EVENTS[stage],
                stage=stage.value,
                next_stage=CheckoutStage.FAILED.value,
                kind=exc.kind,
                reason=str(exc),
            )
            raise

        stage = CheckoutStage.CLEARING_CART
        cleanup_error = self._clear_cart(user_id, order, log)

        stage = CheckoutStage.DONE
        log.info(
            "checkout.completed",
            stage=stage.value,
            order_id=order.id,
            cart_cleared=cleanup_error is None,
        )
        return CheckoutResult(
            order=CatalogJoin(self._product_repo, known=snapshot).order(order),
            cart_cleared=cleanup_error is None,
            cleanup_error=cleanup_error,
        )

    # --- Stages ---------------------------------------------------------------

    def _validate(
        self,
        user_id: str,
        item_specs: list[OrderLineSpec] | None,
        address: str | None,
        total_amount: str | float | int | Decimal | None,
    ) -> tuple[list[OrderLine], Money]:
        if total_amount is None:
            raise ValidationError("Valid total amount is required")

        lines = [OrderLine.of(spec.product_id, spec.quantity) for spec in item_specs or []]
        total = Money.of(total_amount)
        Order.check(lines, address or "", total)

        self._user_repo.require(user_id)
        return lines, total

    def _snapshot(self, lines: list[OrderLine]) -> dict[str, Product]:
        """Check that every ordered product currently exists in the catalog."""
        products: dict[str, Product] = {}
        for line in lines:
            if line.product_id in products:
                continue
            try:
                product = self._product_repo.get_by_id(line.product_id)
            except StorageUnavailableError as exc:
                raise EntityNotFoundError(
                    f"Product could not be resolved: '{line.product_id}'"
                ) from exc
            if product is None:
                raise EntityNotFoundError(f"Product not found: '{line.product_id}'")
            products[line.product_id] = product
        return products

    def _clear_cart(self, user_id: str, order: Order, log) -> str | None:
        """Empty the cart after the order is stored.  Returns an error or None."""
        try:
            with self._user_repo.edit(user_id) as user:
                user.cart.clear()
        except DomainException as exc:
            log.error(
                "checkout.cart_clear_failed",
                stage=CheckoutStage.CLEARING_CART.value,
                order_id=order.id,
                kind=exc.kind,
                reason=str(exc),
            )
            return f"Order placed but the cart could not be cleared: {exc}"
        return None
