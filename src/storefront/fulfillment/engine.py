"""Fulfillment engine — places, ships and cancels orders.

Owns the order state machine and the stock adjustment protocol. Stock is
deducted only after payment is authorized: undoing a deduction is cheap and
local, undoing a charge is not assumed possible.

Every operation runs under one engine-wide lock. Placement and cancellation
also hold the catalogue's stock lock, so a restock made straight against the
catalogue waits until the availability check and the deduction are done.
Notifications are collected while the lock is held and sent after it is
released; a failing notifier is logged and never fails the operation.
"""

import threading
from collections.abc import Mapping
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError

import structlog

from storefront.config import FulfillmentSettings
from storefront.errors import InsufficientStock, InvalidRequest, PaymentDeclined, ProductNotFound
from storefront.fulfillment.results import LineRequest, Outcome, TransitionResult
from storefront.fulfillment.stock_policy import LowStockPolicy
from storefront.fulfillment.stores import CatalogStore, OrderStore
from storefront.notifications.port import Notifier
from storefront.ordering.order import OrderStatus
from storefront.payments.port import PaymentAuthority

logger = structlog.get_logger(__name__)

PAYMENT_WORKERS = 4


class FulfillmentEngine:
    def __init__(
        self,
        catalog: CatalogStore,
        orders: OrderStore,
        payments: PaymentAuthority,
        notifier: Notifier,
        settings: FulfillmentSettings | None = None,
        low_stock_policy: LowStockPolicy | None = None,
    ) -> None:
        self.catalog = catalog
        self.orders = orders
        self.payments = payments
        self.notifier = notifier
        self.settings = settings or FulfillmentSettings()
        self.low_stock_policy = low_stock_policy or LowStockPolicy(self.settings.low_stock_threshold)

        self._lock = threading.RLock()
        self._executor_lock = threading.Lock()
        self._payment_executor: ThreadPoolExecutor | None = None

    # -------------------------------------------------------------------
    # Placement
    # -------------------------------------------------------------------
    def place_order(self, customer_id, lines, low_stock_threshold: int | None = None):
        """Validate, charge, deduct stock and record a Processed order.

        Raises InvalidRequest, ProductNotFound, InsufficientStock or
        PaymentDeclined; none of them leaves stock or the order book changed.
        """
        lines = self._validate_request(customer_id, lines)
        requested = self._quantities_by_product(lines)
        policy = self.low_stock_policy if low_stock_threshold is None else LowStockPolicy(low_stock_threshold)
        notifications = []

        with self._lock, self.catalog.stock_lock():
            products = self._check_availability(requested)

            order_lines = [
                {
                    "product_id": line.product_id,
                    "quantity": line.quantity,
                    "unit_price": products[line.product_id].price,
                }
                for line in lines
            ]
            total_amount = round(sum(line["unit_price"] * line["quantity"] for line in order_lines), 2)

            self._authorize_payment(customer_id, total_amount)

            previous_levels = {}
            try:
                for product_id, quantity in requested.items():
                    before = products[product_id].stock
                    updated = self.catalog.adjust_stock(product_id, before - quantity)
                    previous_levels[product_id] = before
                    if policy.is_low(updated):
                        notifications.append((self.notifier.stock_low, (updated,)))

                order = self.orders.create(customer_id, order_lines, total_amount, OrderStatus.PROCESSED)
            except Exception as exc:
                logger.error(
                    "Order placement failed after payment, restoring stock",
                    customer_id=customer_id,
                    total_amount=total_amount,
                    error=str(exc),
                )
                self._restore_levels(previous_levels)
                raise

        logger.info(
            "Order placed",
            order_id=order.order_id,
            customer_id=customer_id,
            total_amount=total_amount,
            line_count=len(order_lines),
        )
        notifications.append((self.notifier.order_confirmed, (customer_id, order)))
        self._dispatch(notifications)
        return order

    def _validate_request(self, customer_id, lines) -> list[LineRequest]:
        if customer_id is None or not str(customer_id).strip():
            raise InvalidRequest("Order must name a customer.")

        try:
            normalized = [LineRequest(**line) if isinstance(line, Mapping) else line for line in (lines or [])]
        except TypeError as exc:
            raise InvalidRequest(f"Order line must name product_id and quantity: {exc}") from exc
        if not normalized:
            raise InvalidRequest("Order must contain items.")

        for line in normalized:
            quantity = line.quantity
            if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
                raise InvalidRequest(f"Quantity for product {line.product_id} must be a positive integer, got {quantity!r}.")
        return normalized

    @staticmethod
    def _quantities_by_product(lines: list[LineRequest]) -> dict:
        totals: dict = {}
        for line in lines:
            totals[line.product_id] = totals.get(line.product_id, 0) + line.quantity
        return totals

    def _check_availability(self, requested: dict) -> dict:
        """Read every product once and verify it can cover the request."""
        products = {}
        for product_id, quantity in requested.items():
            product = self.catalog.lookup(product_id)
            if product is None:
                raise ProductNotFound(product_id)
            if quantity > product.stock:
                raise InsufficientStock(product_id, product.name, available=product.stock, requested=quantity)
            products[product_id] = product
        return products

    def _authorize_payment(self, customer_id, amount: float) -> None:
        timeout = self.settings.payment_timeout
        try:
            if timeout is None:
                result = self.payments.authorize(customer_id, amount)
            else:
                future = self._executor().submit(self.payments.authorize, customer_id, amount)
                result = future.result(timeout=timeout)
        except FutureTimeoutError:
            logger.warning("Payment authorization timed out", customer_id=customer_id, amount=amount, timeout=timeout)
            raise PaymentDeclined(customer_id, amount, f"authorization timed out after {timeout}s") from None
        except Exception as exc:
            logger.error("Payment authority failed", customer_id=customer_id, amount=amount, error=str(exc))
            raise PaymentDeclined(customer_id, amount, f"payment authority error: {exc}") from exc

        if not result.approved:
            reason = result.failure_reason or "declined"
            logger.info("Payment declined", customer_id=customer_id, amount=amount, reason=reason)
            raise PaymentDeclined(customer_id, amount, reason)

        logger.info("Payment authorized", customer_id=customer_id, amount=amount, reference=result.reference)

    def _executor(self) -> ThreadPoolExecutor:
        with self._executor_lock:
            if self._payment_executor is None:
                self._payment_executor = ThreadPoolExecutor(
                    max_workers=PAYMENT_WORKERS,
                    thread_name_prefix="payment-authority",
                )
            return self._payment_executor

    # -------------------------------------------------------------------
    # Shipment
    # -------------------------------------------------------------------
    def ship_order(self, order_id) -> TransitionResult:
        """Move a Processed order to Shipped. No stock or payment side effects."""
        with self._lock:
            order = self.orders.lookup(order_id)
            if order is None:
                logger.warning("Order cannot be shipped", order_id=order_id, status="Not Found")
                return TransitionResult(success=False, outcome=Outcome.NOT_FOUND, order_id=order_id)

            if not order.can_transition_to(OrderStatus.SHIPPED):
                logger.warning("Order cannot be shipped", order_id=order_id, status=order.status)
                return TransitionResult(
                    success=False,
                    outcome=Outcome.INVALID_STATE,
                    order_id=order_id,
                    status=order.status,
                )

            if not self.orders.set_status(order_id, OrderStatus.SHIPPED):
                logger.error("Failed to persist shipment", order_id=order_id)
                return TransitionResult(
                    success=False,
                    outcome=Outcome.PERSISTENCE_FAILED,
                    order_id=order_id,
                    status=order.status,
                )

        logger.info("Order marked as shipped", order_id=order_id)
        return TransitionResult(
            success=True,
            outcome=Outcome.SHIPPED,
            order_id=order_id,
            status=OrderStatus.SHIPPED.value,
        )

    # -------------------------------------------------------------------
    # Cancellation
    # -------------------------------------------------------------------
    def cancel_order(self, order_id, reason: str | None = None) -> TransitionResult:
        """Cancel a Pending or Processed order, returning deducted stock.

        Repeating the cancellation is a no-op reported as ALREADY_CANCELLED.
        """
        reason = (reason or "").strip() or self.settings.default_cancellation_reason

        with self._lock, self.catalog.stock_lock():
            order = self.orders.lookup(order_id)
            if order is None:
                logger.warning("Order cannot be cancelled", order_id=order_id, status="Not Found")
                return TransitionResult(success=False, outcome=Outcome.NOT_FOUND, order_id=order_id)

            status = OrderStatus(order.status)
            if status is OrderStatus.CANCELLED:
                logger.info("Order already cancelled", order_id=order_id)
                return TransitionResult(
                    success=False,
                    outcome=Outcome.ALREADY_CANCELLED,
                    order_id=order_id,
                    status=order.status,
                )

            if not order.can_transition_to(OrderStatus.CANCELLED):
                logger.warning("Order cannot be cancelled", order_id=order_id, status=order.status)
                return TransitionResult(
                    success=False,
                    outcome=Outcome.INVALID_STATE,
                    order_id=order_id,
                    status=order.status,
                )

            previous_levels, skipped = {}, []
            if status is OrderStatus.PROCESSED:
                previous_levels, skipped = self._replenish(order_id, order.quantities_by_product())

            if not self.orders.set_status(order_id, OrderStatus.CANCELLED):
                logger.error("Failed to persist cancellation, reverting replenishment", order_id=order_id)
                self._restore_levels(previous_levels)
                return TransitionResult(
                    success=False,
                    outcome=Outcome.PERSISTENCE_FAILED,
                    order_id=order_id,
                    status=order.status,
                )

        logger.info("Order cancelled", order_id=order_id, reason=reason, replenished=len(previous_levels))
        self._dispatch([(self.notifier.order_cancelled, (order.customer_id, order_id, reason))])
        return TransitionResult(
            success=True,
            outcome=Outcome.CANCELLED,
            order_id=order_id,
            status=OrderStatus.CANCELLED.value,
            reason=reason,
            skipped=tuple(skipped),
        )

    def _replenish(self, order_id, quantities: dict) -> tuple[dict, list]:
        """Add ordered quantities back to stock; skip products no longer catalogued."""
        previous_levels, skipped = {}, []
        for product_id, quantity in quantities.items():
            product = self.catalog.lookup(product_id)
            if product is None:
                logger.warning("Skipping replenishment for missing product", order_id=order_id, product_id=product_id)
                skipped.append(product_id)
                continue

            try:
                self.catalog.adjust_stock(product_id, product.stock + quantity)
            except ProductNotFound:
                logger.warning("Skipping replenishment for missing product", order_id=order_id, product_id=product_id)
                skipped.append(product_id)
                continue
            previous_levels[product_id] = product.stock
        return previous_levels, skipped

    def _restore_levels(self, levels: dict) -> None:
        for product_id, level in levels.items():
            self.catalog.adjust_stock(product_id, level)

    # -------------------------------------------------------------------
    # Restock
    # -------------------------------------------------------------------
    def restock(self, product_id, stock: int):
        """Set a product's absolute stock level between engine operations.

        Raises ProductNotFound when the product is not catalogued.
        """
        with self._lock, self.catalog.stock_lock():
            product = self.catalog.adjust_stock(product_id, stock)

        logger.info("Product restocked", product_id=product_id, stock=product.stock)
        return product

    # -------------------------------------------------------------------
    # Notifications & lifecycle
    # -------------------------------------------------------------------
    def _dispatch(self, notifications: list) -> None:
        for send, args in notifications:
            try:
                send(*args)
            except Exception as exc:
                logger.error(
                    "Notification failed",
                    notification=getattr(send, "__name__", repr(send)),
                    error=str(exc),
                )

    def shutdown(self) -> None:
        """Stop the payment worker pool."""
        with self._executor_lock:
            if self._payment_executor is not None:
                self._payment_executor.shutdown(wait=False, cancel_futures=True)
                self._payment_executor = None
