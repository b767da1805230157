"""Application service: Order Lifecycle.

Drives a service order through the shop's workflow:

    Received -> In diagnosis -> Awaiting approval -> In execution
             -> Completed -> Delivered

with two detours: an order may be approved straight from Received, and a
rejected budget sends an Awaiting approval order back to Received.

Every operation follows the same steps:

1. load the order (EntityNotFoundError if absent);
2. check the source status (InvalidStateTransitionError);
3. apply the mutation, including stock reservation on approval;
4. save the order, letting any persistence error reach the caller;
5. notify the client, best effort.

Step 5 never fails the operation.  Its result is reported as a
``NotificationOutcome`` on the returned ``TransitionResult``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from uuid import UUID

from autorepair.domain.exceptions import (
    EntityNotFoundError,
    InvalidStateTransitionError,
)
from autorepair.domain.model.client import Client
from autorepair.domain.model.order import Order, OrderStatus
from autorepair.domain.repository.client_repository import ClientRepository
from autorepair.domain.repository.order_repository import OrderRepository
from autorepair.domain.repository.part_repository import PartRepository
from autorepair.domain.service.notifier import NotificationOutcome, Notifier
from autorepair.domain.service.stock_reservation_service import (
    StockReservationService,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransitionResult:
    """Outcome of a successful lifecycle operation."""

    order: Order
    previous_status: OrderStatus
    notification: NotificationOutcome

    @property
    def status(self) -> OrderStatus:
        return self.order.status


# --- Message templates --------------------------------------------------------


def _status_update_message(order: Order, client: Client) -> tuple[str, str]:
    subject = f"Order Update: {order.status.value}"
    body = (
        f"Hello {client.name}, your order {order.id} status has been "
        f"updated to: {order.status.value}"
    )
    return subject, body


def _budget_ready_message(order: Order, client: Client) -> tuple[str, str]:
    subject = "Order Budget Ready"
    body = f"Your budget for order {order.id} is ready. Total: {order.total}"
    return subject, body


def _budget_rejected_message(order: Order, client: Client) -> tuple[str, str]:
    subject = "Order Budget Rejected"
    body = (
        f"Hello {client.name}, the budget for order {order.id} has been "
        f"rejected. The order has been returned to Received status."
    )
    return subject, body


class OrderLifecycleService:

    def __init__(
        self,
        order_repo: OrderRepository,
        part_repo: PartRepository,
        client_repo: ClientRepository,
        notifier: Notifier,
    ) -> None:
        self._order_repo = order_repo
        self._part_repo = part_repo
        self._client_repo = client_repo
        self._notifier = notifier

    # --- Transitions ----------------------------------------------------------

    def start_diagnosis(self, order_id: UUID) -> TransitionResult:
        order = self._load(order_id)
        self._require(order, "start diagnosis", OrderStatus.RECEIVED)
        return self._commit(order, OrderStatus.IN_DIAGNOSIS, _status_update_message)

    def send_budget(self, order_id: UUID) -> TransitionResult:
        order = self._load(order_id)
        self._require(order, "send budget", OrderStatus.IN_DIAGNOSIS)
        return self._commit(order, OrderStatus.AWAITING_APPROVAL, _budget_ready_message)

    def approve_order(self, order_id: UUID) -> TransitionResult:
        """Approve the budget and take the order's parts out of stock.

        On InsufficientStockError nothing is decremented and the order is
        left untouched.
        """
        order = self._load(order_id)
        self._require(
            order,
            "approve order",
            OrderStatus.RECEIVED,
            OrderStatus.AWAITING_APPROVAL,
        )
        StockReservationService(self._part_repo).reserve_for_order(order)
        return self._commit(order, OrderStatus.IN_EXECUTION, _status_update_message)

    def reject_budget(self, order_id: UUID) -> TransitionResult:
        order = self._load(order_id)
        self._require(order, "reject budget", OrderStatus.AWAITING_APPROVAL)
        return self._commit(order, OrderStatus.RECEIVED, _budget_rejected_message)

    def respond_to_budget(self, order_id: UUID, approved: bool) -> TransitionResult:
        """Client's answer to a budget: approve or reject it."""
        if approved:
            return self.approve_order(order_id)
        return self.reject_budget(order_id)

    def finish_order(self, order_id: UUID) -> TransitionResult:
        order = self._load(order_id)
        self._require(order, "finish order", OrderStatus.IN_EXECUTION)
        return self._commit(order, OrderStatus.COMPLETED, _status_update_message)

    def deliver_order(self, order_id: UUID) -> TransitionResult:
        order = self._load(order_id)
        self._require(order, "deliver order", OrderStatus.COMPLETED)
        return self._commit(order, OrderStatus.DELIVERED, _status_update_message)

    def update_status(self, order_id: UUID, status: OrderStatus | str) -> TransitionResult:
        """Operator override.

        The value must be one of the known statuses, but the transition
        table is NOT consulted and no stock or timestamp side effects run.
        """
        target = status if isinstance(status, OrderStatus) else OrderStatus.parse(status)
        order = self._load(order_id)
        previous = order.status
        order.override_status(target)
        self._order_repo.save(order)
        logger.warning(
            "Order %s status overridden: %s -> %s",
            order.id, previous.value, target.value,
        )
        notification = self._notify(order, _status_update_message)
        return TransitionResult(order, previous, notification)

    # --- Queries --------------------------------------------------------------

    def list_active(self) -> list[Order]:
        return self._order_repo.list_active()

    # --- Internal helpers -----------------------------------------------------

    def _load(self, order_id: UUID) -> Order:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order {order_id} not found")
        return order

    @staticmethod
    def _require(order: Order, operation: str, *allowed: OrderStatus) -> None:
        if order.status not in allowed:
            raise InvalidStateTransitionError(
                operation,
                current=order.status.value,
                required=tuple(s.value for s in allowed),
            )

    def _commit(self, order: Order, target: OrderStatus, template) -> TransitionResult:
        previous = order.status
        order.move_to(target)
        self._order_repo.save(order)
        logger.info("Order %s: %s -> %s", order.id, previous.value, target.value)
        notification = self._notify(order, template)
        return TransitionResult(order, previous, notification)

    def _notify(self, order: Order, template) -> NotificationOutcome:
        # The order is already saved; nothing below may fail the operation.
        try:
            client = self._client_repo.get_by_id(order.client_id)
        except Exception as exc:
            logger.warning(
                "Client lookup failed for order %s: %s", order.id, exc, exc_info=True
            )
            return NotificationOutcome.failed(f"client lookup failed: {exc}")
        if client is None:
            logger.warning(
                "Client %s not found; order %s update not notified",
                order.client_id, order.id,
            )
            return NotificationOutcome.failed(f"client {order.client_id} not found")

        subject, body = template(order, client)
        try:
            self._notifier.send_email(client.email, subject, body)
        except Exception as exc:
            logger.warning(
                "Notification for order %s not sent: %s", order.id, exc, exc_info=True
            )
            return NotificationOutcome.failed(str(exc), client.email, subject)
        return NotificationOutcome.sent(client.email, subject)
