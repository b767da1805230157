"""Application services: management reports (queries)."""

from __future__ import annotations

from dataclasses import dataclass

from autorepair.domain.model.order import OrderStatus
from autorepair.domain.model.value_objects import Money
from autorepair.domain.repository.order_repository import OrderRepository


@dataclass(frozen=True)
class RevenueReport:
    period: str
    total_revenue: Money
    order_count: int


@dataclass(frozen=True)
class ExecutionTimeReport:
    avg_execution_minutes: float
    orders_counted: int


class RevenueReportHandler:

    def __init__(self, order_repo: OrderRepository, currency: str = "BRL") -> None:
        self._order_repo = order_repo
        self._currency = currency

    def handle(self) -> RevenueReport:
        """Sum of every order total, all time."""
        orders = self._order_repo.list_all()
        revenue = Money.zero(self._currency)
        for order in orders:
            revenue = revenue + order.total
        return RevenueReport(period="all_time", total_revenue=revenue, order_count=len(orders))


class ExecutionTimeReportHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self) -> ExecutionTimeReport:
        """Mean time from approval (In execution) to Completed.

        Only finished orders carrying both timestamps are counted.
        """
        durations = [
            order.execution_time_minutes
            for order in self._order_repo.list_all()
            if order.status in (OrderStatus.COMPLETED, OrderStatus.DELIVERED)
            and order.execution_time_minutes is not None
        ]
        if not durations:
            return ExecutionTimeReport(avg_execution_minutes=0.0, orders_counted=0)
        return ExecutionTimeReport(
            avg_execution_minutes=sum(durations) / len(durations),
            orders_counted=len(durations),
        )
