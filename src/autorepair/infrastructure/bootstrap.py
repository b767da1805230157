"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass

from autorepair.application.order_lifecycle import OrderLifecycleService
from autorepair.infrastructure.config import Settings
from autorepair.infrastructure.notification.console_notifier import ConsoleNotifier
from autorepair.infrastructure.persistence.json_client_repository import (
    JsonClientRepository,
    JsonVehicleRepository,
)
from autorepair.infrastructure.persistence.json_labor_repository import (
    JsonLaborRepository,
)
from autorepair.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from autorepair.infrastructure.persistence.json_part_repository import (
    JsonPartRepository,
)


@dataclass
class Container:
    settings: Settings
    order_repo: JsonOrderRepository
    part_repo: JsonPartRepository
    client_repo: JsonClientRepository
    vehicle_repo: JsonVehicleRepository
    labor_repo: JsonLaborRepository
    notifier: ConsoleNotifier

    def order_lifecycle(self) -> OrderLifecycleService:
        return OrderLifecycleService(
            order_repo=self.order_repo,
            part_repo=self.part_repo,
            client_repo=self.client_repo,
            notifier=self.notifier,
        )


def build_container(settings: Settings) -> Container:
    data_dir = settings.data_dir
    return Container(
        settings=settings,
        order_repo=JsonOrderRepository(data_dir / "orders.json"),
        part_repo=JsonPartRepository(data_dir / "parts.json"),
        client_repo=JsonClientRepository(data_dir / "clients.json"),
        vehicle_repo=JsonVehicleRepository(data_dir / "vehicles.json"),
        labor_repo=JsonLaborRepository(data_dir / "services.json"),
        notifier=ConsoleNotifier(sender=settings.notification_sender),
    )
