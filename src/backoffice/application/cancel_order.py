"""Application service: Cancel Order use case.

Cancelling is an ordinary status change to CANCELLED; shipped and
delivered orders cannot be cancelled.
"""

from __future__ import annotations

from backoffice.application.dto import OrderDTO
from backoffice.application.update_order_status import UpdateOrderStatusHandler
from backoffice.domain.model.order_status import OrderStatus
from backoffice.domain.repository.unit_of_work import UnitOfWorkFactory


class CancelOrderHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._update_status = UpdateOrderStatusHandler(uow_factory)

    def handle(self, order_id: int) -> OrderDTO:
        return self._update_status.handle(order_id, OrderStatus.CANCELLED)
