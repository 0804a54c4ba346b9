"""Application service: Update Order Status use case.

Every status change goes through the state machine.  Re-applying the
current status is rejected like any other illegal transition, so a retry
of an already-applied change surfaces as InvalidTransitionError.
"""

from __future__ import annotations

from backoffice.application.dto import OrderDTO, to_order_dto
from backoffice.domain.exceptions import NotFoundError
from backoffice.domain.model.order_status import OrderStatus
from backoffice.domain.repository.unit_of_work import UnitOfWorkFactory


class UpdateOrderStatusHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, order_id: int, target: OrderStatus) -> OrderDTO:
        with self._uow_factory() as uow:
            order = uow.orders.get_by_id(order_id)
            if order is None:
                raise NotFoundError("Order", order_id)

            order.change_status(target)
            order.ensure_consistent()

            uow.orders.save(order)
            uow.commit()

        return to_order_dto(order)
