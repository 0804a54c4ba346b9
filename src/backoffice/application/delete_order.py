"""Application service: Delete Order use case.

Deleting an order deletes every item it owns in the same unit of work.
"""

from __future__ import annotations

from backoffice.domain.exceptions import NotFoundError
from backoffice.domain.repository.unit_of_work import UnitOfWorkFactory


class DeleteOrderHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, order_id: int) -> None:
        with self._uow_factory() as uow:
            order = uow.orders.get_by_id(order_id)
            if order is None:
                raise NotFoundError("Order", order_id)

            uow.orders.delete(order)
            uow.commit()
