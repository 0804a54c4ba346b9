"""Application service: List Orders use case (query)."""

from __future__ import annotations

from backoffice.application.dto import OrderDTO, to_order_dto
from backoffice.domain.model.order_status import OrderStatus
from backoffice.domain.repository.unit_of_work import UnitOfWorkFactory


class ListOrdersHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(
        self,
        customer_id: int | None = None,
        status: OrderStatus | None = None,
    ) -> list[OrderDTO]:
        """Return every order, optionally narrowed by customer and/or status."""
        with self._uow_factory() as uow:
            orders = uow.orders.list_all()

        if customer_id is not None:
            orders = [o for o in orders if o.customer_id == customer_id]
        if status is not None:
            orders = [o for o in orders if o.status == status]
        return [to_order_dto(o) for o in sorted(orders, key=lambda o: o.id)]
