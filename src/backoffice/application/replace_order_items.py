"""Application service: Replace Order Items use case.

Swaps an order's whole item set inside one unit of work: every current
item is removed (and later deleted by the repository) before the new
ones are added.  Terminal orders are locked.
"""

from __future__ import annotations

from backoffice.application.dto import OrderDTO, OrderItemSpec, to_order_dto
from backoffice.application.order_items import build_order_items
from backoffice.domain.exceptions import NotFoundError, ValidationError, ValidationReason
from backoffice.domain.repository.unit_of_work import UnitOfWorkFactory


class ReplaceOrderItemsHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, order_id: int, item_specs: list[OrderItemSpec]) -> OrderDTO:
        if not item_specs:
            raise ValidationError(
                "Order must contain at least one item", ValidationReason.EMPTY_ORDER
            )

        with self._uow_factory() as uow:
            order = uow.orders.get_by_id(order_id)
            if order is None:
                raise NotFoundError("Order", order_id)
            if order.is_terminal:
                raise ValidationError(
                    f"Order #{order_id} is {order.status.value}; items can no longer change",
                    ValidationReason.ORDER_LOCKED,
                )

            new_items = build_order_items(uow.products, item_specs)

            order.clear_items()
            for item in new_items:
                order.add_item(item)
            order.ensure_consistent()

            uow.orders.save(order)
            uow.commit()

        return to_order_dto(order)
