"""Application service: Create Order use case.

Orchestrates the flow between repositories and the domain model.
Customer and product lookups, item construction and the save all happen
inside a single unit of work.
"""

from __future__ import annotations

from backoffice.application.dto import OrderDTO, OrderItemSpec, to_order_dto
from backoffice.application.order_items import build_order_items
from backoffice.domain.exceptions import NotFoundError, ValidationError, ValidationReason
from backoffice.domain.model.order import Order
from backoffice.domain.repository.unit_of_work import UnitOfWorkFactory


class CreateOrderHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, customer_id: int, item_specs: list[OrderItemSpec]) -> OrderDTO:
        """Create a new order.

        Steps:
        1. Reject an empty item list outright.
        2. Resolve the customer and each product (fail if not found).
        3. Build OrderItems with the quoted or current price (snapshot).
        4. Let the Order aggregate validate, then persist and commit.
        """
        if not item_specs:
            raise ValidationError(
                "Order must contain at least one item", ValidationReason.EMPTY_ORDER
            )

        with self._uow_factory() as uow:
            if uow.customers.get_by_id(customer_id) is None:
                raise NotFoundError("Customer", customer_id)

            items = build_order_items(uow.products, item_specs)
            order = Order.create(customer_id=customer_id, items=items)
            order.ensure_consistent()

            uow.orders.save(order)
            uow.commit()

        return to_order_dto(order)
