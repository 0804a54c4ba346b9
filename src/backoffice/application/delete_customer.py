"""Application service: Delete Customer use case."""

from __future__ import annotations

from backoffice.domain.exceptions import NotFoundError, ValidationError, ValidationReason
from backoffice.domain.repository.unit_of_work import UnitOfWorkFactory


class DeleteCustomerHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, customer_id: int) -> None:
        """Delete a customer that has never placed an order."""
        with self._uow_factory() as uow:
            customer = uow.customers.get_by_id(customer_id)
            if customer is None:
                raise NotFoundError("Customer", customer_id)
            if uow.orders.exists_for_customer(customer_id):
                raise ValidationError(
                    f"Customer #{customer_id} has orders and cannot be deleted",
                    ValidationReason.CUSTOMER_HAS_ORDERS,
                )

            uow.customers.delete(customer)
            uow.commit()
