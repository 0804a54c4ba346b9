"""Application service: Show / List Customers use cases (queries)."""

from __future__ import annotations

from backoffice.domain.exceptions import NotFoundError
from backoffice.domain.model.customer import Customer
from backoffice.domain.repository.unit_of_work import UnitOfWorkFactory


class ShowCustomerHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, customer_id: int) -> Customer:
        with self._uow_factory() as uow:
            customer = uow.customers.get_by_id(customer_id)
        if customer is None:
            raise NotFoundError("Customer", customer_id)
        return customer


class ListCustomersHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self) -> list[Customer]:
        with self._uow_factory() as uow:
            return sorted(uow.customers.list_all(), key=lambda c: c.id)
