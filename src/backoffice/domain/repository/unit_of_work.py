"""Abstract Unit of Work.

Every use case runs inside one unit of work::

    with uow:
        order = uow.orders.get_by_id(order_id)
        order.change_status(target)
        uow.orders.save(order)
        uow.commit()

Leaving the ``with`` block without ``commit()`` -- including through an
exception -- rolls back, so no partial state is ever visible.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from backoffice.domain.repository.customer_repository import CustomerRepository
from backoffice.domain.repository.order_repository import OrderRepository
from backoffice.domain.repository.product_repository import ProductRepository


class UnitOfWork(ABC):

    customers: CustomerRepository
    products: ProductRepository
    orders: OrderRepository

    def __enter__(self) -> UnitOfWork:
        self._committed = False
        self._begin()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if exc_type is not None or not self._committed:
            self.rollback()

    def commit(self) -> None:
        self._commit()
        self._committed = True

    @abstractmethod
    def rollback(self) -> None:
        """Discard every change made since the unit of work began."""

    @abstractmethod
    def _begin(self) -> None:
        """Open the transactional scope and bind the repositories."""

    @abstractmethod
    def _commit(self) -> None:
        """Make every change durable at once."""


UnitOfWorkFactory = Callable[[], UnitOfWork]
