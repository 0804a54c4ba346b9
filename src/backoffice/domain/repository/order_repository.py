"""Abstract repository for Order aggregate.

Items are persisted as part of their order: saving an order writes its
current item set and deletes items that were removed from it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from backoffice.domain.model.order import Order, OrderItem


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order with its items, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order with its items."""

    @abstractmethod
    def save(self, order: Order) -> Order:
        """Persist a new or updated order.

        Assigns the order id and any missing item ids on first save;
        saving again with no changes is a no-op.
        """

    @abstractmethod
    def delete(self, order: Order) -> None:
        """Delete the order together with every item it owns."""

    @abstractmethod
    def list_items(self, order_id: int) -> list[OrderItem]:
        """Return the stored items that reference *order_id*."""

    @abstractmethod
    def exists_for_customer(self, customer_id: int) -> bool:
        """True if any order references the customer."""

    @abstractmethod
    def exists_for_product(self, product_id: int) -> bool:
        """True if any order item references the product."""
