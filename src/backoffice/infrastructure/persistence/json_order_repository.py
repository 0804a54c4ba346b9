"""JSON-document implementation of OrderRepository.

Orders and their items live in separate tables linked by ``order_id``;
saving an order rewrites its item rows, so items dropped from the
aggregate disappear from storage with it.
"""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal

from backoffice.domain.model.order import Order, OrderItem
from backoffice.domain.model.order_status import OrderStatus
from backoffice.domain.model.value_objects import Money, Quantity
from backoffice.domain.repository.order_repository import OrderRepository
from backoffice.infrastructure.persistence.json_store import next_id, upsert

logger = logging.getLogger(__name__)


class JsonOrderRepository(OrderRepository):

    def __init__(self, document: dict) -> None:
        self._document = document

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._document["orders"]:
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Order]:
        return [self._to_domain(raw) for raw in self._document["orders"]]

    def save(self, order: Order) -> Order:
        if order.id is None:
            order.assign_id(next_id(self._document, "orders"))
            logger.debug("Assigned id %s to new order", order.id)

        for item in order.items:
            if item.id is None:
                item.id = next_id(self._document, "order_items")

        upsert(self._document["orders"], self._order_to_raw(order))

        # Rewrite this order's item rows; removed items are dropped here.
        rows = [r for r in self._document["order_items"] if r["order_id"] != order.id]
        rows.extend(self._item_to_raw(item) for item in order.items)
        self._document["order_items"] = rows
        return order

    def delete(self, order: Order) -> None:
        before = len(self._document["order_items"])
        self._document["order_items"] = [
            r for r in self._document["order_items"] if r["order_id"] != order.id
        ]
        self._document["orders"] = [
            r for r in self._document["orders"] if r["id"] != order.id
        ]
        logger.debug(
            "Deleted order %s and %d item(s)",
            order.id,
            before - len(self._document["order_items"]),
        )

    def list_items(self, order_id: int) -> list[OrderItem]:
        return [
            self._item_to_domain(r)
            for r in self._document["order_items"]
            if r["order_id"] == order_id
        ]

    def exists_for_customer(self, customer_id: int) -> bool:
        return any(r["customer_id"] == customer_id for r in self._document["orders"])

    def exists_for_product(self, product_id: int) -> bool:
        return any(
            r["product_id"] == product_id for r in self._document["order_items"]
        )

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _order_to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "customer_id": order.customer_id,
            "order_date": order.order_date.isoformat(),
            "status": order.status.value,
        }

    @staticmethod
    def _item_to_raw(item: OrderItem) -> dict:
        return {
            "id": item.id,
            "order_id": item.order_id,
            "product_id": item.product_id,
            "product_name": item.product_name,
            "quantity": item.quantity.value,
            "unit_price": str(item.unit_price.amount),
            "currency": item.unit_price.currency,
        }

    @staticmethod
    def _item_to_domain(raw: dict) -> OrderItem:
        return OrderItem(
            id=raw["id"],
            order_id=raw["order_id"],
            product_id=raw["product_id"],
            product_name=raw["product_name"],
            quantity=Quantity(raw["quantity"]),
            unit_price=Money(Decimal(raw["unit_price"]), raw.get("currency", "USD")),
        )

    def _to_domain(self, raw: dict) -> Order:
        return Order.reconstitute(
            order_id=raw["id"],
            customer_id=raw["customer_id"],
            order_date=date.fromisoformat(raw["order_date"]),
            status=OrderStatus(raw["status"]),
            items=self.list_items(raw["id"]),
        )
