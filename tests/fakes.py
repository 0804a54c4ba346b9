"""In-memory fakes for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in dicts. No file I/O, no side effects.
"""

from __future__ import annotations

import copy

from backoffice.domain.model.customer import Customer
from backoffice.domain.model.order import Order, OrderItem
from backoffice.domain.model.product import Product
from backoffice.domain.repository.customer_repository import CustomerRepository
from backoffice.domain.repository.order_repository import OrderRepository
from backoffice.domain.repository.product_repository import ProductRepository
from backoffice.domain.repository.unit_of_work import UnitOfWork


class FakeOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[int, Order] = {}
        # item id -> (owning order id at save time, item)
        self._items: dict[int, tuple[int, OrderItem]] = {}
        self._next_id = 1
        self._next_item_id = 1
        self.saves = 0

    def get_by_id(self, order_id: int) -> Order | None:
        return self._store.get(order_id)

    def list_all(self) -> list[Order]:
        return list(self._store.values())

    def save(self, order: Order) -> Order:
        self.saves += 1
        if order.id is None:
            order.assign_id(self._next_id)
            self._next_id += 1
        for item in order.items:
            if item.id is None:
                item.id = self._next_item_id
                self._next_item_id += 1

        self._drop_items_of(order.id)  # type: ignore[arg-type]
        for item in order.items:
            self._items[item.id] = (order.id, item)  # type: ignore[index]
        self._store[order.id] = order  # type: ignore[index]
        return order

    def delete(self, order: Order) -> None:
        self._store.pop(order.id, None)  # type: ignore[arg-type]
        self._drop_items_of(order.id)  # type: ignore[arg-type]

    def list_items(self, order_id: int) -> list[OrderItem]:
        return [item for owner, item in self._items.values() if owner == order_id]

    def all_items(self) -> list[OrderItem]:
        return [item for _, item in self._items.values()]

    def exists_for_customer(self, customer_id: int) -> bool:
        return any(o.customer_id == customer_id for o in self._store.values())

    def exists_for_product(self, product_id: int) -> bool:
        return any(i.product_id == product_id for _, i in self._items.values())

    def _drop_items_of(self, order_id: int) -> None:
        self._items = {
            item_id: (owner, item)
            for item_id, (owner, item) in self._items.items()
            if owner != order_id
        }


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[int, Product] = {}
        self._next_id = 1
        for p in products or []:
            self.save(p)

    def get_by_id(self, product_id: int) -> Product | None:
        return self._store.get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> Product:
        if product.id is None:
            product.id = self._next_id
        self._next_id = max(self._next_id, product.id + 1)
        self._store[product.id] = product
        return product

    def delete(self, product: Product) -> None:
        self._store.pop(product.id, None)  # type: ignore[arg-type]


class FakeCustomerRepository(CustomerRepository):

    def __init__(self, customers: list[Customer] | None = None) -> None:
        self._store: dict[int, Customer] = {}
        self._next_id = 1
        for c in customers or []:
            self.save(c)

    def get_by_id(self, customer_id: int) -> Customer | None:
        return self._store.get(customer_id)

    def get_by_email(self, email: str) -> Customer | None:
        for c in self._store.values():
            if c.email.lower() == email.lower():
                return c
        return None

    def get_by_cpf(self, cpf: str) -> Customer | None:
        for c in self._store.values():
            if c.cpf == cpf:
                return c
        return None

    def list_all(self) -> list[Customer]:
        return list(self._store.values())

    def save(self, customer: Customer) -> Customer:
        if customer.id is None:
            customer.id = self._next_id
        self._next_id = max(self._next_id, customer.id + 1)
        self._store[customer.id] = customer
        return customer

    def delete(self, customer: Customer) -> None:
        self._store.pop(customer.id, None)  # type: ignore[arg-type]


class FakeUnitOfWork(UnitOfWork):
    """Unit of work over the in-memory repositories.

    A deep copy is taken when the unit of work begins and restored on
    rollback.  ``begins`` and ``commits`` let tests assert whether a
    use case touched storage at all.
    """

    def __init__(
        self,
        customers: list[Customer] | None = None,
        products: list[Product] | None = None,
    ) -> None:
        self.customers = FakeCustomerRepository(customers)
        self.products = FakeProductRepository(products)
        self.orders = FakeOrderRepository()
        self.begins = 0
        self.commits = 0
        self._snapshot: tuple | None = None

    def _begin(self) -> None:
        self.begins += 1
        self._snapshot = copy.deepcopy((self.customers, self.products, self.orders))

    def _commit(self) -> None:
        self.commits += 1
        self._snapshot = None

    def rollback(self) -> None:
        if self._snapshot is not None:
            self.customers, self.products, self.orders = self._snapshot
            self._snapshot = None

    def factory(self) -> FakeUnitOfWork:
        return self
