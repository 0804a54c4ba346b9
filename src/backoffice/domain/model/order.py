"""Order aggregate — the core of the domain.

The Order is an aggregate root that owns its items.  Items carry the id
of their order only as an integrity marker; navigation always goes
through the owning Order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from backoffice.domain.exceptions import ValidationError, ValidationReason
from backoffice.domain.model.order_status import (
    INITIAL_STATUS,
    OrderStatus,
    apply_transition,
    is_terminal,
)
from backoffice.domain.model.value_objects import Money, Quantity, require_price


@dataclass(eq=False)
class OrderItem:
    """A product line inside an order, with its unit price snapshot.

    ``unit_price`` is copied in when the item is created and never re-read
    from the product afterwards (price lock).  Two persisted items with the
    same ``id`` are the same item; unsaved items are only equal to
    themselves.
    """

    product_id: int
    product_name: str
    quantity: Quantity
    unit_price: Money  # locked at order-creation time
    id: int | None = None
    order_id: int | None = None

    @staticmethod
    def create(
        product_id: int,
        product_name: str,
        quantity: int,
        unit_price: Money | str | int,
    ) -> OrderItem:
        """Build a new item, validating quantity and price."""
        price = unit_price if isinstance(unit_price, Money) else Money.of(unit_price)
        require_price(price)
        return OrderItem(
            product_id=product_id,
            product_name=product_name,
            quantity=Quantity(quantity),
            unit_price=price,
        )

    @property
    def subtotal(self) -> Money:
        return self.unit_price * self.quantity.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderItem):
            return NotImplemented
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id) if self.id is not None else id(self)


@dataclass(eq=False)
class Order:
    """Aggregate root for customer orders.

    Use the ``Order.create()`` factory for new orders — it enforces the
    creation rules.  ``Order.reconstitute()`` rebuilds a persisted order
    without re-running them.

    The item collection may be transiently empty while a caller swaps
    items one at a time; ``ensure_consistent()`` is what guards the
    commit.
    """

    id: int | None
    customer_id: int
    order_date: date = field(default_factory=date.today)
    status: OrderStatus = INITIAL_STATUS
    _items: list[OrderItem] = field(default_factory=list, init=False, repr=False)

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def create(customer_id: int, items: list[OrderItem]) -> Order:
        """Create a new order, enforcing all invariants."""
        if not items:
            raise ValidationError(
                "Order must contain at least one item", ValidationReason.EMPTY_ORDER
            )

        order = Order(id=None, customer_id=customer_id)
        for item in items:
            order.add_item(item)
        return order

    @staticmethod
    def reconstitute(
        order_id: int,
        customer_id: int,
        order_date: date,
        status: OrderStatus,
        items: list[OrderItem],
    ) -> Order:
        order = Order(
            id=order_id, customer_id=customer_id, order_date=order_date, status=status
        )
        for item in items:
            order.add_item(item)
        return order

    # --- Item collection ------------------------------------------------------

    @property
    def items(self) -> tuple[OrderItem, ...]:
        return tuple(self._items)

    def add_item(self, item: OrderItem) -> None:
        """Attach *item* to this order.  Does not persist anything."""
        if item.order_id is not None and item.order_id != self.id:
            raise ValidationError(
                f"Item #{item.id} already belongs to order #{item.order_id}",
                ValidationReason.ORPHANED_ITEM,
            )
        if item in self._items:
            return
        item.order_id = self.id
        self._items.append(item)

    def remove_item(self, item: OrderItem) -> None:
        """Detach *item*; the only sanctioned way to drop an item."""
        try:
            self._items.remove(item)
        except ValueError:
            raise ValidationError(
                f"Item #{item.id} is not part of order #{self.id}"
            ) from None
        item.order_id = None

    def clear_items(self) -> list[OrderItem]:
        """Remove every item and return what was removed."""
        removed = list(self._items)
        for item in removed:
            self.remove_item(item)
        return removed

    # --- Identity -------------------------------------------------------------

    def assign_id(self, order_id: int) -> None:
        """Called by the repository on first save."""
        self.id = order_id
        for item in self._items:
            item.order_id = order_id

    # --- State transitions ----------------------------------------------------

    def change_status(self, target: OrderStatus) -> None:
        """Move to *target* or raise InvalidTransitionError, leaving status as is."""
        result = apply_transition(self.status, target)
        if result.error is not None:
            raise result.error
        self.status = result.status

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        result = Money.zero()
        for item in self._items:
            result = result + item.subtotal
        return result

    @property
    def is_terminal(self) -> bool:
        return is_terminal(self.status)

    # --- Integrity ------------------------------------------------------------

    def ensure_consistent(self) -> None:
        """Raise if the order may not be committed in its current shape."""
        if not self._items:
            raise ValidationError(
                f"Order #{self.id} must contain at least one item",
                ValidationReason.EMPTY_ORDER,
            )
        for item in self._items:
            if item.order_id != self.id:
                raise ValidationError(
                    f"Item #{item.id} points to order #{item.order_id}, "
                    f"expected #{self.id}",
                    ValidationReason.ORPHANED_ITEM,
                )

    def find_item(self, item_id: int) -> OrderItem:
        for item in self._items:
            if item.id == item_id:
                return item
        raise ValidationError(f"Item #{item_id} not found in order #{self.id}")
