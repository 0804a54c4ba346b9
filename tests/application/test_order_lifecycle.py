"""Integration tests for status changes, reads and deletion of orders."""

import itertools

import pytest

from backoffice.application.cancel_order import CancelOrderHandler
from backoffice.application.create_order import CreateOrderHandler
from backoffice.application.delete_order import DeleteOrderHandler
from backoffice.application.dto import OrderItemSpec
from backoffice.application.list_orders import ListOrdersHandler
from backoffice.application.show_order import ShowOrderHandler
from backoffice.application.update_order_status import UpdateOrderStatusHandler
from backoffice.domain.exceptions import InvalidTransitionError, NotFoundError
from backoffice.domain.model.order_status import OrderStatus, can_transition

S = OrderStatus

# Shortest legal path from the initial status to each status.
_PATH_TO = {
    S.AWAITING_PAYMENT: [],
    S.APPROVED: [S.APPROVED],
    S.PAID: [S.APPROVED, S.PAID],
    S.SHIPPED: [S.APPROVED, S.PAID, S.SHIPPED],
    S.DELIVERED: [S.APPROVED, S.PAID, S.SHIPPED, S.DELIVERED],
    S.CANCELLED: [S.CANCELLED],
}


def _create(uow) -> int:
    dto = CreateOrderHandler(uow.factory).handle(1, [
        OrderItemSpec(1, 2, "10.00"),
        OrderItemSpec(2, 1, "5.50"),
    ])
    return dto.id


def _walk_to(uow, order_id: int, status: OrderStatus) -> None:
    handler = UpdateOrderStatusHandler(uow.factory)
    for step in _PATH_TO[status]:
        handler.handle(order_id, step)


class TestConcreteScenario:

    def test_status_walk(self, uow):
        order_id = _create(uow)
        handler = UpdateOrderStatusHandler(uow.factory)
        show = ShowOrderHandler(uow.factory)

        assert show.handle(order_id).total == "$25.50"

        with pytest.raises(InvalidTransitionError):
            handler.handle(order_id, S.AWAITING_PAYMENT)

        dto = handler.handle(order_id, S.APPROVED)
        assert dto.status == "APPROVED"

        with pytest.raises(InvalidTransitionError) as exc_info:
            handler.handle(order_id, S.SHIPPED)
        assert exc_info.value.from_status == S.APPROVED
        assert exc_info.value.to_status == S.SHIPPED
        assert show.handle(order_id).status == "APPROVED"


class TestUpdateStatus:

    @pytest.mark.parametrize(
        "current,target",
        [
            (c, t)
            for c, t in itertools.product(_PATH_TO, OrderStatus)
            if not can_transition(c, t)
        ],
    )
    def test_illegal_transition_leaves_status(self, uow, current, target):
        order_id = _create(uow)
        _walk_to(uow, order_id, current)
        commits = uow.commits

        with pytest.raises(InvalidTransitionError):
            UpdateOrderStatusHandler(uow.factory).handle(order_id, target)

        assert uow.orders.get_by_id(order_id).status == current
        assert uow.commits == commits

    def test_repeating_an_applied_transition_fails(self, uow):
        order_id = _create(uow)
        handler = UpdateOrderStatusHandler(uow.factory)
        handler.handle(order_id, S.APPROVED)
        with pytest.raises(InvalidTransitionError):
            handler.handle(order_id, S.APPROVED)

    def test_full_happy_path(self, uow):
        order_id = _create(uow)
        _walk_to(uow, order_id, S.DELIVERED)
        assert uow.orders.get_by_id(order_id).status == S.DELIVERED

    def test_unknown_order(self, uow):
        with pytest.raises(NotFoundError) as exc_info:
            UpdateOrderStatusHandler(uow.factory).handle(999, S.APPROVED)
        assert exc_info.value.entity == "Order"


class TestCancelOrder:

    def test_cancel_paid_order(self, uow):
        order_id = _create(uow)
        _walk_to(uow, order_id, S.PAID)
        dto = CancelOrderHandler(uow.factory).handle(order_id)
        assert dto.status == "CANCELLED"

    def test_cannot_cancel_shipped_order(self, uow):
        order_id = _create(uow)
        _walk_to(uow, order_id, S.SHIPPED)
        with pytest.raises(InvalidTransitionError):
            CancelOrderHandler(uow.factory).handle(order_id)

    def test_cannot_cancel_twice(self, uow):
        order_id = _create(uow)
        CancelOrderHandler(uow.factory).handle(order_id)
        with pytest.raises(InvalidTransitionError):
            CancelOrderHandler(uow.factory).handle(order_id)


class TestReadOrders:

    def test_round_trip(self, uow):
        order_id = _create(uow)
        dto = ShowOrderHandler(uow.factory).handle(order_id)
        assert dto.customer_id == 1
        assert [(i.product_id, i.quantity, i.unit_price) for i in dto.items] == [
            (1, 2, "$10.00"),
            (2, 1, "$5.50"),
        ]
        assert dto.total == "$25.50"

    def test_show_unknown_order(self, uow):
        with pytest.raises(NotFoundError, match="Order #7 not found"):
            ShowOrderHandler(uow.factory).handle(7)

    def test_list_empty(self, uow):
        assert ListOrdersHandler(uow.factory).handle() == []

    def test_list_with_totals_and_filters(self, uow):
        first = _create(uow)
        second = _create(uow)
        UpdateOrderStatusHandler(uow.factory).handle(second, S.APPROVED)

        all_orders = ListOrdersHandler(uow.factory).handle()
        assert [o.id for o in all_orders] == [first, second]
        assert all(o.total == "$25.50" for o in all_orders)

        approved = ListOrdersHandler(uow.factory).handle(status=S.APPROVED)
        assert [o.id for o in approved] == [second]
        assert ListOrdersHandler(uow.factory).handle(customer_id=2) == []


class TestDeleteOrder:

    def test_delete_cascades_to_items(self, uow):
        order_id = _create(uow)
        DeleteOrderHandler(uow.factory).handle(order_id)

        with pytest.raises(NotFoundError):
            ShowOrderHandler(uow.factory).handle(order_id)
        assert uow.orders.list_items(order_id) == []
        assert all(item.order_id != order_id for item in uow.orders.all_items())

    def test_delete_keeps_other_orders(self, uow):
        doomed = _create(uow)
        kept = _create(uow)
        DeleteOrderHandler(uow.factory).handle(doomed)
        assert len(uow.orders.list_items(kept)) == 2

    def test_delete_unknown_order(self, uow):
        with pytest.raises(NotFoundError):
            DeleteOrderHandler(uow.factory).handle(5)
