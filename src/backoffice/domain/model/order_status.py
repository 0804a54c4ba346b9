"""Order status lifecycle.

The lifecycle is a closed state machine described by a static adjacency
table, so every cell can be checked exhaustively.  Nothing in this module
touches an Order; callers decide what to do with the result.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from backoffice.domain.exceptions import InvalidTransitionError


class OrderStatus(Enum):
    PENDING = "PENDING"
    AWAITING_PAYMENT = "AWAITING_PAYMENT"
    APPROVED = "APPROVED"
    PAID = "PAID"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


INITIAL_STATUS = OrderStatus.AWAITING_PAYMENT

# Shipped and delivered orders cannot be cancelled.
ALLOWED_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset(
        {OrderStatus.AWAITING_PAYMENT, OrderStatus.CANCELLED}
    ),
    OrderStatus.AWAITING_PAYMENT: frozenset(
        {OrderStatus.APPROVED, OrderStatus.CANCELLED}
    ),
    OrderStatus.APPROVED: frozenset({OrderStatus.PAID, OrderStatus.CANCELLED}),
    OrderStatus.PAID: frozenset({OrderStatus.SHIPPED, OrderStatus.CANCELLED}),
    OrderStatus.SHIPPED: frozenset({OrderStatus.DELIVERED}),
    OrderStatus.DELIVERED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}


def can_transition(current: OrderStatus, target: OrderStatus) -> bool:
    """True if *target* is a legal next status after *current*.

    Identity transitions are never legal.
    """
    return target in ALLOWED_TRANSITIONS[current]


def is_terminal(status: OrderStatus) -> bool:
    return not ALLOWED_TRANSITIONS[status]


@dataclass(frozen=True)
class TransitionResult:
    """Outcome of a status change request.

    ``status`` is the status the order should have afterwards; on failure
    it is the unchanged current status and ``error`` is set.
    """

    status: OrderStatus
    error: InvalidTransitionError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def apply_transition(current: OrderStatus, target: OrderStatus) -> TransitionResult:
    if can_transition(current, target):
        return TransitionResult(status=target)
    return TransitionResult(
        status=current, error=InvalidTransitionError(current, target)
    )
