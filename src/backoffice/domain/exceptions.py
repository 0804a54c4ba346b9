"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Each error kind carries enough structure for callers to tell them apart
without parsing the message.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from backoffice.domain.model.order_status import OrderStatus


class ValidationReason(Enum):
    INVALID = "INVALID"
    INVALID_QUANTITY = "INVALID_QUANTITY"
    INVALID_PRICE = "INVALID_PRICE"
    PRICE_PRECISION = "PRICE_PRECISION"
    EMPTY_ORDER = "EMPTY_ORDER"
    ORPHANED_ITEM = "ORPHANED_ITEM"
    ORDER_LOCKED = "ORDER_LOCKED"
    INVALID_CUSTOMER = "INVALID_CUSTOMER"
    INVALID_PRODUCT = "INVALID_PRODUCT"
    DUPLICATE = "DUPLICATE"
    CUSTOMER_HAS_ORDERS = "CUSTOMER_HAS_ORDERS"
    PRODUCT_IN_USE = "PRODUCT_IN_USE"


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""

    def __init__(
        self, message: str, reason: ValidationReason = ValidationReason.INVALID
    ) -> None:
        super().__init__(message)
        self.reason = reason


class NotFoundError(DomainException):
    """A requested entity does not exist."""

    def __init__(self, entity: str, entity_id: object) -> None:
        super().__init__(f"{entity} #{entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class InvalidTransitionError(DomainException):
    """The status state machine does not allow the requested change."""

    def __init__(self, from_status: OrderStatus, to_status: OrderStatus) -> None:
        super().__init__(
            f"Cannot change order status from {from_status.value} "
            f"to {to_status.value}"
        )
        self.from_status = from_status
        self.to_status = to_status


class PersistenceError(DomainException):
    """The storage collaborator failed; the unit of work was rolled back."""
