"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
prices change, products are added and removed from the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass

from backoffice.domain.exceptions import ValidationError, ValidationReason
from backoffice.domain.model.value_objects import Money, require_price


def _check_length(label: str, value: str, low: int, high: int) -> str:
    value = (value or "").strip()
    if not low <= len(value) <= high:
        raise ValidationError(
            f"{label} must be between {low} and {high} characters",
            ValidationReason.INVALID_PRODUCT,
        )
    return value


def _check_stock(stock: int) -> int:
    if isinstance(stock, bool) or not isinstance(stock, int) or stock < 0:
        raise ValidationError(
            "Stock cannot be negative", ValidationReason.INVALID_PRODUCT
        )
    return stock


@dataclass
class Product:
    """A product in the catalog.

    ``stock`` is informational only; placing orders never changes it.
    """

    id: int | None
    name: str
    description: str
    price: Money
    stock: int
    category: str

    @staticmethod
    def create(
        name: str,
        description: str,
        price: Money,
        stock: int,
        category: str,
    ) -> Product:
        require_price(price, "Product price")
        return Product(
            id=None,
            name=_check_length("Name", name, 3, 100),
            description=_check_length("Description", description, 3, 255),
            price=price,
            stock=_check_stock(stock),
            category=_check_length("Category", category, 3, 30),
        )

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        This does NOT affect any existing orders because orders
        capture a price snapshot at creation time.
        """
        require_price(new_price, "Product price")
        self.price = new_price

    def update_stock(self, stock: int) -> None:
        self.stock = _check_stock(stock)
