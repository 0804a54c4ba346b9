"""Application service: Update Product use case."""

from __future__ import annotations

from backoffice.domain.exceptions import NotFoundError
from backoffice.domain.model.product import Product
from backoffice.domain.model.value_objects import Money
from backoffice.domain.repository.unit_of_work import UnitOfWorkFactory


class UpdateProductHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(
        self,
        product_id: int,
        new_price: str | None = None,
        stock: int | None = None,
    ) -> Product:
        """Update a product's price and/or stock.

        This does NOT affect any existing orders — they captured a
        price snapshot at creation time.
        """
        with self._uow_factory() as uow:
            product = uow.products.get_by_id(product_id)
            if product is None:
                raise NotFoundError("Product", product_id)

            if new_price is not None:
                product.update_price(Money.of(new_price))
            if stock is not None:
                product.update_stock(stock)

            uow.products.save(product)
            uow.commit()

        return product
