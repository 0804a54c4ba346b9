"""Application service: Add Product use case."""

from __future__ import annotations

from backoffice.domain.model.product import Product
from backoffice.domain.model.value_objects import Money
from backoffice.domain.repository.unit_of_work import UnitOfWorkFactory


class AddProductHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(
        self,
        name: str,
        description: str,
        price: str,
        stock: int,
        category: str,
    ) -> Product:
        """Add a new product to the catalog."""
        product = Product.create(
            name=name,
            description=description,
            price=Money.of(price),
            stock=stock,
            category=category,
        )

        with self._uow_factory() as uow:
            uow.products.save(product)
            uow.commit()

        return product
