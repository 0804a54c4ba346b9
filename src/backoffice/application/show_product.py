"""Application service: Show / List Products use cases (queries)."""

from __future__ import annotations

from backoffice.domain.exceptions import NotFoundError
from backoffice.domain.model.product import Product
from backoffice.domain.repository.unit_of_work import UnitOfWorkFactory


class ShowProductHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, product_id: int) -> Product:
        with self._uow_factory() as uow:
            product = uow.products.get_by_id(product_id)
        if product is None:
            raise NotFoundError("Product", product_id)
        return product


class ListProductsHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, category: str | None = None) -> list[Product]:
        with self._uow_factory() as uow:
            products = uow.products.list_all()
        if category is not None:
            products = [p for p in products if p.category.lower() == category.lower()]
        return sorted(products, key=lambda p: p.id)
