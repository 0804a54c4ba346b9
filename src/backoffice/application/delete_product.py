"""Application service: Delete Product use case."""

from __future__ import annotations

from backoffice.domain.exceptions import NotFoundError, ValidationError, ValidationReason
from backoffice.domain.repository.unit_of_work import UnitOfWorkFactory


class DeleteProductHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, product_id: int) -> None:
        """Remove a product that no order item refers to."""
        with self._uow_factory() as uow:
            product = uow.products.get_by_id(product_id)
            if product is None:
                raise NotFoundError("Product", product_id)
            if uow.orders.exists_for_product(product_id):
                raise ValidationError(
                    f"Product #{product_id} is used by existing orders",
                    ValidationReason.PRODUCT_IN_USE,
                )

            uow.products.delete(product)
            uow.commit()
