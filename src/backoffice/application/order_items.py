"""Turn item specs into OrderItems, snapshotting product prices."""

from __future__ import annotations

from backoffice.application.dto import OrderItemSpec
from backoffice.domain.exceptions import NotFoundError
from backoffice.domain.model.order import OrderItem
from backoffice.domain.repository.product_repository import ProductRepository


def build_order_items(
    product_repo: ProductRepository, item_specs: list[OrderItemSpec]
) -> list[OrderItem]:
    """Resolve every product and build its item.

    Fails on the first unknown product or invalid quantity/price, before
    anything has been written.
    """
    items: list[OrderItem] = []
    for spec in item_specs:
        product = product_repo.get_by_id(spec.product_id)
        if product is None:
            raise NotFoundError("Product", spec.product_id)

        unit_price = spec.unit_price if spec.unit_price is not None else product.price
        items.append(
            OrderItem.create(
                product_id=product.id,  # type: ignore[arg-type]
                product_name=product.name,
                quantity=spec.quantity,
                unit_price=unit_price,  # <-- price snapshot
            )
        )
    return items
