"""JSON-document implementation of ProductRepository."""

from __future__ import annotations

from decimal import Decimal

from backoffice.domain.model.product import Product
from backoffice.domain.model.value_objects import Money
from backoffice.domain.repository.product_repository import ProductRepository
from backoffice.infrastructure.persistence.json_store import next_id, upsert


class JsonProductRepository(ProductRepository):

    def __init__(self, document: dict) -> None:
        self._document = document

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        for raw in self._rows:
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._rows]

    def save(self, product: Product) -> Product:
        if product.id is None:
            product.id = next_id(self._document, "products")
        upsert(self._rows, self._to_raw(product))
        return product

    def delete(self, product: Product) -> None:
        self._document["products"] = [
            raw for raw in self._rows if raw["id"] != product.id
        ]

    # --- Serialization helpers ------------------------------------------------

    @property
    def _rows(self) -> list[dict]:
        return self._document["products"]

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "description": product.description,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "stock": product.stock,
            "category": product.category,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            description=raw["description"],
            price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
            stock=raw["stock"],
            category=raw["category"],
        )
