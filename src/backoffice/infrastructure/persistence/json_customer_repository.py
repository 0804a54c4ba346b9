"""JSON-document implementation of CustomerRepository."""

from __future__ import annotations

from datetime import date

from backoffice.domain.model.customer import Customer
from backoffice.domain.repository.customer_repository import CustomerRepository
from backoffice.infrastructure.persistence.json_store import next_id, upsert


class JsonCustomerRepository(CustomerRepository):

    def __init__(self, document: dict) -> None:
        self._document = document

    # --- CustomerRepository interface -----------------------------------------

    def get_by_id(self, customer_id: int) -> Customer | None:
        for raw in self._rows:
            if raw["id"] == customer_id:
                return self._to_domain(raw)
        return None

    def get_by_email(self, email: str) -> Customer | None:
        for raw in self._rows:
            if raw["email"].lower() == email.lower():
                return self._to_domain(raw)
        return None

    def get_by_cpf(self, cpf: str) -> Customer | None:
        for raw in self._rows:
            if raw["cpf"] == cpf:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Customer]:
        return [self._to_domain(raw) for raw in self._rows]

    def save(self, customer: Customer) -> Customer:
        if customer.id is None:
            customer.id = next_id(self._document, "customers")
        upsert(self._rows, self._to_raw(customer))
        return customer

    def delete(self, customer: Customer) -> None:
        self._document["customers"] = [
            raw for raw in self._rows if raw["id"] != customer.id
        ]

    # --- Serialization --------------------------------------------------------

    @property
    def _rows(self) -> list[dict]:
        return self._document["customers"]

    @staticmethod
    def _to_raw(customer: Customer) -> dict:
        return {
            "id": customer.id,
            "name": customer.name,
            "email": customer.email,
            "cpf": customer.cpf,
            "phone": customer.phone,
            "birth_date": customer.birth_date.isoformat(),
            "address": customer.address,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Customer:
        return Customer(
            id=raw["id"],
            name=raw["name"],
            email=raw["email"],
            cpf=raw["cpf"],
            phone=raw["phone"],
            birth_date=date.fromisoformat(raw["birth_date"]),
            address=raw["address"],
        )
