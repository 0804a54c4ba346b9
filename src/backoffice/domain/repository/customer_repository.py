"""Abstract repository for Customer aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from backoffice.domain.model.customer import Customer


class CustomerRepository(ABC):

    @abstractmethod
    def get_by_id(self, customer_id: int) -> Customer | None:
        """Return a customer by its ID, or None if not found."""

    @abstractmethod
    def get_by_email(self, email: str) -> Customer | None:
        """Return the customer with this email (case-insensitive), or None."""

    @abstractmethod
    def get_by_cpf(self, cpf: str) -> Customer | None:
        """Return the customer with this CPF, or None."""

    @abstractmethod
    def list_all(self) -> list[Customer]:
        """Return every customer."""

    @abstractmethod
    def save(self, customer: Customer) -> Customer:
        """Persist a new or updated customer, assigning an id if needed."""

    @abstractmethod
    def delete(self, customer: Customer) -> None:
        """Remove the customer."""
