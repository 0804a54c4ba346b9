"""Application service: Add Customer use case."""

from __future__ import annotations

from datetime import date

from backoffice.domain.exceptions import ValidationError, ValidationReason
from backoffice.domain.model.customer import Customer
from backoffice.domain.repository.unit_of_work import UnitOfWorkFactory


class AddCustomerHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(
        self,
        name: str,
        email: str,
        cpf: str,
        phone: str,
        birth_date: date,
        address: str,
    ) -> Customer:
        """Register a new customer; email and CPF must be unused."""
        customer = Customer.create(
            name=name,
            email=email,
            cpf=cpf,
            phone=phone,
            birth_date=birth_date,
            address=address,
        )

        with self._uow_factory() as uow:
            if uow.customers.get_by_email(customer.email) is not None:
                raise ValidationError(
                    f"Email '{customer.email}' is already registered",
                    ValidationReason.DUPLICATE,
                )
            if uow.customers.get_by_cpf(customer.cpf) is not None:
                raise ValidationError(
                    f"CPF '{customer.cpf}' is already registered",
                    ValidationReason.DUPLICATE,
                )
            uow.customers.save(customer)
            uow.commit()

        return customer
