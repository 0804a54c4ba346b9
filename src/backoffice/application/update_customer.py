"""Application service: Update Customer use case.

Only contact details change; CPF and birth date are fixed at sign-up.
"""

from __future__ import annotations

from backoffice.domain.exceptions import NotFoundError, ValidationError, ValidationReason
from backoffice.domain.model.customer import Customer
from backoffice.domain.repository.unit_of_work import UnitOfWorkFactory


class UpdateCustomerHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(
        self,
        customer_id: int,
        name: str | None = None,
        email: str | None = None,
        phone: str | None = None,
        address: str | None = None,
    ) -> Customer:
        with self._uow_factory() as uow:
            customer = uow.customers.get_by_id(customer_id)
            if customer is None:
                raise NotFoundError("Customer", customer_id)

            if email is not None:
                owner = uow.customers.get_by_email(email.strip())
                if owner is not None and owner.id != customer_id:
                    raise ValidationError(
                        f"Email '{email.strip()}' is already registered",
                        ValidationReason.DUPLICATE,
                    )

            customer.update_contact(name=name, email=email, phone=phone, address=address)
            uow.customers.save(customer)
            uow.commit()

        return customer
