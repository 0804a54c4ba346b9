from datetime import date

import pytest

from backoffice.domain.model.customer import Customer
from backoffice.domain.model.product import Product
from backoffice.domain.model.value_objects import Money
from tests.fakes import FakeUnitOfWork


def make_customer(name: str = "Customer One", email: str = "c1@example.com",
                  cpf: str = "111.111.111-11") -> Customer:
    return Customer.create(
        name=name,
        email=email,
        cpf=cpf,
        phone="(11) 98765-4321",
        birth_date=date(1985, 3, 2),
        address="Av. Paulista, 1000",
    )


def make_product(name: str, price: str) -> Product:
    return Product.create(
        name=name,
        description=f"{name} description",
        price=Money.of(price),
        stock=100,
        category="General",
    )


@pytest.fixture
def uow() -> FakeUnitOfWork:
    """Customer #1 and products #1 (Prod One, $10.00) and #2 (Prod Two, $5.50)."""
    return FakeUnitOfWork(
        customers=[make_customer()],
        products=[make_product("Prod One", "10.00"), make_product("Prod Two", "5.50")],
    )
