"""Integration tests for customer and product CRUD use cases."""

from datetime import date

import pytest

from backoffice.application.add_customer import AddCustomerHandler
from backoffice.application.add_product import AddProductHandler
from backoffice.application.create_order import CreateOrderHandler
from backoffice.application.delete_customer import DeleteCustomerHandler
from backoffice.application.delete_product import DeleteProductHandler
from backoffice.application.dto import OrderItemSpec
from backoffice.application.show_customer import ListCustomersHandler, ShowCustomerHandler
from backoffice.application.show_product import ListProductsHandler, ShowProductHandler
from backoffice.application.update_customer import UpdateCustomerHandler
from backoffice.application.update_product import UpdateProductHandler
from backoffice.domain.exceptions import NotFoundError, ValidationError, ValidationReason
from backoffice.domain.model.value_objects import Money


def _add_customer(uow, email="new@example.com", cpf="222.222.222-22"):
    return AddCustomerHandler(uow.factory).handle(
        name="Joao Lima",
        email=email,
        cpf=cpf,
        phone="(21) 3333-4444",
        birth_date=date(1979, 11, 30),
        address="Rua A, 1",
    )


class TestCustomers:

    def test_add_and_show(self, uow):
        customer = _add_customer(uow)
        assert customer.id == 2
        assert ShowCustomerHandler(uow.factory).handle(2).email == "new@example.com"

    def test_duplicate_email_rejected(self, uow):
        with pytest.raises(ValidationError) as exc_info:
            _add_customer(uow, email="C1@example.com")
        assert exc_info.value.reason == ValidationReason.DUPLICATE

    def test_duplicate_cpf_rejected(self, uow):
        with pytest.raises(ValidationError, match="CPF"):
            _add_customer(uow, cpf="111.111.111-11")

    def test_list(self, uow):
        _add_customer(uow)
        assert [c.id for c in ListCustomersHandler(uow.factory).handle()] == [1, 2]

    def test_update_contact(self, uow):
        UpdateCustomerHandler(uow.factory).handle(1, name="Customer Renamed")
        assert uow.customers.get_by_id(1).name == "Customer Renamed"

    def test_update_to_taken_email_rejected(self, uow):
        _add_customer(uow)
        with pytest.raises(ValidationError, match="already registered"):
            UpdateCustomerHandler(uow.factory).handle(1, email="new@example.com")

    def test_show_unknown(self, uow):
        with pytest.raises(NotFoundError) as exc_info:
            ShowCustomerHandler(uow.factory).handle(42)
        assert exc_info.value.entity == "Customer"

    def test_delete(self, uow):
        customer = _add_customer(uow)
        DeleteCustomerHandler(uow.factory).handle(customer.id)
        assert uow.customers.get_by_id(customer.id) is None

    def test_delete_customer_with_orders_rejected(self, uow):
        CreateOrderHandler(uow.factory).handle(1, [OrderItemSpec(1, 1)])
        with pytest.raises(ValidationError) as exc_info:
            DeleteCustomerHandler(uow.factory).handle(1)
        assert exc_info.value.reason == ValidationReason.CUSTOMER_HAS_ORDERS


class TestProducts:

    def test_add_and_show(self, uow):
        product = AddProductHandler(uow.factory).handle(
            name="Gizmo", description="Shiny gizmo", price="12.34", stock=3, category="Gadgets"
        )
        assert product.id == 3
        assert ShowProductHandler(uow.factory).handle(3).price == Money.of("12.34")

    def test_add_rejects_sub_cent_price(self, uow):
        with pytest.raises(ValidationError) as exc_info:
            AddProductHandler(uow.factory).handle(
                name="Gizmo", description="Shiny gizmo", price="1.001", stock=0, category="Gadgets"
            )
        assert exc_info.value.reason == ValidationReason.PRICE_PRECISION

    def test_list_by_category(self, uow):
        AddProductHandler(uow.factory).handle(
            name="Gizmo", description="Shiny gizmo", price="1.00", stock=0, category="Gadgets"
        )
        names = [p.name for p in ListProductsHandler(uow.factory).handle(category="gadgets")]
        assert names == ["Gizmo"]

    def test_update_price_and_stock(self, uow):
        UpdateProductHandler(uow.factory).handle(1, new_price="11.00", stock=7)
        product = uow.products.get_by_id(1)
        assert product.price == Money.of("11.00")
        assert product.stock == 7

    def test_update_unknown(self, uow):
        with pytest.raises(NotFoundError):
            UpdateProductHandler(uow.factory).handle(99, new_price="1.00")

    def test_delete_unused_product(self, uow):
        DeleteProductHandler(uow.factory).handle(2)
        assert uow.products.get_by_id(2) is None

    def test_delete_product_in_use_rejected(self, uow):
        CreateOrderHandler(uow.factory).handle(1, [OrderItemSpec(2, 1)])
        with pytest.raises(ValidationError) as exc_info:
            DeleteProductHandler(uow.factory).handle(2)
        assert exc_info.value.reason == ValidationReason.PRODUCT_IN_USE
