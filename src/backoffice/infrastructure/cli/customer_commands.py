"""CLI commands for the Customer aggregate."""

from __future__ import annotations

from datetime import datetime

import click

from backoffice.application.add_customer import AddCustomerHandler
from backoffice.application.delete_customer import DeleteCustomerHandler
from backoffice.application.show_customer import ListCustomersHandler, ShowCustomerHandler
from backoffice.application.update_customer import UpdateCustomerHandler
from backoffice.domain.repository.unit_of_work import UnitOfWorkFactory
from backoffice.infrastructure.cli.errors import domain_errors


@click.command("add")
@click.option("--name", required=True, help="Full name.")
@click.option("--email", required=True, help="Email address.")
@click.option("--cpf", required=True, help="CPF as xxx.xxx.xxx-xx.")
@click.option("--phone", required=True, help="Phone as (XX) XXXXX-XXXX.")
@click.option(
    "--birth-date", required=True, type=click.DateTime(formats=["%Y-%m-%d"]),
    help="Birth date (YYYY-MM-DD).",
)
@click.option("--address", required=True, help="Postal address.")
@click.pass_obj
def customer_add(
    uow_factory: UnitOfWorkFactory,
    name: str,
    email: str,
    cpf: str,
    phone: str,
    birth_date: datetime,
    address: str,
) -> None:
    """Register a new customer."""
    with domain_errors():
        customer = AddCustomerHandler(uow_factory).handle(
            name=name,
            email=email,
            cpf=cpf,
            phone=phone,
            birth_date=birth_date.date(),
            address=address,
        )

    click.echo(f"Customer #{customer.id} '{customer.name}' added")


@click.command("show")
@click.option("--id", "customer_id", required=True, type=int, help="Customer ID.")
@click.pass_obj
def customer_show(uow_factory: UnitOfWorkFactory, customer_id: int) -> None:
    """Show a customer's details."""
    with domain_errors():
        c = ShowCustomerHandler(uow_factory).handle(customer_id)

    click.echo(f"Customer #{c.id}")
    click.echo(f"Name:       {c.name}")
    click.echo(f"Email:      {c.email}")
    click.echo(f"CPF:        {c.cpf}")
    click.echo(f"Phone:      {c.phone}")
    click.echo(f"Born:       {c.birth_date.isoformat()}")
    click.echo(f"Address:    {c.address}")


@click.command("list")
@click.pass_obj
def customer_list(uow_factory: UnitOfWorkFactory) -> None:
    """List all customers."""
    customers = ListCustomersHandler(uow_factory).handle()

    if not customers:
        click.echo("No customers found.")
        return

    click.echo(f"{'ID':<6} {'Name':<30} {'Email':<30}")
    click.echo("-" * 68)
    for c in customers:
        click.echo(f"{c.id:<6} {c.name:<30} {c.email:<30}")


@click.command("update")
@click.option("--id", "customer_id", required=True, type=int, help="Customer ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--email", default=None, help="New email.")
@click.option("--phone", default=None, help="New phone.")
@click.option("--address", default=None, help="New address.")
@click.pass_obj
def customer_update(
    uow_factory: UnitOfWorkFactory,
    customer_id: int,
    name: str | None,
    email: str | None,
    phone: str | None,
    address: str | None,
) -> None:
    """Update a customer's contact details."""
    with domain_errors():
        UpdateCustomerHandler(uow_factory).handle(
            customer_id, name=name, email=email, phone=phone, address=address
        )

    click.echo(f"Customer #{customer_id} updated.")


@click.command("delete")
@click.option("--id", "customer_id", required=True, type=int, help="Customer ID.")
@click.pass_obj
def customer_delete(uow_factory: UnitOfWorkFactory, customer_id: int) -> None:
    """Delete a customer without orders."""
    with domain_errors():
        DeleteCustomerHandler(uow_factory).handle(customer_id)

    click.echo(f"Customer #{customer_id} deleted.")
