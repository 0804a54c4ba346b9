"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from backoffice.application.add_product import AddProductHandler
from backoffice.application.delete_product import DeleteProductHandler
from backoffice.application.show_product import ListProductsHandler, ShowProductHandler
from backoffice.application.update_product import UpdateProductHandler
from backoffice.domain.repository.unit_of_work import UnitOfWorkFactory
from backoffice.infrastructure.cli.errors import domain_errors


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--description", required=True, help="Short description.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--stock", required=True, type=int, help="Units in stock.")
@click.option("--category", required=True, help="Catalog category.")
@click.pass_obj
def product_add(
    uow_factory: UnitOfWorkFactory,
    name: str,
    description: str,
    price: str,
    stock: int,
    category: str,
) -> None:
    """Add a new product to the catalog."""
    with domain_errors():
        product = AddProductHandler(uow_factory).handle(
            name=name, description=description, price=price, stock=stock, category=category
        )

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def product_show(uow_factory: UnitOfWorkFactory, product_id: int) -> None:
    """Show a product's details."""
    with domain_errors():
        p = ShowProductHandler(uow_factory).handle(product_id)

    click.echo(f"Product #{p.id}  {p.name}")
    click.echo(f"Category:    {p.category}")
    click.echo(f"Price:       {p.price}")
    click.echo(f"Stock:       {p.stock}")
    click.echo(f"Description: {p.description}")


@click.command("list")
@click.option("--category", default=None, help="Only this category.")
@click.pass_obj
def product_list(uow_factory: UnitOfWorkFactory, category: str | None) -> None:
    """List all products in the catalog."""
    products = ListProductsHandler(uow_factory).handle(category=category)

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Category':<12} {'Price':>10} {'Stock':>6}")
    click.echo("-" * 58)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {p.category:<12} {str(p.price):>10} {p.stock:>6}")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--stock", default=None, type=int, help="New stock level.")
@click.pass_obj
def product_update(
    uow_factory: UnitOfWorkFactory,
    product_id: int,
    price: str | None,
    stock: int | None,
) -> None:
    """Update a product's price and/or stock."""
    if price is None and stock is None:
        raise click.UsageError("Nothing to update: pass --price and/or --stock.")

    with domain_errors():
        product = UpdateProductHandler(uow_factory).handle(
            product_id=product_id, new_price=price, stock=stock
        )

    click.echo(f"Product #{product_id} updated (price {product.price}, stock {product.stock})")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def product_delete(uow_factory: UnitOfWorkFactory, product_id: int) -> None:
    """Remove a product no order refers to."""
    with domain_errors():
        DeleteProductHandler(uow_factory).handle(product_id)

    click.echo(f"Product #{product_id} deleted.")
