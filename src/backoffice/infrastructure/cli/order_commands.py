"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from backoffice.application.cancel_order import CancelOrderHandler
from backoffice.application.create_order import CreateOrderHandler
from backoffice.application.delete_order import DeleteOrderHandler
from backoffice.application.dto import OrderDTO, OrderItemSpec
from backoffice.application.list_orders import ListOrdersHandler
from backoffice.application.replace_order_items import ReplaceOrderItemsHandler
from backoffice.application.show_order import ShowOrderHandler
from backoffice.application.update_order_status import UpdateOrderStatusHandler
from backoffice.domain.model.order_status import OrderStatus
from backoffice.domain.repository.unit_of_work import UnitOfWorkFactory
from backoffice.infrastructure.cli.errors import domain_errors

_STATUS_CHOICE = click.Choice([s.value for s in OrderStatus], case_sensitive=False)


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse '1:2,2:1@5.50' into OrderItemSpec list.

    Each entry is ``ProductId:Qty`` with an optional ``@UnitPrice``.
    """
    specs: list[OrderItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
        price: str | None = None
        if "@" in pair:
            pair, price = (part.strip() for part in pair.split("@", 1))
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Qty[@Price]'."
            )
        product_str, qty_str = pair.rsplit(":", 1)
        try:
            product_id = int(product_str)
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid product id or quantity in '{pair}'."
            )
        specs.append(OrderItemSpec(product_id=product_id, quantity=qty, unit_price=price))
    return specs


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Customer: #{dto.customer_id}")
    click.echo(f"Date:     {dto.order_date}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Subtotal':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} {item.unit_price:>10} {item.subtotal:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Order Total':<27} {dto.total:>20}")


@click.command("create")
@click.option("--customer", "customer_id", required=True, type=int, help="Customer ID.")
@click.option("--items", required=True, help="Items as 'ProductId:Qty[@Price],...'.")
@click.pass_obj
def order_create(uow_factory: UnitOfWorkFactory, customer_id: int, items: str) -> None:
    """Create a new order (starts AWAITING_PAYMENT)."""
    specs = _parse_items(items)

    with domain_errors():
        dto = CreateOrderHandler(uow_factory).handle(
            customer_id=customer_id, item_specs=specs
        )

    click.echo(f"Order #{dto.id} created")
    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.pass_obj
def order_show(uow_factory: UnitOfWorkFactory, order_id: int) -> None:
    """Show details of an existing order."""
    with domain_errors():
        dto = ShowOrderHandler(uow_factory).handle(order_id)

    _display_order(dto)


@click.command("list")
@click.option("--customer", "customer_id", type=int, default=None, help="Only this customer.")
@click.option("--status", type=_STATUS_CHOICE, default=None, help="Only this status.")
@click.pass_obj
def order_list(
    uow_factory: UnitOfWorkFactory, customer_id: int | None, status: str | None
) -> None:
    """List orders with their totals."""
    with domain_errors():
        orders = ListOrdersHandler(uow_factory).handle(
            customer_id=customer_id,
            status=OrderStatus(status.upper()) if status else None,
        )

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Customer':>8} {'Date':>12} {'Status':<18} {'Total':>12}")
    click.echo("-" * 60)
    for dto in orders:
        click.echo(
            f"{dto.id:<6} {dto.customer_id:>8} {dto.order_date:>12} {dto.status:<18} {dto.total:>12}"
        )


@click.command("status")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--to", "target", required=True, type=_STATUS_CHOICE, help="New status.")
@click.pass_obj
def order_status(uow_factory: UnitOfWorkFactory, order_id: int, target: str) -> None:
    """Move an order to its next status."""
    with domain_errors():
        dto = UpdateOrderStatusHandler(uow_factory).handle(
            order_id, OrderStatus(target.upper())
        )

    click.echo(f"Order #{dto.id} is now {dto.status}.")


@click.command("cancel")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to cancel.")
@click.pass_obj
def order_cancel(uow_factory: UnitOfWorkFactory, order_id: int) -> None:
    """Cancel an order that has not shipped yet."""
    with domain_errors():
        CancelOrderHandler(uow_factory).handle(order_id)

    click.echo(f"Order #{order_id} cancelled.")


@click.command("replace-items")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--items", required=True, help="Items as 'ProductId:Qty[@Price],...'.")
@click.pass_obj
def order_replace_items(uow_factory: UnitOfWorkFactory, order_id: int, items: str) -> None:
    """Replace every item of an order."""
    specs = _parse_items(items)

    with domain_errors():
        dto = ReplaceOrderItemsHandler(uow_factory).handle(order_id, specs)

    click.echo(f"Order #{dto.id} items replaced")
    _display_order(dto)


@click.command("delete")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to delete.")
@click.confirmation_option(prompt="Delete this order and all of its items?")
@click.pass_obj
def order_delete(uow_factory: UnitOfWorkFactory, order_id: int) -> None:
    """Delete an order together with its items."""
    with domain_errors():
        DeleteOrderHandler(uow_factory).handle(order_id)

    click.echo(f"Order #{order_id} deleted.")
