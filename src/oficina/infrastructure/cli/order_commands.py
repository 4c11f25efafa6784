"""CLI commands for service orders."""

from __future__ import annotations

import click

from oficina.application.add_order_product import AddOrderProductHandler
from oficina.application.create_order import CreateOrderHandler
from oficina.application.finalize_order import FinalizeOrderHandler
from oficina.application.remove_order_product import RemoveOrderProductHandler
from oficina.application.scan_product import ScanProductHandler
from oficina.application.search_orders import SearchOrdersHandler
from oficina.application.set_service_price import SetServicePriceHandler
from oficina.application.show_order import ShowOrderHandler
from oficina.application.start_order import StartOrderHandler
from oficina.application.toggle_service import ToggleServiceHandler
from oficina.application.update_order import UpdateOrderHandler
from oficina.domain.exceptions import DomainException
from oficina.infrastructure.bootstrap import order_ledger

STATUSES = click.Choice(["open", "in-progress", "finalized"])


def _display_order(dto) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Plate:    {dto.plate}")
    click.echo(f"Customer: {dto.customer_name}  {dto.phone}")
    if dto.odometer:
        click.echo(f"Odometer: {dto.odometer}")
    if dto.notes:
        click.echo(f"Notes:    {dto.notes}")
    click.echo(f"Created:  {dto.created_at}")
    if dto.finalized_at:
        click.echo(f"Closed:   {dto.finalized_at}")
    click.echo()

    click.echo(f"  {'':<3} {'ID':<11} {'Service':<30} {'Price':>12}")
    click.echo(f"  {'-'*59}")
    for s in dto.services:
        mark = "[x]" if s.selected else "[ ]"
        click.echo(f"  {mark:<3} {s.id:<11} {s.name:<30} {s.price:>12}")
    click.echo()

    if dto.products:
        click.echo(f"  {'Product':<30} {'Qty':>5} {'Price':>12} {'Total':>12}")
        click.echo(f"  {'-'*62}")
        for p in dto.products:
            click.echo(
                f"  {p.product_name:<30} {p.quantity:>5} {p.unit_price:>12} {p.line_total:>12}"
            )
        click.echo()

    click.echo(f"  {'Services':<48} {dto.total_services:>12}")
    click.echo(f"  {'Products':<48} {dto.total_products:>12}")
    click.echo(f"  {'Order Total':<48} {dto.grand_total:>12}")


@click.command("create")
@click.option("--plate", required=True, help="Vehicle plate, e.g. ABC-1234.")
@click.option("--customer", required=True, help="Customer name.")
@click.option("--phone", default="", help="Customer phone.")
@click.option("--odometer", default="", help="Current odometer reading.")
@click.option("--notes", default="", help="Free-text notes.")
def order_create(plate: str, customer: str, phone: str, odometer: str, notes: str) -> None:
    """Open a new service order."""
    handler = CreateOrderHandler(order_ledger())

    try:
        dto = handler.handle(
            plate=plate, customer_name=customer, phone=phone, odometer=odometer, notes=notes
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} created  (status={dto.status})")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_ledger())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("list")
@click.option("--plate", default="", help="Part of the plate (any case).")
@click.option("--status", type=STATUSES, default=None, help="Only orders in this status.")
def order_list(plate: str, status: str | None) -> None:
    """List orders, optionally filtered by plate."""
    rows = SearchOrdersHandler(order_ledger()).handle(plate, status=status)

    if not rows:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Plate':<10} {'Customer':<24} {'Status':<12} {'Total':>12}")
    click.echo("-" * 68)
    for row in rows:
        click.echo(
            f"{row.id:<6} {row.plate:<10} {row.customer_name:<24} "
            f"{row.status:<12} {row.grand_total:>12}"
        )


@click.command("update")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--plate", default=None, help="New plate.")
@click.option("--customer", default=None, help="New customer name.")
@click.option("--phone", default=None, help="New phone.")
@click.option("--odometer", default=None, help="New odometer reading.")
@click.option("--notes", default=None, help="New notes.")
def order_update(
    order_id: int,
    plate: str | None,
    customer: str | None,
    phone: str | None,
    odometer: str | None,
    notes: str | None,
) -> None:
    """Change the contact or vehicle details of an order."""
    handler = UpdateOrderHandler(order_ledger())

    try:
        handler.handle(
            order_id,
            plate=plate,
            customer_name=customer,
            phone=phone,
            odometer=odometer,
            notes=notes,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} updated.")


@click.command("toggle-service")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--service", "service_id", required=True, help="Service line ID, e.g. service-0.")
def order_toggle_service(order_id: int, service_id: str) -> None:
    """Select or unselect a service on an order."""
    handler = ToggleServiceHandler(order_ledger())

    try:
        dto = handler.handle(order_id, service_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} services total: {dto.total_services}")


@click.command("set-price")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--service", "service_id", required=True, help="Service line ID.")
@click.option("--price", required=True, help="New price (e.g. 65.00).")
def order_set_price(order_id: int, service_id: str, price: str) -> None:
    """Change the price of a service on one order."""
    handler = SetServicePriceHandler(order_ledger())

    try:
        dto = handler.handle(order_id, service_id, price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} services total: {dto.total_services}")


@click.command("add-product")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--product", "product_id", required=True, help="Catalog product ID.")
@click.option("--quantity", default=1, show_default=True, type=int, help="Units to add.")
def order_add_product(order_id: int, product_id: str, quantity: int) -> None:
    """Add a catalog product to an order."""
    handler = AddOrderProductHandler(order_ledger())

    try:
        dto = handler.handle(order_id, product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} products total: {dto.total_products}")


@click.command("scan")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--code", required=True, help="Barcode read by the scanner.")
@click.option("--quantity", default=1, show_default=True, type=int, help="Units to add.")
def order_scan(order_id: int, code: str, quantity: int) -> None:
    """Add a product to an order by its barcode."""
    handler = ScanProductHandler(order_ledger())

    try:
        dto = handler.handle(order_id, code, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} products total: {dto.total_products}")


@click.command("remove-product")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option(
    "--product", "product_id", required=True,
    help="Product ID, or scan:<code> for a scanned line.",
)
def order_remove_product(order_id: int, product_id: str) -> None:
    """Remove a product line from an order."""
    handler = RemoveOrderProductHandler(order_ledger())

    try:
        dto = handler.handle(order_id, product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} products total: {dto.total_products}")


@click.command("start")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
def order_start(order_id: int) -> None:
    """Move an open order to in-progress."""
    handler = StartOrderHandler(order_ledger())

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} is now in progress.")


@click.command("finalize")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
def order_finalize(order_id: int) -> None:
    """Close an order: deduct stock and record the sale."""
    handler = FinalizeOrderHandler(order_ledger())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} finalized — total {dto.grand_total}.")
