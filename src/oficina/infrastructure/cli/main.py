import click

from oficina.domain.exceptions import DomainException
from oficina.infrastructure.cli.customer_commands import (
    customer_add,
    customer_delete,
    customer_search,
    customer_update,
)
from oficina.infrastructure.cli.order_commands import (
    order_add_product,
    order_create,
    order_finalize,
    order_list,
    order_remove_product,
    order_scan,
    order_set_price,
    order_show,
    order_start,
    order_toggle_service,
    order_update,
)
from oficina.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_low_stock,
    product_remove,
    product_seed,
    product_update,
)
from oficina.infrastructure.cli.report_commands import (
    report_products,
    report_services,
    report_summary,
)
from oficina.infrastructure.cli.vehicle_commands import (
    vehicle_add,
    vehicle_delete,
    vehicle_search,
    vehicle_update,
)
from oficina.infrastructure.config import load_settings
from oficina.infrastructure.logging_setup import configure_logging


@click.group()
def cli() -> None:
    """Oficina — motorcycle repair shop back office"""
    try:
        config = load_settings()
    except DomainException as exc:
        raise click.ClickException(str(exc))
    configure_logging(config.log_level)


@cli.group()
def order() -> None:
    """Manage service orders."""


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def customer() -> None:
    """Manage customers."""


@cli.group()
def vehicle() -> None:
    """Manage vehicles."""


@cli.group()
def report() -> None:
    """Dashboard and sales reports."""


# Register subcommands
order.add_command(order_add_product)
order.add_command(order_create)
order.add_command(order_finalize)
order.add_command(order_list)
order.add_command(order_remove_product)
order.add_command(order_scan)
order.add_command(order_set_price)
order.add_command(order_show)
order.add_command(order_start)
order.add_command(order_toggle_service)
order.add_command(order_update)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_low_stock)
product.add_command(product_remove)
product.add_command(product_seed)
product.add_command(product_update)
customer.add_command(customer_add)
customer.add_command(customer_delete)
customer.add_command(customer_search)
customer.add_command(customer_update)
vehicle.add_command(vehicle_add)
vehicle.add_command(vehicle_delete)
vehicle.add_command(vehicle_search)
vehicle.add_command(vehicle_update)
report.add_command(report_products)
report.add_command(report_services)
report.add_command(report_summary)
