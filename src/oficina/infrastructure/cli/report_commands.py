"""CLI commands for the dashboard and sales reports."""

from __future__ import annotations

import click

from oficina.application.show_dashboard import ShowDashboardHandler
from oficina.infrastructure.bootstrap import order_ledger


def _display_sales(title: str, lines) -> None:
    if not lines:
        click.echo(f"No {title.lower()} sold yet.")
        return

    click.echo(f"{title:<32} {'Qty':>6} {'Total':>14}")
    click.echo("-" * 54)
    for line in lines:
        click.echo(f"{line.name:<32} {line.quantity:>6} {line.total:>14}")


@click.command("summary")
def report_summary() -> None:
    """Revenue and order counts."""
    dto = ShowDashboardHandler(order_ledger()).handle()

    click.echo(f"{'Total revenue':<22} {dto.total_revenue:>14}")
    click.echo(f"{'  Services':<22} {dto.services_revenue:>14}")
    click.echo(f"{'  Products':<22} {dto.products_revenue:>14}")
    click.echo(f"{'Open orders':<22} {dto.open_orders:>14}")
    click.echo(f"{'In progress':<22} {dto.in_progress_orders:>14}")
    click.echo(f"{'Finalized orders':<22} {dto.finalized_orders:>14}")


@click.command("services")
def report_services() -> None:
    """Sales per service."""
    _display_sales("Services", ShowDashboardHandler(order_ledger()).handle().service_sales)


@click.command("products")
def report_products() -> None:
    """Sales per product."""
    _display_sales("Products", ShowDashboardHandler(order_ledger()).handle().product_sales)
