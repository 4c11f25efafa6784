"""CLI commands for the customer registry."""

from __future__ import annotations

import click

from oficina.application.delete_customer import DeleteCustomerHandler
from oficina.application.register_customer import RegisterCustomerHandler
from oficina.application.search_customers import SearchCustomersHandler
from oficina.application.update_customer import UpdateCustomerHandler
from oficina.domain.exceptions import DomainException
from oficina.infrastructure.bootstrap import customer_repository, settings


def _customer_options(func):
    for option in reversed(
        [
            click.option("--name", required=True, help="Customer name."),
            click.option("--phone", default="", help="Phone number."),
            click.option("--email", default="", help="E-mail address."),
            click.option("--document", default="", help="CPF/CNPJ."),
            click.option("--notes", default="", help="Free-text notes."),
        ]
    ):
        func = option(func)
    return func


@click.command("add")
@_customer_options
def customer_add(name: str, phone: str, email: str, document: str, notes: str) -> None:
    """Register a new customer."""
    config = settings()
    handler = RegisterCustomerHandler(customer_repository(config), config.company_id)

    try:
        dto = handler.handle(name, phone=phone, email=email, document=document, notes=notes)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer {dto.id} '{dto.name}' registered.")


@click.command("update")
@click.option("--id", "customer_id", required=True, help="Customer ID.")
@_customer_options
def customer_update(
    customer_id: str, name: str, phone: str, email: str, document: str, notes: str
) -> None:
    """Replace a customer's details."""
    config = settings()
    handler = UpdateCustomerHandler(customer_repository(config), config.company_id)

    try:
        handler.handle(
            customer_id, name, phone=phone, email=email, document=document, notes=notes
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer {customer_id} updated.")


@click.command("delete")
@click.option("--id", "customer_id", required=True, help="Customer ID.")
def customer_delete(customer_id: str) -> None:
    """Delete a customer (the record is kept, marked as deleted)."""
    config = settings()
    handler = DeleteCustomerHandler(customer_repository(config), config.company_id)

    try:
        handler.handle(customer_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer {customer_id} deleted.")


@click.command("search")
@click.argument("term", default="")
@click.option("--page", default=1, show_default=True, type=int, help="Page number.")
def customer_search(term: str, page: int) -> None:
    """Search customers by name, phone or document."""
    config = settings()
    handler = SearchCustomersHandler(customer_repository(config), config.company_id)

    try:
        result = handler.handle(term, page=page)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not result.items:
        click.echo("No customers found.")
        return

    click.echo(f"{'ID':<38} {'Name':<24} {'Phone':<16} {'Document':<16}")
    click.echo("-" * 96)
    for c in result.items:
        click.echo(f"{c.id:<38} {c.name:<24} {c.phone or '':<16} {c.document or '':<16}")
    click.echo(f"Page {result.page} of {result.total_pages} ({result.total_count} customers)")
