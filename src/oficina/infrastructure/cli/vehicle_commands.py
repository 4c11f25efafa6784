"""CLI commands for the vehicle registry."""

from __future__ import annotations

import click

from oficina.application.delete_vehicle import DeleteVehicleHandler
from oficina.application.register_vehicle import RegisterVehicleHandler
from oficina.application.search_vehicles import SearchVehiclesHandler
from oficina.application.update_vehicle import UpdateVehicleHandler
from oficina.domain.exceptions import DomainException
from oficina.domain.model.vehicle import VehicleType
from oficina.infrastructure.bootstrap import customer_repository, settings, vehicle_repository

VEHICLE_TYPES = click.Choice([t.value for t in VehicleType])


def _vehicle_options(func):
    for option in reversed(
        [
            click.option("--customer", "customer_id", required=True, help="Owner's customer ID."),
            click.option("--plate", required=True, help="Plate, e.g. ABC-1234."),
            click.option("--brand", required=True, help="Brand, e.g. Honda."),
            click.option("--model", required=True, help="Model, e.g. CG 160."),
            click.option("--year", default=None, type=int, help="Model year."),
            click.option("--color", default=None, help="Color."),
            click.option("--type", "vehicle_type", default="moto", type=VEHICLE_TYPES,
                         show_default=True, help="Vehicle type."),
            click.option("--odometer", default=None, type=int, help="Current odometer (km)."),
            click.option("--notes", default=None, help="Free-text notes."),
        ]
    ):
        func = option(func)
    return func


@click.command("add")
@_vehicle_options
def vehicle_add(vehicle_type: str, **fields) -> None:
    """Register a vehicle for a customer."""
    config = settings()
    handler = RegisterVehicleHandler(
        vehicle_repository(config), customer_repository(config), config.company_id
    )

    try:
        dto = handler.handle(type=vehicle_type, **fields)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Vehicle {dto.id} ({dto.plate}) registered.")


@click.command("update")
@click.option("--id", "vehicle_id", required=True, help="Vehicle ID.")
@_vehicle_options
def vehicle_update(vehicle_id: str, vehicle_type: str, **fields) -> None:
    """Replace a vehicle's details."""
    config = settings()
    handler = UpdateVehicleHandler(
        vehicle_repository(config), customer_repository(config), config.company_id
    )

    try:
        handler.handle(vehicle_id, type=vehicle_type, **fields)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Vehicle {vehicle_id} updated.")


@click.command("delete")
@click.option("--id", "vehicle_id", required=True, help="Vehicle ID.")
def vehicle_delete(vehicle_id: str) -> None:
    """Delete a vehicle (the record is kept with a deletion timestamp)."""
    config = settings()
    handler = DeleteVehicleHandler(vehicle_repository(config), config.company_id)

    try:
        handler.handle(vehicle_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Vehicle {vehicle_id} deleted.")


@click.command("search")
@click.argument("term", default="")
@click.option("--customer", "customer_id", default=None, help="Only this customer's vehicles.")
@click.option("--page", default=1, show_default=True, type=int, help="Page number.")
def vehicle_search(term: str, customer_id: str | None, page: int) -> None:
    """Search vehicles by plate, brand or model."""
    config = settings()
    handler = SearchVehiclesHandler(vehicle_repository(config), config.company_id)

    try:
        result = handler.handle(term, page=page, customer_id=customer_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not result.items:
        click.echo("No vehicles found.")
        return

    click.echo(f"{'ID':<38} {'Plate':<10} {'Brand':<12} {'Model':<16} {'Type':<6}")
    click.echo("-" * 86)
    for v in result.items:
        click.echo(f"{v.id:<38} {v.plate:<10} {v.brand:<12} {v.model:<16} {v.type:<6}")
    click.echo(f"Page {result.page} of {result.total_pages} ({result.total_count} vehicles)")
