"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from oficina.application.add_product import AddProductHandler
from oficina.application.remove_product import RemoveProductHandler
from oficina.application.seed_catalog import SeedCatalogHandler
from oficina.application.show_inventory import ShowInventoryHandler
from oficina.application.update_product import UpdateProductHandler
from oficina.domain.exceptions import DomainException
from oficina.infrastructure.bootstrap import catalog_store


def _display_products(products) -> None:
    click.echo(f"{'ID':<6} {'Name':<30} {'Category':<14} {'Price':>12} {'Stock':>6} {'Min':>5}")
    click.echo("-" * 78)
    for p in products:
        flag = " !" if p.low_stock else ""
        click.echo(
            f"{p.id:<6} {p.name:<30} {p.category:<14} {p.price:>12} "
            f"{p.stock:>6} {p.min_stock:>5}{flag}"
        )


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--category", required=True, help="Category label, e.g. Filtros.")
@click.option("--price", required=True, help="Unit price (e.g. 35.00).")
@click.option("--stock", default=0, type=int, help="Units in stock.")
@click.option("--min-stock", default=0, type=int, help="Low-stock threshold.")
def product_add(name: str, category: str, price: str, stock: int, min_stock: int) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(catalog_store())

    try:
        product = handler.handle(name, category, price, stock, min_stock)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    products = ShowInventoryHandler(catalog_store()).handle()

    if not products:
        click.echo("No products found.")
        return

    _display_products(products)


@click.command("low-stock")
def product_low_stock() -> None:
    """List products at or below their minimum stock."""
    products = ShowInventoryHandler(catalog_store()).handle(low_stock_only=True)

    if not products:
        click.echo("No products are low on stock.")
        return

    _display_products(products)


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--category", default=None, help="New category.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--stock", default=None, type=int, help="New stock level.")
@click.option("--min-stock", default=None, type=int, help="New low-stock threshold.")
def product_update(
    product_id: str,
    name: str | None,
    category: str | None,
    price: str | None,
    stock: int | None,
    min_stock: int | None,
) -> None:
    """Update some fields of a product."""
    handler = UpdateProductHandler(catalog_store())

    try:
        handler.handle(
            product_id,
            name=name,
            category=category,
            price=price,
            stock=stock,
            min_stock=min_stock,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} updated.")


@click.command("remove")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_remove(product_id: str) -> None:
    """Remove a product from the catalog."""
    handler = RemoveProductHandler(catalog_store())

    try:
        handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} removed.")


@click.command("seed")
def product_seed() -> None:
    """Load the starting inventory into an empty catalog."""
    added = SeedCatalogHandler(catalog_store()).handle()

    if not added:
        click.echo("Catalog already has products; nothing seeded.")
        return

    click.echo(f"Seeded {len(added)} products.")
