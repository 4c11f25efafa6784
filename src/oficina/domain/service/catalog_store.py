"""Domain service: Catalog Store.

Owns the shop's reference data: the product catalog (through a
ProductRepository) and the list of services the shop offers.  Orders copy
from it but never write back to it, except for the stock decrement applied
when an order is finalized.
"""

from __future__ import annotations

import logging

from oficina.domain.exceptions import NotFoundError
from oficina.domain.model.product import Product
from oficina.domain.model.service import (
    DEFAULT_SERVICE_TYPES,
    ServiceLine,
    ServiceType,
    service_lines_from,
)
from oficina.domain.model.value_objects import Money
from oficina.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

# The shop's starting inventory: (name, category, price, stock, min_stock).
INITIAL_PRODUCTS = (
    ("Óleo Motor 10W40 1L", "Óleos", "45.00", 20, 5),
    ("Pastilha de Freio Dianteira", "Freios", "89.00", 15, 3),
    ("Corrente de Transmissão", "Transmissão", "120.00", 8, 2),
    ("Kit Relação Completo", "Transmissão", "280.00", 5, 2),
    ("Pneu Traseiro 100/90-18", "Pneus", "320.00", 6, 2),
    ("Pneu Dianteiro 90/90-19", "Pneus", "290.00", 6, 2),
    ("Filtro de Óleo", "Filtros", "35.00", 25, 5),
    ("Vela de Ignição", "Ignição", "28.00", 30, 10),
    ("Cabo de Acelerador", "Cabos", "55.00", 10, 3),
    ("Cabo de Embreagem", "Cabos", "48.00", 10, 3),
)


class CatalogStore:

    def __init__(
        self,
        product_repo: ProductRepository,
        service_types: tuple[ServiceType, ...] = DEFAULT_SERVICE_TYPES,
    ) -> None:
        self._product_repo = product_repo
        self._service_types = tuple(service_types)

    # --- Products -------------------------------------------------------------

    def add_product(
        self,
        name: str,
        category: str,
        unit_price: str | Money,
        stock: int = 0,
        min_stock: int = 0,
    ) -> Product:
        """Add a product under a freshly assigned ID."""
        product = Product.create(
            product_id=self._product_repo.next_id(),
            name=name,
            category=category,
            price=Money.of(unit_price),
            stock=stock,
            min_stock=min_stock,
        )
        self._product_repo.save(product)
        logger.info("Added product %s '%s' (stock=%d)", product.id, product.name, product.stock)
        return product

    def update_product(self, product_id: str, **fields) -> Product:
        product = self.get_product(product_id)
        product.update(**fields)
        self._product_repo.save(product)
        logger.info("Updated product %s: %s", product_id, ", ".join(sorted(fields)))
        return product

    def remove_product(self, product_id: str) -> None:
        """Delete a product for good.

        Orders that already hold a line for it keep their snapshot.
        """
        product = self.get_product(product_id)
        self._product_repo.delete(product.id)
        logger.info("Removed product %s '%s'", product.id, product.name)

    def decrement_stock(self, product_id: str, amount: int) -> None:
        """Take *amount* units out of stock, clamping at zero.

        Unknown IDs are ignored: the product may have been removed after an
        order captured it, and that must not block finalizing the order.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            logger.warning(
                "Stock decrement skipped: product %s is no longer in the catalog",
                product_id,
            )
            return
        before = product.stock
        product.decrement_stock(amount)
        self._product_repo.save(product)
        logger.debug("Stock of %s: %d -> %d", product_id, before, product.stock)

    def get_product(self, product_id: str) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Product with ID '{product_id}' not found")
        return product

    def find_by_name(self, name: str) -> Product | None:
        return self._product_repo.get_by_name(name)

    def list_products(self) -> list[Product]:
        return self._product_repo.list_all()

    def list_low_stock(self) -> list[Product]:
        return [p for p in self._product_repo.list_all() if p.is_low_stock]

    def seed_defaults(self) -> list[Product]:
        """Load the starting inventory into an empty catalog.

        Returns the products that were added (none if the catalog already
        had products).
        """
        if self._product_repo.list_all():
            return []
        return [
            self.add_product(name, category, price, stock, min_stock)
            for name, category, price, stock, min_stock in INITIAL_PRODUCTS
        ]

    # --- Services -------------------------------------------------------------

    @property
    def service_types(self) -> tuple[ServiceType, ...]:
        return self._service_types

    def service_snapshot(self) -> list[ServiceLine]:
        """A fresh copy of the offered services, all unselected."""
        return service_lines_from(self._service_types)
