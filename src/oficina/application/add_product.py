"""Application service: Add Product use case."""

from __future__ import annotations

from oficina.application.dto import ProductDTO, to_product_dto
from oficina.domain.exceptions import ValidationError
from oficina.domain.service.catalog_store import CatalogStore


class AddProductHandler:

    def __init__(self, catalog: CatalogStore) -> None:
        self._catalog = catalog

    def handle(
        self,
        name: str,
        category: str,
        price: str,
        stock: int = 0,
        min_stock: int = 0,
    ) -> ProductDTO:
        """Add a new product to the catalog."""
        if name and self._catalog.find_by_name(name) is not None:
            raise ValidationError(f"Product '{name.strip()}' already exists")

        product = self._catalog.add_product(name, category, price, stock, min_stock)
        return to_product_dto(product)
