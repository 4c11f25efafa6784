"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from oficina.application.dto import ProductDTO, to_product_dto
from oficina.domain.service.catalog_store import CatalogStore


class ShowInventoryHandler:

    def __init__(self, catalog: CatalogStore) -> None:
        self._catalog = catalog

    def handle(self, low_stock_only: bool = False) -> list[ProductDTO]:
        if low_stock_only:
            products = self._catalog.list_low_stock()
        else:
            products = self._catalog.list_products()
        return [to_product_dto(p) for p in products]
