"""Application service: Remove Product use case."""

from __future__ import annotations

from oficina.domain.service.catalog_store import CatalogStore


class RemoveProductHandler:

    def __init__(self, catalog: CatalogStore) -> None:
        self._catalog = catalog

    def handle(self, product_id: str) -> None:
        self._catalog.remove_product(product_id)
