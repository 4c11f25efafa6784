"""Application service: Seed Catalog use case.

Fills an empty catalog with the shop's starting inventory.
"""

from __future__ import annotations

from oficina.application.dto import ProductDTO, to_product_dto
from oficina.domain.service.catalog_store import CatalogStore


class SeedCatalogHandler:

    def __init__(self, catalog: CatalogStore) -> None:
        self._catalog = catalog

    def handle(self) -> list[ProductDTO]:
        return [to_product_dto(p) for p in self._catalog.seed_defaults()]
