"""Application service: Update Product use case."""

from __future__ import annotations

from oficina.application.dto import ProductDTO, to_product_dto
from oficina.domain.exceptions import ValidationError
from oficina.domain.service.catalog_store import CatalogStore


class UpdateProductHandler:

    def __init__(self, catalog: CatalogStore) -> None:
        self._catalog = catalog

    def handle(
        self,
        product_id: str,
        name: str | None = None,
        category: str | None = None,
        price: str | None = None,
        stock: int | None = None,
        min_stock: int | None = None,
    ) -> ProductDTO:
        """Change the given fields of a product; None means "leave as is".

        Price changes do NOT affect existing orders; they captured a
        price snapshot when the product was added to them.
        """
        fields = {
            "name": name,
            "category": category,
            "price": price,
            "stock": stock,
            "min_stock": min_stock,
        }
        changes = {k: v for k, v in fields.items() if v is not None}
        if not changes:
            raise ValidationError("Nothing to update")

        product = self._catalog.update_product(product_id, **changes)
        return to_product_dto(product)
