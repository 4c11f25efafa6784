"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from oficina.domain.model.product import Product
from oficina.domain.model.value_objects import Money
from oficina.domain.repository.product_repository import ProductRepository
from oficina.infrastructure.persistence.json_file import JsonFile


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- ProductRepository interface ------------------------------------------

    def next_id(self) -> str:
        ids = [int(raw["id"]) for raw in self._file.load() if str(raw["id"]).isdigit()]
        return str(max(ids) + 1) if ids else "1"

    def get_by_id(self, product_id: str) -> Product | None:
        for raw in self._file.load():
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def get_by_name(self, name: str) -> Product | None:
        for product in self.list_all():
            if product.name.lower() == name.strip().lower():
                return product
        return None

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._file.load()]

    def save(self, product: Product) -> None:
        self._file.upsert(self._to_raw(product))

    def delete(self, product_id: str) -> None:
        records = [raw for raw in self._file.load() if raw["id"] != product_id]
        self._file.persist(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "category": product.category,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "stock": product.stock,
            "min_stock": product.min_stock,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            category=raw.get("category", ""),
            price=Money(Decimal(raw["price"]), raw.get("currency", "BRL")),
            stock=raw.get("stock", 0),
            min_stock=raw.get("min_stock", 0),
        )
