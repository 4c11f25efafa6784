"""JSON-file-backed implementation of SalesRepository."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from oficina.domain.model.sales import SaleKind, SalesAggregateEntry
from oficina.domain.model.value_objects import Money
from oficina.domain.repository.sales_repository import SalesRepository
from oficina.infrastructure.persistence.json_file import JsonFile


class JsonSalesRepository(SalesRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    def get(self, kind: SaleKind, name: str) -> SalesAggregateEntry | None:
        for raw in self._file.load():
            if raw["kind"] == kind.value and raw["name"] == name:
                return self._to_domain(raw)
        return None

    def list_by_kind(self, kind: SaleKind) -> list[SalesAggregateEntry]:
        return [
            self._to_domain(raw) for raw in self._file.load() if raw["kind"] == kind.value
        ]

    def save(self, entry: SalesAggregateEntry) -> None:
        # Entries are keyed by (kind, name).
        self._file.upsert(self._to_raw(entry), key="key")

    @staticmethod
    def _to_raw(entry: SalesAggregateEntry) -> dict:
        return {
            "key": f"{entry.kind.value}:{entry.name}",
            "kind": entry.kind.value,
            "name": entry.name,
            "quantity": entry.quantity,
            "total": str(entry.total.amount),
        }

    @staticmethod
    def _to_domain(raw: dict) -> SalesAggregateEntry:
        return SalesAggregateEntry(
            kind=SaleKind(raw["kind"]),
            name=raw["name"],
            quantity=raw["quantity"],
            total=Money(Decimal(raw["total"])),
        )
