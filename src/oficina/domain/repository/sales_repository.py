"""Abstract repository for cumulative sales entries."""

from __future__ import annotations

from abc import ABC, abstractmethod

from oficina.domain.model.sales import SaleKind, SalesAggregateEntry


class SalesRepository(ABC):

    @abstractmethod
    def get(self, kind: SaleKind, name: str) -> SalesAggregateEntry | None:
        """Return the entry for an exact service/product name, or None."""

    @abstractmethod
    def list_by_kind(self, kind: SaleKind) -> list[SalesAggregateEntry]:
        """Return entries of one kind in the order they were first recorded."""

    @abstractmethod
    def save(self, entry: SalesAggregateEntry) -> None:
        """Persist a new or updated entry."""
