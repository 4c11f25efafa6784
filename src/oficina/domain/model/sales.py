"""Cumulative sales records built from finalized orders."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from oficina.domain.exceptions import ValidationError
from oficina.domain.model.value_objects import Money


class SaleKind(Enum):
    SERVICE = "service"
    PRODUCT = "product"


@dataclass
class SalesAggregateEntry:
    """Running quantity and revenue for one service or product name."""

    kind: SaleKind
    name: str
    quantity: int = 0
    total: Money = field(default_factory=Money.zero)

    def accumulate(self, quantity: int, amount: Money) -> None:
        if quantity <= 0:
            raise ValidationError("Sold quantity must be positive")
        self.quantity += quantity
        self.total = self.total + amount
