"""Domain service: resolve a scanned product code to a name and price.

The lookup is made of two swappable parts: an exact-match table and a
fallback generator used for codes the table does not know.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Mapping

from oficina.domain.exceptions import ValidationError
from oficina.domain.model.value_objects import Money


@dataclass(frozen=True)
class ScannedProduct:
    code: str
    name: str
    price: Money


DEFAULT_CODE_TABLE: dict[str, tuple[str, str]] = {
    "7891234567890": ("Óleo Motor 10W40 1L", "45.00"),
    "7891234567891": ("Pastilha de Freio Dianteira", "89.00"),
    "7891234567892": ("Corrente de Transmissão", "120.00"),
    "7891234567893": ("Kit Relação Completo", "280.00"),
    "7891234567894": ("Pneu Traseiro 100/90-18", "320.00"),
    "7891234567895": ("Pneu Dianteiro 90/90-19", "290.00"),
    "7891234567896": ("Filtro de Óleo", "35.00"),
    "7891234567897": ("Vela de Ignição", "28.00"),
    "7891234567898": ("Cabo de Acelerador", "55.00"),
    "7891234567899": ("Cabo de Embreagem", "48.00"),
}

FALLBACK_PRICE = Money.of("50.00")


def generic_product(code: str) -> ScannedProduct:
    """Stand-in product for a code nobody registered."""
    return ScannedProduct(code=code, name=f"Produto {code[-4:]}", price=FALLBACK_PRICE)


class ProductLookup:

    def __init__(
        self,
        table: Mapping[str, tuple[str, str]] | None = None,
        fallback: Callable[[str], ScannedProduct] | None = generic_product,
    ) -> None:
        self._table = dict(DEFAULT_CODE_TABLE if table is None else table)
        self._fallback = fallback

    def lookup(self, code: str) -> ScannedProduct:
        clean = (code or "").strip()
        if not clean:
            raise ValidationError("Product code is required")

        if clean in self._table:
            name, price = self._table[clean]
            return ScannedProduct(code=clean, name=name, price=Money.of(price))

        if self._fallback is None:
            raise ValidationError(f"Unknown product code '{clean}'")
        return self._fallback(clean)
