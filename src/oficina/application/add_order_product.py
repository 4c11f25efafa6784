"""Application service: Add Product to Order use case.

Copies the catalog product's current name and price into the order.
"""

from __future__ import annotations

from oficina.application.dto import OrderDTO, to_order_dto
from oficina.domain.service.order_ledger import OrderLedger


class AddOrderProductHandler:

    def __init__(self, ledger: OrderLedger) -> None:
        self._ledger = ledger

    def handle(self, order_id: int, product_id: str, quantity: int) -> OrderDTO:
        return to_order_dto(self._ledger.add_product(order_id, product_id, quantity))
