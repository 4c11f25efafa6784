"""Application service: Scan Product use case.

Adds a product to an order from its barcode, as read by a scanner at the
counter.
"""

from __future__ import annotations

from oficina.application.dto import OrderDTO, to_order_dto
from oficina.domain.service.order_ledger import OrderLedger


class ScanProductHandler:

    def __init__(self, ledger: OrderLedger) -> None:
        self._ledger = ledger

    def handle(self, order_id: int, code: str, quantity: int = 1) -> OrderDTO:
        return to_order_dto(self._ledger.add_scanned_product(order_id, code, quantity))
