"""Application service: Set Service Price use case.

The new price applies to this order only; the catalog default and other
orders keep theirs.
"""

from __future__ import annotations

from oficina.application.dto import OrderDTO, to_order_dto
from oficina.domain.service.order_ledger import OrderLedger


class SetServicePriceHandler:

    def __init__(self, ledger: OrderLedger) -> None:
        self._ledger = ledger

    def handle(self, order_id: int, service_line_id: str, price: str) -> OrderDTO:
        order = self._ledger.set_service_price(order_id, service_line_id, price)
        return to_order_dto(order)
