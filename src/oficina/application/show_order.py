"""Application service: Show Order use case (query)."""

from __future__ import annotations

from oficina.application.dto import OrderDTO, to_order_dto
from oficina.domain.service.order_ledger import OrderLedger


class ShowOrderHandler:

    def __init__(self, ledger: OrderLedger) -> None:
        self._ledger = ledger

    def handle(self, order_id: int) -> OrderDTO:
        return to_order_dto(self._ledger.get_order(order_id))
