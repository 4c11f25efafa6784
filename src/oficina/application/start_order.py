"""Application service: Start Order use case (open -> in-progress)."""

from __future__ import annotations

from oficina.application.dto import OrderDTO, to_order_dto
from oficina.domain.service.order_ledger import OrderLedger


class StartOrderHandler:

    def __init__(self, ledger: OrderLedger) -> None:
        self._ledger = ledger

    def handle(self, order_id: int) -> OrderDTO:
        return to_order_dto(self._ledger.start_order(order_id))
