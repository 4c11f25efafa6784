"""Application service: Toggle Service use case."""

from __future__ import annotations

from oficina.application.dto import OrderDTO, to_order_dto
from oficina.domain.service.order_ledger import OrderLedger


class ToggleServiceHandler:

    def __init__(self, ledger: OrderLedger) -> None:
        self._ledger = ledger

    def handle(self, order_id: int, service_line_id: str) -> OrderDTO:
        """Select the service if it was unselected, and vice versa."""
        return to_order_dto(self._ledger.toggle_service(order_id, service_line_id))
