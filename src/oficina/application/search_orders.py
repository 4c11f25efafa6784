"""Application service: Search Orders use case (query)."""

from __future__ import annotations

from oficina.application.dto import OrderSummaryDTO, to_order_summary_dto
from oficina.domain.service.order_ledger import OrderLedger


class SearchOrdersHandler:

    def __init__(self, ledger: OrderLedger) -> None:
        self._ledger = ledger

    def handle(self, plate_query: str = "", status: str | None = None) -> list[OrderSummaryDTO]:
        """List orders whose plate contains *plate_query* (any case).

        An empty query lists every order; *status* narrows the result to
        one of ``open``, ``in-progress`` or ``finalized``.
        """
        orders = self._ledger.find_by_plate(plate_query)
        if status:
            orders = [o for o in orders if o.status.value == status]
        return [to_order_summary_dto(o) for o in orders]
