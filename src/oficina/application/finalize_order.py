"""Application service: Finalize Order use case.

Closes the ticket: takes the products out of stock, adds the order to the
sales report and freezes it.  See OrderLedger.finalize_order for the order
in which the side effects are applied.
"""

from __future__ import annotations

from oficina.application.dto import OrderDTO, to_order_dto
from oficina.domain.service.order_ledger import OrderLedger


class FinalizeOrderHandler:

    def __init__(self, ledger: OrderLedger) -> None:
        self._ledger = ledger

    def handle(self, order_id: int) -> OrderDTO:
        return to_order_dto(self._ledger.finalize_order(order_id))
