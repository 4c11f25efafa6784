"""Application service: Remove Product from Order use case."""

from __future__ import annotations

from oficina.application.dto import OrderDTO, to_order_dto
from oficina.domain.service.order_ledger import OrderLedger


class RemoveOrderProductHandler:

    def __init__(self, ledger: OrderLedger) -> None:
        self._ledger = ledger

    def handle(self, order_id: int, product_id: str) -> OrderDTO:
        return to_order_dto(self._ledger.remove_product(order_id, product_id))
