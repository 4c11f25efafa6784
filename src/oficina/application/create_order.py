"""Application service: Create Order use case.

Opens a new service order for a vehicle.  The order starts with every
service the shop offers, none of them selected, and no products.
"""

from __future__ import annotations

from oficina.application.dto import OrderDTO, to_order_dto
from oficina.domain.service.order_ledger import OrderLedger


class CreateOrderHandler:

    def __init__(self, ledger: OrderLedger) -> None:
        self._ledger = ledger

    def handle(
        self,
        plate: str,
        customer_name: str,
        phone: str,
        odometer: str = "",
        notes: str = "",
    ) -> OrderDTO:
        order = self._ledger.create_order(
            plate=plate,
            customer_name=customer_name,
            phone=phone,
            odometer=odometer,
            notes=notes,
        )
        return to_order_dto(order)
