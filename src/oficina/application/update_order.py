"""Application service: Update Order use case.

Edits the contact and vehicle details of an order that is not finalized.
Only the fields that are passed (not None) change.
"""

from __future__ import annotations

from oficina.application.dto import OrderDTO, to_order_dto
from oficina.domain.service.order_ledger import OrderLedger


class UpdateOrderHandler:

    def __init__(self, ledger: OrderLedger) -> None:
        self._ledger = ledger

    def handle(
        self,
        order_id: int,
        plate: str | None = None,
        customer_name: str | None = None,
        phone: str | None = None,
        odometer: str | None = None,
        notes: str | None = None,
    ) -> OrderDTO:
        fields = {
            "plate": plate,
            "customer_name": customer_name,
            "phone": phone,
            "odometer": odometer,
            "notes": notes,
        }
        order = self._ledger.update_order(
            order_id, **{k: v for k, v in fields.items() if v is not None}
        )
        return to_order_dto(order)
