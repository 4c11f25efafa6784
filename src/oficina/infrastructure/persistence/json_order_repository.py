"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from oficina.domain.model.order import Order, OrderStatus, ProductLine
from oficina.domain.model.service import ServiceLine
from oficina.domain.model.value_objects import Money, Quantity
from oficina.domain.repository.order_repository import OrderRepository
from oficina.infrastructure.persistence.json_file import JsonFile


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> int:
        orders = self._file.load()
        if not orders:
            return 1
        return max(o["id"] for o in orders) + 1

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._file.load():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Order]:
        return [self._to_domain(raw) for raw in self._file.load()]

    def save(self, order: Order) -> None:
        if order.id is None:
            order.id = self.next_id()
        self._file.upsert(self._to_raw(order))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "plate": order.plate,
            "customer_name": order.customer_name,
            "phone": order.phone,
            "odometer": order.odometer,
            "notes": order.notes,
            "status": order.status.value,
            "created_at": order.created_at.isoformat(),
            "finalized_at": order.finalized_at.isoformat() if order.finalized_at else None,
            "services": [
                {
                    "id": s.id,
                    "name": s.name,
                    "price": str(s.price.amount),
                    "selected": s.selected,
                }
                for s in order.services
            ],
            "products": [
                {
                    "product_id": p.product_id,
                    "product_name": p.product_name,
                    "quantity": p.quantity.value,
                    "unit_price": str(p.unit_price.amount),
                }
                for p in order.products
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        finalized_at = raw.get("finalized_at")
        return Order(
            id=raw["id"],
            plate=raw["plate"],
            customer_name=raw["customer_name"],
            phone=raw.get("phone", ""),
            odometer=raw.get("odometer", ""),
            notes=raw.get("notes", ""),
            status=OrderStatus(raw["status"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
            finalized_at=datetime.fromisoformat(finalized_at) if finalized_at else None,
            services=[
                ServiceLine(
                    id=s["id"],
                    name=s["name"],
                    price=Money(Decimal(s["price"])),
                    selected=s.get("selected", False),
                )
                for s in raw.get("services", [])
            ],
            products=[
                ProductLine(
                    product_id=p["product_id"],
                    product_name=p["product_name"],
                    quantity=Quantity(p["quantity"]),
                    unit_price=Money(Decimal(p["unit_price"])),
                )
                for p in raw.get("products", [])
            ],
        )
