"""Order aggregate — one service order (repair ticket) at the shop.

The Order is an aggregate root that owns its service lines and product
lines.  Totals are never stored: they are derived from the current lines
every time they are read, so they cannot drift.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from oficina.domain.exceptions import IllegalStateError, NotFoundError, ValidationError
from oficina.domain.model.service import ServiceLine
from oficina.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    OPEN = "open"
    IN_PROGRESS = "in-progress"
    FINALIZED = "finalized"


# Forward-only workflow.  OPEN -> FINALIZED is only reachable with allow_skip.
_NEXT_STATUS = {
    OrderStatus.OPEN: OrderStatus.IN_PROGRESS,
    OrderStatus.IN_PROGRESS: OrderStatus.FINALIZED,
}

# Lines added by barcode with no catalog match are keyed outside the catalog ID space.
SCANNED_PREFIX = "scan:"


@dataclass
class ProductLine:
    """Snapshot of a catalog product on an order.

    ``unit_price`` and ``product_name`` are copied when the line is added;
    later catalog changes (or deleting the product) do not touch them.
    """

    product_id: str
    product_name: str
    quantity: Quantity
    unit_price: Money

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value

    @property
    def from_catalog(self) -> bool:
        return not self.product_id.startswith(SCANNED_PREFIX)


@dataclass(frozen=True)
class OrderTotals:
    services: Money
    products: Money

    @property
    def grand(self) -> Money:
        return self.services + self.products


@dataclass
class Order:
    """Aggregate root for service orders.

    Use ``Order.create()`` for new orders.  The ``__init__`` is kept simple
    so the repository can reconstitute persisted orders without
    re-validating.
    """

    id: int | None
    plate: str
    customer_name: str
    phone: str
    services: list[ServiceLine]
    products: list[ProductLine] = field(default_factory=list)
    odometer: str = ""
    notes: str = ""
    status: OrderStatus = OrderStatus.OPEN
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    finalized_at: datetime | None = None

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(
        plate: str,
        customer_name: str,
        phone: str,
        service_snapshot: list[ServiceLine],
        odometer: str = "",
        notes: str = "",
    ) -> Order:
        """Open a new order with every catalog service unselected."""
        return Order(
            id=None,
            plate=_normalize_plate(plate),
            customer_name=_required(customer_name, "Customer name"),
            phone=(phone or "").strip(),
            services=[
                ServiceLine(id=s.id, name=s.name, price=s.price, selected=False)
                for s in service_snapshot
            ],
            odometer=(odometer or "").strip(),
            notes=(notes or "").strip(),
        )

    # --- Services -------------------------------------------------------------

    def toggle_service(self, service_line_id: str) -> None:
        self._ensure_editable()
        self._find_service(service_line_id).toggle()

    def set_service_price(self, service_line_id: str, new_price: str | Money) -> None:
        self._ensure_editable()
        line = self._find_service(service_line_id)
        line.reprice(Money.of(new_price))

    # --- Products -------------------------------------------------------------

    def add_product_line(
        self,
        product_id: str,
        name: str,
        quantity: int,
        unit_price: Money,
    ) -> None:
        """Add *quantity* units, merging into an existing line for the product."""
        self._ensure_editable()
        qty = Quantity(quantity)
        for line in self.products:
            if line.product_id == product_id:
                line.quantity = line.quantity + qty
                return
        self.products.append(
            ProductLine(
                product_id=product_id,
                product_name=name,
                quantity=qty,
                unit_price=unit_price,
            )
        )

    def remove_product_line(self, product_id: str) -> None:
        self._ensure_editable()
        self.products = [p for p in self.products if p.product_id != product_id]

    # --- Field updates --------------------------------------------------------

    def update_details(
        self,
        plate: str | None = None,
        customer_name: str | None = None,
        phone: str | None = None,
        odometer: str | None = None,
        notes: str | None = None,
    ) -> None:
        self._ensure_editable()
        # Validate everything first so a bad field leaves the order untouched.
        new_plate = _normalize_plate(plate) if plate is not None else self.plate
        new_customer = (
            _required(customer_name, "Customer name")
            if customer_name is not None
            else self.customer_name
        )
        self.plate = new_plate
        self.customer_name = new_customer
        if phone is not None:
            self.phone = phone.strip()
        if odometer is not None:
            self.odometer = odometer.strip()
        if notes is not None:
            self.notes = notes.strip()

    def replace_lines(
        self,
        services: list[ServiceLine] | None = None,
        products: list[ProductLine] | None = None,
    ) -> None:
        """Swap whole line lists (the presentation layer edits them in bulk)."""
        self._ensure_editable()
        if services is not None:
            self.services = list(services)
        if products is not None:
            self.products = list(products)

    # --- State transitions ----------------------------------------------------

    def check_advance(self, target: OrderStatus, allow_skip: bool = False) -> None:
        """Raise IllegalStateError unless ``self.status -> target`` is allowed."""
        if self.status == OrderStatus.FINALIZED:
            raise IllegalStateError(f"Order #{self.id} is already finalized")
        allowed = {_NEXT_STATUS[self.status]}
        if allow_skip and self.status == OrderStatus.OPEN:
            allowed.add(OrderStatus.FINALIZED)
        if target not in allowed:
            raise IllegalStateError(
                f"Cannot move order #{self.id} from {self.status.value} "
                f"to {target.value}"
            )

    def advance(self, target: OrderStatus, allow_skip: bool = False) -> None:
        self.check_advance(target, allow_skip=allow_skip)
        self.status = target
        if target == OrderStatus.FINALIZED:
            self.finalized_at = datetime.now(timezone.utc)

    # --- Computed properties --------------------------------------------------

    @property
    def totals(self) -> OrderTotals:
        return OrderTotals(
            services=Money.sum(s.price for s in self.services if s.selected),
            products=Money.sum(p.line_total for p in self.products),
        )

    @property
    def total_services(self) -> Money:
        return self.totals.services

    @property
    def total_products(self) -> Money:
        return self.totals.products

    @property
    def grand_total(self) -> Money:
        return self.totals.grand

    @property
    def selected_services(self) -> list[ServiceLine]:
        return [s for s in self.services if s.selected]

    @property
    def is_finalized(self) -> bool:
        return self.status == OrderStatus.FINALIZED

    # --- Internal helpers -----------------------------------------------------

    def _ensure_editable(self) -> None:
        if self.is_finalized:
            raise IllegalStateError(
                f"Order #{self.id} is finalized and can no longer be edited"
            )

    def _find_service(self, service_line_id: str) -> ServiceLine:
        for line in self.services:
            if line.id == service_line_id:
                return line
        raise NotFoundError(
            f"Service '{service_line_id}' not found in order #{self.id}"
        )


def _normalize_plate(plate: str) -> str:
    return _required(plate, "Plate").upper()


def _required(value: str | None, label: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{label} is required")
    return value.strip()
