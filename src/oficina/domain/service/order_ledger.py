"""Domain service: Order Ledger.

Keeps every service order plus the cumulative sales report built from
finalized orders.  All intents coming from the outside (create an order,
tick a service, add a product, finalize...) go through the ledger, which
loads the addressed Order, lets the aggregate enforce its rules and saves
it back.

Finalizing is the one operation that touches three collections (catalog
stock, sales entries, the order itself).  The transition is validated
before anything is written; after that the side effects are applied in a
fixed order: stock decrement, service sales, product sales, status flip.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from oficina.domain.exceptions import NotFoundError, ValidationError
from oficina.domain.model.order import SCANNED_PREFIX, Order, OrderStatus
from oficina.domain.model.sales import SaleKind, SalesAggregateEntry
from oficina.domain.model.value_objects import Money
from oficina.domain.repository.order_repository import OrderRepository
from oficina.domain.repository.sales_repository import SalesRepository
from oficina.domain.service.catalog_store import CatalogStore
from oficina.domain.service.product_lookup import ProductLookup

logger = logging.getLogger(__name__)

_DETAIL_FIELDS = ("plate", "customer_name", "phone", "odometer", "notes")
_LINE_FIELDS = ("services", "products")


@dataclass(frozen=True)
class LedgerSummary:
    """Dashboard figures; revenue counts finalized orders only."""

    total_revenue: Money
    services_revenue: Money
    products_revenue: Money
    open_orders: int
    in_progress_orders: int
    finalized_orders: int


class OrderLedger:

    def __init__(
        self,
        order_repo: OrderRepository,
        sales_repo: SalesRepository,
        catalog: CatalogStore,
        lookup: ProductLookup | None = None,
        allow_direct_finalize: bool = False,
    ) -> None:
        self._order_repo = order_repo
        self._sales_repo = sales_repo
        self._catalog = catalog
        self._lookup = lookup or ProductLookup()
        self._allow_direct_finalize = allow_direct_finalize

    # --- Creating and editing -------------------------------------------------

    def create_order(
        self,
        plate: str,
        customer_name: str,
        phone: str,
        odometer: str = "",
        notes: str = "",
    ) -> Order:
        order = Order.create(
            plate=plate,
            customer_name=customer_name,
            phone=phone,
            service_snapshot=self._catalog.service_snapshot(),
            odometer=odometer,
            notes=notes,
        )
        self._order_repo.save(order)
        logger.info("Opened order #%s for plate %s", order.id, order.plate)
        return order

    def update_order(self, order_id: int, **fields) -> Order:
        """Apply field-level updates to an order.

        Accepts plate, customer_name, phone, odometer, notes and whole
        ``services`` / ``products`` line lists.
        """
        unknown = set(fields) - set(_DETAIL_FIELDS) - set(_LINE_FIELDS)
        if unknown:
            raise ValidationError(
                f"Unknown order field(s): {', '.join(sorted(unknown))}"
            )
        order = self.get_order(order_id)
        order.update_details(**{k: v for k, v in fields.items() if k in _DETAIL_FIELDS})
        order.replace_lines(**{k: v for k, v in fields.items() if k in _LINE_FIELDS})
        self._order_repo.save(order)
        return order

    def toggle_service(self, order_id: int, service_line_id: str) -> Order:
        order = self.get_order(order_id)
        order.toggle_service(service_line_id)
        self._order_repo.save(order)
        return order

    def set_service_price(
        self, order_id: int, service_line_id: str, new_price: str | Money
    ) -> Order:
        order = self.get_order(order_id)
        order.set_service_price(service_line_id, new_price)
        self._order_repo.save(order)
        return order

    def add_product(self, order_id: int, product_id: str, quantity: int) -> Order:
        """Add a catalog product to the order at its current price.

        The requested quantity is checked against the stock available right
        now; stock is only taken out when the order is finalized.
        """
        order = self.get_order(order_id)
        product = self._catalog.get_product(product_id)
        if quantity > product.stock:
            raise ValidationError(
                f"Insufficient stock for {product.name} "
                f"(requested {quantity}, only {product.stock} available)"
            )
        order.add_product_line(product.id, product.name, quantity, product.price)
        self._order_repo.save(order)
        return order

    def add_scanned_product(self, order_id: int, code: str, quantity: int = 1) -> Order:
        """Add a product identified by its barcode.

        A code that resolves to a catalog product name goes through
        ``add_product`` (stock check included); anything else becomes a
        snapshot line keyed by ``scan:<code>``, which never touches stock.
        """
        scanned = self._lookup.lookup(code)
        product = self._catalog.find_by_name(scanned.name)
        if product is not None:
            return self.add_product(order_id, product.id, quantity)

        order = self.get_order(order_id)
        order.add_product_line(
            f"{SCANNED_PREFIX}{scanned.code}", scanned.name, quantity, scanned.price
        )
        self._order_repo.save(order)
        return order

    def remove_product(self, order_id: int, product_id: str) -> Order:
        order = self.get_order(order_id)
        order.remove_product_line(product_id)
        self._order_repo.save(order)
        return order

    # --- Workflow -------------------------------------------------------------

    def start_order(self, order_id: int) -> Order:
        order = self.get_order(order_id)
        order.advance(OrderStatus.IN_PROGRESS)
        self._order_repo.save(order)
        logger.info("Order #%s is in progress", order_id)
        return order

    def finalize_order(self, order_id: int) -> Order:
        order = self.get_order(order_id)
        order.check_advance(OrderStatus.FINALIZED, allow_skip=self._allow_direct_finalize)

        for line in order.products:
            if line.from_catalog:
                self._catalog.decrement_stock(line.product_id, line.quantity.value)

        for service in order.selected_services:
            self._record_sale(SaleKind.SERVICE, service.name, 1, service.price)

        for line in order.products:
            self._record_sale(
                SaleKind.PRODUCT, line.product_name, line.quantity.value, line.line_total
            )

        order.advance(OrderStatus.FINALIZED, allow_skip=self._allow_direct_finalize)
        self._order_repo.save(order)
        logger.info("Finalized order #%s, total %s", order.id, order.grand_total)
        return order

    # --- Queries --------------------------------------------------------------

    def get_order(self, order_id: int) -> Order:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise NotFoundError(f"Order #{order_id} not found")
        return order

    def find_by_id(self, order_id: int) -> Order | None:
        return self._order_repo.get_by_id(order_id)

    def find_by_plate(self, query: str) -> list[Order]:
        term = (query or "").strip().upper()
        orders = self._order_repo.list_all()
        if not term:
            return orders
        return [o for o in orders if term in o.plate.upper()]

    def list_orders(self) -> list[Order]:
        return self._order_repo.list_all()

    def service_sales(self) -> list[SalesAggregateEntry]:
        return self._sales_repo.list_by_kind(SaleKind.SERVICE)

    def product_sales(self) -> list[SalesAggregateEntry]:
        return self._sales_repo.list_by_kind(SaleKind.PRODUCT)

    def summary(self) -> LedgerSummary:
        orders = self._order_repo.list_all()
        finalized = [o for o in orders if o.status == OrderStatus.FINALIZED]
        services = Money.sum(o.total_services for o in finalized)
        products = Money.sum(o.total_products for o in finalized)
        return LedgerSummary(
            total_revenue=services + products,
            services_revenue=services,
            products_revenue=products,
            open_orders=sum(1 for o in orders if o.status == OrderStatus.OPEN),
            in_progress_orders=sum(
                1 for o in orders if o.status == OrderStatus.IN_PROGRESS
            ),
            finalized_orders=len(finalized),
        )

    # --- Internal helpers -----------------------------------------------------

    def _record_sale(self, kind: SaleKind, name: str, quantity: int, amount: Money) -> None:
        entry = self._sales_repo.get(kind, name)
        if entry is None:
            entry = SalesAggregateEntry(kind=kind, name=name)
        entry.accumulate(quantity, amount)
        self._sales_repo.save(entry)
