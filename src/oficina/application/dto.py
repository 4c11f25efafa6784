"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.  Money is pre-formatted.
"""

from __future__ import annotations

from dataclasses import dataclass

from oficina.domain.model.customer import Customer
from oficina.domain.model.order import Order
from oficina.domain.model.product import Product
from oficina.domain.model.sales import SalesAggregateEntry
from oficina.domain.model.vehicle import Vehicle

DATE_FORMAT = "%Y-%m-%d %H:%M UTC"


@dataclass(frozen=True)
class ServiceLineDTO:
    id: str
    name: str
    price: str
    selected: bool


@dataclass(frozen=True)
class ProductLineDTO:
    product_id: str
    product_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "R$ 35.00"
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete service order as displayed to the user."""

    id: int
    plate: str
    customer_name: str
    phone: str
    odometer: str
    notes: str
    status: str
    services: list[ServiceLineDTO]
    products: list[ProductLineDTO]
    total_services: str
    total_products: str
    grand_total: str
    created_at: str
    finalized_at: str | None


@dataclass(frozen=True)
class OrderSummaryDTO:
    """Output: one row of an order listing."""

    id: int
    plate: str
    customer_name: str
    status: str
    grand_total: str
    created_at: str


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    category: str
    price: str
    stock: int
    min_stock: int
    low_stock: bool


@dataclass(frozen=True)
class SalesLineDTO:
    name: str
    quantity: int
    total: str


@dataclass(frozen=True)
class DashboardDTO:
    total_revenue: str
    services_revenue: str
    products_revenue: str
    open_orders: int
    in_progress_orders: int
    finalized_orders: int
    service_sales: list[SalesLineDTO]
    product_sales: list[SalesLineDTO]


@dataclass(frozen=True)
class CustomerDTO:
    id: str
    name: str
    phone: str | None
    email: str | None
    document: str | None
    notes: str | None
    created_at: str


@dataclass(frozen=True)
class VehicleDTO:
    id: str
    customer_id: str
    plate: str
    brand: str
    model: str
    year: int | None
    color: str | None
    type: str
    odometer: int | None
    notes: str | None
    created_at: str


@dataclass(frozen=True)
class PageDTO:
    """Output: one page of registry search results."""

    items: list
    page: int
    total_pages: int
    total_count: int


# --- Mapping ------------------------------------------------------------------


def to_order_dto(order: Order) -> OrderDTO:
    totals = order.totals
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        plate=order.plate,
        customer_name=order.customer_name,
        phone=order.phone,
        odometer=order.odometer,
        notes=order.notes,
        status=order.status.value,
        services=[
            ServiceLineDTO(id=s.id, name=s.name, price=str(s.price), selected=s.selected)
            for s in order.services
        ],
        products=[
            ProductLineDTO(
                product_id=p.product_id,
                product_name=p.product_name,
                quantity=p.quantity.value,
                unit_price=str(p.unit_price),
                line_total=str(p.line_total),
            )
            for p in order.products
        ],
        total_services=str(totals.services),
        total_products=str(totals.products),
        grand_total=str(totals.grand),
        created_at=order.created_at.strftime(DATE_FORMAT),
        finalized_at=order.finalized_at.strftime(DATE_FORMAT) if order.finalized_at else None,
    )


def to_order_summary_dto(order: Order) -> OrderSummaryDTO:
    return OrderSummaryDTO(
        id=order.id,  # type: ignore[arg-type]
        plate=order.plate,
        customer_name=order.customer_name,
        status=order.status.value,
        grand_total=str(order.grand_total),
        created_at=order.created_at.strftime(DATE_FORMAT),
    )


def to_product_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        category=product.category,
        price=str(product.price),
        stock=product.stock,
        min_stock=product.min_stock,
        low_stock=product.is_low_stock,
    )


def to_sales_line_dto(entry: SalesAggregateEntry) -> SalesLineDTO:
    return SalesLineDTO(name=entry.name, quantity=entry.quantity, total=str(entry.total))


def to_customer_dto(customer: Customer) -> CustomerDTO:
    return CustomerDTO(
        id=customer.id,
        name=customer.name,
        phone=customer.phone,
        email=customer.email,
        document=customer.document,
        notes=customer.notes,
        created_at=customer.created_at.strftime(DATE_FORMAT),
    )


def to_vehicle_dto(vehicle: Vehicle) -> VehicleDTO:
    return VehicleDTO(
        id=vehicle.id,
        customer_id=vehicle.customer_id,
        plate=vehicle.plate,
        brand=vehicle.brand,
        model=vehicle.model,
        year=vehicle.year,
        color=vehicle.color,
        type=vehicle.type.value,
        odometer=vehicle.odometer,
        notes=vehicle.notes,
        created_at=vehicle.created_at.strftime(DATE_FORMAT),
    )
