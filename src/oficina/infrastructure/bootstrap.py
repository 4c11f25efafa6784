"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.  Each call builds fresh
objects over the JSON files in the configured data directory; nothing is
cached at module level.
"""

from __future__ import annotations

from oficina.domain.service.catalog_store import CatalogStore
from oficina.domain.service.order_ledger import OrderLedger
from oficina.domain.service.product_lookup import ProductLookup
from oficina.infrastructure.config import Settings, load_settings
from oficina.infrastructure.persistence.json_customer_repository import (
    JsonCustomerRepository,
)
from oficina.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from oficina.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from oficina.infrastructure.persistence.json_sales_repository import (
    JsonSalesRepository,
)
from oficina.infrastructure.persistence.json_vehicle_repository import (
    JsonVehicleRepository,
)


def settings() -> Settings:
    return load_settings()


def product_repository(config: Settings | None = None) -> JsonProductRepository:
    config = config or settings()
    return JsonProductRepository(config.data_dir / "products.json")


def order_repository(config: Settings | None = None) -> JsonOrderRepository:
    config = config or settings()
    return JsonOrderRepository(config.data_dir / "orders.json")


def sales_repository(config: Settings | None = None) -> JsonSalesRepository:
    config = config or settings()
    return JsonSalesRepository(config.data_dir / "sales.json")


def customer_repository(config: Settings | None = None) -> JsonCustomerRepository:
    config = config or settings()
    return JsonCustomerRepository(config.data_dir / "customers.json")


def vehicle_repository(config: Settings | None = None) -> JsonVehicleRepository:
    config = config or settings()
    return JsonVehicleRepository(config.data_dir / "vehicles.json")


def catalog_store(config: Settings | None = None) -> CatalogStore:
    return CatalogStore(product_repository(config))


def order_ledger(config: Settings | None = None) -> OrderLedger:
    config = config or settings()
    return OrderLedger(
        order_repo=order_repository(config),
        sales_repo=sales_repository(config),
        catalog=catalog_store(config),
        lookup=ProductLookup(),
        allow_direct_finalize=config.allow_direct_finalize,
    )
