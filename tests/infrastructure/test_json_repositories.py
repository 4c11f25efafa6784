"""Tests for the JSON-file repositories, on a temporary data directory."""

import json
from datetime import datetime, timedelta, timezone

import pytest

from oficina.domain.exceptions import StoreError
from oficina.domain.model.customer import Customer
from oficina.domain.model.order import Order, OrderStatus
from oficina.domain.model.product import Product
from oficina.domain.model.sales import SaleKind, SalesAggregateEntry
from oficina.domain.model.service import DEFAULT_SERVICE_TYPES, service_lines_from
from oficina.domain.model.value_objects import Money
from oficina.domain.model.vehicle import Vehicle
from oficina.domain.repository.vehicle_repository import UNIQUE_VIOLATION
from oficina.infrastructure import bootstrap
from oficina.infrastructure.config import Settings
from oficina.infrastructure.persistence.json_customer_repository import JsonCustomerRepository
from oficina.infrastructure.persistence.json_file import JsonFile
from oficina.infrastructure.persistence.json_order_repository import JsonOrderRepository
from oficina.infrastructure.persistence.json_product_repository import JsonProductRepository
from oficina.infrastructure.persistence.json_sales_repository import JsonSalesRepository
from oficina.infrastructure.persistence.json_vehicle_repository import JsonVehicleRepository


def _product(product_id: str, name: str = "Filtro de Óleo") -> Product:
    return Product.create(product_id, name, "Filtros", Money.of("35.00"), 25, 5)


class TestJsonFile:

    def test_creates_missing_file(self, tmp_path):
        path = tmp_path / "nested" / "records.json"
        records = JsonFile(path)
        assert path.exists()
        assert records.load() == []

    def test_upsert_replaces_by_key(self, tmp_path):
        records = JsonFile(tmp_path / "records.json")
        records.upsert({"id": "a", "v": 1})
        records.upsert({"id": "b", "v": 2})
        records.upsert({"id": "a", "v": 3})
        assert records.load() == [{"id": "a", "v": 3}, {"id": "b", "v": 2}]

    def test_keeps_accents_readable(self, tmp_path):
        records = JsonFile(tmp_path / "records.json")
        records.persist([{"name": "Óleo"}])
        assert "Óleo" in records.path.read_text(encoding="utf-8")


class TestJsonProductRepository:

    def test_save_and_reload(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(_product("1"))

        loaded = JsonProductRepository(tmp_path / "products.json").get_by_id("1")
        assert loaded == _product("1")

    def test_next_id_is_numeric(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        assert repo.next_id() == "1"
        repo.save(_product("9"))
        repo.save(_product("10", "Vela de Ignição"))
        assert repo.next_id() == "11"

    def test_get_by_name_ignores_case(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(_product("1"))
        assert repo.get_by_name("filtro de óleo").id == "1"
        assert repo.get_by_name("Pneu") is None

    def test_delete(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(_product("1"))
        repo.save(_product("2", "Vela de Ignição"))
        repo.delete("1")
        assert [p.id for p in repo.list_all()] == ["2"]


class TestJsonOrderRepository:

    def _order(self) -> Order:
        order = Order.create(
            plate="xyz-9876",
            customer_name="Ana",
            phone="11999999999",
            service_snapshot=service_lines_from(DEFAULT_SERVICE_TYPES),
            odometer="15400",
        )
        order.toggle_service("service-0")
        order.set_service_price("service-0", Money.of("65.00"))
        order.add_product_line("7", "Filtro de Óleo", 2, Money.of("35.00"))
        return order

    def test_assigns_sequential_ids(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        first, second = self._order(), self._order()
        repo.save(first)
        repo.save(second)
        assert (first.id, second.id) == (1, 2)

    def test_round_trip(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        order = self._order()
        order.advance(OrderStatus.IN_PROGRESS)
        order.advance(OrderStatus.FINALIZED)
        repo.save(order)

        loaded = repo.get_by_id(order.id)

        assert loaded.status == OrderStatus.FINALIZED
        assert loaded.finalized_at == order.finalized_at
        assert loaded.services[0].selected
        assert loaded.services[0].price == Money.of("65.00")
        assert loaded.products[0].quantity.value == 2
        assert loaded.grand_total == Money.of("135.00")

    def test_totals_are_not_stored(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        repo.save(self._order())
        [raw] = json.loads((tmp_path / "orders.json").read_text(encoding="utf-8"))
        assert "grand_total" not in raw
        assert "total_services" not in raw

    def test_missing_order(self, tmp_path):
        assert JsonOrderRepository(tmp_path / "orders.json").get_by_id(1) is None


class TestJsonSalesRepository:

    def test_entries_keyed_by_kind_and_name(self, tmp_path):
        repo = JsonSalesRepository(tmp_path / "sales.json")
        entry = SalesAggregateEntry(kind=SaleKind.SERVICE, name="Troca de óleo")
        entry.accumulate(1, Money.of("50"))
        repo.save(entry)
        entry.accumulate(1, Money.of("60"))
        repo.save(entry)
        repo.save(SalesAggregateEntry(kind=SaleKind.PRODUCT, name="Troca de óleo"))

        [service] = repo.list_by_kind(SaleKind.SERVICE)
        assert service.quantity == 2
        assert service.total == Money.of("110")
        assert repo.get(SaleKind.PRODUCT, "Troca de óleo").quantity == 0
        assert repo.get(SaleKind.PRODUCT, "Pneu") is None


class TestJsonCustomerRepository:

    def test_search_skips_deleted_and_other_companies(self, tmp_path):
        repo = JsonCustomerRepository(tmp_path / "customers.json")
        start = datetime(2024, 1, 1, tzinfo=timezone.utc)
        for i, (company, name) in enumerate(
            [("shop", "Ana"), ("shop", "Bruno"), ("other", "Carla"), ("shop", "Ana Paula")]
        ):
            customer = Customer.create(repo.next_id(), company, name)
            customer.created_at = start + timedelta(hours=i)
            repo.save(customer)

        gone = repo.search("shop", "bruno", 1, 10).items[0]
        gone.soft_delete()
        repo.save(gone)

        page = repo.search("shop", "", 1, 10)
        assert [c.name for c in page.items] == ["Ana Paula", "Ana"]
        assert repo.get_by_id("shop", gone.id) is None
        assert repo.search("shop", "ana", 1, 1).total_pages == 2

    def test_round_trip(self, tmp_path):
        repo = JsonCustomerRepository(tmp_path / "customers.json")
        customer = Customer.create(repo.next_id(), "shop", "Ana", email="ana@example.com")
        repo.save(customer)
        assert repo.get_by_id("shop", customer.id) == customer


class TestJsonVehicleRepository:

    def _vehicle(self, repo, plate="ABC1D23", company="shop") -> Vehicle:
        return Vehicle.create(
            repo.next_id(), company,
            customer_id="cust-1", plate=plate, brand="Honda", model="CG 160",
        )

    def test_duplicate_plate_raises_unique_violation(self, tmp_path):
        repo = JsonVehicleRepository(tmp_path / "vehicles.json")
        repo.save(self._vehicle(repo))
        with pytest.raises(StoreError) as excinfo:
            repo.save(self._vehicle(repo))
        assert excinfo.value.code == UNIQUE_VIOLATION

    def test_same_plate_in_other_company_is_fine(self, tmp_path):
        repo = JsonVehicleRepository(tmp_path / "vehicles.json")
        repo.save(self._vehicle(repo))
        repo.save(self._vehicle(repo, company="other"))
        assert repo.search("other", "", 1, 10).total_count == 1

    def test_resaving_same_vehicle_is_not_a_duplicate(self, tmp_path):
        repo = JsonVehicleRepository(tmp_path / "vehicles.json")
        vehicle = self._vehicle(repo)
        repo.save(vehicle)
        vehicle.color = "Vermelha"
        repo.save(vehicle)
        assert repo.get_by_id("shop", vehicle.id).color == "Vermelha"

    def test_soft_deleted_vehicle_is_hidden_but_kept(self, tmp_path):
        repo = JsonVehicleRepository(tmp_path / "vehicles.json")
        vehicle = self._vehicle(repo)
        repo.save(vehicle)
        vehicle.soft_delete()
        repo.save(vehicle)

        assert repo.get_by_id("shop", vehicle.id) is None
        [raw] = json.loads((tmp_path / "vehicles.json").read_text(encoding="utf-8"))
        assert raw["deleted_at"] is not None
        repo.save(self._vehicle(repo))  # plate is free again


class TestBootstrap:

    def test_ledger_over_data_dir(self, tmp_path):
        config = Settings(data_dir=tmp_path, allow_direct_finalize=True)
        bootstrap.catalog_store(config).seed_defaults()
        ledger = bootstrap.order_ledger(config)

        order = ledger.create_order("XYZ-9876", "Ana", "1")
        ledger.add_product(order.id, "7", 2)
        ledger.finalize_order(order.id)

        assert bootstrap.catalog_store(config).get_product("7").stock == 23
        assert bootstrap.order_ledger(config).product_sales()[0].quantity == 2
        for name in ("orders.json", "products.json", "sales.json"):
            assert (tmp_path / name).exists()
