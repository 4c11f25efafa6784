"""Integration tests for the vehicle registry use cases."""

import pytest

from oficina.application.delete_vehicle import DeleteVehicleHandler
from oficina.application.register_customer import RegisterCustomerHandler
from oficina.application.register_vehicle import RegisterVehicleHandler
from oficina.application.search_vehicles import SearchVehiclesHandler
from oficina.application.update_vehicle import UpdateVehicleHandler
from oficina.domain.exceptions import ExternalServiceError, NotFoundError, ValidationError
from tests.fakes import FakeCustomerRepository, FakeVehicleRepository

COMPANY = "moto-center"


def _setup():
    customers = FakeCustomerRepository()
    vehicles = FakeVehicleRepository()
    owner = RegisterCustomerHandler(customers, COMPANY).handle("Ana Souza")
    register = RegisterVehicleHandler(vehicles, customers, COMPANY)
    return customers, vehicles, owner.id, register


class TestRegisterVehicle:

    def test_happy_path(self):
        _, _, owner_id, register = _setup()
        dto = register.handle(owner_id, "abc1d23", "Honda", "CG 160", year=2021)
        assert dto.id == "veh-1"
        assert dto.plate == "ABC1D23"
        assert dto.type == "moto"
        assert dto.year == 2021

    def test_unknown_owner(self):
        _, _, _, register = _setup()
        with pytest.raises(NotFoundError, match="Customer"):
            register.handle("cust-404", "abc1d23", "Honda", "CG 160")

    def test_duplicate_plate(self):
        _, _, owner_id, register = _setup()
        register.handle(owner_id, "ABC1D23", "Honda", "CG 160")
        with pytest.raises(ExternalServiceError, match="A vehicle with this plate already exists"):
            register.handle(owner_id, "abc1d23", "Yamaha", "Fazer 250")

    def test_plate_of_deleted_vehicle_can_be_reused(self):
        _, vehicles, owner_id, register = _setup()
        first = register.handle(owner_id, "ABC1D23", "Honda", "CG 160")
        DeleteVehicleHandler(vehicles, COMPANY).handle(first.id)
        assert register.handle(owner_id, "ABC1D23", "Honda", "CG 160").id != first.id

    def test_invalid_type(self):
        _, _, owner_id, register = _setup()
        with pytest.raises(ValidationError, match="Invalid vehicle type"):
            register.handle(owner_id, "ABC1D23", "Honda", "CG 160", type="boat")


class TestUpdateVehicle:

    def test_update(self):
        customers, vehicles, owner_id, register = _setup()
        added = register.handle(owner_id, "ABC1D23", "Honda", "CG 160")
        dto = UpdateVehicleHandler(vehicles, customers, COMPANY).handle(
            added.id,
            customer_id=owner_id,
            plate="ABC1D23",
            brand="Honda",
            model="CG 160 Titan",
            odometer=18200,
        )
        assert dto.model == "CG 160 Titan"
        assert dto.odometer == 18200

    def test_rejected_duplicate_leaves_record_untouched(self):
        customers, vehicles, owner_id, register = _setup()
        register.handle(owner_id, "AAA1A11", "Honda", "CG 160")
        second = register.handle(owner_id, "BBB2B22", "Yamaha", "Fazer 250")

        with pytest.raises(ExternalServiceError):
            UpdateVehicleHandler(vehicles, customers, COMPANY).handle(
                second.id,
                customer_id=owner_id,
                plate="AAA1A11",
                brand="Yamaha",
                model="Fazer 250",
            )
        assert vehicles.raw(second.id).plate == "BBB2B22"

    def test_missing_vehicle(self):
        customers, vehicles, owner_id, _ = _setup()
        with pytest.raises(NotFoundError, match="veh-404"):
            UpdateVehicleHandler(vehicles, customers, COMPANY).handle(
                "veh-404", customer_id=owner_id, plate="X", brand="Y", model="Z"
            )


class TestSearchVehicles:

    def test_term_and_owner_filter(self):
        customers, vehicles, owner_id, register = _setup()
        other = RegisterCustomerHandler(customers, COMPANY).handle("Bruno")
        register.handle(owner_id, "ABC1D23", "Honda", "CG 160")
        register.handle(other.id, "XYZ9Z87", "Honda", "Biz 125")
        register.handle(owner_id, "QWE4R56", "Yamaha", "Fazer 250")

        search = SearchVehiclesHandler(vehicles, COMPANY)
        assert search.handle("honda").total_count == 2
        assert search.handle(customer_id=owner_id).total_count == 2
        result = search.handle("honda", customer_id=other.id)
        assert [v.plate for v in result.items] == ["XYZ9Z87"]

    def test_deleted_vehicles_hidden(self):
        _, vehicles, owner_id, register = _setup()
        added = register.handle(owner_id, "ABC1D23", "Honda", "CG 160")
        DeleteVehicleHandler(vehicles, COMPANY).handle(added.id)
        assert SearchVehiclesHandler(vehicles, COMPANY).handle().total_count == 0
        assert vehicles.raw(added.id).is_deleted
