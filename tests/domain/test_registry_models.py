"""Tests for the customer and vehicle registry records."""

import pytest

from oficina.domain.exceptions import ValidationError
from oficina.domain.model.customer import Customer
from oficina.domain.model.page import paginate
from oficina.domain.model.vehicle import Vehicle, VehicleType


def _vehicle(**overrides) -> Vehicle:
    fields = dict(customer_id="cust-1", plate="abc1d23", brand="Honda", model="CG 160")
    fields.update(overrides)
    return Vehicle.create("veh-1", "shop", **fields)


class TestCustomer:

    def test_create_blanks_become_none(self):
        customer = Customer.create("cust-1", "shop", " Ana Souza ", phone="  ", email="")
        assert customer.name == "Ana Souza"
        assert customer.phone is None
        assert customer.email is None
        assert not customer.is_deleted

    def test_name_required(self):
        with pytest.raises(ValidationError, match="Customer name is required"):
            Customer.create("cust-1", "shop", "   ")

    def test_matches_name_phone_document(self):
        customer = Customer.create(
            "cust-1", "shop", "Ana Souza", phone="11999990000", document="123.456.789-00"
        )
        assert customer.matches("souza")
        assert customer.matches("99990")
        assert customer.matches("456.789")
        assert not customer.matches("bruno")
        assert customer.matches("")

    def test_soft_delete(self):
        customer = Customer.create("cust-1", "shop", "Ana")
        customer.soft_delete()
        assert customer.is_deleted


class TestVehicle:

    def test_plate_uppercased_and_defaults(self):
        vehicle = _vehicle()
        assert vehicle.plate == "ABC1D23"
        assert vehicle.type == VehicleType.MOTO
        assert vehicle.year is None

    @pytest.mark.parametrize("missing", ["plate", "brand", "model", "customer_id"])
    def test_required_fields(self, missing):
        with pytest.raises(ValidationError, match="is required"):
            _vehicle(**{missing: " "})

    def test_type_parsing(self):
        assert _vehicle(type="CAR").type == VehicleType.CAR
        with pytest.raises(ValidationError, match="Invalid vehicle type"):
            _vehicle(type="boat")

    def test_numbers_parsed(self):
        vehicle = _vehicle(year="2021", odometer=15400)
        assert vehicle.year == 2021
        assert vehicle.odometer == 15400

    def test_bad_number_leaves_vehicle_untouched(self):
        vehicle = _vehicle()
        with pytest.raises(ValidationError, match="Odometer"):
            vehicle.update(
                customer_id="cust-1", plate="zzz9z99", brand="Yamaha",
                model="Fazer", odometer="-3",
            )
        assert vehicle.plate == "ABC1D23"
        assert vehicle.brand == "Honda"

    def test_matches_plate_brand_model(self):
        vehicle = _vehicle()
        assert vehicle.matches("abc")
        assert vehicle.matches("hon")
        assert vehicle.matches("cg 1")
        assert not vehicle.matches("yamaha")

    def test_soft_delete_stamps_time(self):
        vehicle = _vehicle()
        vehicle.soft_delete()
        assert vehicle.is_deleted
        assert vehicle.deleted_at is not None


class TestPaginate:

    def test_slices_and_counts(self):
        page = paginate(list(range(25)), page=3, page_size=10)
        assert page.items == [20, 21, 22, 23, 24]
        assert page.total_count == 25
        assert page.total_pages == 3

    def test_page_below_one_is_first_page(self):
        assert paginate([1, 2, 3], page=0, page_size=2).items == [1, 2]

    def test_empty(self):
        page = paginate([], page=1, page_size=10)
        assert page.items == []
        assert page.total_pages == 0
