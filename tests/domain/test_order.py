"""Unit tests for the Order aggregate and its business rules."""

import pytest

from oficina.domain.exceptions import IllegalStateError, NotFoundError, ValidationError
from oficina.domain.model.order import Order, OrderStatus
from oficina.domain.model.service import DEFAULT_SERVICE_TYPES, service_lines_from
from oficina.domain.model.value_objects import Money


def _make_order(**overrides) -> Order:
    fields = dict(
        plate="xyz-9876",
        customer_name="Ana",
        phone="11999999999",
        service_snapshot=service_lines_from(DEFAULT_SERVICE_TYPES),
    )
    fields.update(overrides)
    return Order.create(**fields)


def _finalized_order() -> Order:
    order = _make_order()
    order.toggle_service("service-0")
    order.advance(OrderStatus.IN_PROGRESS)
    order.advance(OrderStatus.FINALIZED)
    return order


class TestOrderCreation:

    def test_happy_path(self):
        order = _make_order()
        assert order.status == OrderStatus.OPEN
        assert order.plate == "XYZ-9876"
        assert order.products == []
        assert len(order.services) == len(DEFAULT_SERVICE_TYPES)
        assert not any(s.selected for s in order.services)
        assert order.grand_total == Money.zero()

    def test_id_is_none_for_new_orders(self):
        assert _make_order().id is None  # assigned by repository

    def test_snapshot_selection_is_not_copied(self):
        snapshot = service_lines_from(DEFAULT_SERVICE_TYPES)
        snapshot[0].selected = True
        order = _make_order(service_snapshot=snapshot)
        assert not order.services[0].selected

    def test_blank_plate_rejected(self):
        with pytest.raises(ValidationError, match="Plate"):
            _make_order(plate="  ")

    def test_blank_customer_rejected(self):
        with pytest.raises(ValidationError, match="Customer name"):
            _make_order(customer_name="")


class TestOrderTotals:

    def test_selected_services_and_products(self):
        order = _make_order()
        order.toggle_service("service-0")  # Troca de óleo, 50
        order.add_product_line("7", "Filtro de Óleo", 2, Money.of("35.00"))

        assert order.total_services == Money.of("50")
        assert order.total_products == Money.of("70")
        assert order.grand_total == Money.of("120")

    def test_toggling_twice_unselects(self):
        order = _make_order()
        order.toggle_service("service-1")
        order.toggle_service("service-1")
        assert order.total_services == Money.zero()

    def test_price_edit_changes_only_this_line(self):
        order = _make_order()
        order.toggle_service("service-0")
        order.toggle_service("service-2")
        order.set_service_price("service-0", Money.of("65.00"))
        assert order.total_services == Money.of("105.00")  # 65 + 40

    def test_totals_are_idempotent(self):
        order = _make_order()
        order.toggle_service("service-3")
        order.add_product_line("1", "Óleo Motor 10W40 1L", 3, Money.of("45.00"))
        assert order.totals == order.totals
        assert order.totals.grand == order.totals.services + order.totals.products

    def test_removing_product_recomputes(self):
        order = _make_order()
        order.add_product_line("7", "Filtro de Óleo", 2, Money.of("35.00"))
        order.remove_product_line("7")
        assert order.total_products == Money.zero()

    def test_removing_missing_product_is_noop(self):
        order = _make_order()
        order.add_product_line("7", "Filtro de Óleo", 1, Money.of("35.00"))
        order.remove_product_line("99")
        assert len(order.products) == 1


class TestProductLines:

    def test_same_product_twice_merges(self):
        order = _make_order()
        order.add_product_line("7", "Filtro de Óleo", 2, Money.of("35.00"))
        order.add_product_line("7", "Filtro de Óleo", 3, Money.of("35.00"))
        assert len(order.products) == 1
        assert order.products[0].quantity.value == 5

    def test_zero_quantity_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            _make_order().add_product_line("7", "Filtro de Óleo", 0, Money.of("35.00"))

    def test_line_total(self):
        order = _make_order()
        order.add_product_line("8", "Vela de Ignição", 4, Money.of("28.00"))
        assert order.products[0].line_total == Money.of("112.00")


class TestServiceLines:

    def test_unknown_service_line(self):
        with pytest.raises(NotFoundError, match="service-99"):
            _make_order().toggle_service("service-99")

    def test_negative_price_rejected(self):
        order = _make_order()
        with pytest.raises(ValidationError, match="cannot be negative"):
            order.set_service_price("service-0", Money.of("-5"))

    def test_free_service_allowed(self):
        order = _make_order()
        order.toggle_service("service-0")
        order.set_service_price("service-0", Money.of("0"))
        assert order.total_services == Money.zero()


class TestOrderTransitions:

    def test_forward_path(self):
        order = _make_order()
        order.advance(OrderStatus.IN_PROGRESS)
        assert order.status == OrderStatus.IN_PROGRESS
        assert order.finalized_at is None
        order.advance(OrderStatus.FINALIZED)
        assert order.status == OrderStatus.FINALIZED
        assert order.finalized_at is not None

    def test_skip_rejected_by_default(self):
        with pytest.raises(IllegalStateError, match="from open to finalized"):
            _make_order().advance(OrderStatus.FINALIZED)

    def test_skip_allowed_when_requested(self):
        order = _make_order()
        order.advance(OrderStatus.FINALIZED, allow_skip=True)
        assert order.is_finalized

    def test_no_going_back(self):
        order = _make_order()
        order.advance(OrderStatus.IN_PROGRESS)
        with pytest.raises(IllegalStateError):
            order.advance(OrderStatus.OPEN)

    def test_same_status_rejected(self):
        with pytest.raises(IllegalStateError):
            _make_order().advance(OrderStatus.OPEN)

    def test_refinalize_rejected(self):
        order = _finalized_order()
        with pytest.raises(IllegalStateError, match="already finalized"):
            order.advance(OrderStatus.FINALIZED, allow_skip=True)

    def test_check_advance_does_not_mutate(self):
        order = _make_order()
        order.check_advance(OrderStatus.IN_PROGRESS)
        assert order.status == OrderStatus.OPEN


class TestFinalizedOrderIsFrozen:

    def test_toggle_rejected(self):
        with pytest.raises(IllegalStateError, match="can no longer be edited"):
            _finalized_order().toggle_service("service-1")

    def test_price_edit_rejected_and_totals_kept(self):
        order = _finalized_order()
        with pytest.raises(IllegalStateError):
            order.set_service_price("service-0", Money.of("10"))
        assert order.grand_total == Money.of("50")

    def test_add_and_remove_product_rejected(self):
        order = _finalized_order()
        with pytest.raises(IllegalStateError):
            order.add_product_line("7", "Filtro de Óleo", 1, Money.of("35.00"))
        with pytest.raises(IllegalStateError):
            order.remove_product_line("7")

    def test_invalid_price_reports_finalized_state(self):
        with pytest.raises(IllegalStateError):
            _finalized_order().set_service_price("service-0", "-5")

    def test_contact_fields_rejected(self):
        order = _finalized_order()
        with pytest.raises(IllegalStateError):
            order.update_details(phone="11888888888")
        assert order.phone == "11999999999"


class TestUpdateDetails:

    def test_plate_is_normalized(self):
        order = _make_order()
        order.update_details(plate=" abc-1234 ")
        assert order.plate == "ABC-1234"

    def test_bad_field_leaves_order_untouched(self):
        order = _make_order()
        with pytest.raises(ValidationError):
            order.update_details(plate="ABC-1234", customer_name=" ")
        assert order.plate == "XYZ-9876"
        assert order.customer_name == "Ana"
