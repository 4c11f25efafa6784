"""Service types offered by the shop and their per-order copies."""

from __future__ import annotations

from dataclasses import dataclass

from oficina.domain.model.value_objects import Money


@dataclass(frozen=True)
class ServiceType:
    """Catalog reference data: a service the shop offers at a default price."""

    name: str
    default_price: Money


DEFAULT_SERVICE_TYPES: tuple[ServiceType, ...] = (
    ServiceType("Troca de óleo", Money.of("50.00")),
    ServiceType("Troca de pastilha de freio", Money.of("80.00")),
    ServiceType("Esticar relação", Money.of("40.00")),
    ServiceType("Troca de relação", Money.of("120.00")),
    ServiceType("Troca de pneu", Money.of("60.00")),
    ServiceType("Manutenção motoboy", Money.of("150.00")),
)


@dataclass
class ServiceLine:
    """A service as it appears on one order.

    The price starts at the catalog default but belongs to the order
    afterwards: editing it changes neither the catalog nor other orders.
    """

    id: str
    name: str
    price: Money
    selected: bool = False

    def toggle(self) -> None:
        self.selected = not self.selected

    def reprice(self, new_price: Money) -> None:
        self.price = new_price


def service_lines_from(service_types) -> list[ServiceLine]:
    """Copy a service-type list into fresh, unselected order lines."""
    return [
        ServiceLine(id=f"service-{index}", name=st.name, price=st.default_price)
        for index, st in enumerate(service_types)
    ]
