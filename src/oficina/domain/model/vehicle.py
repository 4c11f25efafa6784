"""Vehicle record kept in the shop's registry."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from oficina.domain.exceptions import ValidationError


class VehicleType(Enum):
    MOTO = "moto"
    CAR = "car"
    TRUCK = "truck"
    OTHER = "other"

    @staticmethod
    def parse(value: str | VehicleType) -> VehicleType:
        if isinstance(value, VehicleType):
            return value
        try:
            return VehicleType((value or "").strip().lower())
        except ValueError as exc:
            choices = ", ".join(t.value for t in VehicleType)
            raise ValidationError(
                f"Invalid vehicle type {value!r} (expected one of: {choices})"
            ) from exc


@dataclass
class Vehicle:
    """A vehicle owned by a customer.

    ``plate`` is stored uppercased.  A vehicle is soft-deleted by stamping
    ``deleted_at``.
    """

    id: str
    company_id: str
    customer_id: str
    plate: str
    brand: str
    model: str
    year: int | None = None
    color: str | None = None
    type: VehicleType = VehicleType.MOTO
    odometer: int | None = None
    notes: str | None = None
    deleted_at: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(vehicle_id: str, company_id: str, **fields) -> Vehicle:
        vehicle = Vehicle(
            id=vehicle_id,
            company_id=company_id,
            customer_id="",
            plate="",
            brand="",
            model="",
        )
        vehicle.update(**fields)
        return vehicle

    def update(
        self,
        customer_id: str,
        plate: str,
        brand: str,
        model: str,
        year: int | None = None,
        color: str | None = None,
        type: str | VehicleType = VehicleType.MOTO,
        odometer: int | None = None,
        notes: str | None = None,
    ) -> None:
        plate = _required(plate, "Plate").upper()
        brand = _required(brand, "Brand")
        model = _required(model, "Model")
        customer_id = _required(customer_id, "Customer")
        year = _optional_int(year, "Year")
        vehicle_type = VehicleType.parse(type)
        odometer = _optional_int(odometer, "Odometer")

        self.plate, self.brand, self.model = plate, brand, model
        self.customer_id = customer_id
        self.year = year
        self.color = (color or "").strip() or None
        self.type = vehicle_type
        self.odometer = odometer
        self.notes = (notes or "").strip() or None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def soft_delete(self) -> None:
        self.deleted_at = datetime.now(timezone.utc)

    def matches(self, term: str) -> bool:
        """Case-insensitive substring match over plate, brand and model."""
        needle = term.strip().lower()
        if not needle:
            return True
        return any(
            needle in value.lower() for value in (self.plate, self.brand, self.model)
        )


def _required(value: str | None, label: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{label} is required")
    return str(value).strip()


def _optional_int(value, label: str) -> int | None:
    if value is None or value == "":
        return None
    try:
        number = int(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"{label} must be a whole number, got {value!r}") from exc
    if number < 0:
        raise ValidationError(f"{label} cannot be negative")
    return number
