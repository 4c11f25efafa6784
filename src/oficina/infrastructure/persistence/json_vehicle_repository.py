"""JSON-file-backed implementation of VehicleRepository."""

from __future__ import annotations

import uuid
from datetime import datetime
from pathlib import Path

from oficina.domain.exceptions import StoreError
from oficina.domain.model.page import Page, paginate
from oficina.domain.model.vehicle import Vehicle, VehicleType
from oficina.domain.repository.vehicle_repository import UNIQUE_VIOLATION, VehicleRepository
from oficina.infrastructure.persistence.json_file import JsonFile


class JsonVehicleRepository(VehicleRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    def next_id(self) -> str:
        return str(uuid.uuid4())

    def get_by_id(self, company_id: str, vehicle_id: str) -> Vehicle | None:
        for vehicle in self._live(company_id):
            if vehicle.id == vehicle_id:
                return vehicle
        return None

    def search(
        self,
        company_id: str,
        term: str,
        page: int,
        page_size: int,
        customer_id: str | None = None,
    ) -> Page[Vehicle]:
        matches = [
            v
            for v in self._live(company_id)
            if v.matches(term) and (customer_id is None or v.customer_id == customer_id)
        ]
        matches.sort(key=lambda v: v.created_at, reverse=True)
        return paginate(matches, page, page_size)

    def save(self, vehicle: Vehicle) -> None:
        if not vehicle.is_deleted:
            for other in self._live(vehicle.company_id):
                if other.id != vehicle.id and other.plate == vehicle.plate:
                    raise StoreError(
                        UNIQUE_VIOLATION,
                        'duplicate key value violates unique constraint '
                        '"vehicles_company_id_plate_key"',
                    )
        self._file.upsert(self._to_raw(vehicle))

    # --- Helpers --------------------------------------------------------------

    def _live(self, company_id: str) -> list[Vehicle]:
        return [
            self._to_domain(raw)
            for raw in self._file.load()
            if raw["company_id"] == company_id and raw.get("deleted_at") is None
        ]

    @staticmethod
    def _to_raw(vehicle: Vehicle) -> dict:
        return {
            "id": vehicle.id,
            "company_id": vehicle.company_id,
            "customer_id": vehicle.customer_id,
            "plate": vehicle.plate,
            "brand": vehicle.brand,
            "model": vehicle.model,
            "year": vehicle.year,
            "color": vehicle.color,
            "type": vehicle.type.value,
            "odometer": vehicle.odometer,
            "notes": vehicle.notes,
            "deleted_at": vehicle.deleted_at.isoformat() if vehicle.deleted_at else None,
            "created_at": vehicle.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Vehicle:
        deleted_at = raw.get("deleted_at")
        return Vehicle(
            id=raw["id"],
            company_id=raw["company_id"],
            customer_id=raw["customer_id"],
            plate=raw["plate"],
            brand=raw["brand"],
            model=raw["model"],
            year=raw.get("year"),
            color=raw.get("color"),
            type=VehicleType(raw.get("type", "moto")),
            odometer=raw.get("odometer"),
            notes=raw.get("notes"),
            deleted_at=datetime.fromisoformat(deleted_at) if deleted_at else None,
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
