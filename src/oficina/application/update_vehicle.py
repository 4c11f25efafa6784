"""Application service: Update Vehicle use case."""

from __future__ import annotations

from dataclasses import replace

from oficina.application.dto import VehicleDTO, to_vehicle_dto
from oficina.application.store_errors import translate_store_errors
from oficina.domain.exceptions import NotFoundError
from oficina.domain.repository.customer_repository import CustomerRepository
from oficina.domain.repository.vehicle_repository import VehicleRepository


class UpdateVehicleHandler:

    def __init__(
        self,
        vehicle_repo: VehicleRepository,
        customer_repo: CustomerRepository,
        company_id: str,
    ) -> None:
        self._vehicle_repo = vehicle_repo
        self._customer_repo = customer_repo
        self._company_id = company_id

    def handle(self, vehicle_id: str, **fields) -> VehicleDTO:
        """Replace the vehicle's editable fields.

        Accepts the same keyword arguments as RegisterVehicleHandler.
        """
        with translate_store_errors("update vehicle"):
            current = self._vehicle_repo.get_by_id(self._company_id, vehicle_id)
            if current is None:
                raise NotFoundError(f"Vehicle '{vehicle_id}' not found")
            # Edit a copy so a rejected save leaves the stored record as it was.
            vehicle = replace(current)
            vehicle.update(**fields)
            if self._customer_repo.get_by_id(self._company_id, vehicle.customer_id) is None:
                raise NotFoundError(f"Customer '{vehicle.customer_id}' not found")
            self._vehicle_repo.save(vehicle)
        return to_vehicle_dto(vehicle)
