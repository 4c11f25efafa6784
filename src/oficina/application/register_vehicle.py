"""Application service: Register Vehicle use case.

The owner must be a live customer of the same company.  A plate that is
already in use is reported by the store as a unique violation and comes
back as an ExternalServiceError.
"""

from __future__ import annotations

import logging

from oficina.application.dto import VehicleDTO, to_vehicle_dto
from oficina.application.store_errors import translate_store_errors
from oficina.domain.exceptions import NotFoundError
from oficina.domain.model.vehicle import Vehicle
from oficina.domain.repository.customer_repository import CustomerRepository
from oficina.domain.repository.vehicle_repository import VehicleRepository

logger = logging.getLogger(__name__)


class RegisterVehicleHandler:

    def __init__(
        self,
        vehicle_repo: VehicleRepository,
        customer_repo: CustomerRepository,
        company_id: str,
    ) -> None:
        self._vehicle_repo = vehicle_repo
        self._customer_repo = customer_repo
        self._company_id = company_id

    def handle(
        self,
        customer_id: str,
        plate: str,
        brand: str,
        model: str,
        year: int | None = None,
        color: str | None = None,
        type: str = "moto",
        odometer: int | None = None,
        notes: str | None = None,
    ) -> VehicleDTO:
        with translate_store_errors("save vehicle"):
            vehicle = Vehicle.create(
                vehicle_id=self._vehicle_repo.next_id(),
                company_id=self._company_id,
                customer_id=customer_id,
                plate=plate,
                brand=brand,
                model=model,
                year=year,
                color=color,
                type=type,
                odometer=odometer,
                notes=notes,
            )
            if self._customer_repo.get_by_id(self._company_id, vehicle.customer_id) is None:
                raise NotFoundError(f"Customer '{customer_id}' not found")
            self._vehicle_repo.save(vehicle)
        logger.info("Registered vehicle %s (%s)", vehicle.id, vehicle.plate)
        return to_vehicle_dto(vehicle)
