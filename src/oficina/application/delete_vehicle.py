"""Application service: Delete Vehicle use case (soft delete)."""

from __future__ import annotations

import logging

from oficina.application.store_errors import translate_store_errors
from oficina.domain.exceptions import NotFoundError
from oficina.domain.repository.vehicle_repository import VehicleRepository

logger = logging.getLogger(__name__)


class DeleteVehicleHandler:

    def __init__(self, vehicle_repo: VehicleRepository, company_id: str) -> None:
        self._vehicle_repo = vehicle_repo
        self._company_id = company_id

    def handle(self, vehicle_id: str) -> None:
        with translate_store_errors("delete vehicle"):
            vehicle = self._vehicle_repo.get_by_id(self._company_id, vehicle_id)
            if vehicle is None:
                raise NotFoundError(f"Vehicle '{vehicle_id}' not found")
            vehicle.soft_delete()
            self._vehicle_repo.save(vehicle)
        logger.info("Vehicle %s marked as deleted", vehicle_id)
