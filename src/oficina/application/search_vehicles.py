"""Application service: Search Vehicles use case (query)."""

from __future__ import annotations

from oficina.application.dto import PageDTO, to_vehicle_dto
from oficina.application.store_errors import translate_store_errors
from oficina.domain.model.page import PAGE_SIZE
from oficina.domain.repository.vehicle_repository import VehicleRepository


class SearchVehiclesHandler:

    def __init__(self, vehicle_repo: VehicleRepository, company_id: str) -> None:
        self._vehicle_repo = vehicle_repo
        self._company_id = company_id

    def handle(
        self, term: str = "", page: int = 1, customer_id: str | None = None
    ) -> PageDTO:
        """Match *term* against plate, brand or model, newest first."""
        with translate_store_errors("load vehicles"):
            result = self._vehicle_repo.search(
                self._company_id, term, page, PAGE_SIZE, customer_id=customer_id
            )
        return PageDTO(
            items=[to_vehicle_dto(v) for v in result.items],
            page=result.page,
            total_pages=result.total_pages,
            total_count=result.total_count,
        )
