"""Abstract repository for vehicles.

Implementations report backend failures as ``StoreError``; saving a plate
that another live vehicle of the same company already uses fails with
code ``23505`` (unique violation).
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from oficina.domain.model.page import Page
from oficina.domain.model.vehicle import Vehicle

UNIQUE_VIOLATION = "23505"


class VehicleRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate a fresh vehicle ID."""

    @abstractmethod
    def get_by_id(self, company_id: str, vehicle_id: str) -> Vehicle | None:
        """Return a live vehicle of the company, or None."""

    @abstractmethod
    def search(
        self,
        company_id: str,
        term: str,
        page: int,
        page_size: int,
        customer_id: str | None = None,
    ) -> Page[Vehicle]:
        """Substring search over live vehicles, newest first."""

    @abstractmethod
    def save(self, vehicle: Vehicle) -> None:
        """Insert or update a vehicle."""
