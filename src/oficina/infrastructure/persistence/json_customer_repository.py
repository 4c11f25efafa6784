"""JSON-file-backed implementation of CustomerRepository."""

from __future__ import annotations

import uuid
from datetime import datetime
from pathlib import Path

from oficina.domain.model.customer import Customer
from oficina.domain.model.page import Page, paginate
from oficina.domain.repository.customer_repository import CustomerRepository
from oficina.infrastructure.persistence.json_file import JsonFile


class JsonCustomerRepository(CustomerRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    def next_id(self) -> str:
        return str(uuid.uuid4())

    def get_by_id(self, company_id: str, customer_id: str) -> Customer | None:
        for customer in self._live(company_id):
            if customer.id == customer_id:
                return customer
        return None

    def search(
        self, company_id: str, term: str, page: int, page_size: int
    ) -> Page[Customer]:
        matches = [c for c in self._live(company_id) if c.matches(term)]
        matches.sort(key=lambda c: c.created_at, reverse=True)
        return paginate(matches, page, page_size)

    def save(self, customer: Customer) -> None:
        self._file.upsert(self._to_raw(customer))

    # --- Helpers --------------------------------------------------------------

    def _live(self, company_id: str) -> list[Customer]:
        return [
            self._to_domain(raw)
            for raw in self._file.load()
            if raw["company_id"] == company_id and not raw.get("is_deleted", False)
        ]

    @staticmethod
    def _to_raw(customer: Customer) -> dict:
        return {
            "id": customer.id,
            "company_id": customer.company_id,
            "name": customer.name,
            "phone": customer.phone,
            "email": customer.email,
            "document": customer.document,
            "notes": customer.notes,
            "is_deleted": customer.is_deleted,
            "created_at": customer.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Customer:
        return Customer(
            id=raw["id"],
            company_id=raw["company_id"],
            name=raw["name"],
            phone=raw.get("phone"),
            email=raw.get("email"),
            document=raw.get("document"),
            notes=raw.get("notes"),
            is_deleted=raw.get("is_deleted", False),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
