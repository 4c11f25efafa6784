"""Application service: Search Customers use case (query)."""

from __future__ import annotations

from oficina.application.dto import PageDTO, to_customer_dto
from oficina.application.store_errors import translate_store_errors
from oficina.domain.model.page import PAGE_SIZE
from oficina.domain.repository.customer_repository import CustomerRepository


class SearchCustomersHandler:

    def __init__(self, customer_repo: CustomerRepository, company_id: str) -> None:
        self._customer_repo = customer_repo
        self._company_id = company_id

    def handle(self, term: str = "", page: int = 1) -> PageDTO:
        """Match *term* against name, phone or document, newest first."""
        with translate_store_errors("load customers"):
            result = self._customer_repo.search(self._company_id, term, page, PAGE_SIZE)
        return PageDTO(
            items=[to_customer_dto(c) for c in result.items],
            page=result.page,
            total_pages=result.total_pages,
            total_count=result.total_count,
        )
