"""Abstract repository for customers.

Implementations report backend failures as ``StoreError``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from oficina.domain.model.customer import Customer
from oficina.domain.model.page import Page


class CustomerRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate a fresh customer ID."""

    @abstractmethod
    def get_by_id(self, company_id: str, customer_id: str) -> Customer | None:
        """Return a live (not deleted) customer of the company, or None."""

    @abstractmethod
    def search(
        self, company_id: str, term: str, page: int, page_size: int
    ) -> Page[Customer]:
        """Substring search over live customers, newest first."""

    @abstractmethod
    def save(self, customer: Customer) -> None:
        """Insert or update a customer."""
