"""Application service: Delete Customer use case (soft delete)."""

from __future__ import annotations

import logging

from oficina.application.store_errors import translate_store_errors
from oficina.domain.exceptions import NotFoundError
from oficina.domain.repository.customer_repository import CustomerRepository

logger = logging.getLogger(__name__)


class DeleteCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository, company_id: str) -> None:
        self._customer_repo = customer_repo
        self._company_id = company_id

    def handle(self, customer_id: str) -> None:
        with translate_store_errors("delete customer"):
            customer = self._customer_repo.get_by_id(self._company_id, customer_id)
            if customer is None:
                raise NotFoundError(f"Customer '{customer_id}' not found")
            customer.soft_delete()
            self._customer_repo.save(customer)
        logger.info("Customer %s marked as deleted", customer_id)
