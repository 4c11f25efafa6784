"""Application service: Register Customer use case."""

from __future__ import annotations

import logging

from oficina.application.dto import CustomerDTO, to_customer_dto
from oficina.application.store_errors import translate_store_errors
from oficina.domain.model.customer import Customer
from oficina.domain.repository.customer_repository import CustomerRepository

logger = logging.getLogger(__name__)


class RegisterCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository, company_id: str) -> None:
        self._customer_repo = customer_repo
        self._company_id = company_id

    def handle(
        self,
        name: str,
        phone: str = "",
        email: str = "",
        document: str = "",
        notes: str = "",
    ) -> CustomerDTO:
        with translate_store_errors("save customer"):
            customer = Customer.create(
                customer_id=self._customer_repo.next_id(),
                company_id=self._company_id,
                name=name,
                phone=phone,
                email=email,
                document=document,
                notes=notes,
            )
            self._customer_repo.save(customer)
        logger.info("Registered customer %s '%s'", customer.id, customer.name)
        return to_customer_dto(customer)
