"""Application service: Update Customer use case.

All editable fields are replaced; blank optional fields are cleared.
"""

from __future__ import annotations

from oficina.application.dto import CustomerDTO, to_customer_dto
from oficina.application.store_errors import translate_store_errors
from oficina.domain.exceptions import NotFoundError
from oficina.domain.repository.customer_repository import CustomerRepository


class UpdateCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository, company_id: str) -> None:
        self._customer_repo = customer_repo
        self._company_id = company_id

    def handle(
        self,
        customer_id: str,
        name: str,
        phone: str = "",
        email: str = "",
        document: str = "",
        notes: str = "",
    ) -> CustomerDTO:
        with translate_store_errors("update customer"):
            customer = self._customer_repo.get_by_id(self._company_id, customer_id)
            if customer is None:
                raise NotFoundError(f"Customer '{customer_id}' not found")
            customer.update(
                name=name, phone=phone, email=email, document=document, notes=notes
            )
            self._customer_repo.save(customer)
        return to_customer_dto(customer)
