"""Customer record kept in the shop's registry."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from oficina.domain.exceptions import ValidationError


@dataclass
class Customer:
    """A customer of one company.

    Deleting a customer only flips ``is_deleted``; the row stays so vehicles
    and history keep pointing at something.
    """

    id: str
    company_id: str
    name: str
    phone: str | None = None
    email: str | None = None
    document: str | None = None
    notes: str | None = None
    is_deleted: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        customer_id: str,
        company_id: str,
        name: str,
        phone: str = "",
        email: str = "",
        document: str = "",
        notes: str = "",
    ) -> Customer:
        customer = Customer(id=customer_id, company_id=company_id, name="")
        customer.update(
            name=name, phone=phone, email=email, document=document, notes=notes
        )
        return customer

    def update(
        self,
        name: str,
        phone: str = "",
        email: str = "",
        document: str = "",
        notes: str = "",
    ) -> None:
        """Replace the editable fields; blank optional fields become None."""
        if not name or not name.strip():
            raise ValidationError("Customer name is required")
        self.name = name.strip()
        self.phone = _optional(phone)
        self.email = _optional(email)
        self.document = _optional(document)
        self.notes = _optional(notes)

    def soft_delete(self) -> None:
        self.is_deleted = True

    def matches(self, term: str) -> bool:
        """Case-insensitive substring match over name, phone and document."""
        needle = term.strip().lower()
        if not needle:
            return True
        return any(
            needle in value.lower()
            for value in (self.name, self.phone, self.document)
            if value
        )


def _optional(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip() or None
