"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
prices and stock change, products are added and removed from the catalog.
Orders never hold a reference to the Product itself, only a snapshot of
its name and price.
"""

from __future__ import annotations

from dataclasses import dataclass

from oficina.domain.exceptions import ValidationError
from oficina.domain.model.value_objects import Money

UPDATABLE_FIELDS = ("name", "category", "price", "stock", "min_stock")


@dataclass
class Product:
    """A purchasable product in the shop's catalog.

    Invariants:
    - ``price`` is strictly positive
    - ``stock`` and ``min_stock`` are never negative
    """

    id: str
    name: str
    category: str
    price: Money
    stock: int = 0
    min_stock: int = 0

    @staticmethod
    def create(
        product_id: str,
        name: str,
        category: str,
        price: Money,
        stock: int,
        min_stock: int,
    ) -> Product:
        product = Product(
            id=product_id,
            name=_required(name, "Product name"),
            category=_required(category, "Product category"),
            price=_positive_price(price),
            stock=_non_negative(stock, "Stock"),
            min_stock=_non_negative(min_stock, "Minimum stock"),
        )
        return product

    @property
    def is_low_stock(self) -> bool:
        return self.stock <= self.min_stock

    def update(self, **fields) -> None:
        """Merge a partial set of fields into the product.

        Every field is validated before any of them is applied.
        """
        unknown = set(fields) - set(UPDATABLE_FIELDS)
        if unknown:
            raise ValidationError(
                f"Unknown product field(s): {', '.join(sorted(unknown))}"
            )

        changes = {}
        if "name" in fields:
            changes["name"] = _required(fields["name"], "Product name")
        if "category" in fields:
            changes["category"] = _required(fields["category"], "Product category")
        if "price" in fields:
            changes["price"] = _positive_price(Money.of(fields["price"]))
        if "stock" in fields:
            changes["stock"] = _non_negative(fields["stock"], "Stock")
        if "min_stock" in fields:
            changes["min_stock"] = _non_negative(fields["min_stock"], "Minimum stock")

        for name, value in changes.items():
            setattr(self, name, value)

    def decrement_stock(self, amount: int) -> None:
        """Take *amount* units out of stock, clamping at zero."""
        if amount < 0:
            raise ValidationError("Decrement amount cannot be negative")
        self.stock = max(0, self.stock - amount)


def _required(value: str, label: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{label} is required")
    return value.strip()


def _positive_price(price: Money) -> Money:
    if price.amount <= 0:
        raise ValidationError("Product price must be greater than zero")
    return price


def _non_negative(value: int, label: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{label} must be an integer")
    if value < 0:
        raise ValidationError(f"{label} cannot be negative")
    return value
