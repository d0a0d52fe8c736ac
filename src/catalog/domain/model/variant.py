"""Variant entity — a purchasable size/color/price/stock combination.

Variants belong to exactly one Product and are stored in their own
collection.  ``status`` and ``discount_price`` are derived fields: they
are always computed by the Variant Store, never taken from input.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.value_objects import ZERO, Money, Percentage, to_decimal


class StockStatus(Enum):
    IN_STOCK = "in_stock"
    LOW_STOCK = "low_stock"
    OUT_OF_STOCK = "out_of_stock"


SOURCE_FIELDS = ("size", "color", "price", "stock", "is_discounted", "discount")
DERIVED_FIELDS = ("status", "discount_price")
IDENTITY_FIELDS = ("id", "product_id", "created_at", "updated_at")


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Variant:
    """A variant as persisted.

    Invariants (upheld by the Variant Store's write path):
    - not discounted  ->  discount == 0 and discount_price == 0
    - discounted      ->  discount > 0 and discount_price > 0
    - ``status`` always matches ``stock``
    """

    id: str
    product_id: str
    size: str
    color: str
    price: Money
    stock: int = 0
    status: StockStatus = StockStatus.OUT_OF_STOCK
    is_discounted: bool = False
    discount: Percentage = Percentage(Decimal("0"))
    discount_price: Money = Money(Decimal("0.00"))
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    # --- Computed properties --------------------------------------------------

    @property
    def final_price(self) -> Money:
        return self.discount_price if self.is_discounted else self.price

    @property
    def savings(self) -> Money:
        return self.price - self.final_price

    def source_fields(self) -> dict:
        """The client-controlled fields, in the shape the write path accepts."""
        return {
            "size": self.size,
            "color": self.color,
            "price": self.price.amount,
            "stock": self.stock,
            "is_discounted": self.is_discounted,
            "discount": self.discount.value,
        }


def validate_variant_fields(fields: Mapping) -> dict:
    """Check the shape of a complete variant payload and coerce its types.

    Collects one message per violated field rule and raises them together.
    Discount range rules are left to the derived-field calculator.
    """
    errors: list[str] = []
    clean: dict = {}

    for key in fields:
        if key in IDENTITY_FIELDS:
            errors.append(f"Field '{key}' cannot be set on a variant")
        elif key not in SOURCE_FIELDS and key not in DERIVED_FIELDS:
            errors.append(f"Unknown variant field '{key}'")

    for key in ("size", "color"):
        value = fields.get(key)
        if not isinstance(value, str) or not value.strip():
            errors.append(f"Variant {key} is required")
        else:
            clean[key] = value.strip()

    price = fields.get("price")
    if price is None:
        errors.append("Variant price is required")
    else:
        try:
            amount = to_decimal(price, "Variant price")
        except ValidationError as exc:
            errors.extend(exc.messages)
        else:
            if amount < ZERO:
                errors.append("Variant price cannot be negative")
            else:
                clean["price"] = amount

    stock = fields.get("stock")
    if stock is None:
        clean["stock"] = 0
    elif isinstance(stock, bool) or not isinstance(stock, int):
        errors.append("Variant stock must be a whole number")
    elif stock < 0:
        errors.append("Variant stock cannot be negative")
    else:
        clean["stock"] = stock

    is_discounted = fields.get("is_discounted", False)
    if not isinstance(is_discounted, bool):
        errors.append("Variant is_discounted must be true or false")
    else:
        clean["is_discounted"] = is_discounted

    discount = fields.get("discount")
    if discount is not None:
        try:
            clean["discount"] = to_decimal(discount, "Variant discount")
        except ValidationError as exc:
            errors.extend(exc.messages)

    if "discount_price" in fields:
        clean["discount_price"] = fields["discount_price"]

    if errors:
        raise ValidationError(*errors)
    return clean
