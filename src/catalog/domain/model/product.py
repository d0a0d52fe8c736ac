"""Product aggregate.

A product is the root of the catalog aggregate: its variants live in a
separate collection but belong to exactly one product, and are owned
implicitly through the product's ``owner``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from catalog.domain.exceptions import ValidationError


class ProductStatus(Enum):
    IN_STOCK = "in-stock"
    OUT_OF_STOCK = "out-of-stock"
    LOW_STOCK = "low-stock"


# Fields a client may set on create or update.
EDITABLE_FIELDS = ("name", "description", "brand", "category_id", "status")
IMMUTABLE_FIELDS = ("id", "owner", "created_at", "updated_at")


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Product:
    """Aggregate root for catalog products.

    Use ``Product.create()`` for new products — it enforces all input
    rules.  The ``__init__`` stays simple so repositories can
    reconstitute persisted products without re-validating.

    ``status`` is a stored label, not derived from variant stock.
    """

    id: str
    name: str
    owner: str
    description: str | None = None
    brand: str | None = None
    category_id: str | None = None
    status: ProductStatus = ProductStatus.IN_STOCK
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(product_id: str, owner: str, fields: Mapping) -> Product:
        """Create a new product owned by *owner*, enforcing all invariants."""
        if not owner:
            raise ValidationError("Product owner is required")
        changes = _validate_fields(fields, require_name=True)
        product = Product(id=product_id, name=changes.pop("name"), owner=owner)
        for key, value in changes.items():
            setattr(product, key, value)
        return product

    # --- Mutations ------------------------------------------------------------

    def apply_changes(self, fields: Mapping) -> None:
        """Update editable fields. ``id`` and ``owner`` never change."""
        changes = _validate_fields(fields, require_name=False)
        for key, value in changes.items():
            setattr(self, key, value)
        self.touch()

    def touch(self) -> None:
        """Mark the product as modified, e.g. after its variants changed."""
        self.updated_at = _now()


def _validate_fields(fields: Mapping, require_name: bool) -> dict:
    errors: list[str] = []
    changes: dict = {}

    for key in fields:
        if key in IMMUTABLE_FIELDS:
            errors.append(f"Field '{key}' cannot be changed")
        elif key not in EDITABLE_FIELDS:
            errors.append(f"Unknown product field '{key}'")

    if "name" in fields or require_name:
        name = fields.get("name")
        if not isinstance(name, str) or not name.strip():
            errors.append("Product name is required")
        else:
            changes["name"] = name.strip()

    for key in ("description", "brand", "category_id"):
        if key not in fields:
            continue
        value = fields[key]
        if value is None:
            changes[key] = None
        elif not isinstance(value, str):
            errors.append(f"Product {key} must be a string")
        else:
            changes[key] = value.strip() or None

    if "status" in fields:
        try:
            changes["status"] = ProductStatus(fields["status"])
        except ValueError:
            allowed = ", ".join(s.value for s in ProductStatus)
            errors.append(f"Product status must be one of: {allowed}")

    if errors:
        raise ValidationError(*errors)
    return changes
