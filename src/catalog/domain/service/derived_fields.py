"""Derived-field calculator for variants.

Pure functions, no I/O.  ``discount_price`` and ``status`` are computed
here from the source fields and nowhere else, so identical inputs always
give identical outputs and recomputing an already-persisted variant is a
no-op.
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.value_objects import HUNDRED, ZERO, round2, to_decimal
from catalog.domain.model.variant import StockStatus

LOW_STOCK_THRESHOLD = 10


def compute_stock_status(stock: int) -> StockStatus:
    if stock <= 0:
        return StockStatus.OUT_OF_STOCK
    if stock <= LOW_STOCK_THRESHOLD:
        return StockStatus.LOW_STOCK
    return StockStatus.IN_STOCK


def compute_discount_price(price: Decimal, discount: Decimal) -> Decimal:
    """Price after a percentage discount, rounded to cents.

    Raises ValidationError when the discount is out of range or would
    leave nothing to pay.
    """
    if discount <= ZERO:
        raise ValidationError(
            "Discount percentage is required and must be greater than 0 "
            "when the variant is discounted"
        )
    if discount > HUNDRED:
        raise ValidationError("Discount percentage cannot be greater than 100")

    candidate = price - price * discount / HUNDRED
    if candidate <= ZERO or round2(candidate) <= ZERO:
        raise ValidationError(
            f"Discount of {discount.normalize():f}% on price {price} "
            "results in invalid price"
        )
    return round2(candidate)


def compute_derived_variant_fields(fields: Mapping) -> dict:
    """Return a copy of *fields* with ``discount``, ``discount_price`` and
    ``status`` computed from the source fields.

    Any ``discount_price`` supplied by the caller is discarded.  ``status``
    is only computed when ``stock`` is present.
    """
    processed = dict(fields)
    processed.pop("discount_price", None)

    if not processed.get("is_discounted"):
        processed["is_discounted"] = False
        processed["discount"] = Decimal("0")
        processed["discount_price"] = Decimal("0.00")
    else:
        raw_discount = processed.get("discount")
        if raw_discount is None:
            raise ValidationError(
                "Discount percentage is required and must be greater than 0 "
                "when the variant is discounted"
            )
        price = to_decimal(processed.get("price"), "Variant price")
        discount = to_decimal(raw_discount, "Variant discount")
        processed["is_discounted"] = True
        processed["discount"] = discount
        processed["discount_price"] = compute_discount_price(price, discount)

    if processed.get("stock") is not None:
        processed["status"] = compute_stock_status(processed["stock"])

    return processed
