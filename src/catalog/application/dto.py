"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.  Variant DTOs are
enriched with ``final_price`` and ``savings``, computed on read.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass

from catalog.domain.model.category import Category
from catalog.domain.model.product import Product
from catalog.domain.model.variant import Variant

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M UTC"


@dataclass(frozen=True)
class VariantDTO:
    """Output: a single variant as displayed to the user."""

    id: str
    product_id: str
    size: str
    color: str
    price: str  # formatted, e.g. "$100.00"
    stock: int
    status: str
    is_discounted: bool
    discount: str  # e.g. "20%"
    discount_price: str
    final_price: str
    savings: str


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product together with its variants."""

    id: str
    name: str
    owner: str
    description: str | None
    brand: str | None
    category_id: str | None
    status: str
    created_at: str
    updated_at: str
    variants: list[VariantDTO]

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class CategoryDTO:

    id: str
    name: str
    created_at: str


# --- Mapping ------------------------------------------------------------------


def variant_to_dto(variant: Variant) -> VariantDTO:
    return VariantDTO(
        id=variant.id,
        product_id=variant.product_id,
        size=variant.size,
        color=variant.color,
        price=str(variant.price),
        stock=variant.stock,
        status=variant.status.value,
        is_discounted=variant.is_discounted,
        discount=str(variant.discount),
        discount_price=str(variant.discount_price),
        final_price=str(variant.final_price),
        savings=str(variant.savings),
    )


def product_to_dto(product: Product, variants: list[Variant]) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        owner=product.owner,
        description=product.description,
        brand=product.brand,
        category_id=product.category_id,
        status=product.status.value,
        created_at=product.created_at.strftime(TIMESTAMP_FORMAT),
        updated_at=product.updated_at.strftime(TIMESTAMP_FORMAT),
        variants=[variant_to_dto(v) for v in variants],
    )


def category_to_dto(category: Category) -> CategoryDTO:
    return CategoryDTO(
        id=category.id,
        name=category.name,
        created_at=category.created_at.strftime(TIMESTAMP_FORMAT),
    )
