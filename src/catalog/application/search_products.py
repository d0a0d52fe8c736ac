"""Application service: Search Products use case (query).

Plain substring filters, case-insensitive.  Name, category and date
searches return each product with all of its variants; size and color
searches return each product with only the variants that matched.
"""

from __future__ import annotations

from catalog.application.dto import ProductDTO, product_to_dto
from catalog.domain.exceptions import ValidationError
from catalog.domain.model.product import Product
from catalog.domain.model.variant import Variant
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.repository.variant_repository import VariantRepository

DATE_ORDERS = ("oldest", "newest")


def _matches(value: str | None, term: str) -> bool:
    return value is not None and term.lower() in value.lower()


class SearchProductsHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        variant_repo: VariantRepository,
        category_repo: CategoryRepository,
    ) -> None:
        self._product_repo = product_repo
        self._variant_repo = variant_repo
        self._category_repo = category_repo

    def by_name(self, term: str) -> list[ProductDTO]:
        products = [p for p in self._product_repo.list_all() if _matches(p.name, term)]
        return self._with_all_variants(products)

    def by_category(self, term: str) -> list[ProductDTO]:
        category_ids = {
            c.id for c in self._category_repo.list_all() if _matches(c.name, term)
        }
        products = [
            p for p in self._product_repo.list_all() if p.category_id in category_ids
        ]
        return self._with_all_variants(products)

    def by_size(self, term: str) -> list[ProductDTO]:
        return self._by_variant_field("size", term)

    def by_color(self, term: str) -> list[ProductDTO]:
        return self._by_variant_field("color", term)

    def by_created(self, order: str) -> list[ProductDTO]:
        if order not in DATE_ORDERS:
            raise ValidationError('Invalid order parameter. Use "oldest" or "newest".')
        products = sorted(
            self._product_repo.list_all(),
            key=lambda p: p.created_at,
            reverse=order == "newest",
        )
        return self._with_all_variants(products)

    # --- Internal helpers -----------------------------------------------------

    def _by_variant_field(self, field: str, term: str) -> list[ProductDTO]:
        matched: dict[str, list[Variant]] = {}
        for variant in self._variant_repo.list_all():
            if _matches(getattr(variant, field), term):
                matched.setdefault(variant.product_id, []).append(variant)

        return [
            product_to_dto(p, matched[p.id])
            for p in self._product_repo.list_all()
            if p.id in matched
        ]

    def _with_all_variants(self, products: list[Product]) -> list[ProductDTO]:
        return [
            product_to_dto(p, self._variant_repo.list_by_product(p.id))
            for p in products
        ]
