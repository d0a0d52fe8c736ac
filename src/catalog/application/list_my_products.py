"""Application service: List My Products use case (query)."""

from __future__ import annotations

from catalog.application.dto import ProductDTO, product_to_dto
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.repository.variant_repository import VariantRepository


class ListMyProductsHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        variant_repo: VariantRepository,
    ) -> None:
        self._product_repo = product_repo
        self._variant_repo = variant_repo

    def handle(self, owner_id: str) -> list[ProductDTO]:
        return [
            product_to_dto(p, self._variant_repo.list_by_product(p.id))
            for p in self._product_repo.list_by_owner(owner_id)
        ]
