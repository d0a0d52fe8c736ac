"""Application service: Delete Variant use case."""

from __future__ import annotations

from catalog.application.dto import VariantDTO, variant_to_dto
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.repository.variant_repository import VariantRepository
from catalog.domain.service.ownership_guard import OwnershipGuard
from catalog.domain.service.variant_store import VariantStore


class DeleteVariantHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        variant_repo: VariantRepository,
    ) -> None:
        self._guard = OwnershipGuard(product_repo)
        self._variants = VariantStore(variant_repo)

    def handle(self, product_id: str, variant_id: str, owner_id: str) -> VariantDTO:
        """Delete a variant and return its last state."""
        self._guard.assert_owned(product_id, owner_id)
        return variant_to_dto(self._variants.delete(variant_id, product_id))
