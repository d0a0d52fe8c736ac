"""Application service: Update Variant use case.

Accepts a partial payload.  Fields that are not given keep their
persisted values, and the derived fields are recomputed from the merged
result.
"""

from __future__ import annotations

from collections.abc import Mapping

from catalog.application.dto import VariantDTO, variant_to_dto
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.repository.variant_repository import VariantRepository
from catalog.domain.service.ownership_guard import OwnershipGuard
from catalog.domain.service.variant_store import VariantStore


class UpdateVariantHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        variant_repo: VariantRepository,
    ) -> None:
        self._guard = OwnershipGuard(product_repo)
        self._variants = VariantStore(variant_repo)

    def handle(
        self,
        product_id: str,
        variant_id: str,
        owner_id: str,
        fields: Mapping,
    ) -> VariantDTO:
        self._guard.assert_owned(product_id, owner_id)
        return variant_to_dto(self._variants.update(variant_id, product_id, fields))
