"""Application service: Update Product use case.

Updates the product's own fields and, when a ``variants`` payload is
given, replaces the product's whole variant set.  The replacement is
delete-then-insert and is not atomic.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from catalog.application.dto import ProductDTO, product_to_dto
from catalog.domain.exceptions import ValidationError
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.repository.transaction_manager import TransactionManager
from catalog.domain.repository.variant_repository import VariantRepository
from catalog.domain.service.ownership_guard import OwnershipGuard
from catalog.domain.service.product_aggregate import ProductAggregateCoordinator


class UpdateProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        variant_repo: VariantRepository,
        transactions: TransactionManager,
    ) -> None:
        self._product_repo = product_repo
        self._variant_repo = variant_repo
        self._guard = OwnershipGuard(product_repo)
        self._coordinator = ProductAggregateCoordinator(
            product_repo, variant_repo, transactions
        )

    def handle(
        self,
        product_id: str,
        owner_id: str,
        product_fields: Mapping,
        variants: Sequence[Mapping] | None = None,
    ) -> ProductDTO:
        product = self._guard.assert_owned(product_id, owner_id)

        if variants is not None and not isinstance(variants, (list, tuple)):
            raise ValidationError("Variants must be a list")

        if product_fields:
            product.apply_changes(product_fields)
            self._product_repo.save(product)

        if variants is not None:
            self._coordinator.replace_variants(product_id, list(variants), owner_id)
            product.touch()
            self._product_repo.save(product)

        return product_to_dto(product, self._variant_repo.list_by_product(product_id))
