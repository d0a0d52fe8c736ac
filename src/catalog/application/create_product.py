"""Application service: Create Product use case.

Creates the product and its initial variants through the aggregate
coordinator, so the whole batch commits together when the storage
backend allows it.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from catalog.application.dto import ProductDTO, product_to_dto
from catalog.domain.exceptions import ValidationError
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.repository.transaction_manager import TransactionManager
from catalog.domain.repository.variant_repository import VariantRepository
from catalog.domain.service.product_aggregate import ProductAggregateCoordinator


class CreateProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        variant_repo: VariantRepository,
        transactions: TransactionManager,
    ) -> None:
        self._coordinator = ProductAggregateCoordinator(
            product_repo, variant_repo, transactions
        )

    def handle(
        self,
        owner_id: str,
        product_fields: Mapping,
        variants: Sequence[Mapping] | None = None,
    ) -> ProductDTO:
        if variants is not None and not isinstance(variants, (list, tuple)):
            raise ValidationError("Variants must be a list")

        product, created = self._coordinator.create_product_with_variants(
            product_fields, list(variants or []), owner_id
        )
        return product_to_dto(product, created)
