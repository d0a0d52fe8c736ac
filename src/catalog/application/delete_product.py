"""Application service: Delete Product use case."""

from __future__ import annotations

from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.repository.transaction_manager import TransactionManager
from catalog.domain.repository.variant_repository import VariantRepository
from catalog.domain.service.product_aggregate import ProductAggregateCoordinator


class DeleteProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        variant_repo: VariantRepository,
        transactions: TransactionManager,
    ) -> None:
        self._coordinator = ProductAggregateCoordinator(
            product_repo, variant_repo, transactions
        )

    def handle(self, product_id: str, owner_id: str) -> int:
        """Delete the product and its variants; return the variant count."""
        return self._coordinator.delete_product_cascade(product_id, owner_id)
