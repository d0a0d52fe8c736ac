"""Product Aggregate Coordinator.

Writes that span a product and its variants go through here.  Product
creation is wrapped in the storage backend's atomic commit when the
backend offers one; without it the writes run one after another and a
failure leaves the earlier writes in place.  That partial state is
logged, and deployments that need all-or-nothing creation must run on a
backend that supports multi-document transactions.

Variant replacement and cascade deletion are never atomic: a crash
between their two steps can leave a product with no variants, or
variants with no product.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from contextlib import nullcontext

from catalog.domain.exceptions import DomainException, InternalError
from catalog.domain.model.product import Product
from catalog.domain.model.variant import Variant
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.repository.transaction_manager import TransactionManager
from catalog.domain.repository.variant_repository import VariantRepository
from catalog.domain.service.ownership_guard import OwnershipGuard
from catalog.domain.service.variant_store import VariantStore

logger = logging.getLogger(__name__)


class ProductAggregateCoordinator:

    def __init__(
        self,
        product_repo: ProductRepository,
        variant_repo: VariantRepository,
        transactions: TransactionManager,
    ) -> None:
        self._product_repo = product_repo
        self._variant_repo = variant_repo
        self._transactions = transactions
        self._variants = VariantStore(variant_repo)
        self._guard = OwnershipGuard(product_repo)

    def create_product_with_variants(
        self,
        product_fields: Mapping,
        variant_inputs: Sequence[Mapping],
        owner_id: str,
    ) -> tuple[Product, list[Variant]]:
        """Create a product and its initial variants as one unit of work.

        Steps run strictly in order: product first, then the variant batch.
        """
        atomic = self._transactions.supports_atomic_commit()
        if not atomic:
            logger.warning(
                "Storage backend cannot commit atomically; product creation "
                "for owner %s runs without rollback", owner_id,
            )
        scope = self._transactions.atomic() if atomic else nullcontext()

        persisted_id: str | None = None
        try:
            with scope:
                product = Product.create(
                    self._product_repo.next_id(), owner_id, product_fields
                )
                self._product_repo.save(product)
                persisted_id = product.id

                variants = [
                    self._variants.build(product.id, v) for v in variant_inputs
                ]
                self._variants.insert_many(variants, derived_computed=True)
        except Exception as exc:
            self._report_failed_create(exc, persisted_id, atomic)
            if isinstance(exc, DomainException):
                raise
            raise InternalError() from exc

        logger.info(
            "Created product %s with %d variant(s) for owner %s",
            product.id, len(variants), owner_id,
        )
        return product, variants

    def replace_variants(
        self,
        product_id: str,
        variant_inputs: Sequence[Mapping],
        owner_id: str,
    ) -> list[Variant]:
        """Swap a product's whole variant set for a new one.

        Replacements are validated before anything is deleted.  The
        delete and the insert are separate writes.
        """
        self._guard.assert_owned(product_id, owner_id)
        replacements = [self._variants.build(product_id, v) for v in variant_inputs]

        removed = self._variant_repo.delete_by_product(product_id)
        try:
            self._variants.insert_many(replacements, derived_computed=True)
        except Exception as exc:
            logger.warning(
                "Variant replacement for product %s failed after deleting %d "
                "variant(s); the product now has no variants",
                product_id, removed,
            )
            if isinstance(exc, DomainException):
                raise
            logger.error("Variant insert failed", exc_info=exc)
            raise InternalError() from exc

        logger.info(
            "Replaced %d variant(s) of product %s with %d",
            removed, product_id, len(replacements),
        )
        return replacements

    def delete_product_cascade(self, product_id: str, owner_id: str) -> int:
        """Delete a product and then every variant that references it.

        Returns the number of variants removed.
        """
        self._guard.assert_owned(product_id, owner_id)
        self._product_repo.delete(product_id)
        removed = self._variant_repo.delete_by_product(product_id)
        logger.info("Deleted product %s and %d variant(s)", product_id, removed)
        return removed

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _report_failed_create(
        exc: Exception, persisted_id: str | None, atomic: bool
    ) -> None:
        if atomic:
            logger.warning("Product creation rolled back: %s", exc)
        elif persisted_id is not None:
            logger.warning(
                "Product creation failed after product %s was persisted; "
                "it remains without its variants: %s",
                persisted_id, exc,
            )
        if not isinstance(exc, DomainException):
            logger.error("Product creation failed", exc_info=exc)
