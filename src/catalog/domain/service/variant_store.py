"""Variant Store — CRUD over variant documents.

Every write goes through ``_persist``, which recomputes ``status`` and
``discount_price`` unless the caller passes ``derived_computed=True``
for variants it has just built with ``build()``.  Partial updates are
merged with the persisted source fields first, so a stock-only update
still re-derives status and a price-only update re-derives the
discount price against the new price.

Ownership is checked by the caller (Ownership Guard) before any of these
methods run.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping
from datetime import datetime, timezone

from catalog.domain.exceptions import NotFoundError
from catalog.domain.model.value_objects import Money, Percentage
from catalog.domain.model.variant import Variant, validate_variant_fields
from catalog.domain.repository.variant_repository import VariantRepository
from catalog.domain.service.derived_fields import compute_derived_variant_fields

logger = logging.getLogger(__name__)


class VariantStore:

    def __init__(self, variant_repo: VariantRepository) -> None:
        self._variant_repo = variant_repo

    # --- Building -------------------------------------------------------------

    def build(self, product_id: str, fields: Mapping) -> Variant:
        """Validate input and compute derived fields for a new variant.

        Nothing is persisted.
        """
        return self._assemble(self._variant_repo.next_id(), product_id, fields)

    # --- Writes ---------------------------------------------------------------

    def create(self, product_id: str, fields: Mapping) -> Variant:
        variant = self.build(product_id, fields)
        self._persist([variant], derived_computed=True, batch=False)
        return variant

    def update(self, variant_id: str, product_id: str, fields: Mapping) -> Variant:
        """Apply a partial update on top of the persisted variant."""
        current = self._variant_repo.get(variant_id, product_id)
        if current is None:
            raise NotFoundError("Variant not found")

        merged = {**current.source_fields(), **fields}
        variant = self._assemble(
            current.id, current.product_id, merged, created_at=current.created_at
        )
        self._persist([variant], derived_computed=True, batch=False)
        return variant

    def save(self, variant: Variant, *, derived_computed: bool = False) -> Variant:
        """Persist a variant object as-is, re-deriving unless told otherwise."""
        return self._persist(
            [variant], derived_computed=derived_computed, batch=False
        )[0]

    def insert_many(
        self, variants: list[Variant], *, derived_computed: bool = False
    ) -> list[Variant]:
        return self._persist(variants, derived_computed=derived_computed, batch=True)

    def delete(self, variant_id: str, product_id: str) -> Variant:
        """Delete a variant and return its last persisted state."""
        snapshot = self._variant_repo.get(variant_id, product_id)
        if snapshot is None:
            raise NotFoundError("Variant not found")
        self._variant_repo.delete(variant_id, product_id)
        logger.debug("Deleted variant %s of product %s", variant_id, product_id)
        return snapshot

    # --- Internal helpers -----------------------------------------------------

    def _persist(
        self, variants: list[Variant], *, derived_computed: bool, batch: bool
    ) -> list[Variant]:
        if not derived_computed:
            variants = [self._rederive(v) for v in variants]
        if batch:
            self._variant_repo.add_many(variants)
        else:
            for v in variants:
                self._variant_repo.save(v)
        for v in variants:
            logger.debug(
                "Saved variant %s of product %s (status=%s, discount_price=%s)",
                v.id, v.product_id, v.status.value, v.discount_price.amount,
            )
        return variants

    @staticmethod
    def _rederive(variant: Variant) -> Variant:
        derived = compute_derived_variant_fields(variant.source_fields())
        return dataclasses.replace(
            variant,
            status=derived["status"],
            is_discounted=derived["is_discounted"],
            discount=Percentage(derived["discount"]),
            discount_price=Money(derived["discount_price"]),
        )

    @staticmethod
    def _assemble(
        variant_id: str,
        product_id: str,
        fields: Mapping,
        created_at: datetime | None = None,
    ) -> Variant:
        derived = compute_derived_variant_fields(validate_variant_fields(fields))
        now = datetime.now(timezone.utc)
        return Variant(
            id=variant_id,
            product_id=product_id,
            size=derived["size"],
            color=derived["color"],
            price=Money(derived["price"]),
            stock=derived["stock"],
            status=derived["status"],
            is_discounted=derived["is_discounted"],
            discount=Percentage(derived["discount"]),
            discount_price=Money(derived["discount_price"]),
            created_at=created_at or now,
            updated_at=now,
        )
