"""Abstract repository for Variant documents.

Variants are always addressed under their product: a variant ID that
exists but belongs to another product is treated as missing.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.variant import Variant


class VariantRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate a new opaque variant ID."""

    @abstractmethod
    def get(self, variant_id: str, product_id: str) -> Variant | None:
        """Return the variant if it exists under *product_id*."""

    @abstractmethod
    def list_by_product(self, product_id: str) -> list[Variant]:
        """Return every variant of a product."""

    @abstractmethod
    def list_all(self) -> list[Variant]:
        """Return every variant in the catalog."""

    @abstractmethod
    def save(self, variant: Variant) -> None:
        """Persist a new or updated variant."""

    @abstractmethod
    def add_many(self, variants: list[Variant]) -> None:
        """Insert a batch of new variants in one call."""

    @abstractmethod
    def delete(self, variant_id: str, product_id: str) -> bool:
        """Remove one variant. Returns False if it did not exist."""

    @abstractmethod
    def delete_by_product(self, product_id: str) -> int:
        """Remove all variants of a product and return how many were removed."""
