"""Application service: Show Inventory use case (query).

Summarises stock across every variant of the caller's products.
"""

from __future__ import annotations

from dataclasses import dataclass

from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.repository.variant_repository import VariantRepository
from catalog.domain.service.derived_fields import LOW_STOCK_THRESHOLD


@dataclass(frozen=True)
class InventoryLineDTO:
    variant_id: str
    product_id: str
    product_name: str
    color: str
    size: str
    stock: int
    low_stock: bool


@dataclass(frozen=True)
class InventoryDTO:
    total_items: int
    variants: list[InventoryLineDTO]


class ShowInventoryHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        variant_repo: VariantRepository,
    ) -> None:
        self._product_repo = product_repo
        self._variant_repo = variant_repo

    def handle(self, owner_id: str) -> InventoryDTO:
        lines: list[InventoryLineDTO] = []
        for product in self._product_repo.list_by_owner(owner_id):
            for variant in self._variant_repo.list_by_product(product.id):
                lines.append(
                    InventoryLineDTO(
                        variant_id=variant.id,
                        product_id=product.id,
                        product_name=product.name,
                        color=variant.color,
                        size=variant.size,
                        stock=variant.stock,
                        # out-of-stock variants are flagged too
                        low_stock=variant.stock <= LOW_STOCK_THRESHOLD,
                    )
                )
        total = sum(line.stock for line in lines)
        return InventoryDTO(total_items=total, variants=lines)
