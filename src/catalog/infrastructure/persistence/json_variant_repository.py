"""JSON-document implementation of VariantRepository.

Derived fields are stored as written; this layer never recomputes them.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal

from catalog.domain.model.value_objects import Money, Percentage
from catalog.domain.model.variant import StockStatus, Variant
from catalog.domain.repository.variant_repository import VariantRepository
from catalog.infrastructure.persistence.json_document_store import JsonDocumentStore

COLLECTION = "variants"


class JsonVariantRepository(VariantRepository):

    def __init__(self, store: JsonDocumentStore) -> None:
        self._store = store

    # --- VariantRepository interface ------------------------------------------

    def next_id(self) -> str:
        return uuid.uuid4().hex

    def get(self, variant_id: str, product_id: str) -> Variant | None:
        for raw in self._store.load(COLLECTION):
            if raw["id"] == variant_id and raw["product_id"] == product_id:
                return self._to_domain(raw)
        return None

    def list_by_product(self, product_id: str) -> list[Variant]:
        return [
            self._to_domain(raw)
            for raw in self._store.load(COLLECTION)
            if raw["product_id"] == product_id
        ]

    def list_all(self) -> list[Variant]:
        return [self._to_domain(raw) for raw in self._store.load(COLLECTION)]

    def save(self, variant: Variant) -> None:
        records = self._store.load(COLLECTION)
        for i, raw in enumerate(records):
            if raw["id"] == variant.id:
                records[i] = self._to_raw(variant)
                break
        else:
            records.append(self._to_raw(variant))
        self._store.persist(COLLECTION, records)

    def add_many(self, variants: list[Variant]) -> None:
        records = self._store.load(COLLECTION)
        records.extend(self._to_raw(v) for v in variants)
        self._store.persist(COLLECTION, records)

    def delete(self, variant_id: str, product_id: str) -> bool:
        records = self._store.load(COLLECTION)
        kept = [
            raw for raw in records
            if not (raw["id"] == variant_id and raw["product_id"] == product_id)
        ]
        if len(kept) == len(records):
            return False
        self._store.persist(COLLECTION, kept)
        return True

    def delete_by_product(self, product_id: str) -> int:
        records = self._store.load(COLLECTION)
        kept = [raw for raw in records if raw["product_id"] != product_id]
        removed = len(records) - len(kept)
        if removed:
            self._store.persist(COLLECTION, kept)
        return removed

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(variant: Variant) -> dict:
        return {
            "id": variant.id,
            "product_id": variant.product_id,
            "size": variant.size,
            "color": variant.color,
            "price": str(variant.price.amount),
            "currency": variant.price.currency,
            "stock": variant.stock,
            "status": variant.status.value,
            "is_discounted": variant.is_discounted,
            "discount": str(variant.discount.value),
            "discount_price": str(variant.discount_price.amount),
            "created_at": variant.created_at.isoformat(),
            "updated_at": variant.updated_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Variant:
        currency = raw.get("currency", "USD")
        return Variant(
            id=raw["id"],
            product_id=raw["product_id"],
            size=raw["size"],
            color=raw["color"],
            price=Money(Decimal(raw["price"]), currency),
            stock=raw.get("stock", 0),
            status=StockStatus(raw["status"]),
            is_discounted=raw.get("is_discounted", False),
            discount=Percentage(Decimal(raw.get("discount", "0"))),
            discount_price=Money(Decimal(raw.get("discount_price", "0")), currency),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )
