"""JSON-document implementation of ProductRepository."""

from __future__ import annotations

import uuid
from datetime import datetime

from catalog.domain.model.product import Product, ProductStatus
from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure.persistence.json_document_store import JsonDocumentStore

COLLECTION = "products"


class JsonProductRepository(ProductRepository):

    def __init__(self, store: JsonDocumentStore) -> None:
        self._store = store

    # --- ProductRepository interface ------------------------------------------

    def next_id(self) -> str:
        return uuid.uuid4().hex

    def get_by_id(self, product_id: str) -> Product | None:
        for raw in self._store.load(COLLECTION):
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._store.load(COLLECTION)]

    def list_by_owner(self, owner: str) -> list[Product]:
        return [
            self._to_domain(raw)
            for raw in self._store.load(COLLECTION)
            if raw["owner"] == owner
        ]

    def save(self, product: Product) -> None:
        records = self._store.load(COLLECTION)
        for i, raw in enumerate(records):
            if raw["id"] == product.id:
                records[i] = self._to_raw(product)
                break
        else:
            records.append(self._to_raw(product))
        self._store.persist(COLLECTION, records)

    def delete(self, product_id: str) -> bool:
        records = self._store.load(COLLECTION)
        kept = [raw for raw in records if raw["id"] != product_id]
        if len(kept) == len(records):
            return False
        self._store.persist(COLLECTION, kept)
        return True

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "owner": product.owner,
            "description": product.description,
            "brand": product.brand,
            "category_id": product.category_id,
            "status": product.status.value,
            "created_at": product.created_at.isoformat(),
            "updated_at": product.updated_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            owner=raw["owner"],
            description=raw.get("description"),
            brand=raw.get("brand"),
            category_id=raw.get("category_id"),
            status=ProductStatus(raw.get("status", ProductStatus.IN_STOCK.value)),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )
