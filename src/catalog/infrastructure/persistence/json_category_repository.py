"""JSON-document implementation of CategoryRepository."""

from __future__ import annotations

import uuid
from datetime import datetime

from catalog.domain.model.category import Category
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.infrastructure.persistence.json_document_store import JsonDocumentStore

COLLECTION = "categories"


class JsonCategoryRepository(CategoryRepository):

    def __init__(self, store: JsonDocumentStore) -> None:
        self._store = store

    def next_id(self) -> str:
        return uuid.uuid4().hex

    def get_by_id(self, category_id: str) -> Category | None:
        for raw in self._store.load(COLLECTION):
            if raw["id"] == category_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Category]:
        return [self._to_domain(raw) for raw in self._store.load(COLLECTION)]

    def save(self, category: Category) -> None:
        records = self._store.load(COLLECTION)
        for i, raw in enumerate(records):
            if raw["id"] == category.id:
                records[i] = self._to_raw(category)
                break
        else:
            records.append(self._to_raw(category))
        self._store.persist(COLLECTION, records)

    def delete(self, category_id: str) -> bool:
        records = self._store.load(COLLECTION)
        kept = [raw for raw in records if raw["id"] != category_id]
        if len(kept) == len(records):
            return False
        self._store.persist(COLLECTION, kept)
        return True

    @staticmethod
    def _to_raw(category: Category) -> dict:
        return {
            "id": category.id,
            "name": category.name,
            "created_at": category.created_at.isoformat(),
            "updated_at": category.updated_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Category:
        return Category(
            id=raw["id"],
            name=raw["name"],
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )
