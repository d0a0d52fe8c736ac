"""Composition root: builds the JSON store and repositories from Settings.

The CLI asks this module for its collaborators; nothing else in the
codebase touches concrete persistence classes.
"""

from __future__ import annotations

from functools import lru_cache

from catalog.infrastructure.config import Settings
from catalog.infrastructure.persistence.json_category_repository import (
    JsonCategoryRepository,
)
from catalog.infrastructure.persistence.json_document_store import JsonDocumentStore
from catalog.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from catalog.infrastructure.persistence.json_variant_repository import (
    JsonVariantRepository,
)


@lru_cache(maxsize=1)
def settings() -> Settings:
    return Settings()


@lru_cache(maxsize=1)
def document_store() -> JsonDocumentStore:
    cfg = settings()
    return JsonDocumentStore(
        cfg.catalog_data_dir, atomic_commit=cfg.catalog_atomic_commit
    )


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(document_store())


def variant_repository() -> JsonVariantRepository:
    return JsonVariantRepository(document_store())


def category_repository() -> JsonCategoryRepository:
    return JsonCategoryRepository(document_store())
