"""Ownership Guard — binds a product, and through it its variants, to the
user who created it.

Missing and foreign products fail with the same NotFoundError so callers
cannot probe for other users' product IDs.
"""

from __future__ import annotations

from catalog.domain.exceptions import NotFoundError
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository

NOT_FOUND_MESSAGE = "Product not found or unauthorized"


def check_ownership(product: Product | None, caller_id: str) -> Product:
    """Pure check over an already-fetched product."""
    if product is None or product.owner != caller_id:
        raise NotFoundError(NOT_FOUND_MESSAGE)
    return product


class OwnershipGuard:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def assert_owned(self, product_id: str, caller_id: str) -> Product:
        return check_ownership(self._product_repo.get_by_id(product_id), caller_id)
