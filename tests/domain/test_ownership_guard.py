"""Unit tests for the Ownership Guard."""

import pytest

from catalog.domain.exceptions import NotFoundError
from catalog.domain.model.product import Product
from catalog.domain.service.ownership_guard import OwnershipGuard, check_ownership
from tests.fakes import FakeProductRepository


def _guard() -> OwnershipGuard:
    repo = FakeProductRepository([Product(id="p1", name="Hoodie", owner="alice")])
    return OwnershipGuard(repo)


class TestOwnershipGuard:

    def test_owner_gets_product(self):
        product = _guard().assert_owned("p1", "alice")
        assert product.id == "p1"

    def test_other_user_rejected(self):
        with pytest.raises(NotFoundError, match="not found or unauthorized"):
            _guard().assert_owned("p1", "bob")

    def test_missing_and_foreign_look_the_same(self):
        with pytest.raises(NotFoundError) as missing:
            _guard().assert_owned("nope", "alice")
        with pytest.raises(NotFoundError) as foreign:
            _guard().assert_owned("p1", "bob")
        assert missing.value.payload() == foreign.value.payload()

    def test_pure_check_on_fetched_product(self):
        product = Product(id="p1", name="Hoodie", owner="alice")
        assert check_ownership(product, "alice") is product
        with pytest.raises(NotFoundError):
            check_ownership(None, "alice")
