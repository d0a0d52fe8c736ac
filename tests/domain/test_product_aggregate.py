"""Unit tests for the Product Aggregate Coordinator."""

import logging

import pytest

from catalog.domain.exceptions import InternalError, NotFoundError, ValidationError
from catalog.domain.service.product_aggregate import ProductAggregateCoordinator
from tests.fakes import (
    FakeProductRepository,
    FakeTransactionManager,
    FakeVariantRepository,
)

VARIANTS = [
    {"size": "S", "color": "red", "price": "20", "stock": 3},
    {"size": "M", "color": "red", "price": "20", "stock": 30},
    {"size": "L", "color": "blue", "price": "25", "is_discounted": True, "discount": "10"},
]


def _setup(atomic: bool = True):
    products = FakeProductRepository()
    variants = FakeVariantRepository()
    tx = FakeTransactionManager(products, variants, atomic=atomic)
    return ProductAggregateCoordinator(products, variants, tx), products, variants, tx


class TestCreateProductWithVariants:

    def test_round_trip_links_every_variant(self):
        coordinator, products, variants, _ = _setup()
        product, created = coordinator.create_product_with_variants(
            {"name": "Tee"}, VARIANTS, "alice"
        )
        stored = variants.list_by_product(product.id)
        assert len(stored) == 3
        assert {v.product_id for v in stored} == {product.id}
        assert products.get_by_id(product.id).owner == "alice"
        assert [v.id for v in created] == [v.id for v in stored]

    def test_derived_fields_computed_for_batch(self):
        coordinator, _, _, _ = _setup()
        _, created = coordinator.create_product_with_variants(
            {"name": "Tee"}, VARIANTS, "alice"
        )
        assert [v.status.value for v in created] == ["low_stock", "in_stock", "out_of_stock"]
        assert str(created[2].discount_price) == "$22.50"

    def test_uses_atomic_commit_when_available(self):
        coordinator, _, _, tx = _setup(atomic=True)
        coordinator.create_product_with_variants({"name": "Tee"}, VARIANTS, "alice")
        assert tx.commits == 1

    def test_atomic_validation_failure_rolls_back_product(self):
        coordinator, products, variants, tx = _setup(atomic=True)
        bad = VARIANTS + [{"size": "XL", "color": "red", "price": "50",
                           "is_discounted": True, "discount": "100"}]

        with pytest.raises(ValidationError, match="results in invalid price"):
            coordinator.create_product_with_variants({"name": "Tee"}, bad, "alice")

        assert products.list_all() == []
        assert variants.list_all() == []
        assert tx.rollbacks == 1

    def test_atomic_storage_fault_rolls_back_and_is_internal(self):
        coordinator, products, variants, _ = _setup(atomic=True)
        variants.fail_on_insert = True

        with pytest.raises(InternalError):
            coordinator.create_product_with_variants({"name": "Tee"}, VARIANTS, "alice")

        assert products.list_all() == []

    def test_without_atomic_commit_partial_write_is_kept_and_logged(self, caplog):
        coordinator, products, variants, _ = _setup(atomic=False)
        variants.fail_on_insert = True

        with caplog.at_level(logging.WARNING):
            with pytest.raises(InternalError):
                coordinator.create_product_with_variants(
                    {"name": "Tee"}, VARIANTS, "alice"
                )

        leftovers = products.list_all()
        assert len(leftovers) == 1
        assert variants.list_all() == []
        assert "remains without its variants" in caplog.text

    def test_without_atomic_commit_happy_path(self):
        coordinator, products, variants, _ = _setup(atomic=False)
        product, _ = coordinator.create_product_with_variants(
            {"name": "Tee"}, VARIANTS, "alice"
        )
        assert len(variants.list_by_product(product.id)) == 3

    def test_invalid_product_writes_nothing(self):
        coordinator, products, variants, _ = _setup(atomic=False)
        with pytest.raises(ValidationError, match="name is required"):
            coordinator.create_product_with_variants({"name": ""}, VARIANTS, "alice")
        assert products.list_all() == []


class TestReplaceVariants:

    def _seeded(self):
        coordinator, products, variants, tx = _setup()
        product, _ = coordinator.create_product_with_variants(
            {"name": "Tee"}, VARIANTS, "alice"
        )
        return coordinator, product, variants

    def test_replaces_whole_set(self):
        coordinator, product, variants = self._seeded()
        replacements = coordinator.replace_variants(
            product.id, [{"size": "XS", "color": "green", "price": "9"}], "alice"
        )
        stored = variants.list_by_product(product.id)
        assert [v.size for v in stored] == ["XS"]
        assert stored[0].id == replacements[0].id

    def test_other_owner_rejected_and_nothing_deleted(self):
        coordinator, product, variants = self._seeded()
        with pytest.raises(NotFoundError):
            coordinator.replace_variants(product.id, [], "bob")
        assert len(variants.list_by_product(product.id)) == 3

    def test_invalid_replacement_keeps_existing_variants(self):
        coordinator, product, variants = self._seeded()
        with pytest.raises(ValidationError):
            coordinator.replace_variants(
                product.id, [{"size": "", "color": "red", "price": "1"}], "alice"
            )
        assert len(variants.list_by_product(product.id)) == 3

    def test_fault_between_delete_and_insert_leaves_zero_variants(self):
        coordinator, product, variants = self._seeded()
        variants.fail_on_insert = True

        with pytest.raises(InternalError):
            coordinator.replace_variants(
                product.id, [{"size": "XS", "color": "green", "price": "9"}], "alice"
            )

        # Known gap: replacement is not atomic.
        assert variants.list_by_product(product.id) == []


class TestDeleteProductCascade:

    def test_removes_product_and_variants(self):
        coordinator, products, variants, _ = _setup()
        product, _ = coordinator.create_product_with_variants(
            {"name": "Tee"}, VARIANTS, "alice"
        )
        other, _ = coordinator.create_product_with_variants(
            {"name": "Cap"}, VARIANTS[:1], "alice"
        )

        removed = coordinator.delete_product_cascade(product.id, "alice")

        assert removed == 3
        assert products.get_by_id(product.id) is None
        assert variants.list_by_product(product.id) == []
        assert len(variants.list_by_product(other.id)) == 1

    def test_other_owner_cannot_delete(self):
        coordinator, products, _, _ = _setup()
        product, _ = coordinator.create_product_with_variants(
            {"name": "Tee"}, VARIANTS, "alice"
        )
        with pytest.raises(NotFoundError):
            coordinator.delete_product_cascade(product.id, "bob")
        assert products.get_by_id(product.id) is not None
