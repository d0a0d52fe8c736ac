"""Unit tests for the Variant Store write path.

Every write must leave ``status`` and ``discount_price`` consistent with
the source fields, whichever subset of fields the caller touched.
"""

import dataclasses

import pytest

from catalog.domain.exceptions import NotFoundError, ValidationError
from catalog.domain.model.value_objects import Money
from catalog.domain.model.variant import StockStatus
from catalog.domain.service.variant_store import VariantStore
from tests.fakes import FakeVariantRepository


def _store() -> tuple[VariantStore, FakeVariantRepository]:
    repo = FakeVariantRepository()
    return VariantStore(repo), repo


DISCOUNTED = {
    "size": "M", "color": "red", "price": "100", "stock": 50,
    "is_discounted": True, "discount": "20",
}


class TestCreate:

    def test_discounted_variant_gets_discount_price(self):
        store, repo = _store()
        v = store.create("p1", DISCOUNTED)
        assert v.discount_price == Money.of("80.00")
        assert repo.get(v.id, "p1").discount_price == Money.of("80.00")

    def test_status_derived_from_stock(self):
        store, _ = _store()
        v = store.create("p1", {"size": "M", "color": "red", "price": "10", "stock": 0})
        assert v.status == StockStatus.OUT_OF_STOCK

    def test_client_status_is_overridden(self):
        store, _ = _store()
        v = store.create(
            "p1",
            {"size": "M", "color": "red", "price": "10", "stock": 40, "status": "out_of_stock"},
        )
        assert v.status == StockStatus.IN_STOCK

    def test_non_discounted_zeroes_discount(self):
        store, _ = _store()
        v = store.create("p1", {**DISCOUNTED, "is_discounted": False})
        assert v.discount.value == 0
        assert v.discount_price.amount == 0

    def test_invalid_resulting_price_persists_nothing(self):
        store, repo = _store()
        with pytest.raises(ValidationError, match="results in invalid price"):
            store.create("p1", {**DISCOUNTED, "price": "50", "discount": "100"})
        assert repo.list_all() == []


class TestUpdate:

    def test_stock_only_update_rederives_status_and_keeps_price(self):
        store, repo = _store()
        v = store.create("p1", DISCOUNTED)

        updated = store.update(v.id, "p1", {"stock": 5})

        assert updated.status == StockStatus.LOW_STOCK
        assert updated.discount_price == Money.of("80.00")
        assert repo.get(v.id, "p1").status == StockStatus.LOW_STOCK

    def test_price_only_update_recomputes_discount_price(self):
        store, _ = _store()
        v = store.create("p1", DISCOUNTED)
        updated = store.update(v.id, "p1", {"price": "200"})
        assert updated.discount_price == Money.of("160.00")

    def test_turning_discount_off_zeroes_fields(self):
        store, _ = _store()
        v = store.create("p1", DISCOUNTED)
        updated = store.update(v.id, "p1", {"is_discounted": False})
        assert updated.discount.value == 0
        assert updated.discount_price.amount == 0
        assert updated.final_price == Money.of("100")

    def test_turning_discount_on_without_percentage_rejected(self):
        store, repo = _store()
        v = store.create("p1", {"size": "M", "color": "red", "price": "10"})
        with pytest.raises(ValidationError, match="Discount percentage is required"):
            store.update(v.id, "p1", {"is_discounted": True})
        assert repo.get(v.id, "p1").is_discounted is False

    def test_client_discount_price_is_ignored(self):
        store, _ = _store()
        v = store.create("p1", DISCOUNTED)
        updated = store.update(v.id, "p1", {"discount_price": "1.00"})
        assert updated.discount_price == Money.of("80.00")

    def test_keeps_identity_and_created_at(self):
        store, _ = _store()
        v = store.create("p1", DISCOUNTED)
        updated = store.update(v.id, "p1", {"color": "blue"})
        assert updated.id == v.id
        assert updated.product_id == "p1"
        assert updated.created_at == v.created_at
        assert updated.color == "blue"

    def test_variant_under_other_product_not_found(self):
        store, _ = _store()
        v = store.create("p1", DISCOUNTED)
        with pytest.raises(NotFoundError, match="Variant not found"):
            store.update(v.id, "p2", {"stock": 1})

    def test_repeated_updates_do_not_drift(self):
        store, _ = _store()
        v = store.create("p1", {**DISCOUNTED, "price": "19.99", "discount": "15"})
        for _ in range(5):
            v = store.update(v.id, "p1", {"stock": v.stock + 1})
        assert v.discount_price == Money.of("16.99")


class TestSave:

    def test_direct_save_rederives(self):
        store, repo = _store()
        v = store.create("p1", DISCOUNTED)
        tampered = dataclasses.replace(
            v, stock=0, status=StockStatus.IN_STOCK, discount_price=Money.of("1")
        )

        saved = store.save(tampered)

        assert saved.status == StockStatus.OUT_OF_STOCK
        assert saved.discount_price == Money.of("80.00")
        assert repo.get(v.id, "p1").status == StockStatus.OUT_OF_STOCK

    def test_derived_computed_flag_skips_recompute(self):
        store, repo = _store()
        built = store.build("p1", DISCOUNTED)
        store.insert_many([built], derived_computed=True)
        assert repo.get(built.id, "p1") == built


class TestDelete:

    def test_returns_snapshot(self):
        store, repo = _store()
        v = store.create("p1", DISCOUNTED)
        deleted = store.delete(v.id, "p1")
        assert deleted.id == v.id
        assert repo.get(v.id, "p1") is None

    def test_missing_variant_not_found(self):
        store, _ = _store()
        with pytest.raises(NotFoundError):
            store.delete("v404", "p1")
