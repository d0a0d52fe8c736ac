"""End-to-end tests for the click CLI against a temporary data directory."""

import json

import pytest
from click.testing import CliRunner

from catalog.infrastructure import bootstrap
from catalog.infrastructure.cli.main import cli


@pytest.fixture
def runner(tmp_path, monkeypatch):
    monkeypatch.setenv("CATALOG_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("CATALOG_USER", "alice")
    bootstrap.settings.cache_clear()
    bootstrap.document_store.cache_clear()
    yield CliRunner()
    bootstrap.settings.cache_clear()
    bootstrap.document_store.cache_clear()


def _mine(runner, owner="alice") -> list[dict]:
    result = runner.invoke(cli, ["product", "mine", "--json", "--owner", owner])
    assert result.exit_code == 0, result.output
    return json.loads(result.output)


class TestProductCommands:

    def test_create_and_list(self, runner):
        result = runner.invoke(cli, [
            "product", "create", "--name", "Tee",
            "--variant", "M:red:100:5:20",
            "--variant", "L:red:100:30",
        ])
        assert result.exit_code == 0, result.output
        assert "created with 2 variant(s)" in result.output

        [product] = _mine(runner)
        assert product["name"] == "Tee"
        sale, plain = product["variants"]
        assert sale["discount_price"] == "$80.00"
        assert sale["status"] == "low_stock"
        assert plain["status"] == "in_stock"

    def test_validation_error_reported_with_kind(self, runner):
        result = runner.invoke(cli, [
            "product", "create", "--name", "Tee", "--variant", "M:red:50:1:100",
        ])
        assert result.exit_code != 0
        assert "validation_error" in result.output
        assert "results in invalid price" in result.output
        assert _mine(runner) == []

    def test_bad_variant_format(self, runner):
        result = runner.invoke(cli, ["product", "create", "--name", "Tee", "--variant", "M"])
        assert result.exit_code != 0
        assert "Invalid variant format" in result.output

    def test_delete_by_other_user_is_not_found(self, runner):
        runner.invoke(cli, ["product", "create", "--name", "Tee"])
        [product] = _mine(runner)

        result = runner.invoke(
            cli, ["product", "delete", "--id", product["id"], "--owner", "bob"]
        )

        assert result.exit_code != 0
        assert "not_found" in result.output
        assert len(_mine(runner)) == 1


class TestVariantCommands:

    def test_partial_update_keeps_discount(self, runner):
        runner.invoke(cli, ["product", "create", "--name", "Tee", "--variant", "M:red:100:50:20"])
        [product] = _mine(runner)
        variant_id = product["variants"][0]["id"]

        result = runner.invoke(cli, [
            "variant", "update", "--product", product["id"], "--id", variant_id,
            "--stock", "5",
        ])

        assert result.exit_code == 0, result.output
        [variant] = _mine(runner)[0]["variants"]
        assert variant["status"] == "low_stock"
        assert variant["discount_price"] == "$80.00"

    def test_update_needs_a_field(self, runner):
        result = runner.invoke(cli, ["variant", "update", "--product", "p", "--id", "v"])
        assert result.exit_code != 0
        assert "Nothing to update" in result.output


class TestCategoryAndSearchCommands:

    def test_category_then_search(self, runner):
        result = runner.invoke(cli, ["category", "create", "--name", "Shirts"])
        assert result.exit_code == 0, result.output
        category_id = result.output.split()[1]

        runner.invoke(cli, ["product", "create", "--name", "Tee", "--category", category_id])

        result = runner.invoke(cli, ["search", "category", "shirt"])
        assert result.exit_code == 0, result.output
        assert "'Tee'" in result.output

    def test_search_date_rejects_bad_order(self, runner):
        result = runner.invoke(cli, ["search", "date", "--order", "sideways"])
        assert result.exit_code != 0
        assert "Invalid order parameter" in result.output
