"""End-to-end tests for the click CLI against a temp data directory."""

import json

import pytest
from click.testing import CliRunner

from storefront.infrastructure import bootstrap
from storefront.infrastructure.cli.main import cli


@pytest.fixture()
def runner(tmp_path, monkeypatch):
    monkeypatch.setenv("STOREFRONT_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("ENVIRONMENT", "test")
    (tmp_path / "products.json").write_text(
        json.dumps([
            {"id": "pizza", "name": "Margherita", "price": "9.99"},
            {"id": "salad", "name": "Greek Salad", "price": "6.50"},
        ]),
        encoding="utf-8",
    )
    bootstrap.settings.cache_clear()
    bootstrap.repositories.cache_clear()
    yield CliRunner()
    bootstrap.settings.cache_clear()
    bootstrap.repositories.cache_clear()


def _run(runner, *args):
    return runner.invoke(cli, list(args))


class TestCli:

    def test_catalog_list(self, runner):
        result = _run(runner, "catalog", "list")
        assert result.exit_code == 0
        assert "Margherita" in result.output
        assert "$9.99" in result.output

    def test_cart_flow(self, runner):
        assert _run(runner, "user", "add", "--id", "u-1", "--name", "Alice").exit_code == 0

        result = _run(runner, "cart", "add", "--user", "u-1", "--product", "pizza", "--quantity", "2")
        assert result.exit_code == 0
        assert "$19.98" in result.output

        result = _run(runner, "cart", "remove", "--user", "u-1", "--product", "pizza")
        assert result.exit_code == 0
        assert "Cart is empty." in result.output

    def test_unknown_user_fails(self, runner):
        result = _run(runner, "cart", "show", "--user", "ghost")
        assert result.exit_code != 0
        assert "User not found" in result.output

    def test_duplicate_user_fails(self, runner):
        _run(runner, "user", "add", "--id", "u-1")
        result = _run(runner, "user", "add", "--id", "u-1")
        assert result.exit_code != 0
        assert "already exists" in result.output

    def test_favorites(self, runner):
        _run(runner, "user", "add", "--id", "u-1")
        _run(runner, "favorite", "add", "--user", "u-1", "--product", "salad")
        result = _run(runner, "favorite", "list", "--user", "u-1")
        assert result.exit_code == 0
        assert "Greek Salad" in result.output

    def test_place_order_from_cart(self, runner):
        _run(runner, "user", "add", "--id", "u-1")
        _run(runner, "cart", "add", "--user", "u-1", "--product", "pizza", "--quantity", "2")

        result = _run(
            runner, "order", "place", "--user", "u-1", "--address", "123 Main St", "--total", "19.98"
        )
        assert result.exit_code == 0
        assert "Payment Done" in result.output

        assert "Cart is empty." in _run(runner, "cart", "show", "--user", "u-1").output

        listed = _run(runner, "order", "list", "--user", "u-1")
        assert "$19.98" in listed.output

    def test_place_order_with_items(self, runner):
        _run(runner, "user", "add", "--id", "u-1")
        result = _run(
            runner,
            "order", "place",
            "--user", "u-1",
            "--address", "123 Main St",
            "--total", "16.49",
            "--items", "pizza:1,salad:1",
        )
        assert result.exit_code == 0
        assert "Greek Salad" in result.output

    def test_place_order_rejects_bad_items(self, runner):
        _run(runner, "user", "add", "--id", "u-1")
        result = _run(
            runner,
            "order", "place",
            "--user", "u-1",
            "--address", "123 Main St",
            "--total", "9.99",
            "--items", "pizza",
        )
        assert result.exit_code != 0

    def test_place_order_empty_cart_fails(self, runner):
        _run(runner, "user", "add", "--id", "u-1")
        result = _run(
            runner, "order", "place", "--user", "u-1", "--address", "123 Main St", "--total", "9.99"
        )
        assert result.exit_code != 0
        assert "cannot be empty" in result.output

    def test_show_missing_order(self, runner):
        result = _run(runner, "order", "show", "--id", "nope")
        assert result.exit_code != 0
        assert "not found" in result.output

    def test_order_list_reports_storage_failure(self, runner, tmp_path):
        _run(runner, "user", "add", "--id", "u-1")
        (tmp_path / "orders" / "u-1").mkdir(parents=True, exist_ok=True)
        (tmp_path / "orders" / "u-1" / "broken.json").write_text("{", encoding="utf-8")

        result = _run(runner, "order", "list", "--user", "u-1")

        assert result.exit_code == 1
        assert "Could not read broken.json" in result.output
        assert "Traceback" not in result.output
