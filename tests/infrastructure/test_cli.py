"""CLI tests against a throwaway SQLite file."""

import pytest
from click.testing import CliRunner

from catalog.infrastructure import bootstrap
from catalog.infrastructure.cli.main import cli
from catalog.infrastructure.config import get_settings
from catalog.infrastructure.persistence.seed import GOODS_ID, STATIONERY_ID


@pytest.fixture
def runner(tmp_path, monkeypatch):
    monkeypatch.setenv("CATALOG_DATABASE_URL", f"sqlite:///{tmp_path / 'catalog.db'}")
    monkeypatch.setattr(
        "catalog.infrastructure.cli.main.setup_logging", lambda *args, **kwargs: None
    )
    get_settings.cache_clear()
    bootstrap.engine.cache_clear()

    yield CliRunner()

    if bootstrap.engine.cache_info().currsize:
        bootstrap.engine().dispose()
    bootstrap.engine.cache_clear()
    get_settings.cache_clear()


@pytest.fixture
def seeded(runner):
    result = runner.invoke(cli, ["db", "seed"])
    assert result.exit_code == 0, result.output
    return runner


class TestDbCommands:

    def test_init(self, runner):
        result = runner.invoke(cli, ["db", "init"])
        assert result.exit_code == 0
        assert "Tables created." in result.output

    def test_seed_twice(self, runner):
        first = runner.invoke(cli, ["db", "seed"])
        second = runner.invoke(cli, ["db", "seed"])
        assert "Seeded 3 categories and 8 products." in first.output
        assert "Seeded 0 categories and 0 products." in second.output


class TestCategoryCommands:

    def test_list(self, seeded):
        result = seeded.invoke(cli, ["category", "list"])
        assert result.exit_code == 0
        assert STATIONERY_ID in result.output
        assert "パソコン周辺機器" in result.output

    def test_list_empty(self, runner):
        runner.invoke(cli, ["db", "init"])
        result = runner.invoke(cli, ["category", "list"])
        assert result.exit_code == 0
        assert "No categories found." in result.output

    def test_show(self, seeded):
        result = seeded.invoke(cli, ["category", "show", GOODS_ID.upper()])
        assert result.exit_code == 0
        assert f"{GOODS_ID}  雑貨" in result.output

    def test_show_missing(self, seeded):
        result = seeded.invoke(
            cli, ["category", "show", "00000000-0000-4000-8000-000000000000"]
        )
        assert result.exit_code == 1
        assert "does not exist" in result.output


class TestProductCommands:

    def test_register(self, seeded):
        result = seeded.invoke(
            cli,
            [
                "product", "register",
                "--name", "万年筆",
                "--price", "1200",
                "--category-id", STATIONERY_ID,
                "--stock", "10",
            ],
        )
        assert result.exit_code == 0, result.output
        assert "Name:     万年筆" in result.output
        assert f"Category: 文房具 ({STATIONERY_ID})" in result.output

        found = seeded.invoke(cli, ["product", "search", "万年筆"])
        assert "Price:    1200" in found.output

    def test_register_duplicate(self, seeded):
        result = seeded.invoke(
            cli,
            [
                "product", "register",
                "--name", "マグカップ",
                "--price", "900",
                "--category-id", GOODS_ID,
                "--stock", "1",
            ],
        )
        assert result.exit_code == 1
        assert "already registered" in result.output

    def test_search(self, seeded):
        result = seeded.invoke(cli, ["product", "search", "蛍光ペン(赤)"])
        assert result.exit_code == 0
        assert "Price:    130" in result.output
        assert "Stock:    100" in result.output

    def test_search_missing(self, seeded):
        result = seeded.invoke(cli, ["product", "search", "存在しない"])
        assert result.exit_code == 1

    def test_show_bad_id(self, seeded):
        result = seeded.invoke(cli, ["product", "show", "abc"])
        assert result.exit_code == 1
        assert "must be a UUID" in result.output
