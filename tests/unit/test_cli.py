from pathlib import Path

import pytest
from typer.testing import CliRunner

from src.lending.cli import app
from src.lending.core.services import CategoryService, DbManageService, DbSessionService
from src.lending.entities import Category
from src.lending.runtime.config.config_data import ConfigData, DatabaseConfig
from src.lending.runtime.context import with_context

runner = CliRunner()


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    # Leave loguru and stdlib logging untouched while the runner swaps streams
    monkeypatch.setattr("src.lending.cli.utils.configure_logging", lambda: None)


@pytest.fixture
def database(tmp_path: Path):
    config = ConfigData(database=DatabaseConfig(url=f"sqlite:///{tmp_path / 'cli.db'}"))
    with with_context(config):
        yield config


def test_db_init(database):
    result = runner.invoke(app, ["db", "init"])

    assert result.exit_code == 0
    assert "Tables created in" in result.stdout


def test_db_health(database):
    result = runner.invoke(app, ["db", "health"])

    assert result.exit_code == 0
    assert "Database is reachable" in result.stdout


def test_db_health_unreachable(tmp_path: Path):
    config = ConfigData(
        database=DatabaseConfig(url=f"sqlite:///{tmp_path / 'missing' / 'cli.db'}")
    )
    with with_context(config):
        result = runner.invoke(app, ["db", "health"])

    assert result.exit_code == 1
    assert "Database is unreachable" in result.stdout


def test_list_empty(database):
    runner.invoke(app, ["db", "init"])

    result = runner.invoke(app, ["list", "books"])

    assert result.exit_code == 0
    assert "No books found" in result.stdout


def test_list_categories(database):
    db_service = DbSessionService()
    DbManageService(db_service.engine).create_all()
    with db_service.session_scope() as session:
        CategoryService(session).create(Category(name="Poetry"))
        doomed = CategoryService(session).create(Category(name="Doomed"))
        CategoryService(session).delete(doomed.id)

    result = runner.invoke(app, ["list", "categories"])

    assert result.exit_code == 0
    assert "Poetry" in result.stdout
    assert "Doomed" not in result.stdout
    assert "Total: 1 categories" in result.stdout


def test_list_without_tables_fails(database):
    result = runner.invoke(app, ["list", "users"])

    assert result.exit_code == 1
    assert "user find_all failed" in result.stdout


def test_list_unknown_kind(database):
    result = runner.invoke(app, ["list", "authors"])

    assert result.exit_code != 0
