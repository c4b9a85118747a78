"""Tests for the command line interface."""

import pytest
from sqlmodel import create_engine
from typer.testing import CliRunner

from crm_api.cli import app
from crm_api.core.services.database.db_session import DbSessionService

runner = CliRunner()


@pytest.fixture
def cli_database(monkeypatch, database_service):
    monkeypatch.setattr(
        "crm_api.cli.account_commands.DbSessionService", lambda: database_service
    )
    return database_service


class TestAccountCommands:
    def test_list_empty(self, cli_database):
        result = runner.invoke(app, ["accounts", "list", "customers"])

        assert result.exit_code == 0
        assert "No customers found" in result.output

    def test_list_shows_accounts(self, cli_database, seed_customers):
        seed_customers(("Ada", "Lovelace", "ada@example.com"), ("Alan", "Turing", "alan@example.com"))

        result = runner.invoke(app, ["accounts", "list", "customers"])

        assert result.exit_code == 0
        assert "Found 2 customers" in result.output

    def test_search(self, cli_database, seed_customers):
        seed_customers(("Ada", "Lovelace", "ada@example.com"), ("Alan", "Turing", "alan@example.com"))

        result = runner.invoke(app, ["accounts", "search", "customers", "Turing"])

        assert result.exit_code == 0
        assert "Found 1 customers" in result.output

    def test_search_users_kind(self, cli_database, seed_user):
        seed_user("uma@example.com")

        result = runner.invoke(app, ["accounts", "search", "users", "uma"])

        assert result.exit_code == 0
        assert "Found 1 users" in result.output

    def test_search_rejects_short_query(self, cli_database):
        result = runner.invoke(app, ["accounts", "search", "users", "a"])

        assert result.exit_code == 1
        assert "is invalid" in result.output

    def test_unknown_kind(self, cli_database):
        result = runner.invoke(app, ["accounts", "list", "admins"])

        assert result.exit_code != 0

    def test_uninitialised_database_points_to_init_db(self, monkeypatch, tmp_path):
        engine = create_engine(
            f"sqlite:///{tmp_path}/empty.sqlite", connect_args={"check_same_thread": False}
        )
        empty = DbSessionService(engine=engine)
        monkeypatch.setattr("crm_api.cli.account_commands.DbSessionService", lambda: empty)

        result = runner.invoke(app, ["accounts", "list", "customers"])

        assert result.exit_code == 1
        assert "crm-api init-db" in result.output


class TestServerCommands:
    def test_init_db(self, monkeypatch, database_service):
        calls = []
        monkeypatch.setattr(
            "crm_api.runtime.init_db.DbSessionService", lambda: calls.append(1) or database_service
        )

        result = runner.invoke(app, ["init-db"])

        assert result.exit_code == 0
        assert calls == [1]
        assert "Database tables created" in result.output

    def test_serve_runs_uvicorn(self, monkeypatch):
        captured = {}

        def fake_run(target, **kwargs):
            captured["target"] = target
            captured.update(kwargs)

        monkeypatch.setattr("uvicorn.run", fake_run)

        result = runner.invoke(app, ["serve", "--port", "9001"])

        assert result.exit_code == 0, result.output
        assert captured["target"] == "crm_api.api.http.app:app"
        assert captured["port"] == 9001
        assert captured["reload"] is False
