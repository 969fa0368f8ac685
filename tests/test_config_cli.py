import asyncio

import pytest

from taskboard.cli import build_parser, run_create_admin
from taskboard.config import Settings
from taskboard.db import normalize_database_url
from taskboard.db_handlers import UserDBHandler


@pytest.mark.parametrize(
    "url,expected",
    [
        ("postgresql://u:p@db/tasks", "postgresql+asyncpg://u:p@db/tasks"),
        ("postgres://u:p@db/tasks", "postgresql+asyncpg://u:p@db/tasks"),
        ("postgresql+asyncpg://u:p@db/tasks", "postgresql+asyncpg://u:p@db/tasks"),
        ("sqlite+aiosqlite:///./local.db", "sqlite+aiosqlite:///./local.db"),
    ],
)
def test_normalize_database_url(url, expected):
    assert normalize_database_url(url) == expected


def test_normalize_database_url_rejects_other_schemes():
    with pytest.raises(ValueError):
        normalize_database_url("mongodb://localhost/tasks")


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("ADMIN_ENABLED", "false")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", '["https://a.example", "https://b.example"]')

    loaded = Settings()

    assert loaded.server_port == 8080
    assert loaded.admin_enabled is False
    assert loaded.cors_allow_origins == ["https://a.example", "https://b.example"]


def test_cli_parser():
    args = build_parser().parse_args(["create-admin", "root"])

    assert args.action == "create-admin"
    assert args.username == "root"


def test_create_admin_command(app_settings, run_against_db):
    asyncio.run(run_create_admin(app_settings, "root"))

    admin = run_against_db(
        lambda factory: UserDBHandler(factory).get_admin_by_username("root")
    )
    assert admin is not None
    assert admin.username == "root"
