from __future__ import annotations

import pytest
from pydantic import ValidationError

from docflow.config import Settings
from docflow.db.session import normalize_url


def test_secret_key_is_required(monkeypatch):
    monkeypatch.delenv("SECRET_KEY", raising=False)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_empty_secret_key_rejected(monkeypatch):
    monkeypatch.setenv("SECRET_KEY", "")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_defaults(monkeypatch):
    monkeypatch.setenv("SECRET_KEY", "k")
    for name in ("ACCESS_TOKEN_EXPIRE_MINUTES", "DOCUMENTS_REQUIRE_AUTH", "CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)
    s = Settings(_env_file=None)
    assert s.access_token_expire_minutes == 60
    assert s.jwt_algorithm == "HS256"
    assert s.documents_require_auth is False
    assert s.cors_origin_list == ["*"]


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("SECRET_KEY", "k")
    monkeypatch.setenv("DOCUMENTS_REQUIRE_AUTH", "true")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.example, http://b.example")
    s = Settings(_env_file=None)
    assert s.documents_require_auth is True
    assert s.cors_origin_list == ["http://a.example", "http://b.example"]


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("postgres://u:p@h/db", "postgresql+psycopg://u:p@h/db"),
        ("postgresql://u:p@h/db", "postgresql+psycopg://u:p@h/db"),
        ("sqlite:///./docflow.db", "sqlite:///./docflow.db"),
    ],
)
def test_normalize_url(raw, expected):
    assert normalize_url(raw) == expected


def test_unknown_ingestion_backend_rejected(monkeypatch):
    monkeypatch.setenv("SECRET_KEY", "k")
    monkeypatch.setenv("INGESTION_STATUS_BACKEND", "memroy")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
