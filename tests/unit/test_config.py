"""Tests for Settings validation."""

import pytest

from realm_admin.core.config import Settings


def test_secret_key_is_required() -> None:
    with pytest.raises(ValueError, match="SECRET_KEY"):
        Settings(secret_key="")


def test_database_url_must_use_asyncpg() -> None:
    with pytest.raises(ValueError, match="asyncpg"):
        Settings(secret_key="k", database_url="postgresql://u:p@localhost/db")


def test_retention_days_must_be_positive() -> None:
    with pytest.raises(ValueError, match="audit_retention_days"):
        Settings(secret_key="k", audit_retention_days=0)


def test_defaults() -> None:
    settings = Settings(secret_key="k", database_url="")
    assert settings.realm_header_name == "X-Realm-ID"
    assert settings.batch_import_max_users == 1000
    assert settings.audit_retention_days == 30
    assert settings.secret_key.get_secret_value() == "k"
