"""Tests for Firebase identity client startup when credentials are absent or malformed."""

import pytest

import realm_admin.infrastructure.firebase.client as identity
from realm_admin.core.config import get_settings


@pytest.fixture
def fresh_settings(monkeypatch):
    """Clear cached settings and the module-level client around each test."""
    monkeypatch.setattr(identity, "_identity_client", None)
    monkeypatch.delenv("FIREBASE_SERVICE_ACCOUNT_KEY", raising=False)
    monkeypatch.delenv("FIREBASE_SERVICE_ACCOUNT_PATH", raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


def test_no_service_account_leaves_client_disabled(fresh_settings) -> None:
    assert identity.init_identity_client() is False
    assert identity.get_identity_client() is None


def test_malformed_key_is_logged_not_raised(fresh_settings) -> None:
    fresh_settings.setenv("FIREBASE_SERVICE_ACCOUNT_KEY", "{not json")
    get_settings.cache_clear()
    assert identity.init_identity_client() is False
    assert identity.get_identity_client() is None


def test_key_without_project_id_is_rejected(fresh_settings) -> None:
    fresh_settings.setenv("FIREBASE_SERVICE_ACCOUNT_KEY", '{"type": "service_account"}')
    get_settings.cache_clear()
    assert identity.init_identity_client() is False


def test_missing_key_file_is_rejected(fresh_settings, tmp_path) -> None:
    fresh_settings.setenv("FIREBASE_SERVICE_ACCOUNT_PATH", str(tmp_path / "missing.json"))
    get_settings.cache_clear()
    assert identity.init_identity_client() is False
