"""Tests for admin console access tokens."""

from datetime import timedelta

import pytest

from realm_admin.infrastructure.security.jwt import create_access_token, decode_access_token


def test_token_names_the_user() -> None:
    claims = decode_access_token(create_access_token("admin-1"))
    assert claims.user_id == "admin-1"
    assert claims.expires_at.tzinfo is not None


def test_expired_token_is_rejected() -> None:
    token = create_access_token("admin-1", expires_delta=timedelta(seconds=-60))
    with pytest.raises(ValueError, match="Invalid token"):
        decode_access_token(token)


def test_tampered_token_is_rejected() -> None:
    token = create_access_token("admin-1")
    with pytest.raises(ValueError):
        decode_access_token(token[:-2] + ("aa" if not token.endswith("aa") else "bb"))
