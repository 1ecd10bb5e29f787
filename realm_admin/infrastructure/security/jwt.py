"""Access tokens for the admin console.

A token names the acting user (sub). Realm is chosen per request by the
realm header, so it is not a claim.
"""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt

from realm_admin.core.config import get_settings


@dataclass(frozen=True)
class AccessTokenClaims:
    """Decoded and verified access token."""

    user_id: str
    expires_at: datetime


def create_access_token(user_id: str, expires_delta: timedelta | None = None) -> str:
    """Sign a token for user_id; TTL defaults to ACCESS_TOKEN_EXPIRE_MINUTES."""
    settings = get_settings()
    ttl = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    claims = {"sub": user_id, "exp": datetime.now(UTC) + ttl}
    return jwt.encode(
        claims,
        settings.secret_key.get_secret_value(),
        algorithm=settings.algorithm,
    )


def decode_access_token(token: str) -> AccessTokenClaims:
    """Verify signature and expiry.

    Raises:
        ValueError: If the token is malformed, expired, or has no sub/exp.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.secret_key.get_secret_value(),
            algorithms=[settings.algorithm],
            options={"require_exp": True, "require_sub": True},
        )
    except JWTError as e:
        raise ValueError(f"Invalid token: {e!s}") from e
    sub = payload.get("sub")
    if not sub:
        raise ValueError("Token missing required claim: sub")
    return AccessTokenClaims(
        user_id=str(sub),
        expires_at=datetime.fromtimestamp(payload["exp"], UTC),
    )
