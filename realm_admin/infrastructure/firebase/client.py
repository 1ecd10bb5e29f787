"""Firebase identity client lifecycle (REST-based, no firebase-admin).

Initialized at app startup using either FIREBASE_SERVICE_ACCOUNT_KEY (JSON
string) or FIREBASE_SERVICE_ACCOUNT_PATH (file path). FIREBASE_API_KEY
enables password-reset emails.
"""

import json
import logging
from pathlib import Path
from typing import Any

from realm_admin.core.config import get_settings
from realm_admin.infrastructure.firebase._identity_toolkit import (
    FirebaseIdentityClient,
    _get_credentials,
)

logger = logging.getLogger(__name__)

_identity_client: FirebaseIdentityClient | None = None


def _load_service_account() -> dict[str, Any] | None:
    """Service account JSON from FIREBASE_SERVICE_ACCOUNT_KEY, else from the _PATH file."""
    settings = get_settings()
    if settings.firebase_service_account_key is not None:
        raw = settings.firebase_service_account_key.get_secret_value()
        if raw:
            try:
                return json.loads(raw)
            except json.JSONDecodeError as e:
                raise ValueError("FIREBASE_SERVICE_ACCOUNT_KEY is not valid JSON") from e
    if not settings.firebase_service_account_path:
        return None
    key_file = Path(settings.firebase_service_account_path).expanduser().resolve()
    if not key_file.is_file():
        logger.warning("Firebase service account file not found: %s", key_file)
        return None
    return json.loads(key_file.read_text(encoding="utf-8"))


def init_identity_client() -> bool:
    """Initialize the Firebase identity client.

    Safe to call when no service account is configured (no-op). Idempotent
    if already initialized. On malformed credentials or any initialization
    error, logs the exception and returns False so the app can start
    without identity provisioning (batch import then returns 503).

    Returns:
        True if the client was initialized, False if disabled or on error.
    """
    global _identity_client
    if _identity_client is not None:
        return True
    try:
        key_dict = _load_service_account()
        if not key_dict:
            return False

        project_id = key_dict.get("project_id")
        if not project_id:
            logger.error("Firebase service account JSON missing 'project_id'")
            return False

        settings = get_settings()
        api_key = settings.firebase_api_key.get_secret_value() if settings.firebase_api_key else None
        if not api_key:
            logger.warning("FIREBASE_API_KEY not set; password reset emails will only be logged")
        _identity_client = FirebaseIdentityClient(
            project_id,
            _get_credentials(key_dict),
            api_key=api_key,
            timeout=settings.firebase_http_timeout_seconds,
        )
        return True
    except Exception:
        logger.exception("Firebase initialization failed")
        return False


def get_identity_client() -> FirebaseIdentityClient | None:
    """Return the identity client, or None if not configured."""
    return _identity_client


async def close_identity_client() -> None:
    """Close the client's HTTP connection pool. Call from app shutdown."""
    global _identity_client
    if _identity_client is not None:
        await _identity_client.aclose()
        _identity_client = None
        logger.info("Firebase identity HTTP client closed")
