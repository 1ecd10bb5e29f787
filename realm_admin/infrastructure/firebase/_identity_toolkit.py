"""Thin Firebase Identity Toolkit REST client (no firebase-admin).

Uses google-auth for service account tokens and Identity Toolkit v1 for
account lookup/creation and password-reset emails. All HTTP calls use
httpx.AsyncClient so they do not block the event loop.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from realm_admin.application.dtos.user import UserRecord

logger = logging.getLogger(__name__)

_IDENTITY_SCOPES = [
    "https://www.googleapis.com/auth/cloud-platform",
    "https://www.googleapis.com/auth/identitytoolkit",
]
_BASE = "https://identitytoolkit.googleapis.com/v1"


def _get_credentials(key_dict: dict):
    """Return google.oauth2.service_account.Credentials for Identity Toolkit."""
    from google.oauth2 import service_account

    return service_account.Credentials.from_service_account_info(
        key_dict, scopes=_IDENTITY_SCOPES
    )


def _get_access_token(credentials) -> str:
    from google.auth.transport.requests import Request

    if not credentials.valid:
        credentials.refresh(Request())
    return credentials.token


class IdentityToolkitError(Exception):
    """Non-success response from Identity Toolkit. code is the API error message (e.g. EMAIL_EXISTS)."""

    def __init__(self, status_code: int, code: str) -> None:
        self.status_code = status_code
        self.code = code
        super().__init__(f"identity toolkit error {status_code}: {code}")


def _error_code(resp: httpx.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        return resp.text or resp.reason_phrase
    message = (body.get("error") or {}).get("message") or resp.reason_phrase
    # Messages look like "EMAIL_EXISTS" or "TOO_MANY_ATTEMPTS_TRY_LATER : detail".
    return str(message).split(" : ", 1)[0].strip()


class FirebaseIdentityClient:
    """IIdentityProvisioner and ICredentialNotifier over Identity Toolkit REST."""

    def __init__(
        self,
        project_id: str,
        credentials,
        *,
        api_key: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ) -> None:
        self._project_id = project_id
        self._credentials = credentials
        self._api_key = api_key
        self._http = http_client if http_client is not None else httpx.AsyncClient(timeout=timeout)
        self._owns_http = http_client is None

    @property
    def can_send_email(self) -> bool:
        return bool(self._api_key)

    async def aclose(self) -> None:
        """Close the HTTP client only if we created it (do not close injected client)."""
        if self._owns_http:
            await self._http.aclose()

    async def get_token(self) -> str:
        """Return a valid access token; refreshes in thread pool to avoid blocking."""
        return await asyncio.to_thread(_get_access_token, self._credentials)

    async def _post(
        self,
        url: str,
        body: dict[str, Any],
        *,
        params: dict[str, str] | None = None,
        authorized: bool = True,
    ) -> dict[str, Any]:
        headers = {"Content-Type": "application/json"}
        if authorized:
            headers["Authorization"] = f"Bearer {await self.get_token()}"
        resp = await self._http.post(url, headers=headers, json=body, params=params)
        if resp.status_code != 200:
            raise IdentityToolkitError(resp.status_code, _error_code(resp))
        return resp.json() if resp.content else {}

    def _project_url(self, suffix: str) -> str:
        return f"{_BASE}/projects/{self._project_id}/{suffix}"

    async def account_exists(self, email: str) -> bool:
        out = await self._post(self._project_url("accounts:lookup"), {"email": [email]})
        return bool(out.get("users"))

    async def ensure_account(self, user: UserRecord) -> bool:
        """Create the Firebase account for user.email if it does not exist.

        Returns True only when this call created the account. EMAIL_EXISTS
        from a concurrent creation counts as already existing.
        """
        if await self.account_exists(user.email):
            return False
        body: dict[str, Any] = {"email": user.email}
        if user.name:
            body["displayName"] = user.name
        try:
            await self._post(self._project_url("accounts"), body)
        except IdentityToolkitError as e:
            if e.code == "EMAIL_EXISTS":
                logger.debug("Identity account for %s created concurrently", user.email)
                return False
            raise
        return True

    async def send_credential_reset(self, email: str) -> None:
        """Ask Firebase to email a password-reset link to email."""
        if not self._api_key:
            raise IdentityToolkitError(0, "FIREBASE_API_KEY_NOT_SET")
        await self._post(
            f"{_BASE}/accounts:sendOobCode",
            {"requestType": "PASSWORD_RESET", "email": email},
            params={"key": self._api_key},
            authorized=False,
        )
