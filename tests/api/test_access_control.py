"""API tests for realm header, bearer auth and realm membership checks.

Repositories are replaced with in-memory fakes; no Postgres needed.
"""

from httpx import AsyncClient

from realm_admin.api.v1.dependencies import (
    get_import_user_batch_use_case,
    get_identity_provisioner,
    get_realm_repo,
    get_user_repo,
)
from realm_admin.application.dtos.realm import RealmResult
from realm_admin.application.dtos.user import UserResult
from realm_admin.domain.exceptions import IdentityProviderNotConfiguredException
from realm_admin.infrastructure.security.jwt import create_access_token

URL = "/api/v1/users/import"
BODY = {"users": [{"email": "a@x.io", "name": "Ann"}]}


class FakeRealmRepo:
    async def get_by_id(self, realm_id: str) -> RealmResult | None:
        if realm_id == "realm-1":
            return RealmResult(id="realm-1", code="narnia", name="Narnia")
        return None


class FakeUserRepo:
    def __init__(self, members: dict[str, set[str]]) -> None:
        self._members = members

    async def get_by_id(self, user_id: str) -> UserResult | None:
        if user_id not in self._members:
            return None
        return UserResult(id=user_id, email=f"{user_id}@x.io", name=user_id)

    async def is_member(self, user_id: str, realm_id: str) -> bool:
        return realm_id in self._members.get(user_id, set())


def _wire(override) -> None:
    users = FakeUserRepo({"admin-1": {"realm-1"}, "outsider": {"realm-2"}})
    override[get_user_repo] = lambda: users
    override[get_realm_repo] = lambda: FakeRealmRepo()


def _headers(user_id: str = "admin-1", realm_id: str | None = "realm-1") -> dict[str, str]:
    headers = {"Authorization": f"Bearer {create_access_token(user_id)}"}
    if realm_id is not None:
        headers["X-Realm-ID"] = realm_id
    return headers


async def test_missing_realm_header_returns_400(client: AsyncClient, override) -> None:
    _wire(override)
    response = await client.post(URL, json=BODY, headers=_headers(realm_id=None))
    assert response.status_code == 400
    assert response.json()["details"] == {"field": "X-Realm-ID"}


async def test_malformed_realm_header_returns_400(client: AsyncClient, override) -> None:
    _wire(override)
    response = await client.post(URL, json=BODY, headers=_headers(realm_id="bad id!"))
    assert response.status_code == 400


async def test_missing_token_returns_401(client: AsyncClient, override) -> None:
    _wire(override)
    response = await client.post(URL, json=BODY, headers={"X-Realm-ID": "realm-1"})
    assert response.status_code == 401
    assert response.json()["error"] == "AUTHENTICATION_ERROR"


async def test_invalid_token_returns_401(client: AsyncClient, override) -> None:
    _wire(override)
    response = await client.post(
        URL,
        json=BODY,
        headers={"Authorization": "Bearer not-a-jwt", "X-Realm-ID": "realm-1"},
    )
    assert response.status_code == 401


async def test_unknown_realm_returns_404(client: AsyncClient, override) -> None:
    _wire(override)
    response = await client.post(URL, json=BODY, headers=_headers(realm_id="realm-404"))
    assert response.status_code == 404
    assert response.json()["error"] == "REALM_NOT_FOUND"


async def test_non_member_returns_403(client: AsyncClient, override) -> None:
    _wire(override)
    response = await client.post(URL, json=BODY, headers=_headers(user_id="outsider"))
    assert response.status_code == 403
    assert response.json()["error"] == "PERMISSION_DENIED"


async def test_identity_provider_not_configured_returns_503(
    client: AsyncClient, override
) -> None:
    """Authorized request, but no Firebase service account: batch import is unavailable."""
    _wire(override)
    override.pop(get_import_user_batch_use_case, None)

    def _no_provisioner():
        raise IdentityProviderNotConfiguredException()

    override[get_identity_provisioner] = _no_provisioner
    response = await client.post(URL, json=BODY, headers=_headers())
    assert response.status_code == 503
    assert response.json()["error"] == "SERVICE_UNAVAILABLE"
