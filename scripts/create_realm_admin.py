"""Create a realm and its first administrator (Postgres only).

Usage:
    python -m scripts.create_realm_admin <realm_code> <realm_name> <email> [name]
The realm is created if its code is unknown; the user is created if the email
is unknown. Prints the realm id and an access token for the admin console.
"""

import asyncio
import sys

import realm_admin.infrastructure.persistence.database as database
from realm_admin.application.dtos.user import UserRecord
from realm_admin.core.config import get_settings
from realm_admin.infrastructure.persistence.repositories import RealmRepository, UserRepository
from realm_admin.infrastructure.security.jwt import create_access_token
from realm_admin.shared.utils.emails import check_email_address


async def main() -> None:
    """Ensure realm, user and membership exist; print a bearer token."""
    if len(sys.argv) < 4:
        print(
            "Usage: python -m scripts.create_realm_admin <realm_code> <realm_name> <email> [name]",
            file=sys.stderr,
        )
        sys.exit(1)
    realm_code, realm_name, email = sys.argv[1], sys.argv[2], sys.argv[3]
    try:
        check_email_address(email)
    except ValueError as e:
        print(e, file=sys.stderr)
        sys.exit(1)
    name = sys.argv[4] if len(sys.argv) > 4 else email.split("@")[0]

    get_settings()
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        print("AsyncSessionLocal not configured", file=sys.stderr)
        sys.exit(1)

    async with database.AsyncSessionLocal() as session:
        async with session.begin():
            realm_repo = RealmRepository(session)
            user_repo = UserRepository(session)
            realm = await realm_repo.get_by_code(realm_code)
            if realm is None:
                realm = await realm_repo.create_realm(realm_code, realm_name)
                print(f"Created realm: {realm.id} ({realm.code})")
            user = await user_repo.get_by_email(email)
            if user is None:
                user = UserRecord(email=email, name=name)
            user.ensure_realm(realm.id)
            user = await user_repo.save(user)

    token = create_access_token(user.id)
    print(f"Admin user: {user.id} ({email}) in realm {realm.id} ({realm.code})")
    print(f"Access token: {token}")
    await database.dispose_engine()


if __name__ == "__main__":
    asyncio.run(main())
