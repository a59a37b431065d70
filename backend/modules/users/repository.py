"""
Account repository.

Wraps the Supabase Auth admin API and the admins table. Unlike the
advisory privilege check in the auth module, admin lookups here raise on
failure: deciding that an account is *not* an admin must never be the
result of a failed query.
"""

from typing import Any, Optional

from supabase import AuthApiError

from shared.repository import BaseRepository
from .models import UserAccount

ADMINS_TABLE = "admins"

_EMAIL_EXISTS_CODES = {"email_exists", "user_already_exists"}

# The auth admin API default page size
LIST_PAGE_SIZE = 50


def is_email_exists_error(error: AuthApiError) -> bool:
    if getattr(error, "code", None) in _EMAIL_EXISTS_CODES:
        return True
    return error.status == 422 and "already" in error.message.lower()


def is_user_not_found_error(error: AuthApiError) -> bool:
    return getattr(error, "code", None) == "user_not_found" or error.status == 404


class UserRepository(BaseRepository[UserAccount]):
    """Repository for provider accounts and admin membership."""

    async def list_accounts(self, per_page: int = LIST_PAGE_SIZE) -> list[Any]:
        """
        Raw provider user records, all pages.

        The admin API pages its results; a page shorter than per_page is
        the last one.
        """
        db = await self._client()
        users: list[Any] = []
        page = 1
        while True:
            batch = await db.auth.admin.list_users(page=page, per_page=per_page)
            users.extend(batch)
            if len(batch) < per_page:
                return users
            page += 1

    async def get_account(self, user_id: str) -> Optional[Any]:
        """Raw provider user record, or None if the account does not exist."""
        db = await self._client()
        try:
            response = await db.auth.admin.get_user_by_id(user_id)
        except AuthApiError as e:
            if is_user_not_found_error(e):
                return None
            raise
        return response.user if response else None

    async def create_account(self, email: str, password: str) -> Any:
        """Create an unverified account and return the raw provider record."""
        db = await self._client()
        response = await db.auth.admin.create_user(
            {"email": email, "password": password, "email_confirm": False}
        )
        return response.user

    async def delete_account(self, user_id: str) -> None:
        db = await self._client()
        await db.auth.admin.delete_user(user_id)

    async def list_admin_ids(self) -> set[str]:
        db = await self._client()
        result = await db.table(ADMINS_TABLE).select("id").execute()
        return {str(row["id"]) for row in result.data}

    async def is_admin(self, user_id: str) -> bool:
        db = await self._client()
        result = await db.table(ADMINS_TABLE).select("id").eq("id", user_id).limit(1).execute()
        return bool(result.data)

    def map_to_account(self, user: Any, is_admin: bool = False) -> UserAccount:
        """Map a provider user record to UserAccount."""
        return UserAccount(
            id=str(user.id),
            email=user.email,
            email_verified=getattr(user, "email_confirmed_at", None) is not None,
            disabled=getattr(user, "banned_until", None) is not None,
            is_admin=is_admin,
            created_at=getattr(user, "created_at", None),
            last_sign_in_at=getattr(user, "last_sign_in_at", None),
        )
