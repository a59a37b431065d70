"""
Account administration service.
"""

import logging
import re
from typing import Optional

from supabase import AuthApiError

from .interfaces import IUserAdminService
from .models import UserAccount, CreateUserRequest, MIN_PASSWORD_LENGTH
from .repository import UserRepository, is_email_exists_error, is_user_not_found_error
from .exceptions import (
    UserNotFoundError,
    FieldsRequiredError,
    InvalidEmailError,
    PasswordTooShortError,
    EmailAlreadyExistsError,
    CannotDeleteSelfError,
    CannotDeleteAdminError,
)

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class UserAdminService(IUserAdminService):
    """Account administration backed by Supabase Auth."""

    def __init__(self, repository: Optional[UserRepository] = None):
        self._repo = repository or UserRepository()

    async def list_users(self, admins_only: bool = False) -> list[UserAccount]:
        users = await self._repo.list_accounts()
        admin_ids = await self._repo.list_admin_ids()

        accounts = [self._repo.map_to_account(u, str(u.id) in admin_ids) for u in users]
        if admins_only:
            accounts = [a for a in accounts if a.is_admin]
        return accounts

    async def create_user(self, request: CreateUserRequest) -> UserAccount:
        email = request.email.strip()
        if not email or not request.password:
            raise FieldsRequiredError()
        if not EMAIL_PATTERN.match(email):
            raise InvalidEmailError(email)
        if len(request.password) < MIN_PASSWORD_LENGTH:
            raise PasswordTooShortError(MIN_PASSWORD_LENGTH)

        try:
            user = await self._repo.create_account(email, request.password)
        except AuthApiError as e:
            if is_email_exists_error(e):
                raise EmailAlreadyExistsError(email)
            raise

        logger.info("Created account %s", user.id)
        return self._repo.map_to_account(user)

    async def delete_user(self, requester_id: str, target_id: str) -> None:
        if target_id == requester_id:
            raise CannotDeleteSelfError(target_id)

        if await self._repo.get_account(target_id) is None:
            raise UserNotFoundError(target_id)

        if await self._repo.is_admin(target_id):
            raise CannotDeleteAdminError(target_id)

        try:
            await self._repo.delete_account(target_id)
        except AuthApiError as e:
            if is_user_not_found_error(e):
                raise UserNotFoundError(target_id)
            raise

        logger.info("Account %s deleted by %s", target_id, requester_id)
