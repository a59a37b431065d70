"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.
"""

from typing import TYPE_CHECKING

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService
    from modules.innovations.interfaces import IInnovationService
    from modules.messages.interfaces import IMessageService
    from modules.users.interfaces import IUserAdminService


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached as singletons
    within the container. Repositories await the shared Supabase client on
    first use, so creating a service never touches the network.

    Use reset() to clear all cached services for testing.
    """

    def __init__(self) -> None:
        self._auth_service: "IAuthService | None" = None
        self._innovation_service: "IInnovationService | None" = None
        self._message_service: "IMessageService | None" = None
        self._user_admin_service: "IUserAdminService | None" = None

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import get_auth_service as _get_auth_service
            self._auth_service = _get_auth_service()
        return self._auth_service

    @property
    def innovations(self) -> "IInnovationService":
        """Get the innovation service instance."""
        if self._innovation_service is None:
            from modules.innovations.service import InnovationService
            self._innovation_service = InnovationService()
        return self._innovation_service

    @property
    def messages(self) -> "IMessageService":
        """Get the message service instance."""
        if self._message_service is None:
            from modules.messages.service import MessageService
            self._message_service = MessageService(innovations=self.innovations)
        return self._message_service

    @property
    def users(self) -> "IUserAdminService":
        """Get the account administration service instance."""
        if self._user_admin_service is None:
            from modules.users.service import UserAdminService
            self._user_admin_service = UserAdminService()
        return self._user_admin_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._auth_service = None
        self._innovation_service = None
        self._message_service = None
        self._user_admin_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    The next call to get_container() will create a fresh container with
    new service instances. Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_innovation_service() -> "IInnovationService":
    """FastAPI dependency for innovation service."""
    return get_container().innovations


def get_message_service() -> "IMessageService":
    """FastAPI dependency for message service."""
    return get_container().messages


def get_user_admin_service() -> "IUserAdminService":
    """FastAPI dependency for account administration service."""
    return get_container().users
