"""Caller identity resolution."""

from uuid import UUID

import logfire

from discuss.config import AuthSettings

from .base import Service


class IdentityService(Service):
    """Resolves which user a request acts for.

    This is the single seam for authentication: a user id cookie if it
    holds a valid UUID, otherwise the configured default user, otherwise
    nobody. A real authentication mechanism replaces this class without
    touching any other code.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize identity service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def get_user_id(self, cookie_value: str | None) -> str | None:
        """Extract the caller's user ID without raising exceptions.

        Args:
            cookie_value: Raw value of the identity cookie (optional)

        Returns:
            User ID as string, or None if the request is anonymous
        """
        if cookie_value:
            try:
                return str(UUID(cookie_value))
            except ValueError:
                logfire.debug(
                    "Malformed identity cookie, ignoring", cookie=cookie_value
                )

        if self.auth_settings.default_user_id is not None:
            return str(self.auth_settings.default_user_id)
        return None

    @property
    def cookie_name(self) -> str:
        """Name of the cookie carrying the caller's user ID."""
        return self.auth_settings.cookie_name
