"""
Authentication service: user registration, login and the current session.

The clinic runs as a single terminal process, so there is exactly one
session, held by the service instance. Secrets are stored as plain text and
compared in constant time; this is an access gate for the menu layer, not a
security boundary.
"""

import hmac
from typing import Optional, Union

from ..core.exceptions import DuplicateUsernameError, NotFoundError
from ..core.notifications import Notifier
from ..domain.entities import Role, User
from ..domain.interfaces import IUserRepository


class AuthenticationService:
    """Application service for users and the active session."""

    def __init__(
        self, user_repo: IUserRepository, notifier: Optional[Notifier] = None
    ) -> None:
        self.user_repo = user_repo
        self.notifier = notifier or Notifier()
        self._current_user: Optional[User] = None

    def register_user(
        self, username: str, secret: str, role: Union[Role, str]
    ) -> User:
        """Register a new user.

        Raises:
            DuplicateUsernameError: If the username is taken
            ValidationError: If the role is not a known Role (a ValueError)
        """
        with self.notifier.validating():
            role = Role(role)
        if self.user_repo.find_by_username(username) is not None:
            raise self.notifier.failure(DuplicateUsernameError(username))

        with self.notifier.validating():
            user = User(
                username=username, password_secret=secret, role=role, active=True
            )
        created = self.user_repo.add(user)
        self.notifier.success(
            f"User '{username}' registered with role {role.value}",
            user_id=created.id,
        )
        return created

    def login(self, username: str, secret: str) -> bool:
        """Open the session for a user.

        Returns:
            True if the user exists, is active and the secret matches.
            A failed attempt leaves the current session unchanged.
        """
        user = self.user_repo.find_by_username(username)
        if (
            user is None
            or not user.active
            or not hmac.compare_digest(
                user.password_secret.encode("utf-8"), secret.encode("utf-8")
            )
        ):
            self.notifier.warning(
                f"Login failed for '{username}'", username=username
            )
            return False

        self._current_user = user
        self.notifier.success(f"Welcome, {username}", user_id=user.id)
        return True

    def logout(self) -> None:
        if self._current_user is not None:
            self.notifier.info(
                f"User '{self._current_user.username}' logged out",
                user_id=self._current_user.id,
            )
        self._current_user = None

    @property
    def current_user(self) -> Optional[User]:
        return self._current_user

    @property
    def is_authenticated(self) -> bool:
        return self._current_user is not None

    def has_role(self, role: Union[Role, str]) -> bool:
        """True iff a session is active and its user holds exactly this role."""
        with self.notifier.validating():
            role = Role(role)
        return self._current_user is not None and self._current_user.role == role

    def deactivate_user(self, user_id: int) -> User:
        """Deactivate a user (business rule: don't delete, just deactivate)."""
        user = self.user_repo.get_by_id(user_id)
        if user is None:
            raise self.notifier.failure(NotFoundError("User", user_id))

        user.active = False
        if self._current_user is not None and self._current_user.id == user_id:
            self._current_user = None

        self.notifier.success(
            f"User '{user.username}' deactivated", user_id=user_id
        )
        return user
