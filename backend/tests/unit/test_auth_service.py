"""
Unit tests for AuthenticationService.

This module tests:
- User registration and duplicate username handling
- Login success and failure, including inactive users
- Session state and role checks
"""

from unittest.mock import Mock

import pytest

from clinic.core.exceptions import DuplicateUsernameError, NotFoundError
from clinic.domain.entities import Role, User
from clinic.services.auth_service import AuthenticationService
from tests.factories.repository_factories import UserRepositoryFactory


@pytest.fixture
def mock_user_repo() -> Mock:
    return UserRepositoryFactory.create_mock_full()


@pytest.fixture
def service(mock_user_repo, mock_notifier) -> AuthenticationService:
    return AuthenticationService(mock_user_repo, mock_notifier)


@pytest.fixture
def admin(mock_user_repo) -> User:
    user = User(id=1, username="admin", password_secret="admin123", role=Role.ADMIN)
    mock_user_repo.find_by_username.return_value = user
    mock_user_repo.get_by_id.return_value = user
    return user


@pytest.mark.services
class TestRegistration:
    def test_register_user(self, service, mock_user_repo):
        user = service.register_user("reception", "desk123", "Reception")

        assert user.id == 1
        assert user.role is Role.RECEPTION
        assert user.active is True
        mock_user_repo.add.assert_called_once()

    def test_register_duplicate_username(self, service, admin, mock_user_repo):
        with pytest.raises(DuplicateUsernameError):
            service.register_user("admin", "other", Role.DOCTOR)
        mock_user_repo.add.assert_not_called()

    def test_register_unknown_role(self, service, mock_user_repo):
        with pytest.raises(ValueError):
            service.register_user("nurse", "secret", "Nurse")
        mock_user_repo.find_by_username.assert_not_called()


@pytest.mark.services
class TestSession:
    def test_login_success(self, service, admin):
        assert service.login("admin", "admin123") is True
        assert service.current_user is admin
        assert service.is_authenticated

    def test_login_wrong_secret(self, service, admin, mock_notifier):
        assert service.login("admin", "wrong") is False
        assert service.current_user is None
        mock_notifier.display.warning.assert_called_once_with("Login failed for 'admin'")

    def test_login_with_non_ascii_secret(self, service, mock_user_repo):
        user = User(id=3, username="joao", password_secret="s\u00e3o-paulo", role=Role.DOCTOR)
        mock_user_repo.find_by_username.return_value = user

        assert service.login("joao", "sao-paulo") is False
        assert service.login("joao", "s\u00e3o-paulo") is True

    def test_login_unknown_user(self, service):
        assert service.login("ghost", "x") is False
        assert not service.is_authenticated

    def test_login_inactive_user(self, service, admin):
        admin.active = False
        assert service.login("admin", "admin123") is False

    def test_failed_login_keeps_existing_session(self, service, admin):
        service.login("admin", "admin123")
        service.login("admin", "nope")
        assert service.current_user is admin

    def test_logout(self, service, admin):
        service.login("admin", "admin123")
        service.logout()
        assert service.current_user is None

    def test_logout_without_session_is_harmless(self, service, mock_notifier):
        service.logout()
        mock_notifier.display.info.assert_not_called()

    def test_has_role(self, service, admin):
        assert service.has_role(Role.ADMIN) is False

        service.login("admin", "admin123")

        assert service.has_role("Admin") is True
        assert service.has_role(Role.DOCTOR) is False

    def test_has_role_unknown_role(self, service):
        with pytest.raises(ValueError):
            service.has_role("Janitor")


@pytest.mark.services
class TestDeactivation:
    def test_deactivate_ends_own_session(self, service, admin):
        service.login("admin", "admin123")

        service.deactivate_user(1)

        assert admin.active is False
        assert service.current_user is None
        assert service.login("admin", "admin123") is False

    def test_deactivate_other_user_keeps_session(self, service, admin, mock_user_repo):
        service.login("admin", "admin123")
        other = User(id=2, username="doc", password_secret="x", role=Role.DOCTOR)
        mock_user_repo.get_by_id.return_value = other

        service.deactivate_user(2)

        assert other.active is False
        assert service.current_user is admin

    def test_deactivate_missing_user(self, service):
        with pytest.raises(NotFoundError, match="User with ID 4 not found"):
            service.deactivate_user(4)
