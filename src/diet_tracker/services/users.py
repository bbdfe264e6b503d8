"""User-related business logic."""

import re
from dataclasses import dataclass, field
from typing import Protocol

from diet_tracker.domain.models import User, is_storable_text

USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_]{3,20}$")
MIN_PASSWORD_LENGTH = 6


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def load_users(self) -> list[User]:
        """Return all stored users."""

    def save_users(self, users: list[User]) -> None:
        """Replace the stored users with the given list."""


@dataclass
class UserService:
    """Directory of registered users kept in memory and persisted eagerly."""

    repository: UserRepository
    _users: list[User] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._users = self.repository.load_users()

    def register(self, username: str | None, password: str | None) -> bool:
        """Create a user with the default goal unless the name is taken."""
        if username is None or password is None:
            return False
        username, password = username.strip(), password.strip()
        if not username or not password:
            return False
        if not is_storable_text(username) or not is_storable_text(password):
            return False
        if self.find_by_username(username) is not None:
            return False
        self._users.append(User(username=username, password=password))
        self.persist()
        return True

    def authenticate(self, username: str | None, password: str | None) -> User | None:
        """Return the stored user when the plaintext password matches."""
        if username is None or password is None:
            return None
        user = self.find_by_username(username)
        if user is not None and user.password == password.strip():
            return user
        return None

    def find_by_username(self, username: str | None) -> User | None:
        if username is None:
            return None
        wanted = username.strip()
        for user in self._users:
            if user.username == wanted:
                return user
        return None

    def update_calorie_goal(self, username: str | None, new_goal: int) -> bool:
        if new_goal <= 0:
            return False
        user = self.find_by_username(username)
        if user is None:
            return False
        user.daily_calorie_goal = new_goal
        self.persist()
        return True

    def change_password(
        self, username: str | None, old_password: str | None, new_password: str | None
    ) -> bool:
        """Replace the password after re-checking the old one."""
        if not new_password or not new_password.strip():
            return False
        if not is_storable_text(new_password.strip()):
            return False
        user = self.authenticate(username, old_password)
        if user is None:
            return False
        user.password = new_password.strip()
        self.persist()
        return True

    def delete_user(self, username: str | None) -> bool:
        user = self.find_by_username(username)
        if user is None:
            return False
        self._users.remove(user)
        self.persist()
        return True

    def list_users(self) -> list[User]:
        return list(self._users)

    def persist(self) -> None:
        """Write the full directory to the repository."""
        self.repository.save_users(self._users)


def is_valid_username(username: str | None) -> bool:
    """Return True for 3-20 letters, digits or underscores after trimming."""
    if username is None:
        return False
    return USERNAME_PATTERN.fullmatch(username.strip()) is not None


def is_valid_password(password: str | None) -> bool:
    if password is None:
        return False
    return len(password.strip()) >= MIN_PASSWORD_LENGTH
