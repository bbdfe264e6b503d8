"""Tests for user service."""

from diet_tracker.domain.models import User
from diet_tracker.services.users import (
    UserService,
    is_valid_password,
    is_valid_username,
)
from tests.conftest import InMemoryUserRepository


def test_register_creates_user_with_default_goal() -> None:
    repository = InMemoryUserRepository()
    service = UserService(repository)

    assert service.register("  alice ", " secret1 ") is True

    assert repository.users == [User("alice", "secret1", 2000)]
    assert repository.saves == 1


def test_register_rejects_blank_values() -> None:
    repository = InMemoryUserRepository()
    service = UserService(repository)

    assert service.register("", "secret1") is False
    assert service.register("alice", "   ") is False
    assert service.register(None, "secret1") is False
    assert repository.saves == 0


def test_register_rejects_separator_characters() -> None:
    repository = InMemoryUserRepository()
    service = UserService(repository)

    assert service.register("al,ice", "secret1") is False
    assert service.register("alice", "sec,ret1") is False
    assert service.register("alice", "sec\nret1") is False
    assert service.register("ali\rce", "secret1") is False
    assert repository.saves == 0
    assert service.register("alice", "secret1\n") is True


def test_register_duplicate_keeps_original_user() -> None:
    repository = InMemoryUserRepository()
    service = UserService(repository)
    service.register("alice", "secret1")

    assert service.register("alice", "other22") is False
    assert service.register(" alice ", "other22") is False

    assert service.authenticate("alice", "secret1") is not None
    assert service.authenticate("alice", "other22") is None
    assert len(service.list_users()) == 1


def test_usernames_are_case_sensitive() -> None:
    service = UserService(InMemoryUserRepository())
    service.register("alice", "secret1")

    assert service.register("Alice", "secret2") is True
    assert service.find_by_username("ALICE") is None


def test_authenticate_returns_stored_instance() -> None:
    service = UserService(InMemoryUserRepository())
    service.register("alice", "secret1")

    user = service.authenticate(" alice", "secret1 ")

    assert user is service.find_by_username("alice")
    assert service.authenticate("alice", "wrong") is None
    assert service.authenticate("bob", "secret1") is None
    assert service.authenticate(None, "secret1") is None


def test_users_are_loaded_from_repository() -> None:
    repository = InMemoryUserRepository(users=[User("bob", "hunter2", 1800)])
    service = UserService(repository)

    user = service.find_by_username("bob")

    assert user is not None
    assert user.daily_calorie_goal == 1800


def test_update_calorie_goal() -> None:
    repository = InMemoryUserRepository()
    service = UserService(repository)
    service.register("alice", "secret1")

    assert service.update_calorie_goal("alice", 1800) is True
    assert repository.users[0].daily_calorie_goal == 1800
    assert service.update_calorie_goal("alice", 0) is False
    assert service.update_calorie_goal("alice", -5) is False
    assert service.update_calorie_goal("bob", 1500) is False
    assert service.find_by_username("alice").daily_calorie_goal == 1800


def test_change_password_requires_old_password() -> None:
    repository = InMemoryUserRepository()
    service = UserService(repository)
    service.register("alice", "secret1")

    assert service.change_password("alice", "wrong", "newpass1") is False
    assert service.change_password("alice", "secret1", "  ") is False
    assert service.change_password("alice", "secret1", "new,pass1") is False
    assert service.change_password("alice", "secret1", "new\npass1") is False
    assert service.change_password("alice", "secret1", " newpass1 ") is True

    assert service.authenticate("alice", "newpass1") is not None
    assert repository.users[0].password == "newpass1"


def test_delete_user() -> None:
    repository = InMemoryUserRepository()
    service = UserService(repository)
    service.register("alice", "secret1")

    assert service.delete_user("alice") is True
    assert service.delete_user("alice") is False
    assert repository.users == []


def test_list_users_returns_copy() -> None:
    service = UserService(InMemoryUserRepository())
    service.register("alice", "secret1")

    service.list_users().clear()

    assert len(service.list_users()) == 1


def test_username_rules() -> None:
    assert is_valid_username("abc")
    assert is_valid_username(" user_name_20_chars_ ".strip())
    assert is_valid_username("a" * 20)
    assert not is_valid_username("ab")
    assert not is_valid_username("a" * 21)
    assert not is_valid_username("bad name")
    assert not is_valid_username("bad-name")
    assert not is_valid_username(None)


def test_password_rules() -> None:
    assert is_valid_password("secret")
    assert is_valid_password("  secret  ")
    assert not is_valid_password("short")
    assert not is_valid_password("  abc   ")
    assert not is_valid_password(None)
