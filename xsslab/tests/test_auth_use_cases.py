from __future__ import annotations

import pytest

from xsslab.application.services.password_hashing import (
    Sha256PasswordHasher,
    WerkzeugPasswordHasher,
    build_password_hasher,
)
from xsslab.application.use_cases.users.login_user import LoginUserUseCase
from xsslab.application.use_cases.users.register_user import RegisterUserUseCase
from xsslab.domain.users.entities import User
from xsslab.domain.users.exceptions import InvalidCredentialsError, UsernameTakenError
from xsslab.domain.users.repositories import PasswordHasher, TokenIssuer, UserRepository


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self.logins: dict[str, int] = {}

    def find_by_username(self, username: str) -> User | None:
        return self._users.get(username)

    def add(self, user: User) -> User:
        self._users[user.username] = user
        return user

    def touch_last_login(self, uuid: str, timestamp: int) -> None:
        self.logins[uuid] = timestamp


class CountingTokenIssuer(TokenIssuer):
    def __init__(self) -> None:
        self.issued: list[tuple[str, str]] = []

    def issue(self, uuid: str, username: str) -> str:
        self.issued.append((uuid, username))
        return f"token-{len(self.issued)}"


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


@pytest.fixture()
def repositories() -> tuple[InMemoryUserRepository, CountingTokenIssuer]:
    return InMemoryUserRepository(), CountingTokenIssuer()


def test_register_user_success(
    repositories: tuple[InMemoryUserRepository, CountingTokenIssuer],
) -> None:
    users, tokens = repositories
    use_case = RegisterUserUseCase(
        users=users, tokens=tokens, password_hasher=DeterministicHasher()
    )

    user, token = use_case.execute("alice", "password1", "Alice")

    assert user.username == "alice"
    assert user.name == "Alice"
    assert user.password_hash == "hashed:password1"
    assert token == "token-1"
    assert tokens.issued == [(user.uuid, "alice")]
    assert users.find_by_username("alice") is not None


def test_register_user_duplicate_raises(
    repositories: tuple[InMemoryUserRepository, CountingTokenIssuer],
) -> None:
    users, tokens = repositories
    use_case = RegisterUserUseCase(
        users=users, tokens=tokens, password_hasher=DeterministicHasher()
    )
    use_case.execute("alice", "password1", "Alice")

    with pytest.raises(UsernameTakenError) as exc_info:
        use_case.execute("alice", "other-pass", "Other")
    assert exc_info.value.status == 409


def test_login_user_success_records_last_login(
    repositories: tuple[InMemoryUserRepository, CountingTokenIssuer],
) -> None:
    users, tokens = repositories
    register = RegisterUserUseCase(
        users=users, tokens=tokens, password_hasher=DeterministicHasher()
    )
    registered, _ = register.execute("alice", "password1", "Alice")

    login = LoginUserUseCase(users=users, tokens=tokens, password_hasher=DeterministicHasher())
    user, token = login.execute("alice", "password1")

    assert user.uuid == registered.uuid
    assert token == "token-2"
    assert registered.uuid in users.logins


@pytest.mark.parametrize(("username", "password"), [("alice", "wrong"), ("nobody", "password1")])
def test_login_user_invalid_credentials(
    repositories: tuple[InMemoryUserRepository, CountingTokenIssuer],
    username: str,
    password: str,
) -> None:
    users, tokens = repositories
    RegisterUserUseCase(
        users=users, tokens=tokens, password_hasher=DeterministicHasher()
    ).execute("alice", "password1", "Alice")

    login = LoginUserUseCase(users=users, tokens=tokens, password_hasher=DeterministicHasher())
    with pytest.raises(InvalidCredentialsError):
        login.execute(username, password)
    assert users.logins == {}


def test_sha256_hasher_matches_known_digest() -> None:
    hasher = Sha256PasswordHasher()
    digest = hasher.hash("password1")

    assert digest == "0b14d501a594442a01c6859541bcb3e8164d183d32937b851835442f69d5c94e"
    assert hasher.verify("password1", digest)
    assert not hasher.verify("password2", digest)


def test_werkzeug_hasher_is_salted() -> None:
    hasher = WerkzeugPasswordHasher()
    first, second = hasher.hash("password1"), hasher.hash("password1")

    assert first != second
    assert hasher.verify("password1", first)
    assert not hasher.verify("password2", second)


def test_build_password_hasher_selects_strategy() -> None:
    assert isinstance(build_password_hasher("sha256"), Sha256PasswordHasher)
    assert isinstance(build_password_hasher("werkzeug"), WerkzeugPasswordHasher)
