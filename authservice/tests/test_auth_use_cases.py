from __future__ import annotations

from dataclasses import replace

import pytest
from pydantic import SecretStr

from authservice.application.services.tokens import JwtTokenService
from authservice.application.use_cases.users.authorize_request import AuthorizeRequestUseCase
from authservice.application.use_cases.users.login_user import LoginUserUseCase
from authservice.application.use_cases.users.register_user import RegisterUserUseCase
from authservice.domain.users.entities import User
from authservice.domain.users.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DuplicateUserError,
    IncorrectPasswordError,
    InvalidTokenError,
    InvalidUsernameError,
    MalformedAuthorizationError,
    MissingAuthorizationError,
)
from authservice.domain.users.repositories import PasswordHasher, UserRepository
from authservice.shared.errors.base import ValidationError


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._seq = 1

    def find_by_username(self, username: str) -> User | None:
        return self._users.get(username)

    def add(self, user: User) -> User:
        if user.username in self._users:
            raise DuplicateUserError(context={"username": user.username})
        new_user = replace(user, id=self._seq)
        self._seq += 1
        self._users[new_user.username] = new_user
        return new_user


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def tokens() -> JwtTokenService:
    return JwtTokenService(SecretStr("use-case-secret"))


@pytest.fixture()
def register(users: InMemoryUserRepository, tokens: JwtTokenService) -> RegisterUserUseCase:
    return RegisterUserUseCase(users=users, tokens=tokens, password_hasher=DeterministicHasher())


@pytest.fixture()
def login(users: InMemoryUserRepository, tokens: JwtTokenService) -> LoginUserUseCase:
    return LoginUserUseCase(users=users, tokens=tokens, password_hasher=DeterministicHasher())


@pytest.fixture()
def authorize(tokens: JwtTokenService) -> AuthorizeRequestUseCase:
    return AuthorizeRequestUseCase(tokens=tokens)


def test_register_user_success(
    register: RegisterUserUseCase, users: InMemoryUserRepository, tokens: JwtTokenService
) -> None:
    user, token = register.execute("alice", "a@x.com", "secret123")

    assert user.to_dict() == {"id": 1, "username": "alice", "email": "a@x.com"}
    assert tokens.verify(token).user_id == 1
    stored = users.find_by_username("alice")
    assert stored is not None
    assert stored.password_hash == "hashed:secret123"


def test_register_user_result_hides_password_hash(register: RegisterUserUseCase) -> None:
    user, _ = register.execute("alice", "a@x.com", "secret123")

    assert not hasattr(user, "password_hash")
    assert "secret123" not in repr(user)


@pytest.mark.parametrize(
    ("username", "email", "password", "missing"),
    [
        (None, "a@x.com", "secret123", ["username"]),
        ("alice", None, "secret123", ["email"]),
        ("alice", "a@x.com", None, ["password"]),
        ("  ", "", "secret123", ["email", "username"]),
    ],
)
def test_register_user_missing_fields(
    register: RegisterUserUseCase,
    users: InMemoryUserRepository,
    username: str | None,
    email: str | None,
    password: str | None,
    missing: list[str],
) -> None:
    with pytest.raises(ValidationError) as excinfo:
        register.execute(username, email, password)

    assert excinfo.value.context == {"fields": missing}
    assert users._users == {}


def test_register_user_duplicate_raises(
    register: RegisterUserUseCase, users: InMemoryUserRepository
) -> None:
    register.execute("alice", "a@x.com", "secret123")

    with pytest.raises(DuplicateUserError):
        register.execute("alice", "other@x.com", "other")

    stored = users.find_by_username("alice")
    assert stored is not None
    assert stored.email == "a@x.com"
    assert stored.password_hash == "hashed:secret123"


def test_login_user_success(
    register: RegisterUserUseCase, login: LoginUserUseCase, tokens: JwtTokenService
) -> None:
    registered, first_token = register.execute("alice", "a@x.com", "secret123")

    user, token = login.execute("alice", "secret123")

    assert user == registered
    assert tokens.verify(token).user_id == registered.id
    assert tokens.verify(first_token).user_id == registered.id


def test_login_user_unknown_username(login: LoginUserUseCase) -> None:
    with pytest.raises(InvalidUsernameError) as excinfo:
        login.execute("nobody", "x")

    assert excinfo.value.to_dict() == {"error": "Invalid username"}


def test_login_user_incorrect_password(
    register: RegisterUserUseCase, login: LoginUserUseCase
) -> None:
    register.execute("alice", "a@x.com", "secret123")

    with pytest.raises(IncorrectPasswordError) as excinfo:
        login.execute("alice", "wrong")

    assert excinfo.value.to_dict() == {"error": "Incorrect password"}


def test_login_failures_share_one_status(
    register: RegisterUserUseCase, login: LoginUserUseCase
) -> None:
    register.execute("alice", "a@x.com", "secret123")

    with pytest.raises(AuthenticationError) as unknown:
        login.execute("nobody", "x")
    with pytest.raises(AuthenticationError) as wrong:
        login.execute("alice", "wrong")

    assert unknown.value.status == wrong.value.status == 400


def test_authorize_accepts_bearer_token(
    authorize: AuthorizeRequestUseCase, tokens: JwtTokenService
) -> None:
    claims = authorize.execute(f"Bearer {tokens.issue(5)}")

    assert claims.to_dict() == {"userId": 5}


def test_authorize_ignores_scheme_word(
    authorize: AuthorizeRequestUseCase, tokens: JwtTokenService
) -> None:
    assert authorize.execute(f"Token {tokens.issue(5)}").user_id == 5


@pytest.mark.parametrize(
    ("header", "error"),
    [
        (None, MissingAuthorizationError),
        ("", MissingAuthorizationError),
        ("Bearer", MalformedAuthorizationError),
        ("Bearer ", MalformedAuthorizationError),
        ("Bearer not-a-token", InvalidTokenError),
    ],
)
def test_authorize_rejects(
    authorize: AuthorizeRequestUseCase, header: str | None, error: type[AuthorizationError]
) -> None:
    with pytest.raises(error) as excinfo:
        authorize.execute(header)

    assert excinfo.value.status == 401


def test_authorize_rejects_token_from_other_secret(authorize: AuthorizeRequestUseCase) -> None:
    forged = JwtTokenService(SecretStr("other-secret")).issue(1)

    with pytest.raises(InvalidTokenError):
        authorize.execute(f"Bearer {forged}")


def test_authorize_rejects_trailing_text_after_token(
    authorize: AuthorizeRequestUseCase, tokens: JwtTokenService
) -> None:
    with pytest.raises(InvalidTokenError):
        authorize.execute(f"Bearer {tokens.issue(5)} extra")
