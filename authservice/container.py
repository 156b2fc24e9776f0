"""Application dependency container."""

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from authservice.application.services.password_hashing import Argon2PasswordHasher
from authservice.application.services.tokens import JwtTokenService
from authservice.application.use_cases.users.authorize_request import AuthorizeRequestUseCase
from authservice.application.use_cases.users.login_user import LoginUserUseCase
from authservice.application.use_cases.users.register_user import RegisterUserUseCase
from authservice.domain.users.repositories import UserRepository
from authservice.infrastructure.db import Database
from authservice.infrastructure.repositories.users import SqlAlchemyUserRepository
from authservice.interfaces.http.controllers import AuthController, ProtectedController
from authservice.shared.config import AppConfig


class Container:
    def __init__(self, config: AppConfig) -> None:
        self.config = config

    @cached_property
    def database(self) -> Database:
        return Database(self.config.database)

    @cached_property
    def password_hasher(self) -> Argon2PasswordHasher:
        return Argon2PasswordHasher(self.config.hashing)

    @cached_property
    def token_service(self) -> JwtTokenService:
        ttl = None
        if self.config.token_ttl_seconds is not None:
            ttl = timedelta(seconds=self.config.token_ttl_seconds)
        return JwtTokenService(
            self.config.jwt_secret,
            algorithm=self.config.jwt_algorithm,
            ttl=ttl,
        )

    @cached_property
    def user_repository(self) -> UserRepository:
        return SqlAlchemyUserRepository(self.database)

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def authorize_request_use_case(self) -> AuthorizeRequestUseCase:
        return AuthorizeRequestUseCase(tokens=self.token_service)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
        )

    @cached_property
    def protected_controller(self) -> ProtectedController:
        return ProtectedController(authorize_use_case=self.authorize_request_use_case)
