# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from phantom_backend.application.services.identifiers import SecureIdentifierGenerator
from phantom_backend.application.use_cases.identity.create_session import \
    CreateSessionUseCase
from phantom_backend.application.use_cases.identity.register_user import \
    RegisterUserUseCase
from phantom_backend.infrastructure.repositories.identity.in_memory import (
    InMemorySessionRepository, InMemoryUserRepository)
from phantom_backend.interfaces.http.controllers.auth_controller import AuthController
from phantom_backend.interfaces.http.controllers.misc_controller import MiscController
from phantom_backend.interfaces.http.controllers.session_controller import \
    SessionController


class Container:
    @cached_property
    def identifier_generator(self) -> SecureIdentifierGenerator:
        return SecureIdentifierGenerator()

    @cached_property
    def user_repository(self) -> InMemoryUserRepository:
        return InMemoryUserRepository()

    @cached_property
    def session_repository(self) -> InMemorySessionRepository:
        return InMemorySessionRepository()

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            ids=self.identifier_generator,
        )

    @cached_property
    def create_session_use_case(self) -> CreateSessionUseCase:
        return CreateSessionUseCase(
            users=self.user_repository,
            sessions=self.session_repository,
            ids=self.identifier_generator,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController()

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(register_use_case=self.register_user_use_case)

    @cached_property
    def session_controller(self) -> SessionController:
        return SessionController(create_session_use_case=self.create_session_use_case)
