# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

from phantom_backend.domain.identity.entities import User
from phantom_backend.domain.identity.repositories import IdentifierGenerator, UserRepository
from phantom_backend.shared.logging import logger


def _utcnow() -> datetime:
    return datetime.now(UTC)


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        ids: IdentifierGenerator,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._users = users
        self._ids = ids
        self._clock = clock

    def execute(self, public_key: str) -> User:
        # Same key twice yields two independent users.
        user = User(id=self._ids.generate(), public_key=public_key, created_at=self._clock())
        persisted = self._users.add(user)
        logger.info(f"auth.phantom: registered user={persisted.id}")
        return persisted
