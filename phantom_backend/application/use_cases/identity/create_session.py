# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

from phantom_backend.domain.identity.entities import Session
from phantom_backend.domain.identity.exceptions import UserNotFoundError
from phantom_backend.domain.identity.repositories import (
    IdentifierGenerator,
    SessionRepository,
    UserRepository,
)
from phantom_backend.shared.logging import logger


def _utcnow() -> datetime:
    return datetime.now(UTC)


class CreateSessionUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        sessions: SessionRepository,
        ids: IdentifierGenerator,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._users = users
        self._sessions = sessions
        self._ids = ids
        self._clock = clock

    def execute(self, user_id: str) -> Session:
        if self._users.find_by_id(user_id) is None:
            raise UserNotFoundError(context={"user_id": user_id})

        session = Session.issue(
            session_id=self._ids.generate(),
            user_id=user_id,
            issued_at=self._clock(),
        )
        persisted = self._sessions.add(session)
        logger.info(
            f"ai.session: issued session for user={user_id} "
            f"expires_at={persisted.expires_at.isoformat()}"
        )
        return persisted
