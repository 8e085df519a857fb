# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from threading import Lock

from phantom_backend.domain.identity.entities import Session, User
from phantom_backend.domain.identity.repositories import SessionRepository, UserRepository


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._lock = Lock()

    def find_by_id(self, user_id: str) -> User | None:
        with self._lock:
            return self._users.get(user_id)

    def add(self, user: User) -> User:
        with self._lock:
            self._users[user.id] = user
        return user

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)


class InMemorySessionRepository(SessionRepository):
    def __init__(self) -> None:
        self._sessions: dict[str, Session] = {}
        self._lock = Lock()

    def find_by_id(self, session_id: str) -> Session | None:
        with self._lock:
            return self._sessions.get(session_id)

    def add(self, session: Session) -> Session:
        with self._lock:
            self._sessions[session.session_id] = session
        return session

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
