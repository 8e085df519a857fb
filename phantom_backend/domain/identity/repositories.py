# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import Session, User


class UserRepository(Protocol):
    def find_by_id(self, user_id: str) -> User | None: ...
    def add(self, user: User) -> User: ...


class SessionRepository(Protocol):
    def find_by_id(self, session_id: str) -> Session | None: ...
    def add(self, session: Session) -> Session: ...


class IdentifierGenerator(Protocol):
    def generate(self) -> str: ...
