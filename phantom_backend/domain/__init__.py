# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .identity.entities import SESSION_VALIDITY, Session, User
from .identity.exceptions import UserNotFoundError
from .identity.repositories import IdentifierGenerator, SessionRepository, UserRepository

__all__ = [
    "SESSION_VALIDITY",
    "IdentifierGenerator",
    "Session",
    "SessionRepository",
    "User",
    "UserNotFoundError",
    "UserRepository",
]
