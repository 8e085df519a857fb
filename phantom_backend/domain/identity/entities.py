# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

SESSION_VALIDITY = timedelta(hours=24)


@dataclass(slots=True, frozen=True)
class User:

    id: str
    public_key: str
    created_at: datetime


@dataclass(slots=True, frozen=True)
class Session:

    session_id: str
    user_id: str
    expires_at: datetime

    @classmethod
    def issue(cls, session_id: str, user_id: str, issued_at: datetime) -> Session:
        return cls(
            session_id=session_id,
            user_id=user_id,
            expires_at=issued_at + SESSION_VALIDITY,
        )

    def is_expired(self, now: datetime) -> bool:
        """Advisory check; nothing in the service enforces expiry."""
        return now >= self.expires_at
