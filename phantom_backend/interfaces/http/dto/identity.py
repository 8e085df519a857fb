from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator


class _RequestDTO(BaseModel):
    # Missing or null fields fall back to "", unknown ones are ignored.
    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _normalize_body(cls, data: Any) -> Any:
        if data is None:
            return {}
        if not isinstance(data, dict):
            return data
        normalized = dict(data)
        for field in cls.model_fields.values():
            alias = field.alias
            if alias is None or alias in normalized:
                continue
            # Field names match case-insensitively when there is no exact key.
            for key, value in data.items():
                if isinstance(key, str) and key.lower() == alias.lower():
                    normalized[alias] = value
                    break
        return normalized

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class PhantomAuthRequestDTO(_RequestDTO):
    public_key: str = Field("", alias="publicKey")


class PhantomAuthResponseDTO(BaseModel):
    model_config = ConfigDict(serialize_by_alias=True, validate_by_name=True)

    user_id: str = Field(alias="userId")


class SessionRequestDTO(_RequestDTO):
    user_id: str = Field("", alias="userId")


class SessionResponseDTO(BaseModel):
    model_config = ConfigDict(serialize_by_alias=True, validate_by_name=True)

    session_id: str = Field(alias="sessionId")
    user_id: str = Field(alias="userId")
    expires_at: datetime = Field(alias="expiresAt")

    @field_serializer("expires_at")
    def _rfc3339(self, value: datetime) -> str:
        return value.astimezone(UTC).strftime("%Y-%m-%dT%H:%M:%SZ")
