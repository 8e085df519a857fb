# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from phantom_backend.application.use_cases.identity.create_session import \
    CreateSessionUseCase
from phantom_backend.interfaces.http.dto.identity import SessionRequestDTO, SessionResponseDTO
from phantom_backend.shared.errors.validation import raise_validation_error


class SessionController:
    def __init__(self, *, create_session_use_case: CreateSessionUseCase) -> None:
        self._create_session_use_case = create_session_use_case

    def create(self) -> Response:
        try:
            dto = SessionRequestDTO.model_validate_json(request.get_data())
        except ValidationError as exc:
            raise_validation_error(exc)

        session = self._create_session_use_case.execute(dto.user_id)

        payload = SessionResponseDTO(
            session_id=session.session_id,
            user_id=session.user_id,
            expires_at=session.expires_at,
        ).model_dump(mode="json")
        return jsonify(payload)

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("ai_session", __name__, url_prefix="/ai")
        bp.add_url_rule("/session", view_func=self.create, methods=["POST"])
        return bp
