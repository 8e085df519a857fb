# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from phantom_backend.application.use_cases.identity.register_user import \
    RegisterUserUseCase
from phantom_backend.interfaces.http.dto.identity import (PhantomAuthRequestDTO,
                                                          PhantomAuthResponseDTO)
from phantom_backend.shared.errors.validation import raise_validation_error


class AuthController:
    def __init__(self, *, register_use_case: RegisterUserUseCase) -> None:
        self._register_use_case = register_use_case

    def phantom(self) -> Response:
        # No signature challenge: the public key is trusted as supplied.
        try:
            dto = PhantomAuthRequestDTO.model_validate_json(request.get_data())
        except ValidationError as exc:
            raise_validation_error(exc)

        user = self._register_use_case.execute(dto.public_key)

        return jsonify(PhantomAuthResponseDTO(user_id=user.id).model_dump())

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/auth")
        bp.add_url_rule("/phantom", view_func=self.phantom, methods=["POST"])
        return bp
