# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response

from phantom_backend.shared.errors import plain_text


class MiscController:
    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/", view_func=self.index, methods=["GET"])
        bp.add_url_rule("/health", view_func=self.health, methods=["GET"])
        return bp

    def index(self) -> Response:
        return plain_text("Phantom Backend is running")

    def health(self) -> Response:
        return plain_text("OK")
