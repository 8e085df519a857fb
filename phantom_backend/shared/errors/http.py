# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, Response, request
from werkzeug.exceptions import HTTPException

from phantom_backend.shared.config import load_config
from phantom_backend.shared.logging import logger

from .base import AppError


def plain_text(body: str, status: HTTPStatus | int = HTTPStatus.OK) -> Response:
    return Response(body, status=int(status), mimetype="text/plain")


def handle_app_error(error: AppError) -> Response:
    return plain_text(error.message, error.status)


def register_error_handler(
    app: Flask,
    *,
    debug_mode: bool | None = None,
    default_status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR,
) -> None:
    if debug_mode is None:
        debug_mode = load_config().debug_logging

    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        if exc.context:
            logger.warning(
                f"Handled application error {exc.code} on {request.method} {request.path} "
                f"context={dict(exc.context)}"
            )
        else:
            logger.warning(
                f"Handled application error {exc.code} on {request.method} {request.path}"
            )
        return handle_app_error(exc)

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        return exc

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        if debug_mode:
            logger.exception(
                f"Unhandled exception: {request.method} {request.path} "
                f"query={dict(request.args)}, body_size={len(request.get_data())}"
            )
        else:
            logger.error(f"Error: {type(exc).__name__} on {request.method} {request.path}")

        return plain_text("Internal server error", default_status)
