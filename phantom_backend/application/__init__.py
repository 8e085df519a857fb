# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .services.identifiers import IDENTIFIER_BYTES, SecureIdentifierGenerator
from .use_cases.identity.create_session import CreateSessionUseCase
from .use_cases.identity.register_user import RegisterUserUseCase

__all__ = [
    "IDENTIFIER_BYTES",
    "CreateSessionUseCase",
    "RegisterUserUseCase",
    "SecureIdentifierGenerator",
]
