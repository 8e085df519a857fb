"""Opaque identifier generation."""

from __future__ import annotations

import secrets

from phantom_backend.domain.identity.repositories import IdentifierGenerator
from phantom_backend.shared.errors import IdentifierGenerationError
from phantom_backend.shared.logging import logger

IDENTIFIER_BYTES = 16


class SecureIdentifierGenerator(IdentifierGenerator):
    """Hex-encoded random identifiers drawn from the OS CSPRNG.

    Uniqueness is probabilistic: 128 random bits, never checked against the
    registries.
    """

    def __init__(self, num_bytes: int = IDENTIFIER_BYTES) -> None:
        self._num_bytes = num_bytes

    def generate(self) -> str:
        try:
            return secrets.token_hex(self._num_bytes)
        except (OSError, NotImplementedError) as exc:
            logger.critical(f"identifiers: randomness source failed: {type(exc).__name__}")
            raise IdentifierGenerationError(type(exc).__name__) from exc
