from .base import (
    AppError,
    DomainError,
    IdentifierGenerationError,
    InfrastructureError,
    InvalidRequestError,
    ValidationError,
)
from .http import handle_app_error, plain_text, register_error_handler

__all__ = [
    "AppError",
    "DomainError",
    "IdentifierGenerationError",
    "InfrastructureError",
    "InvalidRequestError",
    "ValidationError",
    "handle_app_error",
    "plain_text",
    "register_error_handler",
]
