from .base import (
    AppError,
    AuthenticationRequiredError,
    DomainError,
    EndpointNotFoundError,
    InfrastructureError,
    RequestValidationError,
    ServiceUnavailableError,
)
from .http import failure_message, handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "AuthenticationRequiredError",
    "DomainError",
    "EndpointNotFoundError",
    "InfrastructureError",
    "RequestValidationError",
    "ServiceUnavailableError",
    "failure_message",
    "handle_app_error",
    "register_error_handler",
]
