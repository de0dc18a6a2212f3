"""FastAPI integration: envelope responses and exception handlers."""

from jsonresp.middleware.error_handler import (
    envelope_response,
    error_response,
    register_error_handlers,
)

__all__ = [
    "envelope_response",
    "error_response",
    "register_error_handlers",
]
