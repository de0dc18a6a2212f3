"""Wire models for the response envelope."""

from jsonresp.models.envelope import (
    ErrorBody,
    ErrorOnly,
    PageDetails,
    RawResponse,
    Response,
)

__all__ = [
    "ErrorBody",
    "ErrorOnly",
    "PageDetails",
    "RawResponse",
    "Response",
]
