"""Uniform JSON envelope for REST API responses.

Write side::

    write_response(sink, {"id": 1}, 200)
    write_error(sink, "not found", 404)

Read side::

    item = read_response(body, Item)
    items, page = read_response_page(body, list[Item])
"""

from jsonresp.decoder import read_error, read_response, read_response_page
from jsonresp.encoder import CONTENT_TYPE, write_error, write_response, write_response_page
from jsonresp.errors import (
    APIError,
    DecodeError,
    EncodeError,
    JsonRespError,
    SinkWriteError,
    UnmarshalError,
    error_matches,
)
from jsonresp.models.envelope import ErrorBody, PageDetails, Response
from jsonresp.sink import RecordingSink, ResponseSink

__all__ = [
    "APIError",
    "CONTENT_TYPE",
    "DecodeError",
    "EncodeError",
    "ErrorBody",
    "JsonRespError",
    "PageDetails",
    "RecordingSink",
    "Response",
    "ResponseSink",
    "SinkWriteError",
    "UnmarshalError",
    "error_matches",
    "read_error",
    "read_response",
    "read_response_page",
    "write_error",
    "write_response",
    "write_response_page",
]
