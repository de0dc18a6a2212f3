"""Write side of the envelope codec.

The envelope is serialized completely before the sink is touched. Once a
status line reaches the transport it cannot be taken back, so a payload that
fails to serialize must be caught while the caller can still answer with
something else.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticSerializationError

from jsonresp.config.settings import get_settings
from jsonresp.errors import EncodeError, SinkWriteError
from jsonresp.models.envelope import PageDetails, Response
from jsonresp.sink import ResponseSink

logger = logging.getLogger(__name__)

CONTENT_TYPE = "application/json"


def write_error(sink: ResponseSink, message: str, code: int) -> None:
    """Encode an error envelope with ``{code, message}`` and write it to ``sink``."""
    envelope = _build("error", error={"code": code, "message": message})
    _encode_and_send(sink, envelope, code, "error")


def write_response(sink: ResponseSink, data: Any, code: int) -> None:
    """Encode ``data`` in an envelope and write it to ``sink``."""
    write_response_page(sink, data, None, code)


def write_response_page(
    sink: ResponseSink,
    data: Any,
    page: PageDetails | None,
    code: int,
) -> None:
    """Encode ``data`` in a paged envelope and write it to ``sink``."""
    envelope = _build("response", data=data, page=page)
    _encode_and_send(sink, envelope, code, "response")


def _build(kind: str, **fields: Any) -> Response[Any]:
    try:
        return Response(**fields)
    except PydanticValidationError as exc:
        raise EncodeError(f"jsonresp: failed to encode {kind}: {exc}") from exc


def _encode_and_send(
    sink: ResponseSink,
    envelope: Response[Any],
    code: int,
    kind: str,
) -> None:
    """Serialize ``envelope`` in memory, then commit header, status and body.

    Raises
    ------
    ValueError
        If ``code`` is not a three-digit HTTP status. Nothing is written.
    EncodeError
        If the envelope cannot be serialized. Nothing is written.
    SinkWriteError
        If the sink fails while receiving the body. The status has already
        been committed at that point.
    """
    if not 100 <= code <= 999:
        raise ValueError(f"jsonresp: invalid status code {code}")

    try:
        body = envelope.to_json()
    except (PydanticSerializationError, TypeError, ValueError) as exc:
        raise EncodeError(f"jsonresp: failed to encode {kind}: {exc}") from exc

    if get_settings().trailing_newline:
        body += b"\n"

    sink.set_header("Content-Type", CONTENT_TYPE)
    sink.write_status(code)
    try:
        sink.write(body)
    except Exception as exc:
        raise SinkWriteError(f"jsonresp: failed to write {kind}: {exc}") from exc

    logger.debug(
        "Wrote %s envelope",
        kind,
        extra={"status_code": code, "content_length": len(body)},
    )
