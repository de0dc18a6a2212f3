"""Read side of the envelope codec.

``read_response_page`` and ``read_response`` raise: a broken envelope is a
``DecodeError``, a server-reported error is the ``APIError`` itself, and a
payload that does not fit the requested type is an ``UnmarshalError``.
``read_error`` never raises and is meant for logging and diagnostics.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar, overload

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import to_json

from jsonresp.errors import APIError, DecodeError, UnmarshalError
from jsonresp.models.envelope import ErrorOnly, PageDetails, RawResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")

# bytes, str, or anything with a read() returning either (files, httpx.Response)
Source = Any


@overload
def read_response_page(source: Source, target: type[T]) -> tuple[T, PageDetails | None]: ...


@overload
def read_response_page(source: Source, target: None = None) -> tuple[Any, PageDetails | None]: ...


def read_response_page(source: Source, target: Any = None) -> tuple[Any, PageDetails | None]:
    """Read a paged envelope and return ``(data, page)``.

    When ``target`` is given, ``data`` is validated into that type in strict
    mode, so ``"5"`` is not an ``int``. An explicit ``"data": null`` is
    returned as ``None`` whatever the target; a missing ``data`` member is an
    error once a target is asked for. Without a target the decoded JSON value
    is returned unchanged. ``page`` is ``None`` when the envelope carries no
    paging information.

    Raises
    ------
    DecodeError
        If the source cannot be read or is not a JSON envelope object.
    APIError
        If the envelope carries an ``error``. ``data`` is not looked at.
    UnmarshalError
        If ``data`` cannot be validated into ``target``.
    """
    try:
        raw = _read_all(source)
    except Exception as exc:
        raise DecodeError(f"jsonresp: failed to read response: {exc}") from exc
    try:
        envelope = RawResponse.model_validate_json(raw)
    except PydanticValidationError as exc:
        raise DecodeError(f"jsonresp: failed to read response: {exc}") from exc

    if envelope.error is not None:
        logger.debug("Envelope carries error", extra={"error_code": envelope.error.code})
        raise APIError.from_body(envelope.error)

    data = envelope.data
    if target is not None and data is not None:
        try:
            data = TypeAdapter(target).validate_json(to_json(data), strict=True)
        except PydanticValidationError as exc:
            raise UnmarshalError(f"jsonresp: failed to unmarshal response: {exc}") from exc
    elif target is not None and not envelope.has_data:
        raise UnmarshalError("jsonresp: failed to unmarshal response: envelope has no data")

    return data, envelope.page


@overload
def read_response(source: Source, target: type[T]) -> T: ...


@overload
def read_response(source: Source, target: None = None) -> Any: ...


def read_response(source: Source, target: Any = None) -> Any:
    """Read an envelope and return its ``data``; see ``read_response_page``."""
    data, _ = read_response_page(source, target)
    return data


def read_error(source: Source) -> APIError | None:
    """Return the error carried by the envelope in ``source``, if any.

    Anything that prevents reading it (unreadable source, invalid JSON, no
    ``error`` member) yields ``None``.
    """
    try:
        envelope = ErrorOnly.model_validate_json(_read_all(source))
    except Exception as exc:
        logger.debug("No error envelope available: %s", exc)
        return None
    if envelope.error is None:
        return None
    return APIError.from_body(envelope.error)


def _read_all(source: Source) -> bytes | str:
    if isinstance(source, (bytes, str)):
        return source
    if isinstance(source, (bytearray, memoryview)):
        return bytes(source)
    read = getattr(source, "read", None)
    if read is None:
        raise TypeError(f"cannot read envelope from {type(source).__name__}")
    return read()
