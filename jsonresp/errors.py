"""Error hierarchy for the envelope codec.

``APIError`` is both the value carried in an envelope's ``error`` field and the
exception raised when a decoded envelope reports one. The remaining classes
describe failures of the codec itself and always carry a ``jsonresp:`` prefix.
"""

from __future__ import annotations

from http import HTTPStatus

from jsonresp.models.envelope import ErrorBody


class JsonRespError(Exception):
    """Base error for everything raised by jsonresp."""


class APIError(JsonRespError):
    """An API-level error as carried on the wire: ``{code, message}``."""

    def __init__(self, code: int = 0, message: str = "") -> None:
        self.code = code
        self.message = message
        super().__init__(code, message)

    def __str__(self) -> str:
        status = _status_line(self.code)
        if self.message:
            return f"{self.message} ({status})"
        return status

    def __repr__(self) -> str:
        return f"APIError(code={self.code!r}, message={self.message!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, APIError):
            return NotImplemented
        return self.code == other.code and self.message == other.message

    def __hash__(self) -> int:
        return hash((self.code, self.message))

    def matches(self, target: object) -> bool:
        """Report whether this error matches ``target``.

        Zero-valued fields of ``target`` act as wildcards, so
        ``APIError(404, "x").matches(APIError(404))`` is true while
        ``APIError(404).matches(APIError(404, "x"))`` is not.
        """
        if not isinstance(target, APIError):
            return False
        if target.code and target.code != self.code:
            return False
        if target.message and target.message != self.message:
            return False
        return True

    def to_body(self) -> ErrorBody:
        return ErrorBody(code=self.code, message=self.message)

    @classmethod
    def from_body(cls, body: ErrorBody) -> APIError:
        return cls(code=body.code, message=body.message)


class EncodeError(JsonRespError):
    """The envelope could not be serialized; nothing was written."""


class SinkWriteError(JsonRespError):
    """The sink failed while receiving the body; the status is already sent."""


class DecodeError(JsonRespError):
    """The source is not a well-formed envelope."""


class UnmarshalError(JsonRespError):
    """The envelope is fine but ``data`` does not fit the requested type."""


def error_matches(exc: BaseException | None, target: APIError) -> bool:
    """Report whether ``exc`` or any exception it was raised from matches ``target``."""
    seen: set[int] = set()
    while exc is not None and id(exc) not in seen:
        seen.add(id(exc))
        if isinstance(exc, APIError) and exc.matches(target):
            return True
        exc = exc.__cause__ or exc.__context__
    return False


def _status_line(code: int) -> str:
    try:
        phrase = HTTPStatus(code).phrase
    except ValueError:
        return str(code)
    return f"{code} {phrase}"
