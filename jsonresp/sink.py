"""Response sinks the encoder writes to.

A sink is anything that can take a header, a status code (once) and a body.
``RecordingSink`` keeps everything in memory and can hand the result to
FastAPI as a regular ``Response``.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from starlette.responses import Response

logger = logging.getLogger(__name__)


@runtime_checkable
class ResponseSink(Protocol):
    """Outbound side of an HTTP exchange."""

    def set_header(self, key: str, value: str) -> None: ...

    def write_status(self, code: int) -> None: ...

    def write(self, data: bytes) -> None: ...


class RecordingSink:
    """In-memory ``ResponseSink``.

    The first committed status wins; later ``write_status`` calls are ignored.
    Writing a body before any status commits 200.
    """

    def __init__(self) -> None:
        self.headers: dict[str, str] = {}
        self.status_code: int | None = None
        self.body = bytearray()

    @property
    def committed(self) -> bool:
        return self.status_code is not None

    def set_header(self, key: str, value: str) -> None:
        if self.committed:
            logger.warning("Header %s set after status %d was committed", key, self.status_code)
            return
        self.headers[key] = value

    def write_status(self, code: int) -> None:
        if self.committed:
            logger.warning(
                "Superfluous write_status(%d), status %d already committed",
                code,
                self.status_code,
            )
            return
        self.status_code = code

    def write(self, data: bytes) -> None:
        if not self.committed:
            self.write_status(200)
        self.body.extend(data)

    def getvalue(self) -> bytes:
        return bytes(self.body)

    def to_response(self) -> Response:
        """Convert what was recorded into a Starlette/FastAPI ``Response``."""
        return Response(
            content=self.getvalue(),
            status_code=self.status_code or 200,
            headers=self.headers,
        )
