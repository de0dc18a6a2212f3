"""Wire models for the response envelope.

Every response is wrapped in the same JSON object:
{ data: T, page: { prev, next, totalSize }, error: { code, message } }

A key whose value is empty is left out entirely rather than sent as ``null``,
``0`` or ``""``. On the way back in, an explicit ``null`` inside ``page`` or
``error`` reads as the zero value; any other wrongly typed value is rejected.
"""

from __future__ import annotations

import json
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator
from pydantic_core import to_jsonable_python

T = TypeVar("T")


class PageDetails(BaseModel):
    """Opaque pagination cursors plus the total result count."""

    model_config = ConfigDict(populate_by_name=True)

    prev: StrictStr = ""
    next: StrictStr = ""
    total_size: StrictInt = Field(default=0, alias="totalSize")

    @field_validator("prev", "next", mode="before")
    @classmethod
    def _null_cursor(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("total_size", mode="before")
    @classmethod
    def _null_total(cls, value: Any) -> Any:
        return 0 if value is None else value

    def is_empty(self) -> bool:
        return not (self.prev or self.next or self.total_size)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_defaults=True)


class ErrorBody(BaseModel):
    """The ``error`` object as it appears on the wire."""

    code: StrictInt = 0
    message: StrictStr = ""

    @field_validator("code", mode="before")
    @classmethod
    def _null_code(cls, value: Any) -> Any:
        return 0 if value is None else value

    @field_validator("message", mode="before")
    @classmethod
    def _null_message(cls, value: Any) -> Any:
        return "" if value is None else value

    def is_empty(self) -> bool:
        return not (self.code or self.message)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(exclude_defaults=True)


class Response(BaseModel, Generic[T]):
    """Top level container of every REST API response."""

    data: T | None = None
    page: PageDetails | None = None
    error: ErrorBody | None = None

    def to_wire(self) -> dict[str, Any]:
        """Return the envelope as a plain dict with empty fields dropped."""
        body: dict[str, Any] = {}
        if self.data is not None:
            body["data"] = self.data
        if self.page is not None and not self.page.is_empty():
            body["page"] = self.page.to_wire()
        if self.error is not None and not self.error.is_empty():
            body["error"] = self.error.to_wire()
        return body

    def to_json(self) -> bytes:
        """Serialize the envelope to compact UTF-8 JSON.

        Raises ``pydantic_core.PydanticSerializationError`` when ``data`` holds
        a type JSON cannot represent, and ``ValueError`` for NaN, infinities,
        circular references and unencodable strings.
        """
        plain = to_jsonable_python(self.to_wire())
        text = json.dumps(plain, allow_nan=False, ensure_ascii=False, separators=(",", ":"))
        return text.encode("utf-8")


class RawResponse(BaseModel):
    """Envelope as read back from the wire, with ``data`` left undecoded."""

    model_config = ConfigDict(extra="ignore")

    data: Any = None
    page: PageDetails | None = None
    error: ErrorBody | None = None

    @property
    def has_data(self) -> bool:
        """Whether the ``data`` member was present at all, even as ``null``."""
        return "data" in self.model_fields_set


class ErrorOnly(BaseModel):
    """Just the ``error`` member of an envelope; everything else is ignored."""

    model_config = ConfigDict(extra="ignore")

    error: ErrorBody | None = None
