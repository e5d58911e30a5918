"""Parsing of raw HTTP request text."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from .errors import ErrorKind, PheasantError
from .methods import HttpMethod

_HEAD_END = "\r\n\r\n"


class Protocol(Enum):
    """HTTP protocol version named on the request line."""

    V1_1 = "HTTP/1.1"
    V2 = "HTTP/2"

    @classmethod
    def from_str(cls, text: str) -> "Protocol":
        try:
            return cls(text)
        except ValueError:
            raise PheasantError(ErrorKind.BAD_HTTP_VERSION, text) from None


@dataclass
class RequestParams:
    """Query string parameters."""

    params: dict[str, str] = field(default_factory=dict)

    def get(self, key: str) -> str | None:
        return self.params.get(key)

    def remove(self, key: str) -> str | None:
        return self.params.pop(key, None)


@dataclass
class RequestHeaders:
    """Header lines, split at the first colon; values are not trimmed."""

    headers: dict[str, str] = field(default_factory=dict)


@dataclass
class RequestBody:
    """A form-encoded body."""

    body: dict[str, str] = field(default_factory=dict)


def _pairs(items: Iterable[str], key_sep: str) -> dict[str, str]:
    """Split each item at the first separator, dropping items without one."""
    result: dict[str, str] = {}
    for item in items:
        key, sep, value = item.partition(key_sep)
        if sep:
            result[key] = value
    return result


def _lines(text: str) -> list[str]:
    if not text:
        return []
    parts = text.split("\n")
    if text.endswith("\n"):
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def _split_head_body(data: str) -> tuple[str, RequestBody | None]:
    if data.endswith(_HEAD_END):
        return data, None
    head, sep, rest = data.partition(_HEAD_END)
    if not sep:
        return head, None
    return head, RequestBody(_pairs(rest.split("&"), "="))


def _parse_uri(uri: str) -> tuple[str, RequestParams | None]:
    path, sep, query = uri.partition("?")
    params = RequestParams(_pairs(query.split("&"), "=")) if sep else None
    if not path:
        raise PheasantError(ErrorKind.BAD_REQUEST_LINE, uri)
    return path, params


def _parse_request_line(
    line: str | None,
) -> tuple[HttpMethod, str, RequestParams | None, Protocol]:
    if line is None:
        raise PheasantError(ErrorKind.REQUEST_LINE_NOT_FOUND)
    parts = line.split(" ")
    method = HttpMethod.from_str(parts[0])
    if len(parts) < 2:
        raise PheasantError(ErrorKind.BAD_REQUEST_LINE, line)
    uri, params = _parse_uri(parts[1])
    if len(parts) < 3:
        raise PheasantError(ErrorKind.BAD_REQUEST_LINE, line)
    proto = Protocol.from_str(parts[2])
    return method, uri, params, proto


@dataclass
class Request:
    """A parsed HTTP request."""

    method: HttpMethod = HttpMethod.GET
    proto: Protocol = Protocol.V1_1
    uri: str = ""
    params: RequestParams | None = None
    body: RequestBody | None = None
    headers: RequestHeaders = field(default_factory=RequestHeaders)

    @classmethod
    def parse_from(cls, data: str) -> "Request":
        """Parse the full text of a request."""
        if not data:
            raise PheasantError(ErrorKind.REQUEST_IS_EMPTY)
        head, body = _split_head_body(data)
        lines = _lines(head)
        first = lines[0] if lines else None
        method, uri, params, proto = _parse_request_line(first)
        headers = RequestHeaders(_pairs(lines[1:], ":"))
        return cls(
            method=method,
            proto=proto,
            uri=uri,
            params=params,
            body=body,
            headers=headers,
        )

    def take_params(self) -> RequestParams | None:
        """Return the query parameters, leaving the request without them."""
        params, self.params = self.params, None
        return params