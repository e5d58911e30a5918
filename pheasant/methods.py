"""HTTP methods and common content types."""

from __future__ import annotations

from enum import Enum

from .errors import ErrorKind, PheasantError


class HttpMethod(Enum):
    """An HTTP request method."""

    HEAD = "HEAD"
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    CONNECT = "CONNECT"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"

    @classmethod
    def from_str(cls, text: str) -> "HttpMethod":
        """Parse a method name exactly as it appears on the request line."""
        try:
            return cls(text)
        except ValueError:
            raise PheasantError(ErrorKind.BAD_METHOD_NAME, text) from None


class MimeType(Enum):
    """Content types a service commonly answers with."""

    TEXT_HTML = "text/html"
    TEXT_JS = "text/javascript"
    TEXT_CSS = "text/css"
    APPLICATION_JSON = "application/json"
    IMAGE_SVG_XML = "image/svg+xml"