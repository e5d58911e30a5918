"""Error type raised throughout the server."""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(Enum):
    """What went wrong."""

    STREAM_READ_CRASHED = "StreamReadCrashed"
    STREAM_READ_WITH_EXCESS = "StreamReadWithExcess"
    BYTES_PARSING_FAILED = "BytesParsingFailed"
    REQUEST_IS_EMPTY = "RequestIsEmpty"
    EXPECTED_REQUEST_BODY = "ExpectedRequestBody"
    INVALID_IP_ADDR = "InvalidIPAddr"
    REQUEST_LINE_NOT_FOUND = "RequestLineNotFound"
    BAD_REQUEST_LINE = "BadRequestLine"
    BAD_METHOD_NAME = "BadMethodName"
    BAD_HTTP_VERSION = "BadHttpVersion"
    REQUEST_URI_NOT_FOUND = "RequestUriNotFound"
    INITIAL_THREAD_CAPACITY_HIGHER_THAN_MAXIMUM_THREADS_ALLOWED = (
        "InitialThreadCapacityHigherThanMaximumThreadsAllowed"
    )
    IO = "IO"


class PheasantError(Exception):
    """Raised when a request cannot be read, parsed or answered."""

    def __init__(self, kind: ErrorKind, detail: Any = None) -> None:
        super().__init__(kind, detail)
        self.kind = kind
        self.detail = detail

    def __str__(self) -> str:
        if self.detail is None:
            return self.kind.value
        return f"{self.kind.value}: {self.detail}"