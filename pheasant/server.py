"""A small asynchronous HTTP server dispatching to registered services."""

from __future__ import annotations

import asyncio
import inspect
import ipaddress
import json
import logging
import os
import socket
from contextlib import suppress
from typing import Any, Awaitable, Callable, Union

from .errors import ErrorKind, PheasantError
from .methods import HttpMethod, MimeType
from .request import Request

log = logging.getLogger(__name__)

_CHUNK = 1024
_SVG_SLOT = "{404.svg}"
_NOT_FOUND_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="200" height="100" '
    'viewBox="0 0 200 100"><text x="100" y="60" text-anchor="middle" '
    'font-size="48">404</text></svg>'
)
_NOT_FOUND_TEMPLATE = (
    "<!DOCTYPE html><html><head><title>404 Not Found</title></head>"
    "<body><h1>404 Not Found</h1>" + _SVG_SLOT + "</body></html>"
)

Handler = Callable[[Any], Union[bytes, Awaitable[bytes]]]


def into_bytes(value: Any) -> bytes:
    """Serialise to JSON, strip the outer delimiters and unescape quotes."""
    try:
        text = json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError):
        return b""
    text = text[1:-1]
    text = text.replace('\\"', '"').replace("\\n", "")
    return text.encode()


def format_response(payload: bytes, content_type: str) -> bytes:
    """Build a 200 response around the payload."""
    head = (
        "HTTP/1.1 200 OK\r\nAccept-Range: bytes\r\n"
        f"Content-Type: {content_type}\r\nContent-Length: {len(payload)}\r\n\r\n"
    )
    return head.encode() + bytes(payload) + b"\r\n"


async def read_stream(reader: Any) -> str:
    """Read chunks until one comes back short, then decode as UTF-8."""
    data = bytearray()
    while True:
        try:
            chunk = await reader.read(_CHUNK)
        except Exception as exc:
            raise PheasantError(ErrorKind.STREAM_READ_CRASHED, exc) from exc
        if len(chunk) > _CHUNK:
            raise PheasantError(ErrorKind.STREAM_READ_WITH_EXCESS)
        data += chunk
        if len(chunk) < _CHUNK:
            break
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise PheasantError(ErrorKind.BYTES_PARSING_FAILED, exc) from None


class Service:
    """A handler bound to a method and path, answering with a content type."""

    def __init__(
        self,
        method: HttpMethod,
        uri: str,
        mime: str | MimeType,
        handler: Handler,
        extract: Callable[[Request], Any] | None = None,
    ) -> None:
        self.method = method
        self.uri = uri
        self.mime = mime.value if isinstance(mime, MimeType) else str(mime)
        self.handler = handler
        self.extract = extract

    async def respond(self, request: Request) -> bytes:
        """Run the handler on what the extractor takes from the request."""
        argument = self.extract(request) if self.extract is not None else None
        result = self.handler(argument)
        if inspect.isawaitable(result):
            result = await result
        return bytes(result)


async def _not_found(_: Any) -> bytes:
    """Render the not-found page with its image inlined."""
    page = _NOT_FOUND_TEMPLATE.replace(_SVG_SLOT, _NOT_FOUND_SVG)
    return page.encode()


def _to_ipv4(addr: Any) -> ipaddress.IPv4Address:
    try:
        if isinstance(addr, (tuple, list)):
            addr = bytes(addr)
        return ipaddress.IPv4Address(addr)
    except (ValueError, TypeError):
        raise PheasantError(ErrorKind.INVALID_IP_ADDR, addr) from None


class Server:
    """Listens on a bound socket and answers each connection with one response."""

    def __init__(
        self,
        addr: Any,
        port: int,
        max_threads: int = 3333,
        not_found: Service | None = None,
    ) -> None:
        ip = _to_ipv4(addr)
        print(f"\x1b[1;38;2;213;183;214mServer bound at http://{ip}:{port}\x1b[0m")
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            if os.name == "posix":
                sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            sock.bind((str(ip), port))
            sock.listen()
        except (OSError, OverflowError) as exc:
            sock.close()
            raise PheasantError(ErrorKind.IO, exc) from exc
        self.socket = sock
        self.max_threads = max_threads
        fallback = not_found or Service(
            HttpMethod.GET, "/not_found404.html", MimeType.TEXT_HTML, _not_found
        )
        self.services: list[Service] = [fallback]

    def service(self, service: Service) -> None:
        """Register a service."""
        self.services.append(service)

    def match_service(self, method: HttpMethod, uri: str) -> Service | None:
        return next(
            (s for s in self.services if s.method == method and s.uri == uri), None
        )

    async def respond(self, data: str) -> bytes:
        """Parse request text and build the full response bytes."""
        log.debug("request text: %r", data)
        request = Request.parse_from(data)
        log.debug("parsed request: %r", request)
        service = self.match_service(request.method, request.uri) or self.services[0]
        payload = await service.respond(request)
        return format_response(payload, service.mime)

    async def handle_stream(self, reader: Any, writer: Any) -> Any:
        data = await read_stream(reader)
        response = await self.respond(data)
        try:
            writer.write(response)
            await writer.drain()
        except OSError as exc:
            raise PheasantError(ErrorKind.IO, exc) from exc
        return writer

    async def _on_client(
        self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter
    ) -> None:
        try:
            await self.handle_stream(reader, writer)
        except PheasantError as exc:
            print(repr(exc))
        finally:
            writer.close()
            with suppress(OSError):
                await writer.wait_closed()

    async def serve(self) -> None:
        """Accept connections until cancelled."""
        server = await asyncio.start_server(self._on_client, sock=self.socket)
        async with server:
            await server.serve_forever()