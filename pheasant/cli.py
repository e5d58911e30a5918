"""Development server with a few demonstration services."""

from __future__ import annotations

import argparse
import asyncio
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Sequence

from .methods import HttpMethod, MimeType
from .request import Request
from .server import Server, Service


@dataclass
class Who:
    """The ``who`` query parameter of a request."""

    who: str

    @classmethod
    def from_request(cls, request: Request) -> "Who":
        params = request.take_params()
        value = params.remove("who") if params is not None else None
        if value is None:
            raise KeyError("who")
        return cls(value)


async def hello(who: Who) -> bytes:
    return f"<h1>hello {who.who}</h1>".encode()


async def favicon(_: Any) -> bytes:
    return Path("assets/404.svg").read_text().encode()


async def svg(who: Who) -> bytes:
    return Path(who.who).read_text().encode()


def build_server(host: str = "127.0.0.1", port: int = 8883) -> Server:
    """Create a server with the demonstration services registered."""
    server = Server(host, port, 3333)
    server.service(
        Service(HttpMethod.GET, "/hello", MimeType.TEXT_HTML, hello, Who.from_request)
    )
    server.service(
        Service(HttpMethod.GET, "/favicon.ico", MimeType.IMAGE_SVG_XML, favicon)
    )
    server.service(
        Service(HttpMethod.GET, "/icon", MimeType.IMAGE_SVG_XML, svg, Who.from_request)
    )
    return server


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="pheasant")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8883)
    args = parser.parse_args(argv)
    server = build_server(args.host, args.port)
    try:
        asyncio.run(server.serve())
    except KeyboardInterrupt:
        pass
    return 0