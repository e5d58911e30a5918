# pheasant

A small asynchronous HTTP server built on `asyncio`. You register services. Each
service is a method, a path, a content type and a handler that produces the
response body. The server parses each incoming request and passes it to the
service whose method and path match exactly. A request that matches no service
gets a built-in "404 Not Found" HTML page.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

## Usage

```python
import asyncio

from pheasant.cli import Who
from pheasant.methods import HttpMethod, MimeType
from pheasant.server import Server, Service


async def hello(who):
    return f"<h1>hello {who.who}</h1>".encode()


server = Server("127.0.0.1", 8883)
server.service(Service(HttpMethod.GET, "/hello", MimeType.TEXT_HTML, hello, Who.from_request))
asyncio.run(server.serve())
```

- `Server(addr, port, max_threads=3333, not_found=None)` binds and listens on the
  socket straight away. `addr` can be an IPv4 string or a sequence of four
  octets such as `[127, 0, 0, 1]`. An invalid address raises a `PheasantError`
  of kind `INVALID_IP_ADDR`, and a bind failure raises one of kind `IO`. Use
  `not_found` to replace the built-in fallback service.
- `Service(method, uri, mime, handler, extract=None)`: `mime` is a string or a
  `MimeType`. `extract` turns the parsed `Request` into the value given to the
  handler. Without `extract`, the handler gets `None`. The handler may be a plain
  function or a coroutine function, and it returns the body as bytes.
- `Server.match_service(method, uri)` returns the first registered service that
  matches, or `None`.
- `Server.respond(text)` parses the request text and returns the full response
  bytes. Use it to exercise services without a socket.
- `Server.serve()` accepts connections until it is cancelled.

Each connection gets exactly one response, and then it is closed. If a request
cannot be read or parsed, the error is printed and the connection is closed
without a response.

### Helpers in `pheasant.server`

- `format_response(payload, content_type)` wraps a payload in a `200 OK`
  response with `Content-Type` and `Content-Length` headers.
- `read_stream(reader)` reads 1024-byte chunks until a short one arrives, then
  decodes the data as UTF-8.
- `into_bytes(value)` serialises a value to JSON and strips the outer
  delimiters. It also unescapes quotes and drops escaped newlines. If the value
  cannot be serialised, it returns `b""`.

### Parsing requests

```python
from pheasant.request import Request

req = Request.parse_from("GET /hello?who=world HTTP/1.1\r\nHost: localhost\r\n\r\n")
req.method                    # HttpMethod.GET
req.headers.headers["Host"]   # " localhost" (values are not trimmed)
req.take_params().get("who")  # "world"
```

`Request.parse_from` reads:

- the method and the path from the request line;
- `HTTP/1.1` or `HTTP/2` as the protocol (`Protocol`);
- query parameters (`RequestParams`);
- headers (`RequestHeaders`);
- a form-encoded body after the blank line (`RequestBody`).

A malformed request raises `PheasantError` from `pheasant.errors`. Its `kind`
attribute is an `ErrorKind`, for example `REQUEST_IS_EMPTY`, `BAD_REQUEST_LINE`,
`BAD_METHOD_NAME` or `BAD_HTTP_VERSION`.

## Development server

The package includes a demo server. It listens on 127.0.0.1, port 8883, by
default:

```
pheasant-dev
pheasant-dev --host 0.0.0.0 --port 8080
```

It serves:

- `/hello?who=...`: greets the `who` parameter.
- `/favicon.ico`: the file `assets/404.svg`, relative to the working directory.
- `/icon?who=<path>`: the file at the given path.

## Limitations

- Every response has status `200 OK`. This includes the not-found page.
- The server reads a request only until the first short read. A body that
  arrives in a later packet is not read.
- There are no keep-alive connections, TLS, chunked encoding, percent-decoding
  of parameters or static-file routing beyond what the services above do.

## Tests

```
pip install .[test]
pytest
```