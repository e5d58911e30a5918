import pytest

from pheasant.cli import Who, build_server, favicon, hello, main, svg
from pheasant.methods import HttpMethod
from pheasant.request import Request


@pytest.fixture
def server():
    srv = build_server("127.0.0.1", 0)
    yield srv
    srv.socket.close()


def test_who_from_request():
    req = Request.parse_from("GET /hello?who=ann HTTP/1.1\r\n\r\n")
    assert Who.from_request(req) == Who("ann")
    assert req.params is None


def test_who_missing_raises():
    with pytest.raises(KeyError):
        Who.from_request(Request.parse_from("GET /hello HTTP/1.1\r\n\r\n"))


@pytest.mark.asyncio
async def test_hello():
    assert await hello(Who("bob")) == b"<h1>hello bob</h1>"


@pytest.mark.asyncio
async def test_svg_reads_named_file(tmp_path):
    path = tmp_path / "icon.svg"
    path.write_text("<svg/>")
    assert await svg(Who(str(path))) == b"<svg/>"


@pytest.mark.asyncio
async def test_favicon_reads_asset(tmp_path, monkeypatch):
    (tmp_path / "assets").mkdir()
    (tmp_path / "assets" / "404.svg").write_text("<svg>icon</svg>")
    monkeypatch.chdir(tmp_path)
    assert await favicon(None) == b"<svg>icon</svg>"


def test_services_registered(server):
    for uri in ("/hello", "/favicon.ico", "/icon"):
        assert server.match_service(HttpMethod.GET, uri).uri == uri


@pytest.mark.asyncio
async def test_hello_through_server(server):
    response = await server.respond("GET /hello?who=bob HTTP/1.1\r\n\r\n")
    assert b"Content-Type: text/html" in response
    assert response.endswith(b"<h1>hello bob</h1>\r\n")


def test_main_rejects_bad_port():
    with pytest.raises(SystemExit) as info:
        main(["--port", "notanumber"])
    assert info.value.code == 2