import pytest

from webserv.request import Request
from webserv.status import Method, StatusCode, status_message
from webserv.tools import FatalError

INDEX = b"<html>index</html>"
NOT_FOUND = b"<html>missing</html>"
ADDRESS = ("127.0.0.1", 8080)


@pytest.fixture
def site(tmp_path):
    html = tmp_path / "html"
    html.mkdir()
    (html / "index.html").write_bytes(INDEX)
    (html / "NOT_FOUND.html").write_bytes(NOT_FOUND)
    (tmp_path / "style.css").write_bytes(b"body {}")
    return tmp_path


def make(raw, root):
    return Request(raw, ADDRESS, root)


def test_get_existing_file(site):
    req = make("GET /html/index.html HTTP/1.1\r\nHost: x\r\n\r\n", site)
    assert req.status_code is StatusCode.OK
    assert req.method is Method.GET
    assert req.body == INDEX
    assert req.status_line == "HTTP/1.1 200 OK\r\n"
    assert f"Content-Length: {len(INDEX)}\r\n" in req.header
    assert "Content-Type: text/html; charset=UTF-8\r\n" in req.header


def test_root_serves_index(site):
    req = make("GET / HTTP/1.1\r\n\r\n", site)
    assert req.status_code is StatusCode.OK
    assert req.body == INDEX


def test_content_type_follows_file(site):
    req = make("GET /style.css HTTP/1.1\r\n\r\n", site)
    assert "Content-Type: text/css; charset=UTF-8\r\n" in req.header


def test_host_header_uses_address(site):
    req = make("GET / HTTP/1.1\r\n\r\n", site)
    assert req.header.startswith("Host: 127.0.0.1:8080\r\n")
    assert req.header.endswith("\r\n\r\n")


def test_missing_file_is_not_found(site):
    req = make("GET /nope.html HTTP/1.1\r\n\r\n", site)
    assert req.status_code is StatusCode.NOT_FOUND
    assert req.body == NOT_FOUND
    assert req.status_line == f"HTTP/1.1 404 {status_message(404)}\r\n"


def test_directory_is_not_found(site):
    req = make("GET /html HTTP/1.1\r\n\r\n", site)
    assert req.status_code is StatusCode.NOT_FOUND


def test_missing_error_page_is_fatal(tmp_path):
    with pytest.raises(FatalError):
        make("GET /nope.html HTTP/1.1\r\n\r\n", tmp_path)


def test_empty_request_is_fatal(site):
    with pytest.raises(FatalError):
        make("", site)


@pytest.mark.parametrize(
    "raw",
    [
        "GET / HTTP/1.0\r\n\r\n",
        "PUT / HTTP/1.1\r\n\r\n",
        "DELETE / HTTP/1.1\r\n\r\n",
        "GET /\r\n\r\n",
        "BREW / HTTP/1.1\r\n\r\n",
    ],
)
def test_bad_requests(site, raw):
    req = make(raw, site)
    assert req.status_code is StatusCode.BAD_REQUEST
    assert req.body == b""
    assert "Content-Type" not in req.header


def test_post_collects_fields(site):
    req = make("POST /form HTTP/1.1\r\nHost: x\r\n\r\nname=a&age=3", site)
    assert req.status_code is StatusCode.OK_NO_CONTENT
    assert req.fields == ["name=a", "age=3"]
    assert req.body == b""
    assert "Content-Length" not in req.header


def test_bytes_input_is_accepted(site):
    req = make(b"GET / HTTP/1.1\r\n\r\n", site)
    assert req.body == INDEX


def test_to_bytes_matches_parts(site):
    req = make("GET / HTTP/1.1\r\n\r\n", site)
    data = req.to_bytes()
    assert data == (req.status_line + req.header).encode() + req.body
    assert data.endswith(b"\r\n\r\n" + INDEX)


def test_http_string_matches_bytes(site):
    req = make("GET / HTTP/1.1\r\n\r\n", site)
    assert req.http_string().encode() == req.to_bytes()