"""Parsing of a raw HTTP request and building of the matching response."""

from __future__ import annotations

import logging
from pathlib import Path

from .mime import content_type
from .status import Method, StatusCode, status_message
from .tools import fatal, split

logger = logging.getLogger(__name__)

_SUPPORTED_VERSIONS = ("HTTP/1.1\r", "HTTP/1.1")
_HANDLED_METHODS = {"GET": Method.GET, "POST": Method.POST}
_INDEX = "/html/index.html"
_NOT_FOUND_PAGE = "html/NOT_FOUND.html"
_BAD_REQUEST_PAGE = "html/BAD_REQUEST.html"
_ERROR_PAGES = {
    StatusCode.NOT_FOUND: _NOT_FOUND_PAGE,
    StatusCode.BAD_REQUEST: _BAD_REQUEST_PAGE,
}


class Request:
    """One HTTP request and the response built for it.

    ``address`` is the ``(host, port)`` reported in the ``Host`` header and
    ``root`` is the directory files are served from.
    """

    def __init__(
        self,
        raw: str | bytes,
        address: tuple[str, int] = ("0.0.0.0", 0),
        root: str | Path = ".",
    ) -> None:
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8", errors="replace")
        if not raw:
            fatal("Bad HTTP REQUEST")
        self.raw = raw
        self.address = address
        self.root = Path(root)
        self.method: Method | None = None
        self.file_name = ""
        self.fields: list[str] = []
        self.body = b""
        self._content: bytes | None = None

        request_line = raw.split("\n", 1)[0]
        self.status_code = self._parse_request_line(split(request_line, " "))
        self.status_line = (
            f"HTTP/1.1 {int(self.status_code)} {status_message(self.status_code)}\r\n"
        )
        if self.method is Method.GET:
            self._create_body()
        self.header = self._create_header()

    def _parse_request_line(self, parts: list[str]) -> StatusCode:
        if len(parts) != 3 or parts[2] not in _SUPPORTED_VERSIONS:
            self.file_name = _BAD_REQUEST_PAGE
            return StatusCode.BAD_REQUEST
        method = _HANDLED_METHODS.get(parts[0])
        if method is None:
            self.file_name = _BAD_REQUEST_PAGE
            return StatusCode.BAD_REQUEST
        self.method = method
        if method is Method.GET:
            return self._get(parts[1])
        return self._post()

    def _get(self, target: str) -> StatusCode:
        if target == "/":
            target = _INDEX
        self.file_name = target
        root = self.root.resolve()
        path = (root / target[1:]).resolve()
        if path.is_relative_to(root):
            try:
                self._content = path.read_bytes()
            except OSError:
                self._content = None
        if self._content is None:
            self.file_name = _NOT_FOUND_PAGE
            return StatusCode.NOT_FOUND
        return StatusCode.OK

    def _post(self) -> StatusCode:
        newline = self.raw.rfind("\n")
        last_line = self.raw[newline + 1 :] if newline != -1 else ""
        self.fields = split(last_line, "&")
        logger.debug("form fields received: %s", self.fields)
        return StatusCode.OK_NO_CONTENT

    def _create_body(self) -> None:
        if self._content is None:
            page = _ERROR_PAGES.get(self.status_code)
            if page is None:
                fatal("open")
            try:
                self._content = (self.root / page).read_bytes()
            except OSError:
                fatal("open")
        self.body = self._content

    def _create_header(self) -> str:
        host, port = self.address
        header = f"Host: {host}:{port}\r\n"
        if self.method is Method.GET:
            header += f"Content-Type: {content_type(self.file_name)}; charset=UTF-8\r\n"
            header += f"Content-Length: {len(self.body)}\r\n"
        return header + "\r\n"

    def http_string(self) -> str:
        """Return the whole response as text."""
        return self.status_line + self.header + self.body.decode("utf-8", errors="replace")

    def to_bytes(self) -> bytes:
        """Return the whole response as bytes ready to send."""
        return (self.status_line + self.header).encode("utf-8") + self.body