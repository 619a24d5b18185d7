"""HTTP status codes, request methods and their reason phrases."""

from __future__ import annotations

from enum import IntEnum

DEFAULT_PORT = 8080


class StatusCode(IntEnum):
    """Status codes the server knows how to describe."""

    OK = 200
    OK_CREATED = 201
    OK_NO_CONTENT = 204
    MOVED_TO_NEW_URL = 301
    NOT_MODIFIED = 304
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    NOT_FOUND = 404
    INTERNAL_SERVER_ERROR = 500


class Method(IntEnum):
    """HTTP request methods."""

    GET = 1
    POST = 2
    PUT = 3
    DELETE = 4


_MESSAGES = {
    StatusCode.OK: "OK",
    StatusCode.OK_CREATED: "OK CREATED",
    StatusCode.OK_NO_CONTENT: "No Content",
    StatusCode.MOVED_TO_NEW_URL: "MOVED TO NEW URL",
    StatusCode.NOT_MODIFIED: "NOT MODIFIED",
    StatusCode.BAD_REQUEST: "BAD REQUEST",
    StatusCode.UNAUTHORIZED: "UNAUTHORIZED",
    StatusCode.NOT_FOUND: "Not Found",
}

_FALLBACK_MESSAGE = "INTERNAL SERVER ERRROR"


def status_message(code: int) -> str:
    """Return the reason phrase for ``code``; unknown codes get the server-error phrase."""
    try:
        return _MESSAGES[StatusCode(code)]
    except (ValueError, KeyError):
        return _FALLBACK_MESSAGE