import pytest

from webserv.status import StatusCode, status_message


def test_not_found_message():
    assert status_message(StatusCode.NOT_FOUND) == "Not Found"


def test_no_content_message_from_plain_int():
    assert status_message(204) == "No Content"


def test_ok_message():
    assert status_message(200) == "OK"


@pytest.mark.parametrize("code", [418, 0, 999, 500])
def test_unknown_and_server_error_share_fallback(code):
    assert status_message(code) == status_message(StatusCode.INTERNAL_SERVER_ERROR)


def test_every_known_code_has_its_own_message():
    known = [c for c in StatusCode if c is not StatusCode.INTERNAL_SERVER_ERROR]
    messages = {status_message(c) for c in known}
    assert len(messages) == len(known)
    assert status_message(StatusCode.INTERNAL_SERVER_ERROR) not in messages