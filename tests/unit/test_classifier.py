# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from starling.errors import ApiMessageError, ApiPayloadError, ApiStatusError, DecodeError
from starling.http.classifier import (
    OpaqueError,
    StandardError,
    StatusError,
    Success,
    classify,
    standard_error_message,
    unwrap_outcome,
)
from starling.http.models import RawResponse
from starling.models import Account, Balance, ErrorDetail


def _response(status, body=b"", reason=""):
    return RawResponse(status_code=status, reason_phrase=reason, content=body)


def test_success_decodes_into_target():
    outcome = classify(_response(200, b'{"effectiveBalance": 12.5, "currency": "GBP"}'), Balance)
    assert isinstance(outcome, Success)
    assert outcome.value.effective_balance == 12.5
    assert outcome.value.currency == "GBP"


def test_success_without_target_gives_plain_json():
    outcome = classify(_response(200, b'{"a": [1, 2]}'))
    assert outcome == Success({"a": [1, 2]})


@pytest.mark.parametrize("status", [200, 201, 204, 299])
def test_empty_2xx_body_is_success_without_value(status):
    assert classify(_response(status), Balance) == Success(None)


@pytest.mark.parametrize("body", [b"null", b"null\n"])
def test_null_2xx_body_is_success_without_value(body):
    assert classify(_response(200, body), Account) == Success(None)


def test_non_json_2xx_body_is_a_decode_error():
    response = _response(200, b"<html>maintenance</html>")
    with pytest.raises(DecodeError) as excinfo:
        classify(response, Balance)
    assert excinfo.value.response is response


def test_2xx_body_of_the_wrong_shape_is_a_decode_error():
    with pytest.raises(DecodeError):
        classify(_response(200, b'{"effectiveBalance": "lots"}'), Balance)


def test_standard_error_shape():
    outcome = classify(_response(404, b'{"message": "Account not found"}', "Not Found"), Balance)
    assert outcome == StandardError("Account not found")


def test_standard_error_shape_without_target():
    assert classify(_response(400, b'{"message": "bad"}')) == StandardError("bad")


def test_opaque_error_payload():
    body = b'[{"message": "name is required"}, {"message": "currency is required"}]'
    outcome = classify(_response(400, body, "Bad Request"), list[ErrorDetail])
    assert isinstance(outcome, OpaqueError)
    assert [item.message for item in outcome.payload] == ["name is required", "currency is required"]


def test_undecodable_error_body_falls_back_to_status():
    outcome = classify(_response(500, b"<html>oops</html>", "Internal Server Error"), Balance)
    assert outcome == StatusError(500, "500 Internal Server Error")


def test_error_without_target_and_without_message_is_status_error():
    assert classify(_response(502, b'{"error": "gateway"}', "Bad Gateway")) == StatusError(502, "502 Bad Gateway")


def test_empty_or_non_string_message_is_not_standard():
    assert standard_error_message(b'{"message": ""}') is None
    assert standard_error_message(b'{"message": 42}') is None
    assert standard_error_message(b'{"Message": "capitalised"}') is None
    assert standard_error_message(b'["message"]') is None
    assert standard_error_message(b"") is None


def test_informational_status_is_not_success():
    assert classify(_response(101, b"", "Switching Protocols")) == StatusError(101, "101 Switching Protocols")


def test_redirect_status_is_not_success():
    outcome = classify(_response(302, b"", "Found"), Balance)
    assert outcome == StatusError(302, "302 Found")


def test_unwrap_success_returns_value():
    response = _response(200, b"{}")
    assert unwrap_outcome(Success({"x": 1}), response) == {"x": 1}


def test_unwrap_standard_error_uses_message_verbatim():
    response = _response(404, b'{"message": "Account not found"}', "Not Found")
    with pytest.raises(ApiMessageError) as excinfo:
        unwrap_outcome(classify(response, Balance), response)
    assert str(excinfo.value) == "Account not found"
    assert excinfo.value.response is response
    assert excinfo.value.status_code == 404


def test_unwrap_opaque_error_keeps_payload():
    response = _response(400, b'[{"message": "nope"}]', "Bad Request")
    with pytest.raises(ApiPayloadError) as excinfo:
        unwrap_outcome(classify(response, list[ErrorDetail]), response)
    assert str(excinfo.value) == "400 Bad Request"
    assert excinfo.value.payload[0].message == "nope"


def test_unwrap_status_error_reports_status_line():
    response = _response(503, b"", "Service Unavailable")
    with pytest.raises(ApiStatusError) as excinfo:
        unwrap_outcome(classify(response, Balance), response)
    assert str(excinfo.value) == "503 Service Unavailable"
