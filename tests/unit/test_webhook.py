# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import io

import pytest

from starling import webhook
from starling.errors import InvalidPayloadError, MissingBodyError, WebhookReadError
from starling.models import MastercardTransactionPayload, WebhookPayload

BODY = b"this is the request body"
SECRET = "1234567890"
SIGNATURE = "05pnHTd02EsPBgaFi7EFB7lUHQo1RTKVFUBrcXLbrHNNft6G34v4qMAak6rjO0hqwoW9a4DpQ5X8Hc65/JHuUw=="


def _environ(body=BODY, signature=SIGNATURE, content_length=True):
    environ = {"REQUEST_METHOD": "POST", "wsgi.input": io.BytesIO(body)}
    if content_length:
        environ["CONTENT_LENGTH"] = str(len(body))
    if signature is not None:
        environ["HTTP_X_HOOK_SIGNATURE"] = signature
    return environ


class BrokenStream:
    def read(self, size=-1):  # noqa: ARG002
        raise OSError("client went away")


class FakeRequest:
    def __init__(self, environ):
        self.environ = environ


def test_sign_matches_known_signature():
    assert webhook.sign(SECRET, BODY) == SIGNATURE


def test_valid_signature():
    assert webhook.validate(_environ(), SECRET) is True


@pytest.mark.parametrize(
    "environ, secret",
    [
        (_environ(signature="x" + SIGNATURE[1:]), SECRET),
        (_environ(body=b"this is the request body!"), SECRET),
        (_environ(), "0987654321"),
        (_environ(signature=""), SECRET),
        (_environ(signature=None), SECRET),
        (_environ(signature=SIGNATURE.rstrip("=")), SECRET),
    ],
)
def test_invalid_signatures(environ, secret):
    assert webhook.validate(environ, secret) is False


def test_body_is_still_readable_after_validation():
    environ = _environ()
    assert webhook.validate(environ, SECRET) is True
    assert environ["wsgi.input"].read() == BODY
    assert environ["CONTENT_LENGTH"] == str(len(BODY))


def test_body_is_still_readable_after_failed_validation():
    environ = _environ(signature="nope")
    assert webhook.validate(environ, SECRET) is False
    assert environ["wsgi.input"].read() == BODY


def test_body_without_content_length_is_read_to_end():
    environ = _environ(content_length=False)
    assert webhook.validate(environ, SECRET) is True
    assert environ["wsgi.input"].read() == BODY


def test_request_object_exposing_environ():
    request = FakeRequest(_environ())
    assert webhook.validate(request, SECRET) is True
    assert request.environ["wsgi.input"].read() == BODY


def test_missing_body_raises():
    environ = _environ()
    del environ["wsgi.input"]
    with pytest.raises(MissingBodyError) as excinfo:
        webhook.validate(environ, SECRET)
    assert str(excinfo.value) == "no body to validate"


def test_read_failure_raises():
    environ = _environ()
    environ["wsgi.input"] = BrokenStream()
    with pytest.raises(WebhookReadError):
        webhook.validate(environ, SECRET)


def test_non_environ_argument_is_rejected():
    with pytest.raises(TypeError):
        webhook.validate(object(), SECRET)


def test_validate_body_accepts_bytes_secret():
    assert webhook.validate_body(BODY, SIGNATURE, SECRET.encode()) is True
    assert webhook.validate_body(BODY, None, SECRET) is False


def test_parse_transaction_webhook():
    body = (
        b'{"webhookNotificationUid": "n1", "customerUid": "c1", "webhookType": "TRANSACTION_CARD",'
        b' "timestamp": "2024-01-02T03:04:05.000Z",'
        b' "content": {"class": "UNKNOWN", "transactionUid": "t1", "amount": -12.5, "type": "TRANSACTION_CARD"}}'
    )
    payload = webhook.parse_payload(body)
    assert isinstance(payload, WebhookPayload)
    assert payload.content.class_ == "UNKNOWN"
    assert payload.content.transaction_uid == "t1"
    assert payload.content.amount == -12.5
    assert payload.timestamp.year == 2024


def test_parse_mastercard_webhook():
    body = (
        b'{"webhookNotificationUid": "n2", "customerUid": "c1", "eventUid": "e1",'
        b' "transactionAmount": {"currency": "GBP", "minorUnits": -1250},'
        b' "merchantPosData": {"cardLast4": "1234", "country": "GBR"}}'
    )
    payload = webhook.parse_payload(body)
    assert isinstance(payload, MastercardTransactionPayload)
    assert payload.transaction_amount.minor_units == -1250
    assert payload.merchant_pos_data.card_last4 == "1234"


@pytest.mark.parametrize("body", [b"not json", b"[1, 2]", b'{"content": "scalar"}'])
def test_parse_rejects_unknown_payloads(body):
    with pytest.raises(InvalidPayloadError):
        webhook.parse_payload(body)
