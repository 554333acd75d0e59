# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import json

import httpx
import pytest

from starling.cli import main as cli
from starling.config import SANDBOX_URL

SECRET = "1234567890"
SIGNATURE = "05pnHTd02EsPBgaFi7EFB7lUHQo1RTKVFUBrcXLbrHNNft6G34v4qMAak6rjO0hqwoW9a4DpQ5X8Hc65/JHuUw=="


@pytest.fixture
def body_file(tmp_path):
    path = tmp_path / "body.txt"
    path.write_bytes(b"this is the request body")
    return path


@pytest.fixture
def fake_api(monkeypatch):
    seen = {"requests": [], "settings": None, "token": None}
    routes = {
        "/api/v1/me": {"customerUid": "c1", "authenticated": True, "expiresInSeconds": 60, "scopes": ["balance:read"]},
        "/api/v1/accounts/balance": {"effectiveBalance": 12.5, "clearedBalance": 10.0, "currency": "GBP"},
        "/api/v1/transactions": {
            "_embedded": {"transactions": [{"id": "t1", "amount": -4.2, "currency": "GBP", "narrative": "Coffee"}]}
        },
    }

    def handler(request):
        seen["requests"].append(request)
        if request.url.path not in routes:
            return httpx.Response(404, json={"message": "No such endpoint"})
        return httpx.Response(200, json=routes[request.url.path])

    def fake_transport(settings=None, *, token=None):
        seen["settings"] = settings
        seen["token"] = token
        return httpx.Client(transport=httpx.MockTransport(handler))

    monkeypatch.setenv("STARLING_ACCESS_TOKEN", "tok-123")
    monkeypatch.delenv("STARLING_BASE_URL", raising=False)
    monkeypatch.setattr(cli, "create_default_transport", fake_transport)
    return seen


def test_build_parser_global_flags():
    args = cli.build_parser().parse_args(["--json", "--sandbox", "transactions", "--from", "2024-01-01", "--to", "2024-01-31"])
    assert args.json is True
    assert args.sandbox is True
    assert args.command == "transactions"
    assert args.start.isoformat() == "2024-01-01"
    assert args.end.isoformat() == "2024-01-31"


def test_bad_date_is_a_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["transactions", "--from", "01/02/2024", "--to", "2024-01-31"])
    assert excinfo.value.code == 2


def test_missing_command_is_a_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        cli.main([])
    assert excinfo.value.code == 2


def test_sign_webhook(body_file, capsys):
    assert cli.main(["sign-webhook", "--secret", SECRET, str(body_file)]) == 0
    assert capsys.readouterr().out.strip() == SIGNATURE


def test_verify_webhook(body_file, capsys):
    assert cli.main(["verify-webhook", "--secret", SECRET, "--signature", SIGNATURE, str(body_file)]) == 0
    assert "valid" in capsys.readouterr().out

    assert cli.main(["verify-webhook", "--secret", "wrong", "--signature", SIGNATURE, str(body_file)]) == 3
    assert "invalid signature" in capsys.readouterr().err


def test_me_pretty(fake_api, capsys):
    assert cli.main(["me"]) == 0
    out = capsys.readouterr().out
    assert "Customer: c1" in out
    assert "balance:read" in out
    assert fake_api["token"] == "tok-123"


def test_balance_json(fake_api, capsys):
    assert cli.main(["--json", "balance"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["effectiveBalance"] == 12.5
    assert payload["currency"] == "GBP"


def test_transactions_with_range(fake_api, capsys):
    assert cli.main(["transactions", "--from", "2024-01-01", "--to", "2024-01-31"]) == 0
    assert "Coffee" in capsys.readouterr().out
    assert fake_api["requests"][0].url.params["from"] == "2024-01-01"


def test_transactions_range_needs_both_ends(fake_api):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["transactions", "--from", "2024-01-01"])
    assert excinfo.value.code == 2


def test_sandbox_and_base_url_flags(fake_api):
    cli.main(["--sandbox", "me"])
    assert fake_api["settings"].base_url == SANDBOX_URL

    cli.main(["--sandbox", "--base-url", "http://localhost:9000/", "me"])
    assert fake_api["settings"].base_url == "http://localhost:9000/"
    assert str(fake_api["requests"][-1].url) == "http://localhost:9000/api/v1/me"


def test_api_error_exit_code(fake_api, monkeypatch, capsys):
    monkeypatch.setenv("STARLING_BASE_URL", "https://api.example.com/nested/")
    assert cli.main(["me"]) == 1
    assert "No such endpoint" in capsys.readouterr().err


def test_missing_token(monkeypatch, capsys):
    monkeypatch.delenv("STARLING_ACCESS_TOKEN", raising=False)
    assert cli.main(["balance"]) == 2
    assert "STARLING_ACCESS_TOKEN" in capsys.readouterr().err
