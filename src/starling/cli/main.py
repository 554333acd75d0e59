# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Starling command line client."""

from __future__ import annotations

import argparse
import datetime as dt
import json
import sys
from typing import Any

from ..client import Client
from ..config import SANDBOX_URL, ClientSettings, load_access_token, load_client_settings
from ..errors import StarlingError
from ..http import create_default_transport
from ..log import setup_logging
from ..models import DateRange
from ..webhook import sign, validate_body

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2
EXIT_INVALID_SIGNATURE = 3


def _parse_date(value: str) -> dt.date:
    try:
        return dt.date.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid date {value!r}, expected YYYY-MM-DD") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="starling", description="Starling Bank API client")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output JSON instead of human-friendly summary",
    )
    parser.add_argument(
        "--sandbox",
        action="store_true",
        help="Use the sandbox API instead of production",
    )
    parser.add_argument("--base-url", help="Override the API base URL (must end with '/')")
    parser.add_argument("--log-level", help="Logging level (default: $STARLING_LOG_LEVEL or WARNING)")

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("me", help="Show the identity the access token belongs to")
    commands.add_parser("balance", help="Show the account balance")

    transactions = commands.add_parser("transactions", help="List transactions")
    transactions.add_argument("--from", dest="start", type=_parse_date, help="First day (YYYY-MM-DD)")
    transactions.add_argument("--to", dest="end", type=_parse_date, help="Last day (YYYY-MM-DD)")

    sign_cmd = commands.add_parser("sign-webhook", help="Compute the X-Hook-Signature for a body")
    sign_cmd.add_argument("--secret", required=True, help="Shared webhook secret")
    sign_cmd.add_argument("file", nargs="?", type=argparse.FileType("rb"), default="-", help="Body file (default: stdin)")

    verify_cmd = commands.add_parser("verify-webhook", help="Check a webhook body against its signature")
    verify_cmd.add_argument("--secret", required=True, help="Shared webhook secret")
    verify_cmd.add_argument("--signature", required=True, help="Value of the X-Hook-Signature header")
    verify_cmd.add_argument("file", nargs="?", type=argparse.FileType("rb"), default="-", help="Body file (default: stdin)")
    return parser


def _print_json(data: Any) -> None:
    if isinstance(data, list):
        payload = [item.to_mapping() if hasattr(item, "to_mapping") else item for item in data]
    else:
        payload = data.to_mapping() if hasattr(data, "to_mapping") else data
    json.dump(payload, sys.stdout, indent=2, sort_keys=True)
    sys.stdout.write("\n")


def _settings_from_args(args: argparse.Namespace) -> ClientSettings:
    settings = load_client_settings()
    if args.base_url:
        return settings.replace(base_url=args.base_url)
    if args.sandbox:
        return settings.replace(base_url=SANDBOX_URL)
    return settings


def _show_me(client: Client, args: argparse.Namespace) -> None:
    identity = client.user.me()
    if args.json or identity is None:
        _print_json(identity)
        return
    print(f"Customer: {identity.uid}")
    print(f"Authenticated: {'yes' if identity.authenticated else 'no'}")
    print(f"Expires in: {identity.expires_in_seconds}s")
    print(f"Scopes: {', '.join(identity.scopes) if identity.scopes else '-'}")


def _show_balance(client: Client, args: argparse.Namespace) -> None:
    balance = client.accounts.balance()
    if args.json or balance is None:
        _print_json(balance)
        return
    print(f"Effective balance: {balance.effective_balance:.2f} {balance.currency}")
    print(f"Cleared balance: {balance.cleared_balance:.2f} {balance.currency}")
    print(f"Available to spend: {balance.available_to_spend:.2f} {balance.currency}")


def _show_transactions(client: Client, args: argparse.Namespace) -> None:
    date_range = DateRange(args.start, args.end) if args.start else None
    transactions = client.transactions.list(date_range)
    if args.json:
        _print_json(transactions)
        return
    for txn in transactions:
        print(f"{txn.created}  {txn.amount:>10.2f} {txn.currency}  {txn.narrative}")


_API_COMMANDS = {
    "me": _show_me,
    "balance": _show_balance,
    "transactions": _show_transactions,
}


def _read_body(args: argparse.Namespace) -> bytes:
    with args.file as fh:
        return fh.read()


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    if args.command == "sign-webhook":
        print(sign(args.secret, _read_body(args)))
        return EXIT_OK

    if args.command == "verify-webhook":
        if validate_body(_read_body(args), args.signature, args.secret):
            print("valid")
            return EXIT_OK
        print("invalid signature", file=sys.stderr)
        return EXIT_INVALID_SIGNATURE

    if args.command == "transactions" and (args.start is None) != (args.end is None):
        parser.error("--from and --to must be given together")

    token = load_access_token()
    if not token:
        print("error: STARLING_ACCESS_TOKEN is not set", file=sys.stderr)
        return EXIT_USAGE

    settings = _settings_from_args(args)
    transport = create_default_transport(settings, token=token)
    try:
        with transport, Client(transport, settings) as client:
            _API_COMMANDS[args.command](client, args)
    except StarlingError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
