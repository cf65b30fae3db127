"""
Command-line interface for poking at the RazorpayX API.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Sequence, TextIO, Tuple

from .api import RazorpayxClient, create_client
from .core.errors import ApiError, ConfigurationError, ValidationError
from .core.webhooks import validate_webhook_signature

RESOURCES = ("contacts", "fund_accounts", "payouts", "payout_links", "transactions")
ACCOUNT_SCOPED = frozenset({"payouts", "transactions"})


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )


def _env_override(value: str) -> Tuple[str, str]:
    if "=" not in value:
        raise argparse.ArgumentTypeError("Overrides must look like KEY=VALUE")
    key, val = value.split("=", 1)
    key = key.strip()
    if not key:
        raise argparse.ArgumentTypeError("Override key must not be empty")
    return key, val


def _collect_overrides(pairs: Iterable[Tuple[str, str]]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for key, value in pairs:
        overrides[key] = value
    return overrides


def _date_option(value: str) -> Any:
    """Unix seconds stay numeric; anything else is left for the date parser."""
    return int(value) if value.isascii() and value.isdigit() else value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="razorpayx",
        description="Query the RazorpayX payouts API and check webhook signatures",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing RAZORPAYX_* settings (default: .env)",
    )
    parser.add_argument(
        "--set",
        action="append",
        type=_env_override,
        metavar="KEY=VALUE",
        default=None,
        help="Override an environment variable without editing the .env file",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    fetch = commands.add_parser("fetch", help="Fetch a single entity by id")
    fetch.add_argument("resource", choices=RESOURCES)
    fetch.add_argument("entity_id")

    listing = commands.add_parser("list", help="Fetch a page of entities")
    listing.add_argument("resource", choices=RESOURCES)
    listing.add_argument(
        "--account-number",
        help="RazorpayX account number (required for payouts and transactions)",
    )
    listing.add_argument("--count", type=int, help="Page size, at most 100 (default: 10)")
    listing.add_argument("--skip", type=int, help="Entities to skip (default: 0)")
    listing.add_argument(
        "--from",
        dest="from_",
        type=_date_option,
        help="Start of the time range, as Unix seconds or a date string",
    )
    listing.add_argument(
        "--to",
        type=_date_option,
        help="End of the time range, as Unix seconds or a date string",
    )

    verify = commands.add_parser("verify-webhook", help="Check a webhook signature")
    verify.add_argument("--secret", required=True, help="Webhook secret from the dashboard")
    verify.add_argument(
        "--signature",
        required=True,
        help="Value of the X-Razorpay-Signature header",
    )
    verify.add_argument(
        "--body-file",
        help="File holding the raw request body (default: read stdin)",
    )
    return parser


def _print_json(payload: Any, stream: TextIO) -> None:
    json.dump(payload, stream, indent=2, sort_keys=True)
    stream.write("\n")


def _fetch(client: RazorpayxClient, args: argparse.Namespace) -> Any:
    resource = getattr(client, args.resource)
    return resource.fetch(args.entity_id).data


def _list(client: RazorpayxClient, args: argparse.Namespace) -> Any:
    params: Dict[str, Any] = {
        "from": args.from_,
        "to": args.to,
        "count": args.count,
        "skip": args.skip,
    }
    params = {key: value for key, value in params.items() if value is not None}
    resource = getattr(client, args.resource)
    if args.resource in ACCOUNT_SCOPED:
        return resource.fetch_all(args.account_number, params).data
    return resource.fetch_all(params).data


def _verify_webhook(args: argparse.Namespace, stdin: TextIO) -> int:
    if args.body_file:
        body = Path(args.body_file).read_text(encoding="utf-8")
    else:
        body = stdin.read()

    if validate_webhook_signature(body, args.signature, args.secret):
        logging.info("Webhook signature is valid")
        return 0
    logging.error("Webhook signature does not match the body")
    return 1


def run_cli(
    argv: Sequence[str] | None = None,
    *,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    _configure_logging(args.log_level)

    if args.command == "verify-webhook":
        return _verify_webhook(args, stdin)

    overrides = _collect_overrides(args.set or ())
    try:
        client = create_client(env_file=args.env_file, overrides=overrides)
    except ConfigurationError as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    handler = _fetch if args.command == "fetch" else _list
    try:
        payload = handler(client, args)
    except (ConfigurationError, ValidationError) as exc:
        logging.error("Invalid request: %s", exc)
        return 1
    except ApiError as exc:
        logging.error("Request failed: %s", exc)
        return 1

    _print_json(payload, stdout)
    return 0


def main() -> None:
    sys.exit(run_cli())


if __name__ == "__main__":
    main()
