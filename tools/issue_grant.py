"""Utility to issue an upload grant from the command line.

Handy against Azurite: ``--connection-string UseDevelopmentStorage=true``
prints a grant that the local emulator accepts. With ``--blob`` the full
upload URL is printed so it can be pasted into curl.
"""

from __future__ import annotations

import argparse
import json
import math
import os
import sys
from datetime import timedelta

# Support both running from workspace root and tools directory
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from adapters.settings import ConfigurationError, connection_setting_name, get_storage_connection_string
from core.connection_string import parse_connection_string
from core.errors import CredentialError
from core.token_issuer import issue_grant
from core.upload_grant import UPLOAD_CONTAINER, unique_blob_name


def get_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Issue a short-lived container upload grant.")
    parser.add_argument(
        "--connection-string",
        help=f"Storage connection string. Defaults to ${connection_setting_name()}.",
    )
    parser.add_argument("--container", default=UPLOAD_CONTAINER)
    parser.add_argument(
        "--permissions",
        default="c",
        help="Permission letters to grant (e.g. 'c' or 'rcw').",
    )
    parser.add_argument("--hours", type=float, default=2.0)
    parser.add_argument(
        "--blob",
        help="Print the full upload URL for this file name (a random suffix is added).",
    )
    parser.add_argument("--json", action="store_true", help="Print the grant as JSON.")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = get_parser()
    args = parser.parse_args(argv)

    if not math.isfinite(args.hours) or args.hours <= 0:
        parser.error("--hours must be a positive number.")

    connection_string = args.connection_string or get_storage_connection_string()
    credential = parse_connection_string(connection_string)
    try:
        grant = issue_grant(credential, args.container, args.permissions, timedelta(hours=args.hours))
    except (OverflowError, ValueError) as exc:
        parser.error(str(exc))

    if args.json:
        payload = grant.to_dict()
        payload["expiresOn"] = grant.expires_on.isoformat()
        print(json.dumps(payload, indent=2))
    elif args.blob:
        print(grant.blob_url(unique_blob_name(args.blob)))
    else:
        print(f"URL:     {grant.url}")
        print(f"SAS:     {grant.signed_query}")
        print(f"Expires: {grant.expires_on.isoformat()}")

    return 0


def cli() -> int:
    try:
        return main()
    except (ConfigurationError, CredentialError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(cli())
