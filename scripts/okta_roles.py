"""Query Okta group membership through the role manager.

This module serves as a CLI wrapper around okta_rbac.OktaRoleManager, handy
for checking what an authorization engine will see for a user or group.
"""
from __future__ import annotations
import argparse
import logging
import os
import sys
from pathlib import Path

SCRIPT_DIR = Path(__file__).parent
PROJECT_ROOT = SCRIPT_DIR.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import requests

from okta_rbac.config import load_settings
from okta_rbac.core import OktaRoleManager, RoleManagerError, new_role_manager
from okta_rbac.core.okta import OktaError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Okta role manager helper")
    parser.add_argument("--okta-domain", default=os.environ.get("OKTA_DOMAIN"))
    parser.add_argument("--api-token", default=None,
                        help="API token (default: OKTA_API_TOKEN or /run/secrets/okta_api_token)")
    parser.add_argument("--log-level", default="WARNING")

    sub = parser.add_subparsers(dest="cmd")

    hl = sub.add_parser("has-link", help="Check whether a user is a member of a group")
    hl.add_argument("user")
    hl.add_argument("role")

    sr = sub.add_parser("roles", help="List the groups of a user")
    sr.add_argument("user")

    su = sub.add_parser("users", help="List the active members of a group")
    su.add_argument("role")

    return parser


def _role_manager(args: argparse.Namespace) -> OktaRoleManager:
    if args.okta_domain and args.api_token:
        return new_role_manager(args.okta_domain, args.api_token)
    config = load_settings(okta_domain=args.okta_domain, okta_api_token=args.api_token)
    return OktaRoleManager.from_settings(config)


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.cmd:
        parser.print_help()
        return 0

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    try:
        rm = _role_manager(args)
    except (RuntimeError, ValueError) as e:
        parser.error(str(e))

    try:
        if args.cmd == "has-link":
            print("true" if rm.has_link(args.user, args.role) else "false")
        elif args.cmd == "roles":
            for role in rm.get_roles(args.user):
                print(role)
        elif args.cmd == "users":
            for user in rm.get_users(args.role):
                print(user)
    except (RoleManagerError, OktaError, requests.RequestException) as e:
        print(f"[{args.cmd}] Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
