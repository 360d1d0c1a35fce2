#!/usr/bin/env python3
"""
Create a user directly in the SQL database.

Usage:
  python scripts/add_user.py --email alice@example.com --name "Alice"
"""
from __future__ import annotations

import argparse
import sys

from user_lifecycle.core.logging import configure_logging
from user_lifecycle.domain.users import CreateUserRequest
from user_lifecycle.repositories.sql_repository import SQLUserRepository
from user_lifecycle.services.user_service import UserService


def main() -> None:
    ap = argparse.ArgumentParser(description="Create a user in the SQL database")
    ap.add_argument("--email", required=True, help="Email (must match ALLOWED_EMAIL_DOMAIN)")
    ap.add_argument("--name", default="", help="Display name")
    args = ap.parse_args()

    configure_logging()
    svc = UserService(SQLUserRepository())
    user = svc.create_user(CreateUserRequest(email=args.email, name=args.name))
    print("OK: user created")
    print(f"  ID: {user.id}")
    print(f"  Email: {user.email}")
    if user.name:
        print(f"  Name: {user.name}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
