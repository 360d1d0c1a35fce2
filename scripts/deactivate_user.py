#!/usr/bin/env python3
"""
Deactivate a user in the SQL database. Unknown ids are a no-op.

Usage:
  python scripts/deactivate_user.py --id 6f1c...
"""
from __future__ import annotations

import argparse
import sys

from user_lifecycle.core.logging import configure_logging
from user_lifecycle.repositories.sql_repository import SQLUserRepository
from user_lifecycle.services.user_service import UserService


def main() -> None:
    ap = argparse.ArgumentParser(description="Deactivate a user in the SQL database")
    ap.add_argument("--id", required=True, help="User id")
    args = ap.parse_args()

    user_id = (args.id or "").strip()
    if not user_id:
        raise SystemExit("Invalid id")

    configure_logging()
    svc = UserService(SQLUserRepository())
    svc.deactivate_user(user_id)
    user = svc.get_user(user_id)
    if user is None:
        print(f"No user with id '{user_id}'; nothing to do")
        return
    print("OK: user deactivated")
    print(f"  ID: {user.id}")
    print(f"  Email: {user.email}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
