#!/usr/bin/env python3
"""
Create or promote a catalog administrator.

The user is stored in catalog_users with status 'approved' and is_admin set.
If the email is already registered, the existing row is promoted and its
password is replaced.

Usage:
    python scripts/seed_admin.py --email admin@example.com --password 'S3cret-pass' --name Admin
"""

import argparse
import asyncio
import logging
import os
import sys

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from werkzeug.security import generate_password_hash

from catalog.db.client import get_supabase_client
from catalog.services.user_service import get_user_by_email, register_user
from catalog.utils.constants import USERS_TABLE

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
logger = logging.getLogger("seed_admin")


async def seed_admin(email: str, password: str, name: str) -> str:
    client = get_supabase_client()

    user = await get_user_by_email(client, email)
    if user is None:
        user = await register_user(client, email=email, password=password, name=name)
        action = "created"
    else:
        action = "updated"

    client.table(USERS_TABLE).update({
        "status": "approved",
        "is_admin": True,
        "password_hash": generate_password_hash(password),
    }).eq("id", user["id"]).execute()

    logger.info(f"Admin user {action}: {user['id']}")
    return action


def main() -> None:
    parser = argparse.ArgumentParser(description="Create or promote a catalog admin user")
    parser.add_argument("--email", required=True, help="Admin login email")
    parser.add_argument("--password", required=True, help="Admin password")
    parser.add_argument("--name", default="Administrator", help="Display name")
    args = parser.parse_args()

    asyncio.run(seed_admin(args.email, args.password, args.name))


if __name__ == "__main__":
    main()
