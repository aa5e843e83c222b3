"""Non-interactive script to add a user and print a bearer token for it.

Usage:
    python scripts/create_user.py --email "editor@example.com"
    python scripts/create_user.py --email "owner@example.com" --admin
"""

import argparse
import asyncio
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from contact_directory.core.auth import create_user_token
from contact_directory.persistence.database import AsyncSessionLocal
from contact_directory.persistence.repositories.user_repository import UserRepository


async def create_user(email: str, admin: bool = False) -> int:
    """Create a user, or reuse an existing one, and print a token."""
    email = email.lower().strip()
    role = "admin" if admin else "user"

    async with AsyncSessionLocal() as db:
        user_repo = UserRepository(db)

        user = await user_repo.get_by_email(email)
        if user:
            print(f"User already exists: {user.email} (ID: {user.id}, role: {user.role})")
        else:
            user = await user_repo.create(email=email, role=role)
            print(f"Created user: {user.email} (ID: {user.id}, role: {user.role})")

        print()
        print("Bearer token:")
        print(create_user_token(user.id))
        return user.id


def main() -> int:
    parser = argparse.ArgumentParser(description="Add a contact directory user")
    parser.add_argument("--email", required=True, help="User email")
    parser.add_argument("--admin", action="store_true", help="Give the user the admin role")
    args = parser.parse_args()

    if "@" not in args.email:
        print("Invalid email format.")
        return 1

    asyncio.run(create_user(args.email, admin=args.admin))
    return 0


if __name__ == "__main__":
    sys.exit(main())
