"""List contacts in directory order.

Usage:
    python scripts/list_contacts.py
    python scripts/list_contacts.py --letter J
"""

import argparse
import asyncio
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from contact_directory.domain.services.directory_service import DirectoryService
from contact_directory.persistence.database import AsyncSessionLocal


async def list_all(letter: str | None = None):
    """Print contacts, optionally only last names starting with a letter."""
    async with AsyncSessionLocal() as db:
        contacts = await DirectoryService(db).list_contacts(letter)

        print(f"{'ID':<6} {'Name':<40} {'Email':<40} {'Phones'}")
        print("-" * 110)

        for contact in contacts:
            phones = ", ".join(
                f"{phone.phone_type}: {phone.number}" for phone in contact.phones if phone.number
            )
            print(f"{contact.id:<6} {contact.name[:38]:<40} {contact.email[:38]:<40} {phones}")

        print()
        print(f"Total contacts: {len(contacts)}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="List directory contacts")
    parser.add_argument("--letter", help="First letter of the last name")
    args = parser.parse_args()
    asyncio.run(list_all(args.letter))
