#!/usr/bin/env python3
"""Validate public profile links in the database.

This script checks that every user has a public identifier under the
configured identity strategy and that the identifier resolves back to
the same user.
"""

import asyncio
import sys
from pathlib import Path

# Add parent directory to path to import from src
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.core.config import get_settings
from src.core.supabase import get_supabase_client
from src.services.identity_resolver import create_identity_resolver
from src.services.user_service import UserService


def user_columns(resolver) -> str:
    """Columns to fetch for the link check.

    username is only selected when the active strategy needs it, since the
    column is absent on email-slug schemas.
    """
    return ", ".join(dict.fromkeys(("id", "email", "full_name", *resolver.owner_fields)))


async def check_user(resolver, user: dict) -> tuple[str | None, str]:
    """Compute a user's link and resolve it back.

    Returns:
        tuple: (public identifier or None, status label)
    """
    identifier = resolver.public_identifier(user)
    if not identifier:
        return None, "NO LINK"

    result = await resolver.resolve(identifier)
    if result.error:
        if result.error.is_not_found:
            return identifier, "UNRESOLVED"
        return identifier, f"ERROR: {result.error.message}"
    if str(result.data.get("id")) != str(user.get("id")):
        return identifier, "WRONG USER"
    return identifier, "OK"


async def run() -> int:
    settings = get_settings()
    print(f"🔍 Validating profile links (strategy: {settings.identity_strategy.value})...\n")

    try:
        client = get_supabase_client()
    except Exception as e:
        print(f"❌ Error: Failed to initialize Supabase client: {e}")
        return 1

    resolver = create_identity_resolver(settings.identity_strategy, UserService(client))

    columns = user_columns(resolver)

    print("📋 Fetching users from database...")
    try:
        users_result = client.table("users").select(columns).execute()
        users = users_result.data or []
        print(f"✓ Found {len(users)} users in database\n")
    except Exception as e:
        print(f"❌ Error: Failed to fetch users: {e}")
        return 1

    broken = 0
    print("=" * 80)
    print(f"{'User':<30} {'Link':<35} {'Status'}")
    print("=" * 80)

    for user in users:
        name = user.get("full_name") or user.get("email") or "Unknown"
        identifier, status = await check_user(resolver, user)
        if status != "OK":
            broken += 1
        display = identifier or "-"
        display = display[:32] + "..." if len(display) > 35 else display
        print(f"{name[:30]:<30} {display:<35} {status}")

    print("=" * 80)
    print("\n📊 Summary:")
    print(f"   Total users: {len(users)}")
    print(f"   Valid links: {len(users) - broken}")
    print(f"   Broken links: {broken}")

    if broken:
        print("\n⚠️  Some profiles cannot be reached through their public link")
        return 1

    print("\n✅ Validation complete!")
    return 0


def main() -> None:
    """Main execution function."""
    sys.exit(asyncio.run(run()))


if __name__ == "__main__":
    main()
