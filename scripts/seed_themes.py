#!/usr/bin/env python3
"""
Seed the predefined seasonal themes into Supabase.

Existing themes with the same slug are updated in place; nothing is
activated unless --activate is given.

Usage:
    python scripts/seed_themes.py
    python scripts/seed_themes.py --activate navidad
"""
import argparse
import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from storefront.db import is_supabase_configured  # noqa: E402
from storefront.services.database import get_database  # noqa: E402
from storefront.themes import DEFAULT_THEMES  # noqa: E402


async def seed(activate: str | None) -> int:
    if not is_supabase_configured():
        print("❌ SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set")
        return 1
    if activate and activate not in DEFAULT_THEMES:
        print(f"❌ Unknown theme: {activate}. Options: {', '.join(DEFAULT_THEMES)}")
        return 1

    db = get_database()
    for slug, theme in DEFAULT_THEMES.items():
        row, created = await db.themes.save_by_slug(theme.to_row(is_active=slug == activate))
        print(f"{'✅ Created' if created else '🔄 Updated'} {row.slug}")

    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--activate", help="slug of the theme to make active")
    args = parser.parse_args()
    return asyncio.run(seed(args.activate))


if __name__ == "__main__":
    sys.exit(main())
