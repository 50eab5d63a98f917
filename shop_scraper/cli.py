#!/usr/bin/env python3
"""
CLI for product scraping.

Usage:
    # Scrape a single product with the generic profile
    python -m shop_scraper.cli extract <url>

    # Scrape with a site profile (web, shopee, mercadolivre)
    python -m shop_scraper.cli extract <url> shopee

    # List available profiles
    python -m shop_scraper.cli profiles
"""

import asyncio
import json
import sys

from shop_scraper.errors import UnknownProfileError
from shop_scraper.extraction.orchestrator import scrape
from shop_scraper.extraction.profiles import PROFILES, get_profile

USAGE = "Usage: python -m shop_scraper.cli extract <url> [profile] | profiles"


async def cmd_extract(args) -> int:
    """Scrape one URL and print the result as JSON."""
    if not args:
        print(USAGE)
        return 1

    url = args[0]
    try:
        profile = get_profile(args[1] if len(args) > 1 else 'web')
    except UnknownProfileError as e:
        print(e)
        print(USAGE)
        return 1

    result = await scrape(url, profile)
    print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    return 0 if result.success else 1


def cmd_profiles(args) -> int:
    """List profiles with their timing settings."""
    print(f"{'Profile':<15} | {'Settle (ms)':>11} | {'Timeout (ms)':>12}")
    print("-" * 44)
    for name, profile in PROFILES.items():
        print(f"{name:<15} | {profile.settle_delay_ms:>11} | {profile.navigation_timeout_ms:>12}")
    return 0


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print(USAGE)
        return 1

    command, args = argv[0], argv[1:]
    if command == 'extract':
        return asyncio.run(cmd_extract(args))
    if command == 'profiles':
        return cmd_profiles(args)

    print(f"Unknown command: {command}")
    print(USAGE)
    return 1


if __name__ == "__main__":
    sys.exit(main())
