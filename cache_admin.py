#!/usr/bin/env python3
"""
Inspect and maintain the revenue cache, or summarize a reservation export.

Usage:
    python cache_admin.py list [prefix]          # List cached keys with age
    python cache_admin.py clear <prefix>         # Evict entries starting with prefix
    python cache_admin.py clear-all              # Evict every known data source
    python cache_admin.py summary <file.json>    # Revenue per horizon for an export
"""

import asyncio
import json
import sys
import time
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

from app.container import container  # noqa: E402
from app.services.revenue import chart_labels  # noqa: E402
from app.services.revenue.formulas import format_currency  # noqa: E402
from settings.logging import setup_logging  # noqa: E402

logger = setup_logging(level="INFO", to_file=False)


async def list_entries(prefix: str = "") -> int:
    """Print cached keys with their age."""
    keys = [k for k in await container.cache.keys(prefix) if "_meta" not in k]
    if not keys:
        print(f"\nNo cache entries{f' for {prefix}' if prefix else ''}.\n")
        return 0

    now = time.time()
    print("\n" + "=" * 60)
    print("CACHE ENTRIES")
    print("=" * 60)
    for key in keys:
        entry = await container.cache.get(key)
        if entry is None:
            print(f"  {key}  (unreadable)")
            continue
        age_min = (now - entry.timestamp) / 60
        print(f"  {key}  age {age_min:,.0f} min")
    print("=" * 60 + "\n")
    return len(keys)


async def clear(prefix: str | None) -> int:
    """Evict by prefix, or every known source when prefix is None."""
    if prefix is None:
        return await container.cache.clear_all()
    return await container.cache.remove_by_prefix(prefix)


def summarize(path: Path) -> bool:
    """Print revenue per horizon for a JSON reservation export."""
    try:
        payload = json.loads(path.read_text())
    except (OSError, ValueError) as e:
        logger.error("Cannot read {}: {}", path, e)
        return False

    reservations = payload.get("result", []) if isinstance(payload, dict) else payload
    summary = container.revenue.summary(reservations)

    print("\n" + "=" * 60)
    print(f"REVENUE SUMMARY ({len(reservations):,} reservations)")
    print("=" * 60)
    for period, series in summary.items():
        print(f"\n{period}: {format_currency(series.total)}")
        for label, value in zip(chart_labels(period), series.data):
            print(f"  {label:<8} {format_currency(value):>12}")
    print("\n" + "=" * 60 + "\n")
    return True


def main():
    args = sys.argv[1:]
    if not args:
        print(__doc__)
        sys.exit(1)

    container.init()
    command, rest = args[0], args[1:]

    if command == "list":
        asyncio.run(list_entries(rest[0] if rest else ""))
    elif command == "clear" and rest:
        removed = asyncio.run(clear(rest[0]))
        logger.info("Removed {} keys", removed)
    elif command == "clear-all":
        removed = asyncio.run(clear(None))
        logger.info("Removed {} keys", removed)
    elif command == "summary" and rest:
        if not summarize(Path(rest[0])):
            sys.exit(1)
    else:
        print(__doc__)
        sys.exit(1)


if __name__ == "__main__":
    main()
