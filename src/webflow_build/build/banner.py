"""Generated banner comments prepended to every output file."""

from datetime import datetime, timezone
from typing import Optional

from ..constants import SPLIT_PART_COUNT


def format_build_time(build_time: Optional[datetime] = None) -> str:
    """Format a build time as ISO-8601 UTC with milliseconds, e.g. 2025-01-01T12:00:00.000Z."""
    if build_time is None:
        build_time = datetime.now(timezone.utc)
    elif build_time.tzinfo is None:
        build_time = build_time.replace(tzinfo=timezone.utc)
    build_time = build_time.astimezone(timezone.utc)
    return build_time.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def render_production_banner(timestamp: str) -> str:
    return (
        "<!--\n"
        "  PRODUCTION BUILD\n"
        f"  Generated: {timestamp}\n"
        "\n"
        "  ⚠️  WARNING: This file contains real API keys!\n"
        "  - DO NOT commit this file to Git\n"
        "  - DO NOT share this file publicly\n"
        "  - Use only for deployment to Webflow\n"
        "\n"
        "  To rebuild: webflow-build build\n"
        "-->\n"
        "\n"
    )


def render_part_banner(part: int, timestamp: str, total: int = SPLIT_PART_COUNT) -> str:
    """Render the banner for one file of the split build.

    Args:
        part: 1-based part number.
        timestamp: Formatted build time.
        total: Number of parts in the build.
    """
    if not 1 <= part <= total:
        raise ValueError(f"Part {part} is outside 1..{total}")
    return (
        "<!--\n"
        "  WEBFLOW DEPLOYMENT FILE\n"
        f"  Part {part} of {total}\n"
        f"  Generated: {timestamp}\n"
        "\n"
        "  ⚠️  WARNING: Contains real API keys!\n"
        "  - DO NOT commit to Git\n"
        "  - DO NOT share publicly\n"
        "  - Use only for Webflow deployment\n"
        "\n"
        "  To rebuild: webflow-build split\n"
        "-->\n"
        "\n"
    )
