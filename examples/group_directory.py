"""
Example: Group a photo directory into captured moments

This script scans a directory, groups originals with their edited copies and
live-photo clips, and prints a summary table.

Usage:
    python examples/group_directory.py ~/Pictures/2025/01 --recursive
    python examples/group_directory.py ~/Pictures --config config.yaml
"""

import argparse
from pathlib import Path

from media_moments.config import GroupingSettings, get_grouping_settings, get_logging_settings, load_config
from media_moments.scanner import media_items_to_dataframe, scan_directory
from media_moments.scanner.directory import count_by_kind
from media_moments.utils import setup_logging


def main():
    """Run the grouping example."""
    parser = argparse.ArgumentParser(description="Group media files into captured moments")
    parser.add_argument("directory", type=Path, help="Directory to scan")
    parser.add_argument("--config", type=Path, help="Path to config.yaml")
    parser.add_argument("--recursive", action="store_true", help="Scan subdirectories")
    args = parser.parse_args()

    if args.config:
        config = load_config(args.config)
        settings = get_grouping_settings(config)
        log_settings = get_logging_settings(config)
        setup_logging(log_settings["level"], log_settings["file"])
    else:
        settings = GroupingSettings()
        setup_logging("INFO")

    directory = args.directory.expanduser()
    if not directory.exists():
        print(f"Directory not found: {directory}")
        return

    items = scan_directory(
        directory,
        recursive=args.recursive or settings.recursive,
        include_hidden=settings.include_hidden,
        mode=settings.naming_mode,
        context=settings.to_context(),
        max_workers=settings.max_workers,
    )

    print(f"\nFound {len(items)} captured moments in {directory}")
    for kind, count in count_by_kind(items).items():
        print(f"   {kind}: {count}")

    df = media_items_to_dataframe(items)
    if not df.empty:
        print()
        print(df[["original", "edited", "live", "kind"]].to_string(index=False))


if __name__ == "__main__":
    main()
