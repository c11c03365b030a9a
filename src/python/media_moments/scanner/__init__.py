"""Scanner module for naming patterns, grouping and directory scans."""

from media_moments.scanner.directory import (
    ScanEntry,
    classify_scan_entries,
    collect_media_files,
    groups_to_dataframe,
    media_items_to_dataframe,
    scan_directory,
)
from media_moments.scanner.exif import extract_capture_date
from media_moments.scanner.grouper import GroupingContext, group_related_media
from media_moments.scanner.patterns import (
    edited_label_for,
    extract_canonical_key,
    is_edited_label,
    strip_extension,
)
from media_moments.scanner.resolver import ResolvedItem, resolve_path, resolve_paths

__all__ = [
    "GroupingContext",
    "ResolvedItem",
    "ScanEntry",
    "classify_scan_entries",
    "collect_media_files",
    "edited_label_for",
    "extract_canonical_key",
    "extract_capture_date",
    "group_related_media",
    "groups_to_dataframe",
    "is_edited_label",
    "media_items_to_dataframe",
    "resolve_path",
    "resolve_paths",
    "scan_directory",
    "strip_extension",
]
