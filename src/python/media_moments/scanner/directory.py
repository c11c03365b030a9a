"""
Directory scanning for discovering and grouping media files.

This module walks a directory for image and video files, groups them into
captured moments, and offers pandas DataFrame views of the results.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

import pandas as pd

from media_moments.adapters.local import LocalMediaItem, group_related_paths
from media_moments.models.enums import MediaKind, NamingMode, TypeClass
from media_moments.models.group import MediaGroup
from media_moments.scanner.grouper import GroupingContext
from media_moments.scanner.patterns import edited_label_for, is_edited_label, strip_extension

logger = logging.getLogger(__name__)

LIVE_PHOTO_EXTENSION = ".mov"


@dataclass(frozen=True)
class ScanEntry:
    """A file kept by scan-time classification, with how to present it."""
    path: Path
    kind: MediaKind


def scan_directory(
    directory: Path,
    recursive: bool = False,
    include_hidden: bool = False,
    mode: NamingMode = NamingMode.STANDARD,
    context: Optional[GroupingContext] = None,
    max_workers: int = 4,
) -> List[LocalMediaItem]:
    """
    Scan a directory for media files and group them into captured moments.

    Args:
        directory: Directory to scan
        recursive: If True, scan subdirectories recursively
        include_hidden: If True, include files whose name starts with "."
        mode: Naming convention of the files
        context: Grouping settings
        max_workers: Number of threads reading capture dates

    Returns:
        List of LocalMediaItems

    Raises:
        FileNotFoundError: If the directory does not exist
        NotADirectoryError: If the path is not a directory

    Example:
        >>> items = scan_directory(Path("/photos/2025/01/01"))
        >>> df = media_items_to_dataframe(items)
        >>> print(df[["original", "kind"]].head())
    """
    if not directory.exists():
        raise FileNotFoundError(f"Directory not found: {directory}")

    if not directory.is_dir():
        raise NotADirectoryError(f"Not a directory: {directory}")

    file_paths = collect_media_files(directory, recursive=recursive, include_hidden=include_hidden)

    logger.info("Found %d media files in %s", len(file_paths), directory)

    return group_related_paths(file_paths, mode=mode, context=context, max_workers=max_workers)


def collect_media_files(
    directory: Path,
    recursive: bool = False,
    include_hidden: bool = False,
) -> List[Path]:
    """
    Collect all image and video files from a directory.

    Args:
        directory: Directory to scan
        recursive: If True, scan subdirectories recursively
        include_hidden: If True, include hidden files

    Returns:
        Sorted list of file paths
    """
    files = []

    iterator = directory.rglob("*") if recursive else directory.iterdir()

    for path in iterator:
        if not path.is_file():
            continue

        if path.name.startswith(".") and not include_hidden:
            continue

        if TypeClass.from_filename(path.name).is_supported:
            files.append(path)

    return sorted(files)


def classify_scan_entries(paths: Sequence[Path]) -> List[ScanEntry]:
    """
    Decide which files of a flat listing to present, and how.

    - An original is dropped when its edited counterpart (IMG_E1234 for
      IMG_1234) is in the listing.
    - An image with a ".mov" sharing its stem is a LIVE_PHOTO and the clip
      is not listed on its own.
    - Other videos are VIDEOs, other images PHOTOs.

    Args:
        paths: Files of one directory

    Returns:
        ScanEntries in input order
    """
    stems = {strip_extension(p.name) for p in paths}
    image_stems = {
        strip_extension(p.name)
        for p in paths
        if TypeClass.from_filename(p.name) is TypeClass.IMAGE
    }
    mov_paths = {
        p.with_suffix(LIVE_PHOTO_EXTENSION)
        for p in paths
        if p.suffix.lower() == LIVE_PHOTO_EXTENSION
    }

    entries = []
    for path in paths:
        type_class = TypeClass.from_filename(path.name)
        if not type_class.is_supported:
            continue

        stem = strip_extension(path.name)
        if not is_edited_label(stem) and edited_label_for(stem) in stems:
            logger.debug("Skipping %s, an edited version exists", path.name)
            continue

        if type_class is TypeClass.VIDEO:
            if path.suffix.lower() == LIVE_PHOTO_EXTENSION and stem in image_stems:
                continue
            entries.append(ScanEntry(path, MediaKind.VIDEO))
        elif path.with_suffix(LIVE_PHOTO_EXTENSION) in mov_paths:
            entries.append(ScanEntry(path, MediaKind.LIVE_PHOTO))
        else:
            entries.append(ScanEntry(path, MediaKind.PHOTO))

    return entries


def media_items_to_dataframe(items: List[LocalMediaItem]) -> pd.DataFrame:
    """
    Convert LocalMediaItems to a pandas DataFrame.

    Returns:
        DataFrame with one row per captured moment
    """
    if not items:
        return pd.DataFrame()

    return pd.DataFrame([item.to_dict() for item in items])


def groups_to_dataframe(groups: List[MediaGroup]) -> pd.DataFrame:
    """
    Convert MediaGroups to a pandas DataFrame.

    Returns:
        DataFrame with one row per group
    """
    if not groups:
        return pd.DataFrame()

    return pd.DataFrame([group.to_dict() for group in groups])


def count_by_kind(items: List[Union[LocalMediaItem, MediaGroup]]) -> Dict[str, int]:
    """Count items per MediaKind name."""
    counts = {kind.name: 0 for kind in MediaKind}
    for item in items:
        counts[item.kind.name] += 1
    return counts
