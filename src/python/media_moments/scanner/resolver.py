"""
Resolve local files into (date, name, type) tuples for grouping.

Resolving a file means finding its type class and its capture date. The
capture date comes from, in order of preference:
1. EXIF DateTimeOriginal (images only)
2. A date embedded in the filename
3. The file's modification time

Files that are not images or videos, or that cannot be read, resolve to
None and are left out of grouping.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Optional

from media_moments.models.enums import TypeClass
from media_moments.scanner.exif import extract_capture_date
from media_moments.utils import get_file_date, parse_date_from_filename

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedItem:
    """A local file ready to be described for grouping."""
    path: Path
    captured_at: datetime
    full_name: str
    type_class: TypeClass


def resolve_path(path: Path) -> Optional[ResolvedItem]:
    """
    Resolve a single file.

    Args:
        path: Path to the media file

    Returns:
        ResolvedItem, or None if the file is unsupported or unreadable
    """
    type_class = TypeClass.from_filename(path.name)
    if not type_class.is_supported:
        logger.debug("Skipping unsupported file: %s", path)
        return None

    try:
        captured_at = _resolve_capture_date(path, type_class)
    except OSError as e:
        logger.warning("Could not read %s: %s", path, e)
        return None

    return ResolvedItem(
        path=path,
        captured_at=captured_at,
        full_name=path.name,
        type_class=type_class,
    )


def _resolve_capture_date(path: Path, type_class: TypeClass) -> datetime:
    if type_class is TypeClass.IMAGE:
        exif_date = extract_capture_date(path)
        if exif_date is not None:
            return exif_date

    filename_date = parse_date_from_filename(path.name)
    if filename_date is not None:
        logger.debug("No EXIF date for %s, parsed date from filename: %s", path.name, filename_date)
        return filename_date

    return get_file_date(path)


def resolve_paths(paths: Iterable[Path], max_workers: int = 4) -> List[ResolvedItem]:
    """
    Resolve many files, reading metadata in parallel.

    The result order follows the input order; files that fail to resolve
    are omitted.

    Args:
        paths: Paths to resolve
        max_workers: Number of worker threads (1 resolves sequentially)

    Returns:
        List of ResolvedItems
    """
    paths = list(paths)

    if max_workers <= 1:
        results = [resolve_path(path) for path in paths]
    else:
        results: List[Optional[ResolvedItem]] = [None] * len(paths)
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            future_to_index = {
                executor.submit(resolve_path, path): index
                for index, path in enumerate(paths)
            }

            for future in as_completed(future_to_index):
                index = future_to_index[future]
                try:
                    results[index] = future.result()
                except Exception as e:
                    logger.error("Unexpected error resolving %s: %s", paths[index], e)

    resolved = [item for item in results if item is not None]

    logger.info("Resolved %d of %d files", len(resolved), len(paths))

    return resolved
