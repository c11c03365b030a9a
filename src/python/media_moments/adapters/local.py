"""
Adapter for files on the local filesystem.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Optional

from media_moments.adapters.base import assemble_groups, describe_items
from media_moments.models.enums import MediaKind, NamingMode, TypeClass
from media_moments.models.group import MediaGroup
from media_moments.models.source import SourceDescriptor
from media_moments.scanner.grouper import GroupingContext
from media_moments.scanner.resolver import ResolvedItem, resolve_paths

logger = logging.getLogger(__name__)


@dataclass
class LocalMediaItem:
    """
    A captured moment made of local files.

    Attributes:
        original: Path to the original file
        edited: Path to the edited copy, if any
        live: Path to the live-photo clip, if any
        captured_at: Capture timestamp of the original
    """
    original: Path
    captured_at: datetime
    edited: Optional[Path] = None
    live: Optional[Path] = None

    @property
    def display_name(self) -> str:
        return self.original.name

    @property
    def display_path(self) -> Path:
        """The file to show: the edited copy when there is one."""
        return self.edited or self.original

    @property
    def kind(self) -> MediaKind:
        if TypeClass.from_filename(self.original.name) is TypeClass.VIDEO:
            return MediaKind.VIDEO
        if self.live is not None:
            return MediaKind.LIVE_PHOTO
        return MediaKind.PHOTO

    @property
    def paths(self) -> List[Path]:
        """All files of this moment."""
        return [p for p in (self.original, self.edited, self.live) if p is not None]

    def to_dict(self) -> dict:
        """Convert to dictionary for pandas DataFrame."""
        return {
            "original": str(self.original),
            "edited": str(self.edited) if self.edited else None,
            "live": str(self.live) if self.live else None,
            "captured_at": self.captured_at,
            "kind": self.kind.name,
            "file_count": len(self.paths),
        }


def describe_resolved(
    item: ResolvedItem,
    mode: NamingMode = NamingMode.STANDARD,
) -> Optional[SourceDescriptor]:
    """Build the descriptor of a resolved file."""
    return SourceDescriptor.from_name(item.captured_at, item.full_name, mode, item.type_class)


def group_related_paths(
    paths: Iterable[Path],
    mode: NamingMode = NamingMode.STANDARD,
    context: Optional[GroupingContext] = None,
    max_workers: int = 4,
) -> List[LocalMediaItem]:
    """
    Group local media files into captured moments.

    Capture dates are read in parallel; unreadable and unsupported files are
    left out.

    Args:
        paths: Paths to media files
        mode: Naming convention of the files
        context: Grouping settings
        max_workers: Number of threads reading metadata

    Returns:
        List of LocalMediaItems

    Example:
        >>> items = group_related_paths(Path("/photos/2025/01/01").iterdir())
        >>> [item.kind for item in items]
        [<MediaKind.LIVE_PHOTO: 2>, <MediaKind.PHOTO: 1>]
    """
    resolved = resolve_paths(paths, max_workers=max_workers)
    pairs = describe_items(resolved, lambda item: describe_resolved(item, mode))

    def build(
        original: ResolvedItem,
        edited: Optional[ResolvedItem],
        live: Optional[ResolvedItem],
        group: MediaGroup,
    ) -> LocalMediaItem:
        return LocalMediaItem(
            original=original.path,
            captured_at=original.captured_at,
            edited=edited.path if edited else None,
            live=live.path if live else None,
        )

    items = assemble_groups(pairs, build, context)

    logger.info("Grouped %d files into %d items", len(pairs), len(items))

    return items
