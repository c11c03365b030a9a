"""
MediaGroup model.

A MediaGroup represents a moment in time - a single capture event - as the
grouping engine reconstructs it from filenames:
- main: the original capture (order-minimal file of the group)
- edited: an edited copy of the original (optional)
- live: the motion clip of a live photo (optional)
"""

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from media_moments.models.enums import MediaKind
from media_moments.models.source import SourceDescriptor


def slot_sort_key(slot: Optional[SourceDescriptor]) -> Tuple:
    """
    Sort key for an optional group slot.

    An absent slot sorts before a present one; present slots compare by
    descriptor order.
    """
    if slot is None:
        return (0,)
    return (1,) + slot.sort_key()


@dataclass(frozen=True)
class MediaGroup:
    """
    Files that belong to one captured moment.

    Attributes:
        main: The original file
        edited: Edited copy sharing main's day and canonical key
        live: Motion clip sharing main's day and canonical key (always a video)
    """
    main: SourceDescriptor
    edited: Optional[SourceDescriptor] = None
    live: Optional[SourceDescriptor] = None

    @property
    def kind(self) -> MediaKind:
        """How the group presents itself: video, live photo or photo."""
        if self.main.is_video:
            return MediaKind.VIDEO
        if self.live is not None:
            return MediaKind.LIVE_PHOTO
        return MediaKind.PHOTO

    @property
    def members(self) -> Iterator[SourceDescriptor]:
        """Present descriptors in main, edited, live order."""
        return iter([d for d in (self.main, self.edited, self.live) if d is not None])

    @property
    def file_count(self) -> int:
        """Number of files in this group."""
        return len(list(self.members))

    def sort_key(self) -> Tuple:
        """Order by main, then edited, then live."""
        return (self.main.sort_key(), slot_sort_key(self.edited), slot_sort_key(self.live))

    def __lt__(self, other: "MediaGroup") -> bool:
        return self.sort_key() < other.sort_key()

    def to_dict(self) -> dict:
        """Convert to dictionary for pandas DataFrame."""
        return {
            "day": self.main.day_bucket,
            "canonical_key": self.main.canonical_key,
            "kind": self.kind.name,
            "main": self.main.full_name,
            "edited": self.edited.full_name if self.edited else None,
            "live": self.live.full_name if self.live else None,
            "file_count": self.file_count,
        }
