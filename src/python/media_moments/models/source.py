"""
SourceDescriptor model.

A SourceDescriptor is the grouping engine's view of one file: the calendar
day it was captured, its canonical key, its full name and its type class.

Two descriptors are *identity-equal* when they share the capture day and the
canonical key; that is what makes them candidates for the same MediaGroup.
The full name and type class are not part of identity but drive the ordering
that decides which file becomes the main asset.
"""

from dataclasses import dataclass
from datetime import date
from typing import NamedTuple, Optional, Tuple

from media_moments.models.enums import NamingMode, TypeClass


class IdentityKey(NamedTuple):
    """Grouping key: capture day plus canonical key."""
    year: int
    month: int
    day: int
    canonical_key: str


class LookupKey(NamedTuple):
    """
    Adapter lookup key: capture day, full name and type class.

    Finer than IdentityKey so that distinct files sharing a canonical key
    are never confused when mapping groups back to domain objects.
    """
    year: int
    month: int
    day: int
    full_name: str
    type_class: TypeClass


@dataclass(frozen=True, eq=False)
class SourceDescriptor:
    """
    Immutable description of one media file for grouping.

    Attributes:
        year, month, day: Calendar day of capture (time of day is discarded)
        canonical_key: Name stripped of cosmetic decorations
        full_name: Filename including extension
        type_class: IMAGE or VIDEO
    """
    year: int
    month: int
    day: int
    canonical_key: str
    full_name: str
    type_class: TypeClass

    def __post_init__(self):
        if not self.type_class.is_supported:
            raise ValueError(f"Unsupported file cannot be grouped: {self.full_name}")

    @classmethod
    def from_name(
        cls,
        captured_at: date,
        full_name: str,
        mode: NamingMode = NamingMode.STANDARD,
        type_class: Optional[TypeClass] = None,
    ) -> Optional["SourceDescriptor"]:
        """
        Create a SourceDescriptor from a capture date and filename.

        Args:
            captured_at: Capture date or datetime (truncated to the day)
            full_name: Filename including extension
            mode: Naming convention used for the canonical key
            type_class: Known type class; derived from the extension if None

        Returns:
            A SourceDescriptor, or None if the file is not an image or video
        """
        if type_class is None:
            type_class = TypeClass.from_filename(full_name)

        if not type_class.is_supported:
            return None

        from media_moments.scanner.patterns import extract_canonical_key

        return cls(
            year=captured_at.year,
            month=captured_at.month,
            day=captured_at.day,
            canonical_key=extract_canonical_key(full_name, mode),
            full_name=full_name,
            type_class=type_class,
        )

    @property
    def day_bucket(self) -> date:
        """Calendar day of capture."""
        return date(self.year, self.month, self.day)

    @property
    def identity_key(self) -> IdentityKey:
        """Key under which related files are grouped."""
        return IdentityKey(self.year, self.month, self.day, self.canonical_key)

    @property
    def lookup_key(self) -> LookupKey:
        """Key used by adapters to map back to the originating object."""
        return LookupKey(self.year, self.month, self.day, self.full_name, self.type_class)

    @property
    def is_image(self) -> bool:
        return self.type_class is TypeClass.IMAGE

    @property
    def is_video(self) -> bool:
        return self.type_class is TypeClass.VIDEO

    def sort_key(self) -> Tuple[int, int, int, int, str]:
        """
        Total order: earlier day first, then shorter name, then name.

        Edited copies usually carry longer or lexically later names
        ("IMG_1234 (Edited).JPG", "IMG_E1234.JPG"), so the minimum of a group
        is its original.
        """
        return (self.year, self.month, self.day, len(self.full_name), self.full_name)

    def __eq__(self, other):
        if not isinstance(other, SourceDescriptor):
            return NotImplemented
        return self.identity_key == other.identity_key

    def __hash__(self):
        return hash(self.identity_key)

    def __lt__(self, other: "SourceDescriptor") -> bool:
        return self.sort_key() < other.sort_key()

    def __gt__(self, other: "SourceDescriptor") -> bool:
        return self.sort_key() > other.sort_key()
