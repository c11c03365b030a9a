"""
MediaMoments - reconstruct captured moments from media file names.

A captured moment is one press of the shutter as a set of files: the
original photo or video, an optional edited copy and an optional live-photo
clip. Files are matched by capture day and canonical key (the filename
stripped of extensions, edit markers and sequence suffixes), never by
content.

Core Concepts:
- SourceDescriptor: One media file as seen by the grouping engine
- MediaGroup: The main/edited/live files of a captured moment

Usage:
    from media_moments.scanner import scan_directory
    from pathlib import Path

    items = scan_directory(Path("/photos/2025/01/01"))
    print(f"Found {len(items)} captured moments")
"""

from media_moments.__version__ import __version__
from media_moments.models import (
    IdentityKey,
    LookupKey,
    MediaGroup,
    MediaKind,
    NamingMode,
    SourceDescriptor,
    SurplusPolicy,
    TypeClass,
)
from media_moments.scanner import (
    GroupingContext,
    extract_canonical_key,
    group_related_media,
    is_edited_label,
    scan_directory,
)

__all__ = [
    "__version__",
    # Models
    "IdentityKey",
    "LookupKey",
    "MediaGroup",
    "MediaKind",
    "NamingMode",
    "SourceDescriptor",
    "SurplusPolicy",
    "TypeClass",
    # Scanner
    "GroupingContext",
    "extract_canonical_key",
    "group_related_media",
    "is_edited_label",
    "scan_directory",
]
