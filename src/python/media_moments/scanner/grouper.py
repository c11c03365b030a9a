"""
Group source descriptors into MediaGroups.

This module takes SourceDescriptors (one per image or video file) and groups
them into MediaGroup objects, where each MediaGroup represents a moment in
time: the original capture, an optional edited copy and an optional
live-photo clip.

Files are related when they share the capture day and the canonical key.
Grouping runs in three passes:
1. Images: the first image of a key becomes main, a second one is resolved
   against it by descriptor order (the smaller is main, the other edited).
2. Videos: a video sharing a key with an image group becomes its live clip.
3. Videos again: videos whose key already has a live clip are skipped, the
   rest are resolved like images in pass 1 or become standalone groups.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from media_moments.models.enums import SurplusPolicy
from media_moments.models.group import MediaGroup
from media_moments.models.source import IdentityKey, SourceDescriptor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GroupingContext:
    """
    Caller-supplied settings for a grouping run.

    Attributes:
        surplus_policy: How a third file competing for main/edited is handled
    """
    surplus_policy: SurplusPolicy = SurplusPolicy.LAST_WINS


@dataclass
class _GroupRecord:
    """In-progress group while the passes run."""
    main: SourceDescriptor
    edited: Optional[SourceDescriptor] = None
    live: Optional[SourceDescriptor] = None

    def to_group(self) -> MediaGroup:
        return MediaGroup(main=self.main, edited=self.edited, live=self.live)


def group_related_media(
    descriptors: Iterable[SourceDescriptor],
    context: Optional[GroupingContext] = None,
) -> List[MediaGroup]:
    """
    Group descriptors of related files into MediaGroups.

    Args:
        descriptors: Image and video descriptors to group
        context: Grouping settings; defaults to GroupingContext()

    Returns:
        List of MediaGroups sorted by main, then edited, then live

    Example:
        >>> groups = group_related_media([photo, edited_photo, live_clip])
        >>> groups[0].live.full_name
        'IMG_1234.MOV'
    """
    if context is None:
        context = GroupingContext()

    descriptors = list(descriptors)
    if not descriptors:
        return []

    images = [d for d in descriptors if d.is_image]
    videos = [d for d in descriptors if d.is_video]
    records: Dict[IdentityKey, _GroupRecord] = {}

    # Pass 1: images, pairing originals with edited copies
    for image in images:
        record = records.get(image.identity_key)
        if record is None:
            records[image.identity_key] = _GroupRecord(main=image)
        else:
            _resolve_main_and_edited(record, image, context)

    # Pass 2: videos that are the live clip of an image group
    for video in videos:
        record = records.get(video.identity_key)
        if record is not None:
            record.live = video

    # Pass 3: remaining videos
    for video in videos:
        record = records.get(video.identity_key)
        if record is None:
            records[video.identity_key] = _GroupRecord(main=video)
        elif record.live is not None and record.live == video:
            # Already the live clip of this moment
            continue
        else:
            _resolve_main_and_edited(record, video, context)

    groups = sorted(record.to_group() for record in records.values())

    logger.debug("Grouped %d files into %d groups", len(descriptors), len(groups))

    return groups


def _resolve_main_and_edited(
    record: _GroupRecord,
    candidate: SourceDescriptor,
    context: GroupingContext,
) -> None:
    """
    Place a candidate in a record's main/edited slots by descriptor order.

    The live slot is never touched.
    """
    if context.surplus_policy is SurplusPolicy.KEEP_MINIMAL and record.edited is not None:
        kept = sorted([record.main, record.edited, candidate], key=SourceDescriptor.sort_key)
        record.main, record.edited = kept[0], kept[1]
        logger.debug("Discarded surplus file %s for key %s", kept[2].full_name, candidate.canonical_key)
        return

    if record.edited is not None:
        logger.debug(
            "Replacing edited file %s for key %s",
            record.edited.full_name,
            candidate.canonical_key,
        )

    # The longer name is usually the edited one
    if record.main > candidate:
        record.main, record.edited = candidate, record.main
    else:
        record.edited = candidate
