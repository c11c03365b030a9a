"""
Shared plumbing for source adapters.

An adapter turns domain items (local paths, camera items, library records)
into SourceDescriptors, groups them, and maps each MediaGroup back to the
domain items through a lookup table keyed by LookupKey
(day, full name, type class).
"""

import logging
from typing import Callable, Dict, Iterable, List, Optional, Tuple, TypeVar

from media_moments.models.group import MediaGroup
from media_moments.models.source import LookupKey, SourceDescriptor
from media_moments.scanner.grouper import GroupingContext, group_related_media

logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT")
RecordT = TypeVar("RecordT")

# build(original, edited, live, group) -> domain record
RecordBuilder = Callable[[ItemT, Optional[ItemT], Optional[ItemT], MediaGroup], RecordT]


def describe_items(
    items: Iterable[ItemT],
    describe: Callable[[ItemT], Optional[SourceDescriptor]],
) -> List[Tuple[SourceDescriptor, ItemT]]:
    """
    Pair each item with its descriptor, dropping items without one.

    Args:
        items: Domain items
        describe: Returns the item's descriptor, or None to exclude it

    Returns:
        List of (descriptor, item) pairs
    """
    pairs = []
    for item in items:
        descriptor = describe(item)
        if descriptor is None:
            continue
        pairs.append((descriptor, item))
    return pairs


def build_lookup(pairs: Iterable[Tuple[SourceDescriptor, ItemT]]) -> Dict[LookupKey, ItemT]:
    """
    Build the table mapping descriptors back to their domain items.

    Items with the same day, name and type overwrite each other; the last
    one wins.
    """
    lookup: Dict[LookupKey, ItemT] = {}
    for descriptor, item in pairs:
        key = descriptor.lookup_key
        if key in lookup:
            logger.debug("Duplicate item for %s, keeping the last one", descriptor.full_name)
        lookup[key] = item
    return lookup


def assemble_groups(
    pairs: List[Tuple[SourceDescriptor, ItemT]],
    build: RecordBuilder,
    context: Optional[GroupingContext] = None,
) -> List[RecordT]:
    """
    Group described items and build one domain record per group.

    Args:
        pairs: (descriptor, item) pairs from describe_items()
        build: Called as build(original, edited, live, group)
        context: Grouping settings

    Returns:
        Domain records, in group order
    """
    lookup = build_lookup(pairs)
    groups = group_related_media((descriptor for descriptor, _ in pairs), context)

    records = []
    for group in groups:
        original = lookup.get(group.main.lookup_key)
        if original is None:
            logger.warning("No source item for %s, skipping group", group.main.full_name)
            continue

        edited = lookup.get(group.edited.lookup_key) if group.edited else None
        live = lookup.get(group.live.lookup_key) if group.live else None
        if edited is original:
            # Duplicate file names collapse to one lookup entry
            edited = None
        records.append(build(original, edited, live, group))

    return records
