"""
Adapter for items on a connected capture device (camera, phone).

Enumerating a device is up to the caller; this module only needs each item's
name, uniform type identifier and creation date.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List, Optional

from media_moments.adapters.base import assemble_groups, describe_items
from media_moments.models.enums import MediaKind, TypeClass
from media_moments.models.group import MediaGroup
from media_moments.models.source import SourceDescriptor
from media_moments.scanner.grouper import GroupingContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CameraItem:
    """
    A file as reported by a capture device.

    Devices may leave any field empty; such items cannot be grouped.
    """
    name: Optional[str]
    uti: Optional[str]
    creation_date: Optional[datetime]


@dataclass
class DeviceMediaItem:
    """A captured moment made of device items."""
    original: CameraItem
    edited: Optional[CameraItem] = None
    live: Optional[CameraItem] = None
    kind: MediaKind = MediaKind.PHOTO

    @property
    def display_name(self) -> str:
        return self.original.name

    @property
    def display_item(self) -> CameraItem:
        """The item to show: the edited copy when there is one."""
        return self.edited or self.original

    @property
    def captured_at(self) -> datetime:
        return self.original.creation_date


def describe_camera_item(item: CameraItem) -> Optional[SourceDescriptor]:
    """
    Build the descriptor of a device item.

    The type class comes from the name's extension, falling back to the
    item's UTI when the extension is not recognized.

    Returns:
        SourceDescriptor, or None if the item is incomplete or not media
    """
    if not item.name or item.creation_date is None:
        logger.warning("Skipping device item without name or creation date: %r", item)
        return None

    type_class = TypeClass.from_filename(item.name)
    if not type_class.is_supported and item.uti:
        type_class = TypeClass.from_uti(item.uti)

    if not type_class.is_supported:
        logger.debug("Skipping unsupported device item: %s (%s)", item.name, item.uti)
        return None

    return SourceDescriptor.from_name(item.creation_date, item.name, type_class=type_class)


def group_related_camera_items(
    items: Iterable[CameraItem],
    context: Optional[GroupingContext] = None,
) -> List[DeviceMediaItem]:
    """
    Group device items into captured moments (edited copies, live photos).

    Args:
        items: Items reported by the device
        context: Grouping settings

    Returns:
        List of DeviceMediaItems
    """
    pairs = describe_items(items, describe_camera_item)

    def build(
        original: CameraItem,
        edited: Optional[CameraItem],
        live: Optional[CameraItem],
        group: MediaGroup,
    ) -> DeviceMediaItem:
        return DeviceMediaItem(original=original, edited=edited, live=live, kind=group.kind)

    return assemble_groups(pairs, build, context)
