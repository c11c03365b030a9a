"""Adapters mapping source-specific items to and from media groups."""

from media_moments.adapters.cloud_library import (
    CloudLibraryItem,
    CloudLibraryMediaItem,
    find_related_items,
    group_related_library_items,
    scan_library_originals,
)
from media_moments.adapters.device import CameraItem, DeviceMediaItem, group_related_camera_items
from media_moments.adapters.local import LocalMediaItem, group_related_paths

__all__ = [
    "CameraItem",
    "CloudLibraryItem",
    "CloudLibraryMediaItem",
    "DeviceMediaItem",
    "LocalMediaItem",
    "find_related_items",
    "group_related_camera_items",
    "group_related_library_items",
    "group_related_paths",
    "scan_library_originals",
]
