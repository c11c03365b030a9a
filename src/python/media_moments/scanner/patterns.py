"""
Filename pattern handling for matching files of the same captured moment.

This module derives canonical keys from filenames. Two files with the same
canonical key (and the same capture day) are considered the same logical
capture, e.g. a photo, its edited copy and its live-photo clip.

Supported conventions:
1. Standard (device/filesystem):
   IMG_1234.JPG, "IMG_1234 (Edited).JPG", IMG_E1234.JPG, IMG_1234.MOV
2. Cloud library (UUID based exports):
   C1B92E12-....jpeg, C1B92E12-..._3.mov, C1B92E12-..._L.HEIC
"""

import re
from typing import Optional

from media_moments.models.enums import NamingMode

EDITED_MARKER = " (Edited)"
EDITED_SUFFIX = "_Edited"

_INSERTED_E = re.compile(r"^(.*)E(\d+)$")
_SEQUENCE_SUFFIX = re.compile(r"^(.+)_(\d+)$")
_E_COUNTER = re.compile(r"^E\d+$")


def strip_extension(name: str) -> str:
    """
    Remove the trailing extension from a filename.

    Only the last extension is removed, whatever it is:

        >>> strip_extension("IMG_1234.JPG")
        'IMG_1234'
        >>> strip_extension("test.jpg.backup")
        'test.jpg'
        >>> strip_extension("IMG_1234")
        'IMG_1234'
    """
    stem, dot, _ = name.rpartition(".")
    return stem if dot else name


def extract_canonical_key(full_name: str, mode: NamingMode = NamingMode.STANDARD) -> str:
    """
    Extract the canonical key from a filename.

    The canonical key is the filename stripped of cosmetic decorations
    (extension, edit markers, sequence suffixes), so that files belonging to
    the same capture share it. Never raises; odd names just give odd keys.

    Args:
        full_name: The filename (no directory part)
        mode: Naming convention of the source

    Returns:
        The canonical key

    Examples:
        >>> extract_canonical_key("IMG_1234 (Edited).JPG")
        'IMG_1234'
        >>> extract_canonical_key("IMG_E1234.JPG")
        'IMG_1234'
        >>> extract_canonical_key("UUID_3.mov", NamingMode.CLOUD_LIBRARY)
        'UUID'
        >>> extract_canonical_key("UUID_L.HEIC", NamingMode.CLOUD_LIBRARY)
        'UUID_L'
    """
    if mode is NamingMode.CLOUD_LIBRARY:
        return _extract_cloud_library_key(full_name)
    return _extract_standard_key(full_name)


def _extract_standard_key(full_name: str) -> str:
    """Canonical key for device/filesystem names."""
    key = strip_extension(full_name)

    if key.endswith(EDITED_MARKER):
        key = key[: -len(EDITED_MARKER)]

    # iOS inserts an "E" before the counter of edited files: IMG_E1234
    match = _INSERTED_E.match(key)
    if match:
        key = match[1] + match[2]

    return key


def _extract_cloud_library_key(full_name: str) -> str:
    """Canonical key for cloud-library (UUID) names."""
    key = strip_extension(full_name)

    # UUID_3 -> UUID, but UUID_L is a different asset and is kept as is
    match = _SEQUENCE_SUFFIX.match(key)
    return match[1] if match else key


def is_edited_label(base: str) -> bool:
    """
    Check if a base name (filename without extension) labels an edited file.

    Recognizes "IMG_1234_Edited", "IMG_1234 (Edited)" and the inserted-E
    counter after the last separator ("IMG_E1234", "CLIP-E0001").

    Args:
        base: Filename without extension

    Returns:
        True if the name follows one of the edited-file conventions
    """
    if base.endswith(EDITED_SUFFIX) or base.endswith(EDITED_MARKER):
        return True

    for separator in ("_", "-"):
        if separator in base:
            last_segment = base.rsplit(separator, 1)[1]
            return bool(_E_COUNTER.match(last_segment))

    return False


def edited_label_for(base: str) -> Optional[str]:
    """
    Get the base name a device gives to the edited counterpart of a file.

        >>> edited_label_for("IMG_1234")
        'IMG_E1234'
        >>> edited_label_for("CLIP-0001")
        'CLIP-E0001'

    Returns:
        The edited base name, or None if the name has no "_" or "-" separator
    """
    for separator in ("_", "-"):
        if separator in base:
            prefix, number = base.rsplit(separator, 1)
            return f"{prefix}{separator}E{number}"
    return None
