"""
Capture-date extraction from image metadata.

Grouping only needs the calendar day a file was captured, so this module
reads just the EXIF date tags:
- RAW files (CR2, NEF, DNG, ...) and HEIC/HEIF: uses the exifread library
- Standard formats (JPEG, PNG, TIFF, ...): uses Pillow

Videos carry no EXIF; callers fall back to other date sources for them.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

import exifread
from PIL import Image
from PIL.ExifTags import TAGS

from media_moments.models.enums import TypeClass

logger = logging.getLogger(__name__)

EXIFREAD_EXTENSIONS = frozenset({
    "cr2", "crw", "nef", "nrw", "arw", "srf", "rw2", "rwl", "raf", "orf",
    "ori", "pef", "dng", "3fr", "fff", "iiq", "mos", "dcr", "kdc", "x3f",
    "erf", "mef", "mrw", "srw", "heic", "heif",
})

# Pillow tag id of the EXIF sub-IFD holding DateTimeOriginal
EXIF_IFD_POINTER = 0x8769

EXIF_DATETIME_FORMAT = "%Y:%m:%d %H:%M:%S"


def extract_capture_date(file_path: Path) -> Optional[datetime]:
    """
    Extract the capture timestamp of an image file.

    Tries DateTimeOriginal, then DateTime, then DateTimeDigitized.
    Returns None if the file is not an image, cannot be read, or has no
    usable date.

    Args:
        file_path: Path to the image file

    Returns:
        Capture datetime, or None

    Example:
        >>> extract_capture_date(Path("/photos/IMG_1234.CR2"))
        datetime.datetime(2025, 1, 1, 12, 30, 45)
    """
    if not file_path.exists() or not file_path.is_file():
        logger.warning("File not found or not a file: %s", file_path)
        return None

    if TypeClass.from_filename(file_path.name) is not TypeClass.IMAGE:
        return None

    if file_path.stat().st_size == 0:
        logger.debug("File is empty (0 bytes): %s", file_path)
        return None

    try:
        if file_path.suffix.lower().lstrip(".") in EXIFREAD_EXTENSIONS:
            return _extract_with_exifread(file_path)
        return _extract_with_pillow(file_path)
    except Exception as e:
        logger.warning("Failed to extract EXIF date from %s: %s", file_path, e)
        return None


def _extract_with_exifread(file_path: Path) -> Optional[datetime]:
    """
    Read the capture date using exifread.

    Works with RAW and HEIC files that Pillow cannot read.
    """
    with open(file_path, "rb") as f:
        tags = exifread.process_file(f, details=False)

    if not tags:
        logger.debug("No EXIF data found in %s", file_path)
        return None

    return _parse_datetime(
        tags.get("EXIF DateTimeOriginal")
        or tags.get("Image DateTime")
        or tags.get("EXIF DateTimeDigitized")
    )


def _extract_with_pillow(file_path: Path) -> Optional[datetime]:
    """Read the capture date using Pillow."""
    with Image.open(file_path) as img:
        exif_data = img.getexif()

        if not exif_data:
            logger.debug("No EXIF data found in %s", file_path)
            return None

        exif_dict = {TAGS.get(tag_id, tag_id): value for tag_id, value in exif_data.items()}
        # DateTimeOriginal lives in the EXIF sub-IFD
        exif_dict.update(
            {TAGS.get(tag_id, tag_id): value for tag_id, value in exif_data.get_ifd(EXIF_IFD_POINTER).items()}
        )

    return _parse_datetime(
        exif_dict.get("DateTimeOriginal")
        or exif_dict.get("DateTime")
        or exif_dict.get("DateTimeDigitized")
    )


def _parse_datetime(value) -> Optional[datetime]:
    """
    Parse an EXIF datetime ("YYYY:MM:DD HH:MM:SS").

    Works with both plain strings and exifread tag objects.
    """
    if not value:
        return None

    try:
        datetime_str = str(value).strip().rstrip("\x00")
        return datetime.strptime(datetime_str, EXIF_DATETIME_FORMAT)
    except (ValueError, TypeError) as e:
        logger.debug("Failed to parse datetime '%s': %s", value, e)
        return None
