"""
Utility functions for media-moments.
"""

import logging
import re
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Tuple, Union

logger = logging.getLogger(__name__)

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: Union[str, int] = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    format_string: str = DEFAULT_LOG_FORMAT,
) -> None:
    """
    Set up logging configuration for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to a log file (console only if None)
        format_string: Format string for log messages

    Example:
        >>> setup_logging("DEBUG", "grouping.log")
        >>> setup_logging(logging.WARNING)
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(format_string)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # Pillow is chatty at DEBUG while probing image plugins
    logging.getLogger("PIL").setLevel(logging.WARNING)


# (pattern, strptime format) tried in order; the matched groups are joined
# before parsing. Bare dates are limited to 201x-202x so that camera
# counters such as IMG_1234 are never read as dates.
FILENAME_DATE_PATTERNS: List[Tuple[re.Pattern, str]] = [
    (re.compile(r"(\d{8})_(\d{6})"), "%Y%m%d%H%M%S"),  # PXL_20250101_123045
    (re.compile(r"(\d{4}-\d{2}-\d{2})_(\d{2})-(\d{2})-(\d{2})"), "%Y-%m-%d%H%M%S"),
    (re.compile(r"(\d{4}-\d{2}-\d{2})\s+(\d{2})\.(\d{2})\.(\d{2})"), "%Y-%m-%d%H%M%S"),
    (re.compile(r"(\d{8})-(\d{6})"), "%Y%m%d%H%M%S"),  # Screenshot_20251214-082305
    (re.compile(r"(20[1-2]\d{5})"), "%Y%m%d"),  # IMG-20250101-WA0001
    (re.compile(r"(20[1-2]\d-\d{2}-\d{2})"), "%Y-%m-%d"),
]


def parse_date_from_filename(filename: str) -> Optional[datetime]:
    """
    Parse a capture date embedded in a filename.

    Used when an image has no EXIF date and for videos. Recognizes phone
    camera, screenshot and messenger names, with or without a time of day.

    Args:
        filename: The filename to parse

    Returns:
        datetime of the first pattern that matches and forms a valid date,
        else None

    Example:
        >>> parse_date_from_filename("PXL_20250101_123045.jpg")
        datetime.datetime(2025, 1, 1, 12, 30, 45)
    """
    for pattern, date_format in FILENAME_DATE_PATTERNS:
        match = pattern.search(filename)
        if match is None:
            continue
        try:
            return datetime.strptime("".join(match.groups()), date_format)
        except ValueError:
            logger.debug("Ignoring invalid date %r in %s", match.group(0), filename)

    return None


def get_file_date(file_path: Path) -> datetime:
    """
    Get a file's date from the filesystem (its modification time).

    Raises:
        OSError: If the file cannot be stat'ed
    """
    return datetime.fromtimestamp(file_path.stat().st_mtime)
