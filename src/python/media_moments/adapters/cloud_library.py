"""
Adapter for cloud photo-library exports.

Library exports store files under ``<library>/originals/<directory>/`` and
name them by asset UUID:

    originals/C/C1B92E12-56C5-46A8-9DD7-807F54F01AF3.jpeg     (photo)
    originals/C/C1B92E12-56C5-46A8-9DD7-807F54F01AF3_3.mov    (live clip)

The library's own records usually list only the main file of each asset.
Companion files (live clips, renders) are found by scanning the directory
for names sharing the asset's cloud-library key.
"""

import logging
from dataclasses import dataclass, replace
from datetime import datetime
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Set, Tuple

from media_moments.adapters.base import assemble_groups, describe_items
from media_moments.models.enums import MediaKind, NamingMode, TypeClass
from media_moments.models.group import MediaGroup
from media_moments.models.source import SourceDescriptor
from media_moments.scanner.grouper import GroupingContext
from media_moments.scanner.patterns import extract_canonical_key

logger = logging.getLogger(__name__)

ORIGINALS_DIRECTORY = "originals"


@dataclass(frozen=True)
class CloudLibraryItem:
    """
    One file of a cloud-library asset.

    Attributes:
        file_name: Stored name (e.g. "<UUID>.jpeg")
        directory: Directory under originals/ (e.g. "C")
        original_file_name: Name at capture time (e.g. "IMG_1234.HEIC")
        created_at: Capture timestamp recorded by the library
        uniform_type_identifier: Type recorded by the library, if any
    """
    file_name: str
    directory: str
    original_file_name: str
    created_at: Optional[datetime]
    uniform_type_identifier: Optional[str] = None


@dataclass
class CloudLibraryMediaItem:
    """A captured moment made of cloud-library files."""
    file_name: str
    directory: str
    original_file_name: str
    library_root: Path
    created_at: datetime
    edited_file_name: Optional[str] = None
    live_file_name: Optional[str] = None

    def _path_for(self, file_name: Optional[str]) -> Optional[Path]:
        if file_name is None:
            return None
        return self.library_root / ORIGINALS_DIRECTORY / self.directory / file_name

    @property
    def original_path(self) -> Path:
        return self._path_for(self.file_name)

    @property
    def edited_path(self) -> Optional[Path]:
        return self._path_for(self.edited_file_name)

    @property
    def live_path(self) -> Optional[Path]:
        return self._path_for(self.live_file_name)

    @property
    def display_name(self) -> str:
        """Name at capture time, falling back to the stored name."""
        return self.original_file_name or self.file_name

    @property
    def display_path(self) -> Path:
        return self.edited_path or self.original_path

    @property
    def kind(self) -> MediaKind:
        if TypeClass.from_filename(self.file_name) is TypeClass.VIDEO:
            return MediaKind.VIDEO
        if self.live_file_name is not None:
            return MediaKind.LIVE_PHOTO
        return MediaKind.PHOTO


def scan_library_originals(library_root: Path) -> Dict[str, List[str]]:
    """
    List the files of a library export, per directory.

    Args:
        library_root: Root of the library export

    Returns:
        Mapping of directory (relative to originals/, "/"-separated, "" for
        the top level) to sorted file names

    Raises:
        FileNotFoundError: If the library has no originals/ directory
    """
    originals = library_root / ORIGINALS_DIRECTORY
    if not originals.is_dir():
        raise FileNotFoundError(f"No originals directory in library: {library_root}")

    listing: Dict[str, List[str]] = {}
    for path in originals.rglob("*"):
        if not path.is_file() or path.name.startswith("."):
            continue
        directory = path.parent.relative_to(originals).as_posix()
        listing.setdefault("" if directory == "." else directory, []).append(path.name)

    for names in listing.values():
        names.sort()

    logger.info(
        "Scanned %d files in library %s",
        sum(len(names) for names in listing.values()),
        library_root,
    )
    return listing


def find_related_items(
    items: Iterable[CloudLibraryItem],
    listing: Dict[str, List[str]],
) -> List[CloudLibraryItem]:
    """
    Find companion files of library items in a directory listing.

    A companion sits in the same directory and has the same cloud-library key
    but a different file name (e.g. "<UUID>_3.mov" for "<UUID>.jpeg"). It
    inherits the parent item's metadata; its type is taken from its name.

    Args:
        items: Items known to the library
        listing: Output of scan_library_originals()

    Returns:
        New items for companion files not already among ``items``
    """
    items = list(items)
    known: Set[Tuple[str, str]] = {(item.directory, item.file_name) for item in items}

    related = []
    for item in items:
        key = extract_canonical_key(item.file_name, NamingMode.CLOUD_LIBRARY)
        for name in listing.get(item.directory, []):
            if (item.directory, name) in known:
                continue
            if extract_canonical_key(name, NamingMode.CLOUD_LIBRARY) != key:
                continue
            related.append(replace(item, file_name=name, uniform_type_identifier=None))
            known.add((item.directory, name))

    logger.debug("Found %d related files for %d library items", len(related), len(items))
    return related


def describe_library_item(item: CloudLibraryItem) -> Optional[SourceDescriptor]:
    """Build the descriptor of a library item, or None if it cannot be grouped."""
    if item.created_at is None:
        logger.warning("Skipping library item without creation date: %s", item.file_name)
        return None

    type_class = TypeClass.from_filename(item.file_name)
    if not type_class.is_supported and item.uniform_type_identifier:
        type_class = TypeClass.from_uti(item.uniform_type_identifier)

    if not type_class.is_supported:
        logger.debug("Skipping unsupported library item: %s", item.file_name)
        return None

    return SourceDescriptor.from_name(
        item.created_at, item.file_name, NamingMode.CLOUD_LIBRARY, type_class
    )


def group_related_library_items(
    items: Iterable[CloudLibraryItem],
    library_root: Path,
    listing: Optional[Dict[str, List[str]]] = None,
    context: Optional[GroupingContext] = None,
) -> List[CloudLibraryMediaItem]:
    """
    Group cloud-library items into captured moments.

    Args:
        items: Items known to the library
        library_root: Root of the library export
        listing: Directory listing from scan_library_originals(); when given,
                 companion files found in it are grouped too
        context: Grouping settings

    Returns:
        List of CloudLibraryMediaItems
    """
    items = list(items)
    if listing is not None:
        items.extend(find_related_items(items, listing))

    pairs = describe_items(items, describe_library_item)

    def build(
        original: CloudLibraryItem,
        edited: Optional[CloudLibraryItem],
        live: Optional[CloudLibraryItem],
        group: MediaGroup,
    ) -> CloudLibraryMediaItem:
        return CloudLibraryMediaItem(
            file_name=original.file_name,
            directory=original.directory,
            original_file_name=original.original_file_name,
            library_root=library_root,
            created_at=original.created_at,
            edited_file_name=edited.file_name if edited else None,
            live_file_name=live.file_name if live else None,
        )

    grouped = assemble_groups(pairs, build, context)

    logger.info("Found %d grouped items in library %s", len(grouped), library_root)

    return grouped
