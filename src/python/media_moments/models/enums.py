"""Enumerations for media-moments models."""

from enum import Enum, auto
from pathlib import Path

# Extension tables (lowercase, without the leading dot)
IMAGE_EXTENSIONS = frozenset({
    # Standard image formats
    "jpg", "jpeg", "png", "tiff", "tif", "gif", "bmp", "heic", "heif", "webp",
    "svg", "icns", "psd", "ico",
    # RAW formats from various camera manufacturers
    "cr2", "crw", "nef", "nrw", "arw", "srf", "rw2", "rwl", "raf", "orf",
    "ori", "pef", "dng", "3fr", "fff", "iiq", "mos", "dcr", "kdc", "x3f",
    "erf", "mef", "mrw", "srw",
})

VIDEO_EXTENSIONS = frozenset({
    "mp4", "avi", "mov", "m4v", "mpg", "mpeg", "3gp", "3g2", "dv", "flc",
    "m2ts", "mts", "mkv", "webm", "wmv", "asf", "rm", "divx", "xvid", "ogv",
    "vob",
})

# Uniform type identifiers reported by capture devices and photo libraries
IMAGE_UTIS = frozenset({
    "public.image", "public.jpeg", "public.png", "public.tiff", "public.gif",
    "public.bmp", "public.heic", "public.heif", "public.webp",
    "public.svg-image", "public.camera-raw-image", "com.apple.icns",
    "com.adobe.photoshop-image", "com.adobe.raw-image", "com.microsoft.bmp",
    "com.microsoft.ico", "com.canon.cr2-raw-image", "com.canon.cr2",
    "com.canon.crw", "com.nikon.nef", "com.nikon.nrw", "com.sony.arw",
    "com.sony.srf", "com.panasonic.rw2", "com.panasonic.rwl", "com.fuji.raf",
    "com.olympus.orf", "com.pentax.pef", "com.leica.rwl",
    "com.hasselblad.3fr", "com.phaseone.iiq", "com.kodak.dcr",
    "com.sigma.x3f", "com.samsung.srw",
})

VIDEO_UTIS = frozenset({
    "public.video", "public.movie", "public.mpeg-4", "public.avi",
    "com.apple.quicktime-movie", "public.mp4", "public.mpeg", "public.3gpp",
    "public.3gpp2", "public.dv", "public.m2ts", "public.mts", "public.m4v",
    "public.mkv", "org.webmproject.webm", "com.microsoft.wmv",
    "com.microsoft.asf", "com.real.realmedia", "com.apple.m4v-video",
    "com.apple.itunes.m4v",
})


class TypeClass(Enum):
    """
    Media-type class of a file, as far as grouping is concerned.

    Only IMAGE and VIDEO files take part in grouping; UNSUPPORTED files are
    filtered out before a SourceDescriptor is ever built.
    """
    IMAGE = "image"
    VIDEO = "video"
    UNSUPPORTED = "unsupported"

    @classmethod
    def from_extension(cls, extension: str) -> "TypeClass":
        """
        Get TypeClass from a file extension.

        Args:
            extension: File extension (with or without leading dot, any case)

        Returns:
            IMAGE, VIDEO, or UNSUPPORTED if the extension is not recognized
        """
        ext = extension.lower().lstrip(".")

        if ext in IMAGE_EXTENSIONS:
            return cls.IMAGE
        if ext in VIDEO_EXTENSIONS:
            return cls.VIDEO

        return cls.UNSUPPORTED

    @classmethod
    def from_filename(cls, filename: str) -> "TypeClass":
        """
        Get TypeClass from a filename or file path.

        Examples:
            >>> TypeClass.from_filename("IMG_1234.HEIC")
            TypeClass.IMAGE
            >>> TypeClass.from_filename("/photos/IMG_1234.MOV")
            TypeClass.VIDEO
            >>> TypeClass.from_filename("readme.txt")
            TypeClass.UNSUPPORTED
        """
        return cls.from_extension(Path(filename).suffix)

    @classmethod
    def from_uti(cls, uti: str) -> "TypeClass":
        """Get TypeClass from a uniform type identifier (e.g. "public.jpeg")."""
        if uti in IMAGE_UTIS:
            return cls.IMAGE
        if uti in VIDEO_UTIS:
            return cls.VIDEO
        return cls.UNSUPPORTED

    @property
    def is_supported(self) -> bool:
        """Check if files of this class take part in grouping."""
        return self is not TypeClass.UNSUPPORTED


class NamingMode(Enum):
    """
    File-naming convention used to derive canonical keys.

    - STANDARD: device/filesystem names (IMG_1234.JPG, IMG_E1234.JPG,
      "IMG_1234 (Edited).JPG")
    - CLOUD_LIBRARY: photo-library exports named by UUID with numeric
      sequence suffixes (UUID.jpeg, UUID_3.mov)
    """
    STANDARD = "standard"
    CLOUD_LIBRARY = "cloud_library"


class SurplusPolicy(Enum):
    """
    What to do when more than two files compete for the main/edited slots.

    - LAST_WINS: the last processed file overwrites the edited slot
      (depends on input order)
    - KEEP_MINIMAL: keep the two order-minimal files (order independent)
    """
    LAST_WINS = "last_wins"
    KEEP_MINIMAL = "keep_minimal"


class MediaKind(Enum):
    """How a grouped capture presents itself."""
    PHOTO = auto()
    LIVE_PHOTO = auto()
    VIDEO = auto()
