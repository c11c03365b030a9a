"""Data models for media-moments."""

from media_moments.models.enums import MediaKind, NamingMode, SurplusPolicy, TypeClass
from media_moments.models.group import MediaGroup
from media_moments.models.source import IdentityKey, LookupKey, SourceDescriptor

__all__ = [
    "IdentityKey",
    "LookupKey",
    "MediaGroup",
    "MediaKind",
    "NamingMode",
    "SourceDescriptor",
    "SurplusPolicy",
    "TypeClass",
]
