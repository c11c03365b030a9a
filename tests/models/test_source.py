"""Unit tests for the SourceDescriptor model."""

from datetime import date, datetime

import pytest

from media_moments.models import (
    IdentityKey,
    LookupKey,
    NamingMode,
    SourceDescriptor,
    TypeClass,
)


class TestSourceDescriptorCreation:
    """Tests for SourceDescriptor.from_name()."""

    def test_from_name_image(self, today):
        """Test creating a descriptor for an image."""
        source = SourceDescriptor.from_name(today, "IMG_E1234.HEIC")

        assert source.year == 2025
        assert source.month == 6
        assert source.day == 15
        assert source.canonical_key == "IMG_1234"
        assert source.full_name == "IMG_E1234.HEIC"
        assert source.type_class == TypeClass.IMAGE
        assert source.is_image is True
        assert source.is_video is False

    def test_from_name_video(self, today):
        """Test creating a descriptor for a video."""
        source = SourceDescriptor.from_name(today, "IMG_1234.MOV")

        assert source.type_class == TypeClass.VIDEO
        assert source.is_video is True

    def test_from_name_accepts_date(self):
        """Test that a plain date works as capture date."""
        source = SourceDescriptor.from_name(date(2024, 2, 29), "IMG_0001.JPG")

        assert source.day_bucket == date(2024, 2, 29)

    @pytest.mark.parametrize("name", ["readme.txt", "archive.zip", "IMG_1234", "IMG_1234.AAE"])
    def test_from_name_unsupported_returns_none(self, today, name):
        """Test that non-media files produce no descriptor."""
        assert SourceDescriptor.from_name(today, name) is None

    def test_from_name_cloud_library_mode(self, today):
        """Test that the naming mode selects the canonical key rules."""
        source = SourceDescriptor.from_name(today, "UUID_3.mov", NamingMode.CLOUD_LIBRARY)

        assert source.canonical_key == "UUID"

    def test_from_name_explicit_type_class(self, today):
        """Test that an explicit type class overrides the extension."""
        source = SourceDescriptor.from_name(today, "clip.bin", type_class=TypeClass.VIDEO)

        assert source.type_class == TypeClass.VIDEO

    def test_unsupported_type_class_rejected(self):
        """Test that constructing an UNSUPPORTED descriptor raises."""
        with pytest.raises(ValueError, match="Unsupported"):
            SourceDescriptor(2025, 1, 1, "readme", "readme.txt", TypeClass.UNSUPPORTED)

    def test_time_of_day_is_discarded(self):
        """Test that captures on the same day are identity-equal."""
        morning = SourceDescriptor.from_name(datetime(2025, 1, 1, 0, 0, 1), "IMG_1.JPG")
        night = SourceDescriptor.from_name(datetime(2025, 1, 1, 23, 59, 59), "IMG_1.JPG")

        assert morning == night


class TestSourceDescriptorIdentity:
    """Tests for equality, hashing and keys."""

    def test_equality_ignores_full_name_and_type(self, make_source):
        """Test that identity is day plus canonical key only."""
        image = make_source("IMG_1234.JPG")
        edited = make_source("IMG_1234 (Edited).JPG")
        video = make_source("IMG_1234.MOV")

        assert image == edited == video
        assert hash(image) == hash(edited) == hash(video)

    def test_different_day_not_equal(self, make_source, yesterday):
        """Test that the same name on another day is a different identity."""
        assert make_source("IMG_1234.JPG") != make_source("IMG_1234.JPG", yesterday)

    def test_different_key_not_equal(self, make_source):
        assert make_source("IMG_1234.JPG") != make_source("IMG_1235.JPG")

    def test_not_equal_to_other_types(self, make_source):
        assert make_source("IMG_1234.JPG") != "IMG_1234.JPG"

    def test_identity_key(self, make_source):
        assert make_source("IMG_E1234.JPG").identity_key == IdentityKey(2025, 6, 15, "IMG_1234")

    def test_lookup_key(self, make_source):
        """Test that the lookup key keeps the full name and type class."""
        assert make_source("IMG_E1234.JPG").lookup_key == LookupKey(
            2025, 6, 15, "IMG_E1234.JPG", TypeClass.IMAGE
        )

    def test_usable_as_dict_key(self, make_source):
        """Test that identity-equal descriptors collide in a dict."""
        table = {make_source("IMG_1234.JPG"): "original"}
        table[make_source("IMG_E1234.JPG")] = "edited"

        assert len(table) == 1


class TestSourceDescriptorOrdering:
    """Tests for the descriptor total order."""

    def test_earlier_day_first(self, make_source, yesterday):
        """Test that the day bucket is compared first."""
        assert make_source("IMG_1234 (Edited).JPG", yesterday) < make_source("A.JPG")

    def test_shorter_name_first(self, make_source):
        """Test that shorter names precede longer ones on the same day."""
        assert make_source("IMG_1234.JPG") < make_source("IMG_E1234.JPG")
        assert make_source("IMG_1234 (Edited).JPG") > make_source("IMG_1234.JPG")

    def test_lexicographic_for_same_length(self, make_source):
        """Test case-sensitive ordering for names of equal length."""
        assert make_source("IMG_1234.JPG") < make_source("IMG_1234.MOV")
        assert make_source("IMG_1234.JPG") < make_source("IMG_1234.jpg")

    def test_sorted(self, make_source, yesterday):
        """Test sorting a mixed list."""
        sources = [
            make_source("IMG_E1234.JPG"),
            make_source("IMG_1234.JPG"),
            make_source("IMG_9999.JPG", yesterday),
        ]

        names = [s.full_name for s in sorted(sources)]

        assert names == ["IMG_9999.JPG", "IMG_1234.JPG", "IMG_E1234.JPG"]
