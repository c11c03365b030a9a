"""Unit tests for the capture-device adapter."""

import logging

from media_moments.adapters.device import (
    CameraItem,
    DeviceMediaItem,
    describe_camera_item,
    group_related_camera_items,
)
from media_moments.models import MediaKind, TypeClass


class TestDescribeCameraItem:
    """Tests for describe_camera_item() function."""

    def test_from_extension(self, today):
        source = describe_camera_item(CameraItem("IMG_0001.HEIC", "public.heic", today))

        assert source.type_class == TypeClass.IMAGE
        assert source.canonical_key == "IMG_0001"

    def test_uti_fallback(self, today):
        """Test that the UTI is used when the extension is unknown."""
        source = describe_camera_item(CameraItem("IMG_0001.XYZ", "com.apple.quicktime-movie", today))

        assert source.type_class == TypeClass.VIDEO

    def test_unsupported(self, today):
        assert describe_camera_item(CameraItem("IMG_0001.AAE", "public.plain-text", today)) is None

    def test_missing_fields(self, today, caplog):
        """Test that items without name or date are skipped with a warning."""
        caplog.set_level(logging.WARNING)

        assert describe_camera_item(CameraItem(None, "public.jpeg", today)) is None
        assert describe_camera_item(CameraItem("IMG_0001.JPG", "public.jpeg", None)) is None
        assert "Skipping device item" in caplog.text


class TestGroupRelatedCameraItems:
    """Tests for group_related_camera_items() function."""

    def test_live_photo_and_edit(self, today):
        original = CameraItem("IMG_0001.HEIC", "public.heic", today)
        edited = CameraItem("IMG_E0001.HEIC", "public.heic", today)
        clip = CameraItem("IMG_0001.MOV", "com.apple.quicktime-movie", today)

        items = group_related_camera_items([clip, edited, original])

        assert items == [
            DeviceMediaItem(original=original, edited=edited, live=clip, kind=MediaKind.LIVE_PHOTO)
        ]
        assert items[0].display_item is edited
        assert items[0].display_name == "IMG_0001.HEIC"
        assert items[0].captured_at == today

    def test_separate_days(self, today, yesterday):
        items = group_related_camera_items([
            CameraItem("IMG_0001.JPG", "public.jpeg", today),
            CameraItem("IMG_0001.JPG", "public.jpeg", yesterday),
        ])

        assert [item.captured_at for item in items] == [yesterday, today]
        assert all(item.kind == MediaKind.PHOTO for item in items)

    def test_video_kind(self, today):
        items = group_related_camera_items([
            CameraItem("MVI_0001.MP4", "public.mpeg-4", today),
        ])

        assert items[0].kind == MediaKind.VIDEO
        assert items[0].display_item is items[0].original

    def test_incomplete_items_dropped(self, today):
        items = group_related_camera_items([
            CameraItem(None, None, None),
            CameraItem("IMG_0001.JPG", "public.jpeg", today),
        ])

        assert len(items) == 1
