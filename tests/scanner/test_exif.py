"""Unit tests for scanner.exif module."""

import logging
from datetime import datetime

import pytest
from PIL import Image as PILImage

from media_moments.scanner.exif import extract_capture_date


def _save_jpeg(path, date_string=None):
    """Write a small JPEG, optionally carrying an IFD0 DateTime tag."""
    img = PILImage.new("RGB", (32, 32), color="red")
    if date_string is None:
        img.save(path)
    else:
        exif = PILImage.Exif()
        exif[306] = date_string  # DateTime
        img.save(path, exif=exif)
    return path


class TestExtractCaptureDate:
    """Tests for extract_capture_date() function."""

    def test_nonexistent_file(self, tmp_path, caplog):
        """Test that a nonexistent file returns None and warns."""
        caplog.set_level(logging.WARNING)

        result = extract_capture_date(tmp_path / "nonexistent.jpg")

        assert result is None
        assert "File not found" in caplog.text

    def test_directory(self, tmp_path):
        """Test that passing a directory returns None."""
        directory = tmp_path / "photos.jpg"
        directory.mkdir()

        assert extract_capture_date(directory) is None

    def test_video_file(self, make_file):
        """Test that videos are not read for EXIF."""
        assert extract_capture_date(make_file("IMG_1234.MOV")) is None

    def test_empty_file(self, make_file):
        assert extract_capture_date(make_file("IMG_1234.JPG", content=b"")) is None

    def test_jpeg_without_exif(self, tmp_path):
        """Test that a JPEG without EXIF returns None."""
        test_file = _save_jpeg(tmp_path / "no_exif.jpg")

        assert extract_capture_date(test_file) is None

    def test_jpeg_with_datetime(self, tmp_path):
        """Test reading the DateTime tag with Pillow."""
        test_file = _save_jpeg(tmp_path / "IMG_0001.jpg", "2025:01:02 03:04:05")

        assert extract_capture_date(test_file) == datetime(2025, 1, 2, 3, 4, 5)

    def test_jpeg_with_invalid_datetime(self, tmp_path):
        test_file = _save_jpeg(tmp_path / "IMG_0002.jpg", "not a date")

        assert extract_capture_date(test_file) is None

    def test_corrupted_file(self, make_file, caplog):
        """Test that corrupted files are handled gracefully."""
        caplog.set_level(logging.WARNING)
        corrupted = make_file("corrupted.jpg", content=b"This is not a valid JPEG file")

        assert extract_capture_date(corrupted) is None
        assert "Failed to extract EXIF date" in caplog.text


class TestExtractCaptureDateExifread:
    """Tests for the exifread path used for RAW and HEIC files."""

    @pytest.mark.parametrize("tag", [
        "EXIF DateTimeOriginal",
        "Image DateTime",
        "EXIF DateTimeDigitized",
    ])
    def test_raw_date_tags(self, make_file, mocker, tag):
        mocker.patch(
            "media_moments.scanner.exif.exifread.process_file",
            return_value={tag: "2024:12:25 08:00:00"},
        )

        result = extract_capture_date(make_file("IMG_0001.CR2"))

        assert result == datetime(2024, 12, 25, 8, 0, 0)

    def test_original_preferred(self, make_file, mocker):
        """Test that DateTimeOriginal wins over the other tags."""
        mocker.patch(
            "media_moments.scanner.exif.exifread.process_file",
            return_value={
                "Image DateTime": "2024:12:26 09:00:00",
                "EXIF DateTimeOriginal": "2024:12:25 08:00:00",
            },
        )

        assert extract_capture_date(make_file("IMG_0001.HEIC")) == datetime(2024, 12, 25, 8, 0, 0)

    def test_no_tags(self, make_file, mocker):
        mocker.patch("media_moments.scanner.exif.exifread.process_file", return_value={})

        assert extract_capture_date(make_file("IMG_0001.NEF")) is None

    def test_reader_error(self, make_file, mocker, caplog):
        """Test that reader exceptions are logged and give None."""
        caplog.set_level(logging.WARNING)
        mocker.patch(
            "media_moments.scanner.exif.exifread.process_file",
            side_effect=RuntimeError("bad header"),
        )

        assert extract_capture_date(make_file("IMG_0001.DNG")) is None
        assert "bad header" in caplog.text
