"""Pytest configuration and shared fixtures."""

import os
from datetime import datetime, timedelta
from pathlib import Path
from typing import Callable, Optional

import pytest

from media_moments.models import NamingMode, SourceDescriptor


@pytest.fixture
def today() -> datetime:
    """A fixed capture time."""
    return datetime(2025, 6, 15, 10, 30, 0)


@pytest.fixture
def yesterday(today: datetime) -> datetime:
    """The day before `today`, late in the evening."""
    return today - timedelta(hours=14)


@pytest.fixture
def make_source(today: datetime) -> Callable[..., SourceDescriptor]:
    """Factory for SourceDescriptors captured `today` unless told otherwise."""
    def _make(
        name: str,
        when: Optional[datetime] = None,
        mode: NamingMode = NamingMode.STANDARD,
    ) -> SourceDescriptor:
        source = SourceDescriptor.from_name(when or today, name, mode)
        assert source is not None, f"{name} is not a media file"
        return source

    return _make


@pytest.fixture
def make_file(tmp_path: Path) -> Callable[..., Path]:
    """Factory for small files under tmp_path with a given modification time."""
    def _make(name: str, when: Optional[datetime] = None, content: bytes = b"test") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        if when is not None:
            timestamp = when.timestamp()
            os.utime(path, (timestamp, timestamp))
        return path

    return _make
