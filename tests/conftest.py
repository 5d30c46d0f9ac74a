"""Shared fixtures: photo directories with real image files."""

import os
import re
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
from PIL import Image

from photo_album.album.domain.models import PhotoRecord

BASE_TIME = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def make_image(path: Path, size=(64, 48), color=(200, 30, 30), mtime: float = None) -> Path:
    """Write a small real image; optionally pin its modification time."""
    Image.new('RGB', size, color).save(path)
    if mtime is not None:
        os.utime(path, (mtime, mtime))
    return path


def make_records(count: int, prefix: str = 'photo') -> list:
    """In-memory photo records, one minute apart."""
    return [
        PhotoRecord(
            name=f"{prefix}_{i}.jpg",
            path=f"/nonexistent/{prefix}_{i}.jpg",
            size_bytes=1000 + i,
            modified_at=BASE_TIME + timedelta(minutes=i),
        )
        for i in range(count)
    ]


def count_pdf_pages(data: bytes) -> int:
    """Count page objects in a PDF (excludes the /Pages tree node)."""
    return len(re.findall(rb"/Type\s*/Page(?![A-Za-z])", data))


class SequenceRandom:
    """Random source that returns a fixed sequence of rolls."""

    def __init__(self, rolls):
        self._rolls = list(rolls)
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        if not self._rolls:
            raise AssertionError("SequenceRandom ran out of rolls")
        return self._rolls.pop(0)


@pytest.fixture
def photo_dir(tmp_path):
    """Directory with three JPEGs, written out of chronological order."""
    directory = tmp_path / "photos"
    directory.mkdir()
    make_image(directory / "beach.jpg", size=(80, 40), mtime=3_000_000)
    make_image(directory / "forest.jpg", size=(40, 80), mtime=1_000_000)
    make_image(directory / "city.png", size=(50, 50), mtime=2_000_000)
    return directory
