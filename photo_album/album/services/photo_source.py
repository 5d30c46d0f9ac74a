"""Directory-backed photo source.

Scans a single directory (top level only) for image files and resolves
selected paths back to photo records.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, List, Optional

from photo_album.album.domain.models import PhotoRecord

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = ['.jpg', '.jpeg', '.png', '.gif', '.webp', '.bmp', '.tiff']

CONTENT_TYPES = {
    '.jpg': 'image/jpeg',
    '.jpeg': 'image/jpeg',
    '.png': 'image/png',
    '.gif': 'image/gif',
    '.webp': 'image/webp',
    '.bmp': 'image/bmp',
    '.tiff': 'image/tiff',
}


def content_type_for(path: str) -> str:
    """MIME type for an image path, by extension."""
    return CONTENT_TYPES.get(Path(path).suffix.lower(), 'application/octet-stream')


def sort_by_modified(photos: Iterable[PhotoRecord]) -> List[PhotoRecord]:
    """Oldest first. Stable, so ties keep their input order."""
    return sorted(photos, key=lambda photo: photo.modified_at)


class PhotoSource:
    """Photo records for the image files of one directory."""

    def __init__(self, directory: Path, extensions: Optional[List[str]] = None):
        """
        Args:
            directory: Directory holding the photos
            extensions: File extensions to include (case-insensitive)
        """
        self._directory = Path(directory)
        self._extensions = {ext.lower() for ext in (extensions or DEFAULT_EXTENSIONS)}

    def list_all(self) -> List[PhotoRecord]:
        """All photos in the directory, oldest first."""
        if not self._directory.is_dir():
            logger.warning(f"Photo directory not found: {self._directory}")
            return []

        photos = [
            self._to_record(path)
            for path in self._directory.iterdir()
            if path.is_file() and path.suffix.lower() in self._extensions
        ]
        return sort_by_modified(photos)

    def get_by_name(self, name: str) -> Optional[PhotoRecord]:
        """
        Look up one photo by file name.

        Returns:
            The photo, or None if the name does not denote a file directly
            inside the photo directory
        """
        path = self._resolve(name)
        if path is None or not path.is_file():
            return None
        return self._to_record(path)

    def get_by_paths(self, paths: Iterable[str]) -> List[PhotoRecord]:
        """
        Resolve selected paths (URLs or file paths) by their file name.

        Unresolvable paths are dropped. Result is oldest first.
        """
        photos = []
        for selected in paths:
            photo = self.get_by_name(Path(selected).name)
            if photo is None:
                logger.debug(f"Dropping unresolved photo path: {selected}")
                continue
            photos.append(photo)
        return sort_by_modified(photos)

    def delete(self, name: str) -> bool:
        """
        Delete a photo file.

        Returns:
            True if the file was deleted, False if it did not exist
        """
        path = self._resolve(name)
        if path is None or not path.is_file():
            return False

        path.unlink()
        logger.info(f"Deleted photo {path}")
        return True

    def _resolve(self, name: str) -> Optional[Path]:
        if not name or name in ('.', '..') or Path(name).name != name or '\\' in name:
            return None
        return self._directory / name

    def _to_record(self, path: Path) -> PhotoRecord:
        stat = path.stat()
        return PhotoRecord(
            name=path.name,
            path=str(path),
            size_bytes=stat.st_size,
            modified_at=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
        )
