"""Domain models for album generation.

This layer contains pure data structures with no business logic dependencies.
"""

from photo_album.album.domain.models import PhotoRecord, PageGroup, AlbumPlan
from photo_album.album.domain.types import ArrangementKind

__all__ = ['PhotoRecord', 'PageGroup', 'AlbumPlan', 'ArrangementKind']
