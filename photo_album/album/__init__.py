"""
Album Generation Module.

Builds printable photo albums from a directory of images:
- Photo lookup and ordering by modification time
- Page layout planning (1, 2 or 3 photos per page)
- PDF rendering

Usage:
    from photo_album.album import AlbumService, AlbumRenderer, PhotoSource

    service = AlbumService(PhotoSource(directory), AlbumRenderer(config))
    pdf_bytes = service.generate_album(['/photos/a.jpg', '/photos/b.jpg'])
"""

from photo_album.album.domain import AlbumPlan, ArrangementKind, PageGroup, PhotoRecord
from photo_album.album.errors import (
    AlbumError,
    EmptyPlanError,
    ImageLoadError,
    NoMatchError,
    NoSelectionError,
)
from photo_album.album.export import AlbumRenderer
from photo_album.album.planner import PageLayoutPlanner
from photo_album.album.services import AlbumService, PhotoSource

__all__ = [
    'AlbumService',
    'AlbumRenderer',
    'PageLayoutPlanner',
    'PhotoSource',
    'AlbumPlan',
    'ArrangementKind',
    'PageGroup',
    'PhotoRecord',
    'AlbumError',
    'EmptyPlanError',
    'ImageLoadError',
    'NoMatchError',
    'NoSelectionError',
]
