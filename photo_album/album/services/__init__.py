"""Services for album business logic.

This layer contains pure business logic with no HTTP dependencies.
Services can be called from FastAPI, scripts, or tests.
"""

from photo_album.album.services.album_service import AlbumService, album_filename
from photo_album.album.services.photo_source import PhotoSource, content_type_for

__all__ = ['AlbumService', 'PhotoSource', 'album_filename', 'content_type_for']
