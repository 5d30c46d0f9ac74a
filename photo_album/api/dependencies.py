"""FastAPI dependency providers."""

from pathlib import Path

from photo_album.album.export import create_renderer
from photo_album.album.services import AlbumService, PhotoSource
from photo_album.config import get_global_config


def get_photo_source() -> PhotoSource:
    """Dependency for FastAPI to get the configured photo source."""
    config = get_global_config()
    return PhotoSource(
        config.get_path('photos.directory', '/photos'),
        extensions=config.get('photos.extensions')
    )


def get_album_service() -> AlbumService:
    """Dependency for FastAPI to get an album service for one request."""
    config = get_global_config()
    return AlbumService(get_photo_source(), create_renderer(config.to_dict()))


def get_filename_prefix() -> str:
    return str(get_global_config().get('album.filename_prefix', 'Mai'))


def get_index_path() -> Path:
    return get_global_config().get_path('server.index_path', 'index.html')
