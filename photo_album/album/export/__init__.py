"""
Document rendering for albums.
"""

from photo_album.album.export.base import BaseRenderer
from photo_album.album.export.pdf import AlbumRenderer

__all__ = ['BaseRenderer', 'AlbumRenderer', 'create_renderer']


def create_renderer(config: dict) -> BaseRenderer:
    """
    Create renderer based on configuration.

    Args:
        config: Full configuration dictionary

    Returns:
        Configured renderer instance
    """
    format_type = config.get('album', {}).get('document', {}).get('format', 'pdf')

    renderers = {
        'pdf': AlbumRenderer,
    }

    if format_type not in renderers:
        raise ValueError(f"Unknown album format '{format_type}'. Available: {list(renderers)}")
    return renderers[format_type](config)
