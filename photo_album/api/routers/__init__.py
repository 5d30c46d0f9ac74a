"""API routers."""

from photo_album.api.routers import photos

__all__ = ["photos"]
