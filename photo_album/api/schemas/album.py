"""Album API schemas."""

from typing import List
from pydantic import Field

from photo_album.api.schemas.photo import CamelModel


class GenerateAlbumRequest(CamelModel):
    """Photos to put into an album, as URLs or file paths."""
    photo_paths: List[str] = Field(default_factory=list)
