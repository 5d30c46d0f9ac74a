"""Photo API schemas.

Field names are serialized in camelCase (fileName, filePath, ...).
"""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from photo_album.album.domain.models import PhotoRecord


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PhotoResponse(CamelModel):
    """Photo listing entry (no image data)."""
    file_name: str
    file_path: str = Field(..., description="Public URL of the photo")
    file_size: int
    date_modified: datetime

    @classmethod
    def from_record(cls, photo: PhotoRecord) -> 'PhotoResponse':
        return cls(
            file_name=photo.name,
            file_path=photo.url,
            file_size=photo.size_bytes,
            date_modified=photo.modified_at,
        )


class PhotoDetail(PhotoResponse):
    """Single photo lookup, with its content type."""
    content_type: str

    @classmethod
    def with_content_type(cls, photo: PhotoRecord, content_type: str) -> 'PhotoDetail':
        return cls(
            **PhotoResponse.from_record(photo).model_dump(),
            content_type=content_type,
        )


class MessageResponse(BaseModel):
    message: str
