"""Photos router - API endpoints for browsing photos and building albums."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response
from fastapi.responses import FileResponse

from photo_album.album.domain.models import PHOTOS_URL_PREFIX
from photo_album.album.errors import NoMatchError, NoSelectionError
from photo_album.album.services import AlbumService, PhotoSource, album_filename, content_type_for
from photo_album.api.dependencies import get_album_service, get_filename_prefix, get_photo_source
from photo_album.api.schemas.album import GenerateAlbumRequest
from photo_album.api.schemas.photo import MessageResponse, PhotoDetail, PhotoResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/photos", tags=["photos"])


@router.get("", response_model=list[PhotoResponse])
def list_photos(source: PhotoSource = Depends(get_photo_source)):
    """List all photos, oldest first."""
    return [PhotoResponse.from_record(photo) for photo in source.list_all()]


@router.get("/{file_name}", response_model=PhotoDetail)
def get_photo(file_name: str, source: PhotoSource = Depends(get_photo_source)):
    """Get a single photo by file name."""
    photo = source.get_by_name(file_name)
    if photo is None:
        raise HTTPException(status_code=404, detail="Photo not found")
    return PhotoDetail.with_content_type(photo, content_type_for(photo.path))


@router.delete("/{file_name}", response_model=MessageResponse)
def delete_photo(file_name: str, source: PhotoSource = Depends(get_photo_source)):
    """Delete a photo by file name."""
    if not source.delete(file_name):
        raise HTTPException(status_code=404, detail="Photo not found")
    return MessageResponse(message="Photo deleted")


@router.post("/album")
def generate_album(
    request: GenerateAlbumRequest,
    service: AlbumService = Depends(get_album_service),
    prefix: str = Depends(get_filename_prefix)
):
    """Generate a PDF album from the selected photos."""
    try:
        pdf_bytes = service.generate_album(request.photo_paths)
    except (NoSelectionError, NoMatchError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception:
        logger.exception("Album generation failed")
        raise HTTPException(status_code=500, detail="Album generation failed")

    filename = album_filename(prefix)
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


files_router = APIRouter(prefix=PHOTOS_URL_PREFIX, tags=["files"])


@files_router.get("/{file_name}")
def get_photo_file(file_name: str, source: PhotoSource = Depends(get_photo_source)):
    """Serve the image file itself."""
    photo = source.get_by_name(file_name)
    if photo is None:
        raise HTTPException(status_code=404, detail="Photo not found")
    return FileResponse(photo.path, media_type=content_type_for(photo.path))
